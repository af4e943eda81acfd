"""
Script for running matches between automated Othello players.
"""
import os
import argparse
from datetime import datetime

from othello.arena import Arena
from othello.config import Config, get_default_config
from othello.logger import setup_logger
from othello.players import create_player


def main():
    parser = argparse.ArgumentParser(description='Run a match between Othello players')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')

    # Match parameters
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games to play')
    parser.add_argument('--player-a', choices=['greedy', 'random'], default=None,
                        help='First player (black in the first game)')
    parser.add_argument('--player-b', choices=['greedy', 'random'], default=None,
                        help='Second player')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for random players')

    # Output
    parser.add_argument('--output', type=str, default=None,
                        help='JSON file to save match results')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every move of every game')

    args = parser.parse_args()

    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.games is not None:
        config.arena.num_games = args.games
    if args.player_a is not None:
        config.arena.player_a = args.player_a
    if args.player_b is not None:
        config.arena.player_b = args.player_b
    if args.seed is not None:
        config.seed = args.seed
    if args.output is not None:
        config.arena.output_file = args.output
    if args.verbose:
        config.logging.verbose = True

    logger = setup_logger(config)

    player_a = create_player(config.arena.player_a, seed=config.seed)
    player_b = create_player(config.arena.player_b, seed=config.seed + 1)
    if player_a.name == player_b.name:
        player_a.name += '_a'
        player_b.name += '_b'

    print(f"\nStarting match: {player_a.name} vs {player_b.name}, {config.arena.num_games} games")
    arena = Arena(logger=logger)
    try:
        result = arena.run_match(player_a, player_b, config.arena.num_games,
                                 swap_colors=config.arena.swap_colors,
                                 verbose=config.logging.verbose)
    finally:
        logger.close()

    print("\nMatch Results:")
    print(f"{result.player_a:>10s}: {result.wins_a} wins")
    print(f"{result.player_b:>10s}: {result.wins_b} wins")
    print(f"{'draws':>10s}: {result.draws}")
    print(f"Mean disc differential for {result.player_a}: {result.mean_disc_diff:+.2f}")

    output_file = config.arena.output_file
    if output_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_file = os.path.join('match_results', f'match_{timestamp}.json')
    arena.save_results(result, output_file)
    print(f"\nResults saved to {output_file}")


if __name__ == '__main__':
    main()

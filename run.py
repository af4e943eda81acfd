"""
Main script to play Othello on the console against the greedy AI.
"""
import os
import argparse

from othello.config import Config, get_default_config
from othello.console import ConsoleSession, play_interactive
from othello.logger import setup_logger


def main():
    """Play one game with the specified configuration."""
    parser = argparse.ArgumentParser(description='Play Othello on the console')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--human', choices=['black', 'white', 'none'], default=None,
                        help='Colour played by the human, or none for AI vs AI')
    parser.add_argument('--ai', choices=['greedy', 'random'], default=None,
                        help='Automated opponent')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for random players')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, ...)')
    parser.add_argument('--no-log-file', action='store_true',
                        help='Only log to the console')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    # Command line overrides
    if args.human is not None:
        config.game.human_color = None if args.human == 'none' else args.human
    if args.ai is not None:
        config.game.ai_player = args.ai
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    if args.no_log_file:
        config.logging.log_to_file = False

    logger = setup_logger(config)
    session = ConsoleSession()

    try:
        play_interactive(config, session, logger)
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted.")
    finally:
        logger.close()


if __name__ == "__main__":
    main()

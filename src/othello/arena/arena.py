"""
Arena for playing matches between automated Othello players.
"""
import json
import os
import time
from dataclasses import asdict, dataclass, field
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from ..game import BLACK, COLOR_NAMES, WHITE, OthelloGame
from ..logger import Logger
from ..players import Player


@dataclass
class GameRecord:
    """Outcome of a single game."""
    black: str
    white: str
    winner: int  # BLACK, WHITE, or 0 for a draw
    black_score: int
    white_score: int
    num_moves: int
    num_passes: int


@dataclass
class MatchResult:
    """Aggregated outcome of a series of games between two players."""
    player_a: str
    player_b: str
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    disc_diffs: List[int] = field(default_factory=list)  # From player_a's perspective
    games: List[GameRecord] = field(default_factory=list)
    duration: float = 0.0

    @property
    def games_played(self) -> int:
        return len(self.games)

    @property
    def mean_disc_diff(self) -> float:
        if not self.disc_diffs:
            return 0.0
        return float(np.mean(self.disc_diffs))

    @property
    def score_a(self) -> float:
        """Match score of player_a: 1 per win, 0.5 per draw, as a fraction of games."""
        if not self.games:
            return 0.0
        return (self.wins_a + 0.5 * self.draws) / self.games_played

    def summary(self) -> dict:
        return {
            'player_a': self.player_a,
            'player_b': self.player_b,
            'games_played': self.games_played,
            'wins_a': self.wins_a,
            'wins_b': self.wins_b,
            'draws': self.draws,
            'score_a': self.score_a,
            'mean_disc_diff': self.mean_disc_diff,
        }


class Arena:
    """Arena for running games and matches between players."""

    def __init__(self, logger: Optional[Logger] = None):
        """
        Initialize the arena.

        Args:
            logger: Optional logger that receives per-game and per-match metrics
        """
        self.logger = logger

    def play_game(self, black: Player, white: Player, verbose: bool = False) -> GameRecord:
        """
        Play a single game between two players.

        Args:
            black: Player controlling black (moves first)
            white: Player controlling white
            verbose: Whether to print game progress

        Returns:
            GameRecord describing the finished game
        """
        black.reset()
        white.reset()

        game = OthelloGame()
        players = {BLACK: black, WHITE: white}

        if verbose:
            print(f"Starting game: {black.name} (Black) vs {white.name} (White)")
            print(game)

        while not game.is_game_over():
            color = game.get_current_player()
            row, col = game.play_turn(players)
            if verbose:
                print(f"{players[color].name} ({COLOR_NAMES[color]}) plays at ({row}, {col})")
                print(game)

        history = game.get_move_history()
        black_score, white_score = game.get_score()
        return GameRecord(
            black=black.name,
            white=white.name,
            winner=game.get_winner(),
            black_score=black_score,
            white_score=white_score,
            num_moves=sum(1 for record in history if not record.is_pass),
            num_passes=sum(1 for record in history if record.is_pass),
        )

    def run_match(self, player_a: Player, player_b: Player, num_games: int,
                  swap_colors: bool = True, show_progress: bool = True,
                  verbose: bool = False) -> MatchResult:
        """
        Play a series of games between two players.

        Args:
            player_a: First player (black in the first game)
            player_b: Second player
            num_games: Number of games to play
            swap_colors: Alternate who plays black each game
            show_progress: Show a progress bar
            verbose: Print every move of every game

        Returns:
            MatchResult with wins, draws and disc differentials
        """
        if num_games < 1:
            raise ValueError("num_games must be at least 1")

        result = MatchResult(player_a=player_a.name, player_b=player_b.name)
        start_time = time.time()

        for game_idx in tqdm(range(num_games), desc=f"{player_a.name} vs {player_b.name}",
                             disable=not show_progress):
            a_is_black = not swap_colors or game_idx % 2 == 0
            if a_is_black:
                record = self.play_game(player_a, player_b, verbose=verbose)
                a_color = BLACK
            else:
                record = self.play_game(player_b, player_a, verbose=verbose)
                a_color = WHITE

            if record.winner == 0:
                result.draws += 1
            elif record.winner == a_color:
                result.wins_a += 1
            else:
                result.wins_b += 1

            diff = record.black_score - record.white_score
            result.disc_diffs.append(diff if a_color == BLACK else -diff)
            result.games.append(record)

            if self.logger is not None:
                self.logger.log_metrics({
                    'black': record.black,
                    'white': record.white,
                    'black_score': record.black_score,
                    'white_score': record.white_score,
                    'moves': record.num_moves,
                }, step=game_idx + 1, prefix='game/')

        result.duration = time.time() - start_time

        if self.logger is not None:
            self.logger.log_metrics(result.summary(), step=num_games, prefix='match/')

        return result

    def save_results(self, result: MatchResult, filepath: str):
        """Save a match summary and its game records to a JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        data = result.summary()
        data['duration'] = result.duration
        data['games'] = [asdict(record) for record in result.games]
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

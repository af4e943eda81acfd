"""
Othello game module.
Handles turn alternation, passes and game flow on top of the Board.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple
import numpy as np

from .board import Board, IllegalMove, Position
from .disc import BLACK, COLOR_NAMES, opponent

if TYPE_CHECKING:
    from ..players import Player


@dataclass(frozen=True)
class MoveRecord:
    """One entry of the move history. A pass has no position."""
    color: int
    position: Optional[Position]
    flipped: int = 0

    @property
    def is_pass(self) -> bool:
        return self.position is None


class OthelloGame:
    """
    Main game class for Othello that manages the colour to move and the game flow.
    """

    def __init__(self):
        """Initialize a new game. Black moves first."""
        self.board = Board()
        self.current_player = BLACK
        self.game_over = False
        self.winner: Optional[int] = None
        self.move_history: List[MoveRecord] = []

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self.current_player = BLACK
        self.game_over = False
        self.winner = None
        self.move_history = []

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise.
            Nothing changes when False is returned.
        """
        if self.game_over:
            return False

        pos = (row, col)
        if not self.board.is_legal_move(pos, self.current_player):
            return False

        flipped = self.board.place(pos, self.current_player)
        self.move_history.append(MoveRecord(self.current_player, pos, len(flipped)))
        self._advance_turn()
        return True

    def _advance_turn(self) -> None:
        """Hand the turn to the opponent, skipping a player who cannot move."""
        next_player = opponent(self.current_player)
        if self.board.has_any_move(next_player):
            self.current_player = next_player
            return

        if not self.board.has_any_move(self.current_player):
            # Neither colour can move: the game ends without a pass
            self.game_over = True
            self.winner = self.board.winner()
            return

        self.move_history.append(MoveRecord(next_player, None))

    def play_turn(self, players: Dict[int, 'Player']) -> Position:
        """
        Ask the player whose turn it is for a move and apply it.

        Args:
            players: Mapping from colour to the player controlling it

        Returns:
            The position that was played
        """
        if self.game_over:
            raise RuntimeError("Cannot play a turn: the game is over")

        color = self.current_player
        row, col = players[color].choose_move(self)
        if not self.make_move(row, col):
            raise IllegalMove(f"{players[color].name} chose an invalid move: {(row, col)}")
        return (row, col)

    def play(self, players: Dict[int, 'Player']) -> int:
        """
        Play turns until the game is over.

        Returns:
            int: BLACK, WHITE, or 0 for a draw
        """
        while not self.game_over:
            self.play_turn(players)
        return self.winner

    def get_valid_moves(self) -> List[Position]:
        """Get all valid moves for the current player in row-major order."""
        return self.board.legal_moves(self.current_player)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.game_over

    def get_winner(self) -> Optional[int]:
        """
        Get the winner of the game.

        Returns:
            int: BLACK, WHITE, or 0 for draw, None if game not over
        """
        return self.winner if self.game_over else None

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.get_score()

    def get_board_state(self) -> np.ndarray:
        return self.board.get_board_state()

    def get_current_player(self) -> int:
        return self.current_player

    def get_move_history(self) -> List[MoveRecord]:
        return self.move_history.copy()

    def copy(self) -> 'OthelloGame':
        """Create a deep copy of the game."""
        new_game = OthelloGame()
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.game_over = self.game_over
        new_game.winner = self.winner
        new_game.move_history = self.move_history.copy()
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self.board)]
        lines.append(f"Score - Black: {black}, White: {white}")

        if self.game_over:
            if self.winner == 0:
                lines.append("Game over! It's a draw!")
            else:
                lines.append(f"Game over! {COLOR_NAMES[self.winner].capitalize()} wins!")
        else:
            lines.append(f"Current player: {COLOR_NAMES[self.current_player].capitalize()}")

        return "\n".join(lines)

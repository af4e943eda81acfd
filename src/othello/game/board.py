"""
Board module for Othello.
Handles the grid of discs, move validation and the capture-ray algorithm.
"""
from typing import List, Optional, Sequence, Tuple
import numpy as np

from .disc import BLACK, COLOR_NAMES, EMPTY, WHITE, Disc

Position = Tuple[int, int]
Direction = Tuple[int, int]

# Directions: E, SE, S, SW, W, NW, N, NE
DIRECTIONS: Tuple[Direction, ...] = (
    (0, 1), (1, 1), (1, 0),
    (1, -1), (0, -1), (-1, -1),
    (-1, 0), (-1, 1),
)


class OutOfBounds(ValueError):
    """Raised when a position lies outside the 8x8 grid."""


class IllegalMove(ValueError):
    """Raised when a placement would capture nothing or hits an occupied cell."""


class Board:
    """
    Represents the Othello board as an 8x8 grid of optional discs.
    An empty cell holds None.
    """

    # Board dimensions
    SIZE = 8

    def __init__(self):
        """Initialize a board with the four starting discs in the centre."""
        self.grid: List[List[Optional[Disc]]] = [
            [None for _ in range(self.SIZE)] for _ in range(self.SIZE)
        ]
        self.grid[3][3] = Disc(WHITE)
        self.grid[3][4] = Disc(BLACK)
        self.grid[4][3] = Disc(BLACK)
        self.grid[4][4] = Disc(WHITE)

    def copy(self) -> 'Board':
        """Create a deep copy of the board. Discs are not shared."""
        new_board = Board()
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                disc = self.grid[row][col]
                new_board.grid[row][col] = Disc(disc.color) if disc is not None else None
        return new_board

    def is_legal_position(self, pos: Sequence[int]) -> bool:
        """Check if a position is on the board."""
        row, col = pos
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def get(self, pos: Sequence[int]) -> Optional[Disc]:
        """
        Get the disc at a position.

        Args:
            pos: (row, col) of the cell

        Returns:
            The disc on the cell, or None if the cell is empty

        Raises:
            OutOfBounds: If the position is not on the board
        """
        if not self.is_legal_position(pos):
            raise OutOfBounds(f"Invalid position: {tuple(pos)}")
        row, col = pos
        return self.grid[row][col]

    def is_occupied(self, pos: Sequence[int]) -> bool:
        """Check if a position holds a disc. Off-board positions are never occupied."""
        if not self.is_legal_position(pos):
            return False
        return self.get(pos) is not None

    def belongs_to(self, pos: Sequence[int], color: int) -> bool:
        """Check if the disc at a position has the given colour."""
        if not self.is_occupied(pos):
            return False
        return self.get(pos).color == color

    def capture_ray(self, pos: Sequence[int], color: int,
                    direction: Direction) -> Optional[List[Disc]]:
        """
        Walk away from pos in one direction, collecting discs of the opposite colour.

        The ray only counts if it ends on a disc of `color`. Running off the
        board or reaching an empty cell voids it, even if discs were collected.

        Args:
            pos: Starting position (the walk begins one step beyond it)
            color: Colour of the player placing at pos
            direction: One of DIRECTIONS

        Returns:
            List of discs that would be flipped (possibly empty), or None if void
        """
        dr, dc = direction
        row, col = pos[0] + dr, pos[1] + dc
        captured: List[Disc] = []

        while True:
            if not self.is_legal_position((row, col)):
                return None
            disc = self.grid[row][col]
            if disc is None:
                return None
            if disc.color == color:
                return captured
            captured.append(disc)
            row += dr
            col += dc

    def is_legal_move(self, pos: Sequence[int], color: int) -> bool:
        """Check if placing `color` at pos is on an empty cell and captures something."""
        if not self.is_legal_position(pos) or self.is_occupied(pos):
            return False

        for direction in DIRECTIONS:
            if self.capture_ray(pos, color, direction):
                return True

        return False

    def legal_moves(self, color: int) -> List[Position]:
        """
        Get all legal moves for a colour.

        Returns:
            List of (row, col) tuples in row-major order
        """
        return [
            (row, col)
            for row in range(self.SIZE)
            for col in range(self.SIZE)
            if self.is_legal_move((row, col), color)
        ]

    def has_any_move(self, color: int) -> bool:
        """Check if a colour has at least one legal move."""
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                if self.is_legal_move((row, col), color):
                    return True
        return False

    def is_game_over(self) -> bool:
        """The game is over when neither colour can move, even with empty cells left."""
        return not self.has_any_move(BLACK) and not self.has_any_move(WHITE)

    def place(self, pos: Sequence[int], color: int) -> List[Disc]:
        """
        Place a disc and flip every captured disc.

        Args:
            pos: (row, col) of the placement
            color: Colour of the placing player

        Returns:
            List of discs that were flipped

        Raises:
            IllegalMove: If the move is not legal; the board is left untouched
        """
        if not self.is_legal_move(pos, color):
            raise IllegalMove(f"Invalid move: {tuple(pos)} for {COLOR_NAMES.get(color, color)}")

        to_flip: List[Disc] = []
        for direction in DIRECTIONS:
            ray = self.capture_ray(pos, color, direction)
            if ray is not None:
                to_flip.extend(ray)

        row, col = pos
        self.grid[row][col] = Disc(color)
        for disc in to_flip:
            disc.flip()

        return to_flip

    def count(self, color: int) -> int:
        """Count the discs of a colour."""
        return sum(
            1 for row in self.grid for disc in row
            if disc is not None and disc.color == color
        )

    def count_empties(self) -> int:
        return sum(1 for row in self.grid for disc in row if disc is None)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return (self.count(BLACK), self.count(WHITE))

    def winner(self) -> int:
        """Determine the winner based on disc counts. 0 means a draw."""
        black_count, white_count = self.get_score()
        if black_count > white_count:
            return BLACK
        if white_count > black_count:
            return WHITE
        return 0

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            8x8 array of EMPTY, BLACK and WHITE values
        """
        state = np.zeros((self.SIZE, self.SIZE), dtype=int)
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                disc = self.grid[row][col]
                state[row, col] = EMPTY if disc is None else disc.color
        return state

    def __str__(self) -> str:
        """Return a string representation of the board with row and column indices."""
        symbols = {BLACK: 'B', WHITE: 'W'}
        rows = ["  " + "  ".join(str(col) for col in range(self.SIZE))]
        for row in range(self.SIZE):
            cells = []
            for col in range(self.SIZE):
                disc = self.grid[row][col]
                cells.append('-' if disc is None else symbols[disc.color])
            rows.append(f"{row} " + "  ".join(cells))
        return "\n".join(rows)

    def __repr__(self) -> str:
        black_count, white_count = self.get_score()
        return f"Board(black={black_count}, white={white_count})"



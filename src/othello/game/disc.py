"""
Disc module for Othello.
A disc is a coloured token that lives on a single board cell.
"""
from typing import Dict

# Colour constants
EMPTY = 0
BLACK = 1  # Moves first
WHITE = 2

COLOR_NAMES: Dict[int, str] = {BLACK: 'black', WHITE: 'white'}


def opponent(color: int) -> int:
    """Return the colour of the other player."""
    return 3 - color  # Toggle between BLACK (1) and WHITE (2)


def parse_color(name: str) -> int:
    """
    Convert a colour name to its constant.

    Args:
        name: 'black' or 'white' (case-insensitive)

    Returns:
        BLACK or WHITE
    """
    lowered = name.strip().lower()
    for color, color_name in COLOR_NAMES.items():
        if lowered == color_name:
            return color
    raise ValueError(f"Unknown color: {name!r}")


class Disc:
    """A token of one colour that can be flipped to the other colour."""

    __slots__ = ('_color',)

    def __init__(self, color: int):
        if color not in (BLACK, WHITE):
            raise ValueError(f"Disc color must be BLACK or WHITE, got {color!r}")
        self._color = color

    @property
    def color(self) -> int:
        return self._color

    def flip(self) -> None:
        """Toggle the disc to the opposite colour."""
        self._color = opponent(self._color)

    def __repr__(self) -> str:
        return f"Disc({COLOR_NAMES[self._color]})"

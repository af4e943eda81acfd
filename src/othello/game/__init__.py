"""
Othello game module.
This package contains the core game logic for Othello.
"""

from .disc import BLACK, COLOR_NAMES, EMPTY, WHITE, Disc, opponent, parse_color
from .board import DIRECTIONS, Board, IllegalMove, OutOfBounds
from .game import MoveRecord, OthelloGame

__all__ = [
    'BLACK', 'WHITE', 'EMPTY', 'COLOR_NAMES', 'Disc', 'opponent', 'parse_color',
    'DIRECTIONS', 'Board', 'IllegalMove', 'OutOfBounds',
    'MoveRecord', 'OthelloGame',
]

"""
Othello rules engine with a greedy automated opponent.
"""
from .game import BLACK, WHITE, Board, IllegalMove, OthelloGame, OutOfBounds
from .players import GreedyPlayer, HumanPlayer, RandomPlayer

__all__ = [
    'BLACK', 'WHITE', 'Board', 'IllegalMove', 'OthelloGame', 'OutOfBounds',
    'GreedyPlayer', 'HumanPlayer', 'RandomPlayer',
]

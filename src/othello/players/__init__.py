"""
Players that choose moves: humans via a session, and automated heuristics.
"""
from .players import (
    PLAYER_KINDS,
    GreedyPlayer,
    HumanPlayer,
    Player,
    RandomPlayer,
    count_captures,
    create_player,
    select_greedy_move,
)

__all__ = [
    'PLAYER_KINDS', 'Player', 'GreedyPlayer', 'HumanPlayer', 'RandomPlayer',
    'count_captures', 'create_player', 'select_greedy_move',
]

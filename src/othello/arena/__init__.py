"""
Arena module for running matches between players.
"""
from .arena import Arena, GameRecord, MatchResult

__all__ = ['Arena', 'GameRecord', 'MatchResult']

"""
Arena module for benchmarking computer players.
"""
from .arena import Arena, ArenaPlayer, ELORatingSystem, HeuristicPlayer, MatchResult, RandomPlayer

__all__ = ['Arena', 'ArenaPlayer', 'ELORatingSystem', 'HeuristicPlayer', 'MatchResult', 'RandomPlayer']

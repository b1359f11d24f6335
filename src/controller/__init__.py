"""
Console host for interactive play.
"""
from .console import ConsoleController, format_move, parse_move, render_board, replay_transcript

__all__ = ['ConsoleController', 'format_move', 'parse_move', 'render_board', 'replay_transcript']

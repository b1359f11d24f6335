"""
Computer player for Othello.
"""
from .advisor import NO_REPLY_VALUE, POSITION_VALUES, AiAdvisor

__all__ = ['AiAdvisor', 'POSITION_VALUES', 'NO_REPLY_VALUE']

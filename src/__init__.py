"""
Othello engine: game core, heuristic computer player and console host.
"""

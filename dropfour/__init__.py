"""
dropfour - Rules engine for a two-player four-in-a-row drop game

The package provides the game state machine with win and draw detection,
a Gymnasium environment built on it, and a small text front end.
"""

__version__ = '0.1.0'

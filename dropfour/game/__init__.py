"""
dropfour.game - Game state, rules engine and Gymnasium environment
"""

from dropfour.game.state import GameState
from dropfour.game.engine import GameEngine
from dropfour.game.env import DropFourEnv

__all__ = ['GameState', 'GameEngine', 'DropFourEnv']

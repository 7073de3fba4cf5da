"""
Shared pytest fixtures for the dropfour test suite
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Allow running the tests from a plain checkout
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dropfour.debug import debug, DebugLevel
from dropfour.game.engine import GameEngine
from dropfour.game.state import GameState
from dropfour.utils import Player


# Full board without any three in a row. Rows alternate between a pattern
# and its inverse, so no axis ever sees more than two equal cells.
DRAW_PATTERN = [1, 1, 2, 2, 1, 1, 2]


def draw_board() -> np.ndarray:
    inverse = [3 - value for value in DRAW_PATTERN]
    return np.array([DRAW_PATTERN if row % 2 == 0 else inverse for row in range(6)],
                    dtype=np.int8)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep test output readable and restore the log level afterwards."""
    previous = debug.level
    debug.configure(level=DebugLevel.WARNING, components=[])
    yield
    debug.configure(level=previous, components=[], log_file="")


@pytest.fixture
def engine():
    """A fresh engine with an empty board"""
    return GameEngine()


@pytest.fixture
def full_draw_board():
    """A full 6x7 grid with no four in a row anywhere"""
    return draw_board()


@pytest.fixture
def draw_ready_state():
    """Everything filled except (0, 6); player two drops the last piece"""
    board = draw_board()
    board[0, 6] = Player.EMPTY.value
    return GameState(board=board, current_player=Player.TWO)


@pytest.fixture
def diagonal_ready_state():
    """Player two holds (0,0), (1,1), (2,2); column 3 is filled up to row 4"""
    board = np.array([
        [2, 0, 0, 0, 0, 0, 0],
        [1, 2, 0, 0, 0, 0, 0],
        [1, 1, 2, 0, 0, 0, 0],
        [2, 1, 1, 0, 0, 0, 0],
        [1, 2, 2, 2, 0, 0, 0],
        [2, 1, 1, 1, 0, 0, 0],
    ], dtype=np.int8)
    return GameState(board=board, current_player=Player.TWO)


@pytest.fixture
def play():
    """Apply a list of columns to an engine, asserting each drop is accepted"""
    def _play(engine, columns):
        for column in columns:
            result = engine.drop_piece(column)
            assert result.accepted, f"drop in column {column} was rejected: {result}"
        return engine.state
    return _play

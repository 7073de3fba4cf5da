"""
utils.py - Constants, enumerations and grid helpers for dropfour

The helpers here work on a bare numpy grid so they can be shared by the
engine, the Gymnasium environment and the command line front end.
"""

from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # pieces in a row needed to win

Cell = Tuple[int, int]


class Player(Enum):
    """Players, doubling as the values stored in grid cells."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        return SYMBOLS[self]


SYMBOLS = {
    Player.EMPTY: " ",
    Player.ONE: "X",
    Player.TWO: "O",
}


class GameResult(Enum):
    """Outcome of a game as seen from the current state."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class DropResult(Enum):
    """What happened to a drop request."""
    PLACED = auto()
    GAME_OVER = auto()
    COLUMN_FULL = auto()
    INVALID_COLUMN = auto()

    @property
    def accepted(self) -> bool:
        return self == DropResult.PLACED


class Direction(Enum):
    """Axes checked for a winning run."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # top-right to bottom-left


# Checked in this order; the first axis with a long enough run is reported
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}

# ANSI reverse video, used to mark winning cells in text output
HIGHLIGHT_ON = "\033[7m"
HIGHLIGHT_OFF = "\033[0m"


def empty_grid() -> np.ndarray:
    """Create an empty ROWS x COLS grid."""
    return np.zeros((ROWS, COLS), dtype=np.int8)


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is on the board, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def is_valid_column(col: int) -> bool:
    return 0 <= col < COLS


def landing_row(grid: np.ndarray, col: int) -> Optional[int]:
    """
    Find the row a piece dropped into ``col`` would settle in.

    Returns:
        The lowest empty row of the column, or None if the column is full
    """
    for row in range(ROWS - 1, -1, -1):
        if grid[row, col] == Player.EMPTY.value:
            return row
    return None


def get_column_height(grid: np.ndarray, col: int) -> int:
    """Number of pieces stacked in a column."""
    return int(np.count_nonzero(grid[:, col]))


def is_board_full(grid: np.ndarray) -> bool:
    """True when no cell of the grid is empty."""
    return bool(np.all(grid != Player.EMPTY.value))


def _walk(grid: np.ndarray, row: int, col: int, dr: int, dc: int,
          value: int) -> List[Cell]:
    """Collect up to CONNECT_N - 1 matching cells stepping away from (row, col)."""
    cells = []
    for step in range(1, CONNECT_N):
        r, c = row + dr * step, col + dc * step
        if not is_valid_position(r, c) or grid[r, c] != value:
            break
        cells.append((r, c))
    return cells


def find_winning_cells(grid: np.ndarray, row: int, col: int,
                       player: Player) -> List[Cell]:
    """
    Look for a winning run through the piece just played at (row, col).

    Each axis is walked both ways from the played cell. The run is ordered
    spatially starting at the far end of the negative direction, and the
    first CONNECT_N cells of it are reported. Axes are tried in
    DIRECTION_VECTORS order and the first one that qualifies wins.

    Args:
        grid: The game board
        row: Row of the piece just played
        col: Column of the piece just played
        player: Owner of the piece just played

    Returns:
        CONNECT_N (row, col) cells, or an empty list if the move did not win
    """
    value = player.value
    for dr, dc in DIRECTION_VECTORS.values():
        forward = _walk(grid, row, col, dr, dc, value)
        backward = _walk(grid, row, col, -dr, -dc, value)

        run = backward[::-1] + [(row, col)] + forward
        if len(run) >= CONNECT_N:
            return run[:CONNECT_N]

    return []


def check_win_at_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check whether the piece at (row, col) is part of a winning run.

    Returns:
        True if the piece completes CONNECT_N in a row, False otherwise
    """
    value = grid[row, col]
    if value == Player.EMPTY.value:
        return False
    return bool(find_winning_cells(grid, row, col, Player(int(value))))


def render_board_ascii(grid: np.ndarray,
                       highlight: Optional[Iterable[Cell]] = None) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The game board
        highlight: Cells to draw in reverse video (usually the winning run)

    Returns:
        ASCII representation of the board, column numbers underneath
    """
    marked = set(highlight or ())
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    lines = [border]

    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            symbol = SYMBOLS[Player(int(grid[row, col]))]
            if (row, col) in marked:
                symbol = f"{HIGHLIGHT_ON}{symbol}{HIGHLIGHT_OFF}"
            cells.append(symbol)
        lines.append("|" + " ".join(cells) + "|")

    lines.append(border)
    lines.append("|" + " ".join(str(col) for col in range(COLS)) + "|")

    return "\n".join(lines)

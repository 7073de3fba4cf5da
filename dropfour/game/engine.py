"""
engine.py - Rules engine for dropfour

GameEngine owns the current GameState. Front ends forward column choices to
drop_piece() and redraw from engine.state; the engine re-checks every request
itself instead of trusting the caller to have filtered it.
"""

from numbers import Integral
from typing import List, Optional

from dropfour.debug import debug
from dropfour.game.state import GameState
from dropfour.utils import (COLS, Player, DropResult, find_winning_cells,
                            is_board_full, is_valid_column, landing_row)


class GameEngine:
    """
    Two-player drop game state machine.

    The engine is synchronous and keeps no lock; wrap it if several threads
    need to drive the same game.
    """

    def __init__(self, state: Optional[GameState] = None):
        """
        Args:
            state: Position to start from instead of an empty board
        """
        debug.debug("Initializing new GameEngine", "engine")
        self._state = state.copy() if state is not None else GameState.initial()

    @property
    def state(self) -> GameState:
        """The current snapshot. Treat it as read-only."""
        return self._state

    def reset(self) -> None:
        """Throw the current game away and start a fresh one."""
        debug.debug("Resetting game", "engine")
        self._state = GameState.initial()

    def check_drop(self, column: int) -> DropResult:
        """
        Work out what drop_piece(column) would do, without doing it.

        Raises:
            TypeError: If column is not an integer
        """
        if isinstance(column, bool) or not isinstance(column, Integral):
            raise TypeError(f"Column must be an integer, got {type(column).__name__}")

        if self._state.game_over:
            return DropResult.GAME_OVER
        if not is_valid_column(column):
            return DropResult.INVALID_COLUMN
        if self._state.board[0, column] != Player.EMPTY.value:
            return DropResult.COLUMN_FULL
        return DropResult.PLACED

    def can_drop(self, column: int) -> bool:
        """True if a piece can currently be dropped into the column."""
        return self.check_drop(column).accepted

    def get_valid_moves(self) -> List[int]:
        """Columns that currently accept a piece."""
        if self._state.game_over:
            return []
        return [col for col in range(COLS) if self.can_drop(col)]

    def drop_piece(self, column: int) -> DropResult:
        """
        Drop the current player's piece into a column.

        Rejected requests leave the state untouched. An accepted drop
        replaces the state with a new snapshot.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            DropResult.PLACED, or the reason the drop was ignored

        Raises:
            TypeError: If column is not an integer
        """
        result = self.check_drop(column)
        if not result.accepted:
            debug.debug(f"Ignoring drop in column {column}: {result.name}", "engine")
            return result

        column = int(column)
        previous = self._state
        mover = previous.current_player
        board = previous.board.copy()

        row = landing_row(board, column)
        debug.trace(f"Placing {mover.name} at ({row}, {column})", "engine")
        board[row, column] = mover.value

        debug.start_timer("win_check")
        winning_cells = find_winning_cells(board, row, column, mover)
        debug.end_timer("win_check", "engine")

        if winning_cells:
            debug.info(f"Player {mover.value} wins with {winning_cells}", "engine")
            self._state = GameState(board=board,
                                    current_player=mover,
                                    winner=mover,
                                    winning_cells=winning_cells,
                                    game_over=True,
                                    last_move=(row, column))
        elif is_board_full(board):
            debug.info("Board full, game ends in a draw", "engine")
            self._state = GameState(board=board,
                                    current_player=mover,
                                    game_over=True,
                                    last_move=(row, column))
        else:
            self._state = GameState(board=board,
                                    current_player=mover.other(),
                                    last_move=(row, column))
            debug.debug(f"Switching to player {self._state.current_player.value}", "engine")

        return result

    def is_game_over(self) -> bool:
        return self._state.game_over

    def get_winner(self) -> Optional[Player]:
        return self._state.winner

    def get_current_player(self) -> Player:
        return self._state.current_player

    def render(self) -> str:
        return self._state.render()

    def __str__(self) -> str:
        return self.render()

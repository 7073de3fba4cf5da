"""
state.py - Game state snapshot for dropfour

A GameState bundles everything a front end needs to draw the game: the
board, whose turn it is, the winner and winning run, and the game-over flag.
The engine never edits a snapshot it has handed out; every accepted drop
produces a new one.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from dropfour.utils import (ROWS, COLS, Cell, Player, GameResult,
                            empty_grid, is_board_full, render_board_ascii)


class GameState:
    """
    One snapshot of a game.

    Attributes:
        board: ROWS x COLS numpy grid of Player values, row 0 at the top
        current_player: Player whose turn is next (frozen once the game ends)
        winner: Winning player, or None
        winning_cells: The four (row, col) cells of the winning run, or []
        game_over: True after a win or a draw
        last_move: (row, col) of the most recent piece, or None
    """

    def __init__(self,
                 board: Optional[np.ndarray] = None,
                 current_player: Player = Player.ONE,
                 winner: Optional[Player] = None,
                 winning_cells: Optional[List[Cell]] = None,
                 game_over: bool = False,
                 last_move: Optional[Cell] = None):
        if board is None:
            board = empty_grid()
        if board.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}, got {board.shape}")
        if current_player not in (Player.ONE, Player.TWO):
            raise ValueError(f"Invalid current player: {current_player!r}")

        self.board = board
        self.current_player = current_player
        self.winner = winner
        self.winning_cells = list(winning_cells or [])
        self.game_over = game_over
        self.last_move = last_move

    @classmethod
    def initial(cls) -> 'GameState':
        """Empty board, player one to move."""
        return cls()

    def copy(self) -> 'GameState':
        return GameState(board=self.board.copy(),
                         current_player=self.current_player,
                         winner=self.winner,
                         winning_cells=self.winning_cells,
                         game_over=self.game_over,
                         last_move=self.last_move)

    @property
    def game_result(self) -> GameResult:
        if not self.game_over:
            return GameResult.IN_PROGRESS
        if self.winner is None:
            return GameResult.DRAW
        return GameResult.win_for(self.winner)

    def cell(self, row: int, col: int) -> Player:
        return Player(int(self.board[row, col]))

    def is_full(self) -> bool:
        return is_board_full(self.board)

    def piece_count(self) -> int:
        return int(np.count_nonzero(self.board))

    def to_dict(self) -> Dict[str, Any]:
        """Plain python view of the snapshot, for logging and info dicts."""
        return {
            'board': self.board.tolist(),
            'current_player': self.current_player.value,
            'winner': self.winner.value if self.winner else None,
            'winning_cells': [list(cell) for cell in self.winning_cells],
            'game_over': self.game_over,
            'last_move': list(self.last_move) if self.last_move else None,
        }

    def render(self) -> str:
        return render_board_ascii(self.board, highlight=self.winning_cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (np.array_equal(self.board, other.board)
                and self.current_player == other.current_player
                and self.winner == other.winner
                and self.winning_cells == other.winning_cells
                and self.game_over == other.game_over
                and self.last_move == other.last_move)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"GameState(result={self.game_result.name}, "
                f"current_player={self.current_player.name}, "
                f"pieces={self.piece_count()}, last_move={self.last_move})")

    def __str__(self) -> str:
        return self.render()

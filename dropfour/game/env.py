"""
env.py - Gymnasium environment for dropfour

DropFourEnv lets scripts and agents play through the standard Gymnasium
reset/step loop. Both players act through the same env; the player to move
is reported in the info dict and rewards are scored from player one's side.
"""

from typing import Any, Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from dropfour.debug import debug
from dropfour.game.engine import GameEngine
from dropfour.utils import ROWS, COLS, Player, GameResult

CELL_SIZE = 50
PIECE_RADIUS = 20

# RGB colours for rgb_array rendering
BACKGROUND_COLOR = (0, 0, 128)
PIECE_COLORS = {
    Player.EMPTY: (0, 0, 0),
    Player.ONE: (255, 0, 0),
    Player.TWO: (255, 255, 0),
}
WINNING_RING_COLOR = (255, 255, 255)


class DropFourEnv(gym.Env):
    """
    Gymnasium environment wrapping a GameEngine.

    Observation is the raw ROWS x COLS grid (0 empty, 1 and 2 for the
    players). Actions are column indices.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 reward_win: float = 1.0,
                 reward_lose: float = -1.0,
                 reward_draw: float = 0.1,
                 reward_invalid_move: float = -0.5,
                 reward_step: float = -0.01):
        """
        Args:
            render_mode: One of metadata['render_modes'], or None
            reward_win: Reward when player one wins
            reward_lose: Reward when player two wins
            reward_draw: Reward for a full board with no winner
            reward_invalid_move: Reward for an action the engine rejects
            reward_step: Reward for any other accepted move
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing DropFourEnv", "env")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.engine = GameEngine()
        self.render_mode = render_mode

        self.reward_win = reward_win
        self.reward_lose = reward_lose
        self.reward_draw = reward_draw
        self.reward_invalid_move = reward_invalid_move
        self.reward_step = reward_step

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        A rejected action leaves the game as it was and comes back with
        truncated=True and info['invalid_move'] set.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        result = self.engine.drop_piece(action)
        if not result.accepted:
            debug.warning(f"Invalid action {action}: {result.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['drop_result'] = result.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        game_result = self.engine.state.game_result
        reward = self.reward_step
        terminated = game_result.is_game_over()

        if game_result == GameResult.PLAYER_ONE_WIN:
            reward = self.reward_win
        elif game_result == GameResult.PLAYER_TWO_WIN:
            reward = self.reward_lose
        elif game_result == GameResult.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Game over: {game_result.name}", "env")

        info = self._get_info()
        info['drop_result'] = result.name

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        """Draw the board as an RGB image, winning pieces ringed in white."""
        state = self.engine.state
        height, width = ROWS * CELL_SIZE, COLS * CELL_SIZE
        frame = np.empty((height, width, 3), dtype=np.uint8)
        frame[:, :] = BACKGROUND_COLOR

        ys, xs = np.mgrid[0:CELL_SIZE, 0:CELL_SIZE]
        center = CELL_SIZE // 2
        dist_sq = (ys - center) ** 2 + (xs - center) ** 2
        disc = dist_sq <= PIECE_RADIUS ** 2
        ring = disc & (dist_sq > (PIECE_RADIUS - 3) ** 2)
        winning = set(state.winning_cells)

        for row in range(ROWS):
            for col in range(COLS):
                tile = frame[row * CELL_SIZE:(row + 1) * CELL_SIZE,
                             col * CELL_SIZE:(col + 1) * CELL_SIZE]
                tile[disc] = PIECE_COLORS[state.cell(row, col)]
                if (row, col) in winning:
                    tile[ring] = WINNING_RING_COLOR

        return frame

    def _get_observation(self) -> np.ndarray:
        return self.engine.state.board.astype(np.int8, copy=True)

    def _get_info(self) -> Dict[str, Any]:
        state = self.engine.state
        valid_moves = self.engine.get_valid_moves()

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': state.current_player.value,
            'game_result': state.game_result.name,
            'winning_cells': list(state.winning_cells),
            'last_move': state.last_move,
            'pieces': state.piece_count(),
        }

    def close(self):
        """Nothing to release; present for the Gymnasium interface."""

"""
Gymnasium environment wrapper for Minesweeper.

Drives one Board per episode through its public actions.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .grid import Coord


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = covered tile
        - -2 = flagged tile
        - -3 = tile marked unsure
        - 0-8 = uncovered tile with adjacent mine count
        - 9 = uncovered mine

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height uncovers tile (i % width, i // width);
        larger actions cycle the mark on tile i - width * height.

    Rewards:
        - +1 for uncovering a safe tile
        - +10 for winning the game
        - -10 for uncovering a mine
        - 0 for changing a mark
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self._tile_count = self.config.width * self.config.height

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One uncover and one mark action per tile
        self.action_space = spaces.Discrete(2 * self._tile_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a fresh board.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = Board(self.config, self.np_random)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Uncover or mark action, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1

        if action < self._tile_count:
            reward = self._uncover_reward(self._action_to_position(action))
        else:
            reward = self._mark_reward(
                self._action_to_position(action - self._tile_count)
            )

        observation = self.board.get_observation()
        terminated = self.board.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Coord:
        """Convert flat tile index to (x, y) position."""
        y, x = divmod(int(action), self.config.width)
        return x, y

    def _uncover_reward(self, position: Coord) -> float:
        """Uncover a tile and score the result."""
        if self.board.is_over or not self.board.tile(*position).is_uncoverable:
            return -0.1

        self.board.handle_uncover(*position)

        if self.board.is_victory():
            return 10.0
        if self.board.is_defeat():
            return -10.0
        return 1.0

    def _mark_reward(self, position: Coord) -> float:
        """Cycle a mark; marks are neutral unless they do nothing."""
        if self.board.is_over or not self.board.tile(*position).is_covered:
            return -0.1

        self.board.handle_mark(*position)
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "covered": self.board.covered_count,
            "mines_remaining": self.board.mines_remaining,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of uncover actions that would change the board.

        Returns:
            Boolean array of size ``action_space.n``; mark actions are
            valid on every covered tile.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board.is_over:
            return mask
        obs = self.board.get_observation().flatten()
        mask[: self._tile_count] = (obs == -1) | (obs == -3)
        mask[self._tile_count:] = obs < 0
        return mask


# ============================================================================
# Text Rendering
# ============================================================================

_SYMBOLS = {-1: ".", -2: "F", -3: "?", 0: " ", 9: "*"}


def render_board(board: Board) -> str:
    """Render board as ASCII string, one row per line."""
    lines = []
    for row in board.get_observation():
        lines.append(" ".join(_SYMBOLS.get(int(val), str(val)) for val in row))
    return "\n".join(lines)

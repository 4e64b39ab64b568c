"""
Gymnasium environment wrapper for Minefield.

Exposes a game session through the standard RL interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .cell import OBS_COVERED, OBS_FLAGGED, OBS_MINE_CROSSED
from .render import render_ansi
from .session import GameSession, MoveResult


# ============================================================================
# Minefield Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minefield.

    Observation:
        2D int8 array of Cell.to_observation() codes:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 / 10 / 11 = idle mine / exploded mine / crossed-out flag

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i % width, i // width);
        the second half toggles a flag on the same cells.

    Rewards:
        - +1 for a reveal that uncovers cells
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
        - 0 for a flag toggle

    The episode terminates on a win or a loss.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 16x16, 25% mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode
        self._num_cells = self.config.width * self.config.height

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE_CROSSED,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: May hold "mine_layout", a boolean (height, width)
                array used instead of a random layout.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.board.rng = self.np_random
        layout = (options or {}).get("mine_layout")
        self.session.new_game(layout)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, column, row = self.decode_action(action)
        self._steps += 1

        if is_flag:
            changed = self.session.on_toggle_flag(column, row)
            reward = 0.0 if changed else -0.1
        else:
            reward = self._reveal_reward(self.session.on_reveal(column, row))

        terminated = self.session.last_outcome is not None
        return (
            self.session.board.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, column, row)."""
        is_flag = action >= self._num_cells
        index = action % self._num_cells
        return is_flag, index % self.config.width, index // self.config.width

    def _reveal_reward(self, result: MoveResult) -> float:
        if result == MoveResult.WON:
            return 10.0
        if result == MoveResult.LOST:
            return -10.0
        if result == MoveResult.SAFE:
            return 1.0
        return -0.1

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        last_outcome = self.session.last_outcome
        game_state = "PLAYING" if last_outcome is None else last_outcome.name
        return {
            "steps": self._steps,
            "mines": self.session.board.mine_count(),
            "covered": len(self.session.board.covered_positions()),
            "game_state": game_state,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.session.board)
        if self.render_mode == "human":
            print(render_ansi(self.session.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Returns:
            Boolean array where True = valid action. Covered cells can be
            revealed or flagged; flagged cells can only be unflagged.
        """
        obs = self.session.board.get_observation().flatten()
        covered = obs == OBS_COVERED
        flagged = obs == OBS_FLAGGED
        return np.concatenate([covered, covered | flagged])

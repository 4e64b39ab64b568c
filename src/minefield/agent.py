"""
Agents that play Minefield through MinesweeperEnv.

Defines the agent interface and a random baseline.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .cell import OBS_COVERED


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    Actions follow MinesweeperEnv: the first width * height indices
    reveal a cell, the rest toggle a flag.
    """

    def __init__(self, board_width: int, board_height: int) -> None:
        """
        Initialize the agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
        """
        self.board_width = board_width
        self.board_height = board_height
        self.total_cells = board_width * board_height

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell observation codes.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def reveal_action(self, column: int, row: int) -> int:
        """Action index that reveals (column, row)."""
        return row * self.board_width + column

    def flag_action(self, column: int, row: int) -> int:
        """Action index that toggles a flag on (column, row)."""
        return self.total_cells + self.reveal_action(column, row)

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid reveal actions from observation.

        Returns:
            Boolean mask over all actions where only reveals of covered
            cells are True.
        """
        covered = observation.flatten() == OBS_COVERED
        return np.concatenate([covered, np.zeros_like(covered)])


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    Serves as a baseline and as a driver for smoke runs.
    """

    def __init__(
        self,
        board_width: int = 16,
        board_height: int = 16,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_width, board_height)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Returns:
            Random action index from valid actions, or a random reveal if
            nothing is valid.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return int(self.rng.integers(self.total_cells))
        return int(self.rng.choice(valid_indices))

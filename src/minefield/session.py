"""
Game session: the interaction handler of the Minefield engine.

Turns player actions on a cell into board, cascade and outcome calls,
and resolves raw pointer positions and key presses from an input source.
"""
import logging
from enum import Enum, auto
from typing import Optional, Tuple

import numpy as np

from .board import Board, BoardConfig
from .cell import CellState, CellView
from . import outcome


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

BUTTON_REVEAL = 1
BUTTON_FLAG = 3
KEY_NEW_GAME = 36


class MoveResult(Enum):
    """What a reveal action did."""

    IGNORED = auto()
    SAFE = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Single owner of one board.

    Every call runs to completion before returning. Sessions share no
    state, so several can coexist, but one session must not be driven
    from more than one thread at a time.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the session with a freshly laid out board.

        Args:
            config: Board configuration (default: 16x16, 25% mines).
            rng: Random generator for mine layouts.
        """
        self.config = config or BoardConfig()
        self.board = Board(self.config, rng or np.random.default_rng())
        self._last_outcome: Optional[MoveResult] = None

    # ========================================================================
    # Core Actions
    # ========================================================================

    def new_game(self, mine_layout: Optional[np.ndarray] = None) -> None:
        """Start a new game, replacing the mine layout."""
        self.board.new_game(mine_layout)
        self._last_outcome = None

    def on_reveal(self, column: int, row: int) -> MoveResult:
        """
        Reveal the cell at (column, row).

        Flagged cells are protected. A mine ends in a loss; anything
        else runs the cascade followed by the win check.
        """
        cell = self.board.cell_at(column, row)
        if cell.state == CellState.FLAGGED:
            return MoveResult.IGNORED
        if cell.is_mine:
            outcome.apply_loss(self.board, column, row)
            self._last_outcome = MoveResult.LOST
            return MoveResult.LOST

        revealed = self.board.reveal(column, row)
        logger.debug(
            "Reveal at (%d, %d) uncovered %d cells", column, row, revealed
        )
        if outcome.check_win(self.board):
            self._last_outcome = MoveResult.WON
            return MoveResult.WON
        return MoveResult.SAFE if revealed else MoveResult.IGNORED

    def on_toggle_flag(self, column: int, row: int) -> bool:
        """
        Toggle the flag on a covered cell.

        Returns:
            True if the cell changed, False if it was not covered or
            flagged.
        """
        return self.board.cell_at(column, row).toggle_flag()

    def cell_view(self, column: int, row: int) -> CellView:
        """Visible state of one cell."""
        return self.board.cell_view(column, row)

    # ========================================================================
    # Input Source Hooks
    # ========================================================================

    def resolve(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """
        Convert a pixel position to a (column, row) cell.

        Returns:
            The cell position, or None if the pixel is off the board.
        """
        if x < 0 or y < 0:
            return None
        column = x // self.config.cell_size
        row = y // self.config.cell_size
        if not self.board.is_valid_position(column, row):
            return None
        return column, row

    def on_click(self, x: int, y: int, button: int) -> Optional[MoveResult]:
        """
        Dispatch a pointer button release at a pixel position.

        Button 1 reveals and button 3 toggles a flag. Other buttons and
        off-board positions are ignored.

        Returns:
            The reveal result for button 1, None otherwise.
        """
        position = self.resolve(x, y)
        if position is None:
            return None
        if button == BUTTON_REVEAL:
            return self.on_reveal(*position)
        if button == BUTTON_FLAG:
            self.on_toggle_flag(*position)
        return None

    def on_key(self, keycode: int) -> bool:
        """
        Dispatch a key release.

        Returns:
            True if the key started a new game.
        """
        if keycode != KEY_NEW_GAME:
            return False
        self.new_game()
        return True

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def last_outcome(self) -> Optional[MoveResult]:
        """WON or LOST from the latest deciding reveal, None before one."""
        return self._last_outcome

    @property
    def is_cleared(self) -> bool:
        """Check if the latest deciding reveal won the game."""
        return self._last_outcome == MoveResult.WON

    @property
    def has_exploded(self) -> bool:
        """Check if a mine has been hit since the last new game."""
        return outcome.has_exploded(self.board)

"""
Cell module for the Minefield engine.

Represents individual grid positions with their hidden content (mine or
not) and their visible state as drawn by the presentation layer.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visible states of a cell."""

    COVERED = auto()
    FLAGGED = auto()
    REVEALED = auto()
    EXPLODED = auto()
    MINE_CROSSED = auto()
    MINE_IDLE = auto()


# Observation codes for states other than COVERED/FLAGGED/REVEALED.
OBS_COVERED = -1
OBS_FLAGGED = -2
OBS_MINE_IDLE = 9
OBS_EXPLODED = 10
OBS_MINE_CROSSED = 11


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Read-only snapshot of what a cell shows.

    Attributes:
        state: Visible state of the cell.
        neighbor_mines: Mines among the 8 surrounding cells; only
            meaningful when state is REVEALED.
    """

    state: CellState
    neighbor_mines: int = 0

    def __str__(self) -> str:
        if self.state == CellState.REVEALED:
            return f"Revealed({self.neighbor_mines})"
        return self.state.name.title().replace("_", "")


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        state: Current visible state.
        neighbor_mines: Count of mines in neighboring cells (0-8), set
            when the cell is revealed.
    """

    is_mine: bool = False
    state: CellState = CellState.COVERED
    neighbor_mines: int = 0

    def reveal(self, neighbor_mines: int) -> bool:
        """
        Reveal this cell with its neighbor mine count.

        Returns:
            True if cell was revealed, False if it is not covered or
            holds a mine.
        """
        if self.state != CellState.COVERED or self.is_mine:
            return False
        self.state = CellState.REVEALED
        self.neighbor_mines = neighbor_mines
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is neither covered
            nor flagged.
        """
        if self.state == CellState.FLAGGED:
            self.state = CellState.COVERED
            return True
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
            return True
        return False

    def cover(self, is_mine: bool) -> None:
        """Reset the cell for a new game."""
        self.is_mine = is_mine
        self.state = CellState.COVERED
        self.neighbor_mines = 0

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def view(self) -> CellView:
        """Snapshot of the visible state."""
        if self.state == CellState.REVEALED:
            return CellView(self.state, self.neighbor_mines)
        return CellView(self.state)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor mine count
            9: Idle mine, 10: exploded mine, 11: crossed-out flag
        """
        if self.state == CellState.COVERED:
            return OBS_COVERED
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.state == CellState.MINE_IDLE:
            return OBS_MINE_IDLE
        if self.state == CellState.EXPLODED:
            return OBS_EXPLODED
        if self.state == CellState.MINE_CROSSED:
            return OBS_MINE_CROSSED
        return self.neighbor_mines

"""
Board module for the Minefield engine.

Implements the grid with random mine layout and the reveal cascade.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, CellView


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Offsets visited in the neighbor mine count
NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1), (1, 0),
    (1, 1), (0, 1), (-1, 1), (-1, 0),
)

# Offsets the cascade spreads through
CASCADE_OFFSETS = ((-1, 0), (0, -1), (1, 0), (0, 1))


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_probability: Chance that any single cell holds a mine.
        cell_size: Edge of one cell in pixels.
    """

    width: int = 16
    height: int = 16
    mine_probability: float = 0.25
    cell_size: int = 16

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= self.mine_probability <= 1.0:
            raise ValueError("Mine probability must be between 0 and 1")
        if self.cell_size < 1:
            raise ValueError("Cell size must be positive")


REFERENCE = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield grid.

    Owns the cells and the mine layout, and implements the reveal
    cascade. Coordinates are (column, row).
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create the grid and lay out the first game."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self.new_game()

    # ========================================================================
    # Geometry (Low-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def is_valid_position(self, column: int, row: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= column < self.width and 0 <= row < self.height

    def _neighbors(
        self, column: int, row: int, offsets=NEIGHBOR_OFFSETS
    ) -> Iterator[Tuple[int, int]]:
        """Yield in-bounds positions at the given offsets."""
        for delta_col, delta_row in offsets:
            new_col = column + delta_col
            new_row = row + delta_row
            if self.is_valid_position(new_col, new_row):
                yield new_col, new_row

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Yield every (column, row) in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield col, row

    def cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for row in self._grid:
            yield from row

    # ========================================================================
    # Generation
    # ========================================================================

    def new_game(self, mine_layout: Optional[np.ndarray] = None) -> None:
        """
        Lay out fresh mines and cover every cell.

        Each cell independently holds a mine with the configured
        probability, so the total mine count varies between games.

        Args:
            mine_layout: Optional boolean array of shape (height, width)
                to use instead of random sampling.
        """
        if mine_layout is None:
            mines = self.rng.random((self.height, self.width))
            mines = mines < self.config.mine_probability
        else:
            mines = np.asarray(mine_layout, dtype=bool)
            if mines.shape != (self.height, self.width):
                raise ValueError(
                    f"Mine layout shape {mines.shape} does not match "
                    f"board ({self.height}, {self.width})"
                )

        for col, row in self.positions():
            self._grid[row][col].cover(bool(mines[row, col]))

        logger.debug(
            "New %dx%d game with %d mines",
            self.width, self.height, self.mine_count(),
        )

    # ========================================================================
    # Reveal Cascade
    # ========================================================================

    def count_neighbor_mines(self, column: int, row: int) -> int:
        """Count mines among the 8 cells surrounding a position."""
        return sum(
            1 for col, rw in self._neighbors(column, row)
            if self._grid[rw][col].is_mine
        )

    def reveal(self, column: int, row: int) -> int:
        """
        Reveal a covered safe cell and spread to its orthogonal neighbors.

        The spread continues through every covered non-mine cell reachable
        orthogonally from the origin, whatever its neighbor mine count.
        Flagged, already revealed and mine cells stop it.

        Args:
            column: Column index to reveal.
            row: Row index to reveal.

        Returns:
            Number of cells revealed (0 if the target was not eligible).
        """
        self._check_position(column, row)
        revealed = 0
        pending = [(column, row)]
        while pending:
            col, rw = pending.pop()
            cell = self._grid[rw][col]
            if not cell.reveal(self.count_neighbor_mines(col, rw)):
                continue
            revealed += 1
            pending.extend(self._neighbors(col, rw, CASCADE_OFFSETS))
        return revealed

    # ========================================================================
    # State Accessors
    # ========================================================================

    def _check_position(self, column: int, row: int) -> None:
        if not self.is_valid_position(column, row):
            raise IndexError(
                f"Position ({column}, {row}) outside "
                f"{self.width}x{self.height} board"
            )

    def cell_at(self, column: int, row: int) -> Cell:
        """Get cell at position, raising IndexError if out of bounds."""
        self._check_position(column, row)
        return self._grid[row][column]

    def get_cell(self, column: int, row: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(column, row):
            return None
        return self._grid[row][column]

    def cell_view(self, column: int, row: int) -> CellView:
        """Visible state of one cell, for the presentation layer."""
        return self.cell_at(column, row).view()

    def mine_count(self) -> int:
        """Number of mines in the current layout."""
        return sum(1 for cell in self.cells() if cell.is_mine)

    def count_states(self, *states: CellState) -> int:
        """Number of cells whose visible state is one of ``states``."""
        return sum(1 for cell in self.cells() if cell.state in states)

    def mine_layout(self) -> np.ndarray:
        """Boolean (height, width) array of mine positions."""
        layout = np.zeros((self.height, self.width), dtype=bool)
        for col, row in self.positions():
            layout[row, col] = self._grid[row][col].is_mine
        return layout

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D int8 array of shape (height, width) holding each cell's
            Cell.to_observation() code.
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for col, row in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def covered_positions(self) -> List[Tuple[int, int]]:
        """List of (column, row) positions still covered."""
        return [
            (col, row) for col, row in self.positions()
            if self._grid[row][col].is_covered
        ]

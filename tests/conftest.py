"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable

import numpy as np

# Add src and the project root (for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minefield import Board, BoardConfig, Cell, GameSession


def parse_layout(*rows: str) -> np.ndarray:
    """Turn rows like ".*." into a mine layout ('*' is a mine)."""
    return np.array([[char == "*" for char in row] for row in rows])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def make_session() -> Callable[..., GameSession]:
    """Factory building a session whose mines follow the given rows."""
    def factory(*rows: str) -> GameSession:
        layout = parse_layout(*rows)
        height, width = layout.shape
        session = GameSession(
            BoardConfig(width=width, height=height),
            np.random.default_rng(0),
        )
        session.new_game(layout)
        return session

    return factory


@pytest.fixture
def corner_mine_session(make_session) -> GameSession:
    """3x3 board with a single mine at (2, 2)."""
    return make_session("...", "...", "..*")


@pytest.fixture
def pair_session(make_session) -> GameSession:
    """2x1 board with a mine at (1, 0)."""
    return make_session(".*")


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def reference_board() -> Board:
    """Seeded 16x16 board with 25% mine probability."""
    return Board(BoardConfig(), np.random.default_rng(1234))


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, mine_probability=0.0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered safe cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)

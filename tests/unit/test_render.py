"""
Unit tests for presentation helpers.
"""
import pytest
from minefield import BoardConfig, CellState, CellView, GameSession
from minefield.render import cell_origin, render_ansi, sprite_offset


class TestSpriteOffset:
    """Test atlas tile lookup."""

    @pytest.mark.parametrize(
        "state, expected",
        [
            (CellState.COVERED, (0, 39)),
            (CellState.FLAGGED, (16, 39)),
            (CellState.EXPLODED, (32, 39)),
            (CellState.MINE_CROSSED, (48, 39)),
            (CellState.MINE_IDLE, (64, 39)),
        ],
    )
    def test_marker_tiles(self, state: CellState, expected) -> None:
        """Marker states sit on the bottom tile row."""
        assert sprite_offset(CellView(state)) == expected

    @pytest.mark.parametrize("count", range(0, 9))
    def test_number_tiles(self, count: int) -> None:
        """Revealed counts sit side by side on the number row."""
        view = CellView(CellState.REVEALED, count)
        assert sprite_offset(view) == (count * 16, 23)


class TestCellOrigin:
    """Test screen placement."""

    def test_origin_scales_by_cell_size(self) -> None:
        """Cells are drawn at (column, row) times the cell size."""
        assert cell_origin(2, 3) == (32, 48)
        assert cell_origin(2, 3, cell_size=10) == (20, 30)


class TestRenderAnsi:
    """Test plain text rendering."""

    def test_render_after_loss(self, make_session) -> None:
        """Every state has its own character."""
        session = make_session("*..", "...", "*..")
        session.on_toggle_flag(2, 2)
        session.on_reveal(2, 0)
        session.on_reveal(0, 2)
        assert render_ansi(session.board).split("\n") == [
            "* 1  ",
            "2 2  ",
            "X 1 x",
        ]

    def test_render_fresh_board(self) -> None:
        """A new board is all covered."""
        session = GameSession(BoardConfig(3, 2))
        assert render_ansi(session.board) == ". . .\n. . ."

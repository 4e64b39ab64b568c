"""
Presentation helpers for the Minefield engine.

Maps visible cell states to tiles in the sprite atlas, gives the screen
origin of each cell, and renders a board as plain text. Decoding the
atlas image and drawing pixels belong to the embedding application.
"""
from typing import Dict, Tuple

from .board import Board
from .cell import CellState, CellView


# ============================================================================
# Sprite Atlas
# ============================================================================

# Top-left corner of each tile in the atlas image, in pixels.
TILE_SIZE = 16
REVEALED_ROW_Y = 23
MARKER_ROW_Y = 39

STATE_TILES: Dict[CellState, Tuple[int, int]] = {
    CellState.COVERED: (0, MARKER_ROW_Y),
    CellState.FLAGGED: (16, MARKER_ROW_Y),
    CellState.EXPLODED: (32, MARKER_ROW_Y),
    CellState.MINE_CROSSED: (48, MARKER_ROW_Y),
    CellState.MINE_IDLE: (64, MARKER_ROW_Y),
}


def sprite_offset(view: CellView) -> Tuple[int, int]:
    """Atlas position of the tile that draws ``view``."""
    if view.state == CellState.REVEALED:
        return view.neighbor_mines * TILE_SIZE, REVEALED_ROW_Y
    return STATE_TILES[view.state]


def cell_origin(
    column: int, row: int, cell_size: int = TILE_SIZE
) -> Tuple[int, int]:
    """Screen position where the tile of a cell is drawn."""
    return column * cell_size, row * cell_size


# ============================================================================
# Text Rendering
# ============================================================================

STATE_CHARS = {
    CellState.COVERED: ".",
    CellState.FLAGGED: "F",
    CellState.EXPLODED: "X",
    CellState.MINE_CROSSED: "x",
    CellState.MINE_IDLE: "*",
}


def render_ansi(board: Board) -> str:
    """Render board as ASCII string, one line per row."""
    lines = []
    for row in range(board.height):
        chars = []
        for col in range(board.width):
            view = board.cell_view(col, row)
            if view.state != CellState.REVEALED:
                chars.append(STATE_CHARS[view.state])
            elif view.neighbor_mines == 0:
                chars.append(" ")
            else:
                chars.append(str(view.neighbor_mines))
        lines.append(" ".join(chars))
    return "\n".join(lines)

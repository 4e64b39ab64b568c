"""
Outcome evaluation for the Minefield engine.

Win and loss handling. Neither locks the board: play may continue
after either outcome.
"""
import logging

from .board import Board
from .cell import CellState


logger = logging.getLogger(__name__)


def reveal_all_mines(board: Board) -> None:
    """
    Expose every mine and cross out wrong flags.

    Covered safe cells are left covered.
    """
    for cell in board.cells():
        if cell.is_mine:
            cell.state = CellState.MINE_IDLE
        elif cell.state == CellState.FLAGGED:
            cell.state = CellState.MINE_CROSSED


def counts_match(board: Board) -> bool:
    """
    Check the win condition without changing the board.

    The condition holds when the number of covered or flagged cells
    equals the number of mines. Flag positions are not compared. Once
    check_win has revealed the mines this no longer holds, so use
    GameSession.is_cleared to ask whether a game was won.
    """
    covered_or_flagged = board.count_states(
        CellState.COVERED, CellState.FLAGGED
    )
    return covered_or_flagged == board.mine_count()


def has_exploded(board: Board) -> bool:
    """Check if any cell shows an exploded mine."""
    return board.count_states(CellState.EXPLODED) > 0


def check_win(board: Board) -> bool:
    """
    Apply the win condition.

    Returns:
        True if the game was won and all mines were revealed.
    """
    if not counts_match(board):
        return False
    logger.info("Board cleared with %d mines", board.mine_count())
    reveal_all_mines(board)
    return True


def apply_loss(board: Board, column: int, row: int) -> None:
    """Reveal all mines, then mark the clicked mine as exploded."""
    cell = board.cell_at(column, row)
    logger.info("Mine hit at (%d, %d)", column, row)
    reveal_all_mines(board)
    cell.state = CellState.EXPLODED

"""
Minefield game engine.

Provides the board model, reveal cascade, outcome evaluation and the
session that turns player actions into state changes.
"""
from .cell import Cell, CellState, CellView
from .board import Board, BoardConfig, REFERENCE
from .session import GameSession, MoveResult
from .environment import MinesweeperEnv
from .agent import BaseAgent, RandomAgent

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "BoardConfig",
    "REFERENCE",
    "GameSession",
    "MoveResult",
    "MinesweeperEnv",
    "BaseAgent",
    "RandomAgent",
]

"""
Minesweeper board engine.

Provides the board state machine, tile and grid types, and a Gymnasium
environment built on top of them.
"""
from .tile import Tile, Mark, Cover, Contents, ContentKind, MINE, BLANK, next_mark
from .grid import Grid
from .board import (
    Board,
    BoardConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
)
from .environment import MinesweeperEnv, render_board

__all__ = [
    "Tile",
    "Mark",
    "Cover",
    "Contents",
    "ContentKind",
    "MINE",
    "BLANK",
    "next_mark",
    "Grid",
    "Board",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "MinesweeperEnv",
    "render_board",
]

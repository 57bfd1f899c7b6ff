"""
Minesweeper engine.

Provides the board state machine, the game lifecycle wrapper, a Gymnasium
environment and a console front-end.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    InvalidParameterError,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    MAX_MINE_PERCENT,
    max_mines,
    validate_parameters,
)
from .game import Game, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "InvalidParameterError",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "MAX_MINE_PERCENT",
    "max_mines",
    "validate_parameters",
    "Game",
    "GameState",
    "MinesweeperEnv",
]

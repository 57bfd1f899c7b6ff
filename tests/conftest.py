"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a 9x9 board with 10 mines."""
    return Board(9, 10)


@pytest.fixture
def seeded_board() -> Board:
    """Create a small seeded 3x3 board with 1 mine."""
    return Board(3, 1, seed=42)


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with its single mine forced at (2, 2)."""
    board = Board(3, 1)
    board.set_mine_layout([(2, 2)])
    return board


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with its single mine forced at (1, 1)."""
    board = Board(3, 1)
    board.set_mine_layout([(1, 1)])
    return board


@pytest.fixture
def wall_board() -> Board:
    """
    Create a 5x5 board with a column of mines down the middle.

    Layout (M = mine):
        . . M . .
        . . M . .
        . . M . .
        . . M . .
        . . . . .
    """
    board = Board(5, 4)
    board.set_mine_layout([(0, 2), (1, 2), (2, 2), (3, 2)])
    return board


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a 9x9 game with 10 mines."""
    return Game(9, 10, seed=7)


@pytest.fixture
def corner_mine_game() -> Game:
    """Create a 3x3 game with its single mine forced at (2, 2)."""
    game = Game(3, 1)
    game.board.set_mine_layout([(2, 2)])
    return game


@pytest.fixture
def center_mine_game() -> Game:
    """Create a 3x3 game with its single mine forced at (1, 1)."""
    game = Game(3, 1)
    game.board.set_mine_layout([(1, 1)])
    return game


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(1, 1, has_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Create a 4x4 configuration with 3 mines and a fixed seed."""
    return BoardConfig(4, 3, seed=42)

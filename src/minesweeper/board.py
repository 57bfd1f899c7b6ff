"""
Board module for Minesweeper.

Implements the square game board with deferred mine placement,
cell revealing with flood-fill, flag toggling and win/loss detection.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# At most this percentage of the cells may hold a mine.
MAX_MINE_PERCENT = 35


class InvalidParameterError(ValueError):
    """Raised when a board size or mine count is out of range."""


def max_mines(size: int) -> int:
    """Largest mine count allowed on a ``size`` x ``size`` board."""
    return size * size * MAX_MINE_PERCENT // 100


def validate_parameters(size: int, mine_count: int) -> None:
    """
    Ensure a size/mine count pair describes a playable board.

    Raises:
        InvalidParameterError: If size is not positive or mine_count is
            outside [1, max_mines(size)].
    """
    if size <= 0:
        raise InvalidParameterError("Board size must be greater than 0")
    limit = max_mines(size)
    if mine_count <= 0 or mine_count > limit:
        raise InvalidParameterError(f"Mine count must be between 1 and {limit}")


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns (boards are square).
        mine_count: Total mines to place.
        seed: Optional seed for a reproducible mine layout.
    """

    size: int = 9
    mine_count: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_parameters(self.size, self.mine_count)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 10)
INTERMEDIATE = BoardConfig(16, 40)
EXPERT = BoardConfig(24, 99)

DIFFICULTIES = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns a ``size`` x ``size`` grid of cells. Mines are placed lazily on the
    first reveal so that the opening move is never a mine.
    """

    size: int
    mine_count: int
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _is_game_lost: bool = field(default=False, init=False)
    _is_first_move_done: bool = field(default=False, init=False)
    _rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate parameters and build the empty grid."""
        validate_parameters(self.size, self.mine_count)
        self._rng = random.Random(self.seed)
        self._init_grid()

    @classmethod
    def from_config(cls, config: BoardConfig) -> "Board":
        """Create a board from a validated configuration."""
        return cls(config.size, config.mine_count, config.seed)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.size)]
            for row in range(self.size)
        ]

    def place_mines(self, safe_row: int, safe_col: int) -> None:
        """
        Place mines randomly, keeping one cell mine-free.

        Any previous layout is cleared first. Positions are drawn uniformly
        and redrawn when they hit the safe cell or an existing mine.

        Args:
            safe_row: Row of the cell that must stay mine-free.
            safe_col: Column of the cell that must stay mine-free.
        """
        self._clear_mines()

        mines_placed = 0
        while mines_placed < self.mine_count:
            row = self._rng.randrange(self.size)
            col = self._rng.randrange(self.size)
            if (row, col) == (safe_row, safe_col):
                continue
            cell = self._grid[row][col]
            if cell.has_mine:
                continue
            cell.has_mine = True
            mines_placed += 1

        self._calculate_adjacent_mines()
        self._is_first_move_done = True
        logger.debug(
            "Placed %d mines on %dx%d board avoiding (%d, %d)",
            self.mine_count, self.size, self.size, safe_row, safe_col,
        )

    def set_mine_layout(self, positions: Iterable[Tuple[int, int]]) -> None:
        """
        Place mines at explicit positions instead of at random.

        Counts are recalculated and the first move is marked as done, so
        the next reveal keeps this layout.

        Args:
            positions: (row, col) pairs; must hold exactly mine_count
                distinct in-bounds positions.

        Raises:
            InvalidParameterError: If the layout does not fit the board.
        """
        layout = set(positions)
        if len(layout) != self.mine_count:
            raise InvalidParameterError(
                f"Mine layout must contain exactly {self.mine_count} positions"
            )
        for row, col in layout:
            if not self.is_valid_position(row, col):
                raise InvalidParameterError(
                    f"Mine position ({row}, {col}) is outside the board"
                )

        self._clear_mines()
        for row, col in layout:
            self._grid[row][col].has_mine = True
        self._calculate_adjacent_mines()
        self._is_first_move_done = True

    def _clear_mines(self) -> None:
        for cell in self.cells():
            cell.clear_mine()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for cell in self.cells():
            if not cell.has_mine:
                cell.adjacent_mine_count = self._count_adjacent_mines(
                    cell.row, cell.column
                )

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].has_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for neighbors inside the board.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines avoiding this cell. A cell with
        no adjacent mines reveals its zero-connected region. Revealing a
        mine loses the game but still counts as a successful move.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the cell was revealed, False for an invalid move.
        """
        if not self.is_valid_position(row, col):
            return False
        cell = self._grid[row][col]
        if not cell.is_hidden:
            return False

        if not self._is_first_move_done:
            self.place_mines(row, col)

        cell.reveal()

        if cell.has_mine:
            self._is_game_lost = True
            logger.debug("Mine revealed at (%d, %d)", row, col)
            return True

        if cell.adjacent_mine_count == 0:
            self._flood_reveal(row, col)

        return True

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal the region around a zero cell, stopping at flags and mines."""
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            for neighbor_row, neighbor_col in self.get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.has_mine or not neighbor.is_hidden:
                    continue
                neighbor.reveal()
                if neighbor.adjacent_mine_count == 0:
                    stack.append((neighbor_row, neighbor_col))

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was set or cleared, False otherwise.
        """
        if not self.is_valid_position(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    def check_win(self) -> bool:
        """Check if every non-mine cell is revealed and no mine went off."""
        if self._is_game_lost:
            return False
        return all(cell.is_revealed for cell in self.cells() if not cell.has_mine)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def is_game_lost(self) -> bool:
        """Check if a mine has been revealed."""
        return self._is_game_lost

    @property
    def is_first_move_done(self) -> bool:
        """Check if the mine layout has been decided."""
        return self._is_first_move_done

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_flagged)

    @property
    def revealed_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_revealed)

    @property
    def remaining_mines(self) -> int:
        """Mines not yet accounted for by flags (negative when over-flagged)."""
        return self.mine_count - self.flag_count

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self._grid:
            yield from row

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.column] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        return [(cell.row, cell.column) for cell in self.cells() if cell.is_hidden]

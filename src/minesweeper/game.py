"""
Game module for Minesweeper.

Wraps a single Board with game-level lifecycle: moves are frozen once the
game is over, and a new game replaces the board wholesale.
"""
import logging
from enum import Enum, auto
from typing import Optional

from .board import Board, BoardConfig, InvalidParameterError, validate_parameters

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Game:
    """
    A Minesweeper game owning exactly one board at a time.

    Won/over status is derived from the current board on every read.
    """

    def __init__(
        self, size: int, mine_count: int, seed: Optional[int] = None
    ) -> None:
        """
        Create a game with a fresh board.

        Args:
            size: Number of rows and columns.
            mine_count: Number of mines to place.
            seed: Optional seed for a reproducible mine layout.

        Raises:
            InvalidParameterError: If size or mine_count is out of range.
        """
        validate_parameters(size, mine_count)
        self.board = Board(size, mine_count, seed)

    @classmethod
    def from_config(cls, config: BoardConfig) -> "Game":
        """Create a game from a board configuration."""
        return cls(config.size, config.mine_count, config.seed)

    # ========================================================================
    # Derived State
    # ========================================================================

    @property
    def is_game_lost(self) -> bool:
        return self.board.is_game_lost

    @property
    def is_game_won(self) -> bool:
        return self.board.check_win()

    @property
    def is_game_over(self) -> bool:
        return self.board.is_game_lost or self.is_game_won

    @property
    def state(self) -> GameState:
        """Get current game state."""
        if self.board.is_game_lost:
            return GameState.LOST
        if self.board.check_win():
            return GameState.WON
        return GameState.PLAYING

    # ========================================================================
    # Commands
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> bool:
        """Reveal a cell, or return False if the game is already over."""
        if self.is_game_over:
            return False
        return self.board.reveal_cell(row, col)

    def toggle_flag(self, row: int, col: int) -> bool:
        """Toggle a flag, or return False if the game is already over."""
        if self.is_game_over:
            return False
        return self.board.toggle_flag(row, col)

    def new_game(
        self, size: Optional[int] = None, mine_count: Optional[int] = None
    ) -> None:
        """
        Replace the board with a fresh one.

        With no arguments the current size and mine count are reused with a
        new random layout. Otherwise both must be given and are validated
        before the board is replaced.

        Raises:
            InvalidParameterError: If only one of size/mine_count is given
                or the pair is out of range.
        """
        if size is None and mine_count is None:
            size, mine_count = self.board.size, self.board.mine_count
        elif size is None or mine_count is None:
            raise InvalidParameterError(
                "size and mine_count must be given together"
            )
        else:
            validate_parameters(size, mine_count)

        self.board = Board(size, mine_count)
        logger.debug("Started new %dx%d game with %d mines", size, size, mine_count)

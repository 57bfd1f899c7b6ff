"""
Unit tests for console output formatting.
"""
import pytest
from minesweeper import Board, Cell
from minesweeper.ui import (
    cell_display,
    cell_info_message,
    format_board,
    game_over_message,
    welcome_message,
)
from minesweeper.ui import output_formatter


class TestCellDisplay:
    """Test single-cell symbols."""

    def test_hidden_cell(self) -> None:
        assert cell_display(Cell(0, 0)) == "_"

    def test_flagged_cell(self) -> None:
        cell = Cell(0, 0, has_mine=True)
        cell.toggle_flag()
        assert cell_display(cell, show_mines=True) == "F"

    @pytest.mark.parametrize("count", [0, 3, 8])
    def test_revealed_count(self, count: int) -> None:
        cell = Cell(0, 0, adjacent_mine_count=count)
        cell.reveal()
        assert cell_display(cell) == str(count)

    def test_revealed_mine_hidden_unless_shown(self) -> None:
        cell = Cell(0, 0, has_mine=True)
        cell.reveal()
        assert cell_display(cell) == "_"
        assert cell_display(cell, show_mines=True) == "*"


class TestFormatBoard:
    """Test full board rendering."""

    def test_new_board_layout(self) -> None:
        """Header numbers columns, rows are lettered."""
        lines = format_board(Board(3, 1)).split("\n")
        assert lines[1] == "Here is your minefield:"
        assert lines[2] == "  1 2 3 "
        assert lines[3] == "A _ _ _ "
        assert lines[5] == "C _ _ _ "

    def test_lost_board_shows_mine(self, center_mine_board: Board) -> None:
        center_mine_board.reveal_cell(1, 1)
        text = format_board(center_mine_board, show_mines=True)
        assert "B _ * _ " in text

    def test_cascaded_board(self, corner_mine_board: Board) -> None:
        corner_mine_board.reveal_cell(0, 0)
        lines = format_board(corner_mine_board).split("\n")
        assert lines[3:6] == ["A 0 0 0 ", "B 0 1 1 ", "C 0 1 _ "]


class TestMessages:
    """Test user-facing messages."""

    def test_welcome(self) -> None:
        assert welcome_message() == "Welcome to Minesweeper!"

    def test_game_over(self) -> None:
        assert game_over_message(True) == "Congratulations, you have won the game!"
        assert game_over_message(False) == "Oh no, you detonated a mine! Game over."

    def test_cell_info(self) -> None:
        assert "contains 2 adjacent mines" in cell_info_message(
            Cell(0, 0, adjacent_mine_count=2)
        )

    def test_cell_info_for_mine_is_empty(self) -> None:
        assert cell_info_message(Cell(0, 0, has_mine=True)) == ""

    def test_display_cell_info_prints_nothing_for_mine(self, capsys) -> None:
        output_formatter.display_cell_info(Cell(0, 0, has_mine=True))
        assert capsys.readouterr().out == ""

    def test_display_game_over_prints(self, capsys) -> None:
        output_formatter.display_game_over_message(True)
        assert "won" in capsys.readouterr().out

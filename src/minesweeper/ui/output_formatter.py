"""
Text rendering for the console front-end.

Formatting functions return strings; the ``display_*`` helpers print them.
"""
from typing import List

from ..board import Board
from ..cell import Cell


HIDDEN_SYMBOL = "_"
FLAG_SYMBOL = "F"
MINE_SYMBOL = "*"


def cell_display(cell: Cell, show_mines: bool = False) -> str:
    """
    Get the display character for a cell.

    Args:
        cell: Cell to render.
        show_mines: Whether revealed mines are drawn (game over view).
    """
    if cell.is_flagged:
        return FLAG_SYMBOL
    if not cell.is_revealed:
        return HIDDEN_SYMBOL
    if cell.has_mine:
        return MINE_SYMBOL if show_mines else HIDDEN_SYMBOL
    return str(cell.adjacent_mine_count)


def format_board(board: Board, show_mines: bool = False) -> str:
    """
    Render the board with column numbers on top and row letters on the left.

    Args:
        board: Board to render.
        show_mines: Whether revealed mines are drawn.
    """
    lines: List[str] = ["", "Here is your minefield:"]
    header = "  " + "".join(f"{col + 1} " for col in range(board.size))
    lines.append(header)

    for row in range(board.size):
        row_str = f"{chr(ord('A') + row)} "
        for col in range(board.size):
            row_str += cell_display(board.get_cell(row, col), show_mines) + " "
        lines.append(row_str)

    lines.append("")
    return "\n".join(lines)


def welcome_message() -> str:
    return "Welcome to Minesweeper!"


def game_over_message(is_win: bool) -> str:
    if is_win:
        return "Congratulations, you have won the game!"
    return "Oh no, you detonated a mine! Game over."


def cell_info_message(cell: Cell) -> str:
    """Describe a revealed cell; empty for mines since the game is over."""
    if cell.has_mine:
        return ""
    return f"This square contains {cell.adjacent_mine_count} adjacent mines. \n"


# ============================================================================
# Console Output
# ============================================================================

def display_board(board: Board, show_mines: bool = False) -> None:
    print(format_board(board, show_mines))


def display_welcome_message() -> None:
    print(welcome_message())


def display_game_over_message(is_win: bool) -> None:
    print(game_over_message(is_win))


def display_cell_info(cell: Cell) -> None:
    message = cell_info_message(cell)
    if message:
        print(message)

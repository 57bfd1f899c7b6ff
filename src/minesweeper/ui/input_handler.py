"""
Input parsing for the console front-end.

Cells are entered as a row letter followed by a 1-based column number,
e.g. ``A1`` or ``c12``. Prefixing a cell with ``F`` or ``flag`` toggles a
flag instead of revealing it.
"""
import re
from typing import Callable, Tuple

from ..board import max_mines

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 26

REVEAL = "reveal"
FLAG = "flag"

_CELL_PATTERN = re.compile(r"^([A-Za-z])(\d+)$")
_FLAG_PATTERN = re.compile(r"^(?:f|flag)\s+(\S+)$", re.IGNORECASE)


class CoordinateError(ValueError):
    """Raised when a cell reference cannot be parsed for the current board."""


# ============================================================================
# Parsing
# ============================================================================

def parse_cell_coordinates(text: str, board_size: int) -> Tuple[int, int]:
    """
    Convert a cell reference such as ``B3`` to 0-based (row, col).

    Args:
        text: Raw user input.
        board_size: Size of the current board.

    Returns:
        Tuple of (row, col) indices.

    Raises:
        CoordinateError: With a user-facing message when the input is
            malformed or out of range.
    """
    match = _CELL_PATTERN.match(text.strip())
    if match is None:
        raise CoordinateError(
            "Invalid input format. Please use the format [Letter][Number], e.g. A1."
        )

    column = int(match.group(2))
    if column < 1 or column > board_size:
        raise CoordinateError(f"Column must be between 1 and {board_size}.")

    row = ord(match.group(1).upper()) - ord("A")
    if row >= board_size:
        last_row = chr(ord("A") + board_size - 1)
        raise CoordinateError(f"Row must be between A and {last_row}.")

    return row, column - 1


def parse_command(text: str, board_size: int) -> Tuple[str, int, int]:
    """
    Parse a move: a cell reference, optionally prefixed by a flag keyword.

    Returns:
        Tuple of (action, row, col) where action is ``REVEAL`` or ``FLAG``.
    """
    text = text.strip()
    flag_match = _FLAG_PATTERN.match(text)
    if flag_match is not None:
        row, col = parse_cell_coordinates(flag_match.group(1), board_size)
        return FLAG, row, col
    row, col = parse_cell_coordinates(text, board_size)
    return REVEAL, row, col


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return -1


# ============================================================================
# Prompts
# ============================================================================

def prompt_board_size(input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    """Ask for a board size until a value in range is entered."""
    while True:
        size = _parse_int(
            input_fn("Enter the size of the grid (e.g. 4 for a 4x4 grid): \n")
        )
        if MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            return size
        output_fn(
            "Invalid input. Please enter a positive integer between "
            f"{MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}."
        )


def prompt_mine_count(
    board_size: int, input_fn: InputFn = input, output_fn: OutputFn = print
) -> int:
    """Ask for a mine count until one within the board's cap is entered."""
    limit = max_mines(board_size)
    while True:
        mines = _parse_int(
            input_fn(
                "Enter the number of mines to place on the grid "
                f"(maximum is {limit}): \n"
            )
        )
        if 1 <= mines <= limit:
            return mines
        output_fn(
            f"Invalid input. Please enter a positive integer between 1 and {limit}."
        )


def prompt_move(
    board_size: int, input_fn: InputFn = input, output_fn: OutputFn = print
) -> Tuple[str, int, int]:
    """Ask for a move until a parsable one is entered."""
    while True:
        text = input_fn("Select a square to reveal (e.g. A1, or F A1 to flag): ")
        if not text.strip():
            continue
        try:
            return parse_command(text, board_size)
        except CoordinateError as exc:
            output_fn(str(exc))


def prompt_play_again(input_fn: InputFn = input) -> bool:
    """Ask whether to start another game; anything but y/yes declines."""
    answer = input_fn("Play again? (y/n): ")
    return answer.strip().lower() in ("y", "yes")

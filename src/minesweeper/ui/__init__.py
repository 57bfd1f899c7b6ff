"""
Console front-end for Minesweeper.

Parses player input and renders the board as text.
"""
from .input_handler import (
    CoordinateError,
    FLAG,
    REVEAL,
    parse_cell_coordinates,
    parse_command,
    prompt_board_size,
    prompt_mine_count,
    prompt_move,
    prompt_play_again,
)
from .output_formatter import (
    cell_display,
    cell_info_message,
    format_board,
    game_over_message,
    welcome_message,
)

__all__ = [
    "CoordinateError",
    "FLAG",
    "REVEAL",
    "parse_cell_coordinates",
    "parse_command",
    "prompt_board_size",
    "prompt_mine_count",
    "prompt_move",
    "prompt_play_again",
    "cell_display",
    "cell_info_message",
    "format_board",
    "game_over_message",
    "welcome_message",
]

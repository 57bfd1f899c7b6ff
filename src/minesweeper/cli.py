"""
Console entry point for Minesweeper.

Usage:
    minesweeper [--size N --mines M | --difficulty NAME] [--seed S] [--verbose]
"""
import argparse
import logging
from typing import List, Optional

from .board import DIFFICULTIES, InvalidParameterError
from .game import Game
from .ui import input_handler
from .ui.input_handler import FLAG, InputFn, OutputFn
from .ui.output_formatter import (
    cell_info_message,
    format_board,
    game_over_message,
    welcome_message,
)

logger = logging.getLogger(__name__)


def play_game(game: Game, input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
    """Run one game until it is won or lost."""
    output_fn(format_board(game.board))

    while not game.is_game_over:
        action, row, col = input_handler.prompt_move(
            game.board.size, input_fn, output_fn
        )

        if action == FLAG:
            if not game.toggle_flag(row, col):
                output_fn("Invalid move. Please try again.")
                continue
            output_fn(format_board(game.board))
            continue

        if not game.reveal_cell(row, col):
            output_fn("Invalid move. Please try again.")
            continue

        info = cell_info_message(game.board.get_cell(row, col))
        if info:
            output_fn(info)

        if game.is_game_lost:
            output_fn(format_board(game.board, show_mines=True))
            output_fn(game_over_message(False))
        elif game.is_game_won:
            output_fn(format_board(game.board))
            output_fn(game_over_message(True))
        else:
            output_fn(format_board(game.board))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Minesweeper in the console")
    parser.add_argument("--size", type=int, default=None, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default=None,
        help="Preset board size and mine count",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the first game's layout"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events at DEBUG level"
    )
    return parser


def _create_game(
    args: argparse.Namespace, input_fn: InputFn, output_fn: OutputFn
) -> Game:
    """Build a game from command line options, prompting for anything missing."""
    if args.difficulty is not None:
        config = DIFFICULTIES[args.difficulty]
        return Game(config.size, config.mine_count, args.seed)

    size = args.size
    if size is None:
        size = input_handler.prompt_board_size(input_fn, output_fn)
    mines = args.mines
    if mines is None:
        mines = input_handler.prompt_mine_count(size, input_fn, output_fn)
    return Game(size, mines, args.seed)


def main(
    argv: Optional[List[str]] = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """Parse arguments and play games until the player stops."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.size is not None and args.size > input_handler.MAX_BOARD_SIZE:
        parser.error(f"--size must be at most {input_handler.MAX_BOARD_SIZE}")

    output_fn(welcome_message())
    try:
        game = _create_game(args, input_fn, output_fn)
    except InvalidParameterError as exc:
        parser.error(str(exc))

    try:
        while True:
            play_game(game, input_fn, output_fn)
            if not input_handler.prompt_play_again(input_fn):
                break
            game.new_game()
            output_fn(welcome_message())
    except (EOFError, KeyboardInterrupt):
        output_fn("")
        logger.debug("Input closed, leaving game")

    return 0

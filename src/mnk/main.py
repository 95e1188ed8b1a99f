from __future__ import annotations

import argparse
import logging

from mnk import config
from mnk.game.controller import run_game
from mnk.game.state import new_game


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play an m,n,k-game (generalised tic-tac-toe) in the console.")
    ap.add_argument("--rows", type=int, default=config.ROWS, help="Number of board rows (m)")
    ap.add_argument("--cols", type=int, default=config.COLS, help="Number of board columns (n)")
    ap.add_argument("-k", "--k", type=int, default=config.K, help="Marks in a row needed to win")

    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")

    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every move at DEBUG level")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    try:
        state = new_game(args.rows, args.cols, args.k)
    except ValueError as e:
        ap.error(str(e))

    run_game(state)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

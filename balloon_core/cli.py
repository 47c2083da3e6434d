from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from simpleio import get_string

from .deal import parse_matrix
from .errors import BalloonError
from .render import display, display_raw
from .session import BalloonGame

HELP = """Commands:
  p r c   pop the balloon cluster at row r, column c
  u       undo the last pop
  r       restart from the initial board
  s       show the score
  h       show this help
  q       quit"""


def _configure_logging() -> None:
    level = os.getenv('BALLOON_LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format='%(levelname)s %(name)s: %(message)s')


def _parse_coords(parts: List[str]) -> Optional[Tuple[int, int]]:
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _show(game: BalloonGame) -> None:
    print(display(game))
    print(f"Score: {game.score()}")


def play(game: BalloonGame, animate: bool = True) -> int:
    """Runs the command loop until the board is stuck or the player quits. Returns the final score."""
    _show(game)
    while game.can_pop():
        line = get_string('> ')
        if line is None:
            break
        parts = line.split()
        if not parts:
            continue
        cmd, args = parts[0].lower(), parts[1:]
        if cmd == 'q':
            break
        if cmd == 'h':
            print(HELP)
        elif cmd == 's':
            print(f"Score: {game.score()}")
        elif cmd == 'u':
            if game.undo():
                _show(game)
            else:
                print('Nothing to undo.')
        elif cmd == 'r':
            game.restart()
            _show(game)
        elif cmd == 'p':
            coords = _parse_coords(args)
            if coords is None:
                print('Usage: p r c')
                continue
            n = game.pop(*coords)
            if n == 0:
                print('Nothing to pop there.')
                continue
            print(f"Popped {n} balloons (+{n * (n - 1)}).")
            if animate:
                for _ in game.float_frames():
                    print(display(game))
            else:
                game.float_until_compact()
            _show(game)
        else:
            print('Unknown command. Type h for help.')
    else:
        print('GAME OVER')
    print(f"Final score: {game.score()}")
    return game.score()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Balloon pop puzzle in the terminal')
    parser.add_argument('--rows', type=int, default=5, help='Number of rows')
    parser.add_argument('--cols', type=int, default=10, help='Number of columns')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the initial board')
    parser.add_argument('--matrix', default=None, help='Text file with the initial board, one row per line')
    parser.add_argument('--raw', action='store_true', help='Print the board without borders and exit')
    parser.add_argument('--no-animate', action='store_true', help='Do not print intermediate float steps')
    args = parser.parse_args(argv)
    _configure_logging()

    try:
        if args.matrix:
            with open(args.matrix, encoding='utf-8') as f:
                matrix = parse_matrix(f.read())
            rows = len(matrix)
            cols = len(matrix[0]) if matrix else 0
            game = BalloonGame.create_from_matrix(matrix, rows, cols)
        else:
            game = BalloonGame.create(args.rows, args.cols, seed=args.seed)
    except (BalloonError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.raw:
        print(display_raw(game))
        return 0
    play(game, animate=not args.no_animate)
    return 0

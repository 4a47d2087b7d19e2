from __future__ import annotations

import argparse
import logging
import os
from typing import Tuple

from .board import Location
from .deal import deal_board
from .rules import is_won
from .session import attempt_move

HELP = "Enter a move as '<src> <dst>' (e.g. 's0 c1', 'c0 f0'), 'n' for a new game, 'q' to quit."


def _parse_move(text: str) -> Tuple[Location, Location]:
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError('expected two locations')
    return Location.parse(parts[0]), Location.parse(parts[1])


def main() -> None:
    parser = argparse.ArgumentParser(description='FreeCell rules engine')
    parser.add_argument('--seed', default=None, help='Optional random seed for the deal (any text)')
    parser.add_argument('--play', action='store_true', help='Play interactively in the terminal')
    parser.add_argument('--no-auto', action='store_true', help='Disable automatic moves to the foundations')
    parser.add_argument('--log-level', default=os.getenv('FREECELL_LOG_LEVEL', 'WARNING'),
                        help='Logging level (default from FREECELL_LOG_LEVEL or WARNING)')
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

    board = deal_board(seed=args.seed)
    print('Initial board:')
    print(board.pretty())
    if not args.play:
        return

    print(HELP)
    while True:
        try:
            text = input('> ').strip()
        except EOFError:
            break
        if text in ('q', 'quit'):
            break
        if text in ('n', 'new'):
            board = deal_board()
            print(board.pretty())
            continue
        try:
            src, dst = _parse_move(text)
        except ValueError as e:
            print(f'Could not parse ({e}). {HELP}')
            continue
        board, n = attempt_move(board, src, dst, auto=not args.no_auto)
        if n == 0:
            print('Illegal move. Try again.')
            continue
        print(f'Moved {n} card(s) from {src} to {dst}')
        print(board.pretty())
        if is_won(board):
            print('You win!')
            break


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Random-playout sanity check for the FreeCell engine.

- Deals one board per seed and plays random legal moves (num_movable > 0)
  followed by auto_move, up to a move cap per game.
- Checks after every step:
  * the board still holds exactly one 52-card deck
  * the input board was not modified by the move
  * auto_move is idempotent on its own output
- Prints a JSON summary with counts and samples

Usage:
  python tools/check_invariants.py            # 200 seeds
  python tools/check_invariants.py 1000 300   # 1000 seeds, 300 moves max per game
"""
from __future__ import annotations

import json
import os
import random
import sys
from typing import List, Optional, Tuple

# Ensure we can import the game facade from the repo root
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from game import (  # noqa: E402
    Board,
    Location,
    attempt_move,
    auto_move,
    deal_board,
    is_won,
    num_movable,
    validate_board,
)


def _snapshot(board: Board) -> List[List[str]]:
    """Plain-text copy of every pile, independent of the board objects."""
    return [[str(c) for c in board.at(loc)] for loc in board.locations()]


def _legal_moves(board: Board) -> List[Tuple[Location, Location]]:
    locs = board.locations()
    return [(s, d) for s in locs for d in locs if s != d and num_movable(board, s, d) > 0]


def check(seeds: int, max_moves: int) -> None:
    games = 0
    won = 0
    moves_total = 0
    stuck = 0
    failures: List[dict] = []

    for seed in range(seeds):
        rng = random.Random(seed)
        board = deal_board(seed=seed)
        games += 1
        for step in range(max_moves):
            legal = _legal_moves(board)
            if not legal:
                stuck += 1
                break
            src, dst = rng.choice(legal)
            before = board
            snapshot = _snapshot(board)
            board, n = attempt_move(board, src, dst)
            moves_total += 1
            problem: Optional[str] = None
            try:
                validate_board(board)
            except ValueError as e:
                problem = str(e)
            if _snapshot(before) != snapshot:
                problem = "input board modified"
            elif auto_move(board) != board:
                problem = "auto_move not idempotent"
            if problem is not None:
                failures.append({"seed": seed, "step": step, "move": f"{src}->{dst}x{n}", "problem": problem})
                break
            if is_won(board):
                won += 1
                break

    summary = {
        "games": games,
        "won": won,
        "stuck": stuck,
        "moves": moves_total,
        "failure_count": len(failures),
        "failure_sample": failures[:10],
    }
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    n_seeds = int(sys.argv[1]) if len(sys.argv) > 1 else 200
    cap = int(sys.argv[2]) if len(sys.argv) > 2 else 200
    check(n_seeds, cap)

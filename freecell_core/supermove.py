from __future__ import annotations

import logging

from .board import Board, Location, LocationKind
from .moves import free_locations, move
from .rules import can_move, is_stackable

logger = logging.getLogger(__name__)


def num_movable(board: Board, src: Location, dst: Location) -> int:
    """How many cards can legally be moved in one shot from src to dst?

    Between two stacks, the top cards of src can be parked one at a time in
    free cells or empty stacks while they form a descending alternating run,
    until the card left on top can go onto dst. Parking happens on a scratch
    board, so the caller's board is untouched. Returns 0 when no move is
    possible at all.
    """
    src.check()
    dst.check()
    if src == dst:
        return 0
    scratch = board
    count = 0
    while True:
        if can_move(scratch, src, dst):
            count += 1
            break
        src_cards = scratch.at(src)
        if not (src.kind is LocationKind.STACK and dst.kind is LocationKind.STACK):
            return 0
        if len(src_cards) < 2 or not is_stackable(src_cards[0], src_cards[1]):
            return 0
        free = free_locations(scratch)
        if not free:
            return 0
        scratch = move(scratch, src, free[0], 1)
        count += 1
    logger.debug(f"num_movable {src} -> {dst}: {count}")
    return count

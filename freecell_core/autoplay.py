from __future__ import annotations

import logging

from .board import Board, LocationKind
from .cards import KING, Card, Color, color_of, opposite_color
from .moves import move
from .rules import can_accept_card, foundation_for_suit

logger = logging.getLogger(__name__)

# Above any real rank: no card of the color is left in play.
NONE_IN_PLAY = KING + 1

# Cards up to this rank are always safe to promote.
ALWAYS_SAFE_RANK = 2


def min_rank_in_play(board: Board, color: Color) -> int:
    """Returns the lowest rank of that color still in a cell or stack, or 14 if none."""
    ranks = [
        c.rank
        for loc in board.locations(LocationKind.CELL, LocationKind.STACK)
        for c in board.at(loc)
        if color_of(c) is color
    ]
    return min(ranks) if ranks else NONE_IN_PLAY


def is_safe_to_promote(board: Board, card: Card) -> bool:
    """A card is safe once no opposite-color card in play could still need to go on it."""
    cutoff = max(min_rank_in_play(board, opposite_color(color_of(card))), ALWAYS_SAFE_RANK)
    return card.rank <= cutoff


def auto_move(board: Board) -> Board:
    """Moves every eligible card to its foundation.

    Cells are scanned before stacks, each in index order. After any move the
    scan starts over, since the move may have uncovered another card.
    """
    sources = board.locations(LocationKind.CELL, LocationKind.STACK)
    restart = True
    while restart:
        restart = False
        for loc in sources:
            top = board.top(loc)
            if top is None:
                continue
            dst = foundation_for_suit(board, top.suit)
            if dst is None:
                continue
            if can_accept_card(top, dst.kind, board.at(dst)) and is_safe_to_promote(board, top):
                logger.debug(f"auto-move {top} from {loc} to {dst}")
                board = move(board, loc, dst, 1)
                restart = True
                break
    return board

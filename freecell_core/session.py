from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .autoplay import auto_move
from .board import Board, Location, LocationKind
from .deal import Seed, deal_board
from .moves import move
from .rules import is_won
from .supermove import num_movable


@dataclass(frozen=True)
class Session:
    """Click-driven play state: the board plus the current selection.

    `selected` is the source picked by the first click, if any.
    `illegal_src` is the source of the last move attempt that failed, so a
    front end can flag it until the next selection.
    """
    board: Board
    selected: Optional[Location] = None
    illegal_src: Optional[Location] = None

    @property
    def won(self) -> bool:
        return is_won(self.board)


def new_session(seed: Optional[Seed] = None) -> Session:
    return Session(board=deal_board(seed))


def is_valid_source(board: Board, loc: Location) -> bool:
    """Only non-empty cells and stacks can be picked up."""
    return loc.kind in (LocationKind.CELL, LocationKind.STACK) and bool(board.at(loc))


def attempt_move(board: Board, src: Location, dst: Location, auto: bool = True) -> Tuple[Board, int]:
    """Plays one player action: moves as many cards as allowed, then auto-plays.

    Returns the new board and the number of cards moved. When nothing can
    move, the board comes back unchanged with a count of 0.
    """
    n = num_movable(board, src, dst)
    if n == 0:
        return board, 0
    next_board = move(board, src, dst, n)
    if auto:
        next_board = auto_move(next_board)
    return next_board, n


def handle_click(session: Session, loc: Location, auto: bool = True) -> Session:
    """Applies one click to the session.

    The first click selects a source. The second click tries to move from the
    selected source to the clicked location; clicking the source again just
    clears the selection.
    """
    loc.check()
    src = session.selected
    if src is None:
        if is_valid_source(session.board, loc):
            return replace(session, selected=loc, illegal_src=None)
        return session
    if src == loc:
        return replace(session, selected=None)
    board, n = attempt_move(session.board, src, loc, auto=auto)
    if n == 0:
        return replace(session, selected=None, illegal_src=src)
    return Session(board=board)

from __future__ import annotations

from typing import Optional, Sequence

from .board import Board, Location, LocationKind
from .cards import ACE, KING, Card, Suit, color_of


def is_stackable(over: Card, under: Card) -> bool:
    """Can `over` be placed directly on top of `under` in a stack?

    Over and under are in stacking order: on screen the over card is drawn
    below the under card, but it is the top (front) of the pile.
    """
    return over.rank == under.rank - 1 and color_of(over) != color_of(under)


def can_accept_card(card: Card, dest_kind: LocationKind, dest_cards: Sequence[Card]) -> bool:
    """Based on the destination kind and the cards it holds, can `card` be added?"""
    top = dest_cards[0] if dest_cards else None
    if dest_kind is LocationKind.CELL:
        return top is None
    if dest_kind is LocationKind.FOUNDATION:
        if top is None:
            return card.rank == ACE
        return card.suit == top.suit and card.rank == top.rank + 1
    if dest_kind is LocationKind.STACK:
        return top is None or is_stackable(card, top)
    raise ValueError(f'Unknown location kind: {dest_kind!r}')


def can_move(board: Board, src: Location, dst: Location) -> bool:
    """Is it legal to move the single top card of src onto dst?"""
    src_cards = board.at(src)
    dst_cards = board.at(dst)
    if not src_cards:
        return False
    if src.kind is LocationKind.FOUNDATION:
        return False
    return can_accept_card(src_cards[0], dst.kind, dst_cards)


def foundation_for_suit(board: Board, suit: Suit) -> Optional[Location]:
    """The foundation already building `suit`, else the first empty one."""
    empty: Optional[Location] = None
    for loc in board.locations(LocationKind.FOUNDATION):
        pile = board.at(loc)
        if pile and pile[0].suit == suit:
            return loc
        if not pile and empty is None:
            empty = loc
    return empty


def is_won(board: Board) -> bool:
    """Has the game been won? True once every foundation is topped by a King."""
    return all(pile and pile[0].rank == KING for pile in board.foundations)

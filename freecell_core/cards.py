from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class Suit(Enum):
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"


class Color(Enum):
    BLACK = "black"
    RED = "red"


# Deck order for the unshuffled deck.
SUITS = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)

ACE = 1
KING = 13

_RANK_TEXT: Dict[int, str] = {1: 'A', 11: 'J', 12: 'Q', 13: 'K'}
_SUIT_SYMBOL: Dict[Suit, str] = {
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
    Suit.HEARTS: '♥',
    Suit.SPADES: '♠',
}


@dataclass(frozen=True)
class Card:
    """An immutable playing card. Rank runs 1 (Ace) to 13 (King)."""
    rank: int
    suit: Suit

    def __str__(self) -> str:
        return card_to_str(self)


def make_deck() -> List[Card]:
    """Returns the 52-card deck in a fixed order (rank-major, then suit)."""
    return [Card(rank, suit) for rank in range(ACE, KING + 1) for suit in SUITS]


def color_of(card: Card) -> Color:
    if card.suit in (Suit.CLUBS, Suit.SPADES):
        return Color.BLACK
    return Color.RED


def opposite_color(color: Color) -> Color:
    return Color.RED if color is Color.BLACK else Color.BLACK


def card_to_str(card: Card) -> str:
    """Short text form, e.g. 'A♣', '10♥', 'Q♠'."""
    return _RANK_TEXT.get(card.rank, str(card.rank)) + _SUIT_SYMBOL[card.suit]


def parse_card(text: str) -> Card:
    """Parses the text form produced by card_to_str.

    The suit may also be given as its initial letter ('c', 'd', 'h', 's'),
    so '10h' and 'QS' are accepted too.
    """
    t = text.strip()
    if len(t) < 2:
        raise ValueError(f'Invalid card: {text!r}')
    rank_s, suit_s = t[:-1].upper(), t[-1]
    suit = None
    for s, sym in _SUIT_SYMBOL.items():
        if suit_s == sym or suit_s.lower() == s.value[0]:
            suit = s
            break
    if suit is None:
        raise ValueError(f'Invalid suit in card: {text!r}')
    by_text = {v: k for k, v in _RANK_TEXT.items()}
    if rank_s in by_text:
        rank = by_text[rank_s]
    else:
        try:
            rank = int(rank_s)
        except ValueError:
            raise ValueError(f'Invalid rank in card: {text!r}') from None
    if not ACE <= rank <= KING:
        raise ValueError(f'Invalid rank in card: {text!r}')
    return Card(rank, suit)

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .cards import Card, card_to_str, make_deck

Pile = Tuple[Card, ...]  # front (index 0) is the top card


class LocationKind(Enum):
    CELL = "cell"
    FOUNDATION = "foundation"
    STACK = "stack"


NUM_CELLS = 4
NUM_FOUNDATIONS = 4
NUM_STACKS = 8

PILE_COUNTS = {
    LocationKind.CELL: NUM_CELLS,
    LocationKind.FOUNDATION: NUM_FOUNDATIONS,
    LocationKind.STACK: NUM_STACKS,
}

# Field name on Board for each kind.
_FIELDS = {
    LocationKind.CELL: 'cells',
    LocationKind.FOUNDATION: 'foundations',
    LocationKind.STACK: 'stacks',
}

_PREFIXES = {'c': LocationKind.CELL, 'f': LocationKind.FOUNDATION, 's': LocationKind.STACK}


@dataclass(frozen=True)
class Location:
    """Addresses one pile on the board: a kind plus an index within that kind.

    Any Location can be constructed; is_valid() / check() tell whether it
    actually addresses a pile. Board access checks it.
    """
    kind: LocationKind
    index: int

    def is_valid(self) -> bool:
        return (
            isinstance(self.kind, LocationKind)
            and isinstance(self.index, int)
            and not isinstance(self.index, bool)
            and 0 <= self.index < PILE_COUNTS[self.kind]
        )

    def check(self) -> 'Location':
        if not self.is_valid():
            raise ValueError(f'Invalid location: {self.kind!r} {self.index!r}')
        return self

    def __str__(self) -> str:
        return f"{self.kind.value[0]}{self.index}"

    @staticmethod
    def parse(text: str) -> 'Location':
        """Parses the short form 'c0'..'c3', 'f0'..'f3', 's0'..'s7'."""
        t = text.strip().lower()
        kind = _PREFIXES.get(t[:1])
        if kind is None:
            raise ValueError(f'Invalid location: {text!r}')
        try:
            index = int(t[1:])
        except ValueError:
            raise ValueError(f'Invalid location: {text!r}') from None
        return Location(kind, index).check()


def cell(i: int) -> Location:
    return Location(LocationKind.CELL, i)


def foundation(i: int) -> Location:
    return Location(LocationKind.FOUNDATION, i)


def stack(i: int) -> Location:
    return Location(LocationKind.STACK, i)


@dataclass(frozen=True)
class Board:
    """The full game state: every pile, keyed by kind and index."""
    cells: Tuple[Pile, ...]
    foundations: Tuple[Pile, ...]
    stacks: Tuple[Pile, ...]

    def at(self, loc: Location) -> Pile:
        """Gets the cards at a location, top card first."""
        loc.check()
        return getattr(self, _FIELDS[loc.kind])[loc.index]

    def top(self, loc: Location) -> Optional[Card]:
        pile = self.at(loc)
        return pile[0] if pile else None

    def with_pile(self, loc: Location, cards: Iterable[Card]) -> 'Board':
        """Returns a new board with the pile at loc replaced."""
        loc.check()
        name = _FIELDS[loc.kind]
        piles = list(getattr(self, name))
        piles[loc.index] = tuple(cards)
        return replace(self, **{name: tuple(piles)})

    def locations(self, *kinds: LocationKind) -> List[Location]:
        """All locations of the given kinds (all kinds by default), in kind then index order."""
        out: List[Location] = []
        for kind in kinds or tuple(LocationKind):
            out.extend(Location(kind, i) for i in range(PILE_COUNTS[kind]))
        return out

    def all_cards(self) -> List[Card]:
        return [c for loc in self.locations() for c in self.at(loc)]

    def pretty(self) -> str:
        """Generates a human-readable view of the board.

        Cells and foundations show their top card; stacks are listed bottom
        to top, the way they appear on the table.
        """
        def slot(pile: Pile) -> str:
            return f"[{card_to_str(pile[0]) if pile else '':>3}]"

        lines = [
            'Cells:       ' + ' '.join(slot(p) for p in self.cells),
            'Foundations: ' + ' '.join(slot(p) for p in self.foundations),
        ]
        for i, pile in enumerate(self.stacks):
            lines.append(f"s{i}: " + ' '.join(card_to_str(c) for c in reversed(pile)))
        return "\n".join(lines)


def empty_board() -> Board:
    return Board(
        cells=tuple(() for _ in range(NUM_CELLS)),
        foundations=tuple(() for _ in range(NUM_FOUNDATIONS)),
        stacks=tuple(() for _ in range(NUM_STACKS)),
    )


def validate_board(board: Board) -> Board:
    """Checks the pile counts and that the board holds exactly one 52-card deck."""
    for kind, count in PILE_COUNTS.items():
        if len(getattr(board, _FIELDS[kind])) != count:
            raise ValueError(f'Expected {count} {kind.value} piles')
    have = Counter(board.all_cards())
    want = Counter(make_deck())
    if have != want:
        missing = sorted(card_to_str(c) for c in (want - have))
        extra = sorted(card_to_str(c) for c in (have - want))
        raise ValueError(f'Board is not a single deck (missing={missing}, extra={extra})')
    return board

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Optional, Union

from .board import Board, NUM_STACKS, empty_board
from .cards import Card, make_deck

logger = logging.getLogger(__name__)

Seed = Union[int, str]


def deal_board(seed: Optional[Seed] = None) -> Board:
    """Shuffles a fresh deck and deals it round-robin onto the 8 stacks.

    Card i goes to stack i % 8. Each dealt card lands on top of its stack,
    so the first card dealt to a stack ends up at the bottom. The first four
    stacks get 7 cards and the rest get 6. The same seed always gives the
    same deal.
    """
    rng = random.Random(seed)
    deck: List[Card] = make_deck()
    rng.shuffle(deck)
    piles: List[List[Card]] = [[] for _ in range(NUM_STACKS)]
    for i, card in enumerate(deck):
        piles[i % NUM_STACKS].insert(0, card)
    logger.debug(f"Dealt board with seed={seed!r}")
    return replace(empty_board(), stacks=tuple(tuple(p) for p in piles))

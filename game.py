from __future__ import annotations

# Facade module that re-exports the FreeCell core API.
# The Flask app, the tools and the tests import through here.
# Single-responsibility modules live under freecell_core/*.

from freecell_core.cards import (
    ACE,
    KING,
    Card,
    Color,
    Suit,
    card_to_str,
    color_of,
    make_deck,
    opposite_color,
    parse_card,
)
from freecell_core.board import (
    NUM_CELLS,
    NUM_FOUNDATIONS,
    NUM_STACKS,
    Board,
    Location,
    LocationKind,
    cell,
    empty_board,
    foundation,
    stack,
    validate_board,
)
from freecell_core.deal import deal_board
from freecell_core.rules import (
    can_accept_card,
    can_move,
    foundation_for_suit,
    is_stackable,
    is_won,
)
from freecell_core.moves import free_cells, free_locations, free_stacks, move
from freecell_core.supermove import num_movable
from freecell_core.autoplay import auto_move, is_safe_to_promote, min_rank_in_play
from freecell_core.session import (
    Session,
    attempt_move,
    handle_click,
    is_valid_source,
    new_session,
)


def main() -> None:
    # CLI driver delegated to freecell_core.cli
    from freecell_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()

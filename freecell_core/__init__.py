"""
FreeCell core Python package.

Pure rules engine: every function takes a Board and returns a new one,
nothing is mutated in place.
Modules:
- cards.py: Card, Suit, Color, deck helpers
- board.py: Board, Location, empty_board, validate_board
- deal.py: deal_board (seedable)
- rules.py: stacking/acceptance rules, can_move, is_won
- moves.py: move, free cells/stacks
- supermove.py: num_movable
- autoplay.py: auto_move and the safe-promotion test
- session.py: click-driven play flow used by the front ends
"""

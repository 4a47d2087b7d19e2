from __future__ import annotations

from typing import List

from .board import Board, Location, LocationKind


def move(board: Board, src: Location, dst: Location, n: int) -> Board:
    """Returns a new board with the top n cards of src moved onto dst.

    The moved run keeps its order. Legality is not checked here; callers
    use can_move / num_movable first. Asking for more cards than src holds
    is a caller error.
    """
    src_cards = board.at(src)
    dst_cards = board.at(dst)
    if n < 0 or n > len(src_cards):
        raise ValueError(f'Cannot move {n} cards from {src} holding {len(src_cards)}')
    if src == dst:
        return board
    return board.with_pile(src, src_cards[n:]).with_pile(dst, src_cards[:n] + dst_cards)


def free_cells(board: Board) -> List[Location]:
    """Returns the empty cells, in index order."""
    return [loc for loc in board.locations(LocationKind.CELL) if not board.at(loc)]


def free_stacks(board: Board) -> List[Location]:
    """Returns the empty stacks, in index order."""
    return [loc for loc in board.locations(LocationKind.STACK) if not board.at(loc)]


def free_locations(board: Board) -> List[Location]:
    """Empty cells first, then empty stacks."""
    return free_cells(board) + free_stacks(board)

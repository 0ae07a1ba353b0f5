# feasibility.py

"""
Cheap pruning queries over a Board.

Both checks are necessary conditions only: passing them says no cell is
already dead, not that the board can be completed.
"""

from __future__ import annotations

from typing import Dict, List

from .board import SIZE, Board, Pos
from .cells import Fixed


def _build_peers() -> Dict[Pos, List[Pos]]:
    """The 27 positions of each cell's row, column and block (duplicates kept)."""
    peers: Dict[Pos, List[Pos]] = {}
    for r in range(SIZE):
        for c in range(SIZE):
            br = (r // 3) * 3
            bc = (c // 3) * 3
            group = [(r, cc) for cc in range(SIZE)]
            group += [(rr, c) for rr in range(SIZE)]
            group += [(br + dr, bc + dc) for dr in range(3) for dc in range(3)]
            peers[(r, c)] = group
    return peers


_PEERS = _build_peers()


def peers(row: int, col: int) -> List[Pos]:
    return _PEERS[(row, col)]


def has_dead_cell(board: Board) -> bool:
    """True if some non-fixed cell has no legal digit left."""
    for r, c in board.positions():
        if isinstance(board.cell(r, c), Fixed):
            continue
        if not board.possible_set(r, c):
            return True
    return False


def scan_affected(board: Board, row: int, col: int) -> bool:
    """
    Forward check after an assignment at (row, col): False if any
    unresolved cell sharing its row, column or block has no legal digit.
    """
    for r, c in _PEERS[(row, col)]:
        if isinstance(board.cell(r, c), Fixed):
            continue
        if not board.possible_set(r, c):
            return False
    return True

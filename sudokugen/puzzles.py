# puzzles.py

"""Built-in puzzles and patterns, addressable by name from the CLI."""

from __future__ import annotations

from typing import Dict, List

from .board import Literal
from .cells import WILDCARD_LITERAL

_ = WILDCARD_LITERAL

CLASSIC: Literal = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION: Literal = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# row 0 repeats the 5
BROKEN: Literal = [
    [5, 3, 0, 0, 7, 0, 5, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

# classic givens, with the empty corners of every block left to the generator
CORNERS: Literal = [
    [5, 3, _, _, 7, _, _, 0, _],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [_, 9, 8, _, 0, _, _, 6, _],
    [8, 0, _, _, 6, _, _, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, _, _, 2, _, _, 0, 6],
    [_, 6, _, _, 0, _, 2, 8, _],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [_, 0, _, _, 8, _, _, 7, 9],
]


def _empty() -> Literal:
    return [[0] * 9 for _ in range(9)]


def _wildcards() -> Literal:
    return [[WILDCARD_LITERAL] * 9 for _ in range(9)]


def _with_rows(base: Literal, rows: Dict[int, int]) -> Literal:
    """Copy of base with each listed row overwritten by a single value."""
    out = [row[:] for row in base]
    for r, value in rows.items():
        out[r] = [value] * 9
    return out


PUZZLES: Dict[str, Literal] = {
    "classic": CLASSIC,
    "classic-solution": CLASSIC_SOLUTION,
    "empty": _empty(),
    # every cell free: the generator produces a random full grid
    "free": _wildcards(),
    # one row of wildcards is forced by its columns
    "forced": _with_rows(CLASSIC_SOLUTION, {4: WILDCARD_LITERAL}),
    # rows 0 and 1 can swap, so the wildcards in row 1 have to pick a side
    "swap": _with_rows(CLASSIC_SOLUTION, {0: 0, 1: WILDCARD_LITERAL}),
    "corners": CORNERS,
    "broken": BROKEN,
}


def names() -> List[str]:
    return sorted(PUZZLES)


def get_puzzle(name: str) -> Literal:
    try:
        literal = PUZZLES[name]
    except KeyError:
        raise KeyError(f"Unknown puzzle {name!r}; choose from: {', '.join(names())}") from None
    return [row[:] for row in literal]

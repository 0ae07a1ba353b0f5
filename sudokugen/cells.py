# cells.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .exceptions import InvalidPattern

DIGITS = range(1, 10)

# literal encoding
EMPTY_LITERAL = 0
WILDCARD_LITERAL = -1


@dataclass(frozen=True)
class Empty:
    def __repr__(self) -> str:
        return "EMPTY"


@dataclass(frozen=True)
class Wildcard:
    def __repr__(self) -> str:
        return "WILDCARD"


@dataclass(frozen=True)
class Fixed:
    digit: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.digit, int)
            or isinstance(self.digit, bool)
            or self.digit not in DIGITS
        ):
            raise ValueError(f"Fixed digit must be 1..9, got {self.digit!r}")


Cell = Union[Empty, Fixed, Wildcard]

EMPTY = Empty()
WILDCARD = Wildcard()


def cell_from_literal(value: int) -> Cell:
    if isinstance(value, int) and not isinstance(value, bool):
        if value == EMPTY_LITERAL:
            return EMPTY
        if value == WILDCARD_LITERAL:
            return WILDCARD
        if value in DIGITS:
            return Fixed(value)
    raise InvalidPattern(
        f"Invalid cell value {value!r} (allowed: {EMPTY_LITERAL}, 1..9, "
        f"{WILDCARD_LITERAL} for a wildcard)"
    )


def cell_to_literal(cell: Cell) -> int:
    if isinstance(cell, Fixed):
        return cell.digit
    if isinstance(cell, Wildcard):
        return WILDCARD_LITERAL
    return EMPTY_LITERAL

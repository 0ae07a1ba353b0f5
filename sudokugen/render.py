# render.py

from __future__ import annotations

from typing import List

from .board import SIZE, Board
from .cells import (
    EMPTY_LITERAL,
    WILDCARD,
    Cell,
    Fixed,
    Wildcard,
    cell_to_literal,
)
from .exceptions import InvalidPattern

WILDCARD_GLYPH = "?"
_IGNORED = set(" \t\r\n|-+#")


def _glyph(cell: Cell) -> str:
    if isinstance(cell, Fixed):
        return str(cell.digit)
    if isinstance(cell, Wildcard):
        return WILDCARD_GLYPH
    return " "


def format_board(board: Board) -> str:
    """
    Fixed-width text grid:

        #-------#-------#-------#
        | 5 3   |   7   |       |
        ...
    """
    rule = "#" + "#".join(["-" * 7] * 3) + "#"
    lines: List[str] = []
    for r in range(SIZE):
        if r % 3 == 0:
            lines.append(rule)
        line = "|"
        for b in range(3):
            chunk = " ".join(_glyph(board.cell(r, c)) for c in range(b * 3, b * 3 + 3))
            line += " " + chunk + " |"
        lines.append(line)
    lines.append(rule)
    return "\n".join(lines)


def format_literal(board: Board) -> str:
    """Python source for the board's literal, suitable for pasting back in."""
    rows = board.to_literal()
    width = max(len(str(v)) for row in rows for v in row)
    body = ",\n".join(
        "    [" + ", ".join(str(v).rjust(width) for v in row) + "]" for row in rows
    )
    return "[\n" + body + ",\n]"


# --------------------------
# Compact 81-symbol form
# --------------------------


def parse_grid(text: str) -> Board:
    """
    Parse an 81-symbol grid: '.' or '0' empty, '1'-'9' fixed, '?' or '*'
    wildcard. Whitespace and box-drawing characters are ignored.
    """
    values: List[int] = []
    for ch in text:
        if ch in _IGNORED:
            continue
        if ch in ".0":
            values.append(EMPTY_LITERAL)
        elif ch in "?*":
            values.append(cell_to_literal(WILDCARD))
        elif ch in "123456789":
            values.append(int(ch))
        else:
            raise InvalidPattern(f"Unknown grid symbol {ch!r}")
    if len(values) != SIZE * SIZE:
        raise InvalidPattern(f"Grid must have 81 cells, got {len(values)}")
    return Board.from_literal([values[i:i + SIZE] for i in range(0, len(values), SIZE)])


def format_grid(board: Board) -> str:
    symbols = []
    for r, c in board.positions():
        cell = board.cell(r, c)
        if isinstance(cell, Fixed):
            symbols.append(str(cell.digit))
        elif isinstance(cell, Wildcard):
            symbols.append(WILDCARD_GLYPH)
        else:
            symbols.append(".")
    return "".join(symbols)

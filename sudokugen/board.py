# board.py

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .cells import (
    DIGITS,
    EMPTY,
    WILDCARD,
    Cell,
    Empty,
    Fixed,
    Wildcard,
    cell_from_literal,
    cell_to_literal,
)
from .exceptions import InvalidPattern, InvariantViolation

SIZE = 9
CELLS = SIZE * SIZE
# bits 1..9 set => (1 << 10) - 2
FULL_MASK = (1 << (SIZE + 1)) - 2

Pos = Tuple[int, int]
Literal = List[List[int]]


def block_index(row: int, col: int) -> int:
    return row // 3 + (col // 3) * 3


def mask_digits(mask: int) -> List[int]:
    """Digits whose bits are set in mask, ascending."""
    return [d for d in DIGITS if mask & (1 << d)]


class Placement:
    """
    Scoped assignment. Entering assigns ``digit`` at ``(row, col)``;
    leaving undoes it, on every exit path, unless ``keep()`` was called.

        with board.place(5, 0, 2) as placement:
            if not placement.placed:
                ...  # rule violation, nothing to undo
    """

    def __init__(self, board: Board, digit: int, row: int, col: int) -> None:
        self.board = board
        self.digit = digit
        self.row = row
        self.col = col
        self.prior: Optional[Cell] = None
        self.placed = False
        self._kept = False

    def keep(self) -> None:
        self._kept = True

    def __enter__(self) -> Placement:
        self.prior = self.board.cell(self.row, self.col)
        self.placed = self.board.assign(self.digit, self.row, self.col)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self.placed and not self._kept:
            self.board.unassign(self.prior, self.row, self.col)
            self.placed = False
        return False


class Board:
    """
    9x9 grid of cell states plus row / column / block bitmasks of the
    digits already committed in each group.

    The masks are derived state: they always mirror the ``Fixed`` cells,
    which is why ``assign`` and ``unassign`` are the only mutators.
    """

    def __init__(self) -> None:
        self._cells: List[List[Cell]] = [[EMPTY] * SIZE for _ in range(SIZE)]
        self._rows: List[int] = [0] * SIZE
        self._cols: List[int] = [0] * SIZE
        self._blocks: List[int] = [0] * SIZE

    # --------------------------
    # Construction / conversion
    # --------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_literal(cls, rows: Sequence[Sequence[int]]) -> Board:
        """
        Build a board from a 9x9 integer literal (0 = empty, 1..9 = fixed,
        WILDCARD_LITERAL = wildcard). Every fixed cell is replayed through
        ``assign``, so conflicting givens raise InvalidPattern.
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise InvalidPattern("Board literal must be 9 rows of 9 values.")

        board = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                cell = cell_from_literal(value)
                if isinstance(cell, Fixed):
                    if not board.assign(cell.digit, r, c):
                        raise InvalidPattern(
                            f"Conflict: value {cell.digit} appears twice in a "
                            f"row/column/block (cell {r + 1},{c + 1})."
                        )
                elif isinstance(cell, Wildcard):
                    board.unassign(WILDCARD, r, c)
        return board

    def to_literal(self) -> Literal:
        return [[cell_to_literal(cell) for cell in row] for row in self._cells]

    def copy(self) -> Board:
        other = Board.__new__(Board)
        other._cells = [row[:] for row in self._cells]
        other._rows = self._rows[:]
        other._cols = self._cols[:]
        other._blocks = self._blocks[:]
        return other

    def without_wildcards(self) -> Board:
        """Copy in which every wildcard is treated as an empty cell."""
        view = self.copy()
        for r, c in view.wildcards():
            view.unassign(EMPTY, r, c)
        return view

    # --------------------------
    # Mutation
    # --------------------------

    def assign(self, digit: Optional[int], row: int, col: int) -> bool:
        """
        Commit ``digit`` at (row, col). Returns False, leaving the board
        untouched, if the digit is already used in the row, column or
        block, or if the cell already holds a digit. ``digit=None``
        clears the cell.
        """
        current = self._cells[row][col]
        if digit is None:
            if isinstance(current, Fixed):
                self._clear_bits(current.digit, row, col)
            self._cells[row][col] = EMPTY
            return True

        if isinstance(digit, bool) or digit not in DIGITS:
            raise ValueError(f"Digit must be 1..9, got {digit!r}")
        if isinstance(current, Fixed):
            return False

        bit = 1 << digit
        b = block_index(row, col)
        if (self._rows[row] & bit) or (self._cols[col] & bit) or (self._blocks[b] & bit):
            return False

        self._cells[row][col] = Fixed(digit)
        self._rows[row] |= bit
        self._cols[col] |= bit
        self._blocks[b] |= bit
        return True

    def unassign(self, prior: Cell, row: int, col: int) -> None:
        """
        Undo an assignment: release the digit held at (row, col), if any,
        and restore the cell to ``prior``.
        """
        current = self._cells[row][col]
        if isinstance(current, Fixed):
            self._clear_bits(current.digit, row, col)
        self._cells[row][col] = EMPTY

        if isinstance(prior, Fixed):
            if not self.assign(prior.digit, row, col):
                raise InvariantViolation(
                    f"Cannot restore {prior.digit} at ({row},{col}): "
                    "digit already committed elsewhere in its group"
                )
        elif isinstance(prior, (Empty, Wildcard)):
            self._cells[row][col] = prior
        else:
            raise TypeError(f"Not a cell state: {prior!r}")

    def place(self, digit: int, row: int, col: int) -> Placement:
        return Placement(self, digit, row, col)

    def _clear_bits(self, digit: int, row: int, col: int) -> None:
        keep = ~(1 << digit)
        self._rows[row] &= keep
        self._cols[col] &= keep
        self._blocks[block_index(row, col)] &= keep

    # --------------------------
    # Queries
    # --------------------------

    def cell(self, row: int, col: int) -> Cell:
        return self._cells[row][col]

    def digit(self, row: int, col: int) -> Optional[int]:
        cell = self._cells[row][col]
        return cell.digit if isinstance(cell, Fixed) else None

    def row_mask(self, row: int) -> int:
        return self._rows[row]

    def col_mask(self, col: int) -> int:
        return self._cols[col]

    def block_mask(self, block: int) -> int:
        return self._blocks[block]

    def possible_set(self, row: int, col: int) -> int:
        used = self._rows[row] | self._cols[col] | self._blocks[block_index(row, col)]
        return FULL_MASK & ~used

    def candidates(self, row: int, col: int) -> List[int]:
        return mask_digits(self.possible_set(row, col))

    def positions(self) -> Iterator[Pos]:
        for r in range(SIZE):
            for c in range(SIZE):
                yield r, c

    def wildcards(self) -> List[Pos]:
        return [
            (r, c) for r, c in self.positions()
            if isinstance(self._cells[r][c], Wildcard)
        ]

    def first_unresolved(self, start: int = 0) -> Optional[int]:
        """Row-major index of the first non-fixed cell at or after start."""
        for index in range(start, CELLS):
            r, c = divmod(index, SIZE)
            if not isinstance(self._cells[r][c], Fixed):
                return index
        return None

    def first_wildcard(self, start: int = 0) -> Optional[int]:
        for index in range(start, CELLS):
            r, c = divmod(index, SIZE)
            if isinstance(self._cells[r][c], Wildcard):
                return index
        return None

    def is_complete(self) -> bool:
        return self.first_unresolved() is None

    def masks_consistent(self) -> bool:
        """Rebuild the masks from the cells and compare."""
        rows = [0] * SIZE
        cols = [0] * SIZE
        blocks = [0] * SIZE
        for r, c in self.positions():
            cell = self._cells[r][c]
            if not isinstance(cell, Fixed):
                continue
            bit = 1 << cell.digit
            b = block_index(r, c)
            if (rows[r] & bit) or (cols[c] & bit) or (blocks[b] & bit):
                return False
            rows[r] |= bit
            cols[c] |= bit
            blocks[b] |= bit
        return rows == self._rows and cols == self._cols and blocks == self._blocks

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._rows == other._rows
            and self._cols == other._cols
            and self._blocks == other._blocks
        )

    def __str__(self) -> str:
        from .render import format_board

        return format_board(self)

    def __repr__(self) -> str:
        filled = sum(1 for r, c in self.positions() if isinstance(self._cells[r][c], Fixed))
        return f"<Board fixed={filled} wildcards={len(self.wildcards())}>"

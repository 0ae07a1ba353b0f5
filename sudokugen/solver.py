# solver.py

from __future__ import annotations

import logging
from typing import Optional

from .board import SIZE, Board
from .cells import DIGITS
from .exceptions import UnsolvableSudoku
from .feasibility import scan_affected

log = logging.getLogger(__name__)


# --------------------------
# Backtracking solver with bitmask constraints and forward checking
# --------------------------


class Solver:
    """
    Counts the completions of a board, stopping once ``max_solutions``
    have been found.

    Cells are filled in row-major order with digits tried in ascending
    order, so the first solution reported is deterministic. The board is
    searched in place and is back in its original state when ``count``
    returns.
    """

    def __init__(
        self,
        board: Board,
        max_solutions: int = 1,
        capture: bool = False,
    ) -> None:
        if max_solutions < 1:
            raise ValueError("max_solutions must be at least 1")
        self.board = board
        self.max_solutions = max_solutions
        self.capture = capture

        self.solutions_found = 0
        self.first_solution: Optional[Board] = None
        self.nodes = 0

    def count(self) -> int:
        """
        Returns a value in [0, max_solutions]. Below max_solutions it is
        the exact number of solutions; equal to it means "at least".
        """
        self.solutions_found = 0
        self.first_solution = None
        self.nodes = 0
        self._dfs(0)
        log.debug(
            "Search finished: %d solution(s) (cutoff %d) after %d nodes",
            self.solutions_found,
            self.max_solutions,
            self.nodes,
        )
        return self.solutions_found

    def solve_one(self) -> Optional[Board]:
        self.capture = True
        self.count()
        return self.first_solution

    def _dfs(self, start: int) -> None:
        self.nodes += 1
        index = self.board.first_unresolved(start)
        if index is None:
            # solved
            self.solutions_found += 1
            if self.capture and self.first_solution is None:
                self.first_solution = self.board.copy()
            return

        row, col = divmod(index, SIZE)
        for digit in DIGITS:
            with self.board.place(digit, row, col) as placement:
                if not placement.placed:
                    continue
                if not scan_affected(self.board, row, col):
                    continue
                self._dfs(index + 1)
                if self.solutions_found >= self.max_solutions:
                    return


# --------------------------
# Convenience wrappers (work on a private copy)
# --------------------------


def count_solutions(board: Board, cutoff: int = 2) -> int:
    return Solver(board.copy(), max_solutions=cutoff).count()


def has_unique_solution(board: Board) -> bool:
    return count_solutions(board, cutoff=2) == 1


def solve(board: Board, assert_solvable: bool = False) -> Optional[Board]:
    """
    Return the first solution in search order, or None if there is none
    (raises UnsolvableSudoku instead when ``assert_solvable`` is set).
    """
    solution = Solver(board.copy(), max_solutions=1).solve_one()
    if solution is None and assert_solvable:
        raise UnsolvableSudoku("No solution found")
    return solution

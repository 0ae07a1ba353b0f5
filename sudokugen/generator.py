# generator.py

"""
Turn a pattern (fixed digits, blanks and wildcards) into a challenge
with exactly one solution by choosing a digit for every wildcard.

The solver is used as an oracle: first on the pattern with its wildcards
erased, and then at every leaf of the wildcard search.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .board import SIZE, Board, Literal
from .cells import DIGITS
from .exceptions import InvalidPattern, InvariantViolation
from .feasibility import has_dead_cell, scan_affected
from .solver import Solver

log = logging.getLogger(__name__)

Permutation = Tuple[int, ...]


@dataclass
class GeneratorConfig:
    seed: Optional[int] = None
    pool_size: int = 64
    # False accepts any solvable resolution (the older, weaker check)
    require_unique: bool = True


class PermutationPool:
    """
    A fixed set of random orderings of the digits 1..9, built once and
    reused for every wildcard the generator visits.
    """

    def __init__(self, size: int = 64, rng: Optional[random.Random] = None) -> None:
        if size < 1:
            raise ValueError("Permutation pool needs at least one entry")
        self.rng = rng if rng is not None else random.Random()
        self.permutations: List[Permutation] = [
            tuple(self.rng.sample(DIGITS, len(DIGITS))) for _ in range(size)
        ]

    def __len__(self) -> int:
        return len(self.permutations)

    def draw(self) -> Permutation:
        return self.permutations[self.rng.randrange(len(self.permutations))]


class ChallengeGenerator:
    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        pool: Optional[PermutationPool] = None,
    ) -> None:
        self.config = config if config is not None else GeneratorConfig()
        self.rng = random.Random(self.config.seed)
        self.pool = pool if pool is not None else PermutationPool(self.config.pool_size, self.rng)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, pattern: Board) -> Optional[Board]:
        """
        Return a copy of ``pattern`` with every wildcard replaced by a
        digit such that the result has exactly one solution, or None if
        no such assignment exists. ``pattern`` itself is not modified.
        """
        work = pattern.copy()
        view = work.without_wildcards()
        if has_dead_cell(view):
            log.info("Pattern rejected: a cell has no legal digit")
            return None

        solver = Solver(view, max_solutions=2, capture=True)
        count = solver.count()
        if count == 0:
            log.info("Pattern rejected: fixed cells have no completion")
            return None
        if count == 1:
            log.info("Fixed cells already force a unique solution")
            self._transfer(solver.first_solution, work)
            return work

        log.info("Fixed cells are ambiguous; resolving %d wildcard(s)", len(work.wildcards()))
        if self._resolve(work, 0):
            return work
        log.info("No wildcard assignment yields a unique solution")
        return None

    def generate_literal(self, rows: Sequence[Sequence[int]]) -> Optional[Literal]:
        try:
            pattern = Board.from_literal(rows)
        except InvalidPattern as e:
            log.warning("Pattern rejected: %s", e)
            return None
        challenge = self.generate(pattern)
        return challenge.to_literal() if challenge is not None else None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @staticmethod
    def _transfer(solution: Optional[Board], pattern: Board) -> None:
        if solution is None:
            raise InvariantViolation("Unique solution reported but none captured")
        for r, c in pattern.wildcards():
            digit = solution.digit(r, c)
            if digit is None or not pattern.assign(digit, r, c):
                raise InvariantViolation(
                    f"Solution digit {digit} rejected at ({r},{c}) while "
                    "filling wildcards from a unique solution"
                )

    def _resolve(self, pattern: Board, start: int) -> bool:
        index = pattern.first_wildcard(start)
        if index is None:
            return self._accept(pattern)

        row, col = divmod(index, SIZE)
        for digit in self.pool.draw():
            with pattern.place(digit, row, col) as placement:
                if not placement.placed:
                    continue
                if not scan_affected(pattern, row, col):
                    continue
                if self._resolve(pattern, index + 1):
                    placement.keep()
                    return True
        log.debug("Backtracking from wildcard at (%d,%d)", row, col)
        return False

    def _accept(self, pattern: Board) -> bool:
        """Leaf check on a private copy of the fully resolved pattern."""
        if self.config.require_unique:
            return Solver(pattern.copy(), max_solutions=2).count() == 1
        return Solver(pattern.copy(), max_solutions=1).count() == 1

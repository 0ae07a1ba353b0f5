from sudokugen.board import Board, Placement, block_index
from sudokugen.cells import EMPTY, WILDCARD, WILDCARD_LITERAL, Empty, Fixed, Wildcard
from sudokugen.exceptions import (
    InvalidPattern,
    InvariantViolation,
    SudokuError,
    UnsolvableSudoku,
)
from sudokugen.feasibility import has_dead_cell, scan_affected
from sudokugen.generator import ChallengeGenerator, GeneratorConfig, PermutationPool
from sudokugen.solver import Solver, count_solutions, has_unique_solution, solve

__all__ = [
    "Board",
    "Placement",
    "block_index",
    "EMPTY",
    "WILDCARD",
    "WILDCARD_LITERAL",
    "Empty",
    "Fixed",
    "Wildcard",
    "SudokuError",
    "InvalidPattern",
    "InvariantViolation",
    "UnsolvableSudoku",
    "has_dead_cell",
    "scan_affected",
    "Solver",
    "count_solutions",
    "has_unique_solution",
    "solve",
    "ChallengeGenerator",
    "GeneratorConfig",
    "PermutationPool",
]

import pytest

from sudokugen.board import Board
from sudokugen.exceptions import UnsolvableSudoku
from sudokugen.puzzles import CLASSIC_SOLUTION, PUZZLES
from sudokugen.solver import Solver, count_solutions, has_unique_solution, solve

from conftest import assert_valid_grid


def test_empty_board_is_solvable_with_valid_witness():
    solver = Solver(Board.empty(), max_solutions=1, capture=True)
    assert solver.count() == 1
    assert_valid_grid(solver.first_solution)


def test_first_solution_follows_row_major_ascending_order():
    solution = solve(Board.empty())
    assert [solution.digit(0, c) for c in range(9)] == list(range(1, 10))
    assert [solution.digit(1, c) for c in range(9)] == [4, 5, 6, 7, 8, 9, 1, 2, 3]


def test_empty_board_is_ambiguous():
    assert count_solutions(Board.empty(), cutoff=2) == 2


def test_count_saturates_at_cutoff():
    assert count_solutions(Board.empty(), cutoff=5) == 5


def test_classic_puzzle_is_unique(classic):
    solver = Solver(classic, max_solutions=2, capture=True)
    assert solver.count() == 1
    assert solver.first_solution.to_literal() == CLASSIC_SOLUTION
    assert has_unique_solution(classic)


def test_search_restores_board(classic):
    before = classic.copy()
    solver = Solver(classic, max_solutions=2)
    solver.count()
    assert classic == before
    assert solver.nodes > 0


def test_early_cutoff_restores_board():
    board = Board.empty()
    Solver(board, max_solutions=3).count()
    assert board == Board.empty()


def test_solved_board_counts_once(classic_solution):
    assert count_solutions(classic_solution, cutoff=2) == 1


def test_dead_board_has_no_solution(dead_board):
    assert count_solutions(dead_board, cutoff=2) == 0
    assert solve(dead_board) is None
    with pytest.raises(UnsolvableSudoku):
        solve(dead_board, assert_solvable=True)


def test_wildcards_are_searched_like_blanks():
    pattern = Board.from_literal(PUZZLES["forced"])
    solver = Solver(pattern, max_solutions=2, capture=True)
    assert solver.count() == 1
    assert solver.first_solution.to_literal() == CLASSIC_SOLUTION
    assert len(pattern.wildcards()) == 9


def test_swappable_rows_are_ambiguous():
    view = Board.from_literal(PUZZLES["swap"]).without_wildcards()
    assert count_solutions(view, cutoff=2) == 2


def test_cutoff_must_be_positive():
    with pytest.raises(ValueError):
        Solver(Board.empty(), max_solutions=0)

import pytest

from sudokugen.board import Board
from sudokugen.puzzles import CLASSIC, CLASSIC_SOLUTION


@pytest.fixture
def classic() -> Board:
    return Board.from_literal(CLASSIC)


@pytest.fixture
def classic_solution() -> Board:
    return Board.from_literal(CLASSIC_SOLUTION)


@pytest.fixture
def dead_board() -> Board:
    # row 0 holds 1..8 and column 8 already has its 9, so (0, 8) is dead
    rows = [[0] * 9 for _ in range(9)]
    rows[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    rows[1][8] = 9
    return Board.from_literal(rows)


def assert_valid_grid(board: Board) -> None:
    digits = set(range(1, 10))
    for i in range(9):
        assert {board.digit(i, c) for c in range(9)} == digits
        assert {board.digit(r, i) for r in range(9)} == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            block = {board.digit(br + dr, bc + dc) for dr in range(3) for dc in range(3)}
            assert block == digits

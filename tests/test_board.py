import pytest

from sudokugen.board import FULL_MASK, Board, block_index, mask_digits
from sudokugen.cells import EMPTY, WILDCARD, WILDCARD_LITERAL, Fixed
from sudokugen.exceptions import InvalidPattern, InvariantViolation


def _masks(board):
    return (
        [board.row_mask(i) for i in range(9)],
        [board.col_mask(i) for i in range(9)],
        [board.block_mask(i) for i in range(9)],
    )


def test_block_index_layout():
    assert block_index(0, 0) == 0
    assert block_index(2, 8) == 6
    assert block_index(4, 7) == 7
    assert block_index(8, 0) == 2
    assert block_index(8, 8) == 8


def test_empty_board_allows_everything():
    board = Board.empty()
    assert board.possible_set(4, 4) == FULL_MASK
    assert board.candidates(4, 4) == list(range(1, 10))


def test_assign_updates_masks():
    board = Board()
    assert board.assign(5, 3, 7)
    bit = 1 << 5
    assert board.cell(3, 7) == Fixed(5)
    assert board.row_mask(3) & bit
    assert board.col_mask(7) & bit
    assert board.block_mask(block_index(3, 7)) & bit
    assert 5 not in board.candidates(3, 7)
    # a peer in the same block loses 5 as well
    assert 5 not in board.candidates(4, 6)
    assert 5 in board.candidates(0, 0)


@pytest.mark.parametrize("row, col", [(0, 8), (8, 0), (1, 1)])
def test_assign_conflict_leaves_board_untouched(row, col):
    board = Board()
    board.assign(4, 0, 0)
    before = board.copy()
    assert not board.assign(4, row, col)
    assert board == before


def test_assign_over_fixed_cell_fails():
    board = Board()
    board.assign(4, 0, 0)
    assert not board.assign(6, 0, 0)
    assert board.digit(0, 0) == 4


def test_assign_none_clears_cell_and_bits():
    board = Board()
    board.assign(4, 2, 2)
    assert board.assign(None, 2, 2)
    assert board.cell(2, 2) is EMPTY
    assert _masks(board) == _masks(Board())


def test_assign_rejects_non_digit():
    with pytest.raises(ValueError):
        Board().assign(0, 0, 0)


def test_unassign_restores_exact_masks(classic):
    before = _masks(classic)
    assert classic.assign(4, 0, 2)
    classic.unassign(EMPTY, 0, 2)
    assert _masks(classic) == before
    assert classic.cell(0, 2) is EMPTY


def test_unassign_restores_wildcard():
    board = Board.from_literal([[WILDCARD_LITERAL] + [0] * 8] + [[0] * 9 for _ in range(8)])
    assert board.assign(3, 0, 0)
    board.unassign(WILDCARD, 0, 0)
    assert board.cell(0, 0) is WILDCARD
    assert board.row_mask(0) == 0


def test_unassign_recommits_fixed_prior():
    board = Board()
    board.assign(2, 0, 0)
    board.unassign(Fixed(7), 0, 0)
    assert board.digit(0, 0) == 7
    assert mask_digits(board.row_mask(0)) == [7]


def test_unassign_fixed_prior_conflict_is_invariant_violation():
    board = Board()
    board.assign(5, 0, 0)
    with pytest.raises(InvariantViolation):
        board.unassign(Fixed(5), 0, 1)


def test_placement_undoes_on_exit(classic):
    before = classic.copy()
    with classic.place(4, 0, 2) as placement:
        assert placement.placed
        assert classic.digit(0, 2) == 4
    assert classic == before


def test_placement_undoes_on_exception(classic):
    before = classic.copy()
    with pytest.raises(RuntimeError):
        with classic.place(4, 0, 2):
            raise RuntimeError("boom")
    assert classic == before


def test_placement_keep(classic):
    with classic.place(4, 0, 2) as placement:
        placement.keep()
    assert classic.digit(0, 2) == 4
    assert classic.masks_consistent()


def test_failed_placement_has_nothing_to_undo(classic):
    before = classic.copy()
    with classic.place(5, 0, 2) as placement:
        assert not placement.placed
    assert classic == before


def test_from_literal_rejects_repeated_given():
    rows = [[0] * 9 for _ in range(9)]
    rows[0][0] = 5
    rows[0][6] = 5
    with pytest.raises(InvalidPattern):
        Board.from_literal(rows)


@pytest.mark.parametrize(
    "rows",
    [
        [[0] * 9 for _ in range(8)],
        [[0] * 8 for _ in range(9)],
        [[10] + [0] * 8] + [[0] * 9 for _ in range(8)],
    ],
)
def test_from_literal_rejects_bad_shape_or_value(rows):
    with pytest.raises(InvalidPattern):
        Board.from_literal(rows)


def test_literal_round_trip_keeps_cells_and_masks():
    rows = [[0] * 9 for _ in range(9)]
    rows[0][:3] = [1, WILDCARD_LITERAL, 3]
    rows[4][4] = 9
    rows[8][8] = WILDCARD_LITERAL
    board = Board.from_literal(rows)
    again = Board.from_literal(board.to_literal())
    assert again == board
    assert again.to_literal() == rows
    assert again.masks_consistent()


def test_without_wildcards_is_a_view_copy():
    rows = [[WILDCARD_LITERAL] * 9] + [[0] * 9 for _ in range(8)]
    rows[1][0] = 4
    pattern = Board.from_literal(rows)
    view = pattern.without_wildcards()
    assert view.wildcards() == []
    assert len(pattern.wildcards()) == 9
    assert view.cell(0, 0) is EMPTY
    assert view.digit(1, 0) == 4


def test_first_unresolved_and_wildcard(classic):
    assert classic.first_unresolved() == 2
    assert classic.first_unresolved(5) == 5
    assert classic.first_wildcard() is None
    assert not classic.is_complete()


def test_copy_is_independent(classic):
    other = classic.copy()
    other.assign(4, 0, 2)
    assert classic.cell(0, 2) is EMPTY
    assert other != classic


def test_masks_consistent(classic_solution):
    assert classic_solution.masks_consistent()
    assert classic_solution.is_complete()


def test_assign_rejects_bool():
    board = Board()
    with pytest.raises(ValueError):
        board.assign(True, 0, 0)
    assert board == Board()


def test_placement_reads_prior_on_entry():
    board = Board()
    placement = board.place(3, 0, 0)
    assert placement.prior is None
    board.unassign(WILDCARD, 0, 0)
    with placement:
        assert placement.prior is WILDCARD
    assert board.cell(0, 0) is WILDCARD

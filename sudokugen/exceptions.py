# exceptions.py


class SudokuError(Exception):
    pass


class InvalidPattern(SudokuError, ValueError):
    """Raised for malformed literals and for givens that break a rule."""


class UnsolvableSudoku(SudokuError):
    pass


class InvariantViolation(SudokuError):
    """
    The board state contradicts itself (masks out of sync with cells, or
    a forced value was rejected). This is a defect, not bad puzzle data.
    """

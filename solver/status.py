"""Status classification: invalid / complete / N open cells."""

from __future__ import annotations

from types_sudoku import Status

from .board import Board
from .validator import is_valid


def classify(board: Board) -> Status:
    # Validity first: a full grid with a duplicate is INVALID, never COMPLETE.
    if not is_valid(board):
        return Status.invalid()
    open_count = board.open_count
    if open_count == 0:
        return Status.complete()
    return Status.incomplete(open_count)

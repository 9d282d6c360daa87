# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""A (row, col) coordinate, 0-based."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Move(TypedDict, total=False):
    """A single deduction step recorded while solving."""

    technique: str  # 'naked_single', 'hidden_single', 'locked_candidates_pointing', ...
    type: str  # 'placement' or 'elimination'
    digit: int  # the digit being placed or eliminated
    cell: str  # for placements, target cell (e.g., 'r4c7')
    eliminate: list[str]  # for eliminations, cells the digit was cleared from
    explanation: dict[str, Any]  # {'why': ..., 'units': {...}}
    highlights: dict[str, Any]  # row/col/box/cells involved


class StatusKind(str, Enum):
    INVALID = "invalid"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class Status:
    """Completion status of a grid; `code` is the integer wire encoding."""

    kind: StatusKind
    open_count: int = 0

    @classmethod
    def invalid(cls) -> Status:
        return cls(StatusKind.INVALID)

    @classmethod
    def complete(cls) -> Status:
        return cls(StatusKind.COMPLETE)

    @classmethod
    def incomplete(cls, open_count: int) -> Status:
        if open_count <= 0:
            raise ValueError(f"incomplete status needs open cells, got {open_count}")
        return cls(StatusKind.INCOMPLETE, open_count)

    @property
    def code(self) -> int:
        """-1 invalid, 0 complete, N = number of open cells."""
        if self.kind is StatusKind.INVALID:
            return -1
        if self.kind is StatusKind.COMPLETE:
            return 0
        return self.open_count

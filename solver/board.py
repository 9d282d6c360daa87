"""Board: the 9x9 cell matrix with fixed/empty distinction and per-cell candidates.

A cell is either filled (value 1..9, no candidates) or empty (value 0 and a
candidate set). Candidates start as 1..9 minus the peers' values and only ever
shrink; cells only go from empty to filled.
"""

from __future__ import annotations

from typing import Any, Sequence

from types_sudoku import Cell, Grid

from .errors import InvalidPlacementError, MalformedInputError
from .solver_core import ALL_CELLS, DIGITS, peers_of, rc_to_key

_BLANKS = (None, 0, "", "0", ".")


def _coerce_value(v: Any, r: int, c: int) -> int:
    """Map one raw cell value to 0 (empty) or 1..9."""
    if isinstance(v, bool):
        raise MalformedInputError(f"r{r + 1}c{c + 1}: boolean is not a Sudoku value", {"cell": rc_to_key(r, c)})
    if v is not None and not isinstance(v, (int, str)):
        raise MalformedInputError(
            f"r{r + 1}c{c + 1}: {type(v).__name__} is not a Sudoku value", {"cell": rc_to_key(r, c), "value": repr(v)}
        )
    if isinstance(v, str):
        v = v.strip()
    if v in _BLANKS:
        return 0
    if isinstance(v, str) and len(v) == 1 and v in "123456789":
        return int(v)
    if isinstance(v, int) and 1 <= v <= 9:
        return v
    raise MalformedInputError(
        f"r{r + 1}c{c + 1}: value {v!r} is outside 1..9",
        {"cell": rc_to_key(r, c), "value": repr(v)},
    )


class Board:
    """A single, exclusively owned Sudoku state."""

    def __init__(self, values: Sequence[Sequence[Any]]):
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence) or len(values) != 9:
            raise MalformedInputError("grid must have exactly 9 rows", {"rows": _safe_len(values)})
        grid: Grid = []
        for r, row in enumerate(values):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence) or len(row) != 9:
                raise MalformedInputError(
                    f"row {r + 1} must have exactly 9 cells", {"row": r + 1, "cells": _safe_len(row)}
                )
            grid.append([_coerce_value(v, r, c) for c, v in enumerate(row)])

        self._values = grid
        self._cands: list[list[set[int]]] = [[set() for _ in range(9)] for _ in range(9)]
        for r, c in ALL_CELLS:
            if grid[r][c] == 0:
                used = {grid[pr][pc] for pr, pc in peers_of(r, c)}
                self._cands[r][c] = set(DIGITS) - used
        self.contradiction = False

    @classmethod
    def empty(cls) -> Board:
        return cls([[0] * 9 for _ in range(9)])

    @classmethod
    def from_line(cls, text: str) -> Board:
        """Parse an 81-character puzzle line ('0' or '.' for blanks)."""
        line = text.strip()
        if len(line) != 81:
            raise MalformedInputError(f"puzzle line must have 81 characters, got {len(line)}")
        bad = [ch for ch in line if ch not in "0123456789."]
        if bad:
            raise MalformedInputError(f"unexpected characters in puzzle line: {''.join(sorted(set(bad)))!r}")
        return cls([list(line[i : i + 9]) for i in range(0, 81, 9)])

    # --- reads ---------------------------------------------------------------

    def value(self, r: int, c: int) -> int:
        return self._values[r][c]

    def is_filled(self, r: int, c: int) -> bool:
        return self._values[r][c] != 0

    def candidates(self, r: int, c: int) -> frozenset[int]:
        """Current candidates of (r, c); empty for filled cells."""
        return frozenset(self._cands[r][c])

    def has_candidate(self, r: int, c: int, value: int) -> bool:
        return value in self._cands[r][c]

    def candidate_count(self, r: int, c: int) -> int:
        return len(self._cands[r][c])

    def empty_cells(self) -> list[Cell]:
        """Empty cells in row-major order."""
        return [(r, c) for r, c in ALL_CELLS if self._values[r][c] == 0]

    @property
    def open_count(self) -> int:
        return sum(row.count(0) for row in self._values)

    def is_complete(self) -> bool:
        return self.open_count == 0

    def to_grid(self) -> Grid:
        return [row[:] for row in self._values]

    # --- mutation ------------------------------------------------------------

    def place(self, r: int, c: int, value: int) -> None:
        """Fill (r, c) with `value` and drop it from the empty peers' candidates."""
        if self._values[r][c] != 0:
            raise InvalidPlacementError(
                f"{rc_to_key(r, c)} is already filled with {self._values[r][c]}",
                {"cell": rc_to_key(r, c), "digit": value},
            )
        if value not in self._cands[r][c]:
            raise InvalidPlacementError(
                f"{value} is not a candidate of {rc_to_key(r, c)}",
                {"cell": rc_to_key(r, c), "digit": value, "candidates": sorted(self._cands[r][c])},
            )
        self._values[r][c] = value
        self._cands[r][c] = set()
        for pr, pc in peers_of(r, c):
            if self._values[pr][pc] == 0:
                self._cands[pr][pc].discard(value)

    def eliminate(self, r: int, c: int, value: int) -> bool:
        """Remove one candidate from an empty cell. Returns True if it was present."""
        cands = self._cands[r][c]
        if value in cands:
            cands.discard(value)
            return True
        return False

    def clone(self) -> Board:
        other = Board.__new__(Board)
        other._values = [row[:] for row in self._values]
        other._cands = [[set(s) for s in row] for row in self._cands]
        other.contradiction = self.contradiction
        return other

    def adopt(self, other: Board) -> None:
        """Take over another board's state (used to write a search result back in place)."""
        self._values = [row[:] for row in other._values]
        self._cands = [[set(s) for s in row] for row in other._cands]
        self.contradiction = other.contradiction

    def __str__(self) -> str:
        lines = []
        for r in range(9):
            if r % 3 == 0 and r != 0:
                lines.append("------+-------+------")
            cells = [str(v) if v else "." for v in self._values[r]]
            lines.append(" | ".join(" ".join(cells[i : i + 3]) for i in (0, 3, 6)))
        return "\n".join(lines)

    def __repr__(self) -> str:
        line = "".join(str(v) if v else "." for row in self._values for v in row)
        return f"Board({line!r})"


def _safe_len(obj: Any) -> int | None:
    try:
        return len(obj)
    except TypeError:
        return None


def as_board(grid: Board | Sequence[Sequence[Any]]) -> Board:
    """Build a fresh Board from raw rows (a Board is cloned, never shared)."""
    if isinstance(grid, Board):
        return grid.clone()
    return Board(grid)

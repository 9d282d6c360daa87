"""Constraint index: coordinate math, peers and the 27 units (rows, columns, boxes)."""

# solver_core.py
# Coordinates are 0-based (row, col) in 0..8.
# Human-facing keys and labels are 1-based: 'r1c1', 'r1', 'c1', 'b1'.
from __future__ import annotations

from types_sudoku import Cell

DIGITS = tuple(range(1, 10))


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r <= 8 and 0 <= c <= 8


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def key_to_rc(key: str) -> Cell:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r - 1, c - 1)


def box_of(r: int, c: int) -> int:
    return 3 * (r // 3) + (c // 3)


def row_cells(r: int) -> list[Cell]:
    return [(r, c) for c in range(9)]


def col_cells(c: int) -> list[Cell]:
    return [(r, c) for r in range(9)]


def box_cells(b: int) -> list[Cell]:
    r0 = 3 * (b // 3)
    c0 = 3 * (b % 3)
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


def _peers(r: int, c: int) -> frozenset[Cell]:
    ps = set(row_cells(r)) | set(col_cells(c)) | set(box_cells(box_of(r, c)))
    ps.discard((r, c))
    return frozenset(ps)


# Built once; read-only and shared by every board.
_PEERS: dict[Cell, frozenset[Cell]] = {(r, c): _peers(r, c) for r in range(9) for c in range(9)}

ALL_CELLS: tuple[Cell, ...] = tuple((r, c) for r in range(9) for c in range(9))

# (label, cells) in fixed order: rows, then columns, then boxes.
UNITS: tuple[tuple[str, tuple[Cell, ...]], ...] = (
    tuple((f"r{r + 1}", tuple(row_cells(r))) for r in range(9))
    + tuple((f"c{c + 1}", tuple(col_cells(c))) for c in range(9))
    + tuple((f"b{b + 1}", tuple(box_cells(b))) for b in range(9))
)


def peers_of(r: int, c: int) -> frozenset[Cell]:
    """Return the 20 cells sharing a row, column or box with (r, c)."""
    if not in_bounds(r, c):
        raise IndexError(f"cell ({r}, {c}) is outside the 9x9 grid")
    return _PEERS[(r, c)]


def unit_kind(label: str) -> str:
    return {"r": "row", "c": "col", "b": "box"}[label[0]]

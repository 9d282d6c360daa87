"""Validity checks: peer uniqueness on a Board, and a unit-by-unit report on raw grids."""

from __future__ import annotations

from typing import Dict

from types_sudoku import Grid

from .board import Board
from .solver_core import ALL_CELLS, UNITS, peers_of, rc_to_key


def is_valid(board: Board) -> bool:
    """True when no two filled peers share a value. Stops at the first clash."""
    for r, c in ALL_CELLS:
        v = board.value(r, c)
        if v == 0:
            continue
        for pr, pc in peers_of(r, c):
            if board.value(pr, pc) == v:
                return False
    return True


def _duplicates_in_unit(vals):
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def sanity_check(original: Grid, current: Grid | None = None) -> Dict:
    """Report duplicated digits per unit and givens overwritten in `current`.

    Both grids are raw 9x9 rows; `current` defaults to `original`.
    """
    orig = Board(original).to_grid()
    cur = orig if current is None else Board(current).to_grid()
    issues = []
    for r, c in ALL_CELLS:
        if orig[r][c] != 0 and cur[r][c] not in (0, orig[r][c]):
            issues.append(
                {"type": "given_overwritten", "cell": rc_to_key(r, c), "given": orig[r][c], "found": cur[r][c]}
            )
    for label, cells in UNITS:
        vals = [cur[r][c] for r, c in cells]
        dups = _duplicates_in_unit(vals)
        if dups:
            bad = [rc_to_key(r, c) for r, c in cells if cur[r][c] in dups]
            issues.append({"type": "duplicate", "unit": label, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}

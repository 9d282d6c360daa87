"""Human-style deduction run to a fixed point.

Techniques, in priority order:
- naked singles (placements), cells in row-major order
- hidden singles (placements), units rows -> columns -> boxes, digits ascending
- locked candidates, pointing & claiming (eliminations), only at level 'locked'
  and only once the singles are exhausted

Every placement happens immediately, so later checks in the same pass see it.
"""

from __future__ import annotations

from types_sudoku import Move

from .board import Board
from .solver_core import (
    ALL_CELLS,
    DIGITS,
    UNITS,
    box_cells,
    box_of,
    col_cells,
    key_to_rc,
    rc_to_key,
    row_cells,
    unit_kind,
)
from .validator import is_valid

# Technique levels, easiest first; each level includes the previous ones.
LEVELS = ("singles", "locked")
DEFAULT_LEVEL = "singles"

_UNIT_NAMES = {"row": "row", "col": "column", "box": "box"}


def level_index(max_difficulty: str) -> int:
    try:
        return LEVELS.index(max_difficulty)
    except ValueError:
        raise ValueError(f"unknown max_difficulty {max_difficulty!r}; expected one of {', '.join(LEVELS)}") from None


def _record(trace: list[Move] | None, move: Move) -> None:
    if trace is not None:
        trace.append(move)


def place_naked_singles(board: Board, trace: list[Move] | None = None) -> int:
    """Place every empty cell that has exactly one candidate. Returns the number placed."""
    placed = 0
    for r, c in ALL_CELLS:
        if board.is_filled(r, c):
            continue
        n = board.candidate_count(r, c)
        if n == 0:
            board.contradiction = True
            return placed
        if n > 1:
            continue
        (d,) = board.candidates(r, c)
        board.place(r, c, d)
        placed += 1
        key = rc_to_key(r, c)
        _record(
            trace,
            {
                "technique": "naked_single",
                "type": "placement",
                "cell": key,
                "digit": d,
                "explanation": {
                    "why": f"Only one candidate fits {key}.",
                    "units": {"row": f"r{r + 1}", "col": f"c{c + 1}", "box": f"b{box_of(r, c) + 1}"},
                },
                "highlights": {"cells": [key]},
            },
        )
    return placed


def place_hidden_singles(board: Board, trace: list[Move] | None = None) -> int:
    """Place each digit that has a single possible cell in some unit. Returns the number placed."""
    placed = 0
    for label, cells in UNITS:
        present = {board.value(r, c) for r, c in cells}
        for d in DIGITS:
            if d in present:
                continue
            spots = [(r, c) for r, c in cells if board.has_candidate(r, c, d)]
            if not spots:
                # d is missing from this unit and cannot go anywhere in it
                board.contradiction = True
                return placed
            if len(spots) > 1:
                continue
            r, c = spots[0]
            board.place(r, c, d)
            placed += 1
            key = rc_to_key(r, c)
            kind = unit_kind(label)
            _record(
                trace,
                {
                    "technique": "hidden_single",
                    "type": "placement",
                    "cell": key,
                    "digit": d,
                    "explanation": {
                        "why": f"Digit {d} appears in only one cell in {_UNIT_NAMES[kind]} {label[1:]}.",
                        "units": {kind: label},
                    },
                    "highlights": {"cells": [key], kind: label},
                },
            )
    return placed


def find_locked_candidates_pointing(board: Board) -> list[Move]:
    """If in a box, a digit's candidates lie in a single row (or column), eliminate that digit
    from the rest of that row (or column) outside the box.
    """
    moves = []
    for b in range(9):
        cells = box_cells(b)
        for d in DIGITS:
            locs = [(r, c) for (r, c) in cells if board.has_candidate(r, c, d)]
            if len(locs) < 2:
                continue
            rows = {r for r, _ in locs}
            cols = {c for _, c in locs}
            lines = []
            if len(rows) == 1:
                r = rows.pop()
                lines.append(("row", f"r{r + 1}", row_cells(r)))
            if len(cols) == 1:
                c = cols.pop()
                lines.append(("col", f"c{c + 1}", col_cells(c)))
            for kind, line, line_cells in lines:
                elim = [
                    rc_to_key(rr, cc)
                    for rr, cc in line_cells
                    if (rr, cc) not in cells and board.has_candidate(rr, cc, d)
                ]
                if not elim:
                    continue
                in_box = [rc_to_key(r, c) for r, c in locs]
                moves.append(
                    {
                        "technique": "locked_candidates_pointing",
                        "type": "elimination",
                        "digit": d,
                        "eliminate": elim,
                        "explanation": {
                            "why": f"In box {b + 1}, digit {d}'s candidates lie only in {_UNIT_NAMES[kind]} "
                            f"{line[1:]}. Eliminate {d} from {_UNIT_NAMES[kind]} {line[1:]} outside this box.",
                            "units": {"box": f"b{b + 1}", kind: line},
                        },
                        "highlights": {"box": f"b{b + 1}", kind: line, "cells": elim, "in_box": in_box},
                    }
                )
    return moves


def find_locked_candidates_claiming(board: Board) -> list[Move]:
    """If in a row/column, a digit's candidates are confined to a single box, eliminate that digit
    from other cells in that box.
    """
    moves = []
    for label, cells in UNITS[:18]:
        kind = unit_kind(label)
        for d in DIGITS:
            locs = [(r, c) for r, c in cells if board.has_candidate(r, c, d)]
            if len(locs) < 2:
                continue
            boxes = {box_of(r, c) for r, c in locs}
            if len(boxes) != 1:
                continue
            b = boxes.pop()
            elim = [
                rc_to_key(rr, cc)
                for rr, cc in box_cells(b)
                if (rr, cc) not in cells and board.has_candidate(rr, cc, d)
            ]
            if not elim:
                continue
            moves.append(
                {
                    "technique": "locked_candidates_claiming",
                    "type": "elimination",
                    "digit": d,
                    "eliminate": elim,
                    "explanation": {
                        "why": f"In {_UNIT_NAMES[kind]} {label[1:]}, digit {d}'s candidates are confined to "
                        f"box {b + 1}. Eliminate {d} from other cells in box {b + 1}.",
                        "units": {"box": f"b{b + 1}", kind: label},
                    },
                    "highlights": {
                        "box": f"b{b + 1}",
                        kind: label,
                        "cells": elim,
                        "in_line": [rc_to_key(r, c) for r, c in locs],
                    },
                }
            )
    return moves


def apply_eliminations(board: Board, moves: list[Move], trace: list[Move] | None = None) -> int:
    """Apply elimination moves; only moves that removed something are traced. Returns candidates removed."""
    removed = 0
    for move in moves:
        changed = 0
        for key in move["eliminate"]:
            r, c = key_to_rc(key)
            changed += board.eliminate(r, c, move["digit"])
        if changed:
            removed += changed
            _record(trace, move)
    return removed


def solve_logically(board: Board, max_difficulty: str = DEFAULT_LEVEL, trace: list[Move] | None = None) -> Board:
    """Deduce placements until a pass changes nothing. Mutates and returns `board`.

    An invalid board, or one where deduction runs into an empty candidate set,
    gets `board.contradiction = True`; cells already placed are left as they are.
    """
    level = level_index(max_difficulty)
    if board.contradiction:
        return board
    if not is_valid(board):
        board.contradiction = True
        return board

    while True:
        progress = place_naked_singles(board, trace)
        if not board.contradiction:
            progress += place_hidden_singles(board, trace)
        if board.contradiction:
            break
        if progress:
            continue
        if level >= LEVELS.index("locked"):
            moves = find_locked_candidates_pointing(board) + find_locked_candidates_claiming(board)
            if apply_eliminations(board, moves, trace):
                continue
        break
    return board

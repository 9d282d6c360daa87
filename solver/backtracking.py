"""Depth-first search over guesses, with deduction as pruning at every branch.

Recursion is replaced by an explicit stack of frames; the branch order is the
same as the recursive version (most constrained cell first, digits ascending).
"""

from __future__ import annotations

from dataclasses import dataclass

from types_sudoku import Cell

from .board import Board
from .techniques import DEFAULT_LEVEL, solve_logically
from .validator import is_valid


@dataclass
class SearchStats:
    nodes: int = 0  # branches tried (clone + place + deduce)
    backtracks: int = 0  # branches discarded as contradictory
    max_depth: int = 0


@dataclass
class _Frame:
    board: Board
    cell: Cell
    values: list[int]
    next_index: int = 0
    depth: int = 1


def choose_cell(board: Board) -> Cell | None:
    """Empty cell with the fewest candidates; ties go to the first in row-major order."""
    best = None
    best_n = 10
    for r, c in board.empty_cells():
        n = board.candidate_count(r, c)
        if n < best_n:
            best, best_n = (r, c), n
            if n <= 1:
                break
    return best


def _frame_for(board: Board, depth: int) -> _Frame:
    r, c = choose_cell(board)
    return _Frame(board, (r, c), sorted(board.candidates(r, c)), depth=depth)


def search(board: Board, max_difficulty: str = DEFAULT_LEVEL, stats: SearchStats | None = None) -> Board | None:
    """Return a solved copy of `board`, or None when every branch fails. `board` is not touched."""
    if stats is None:
        stats = SearchStats()
    if board.contradiction:
        return None
    if board.is_complete():
        return board.clone() if is_valid(board) else None

    stack = [_frame_for(board, 1)]
    while stack:
        frame = stack[-1]
        if frame.next_index >= len(frame.values):
            stack.pop()
            continue
        value = frame.values[frame.next_index]
        frame.next_index += 1
        stats.nodes += 1
        stats.max_depth = max(stats.max_depth, frame.depth)

        branch = frame.board.clone()
        r, c = frame.cell
        branch.place(r, c, value)
        solve_logically(branch, max_difficulty)
        if branch.contradiction or not is_valid(branch):
            stats.backtracks += 1
            continue
        if branch.is_complete():
            return branch
        stack.append(_frame_for(branch, frame.depth + 1))
    return None


def solve_with_guessing(board: Board, max_difficulty: str = DEFAULT_LEVEL, stats: SearchStats | None = None) -> Board:
    """Deduce, then guess where deduction stalls. Mutates and returns `board`.

    When no solution exists the board keeps whatever deduction managed; that is
    an outcome, not an error (see status.classify).
    """
    solve_logically(board, max_difficulty)
    if board.contradiction or board.is_complete():
        return board
    solution = search(board, max_difficulty, stats)
    if solution is not None:
        board.adopt(solution)
    return board

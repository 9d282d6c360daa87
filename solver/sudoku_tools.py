"""Service-facing operations: raw 9x9 grid in, raw grid (or status code) out.

Every call builds its own Board, so calls never share state. These are the
functions the HTTP adapter and the CLI call; neither reaches into the engine.
"""

# sudoku_tools.py
from __future__ import annotations

from typing import Any, Dict, Sequence

from types_sudoku import Candidates, Grid, Move

from .backtracking import SearchStats, solve_with_guessing
from .board import Board, as_board
from .solver_core import rc_to_key
from .status import classify
from .techniques import DEFAULT_LEVEL, solve_logically
from .validator import sanity_check

RawGrid = Sequence[Sequence[Any]]

__all__ = [
    "solve_sudoku",
    "solve_sudoku_guessing",
    "validate_sudoku",
    "ping",
    "compute_candidates_tool",
    "solve_with_trace",
    "sanity_check",
]


def solve_sudoku(grid: RawGrid, max_difficulty: str = DEFAULT_LEVEL) -> Grid:
    """Pure logical solve; the result may still contain empty cells (0)."""
    return solve_logically(as_board(grid), max_difficulty).to_grid()


def solve_sudoku_guessing(grid: RawGrid, max_difficulty: str = DEFAULT_LEVEL) -> Grid:
    """Logical solve plus backtracking; fully solved whenever the puzzle is valid and solvable."""
    return solve_with_guessing(as_board(grid), max_difficulty).to_grid()


def validate_sudoku(grid: RawGrid) -> int:
    """-1 if invalid, 0 if complete, the number of open cells if incomplete but valid."""
    return classify(as_board(grid)).code


def ping() -> bool:
    return True


def compute_candidates_tool(current: RawGrid) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'r1c2':[1,2,5], ...}."""
    board = as_board(current)
    cands: Candidates = {rc_to_key(r, c): sorted(board.candidates(r, c)) for r, c in board.empty_cells()}
    return {"candidates": cands}


def solve_with_trace(grid: RawGrid, max_difficulty: str = DEFAULT_LEVEL, guessing: bool = False) -> Dict:
    """Solve and report the deduction steps taken before any guessing.

    Returns {'grid', 'moves', 'status', 'search'}; 'search' is None unless guessing ran.
    """
    board: Board = as_board(grid)
    moves: list[Move] = []
    solve_logically(board, max_difficulty, trace=moves)
    search = None
    if guessing and not board.contradiction and not board.is_complete():
        stats = SearchStats()
        solve_with_guessing(board, max_difficulty, stats)
        search = {"nodes": stats.nodes, "backtracks": stats.backtracks, "max_depth": stats.max_depth}
    return {"grid": board.to_grid(), "moves": moves, "status": classify(board).code, "search": search}

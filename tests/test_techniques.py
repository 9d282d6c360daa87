# tests/test_techniques.py
import pytest

from puzzles import CLASSIC, CLASSIC_SOLUTION, HARD, HARD_SOLUTION
from solver.board import Board
from solver.sudoku_tools import validate_sudoku
from solver.techniques import (
    apply_eliminations,
    find_locked_candidates_claiming,
    find_locked_candidates_pointing,
    solve_logically,
)


def _grid(cells):
    g = [[0] * 9 for _ in range(9)]
    for (r, c), v in cells.items():
        g[r][c] = v
    return g


def test_naked_single_is_placed():
    g = _grid({(0, c): c + 1 for c in range(8)})
    trace = []
    board = solve_logically(Board(g), trace=trace)
    assert board.value(0, 8) == 9
    m0 = trace[0]
    assert m0["technique"] == "naked_single"
    assert m0["type"] == "placement"
    assert (m0["cell"], m0["digit"]) == ("r1c9", 9)


def test_hidden_single_is_placed():
    # r1c1 keeps all nine candidates, but it is the only place for a 1 in row 1
    g = _grid({(1, 4): 1, (2, 7): 1, (4, 1): 1, (7, 2): 1})
    board = Board(g)
    assert len(board.candidates(0, 0)) == 9
    trace = []
    solve_logically(board, trace=trace)
    assert board.value(0, 0) == 1
    assert trace[0]["technique"] == "hidden_single"
    assert (trace[0]["cell"], trace[0]["digit"]) == ("r1c1", 1)
    assert trace[0]["highlights"]["row"] == "r1"


def test_classic_puzzle_solves_by_logic_alone():
    board = solve_logically(Board(CLASSIC))
    assert not board.contradiction
    assert board.to_grid() == CLASSIC_SOLUTION


def test_fixed_point_is_stable(hard_grid):
    board = solve_logically(Board(hard_grid))
    once = board.to_grid()
    trace = []
    solve_logically(board, trace=trace)
    assert board.to_grid() == once
    assert trace == []
    assert board.open_count > 0


@pytest.mark.parametrize("level", ["singles", "locked"])
def test_deduction_is_monotonic_and_sound(hard_grid, level):
    board = solve_logically(Board(hard_grid), max_difficulty=level)
    assert not board.contradiction
    for r in range(9):
        for c in range(9):
            if hard_grid[r][c]:
                assert board.value(r, c) == hard_grid[r][c]
            if board.is_filled(r, c):
                assert board.value(r, c) == HARD_SOLUTION[r][c]
            else:
                assert HARD_SOLUTION[r][c] in board.candidates(r, c)


def test_deduction_is_deterministic():
    a, b = [], []
    solve_logically(Board.from_line(HARD), "locked", trace=a)
    solve_logically(Board.from_line(HARD), "locked", trace=b)
    assert a == b


def test_invalid_board_is_left_untouched():
    g = [row[:] for row in CLASSIC]
    g[0][8] = 5
    board = solve_logically(Board(g))
    assert board.contradiction
    assert board.to_grid() == g


def test_empty_candidate_set_flags_contradiction():
    # r1c1 can only be 1, but column 1 already has a 1
    g = _grid({**{(0, c): c + 1 for c in range(1, 9)}, (5, 0): 1})
    board = solve_logically(Board(g))
    assert board.contradiction
    assert board.value(0, 0) == 0


def test_missing_digit_in_unit_flags_contradiction():
    # every empty cell keeps candidates, but digit 1 has no place left in row 1
    g = _grid({**{(0, c): c + 1 for c in range(6, 9)}, (1, 0): 1, (2, 3): 1})
    board = solve_logically(Board(g))
    assert board.contradiction
    assert board.to_grid() == g
    assert all(board.candidate_count(0, c) > 0 for c in range(6))
    assert not board.has_candidate(0, 0, 1)
    assert validate_sudoku(g) == 76


def test_unknown_level():
    with pytest.raises(ValueError):
        solve_logically(Board.empty(), max_difficulty="xwing")


def test_locked_candidates_pointing():
    # box 1 rows 2-3 full, so 1, 8 and 9 are locked into row 1 of box 1
    g = _grid({(1, 0): 2, (1, 1): 3, (1, 2): 4, (2, 0): 5, (2, 1): 6, (2, 2): 7})
    board = Board(g)
    moves = find_locked_candidates_pointing(board)
    assert sorted(m["digit"] for m in moves) == [1, 8, 9]
    m1 = next(m for m in moves if m["digit"] == 1)
    assert m1["type"] == "elimination"
    assert m1["eliminate"] == ["r1c4", "r1c5", "r1c6", "r1c7", "r1c8", "r1c9"]
    assert m1["highlights"]["in_box"] == ["r1c1", "r1c2", "r1c3"]
    assert m1["highlights"]["row"] == "r1"

    trace = []
    assert apply_eliminations(board, moves, trace) == 18
    assert len(trace) == 3
    assert board.candidates(0, 3) == {2, 3, 4, 5, 6, 7}
    # applying again changes nothing
    assert apply_eliminations(board, moves) == 0


def test_locked_candidates_claiming():
    # row 1 outside box 1 is full, so 1, 8 and 9 are confined to box 1
    g = _grid({(0, 3): 2, (0, 4): 3, (0, 5): 4, (0, 6): 5, (0, 7): 6, (0, 8): 7})
    moves = find_locked_candidates_claiming(Board(g))
    row_moves = [m for m in moves if m["highlights"].get("row") == "r1"]
    assert sorted(m["digit"] for m in row_moves) == [1, 8, 9]
    for m in row_moves:
        assert m["technique"] == "locked_candidates_claiming"
        assert m["eliminate"] == ["r2c1", "r2c2", "r2c3", "r3c1", "r3c2", "r3c3"]
        assert m["highlights"]["box"] == "b1"

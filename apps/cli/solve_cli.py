"""Command-line front end for the solver: read a puzzle, solve or validate it, print a JSON report."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli --puzzle 530070000600195000098000060800060003400803001700020006060000280000419005000080079
#   python -m apps.cli.solve_cli --grid_json puzzle.json --mode guess --trace --json report.json
# A --grid_json file holds a 9x9 array (0 or null = blank), or {"grid": [[...], ...]}.
import argparse
import json
import sys
import time
from pathlib import Path

from apps.logutil import log
from solver.board import Board
from solver.errors import MalformedInputError
from solver.sudoku_tools import solve_with_trace, validate_sudoku
from solver.techniques import DEFAULT_LEVEL, LEVELS


def load_grid(args) -> Board:
    if args.puzzle:
        return Board.from_line(args.puzzle)
    try:
        data = json.loads(Path(args.grid_json).read_text(encoding="utf-8"))
    except OSError as e:
        raise MalformedInputError(f"cannot read {args.grid_json}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"{args.grid_json} is not valid JSON: {e.msg} (line {e.lineno})") from e
    if isinstance(data, dict):
        data = data.get("grid")
    return Board(data)


def build_payload(board: Board, mode: str, max_difficulty: str, trace: bool) -> dict:
    grid = board.to_grid()
    if mode == "validate":
        return {"mode": mode, "input": grid, "status": validate_sudoku(grid)}
    result = solve_with_trace(grid, max_difficulty, guessing=(mode == "guess"))
    payload = {
        "mode": mode,
        "max_difficulty": max_difficulty,
        "input": grid,
        "output": result["grid"],
        "status": result["status"],
    }
    if result["search"] is not None:
        payload["search"] = result["search"]
    if trace:
        payload["moves"] = result["moves"]
    return payload


def main(args=None) -> int:
    if args is None:
        # Parse here if caller didn't pass args
        ap = argparse.ArgumentParser()
        src = ap.add_mutually_exclusive_group(required=True)
        src.add_argument("--puzzle", type=str, help="81 characters, 1-9 given, 0 or . blank")
        src.add_argument("--grid_json", type=str, help="JSON file with a 9x9 grid")
        ap.add_argument("--mode", type=str, default="guess", choices=["logic", "guess", "validate"])
        ap.add_argument("--max_difficulty", type=str, default=DEFAULT_LEVEL, choices=list(LEVELS))
        ap.add_argument("--trace", action="store_true", help="Include the deduction steps")
        ap.add_argument("--json", type=str, default=None, help="Write the report here instead of stdout")
        args = ap.parse_args()

    try:
        board = load_grid(args)
    except MalformedInputError as e:
        log(f"Error: {e}", err=True)
        return 2

    t0 = time.time()
    payload = build_payload(board, args.mode, args.max_difficulty, args.trace)
    elapsed = time.time() - t0

    if args.json:
        Path(args.json).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        log(f"Wrote {args.json} (mode={args.mode}, status={payload['status']}, {elapsed:.3f}s)")
    else:
        print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())  # <- no args passed; main() will parse

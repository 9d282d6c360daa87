# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from puzzles import CLASSIC, HARD, line_to_grid  # noqa: E402


@pytest.fixture
def classic():
    return [row[:] for row in CLASSIC]


@pytest.fixture
def hard_grid():
    return line_to_grid(HARD)

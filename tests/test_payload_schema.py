# tests/test_payload_schema.py
import pytest
from fastapi.testclient import TestClient

from apps.api.config import DEFAULT_BASE_PATH, ServiceConfig
from apps.api.sudoku_tool_api import create_app
from puzzles import CLASSIC, CLASSIC_SOLUTION, HARD_SOLUTION


@pytest.fixture
def client():
    return TestClient(create_app(ServiceConfig(base_path="", quiet=True)))


def test_ping(client):
    resp = client.get("/ping")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_solve_shape(client):
    resp = client.post("/solve", json={"grid": CLASSIC})
    assert resp.status_code == 200
    body = resp.json()
    assert set(body.keys()) == {"grid", "status"}
    assert body["grid"] == CLASSIC_SOLUTION
    assert body["status"] == 0


def test_solve_guessing(client, hard_grid):
    resp = client.post("/solve_guessing", json={"grid": hard_grid})
    assert resp.status_code == 200
    assert resp.json() == {"grid": HARD_SOLUTION, "status": 0}


def test_blanks_as_null(client):
    grid = [[v or None for v in row] for row in CLASSIC]
    resp = client.post("/validate", json={"grid": grid})
    assert resp.json() == {"status": 51}


def test_string_blanks_and_digits(client):
    dots = [[str(v) if v else "." for v in row] for row in CLASSIC]
    assert client.post("/validate", json={"grid": dots}).json() == {"status": 51}
    empties = [[v or "" for v in row] for row in CLASSIC]
    resp = client.post("/solve", json={"grid": empties})
    assert resp.json() == {"grid": CLASSIC_SOLUTION, "status": 0}


def test_unknown_string_value_is_422_with_details(client):
    grid = [row[:] for row in CLASSIC]
    grid[2][0] = "x"
    resp = client.post("/validate", json={"grid": grid})
    assert resp.status_code == 422
    assert resp.json()["error_details"]["cell"] == "r3c1"


def test_validate_invalid(client):
    grid = [row[:] for row in CLASSIC]
    grid[0][8] = 5
    assert client.post("/validate", json={"grid": grid}).json() == {"status": -1}


def test_malformed_grid_is_422(client):
    resp = client.post("/solve", json={"grid": [[0] * 9] * 8})
    assert resp.status_code == 422
    assert "9 rows" in resp.json()["detail"]
    resp = client.post("/validate", json={"grid": [[0] * 8 + [10]] + [[0] * 9] * 8})
    assert resp.status_code == 422
    assert resp.json()["error_details"]["cell"] == "r1c9"


def test_candidates_and_sanity(client):
    cands = client.post("/compute_candidates", json={"grid": CLASSIC}).json()["candidates"]
    assert cands["r1c3"] == [1, 2, 4]
    report = client.post("/sanity_check", json={"original": CLASSIC, "current": CLASSIC_SOLUTION}).json()
    assert report == {"ok": True, "issues": []}


def test_default_base_path():
    client = TestClient(create_app(ServiceConfig(quiet=True)))
    assert client.get(f"{DEFAULT_BASE_PATH}/ping").json() == {"ok": True}
    assert client.get("/ping").status_code == 404

"""Start the Sudoku HTTP service.

Usage:
  python -m apps.api.serve [PORT] [--host 0.0.0.0] [--config service.yaml] [--max_difficulty singles|locked]

PORT defaults to 1337; anything that is not a positive integer falls back to it.
Command-line values override the YAML config.
"""

from __future__ import annotations

import argparse

import uvicorn

from apps.api.config import DEFAULT_PORT, load_config
from apps.api.sudoku_tool_api import create_app
from apps.logutil import log
from solver.techniques import LEVELS


def parse_port(raw: str | None) -> int | None:
    """Port from the command line.

    None when absent, so the configured port applies. An unusable value logs an error and
    falls back to DEFAULT_PORT.
    """
    if raw is None:
        log(f"No port number specified, will use the configured port (default {DEFAULT_PORT}).")
        return None
    try:
        port = int(raw)
    except ValueError:
        log(f"Error: first argument was no legal port number, will use standard port {DEFAULT_PORT}", err=True)
        return DEFAULT_PORT
    if port <= 0:
        log(f"Error: port must be positive, will use standard port {DEFAULT_PORT}", err=True)
        return DEFAULT_PORT
    return port


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Serve solveSudoku / solveSudokuGuessing / validateSudoku over HTTP.")
    ap.add_argument("port", nargs="?", default=None, help=f"Port to listen on (default {DEFAULT_PORT})")
    ap.add_argument("--host", type=str, default=None)
    ap.add_argument("--config", type=str, default=None, help="YAML file with host/port/base_path/max_difficulty/quiet")
    ap.add_argument("--max_difficulty", type=str, default=None, choices=list(LEVELS))
    ap.add_argument("--quiet", action="store_true", default=None)
    return ap


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    cfg = load_config(
        args.config,
        host=args.host,
        port=parse_port(args.port),
        max_difficulty=args.max_difficulty,
        quiet=args.quiet,
    )
    app = create_app(cfg)
    log(f"Effective config: {cfg.to_dict()}")
    log(f"Sudoku web service starting on http://{cfg.host}:{cfg.port}{cfg.base_path}")
    log("Use Ctrl + C to stop the server.")
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level="warning" if cfg.quiet else "info")
    log("Server shut down.")


if __name__ == "__main__":
    main()

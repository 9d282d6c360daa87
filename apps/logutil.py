"""Timestamped progress logging shared by the service and the CLI."""

from __future__ import annotations

import sys
import time


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False, err: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", file=sys.stderr if err else sys.stdout, flush=True)

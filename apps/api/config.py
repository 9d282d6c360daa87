from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from solver.techniques import DEFAULT_LEVEL

DEFAULT_PORT = 1337
DEFAULT_BASE_PATH = "/SudokuService-1.0/services/sudoku"


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


class ServiceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    host: str = "0.0.0.0"
    port: int = Field(DEFAULT_PORT, gt=0, le=65535)
    base_path: str = DEFAULT_BASE_PATH
    max_difficulty: Literal["singles", "locked"] = DEFAULT_LEVEL
    quiet: bool = False

    @field_validator("base_path")
    @classmethod
    def _rooted(cls, v: str) -> str:
        if v and not v.startswith("/"):
            raise ValueError(f"base_path must start with '/', got {v!r}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)


def merge_overrides(cfg: DotDict, **overrides) -> DotDict:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def build_config(data: Dict[str, Any]) -> ServiceConfig:
    """Validate a mapping into a ServiceConfig; unknown keys, wrong types and bad values raise ValueError."""
    try:
        return ServiceConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ValueError(f"invalid service config: {e}") from e


def load_config(path: str | Path | None = None, **overrides) -> ServiceConfig:
    cfg = load_yaml(path) if path else DotDict()
    return build_config(merge_overrides(cfg, **overrides))

# === FILE: dead_link_hunter/config.py ===
"""
Loading and validation of the Dead Link Hunter configuration.
The schema is described with Pydantic; files may be YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from dead_link_hunter.utils import extract_protocol_and_domain

EngineName = Literal["static", "dynamic"]


class HunterConfig(BaseModel):
    """Settings for a single hunt."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: str = Field(..., description="URL the hunt starts from.")
    max_depth: int = Field(5, ge=0, description="Link depth limit (static engine only).")
    max_concurrency: int = Field(20, ge=1, description="Fetches allowed in flight at once.")
    timeout: float = Field(10.0, gt=0, description="Timeout for one fetch (seconds).")
    engine: EngineName = Field("dynamic", description="static (HTTP + HTML parse) or dynamic (headless browser).")
    user_agent: str = Field("DeadLinkHunter/1.0", min_length=1, description="User-Agent header.")

    @field_validator("seed_url")
    def _check_seed(cls, v: str) -> str:
        v = v.strip()
        # InvalidSeedURL is a ValueError, so pydantic reports it as a ValidationError.
        extract_protocol_and_domain(v)
        return v

    @classmethod
    def from_options(cls, seed_url: str, **options: Any) -> HunterConfig:
        """Build a config from keyword options, ignoring the ones set to None."""
        values = {k: v for k, v in options.items() if v is not None}
        return cls(seed_url=seed_url, **values)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a YAML or JSON config file into a plain dict (not validated)."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None], **overrides: Any) -> HunterConfig:
    """
    Read YAML or JSON and return a validated HunterConfig.

    Keyword overrides (e.g. from the command line) win over file values;
    overrides set to None are ignored. With ``path=None`` only the overrides
    are used, so ``seed_url`` must be among them.
    """
    data = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return HunterConfig(**data)


__all__ = ["EngineName", "HunterConfig", "load_config", "read_config_file"]

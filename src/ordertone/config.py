"""Coloring configuration (defaults plus YAML/TOML/JSON overrides)."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from ordertone.core.errors import OrderToneValueError
from ordertone.scheduling.timeline import SHIFT_COUNT

DEFAULT_RADIUS = 2
DEFAULT_SATURATION_PENALTY = 5.0
DEFAULT_MAX_ORDERS_PER_PASS = 10_000


class ColoringConfig(BaseModel):
    """Tunables for the proximity graph and greedy color selection.

    Attributes
    ----------
    radius:
        Chebyshev radius (in grid cells) inside which two orders constrain each other.
    shift_count:
        Shifts per day; sets the width of one day on the x axis.
    saturation_penalty:
        Score subtracted per neighbour already using a candidate color once every
        palette entry is taken around a node.
    max_orders_per_pass:
        Upper bound on new orders colored in one pass; larger inputs are split
        into successive passes that share the cache.
    """

    radius: int = DEFAULT_RADIUS
    shift_count: int = SHIFT_COUNT
    saturation_penalty: float = DEFAULT_SATURATION_PENALTY
    max_orders_per_pass: int = DEFAULT_MAX_ORDERS_PER_PASS

    @field_validator("radius")
    @classmethod
    def _radius_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("ColoringConfig.radius must be non-negative")
        return value

    @field_validator("shift_count", "max_orders_per_pass")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("ColoringConfig counts must be >= 1")
        return value

    @field_validator("saturation_penalty")
    @classmethod
    def _penalty_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("ColoringConfig.saturation_penalty must be non-negative")
        return value


def read_config_mapping(path: str | Path) -> Any:
    """Parse a YAML, JSON or TOML file chosen by suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    if suffix == ".json":
        return json.loads(text)
    if suffix == ".toml":
        return tomllib.loads(text)
    raise OrderToneValueError(f"Unsupported config format '{suffix}'. Use YAML, TOML, or JSON.")


def load_config(path: str | Path) -> ColoringConfig:
    """Load a :class:`ColoringConfig` from a YAML, TOML or JSON file.

    The file may hold the fields at top level or under a ``coloring`` key.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    data = read_config_mapping(path) or {}
    if not isinstance(data, dict):
        raise OrderToneValueError(f"Config file {path} must yield a mapping.")
    section = data.get("coloring", data)
    return ColoringConfig.model_validate(section)


__all__ = [
    "ColoringConfig",
    "DEFAULT_MAX_ORDERS_PER_PASS",
    "DEFAULT_RADIUS",
    "DEFAULT_SATURATION_PENALTY",
    "load_config",
    "read_config_mapping",
]

"""Map settings loaded from a TOML file.

This module is intentionally small and deterministic: it only reads the given
file and performs light validation.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fifomap.errors import FifoMapConfigError

DEFAULT_CAPACITY = 128


@dataclass(frozen=True)
class FifoMapConfig:
    version: int
    capacity: int


def _section(data: dict[str, Any], name: str, *, path: Path) -> dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise FifoMapConfigError(f"Expected [{name}] in {path} to be a table.")
    return section


def _whole_number(value: Any, *, key: str, path: Path) -> int:
    # TOML booleans arrive as Python bools, which are ints.
    if isinstance(value, bool) or not isinstance(value, int):
        raise FifoMapConfigError(
            f"Expected {key} in {path} to be an integer, got {type(value).__name__}."
        )
    return value


def load_config(path: Path) -> FifoMapConfig:
    """Load and validate a fifomap TOML config file.

    The file needs `version = 1` and may carry a `[map]` table with
    `capacity`.
    """

    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise FifoMapConfigError(f"Missing config file at: {path}") from e
    except OSError as e:
        raise FifoMapConfigError(f"Failed reading config file: {path}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise FifoMapConfigError(f"Config is not valid UTF-8: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise FifoMapConfigError(f"Invalid TOML in {path}: {e}") from e

    version = data.get("version", None)
    if version is None:
        raise FifoMapConfigError(f"Missing required `version = 1` in {path}.")
    version_i = _whole_number(version, key="version", path=path)
    if version_i != 1:
        raise FifoMapConfigError(f"Unsupported config version: {version_i} (expected 1).")

    map_tbl = _section(data, "map", path=path)

    if "capacity" in map_tbl:
        capacity = _whole_number(map_tbl["capacity"], key="map.capacity", path=path)
    else:
        capacity = DEFAULT_CAPACITY

    if capacity < 1:
        raise FifoMapConfigError(
            f"Invalid config {path}: map.capacity must be >= 1, got {capacity}."
        )

    return FifoMapConfig(version=version_i, capacity=capacity)

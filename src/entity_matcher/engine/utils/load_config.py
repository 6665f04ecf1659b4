# src/entity_matcher/engine/utils/load_config.py

"""Load JSON settings and sample lists from the package <data/> directory.

Modes:
- "raw"             -> parsed JSON as-is
- "validated_dict"  -> dict[str, Any], passed through an optional validator

Used by the options loader (comparison defaults, checked by a validator) and
the sample-data loader.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_ENV_VARS = ("DATA_DIR", "ENTITY_MATCHER_DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found next to or above the package."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested JSON file cannot be resolved or read."""


class ConfigParseError(ValueError):
    """Raise when a JSON file cannot be parsed or fails its validator."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't have the shape the mode expects."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: (path, mtime, mode)
_CONFIG_CACHE: dict[tuple[Path, float, str], Any] = {}


def clear_config_cache() -> None:
    """Drop every cached file (tests and hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _discover_data_dir(start: Path | None = None) -> Path:
    """Walk up from `start` (default: this file) and return the first data/ dir."""
    start = (start or Path(__file__)).resolve()
    tried: list[Path] = []
    for parent in [start, *start.parents]:
        cand = parent / "data"
        if cand.is_dir():
            return cand
        tried.append(cand)
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def _env_data_dir() -> Path | None:
    for var in _ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()
    return None


def _resolve(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    data_dir = (base_dir or _env_data_dir() or _discover_data_dir()).resolve()
    name = os.fspath(file)
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to read outside the data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _parse(path: Path, encoding: str) -> Any:
    try:
        with path.open("r", encoding=encoding) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> Any:
    """Load <data>/<file>.json, coerce it by `mode` and cache the result.

    Resolution order for the data directory: `base_dir` argument, then the
    DATA_DIR / ENTITY_MATCHER_DATA_DIR environment variables, then the first
    `data/` directory found walking up from this module.

    Results produced with a validator are never cached because the validator
    may reshape the payload.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _resolve(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    key = (path, mtime, mode)
    if validator is None:
        with _CACHE_LOCK:
            if key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[key]

    data = _parse(path, encoding)

    if mode == "raw":
        result: Any = data
    else:
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected object for mode 'validated_dict', "
                f"got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[key] = result
        log.debug("Config cache MISS -> STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded with validator (not cached): %s", path.name)
    return result

# python/isosurf/config.py
# Canvas, grid and server configuration for the surface renderer
# Exists to keep every fixed rendering constant in one validated, immutable place
# RELEVANT FILES: python/isosurf/projection.py, python/isosurf/grid.py, python/isosurf/cli.py, tests/test_config.py
from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

ConfigSource = Union["ServerConfig", Mapping[str, Any], str, Path, None]

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_ENV_OVERRIDES = {
    "ISOSURF_HOST": "host",
    "ISOSURF_PORT": "port",
    "ISOSURF_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class SurfaceConfig:
    """Canvas size, sampling grid and projection angle for one render."""

    width: int = 600
    height: int = 320
    cells: int = 100
    xyrange: float = 30.0
    angle_deg: float = 30.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")
        if self.cells <= 0:
            raise ValueError(f"cells must be >= 1, got {self.cells}")
        if not math.isfinite(self.xyrange) or self.xyrange <= 0.0:
            raise ValueError(f"xyrange must be a positive finite number, got {self.xyrange}")
        if not math.isfinite(self.angle_deg):
            raise ValueError(f"angle_deg must be finite, got {self.angle_deg}")

    @property
    def angle(self) -> float:
        """Axis angle in radians."""
        return math.radians(self.angle_deg)

    @property
    def xyscale(self) -> float:
        """Pixels per x or y unit."""
        return self.width / 2 / self.xyrange

    @property
    def zscale(self) -> float:
        """Pixels per z unit."""
        return self.height * 0.4


DEFAULT_CONFIG = SurfaceConfig()


@dataclass(frozen=True)
class ServerConfig:
    """Where the HTTP front end listens and how loudly it logs."""

    host: str = "localhost"
    port: int = 8000
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host must not be empty")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port must be in 0..65535, got {self.port}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"Unsupported log level {self.log_level!r}; expected one of {', '.join(sorted(_LOG_LEVELS))}"
            )

    def to_dict(self) -> dict:
        return {"host": self.host, "port": self.port, "log_level": self.log_level}


def _coerce(key: str, value: Any) -> Any:
    if key == "port":
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"port must be an integer, got {value!r}") from exc
    if key == "log_level":
        return str(value).upper()
    return str(value)


def _load_mapping(source: ConfigSource) -> dict:
    if source is None:
        return {}
    if isinstance(source, ServerConfig):
        return source.to_dict()
    if isinstance(source, Mapping):
        return dict(source)
    path = Path(source)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data


def load_server_config(
    source: ConfigSource = None,
    env: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> ServerConfig:
    """Build a ServerConfig from a mapping or JSON file, then the environment.

    Precedence, lowest first: defaults, ``source``, ``ISOSURF_*`` environment
    variables, explicit keyword ``overrides`` (``None`` values are ignored).

    Raises:
        ValueError: on unknown keys, unreadable files or invalid values.
    """
    known = {f.name for f in fields(ServerConfig)}
    data = _load_mapping(source)
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown server config keys: {', '.join(unknown)}")

    env = os.environ if env is None else env
    for var, key in _ENV_OVERRIDES.items():
        if var in env and env[var] != "":
            data[key] = env[var]

    for key, value in overrides.items():
        if key not in known:
            raise ValueError(f"Unknown server config key: {key}")
        if value is not None:
            data[key] = value

    coerced = {key: _coerce(key, value) for key, value in data.items()}
    return replace(ServerConfig(), **coerced)


__all__ = [
    "SurfaceConfig",
    "ServerConfig",
    "DEFAULT_CONFIG",
    "load_server_config",
]

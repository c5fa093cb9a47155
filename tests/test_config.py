# tests/test_config.py
# Tests for surface and server configuration parsing and validation
# Ensures derived scales match the canvas and bad settings raise ValueError
# RELEVANT FILES: python/isosurf/config.py, python/isosurf/cli.py
from __future__ import annotations

import dataclasses
import json
import math
from pathlib import Path

import pytest

from isosurf.config import DEFAULT_CONFIG, ServerConfig, SurfaceConfig, load_server_config


def test_surface_defaults() -> None:
    cfg = DEFAULT_CONFIG
    assert (cfg.width, cfg.height, cfg.cells, cfg.xyrange) == (600, 320, 100, 30.0)
    assert cfg.xyscale == pytest.approx(10.0)
    assert cfg.zscale == pytest.approx(128.0)
    assert cfg.angle == pytest.approx(math.pi / 6)


def test_surface_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.cells = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cells": 0},
        {"width": 0},
        {"height": -1},
        {"xyrange": 0.0},
        {"xyrange": float("inf")},
        {"angle_deg": float("nan")},
    ],
)
def test_surface_config_rejects_invalid(kwargs) -> None:
    with pytest.raises(ValueError):
        SurfaceConfig(**kwargs)


def test_server_defaults() -> None:
    cfg = load_server_config(env={})
    assert cfg == ServerConfig("localhost", 8000, "INFO")


def test_server_config_from_mapping() -> None:
    cfg = load_server_config({"host": "0.0.0.0", "port": "9001"}, env={})
    assert cfg.host == "0.0.0.0"
    assert cfg.port == 9001


def test_server_config_json_path(tmp_path: Path) -> None:
    path = tmp_path / "server.json"
    path.write_text(json.dumps({"port": 8123, "log_level": "debug"}), encoding="utf-8")
    cfg = load_server_config(str(path), env={})
    assert cfg.port == 8123
    assert cfg.log_level == "DEBUG"


def test_env_overrides_file_and_kwargs_override_env(tmp_path: Path) -> None:
    path = tmp_path / "server.json"
    path.write_text(json.dumps({"port": 8123}), encoding="utf-8")
    env = {"ISOSURF_PORT": "8200", "ISOSURF_HOST": "127.0.0.1"}
    cfg = load_server_config(path, env=env)
    assert (cfg.host, cfg.port) == ("127.0.0.1", 8200)
    cfg = load_server_config(path, env=env, port=8300, host=None)
    assert (cfg.host, cfg.port) == ("127.0.0.1", 8300)


def test_server_config_unknown_key_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown"):
        load_server_config({"hostname": "x"}, env={})


@pytest.mark.parametrize("port", ["abc", 70000, -1])
def test_server_config_bad_port(port) -> None:
    with pytest.raises(ValueError):
        load_server_config({"port": port}, env={})


def test_server_config_bad_log_level() -> None:
    with pytest.raises(ValueError):
        load_server_config(env={"ISOSURF_LOG_LEVEL": "chatty"})


def test_server_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="not found"):
        load_server_config(tmp_path / "missing.json", env={})


def test_server_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_server_config(path, env={})

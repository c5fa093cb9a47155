# Ensure `import isosurf` works from a fresh clone:
# put repo/python on sys.path so the package is importable without prior install.
import sys
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_python_path():
    pkg_dir = _repo_root() / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: full 100x100 renders"
    )


@pytest.fixture
def small_config():
    """A 4x4 grid on the default canvas, fast enough for per-cell checks."""
    from isosurf.config import SurfaceConfig

    return SurfaceConfig(cells=4)

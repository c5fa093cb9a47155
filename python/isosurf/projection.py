# python/isosurf/projection.py
# Fixed isometric projection of (x, y, z) onto the 2-D SVG canvas
# Exists to keep the screen-space math in one pure, stateless place
# RELEVANT FILES: python/isosurf/config.py, python/isosurf/render.py, tests/test_projection.py
from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .config import DEFAULT_CONFIG, SurfaceConfig


class IsometricProjector:
    """Maps domain points to screen points.

    sx = W/2 + (x - y) * cos(angle) * xyscale
    sy = H/2 + (x + y) * sin(angle) * xyscale - z * zscale

    No clipping: points may land outside the canvas.
    """

    __slots__ = ("config", "_cos", "_sin", "_cx", "_cy", "_xyscale", "_zscale")

    def __init__(self, config: SurfaceConfig = DEFAULT_CONFIG):
        self.config = config
        self._cos = math.cos(config.angle)
        self._sin = math.sin(config.angle)
        self._cx = config.width / 2
        self._cy = config.height / 2
        self._xyscale = config.xyscale
        self._zscale = config.zscale

    def project(self, x: float, y: float, z: float) -> Tuple[float, float]:
        sx = self._cx + (x - y) * self._cos * self._xyscale
        sy = self._cy + (x + y) * self._sin * self._xyscale - z * self._zscale
        return sx, sy

    def project_array(
        self, xs: np.ndarray, ys: np.ndarray, zs: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Vectorised project(); arrays broadcast against each other."""
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        zs = np.asarray(zs, dtype=np.float64)
        sx = self._cx + (xs - ys) * self._cos * self._xyscale
        sy = self._cy + (xs + ys) * self._sin * self._xyscale - zs * self._zscale
        return sx, sy


__all__ = ["IsometricProjector"]

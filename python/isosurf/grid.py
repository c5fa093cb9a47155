# python/isosurf/grid.py
# Sampling grid over the square domain and per-corner elevation lookup
# Exists to enumerate cells and corners in the fixed order the SVG output depends on
# RELEVANT FILES: python/isosurf/functions.py, python/isosurf/colors.py, python/isosurf/render.py, tests/test_grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from .colors import Extrema
from .config import DEFAULT_CONFIG, SurfaceConfig
from .functions import ElevationFunction, resolve_selector

# Corner order within a cell: (i+1,j), (i,j), (i,j+1), (i+1,j+1).
# This fixes the polygon winding in the output.
CORNER_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 0), (0, 1), (1, 1))


@dataclass(frozen=True)
class ElevationSample:
    """A domain point together with its (finite) height."""

    x: float
    y: float
    z: float

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


class GridSampler:
    """N x N cell grid over [-R/2, R/2]^2 bound to one elevation function.

    The sampler holds no state beyond its function, its config and a lazily
    computed heightfield, so one instance belongs to exactly one render.
    """

    def __init__(
        self,
        function: Union[ElevationFunction, str, None],
        config: SurfaceConfig = DEFAULT_CONFIG,
    ):
        self.function = resolve_selector(function)
        self.config = config
        self._heights: Optional[np.ndarray] = None

    def _check_corner(self, i: int, j: int) -> None:
        n = self.config.cells
        if not (0 <= i <= n and 0 <= j <= n):
            raise IndexError(f"corner ({i}, {j}) outside 0..{n}")

    def domain_point(self, i: int, j: int) -> Tuple[float, float]:
        """Domain coordinates of corner (i, j)."""
        self._check_corner(i, j)
        n = self.config.cells
        r = self.config.xyrange
        return r * (i / n - 0.5), r * (j / n - 0.5)

    def sample(self, i: int, j: int) -> ElevationSample:
        x, y = self.domain_point(i, j)
        return ElevationSample(x, y, float(self.function(x, y)))

    def cell_corners(self, i: int, j: int) -> Tuple[ElevationSample, ...]:
        """The four corners of cell (i, j) in output order."""
        return tuple(self.sample(i + di, j + dj) for di, dj in CORNER_OFFSETS)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """All cell indices in row-major order."""
        n = self.config.cells
        for i in range(n):
            for j in range(n):
                yield i, j

    def axis(self) -> np.ndarray:
        """Domain coordinate of every corner index along one axis."""
        n = self.config.cells
        return self.config.xyrange * (np.arange(n + 1, dtype=np.float64) / n - 0.5)

    def heightfield(self) -> np.ndarray:
        """Elevation at every corner, shape (N+1, N+1), indexed [i, j]."""
        if self._heights is None:
            coords = self.axis()
            xs, ys = np.meshgrid(coords, coords, indexing="ij")
            self._heights = np.asarray(self.function(xs, ys), dtype=np.float64)
        return self._heights

    def surface_extrema(self) -> Extrema:
        """Global min/max over every corner of the grid."""
        z = self.heightfield()
        return Extrema(float(z.min()), float(z.max()))

    def cell_extrema(self, i: int, j: int) -> Extrema:
        """Min/max over the four corners of cell (i, j)."""
        self._check_corner(i, j)
        self._check_corner(i + 1, j + 1)
        z = self.heightfield()
        return Extrema.of(z[i + di, j + dj] for di, dj in CORNER_OFFSETS)


__all__ = ["CORNER_OFFSETS", "ElevationSample", "GridSampler"]

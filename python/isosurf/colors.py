# python/isosurf/colors.py
# Stroke colour heuristic: red for positive-dominant cells, blue for negative-dominant ones
# Exists to turn local-versus-global elevation extrema into a CSS colour per cell
# RELEVANT FILES: python/isosurf/grid.py, python/isosurf/render.py, tests/test_colors.py
from __future__ import annotations

import math
from typing import NamedTuple


class Extrema(NamedTuple):
    """Minimum and maximum elevation over a cell or a whole surface."""

    min: float
    max: float

    @classmethod
    def of(cls, values) -> "Extrema":
        """Extrema of an iterable of heights (or a numpy array)."""
        lo = math.nan
        hi = math.nan
        for z in values:
            z = float(z)
            if math.isnan(lo) or z < lo:
                lo = z
            if math.isnan(hi) or z > hi:
                hi = z
        if math.isnan(lo):
            raise ValueError("Extrema.of() needs at least one value")
        return cls(lo, hi)


def channel_intensity(local: float, extreme: float) -> int:
    """exp(|local|) / exp(|extreme|) scaled to 0..255 and floored.

    Saturates at 255 when the cell is further from zero than the surface
    extreme on that side.
    """
    value = math.exp(abs(local) - abs(extreme)) * 255
    if value > 255:
        value = 255
    return max(0, int(math.floor(value)))


def cell_color(cell: Extrema, surface: Extrema) -> str:
    """Stroke colour for one cell as ``#rr0000`` or ``#0000bb``.

    The red branch is taken only when ``|cell.max| > |cell.min|``; ties go to
    the blue branch.
    """
    if abs(cell.max) > abs(cell.min):
        red = channel_intensity(cell.max, surface.max)
        return f"#{red:02x}0000"
    blue = channel_intensity(cell.min, surface.min)
    return f"#0000{blue:02x}"


__all__ = ["Extrema", "cell_color", "channel_intensity"]

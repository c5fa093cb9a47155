# python/isosurf/functions.py
# Analytic elevation functions z = f(x, y) and the selector that picks one
# Exists so every render names its surface explicitly instead of through shared state
# RELEVANT FILES: python/isosurf/grid.py, python/isosurf/render.py, python/isosurf/server.py, tests/test_functions.py
"""Elevation functions.

Each function accepts scalars or numpy arrays and always returns finite
heights: any NaN or infinity produced by the formula is replaced with 0.
Scalar inputs give a plain ``float`` back, array inputs give an array.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Union

import numpy as np

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]

# Saddle semi-axes
SADDLE_A = 25.0
SADDLE_B = 17.0


def safe_value(v: ArrayLike) -> ArrayLike:
    """Replace non-finite values with 0."""
    arr = np.asarray(v, dtype=np.float64)
    out = np.where(np.isfinite(arr), arr, 0.0)
    if out.ndim == 0:
        return float(out)
    return out


def ripple(x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """sin(r) / r with r the distance from the origin; 0 at the origin."""
    r = np.hypot(x, y)
    with np.errstate(divide="ignore", invalid="ignore"):
        z = np.sin(r) / r
    return safe_value(z)


def eggbox(x: ArrayLike, y: ArrayLike) -> ArrayLike:
    return safe_value(0.2 * (np.cos(x) + np.cos(y)))


def saddle(x: ArrayLike, y: ArrayLike) -> ArrayLike:
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    return safe_value((y * y) / (SADDLE_A * SADDLE_A) - (x * x) / (SADDLE_B * SADDLE_B))


def flat(x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """Zero everywhere. Used for any selector that is not recognised."""
    shape = np.broadcast(np.asarray(x), np.asarray(y)).shape
    return safe_value(np.zeros(shape, dtype=np.float64))


class ElevationFunction(Enum):
    """Tagged elevation function; members are callable as ``f(x, y)``."""

    RIPPLE = "ripple"
    EGGBOX = "eggbox"
    SADDLE = "saddle"
    FLAT = "flat"

    def __call__(self, x: ArrayLike, y: ArrayLike) -> ArrayLike:
        return _IMPLEMENTATIONS[self](x, y)


_IMPLEMENTATIONS: Dict[ElevationFunction, Callable[[ArrayLike, ArrayLike], ArrayLike]] = {
    ElevationFunction.RIPPLE: ripple,
    ElevationFunction.EGGBOX: eggbox,
    ElevationFunction.SADDLE: saddle,
    ElevationFunction.FLAT: flat,
}

_SELECTORS: Dict[str, ElevationFunction] = {
    "f": ElevationFunction.RIPPLE,
    "ripple": ElevationFunction.RIPPLE,
    "eggbox": ElevationFunction.EGGBOX,
    "saddle": ElevationFunction.SADDLE,
    "flat": ElevationFunction.FLAT,
}


def resolve_selector(selector: Union[str, ElevationFunction, None]) -> ElevationFunction:
    """Map a selector name to its elevation function.

    Names match exactly. Unknown names (including the empty string and
    ``None``) resolve to ``ElevationFunction.FLAT`` rather
    than raising: an unrecognised surface renders as a flat plane.
    """
    if isinstance(selector, ElevationFunction):
        return selector
    if selector is None:
        logger.debug("No selector given, using flat surface")
        return ElevationFunction.FLAT
    func = _SELECTORS.get(str(selector))
    if func is None:
        logger.debug(f"Unknown selector {selector!r}, using flat surface")
        return ElevationFunction.FLAT
    return func


def available_selectors() -> list[str]:
    """Canonical selector names, in declaration order."""
    return [member.value for member in ElevationFunction]


__all__ = [
    "ElevationFunction",
    "resolve_selector",
    "available_selectors",
    "ripple",
    "eggbox",
    "saddle",
    "flat",
    "safe_value",
    "SADDLE_A",
    "SADDLE_B",
]

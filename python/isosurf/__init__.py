# python/isosurf/__init__.py
# Public Python API for the isometric surface renderer
# Exists to re-export the rendering pipeline and its building blocks
# RELEVANT FILES: python/isosurf/render.py, python/isosurf/server.py, tests/test_render.py
from .config import DEFAULT_CONFIG, ServerConfig, SurfaceConfig, load_server_config
from .functions import (
    ElevationFunction,
    available_selectors,
    eggbox,
    flat,
    resolve_selector,
    ripple,
    saddle,
    safe_value,
)
from .grid import CORNER_OFFSETS, ElevationSample, GridSampler
from .projection import IsometricProjector
from .colors import Extrema, cell_color, channel_intensity
from .render import SurfaceRenderer, export_svg, iter_svg, render_svg, validate_svg

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ServerConfig",
    "SurfaceConfig",
    "load_server_config",
    "ElevationFunction",
    "available_selectors",
    "eggbox",
    "flat",
    "resolve_selector",
    "ripple",
    "saddle",
    "safe_value",
    "CORNER_OFFSETS",
    "ElevationSample",
    "GridSampler",
    "IsometricProjector",
    "Extrema",
    "cell_color",
    "channel_intensity",
    "SurfaceRenderer",
    "export_svg",
    "iter_svg",
    "render_svg",
    "validate_svg",
]

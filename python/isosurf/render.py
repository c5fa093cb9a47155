# python/isosurf/render.py
# SVG generation for an isometric surface plot
# Exists to orchestrate sampling, projection and colouring into one streamed document
# RELEVANT FILES: python/isosurf/grid.py, python/isosurf/projection.py, python/isosurf/colors.py, python/isosurf/server.py, tests/test_render.py
"""SVG rendering of an elevation function.

Example usage:
    from isosurf.render import render_svg, export_svg

    svg = render_svg("eggbox")
    export_svg("saddle", "saddle.svg")

The document is produced as a stream of text chunks (header, one polygon per
grid cell in row-major order, footer) so it can be written to a socket as it
is generated.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, List, Optional, Union

import numpy as np

from .colors import Extrema, cell_color
from .config import DEFAULT_CONFIG, SurfaceConfig
from .functions import ElevationFunction
from .grid import CORNER_OFFSETS, GridSampler
from .projection import IsometricProjector

logger = logging.getLogger(__name__)

Selector = Union[ElevationFunction, str, None]

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_STYLE = "stroke: grey; fill: white; stroke-width: 0.7"
SVG_MEDIA_TYPE = "image/svg+xml"


def _format_coord(v: float, precision: Optional[int]) -> str:
    """Shortest round-trip decimal, or fixed decimals when precision is set."""
    if precision is None:
        return np.format_float_positional(v, trim="-")
    return f"{v:.{precision}f}"


class SurfaceRenderer:
    """Stateless SVG renderer.

    ``iter_svg(selector)`` yields the document for one surface. The selector
    is the only per-render input; the renderer itself holds just the immutable
    canvas config and projector, so one instance can serve concurrent renders.
    """

    def __init__(self, config: SurfaceConfig = DEFAULT_CONFIG, precision: Optional[int] = None):
        self.config = config
        self.precision = precision
        self.projector = IsometricProjector(config)

    def header(self) -> str:
        return (
            f"<svg xmlns='{SVG_NAMESPACE}' style='{DEFAULT_STYLE}' "
            f"width='{self.config.width}' height='{self.config.height}'>\n"
        )

    @staticmethod
    def footer() -> str:
        return "</svg>\n"

    def iter_svg(self, selector: Selector) -> Iterator[str]:
        """Yield the SVG document for ``selector`` chunk by chunk.

        Pipeline:
          1. Resolve the selector and sample the full heightfield
          2. Global extrema over every corner
          3. Project every corner once
          4. Per cell, row-major: local extrema -> colour -> polygon
        """
        sampler = GridSampler(selector, self.config)
        n = self.config.cells
        z = sampler.heightfield()
        surface = sampler.surface_extrema()
        logger.debug(
            f"Rendering {sampler.function.value}: {n}x{n} cells, "
            f"z range=[{surface.min:.4f}, {surface.max:.4f}]"
        )

        coords = sampler.axis()
        xs, ys = np.meshgrid(coords, coords, indexing="ij")
        sx, sy = self.projector.project_array(xs, ys, z)

        precision = self.precision
        points = [
            [f"{_format_coord(sx[i, j], precision)},{_format_coord(sy[i, j], precision)}"
             for j in range(n + 1)]
            for i in range(n + 1)
        ]

        corners = np.stack([z[di:di + n, dj:dj + n] for di, dj in CORNER_OFFSETS])
        cell_min = corners.min(axis=0)
        cell_max = corners.max(axis=0)

        yield self.header()
        for i, j in sampler.cells():
            color = cell_color(Extrema(float(cell_min[i, j]), float(cell_max[i, j])), surface)
            pts = " ".join(points[i + di][j + dj] for di, dj in CORNER_OFFSETS)
            yield f"<polygon style='stroke: {color};' points='{pts}'/>\n"
        yield self.footer()

    def render_svg(self, selector: Selector) -> str:
        return "".join(self.iter_svg(selector))

    def render_bytes(self, selector: Selector) -> bytes:
        return self.render_svg(selector).encode("utf-8")


def iter_svg(
    selector: Selector,
    config: Optional[SurfaceConfig] = None,
    precision: Optional[int] = None,
) -> Iterator[str]:
    """Stream the SVG for ``selector`` with a fresh renderer."""
    return SurfaceRenderer(config or DEFAULT_CONFIG, precision=precision).iter_svg(selector)


def render_svg(
    selector: Selector,
    config: Optional[SurfaceConfig] = None,
    precision: Optional[int] = None,
) -> str:
    """Complete SVG document for ``selector`` as a string.

    Args:
        selector: Surface name ("ripple", "eggbox", "saddle") or ElevationFunction.
            Unknown names render a flat plane.
        config: Canvas and grid settings (defaults to 600x320, 100x100 cells).
        precision: Fixed coordinate decimals; None keeps the shortest exact form.
    """
    return SurfaceRenderer(config or DEFAULT_CONFIG, precision=precision).render_svg(selector)


def export_svg(
    selector: Selector,
    path: Union[str, Path],
    config: Optional[SurfaceConfig] = None,
    precision: Optional[int] = None,
) -> Path:
    """Render ``selector`` and write the SVG to ``path`` (UTF-8)."""
    renderer = SurfaceRenderer(config or DEFAULT_CONFIG, precision=precision)
    path = Path(path)
    with path.open("w", encoding="utf-8") as fh:
        for chunk in renderer.iter_svg(selector):
            fh.write(chunk)
    logger.info(f"Saved SVG surface: {path}")
    return path


def validate_svg(svg_content: str) -> bool:
    """Validate SVG structure by parsing it.

    Returns:
        True if the root is an ``svg`` element with width and height.

    Raises:
        xml.etree.ElementTree.ParseError: If XML is malformed.
    """
    root = ET.fromstring(svg_content)
    if not root.tag.endswith("svg"):
        return False
    return "width" in root.attrib and "height" in root.attrib


def polygon_points(svg_content: str) -> List[List[tuple]]:
    """Parsed ``points`` of every polygon, in document order."""
    root = ET.fromstring(svg_content)
    result = []
    for poly in root.iter(f"{{{SVG_NAMESPACE}}}polygon"):
        pairs = poly.attrib["points"].split()
        result.append([tuple(float(v) for v in pair.split(",")) for pair in pairs])
    return result


__all__ = [
    "SurfaceRenderer",
    "iter_svg",
    "render_svg",
    "export_svg",
    "validate_svg",
    "polygon_points",
    "SVG_MEDIA_TYPE",
]

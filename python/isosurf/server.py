# python/isosurf/server.py
# Flask front end mapping URL paths to surface selectors
# Exists to stream rendered SVG documents over HTTP, one independent render per request
# RELEVANT FILES: python/isosurf/render.py, python/isosurf/config.py, python/isosurf/cli.py, tests/test_server.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from flask import Flask, Response

from .config import DEFAULT_CONFIG, ServerConfig, SurfaceConfig
from .functions import ElevationFunction
from .render import SVG_MEDIA_TYPE, SurfaceRenderer

logger = logging.getLogger(__name__)

ROUTES: Dict[str, ElevationFunction] = {
    "/": ElevationFunction.RIPPLE,
    "/eggbox": ElevationFunction.EGGBOX,
    "/saddle": ElevationFunction.SADDLE,
}

# Paths with no route of their own fall through to the root surface.
FALLBACK = ElevationFunction.RIPPLE


def _surface_view(renderer: SurfaceRenderer, function: ElevationFunction) -> Callable[..., Response]:
    def view(**_kwargs) -> Response:
        return Response(renderer.iter_svg(function), mimetype=SVG_MEDIA_TYPE)

    return view


def create_app(config: Optional[SurfaceConfig] = None) -> Flask:
    """Build the Flask app.

    Each request gets its own selector from its route; nothing about the
    selected surface is stored on the app.
    """
    app = Flask(__name__)
    renderer = SurfaceRenderer(config or DEFAULT_CONFIG)

    for path, function in ROUTES.items():
        app.add_url_rule(
            path,
            endpoint=f"surface_{function.value}",
            view_func=_surface_view(renderer, function),
            methods=["GET"],
        )
    app.add_url_rule(
        "/<path:_subpath>",
        endpoint="surface_fallback",
        view_func=_surface_view(renderer, FALLBACK),
        methods=["GET"],
    )
    return app


def serve(server_config: Optional[ServerConfig] = None, config: Optional[SurfaceConfig] = None) -> None:
    """Run the threaded development server until interrupted."""
    server_config = server_config or ServerConfig()
    app = create_app(config)
    logger.info(f"Serving surfaces at http://{server_config.host}:{server_config.port}/")
    app.run(host=server_config.host, port=server_config.port, threaded=True)


__all__ = ["ROUTES", "FALLBACK", "create_app", "serve"]

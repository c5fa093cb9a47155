# python/isosurf/cli.py
# Command line entry point: serve surfaces over HTTP or render one to a file
# Exists so the package runs as `isosurf` / `python -m isosurf`
# RELEVANT FILES: python/isosurf/server.py, python/isosurf/render.py, python/isosurf/config.py, tests/test_cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import load_server_config
from .functions import available_selectors
from .render import SurfaceRenderer, export_svg

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    epilog = """\
examples:
  %(prog)s serve                         Serve on http://localhost:8000/
  %(prog)s serve --port 9000             Serve on another port
  %(prog)s render eggbox -o eggbox.svg   Write one surface to a file
  %(prog)s render saddle                 Write SVG to stdout
"""
    parser = argparse.ArgumentParser(
        prog="isosurf",
        description="Isometric SVG surface plots",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=None, help="Bind address (default: localhost)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default: 8000)")
    serve.add_argument("--config", default=None, help="JSON file with host/port/log_level")

    render = sub.add_parser("render", help="Render one surface as SVG")
    render.add_argument("selector",
                        help=f"Surface name: {', '.join(available_selectors())}; "
                             "anything else renders a flat plane")
    render.add_argument("-o", "--output", default=None, help="Output .svg path (default: stdout)")
    render.add_argument("--precision", type=int, default=None,
                        help="Fixed coordinate decimals (default: shortest exact form)")
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO),
                        format="%(levelname)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        try:
            server_config = load_server_config(
                args.config, host=args.host, port=args.port, log_level=args.log_level
            )
        except ValueError as exc:
            _configure_logging(args.log_level or "INFO")
            logger.error(f"Invalid server configuration: {exc}")
            return 2
        _configure_logging(server_config.log_level)
        from .server import serve

        try:
            serve(server_config)
        except OSError as exc:
            logger.error(f"Server failed on {server_config.host}:{server_config.port}: {exc}")
            return 1
        return 0

    _configure_logging(args.log_level or "WARNING")
    if args.output:
        export_svg(args.selector, args.output, precision=args.precision)
    else:
        renderer = SurfaceRenderer(precision=args.precision)
        for chunk in renderer.iter_svg(args.selector):
            sys.stdout.write(chunk)
        sys.stdout.flush()
    return 0


__all__ = ["build_parser", "main"]

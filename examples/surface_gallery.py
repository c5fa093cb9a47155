#!/usr/bin/env python3
"""
Surface Gallery

Renders every named surface (ripple, eggbox, saddle) to SVG and prints the
elevation range of each, so the colour scaling can be eyeballed side by side.

Usage:
    python examples/surface_gallery.py --out-dir examples/out
    python examples/surface_gallery.py --cells 40 --precision 2
"""

import argparse
import logging
import sys
from pathlib import Path

from _import_shim import ensure_repo_import

ensure_repo_import()

from isosurf import GridSampler, SurfaceConfig, export_svg, validate_svg  # noqa: E402

SURFACES = ("ripple", "eggbox", "saddle")


def main():
    parser = argparse.ArgumentParser(description="Render all named surfaces to SVG")
    parser.add_argument("--out-dir", type=Path, default=Path("examples/out"),
                        help="Output directory")
    parser.add_argument("--cells", type=int, default=100, help="Grid cells per side")
    parser.add_argument("--precision", type=int, default=None,
                        help="Fixed coordinate decimals")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(levelname)s: %(message)s')

    config = SurfaceConfig(cells=args.cells)
    args.out_dir.mkdir(parents=True, exist_ok=True)

    print("=== Surface Gallery ===")
    for name in SURFACES:
        extrema = GridSampler(name, config).surface_extrema()
        path = export_svg(name, args.out_dir / f"{name}.svg", config, precision=args.precision)
        ok = validate_svg(path.read_text(encoding="utf-8"))
        print(f"  {name:<8} z=[{extrema.min:+.4f}, {extrema.max:+.4f}]  {path}  valid={ok}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

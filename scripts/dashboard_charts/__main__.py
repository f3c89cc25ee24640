"""CLI entry point for dashboard_charts package.

Invoke as:  python scripts/dashboard_charts --config config/example.yaml
"""

# Bootstrap: when run as `python scripts/dashboard_charts` (directory path),
# re-execute through runpy so the package machinery resolves relative imports
# correctly and without DeprecationWarning.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("dashboard_charts", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable, run_module already calls sys.exit()

import argparse
import logging
import os
import sys

from .config import RegionEntry, RegionMapConfiguration, StyleConfiguration, load_config
from .errors import DashboardChartsError
from .palettes import ColormapType, SystemPalette
from .render import render_palette_sheet, render_region_map

# ---------------------------------------------------------------------------
# Built-in previews
# ---------------------------------------------------------------------------

# A small apartment floor plan, in meters
SAMPLE_REGIONS = (
    RegionEntry(name="bathroom", coordinates=[(0, 0), (0, 3), (2, 3), (2, 0)]),
    RegionEntry(name="bedroom", coordinates=[(2, 0), (2, 4), (6, 4), (6, 0)]),
    RegionEntry(name="kitchen", coordinates=[(0, 3), (0, 7), (3, 7), (3, 4), (2, 4), (2, 3)]),
    RegionEntry(name="living room", coordinates=[(3, 4), (3, 7), (9, 7), (9, 0), (6, 0), (6, 4)]),
)

SAMPLE_VALUES = {
    "bathroom": 22.4,
    "bedroom": 18.9,
    "kitchen": 21.1,
    "living room": None,
}


def _sample_region_map(oblique):
    return RegionMapConfiguration(
        title="Oblique temperature" if oblique else "Temperature",
        unit="°C",
        bounds=(15.0, 25.0),
        regions=SAMPLE_REGIONS,
        precision=1,
        colormap=ColormapType.COOL_WARM,
        oblique=oblique,
        colored_tag_values=("kitchen",),
        values=SAMPLE_VALUES,
    )


def preview_palettes_dark(path):
    render_palette_sheet(path, SystemPalette.DARK)


def preview_palettes_light(path):
    render_palette_sheet(path, SystemPalette.LIGHT)


def preview_region_map(path):
    render_region_map(_sample_region_map(oblique=False), StyleConfiguration(), path)


def preview_region_map_oblique(path):
    render_region_map(_sample_region_map(oblique=True), StyleConfiguration(), path)


PREVIEWS = {
    "palettes": ("palettes_dark.png", preview_palettes_dark),
    "palettes-light": ("palettes_light.png", preview_palettes_light),
    "region-map": ("region_map.png", preview_region_map),
    "region-map-oblique": ("region_map_oblique.png", preview_region_map_oblique),
}


def setup_logging(verbosity):
    """Map -v count to a log level: warning, info, then debug."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render dashboard chart images: region heatmaps and colormap legends."
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--config", help="YAML file describing a region map to render")
    group.add_argument("--preview", help="Built-in preview to render (see --list)")
    group.add_argument("--all", action="store_true", help="Render all built-in previews")
    group.add_argument("--list", action="store_true", help="List built-in previews")
    parser.add_argument(
        "--output",
        default="region_map.png",
        help="Output PNG for --config (default: region_map.png)",
    )
    parser.add_argument(
        "--output-dir",
        default="output",
        help="Directory for preview images (default: output)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        dest="verbosity",
        help="Increase log verbosity (repeat for debug)",
    )
    args = parser.parse_args(argv)
    setup_logging(args.verbosity)

    if args.list:
        print("Available previews:")
        for name in sorted(PREVIEWS):
            filename, _ = PREVIEWS[name]
            print(f"  {name:<20} {filename}")
        print(f"\n{len(PREVIEWS)} previews total.")
        return 0

    try:
        if args.config:
            style, region_map = load_config(args.config)
            render_region_map(region_map, style, args.output)
            return 0

        if args.all:
            names = sorted(PREVIEWS)
        else:
            if args.preview not in PREVIEWS:
                print(f"No preview registered as '{args.preview}'.")
                print("Use --list to see available previews.")
                return 1
            names = [args.preview]

        for name in names:
            filename, func = PREVIEWS[name]
            func(os.path.join(args.output_dir, filename))
        print(f"\nGenerated {len(names)} image(s).")
        return 0
    except DashboardChartsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

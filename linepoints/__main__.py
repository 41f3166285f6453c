#!/usr/bin/env python3
r"""Line-points CLI.

Commands:
    python -m linepoints --version     Show version
    python -m linepoints info          Show detailed version and system info
    python -m linepoints rasterize     Print the points of one segment
    python -m linepoints draw          Draw a scene through the point cache

Examples:
    # Points of a vertical segment
    python -m linepoints rasterize 3 1 3 4

    # Draw the built-in scene (two rectangles, two passes)
    python -m linepoints draw

    # Draw a scene file as an ASCII picture
    python -m linepoints draw scene.yaml --grid
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def cmd_info(args: argparse.Namespace) -> int:
    """Show detailed version and system information."""
    from ._version import print_version_info

    print_version_info()
    return 0


def cmd_rasterize(args: argparse.Namespace) -> int:
    """Print the points of a single segment, one `x,y` per line."""
    from .geometry import Segment
    from .rasterizer import MemoizingRasterizer

    rasterizer = MemoizingRasterizer(strict=args.strict)
    segment = Segment.from_coords(args.x1, args.y1, args.x2, args.y2)
    for point in rasterizer.rasterize(segment):
        print(f"{point.x},{point.y}")
    return 0


def cmd_draw(args: argparse.Namespace) -> int:
    """Draw a scene pass after pass, reusing cached points."""
    from .drawing import ConsoleCanvas, GridCanvas, draw
    from .rasterizer import MemoizingRasterizer
    from .scene import build_objects, default_scene, load_scene

    scene = load_scene(args.scene_file) if args.scene_file else default_scene()
    passes = args.passes if args.passes is not None else scene.passes
    strict = args.strict or scene.strict

    rasterizer = MemoizingRasterizer(strict=strict)
    objects = build_objects(scene)

    drawn = 0
    grid = GridCanvas() if args.grid else None
    for _ in range(passes):
        if grid is not None:
            drawn += draw(objects, rasterizer, grid)
        else:
            drawn += draw(objects, rasterizer, ConsoleCanvas(sys.stdout))
            print()

    if grid is not None:
        print(grid.render())

    stats = rasterizer.stats()
    print(
        f"{drawn} point(s) drawn in {passes} pass(es); "
        f"{stats.invocations} line(s) rasterized, {stats.hits} cache hit(s), "
        f"{stats.unsupported} unsupported"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for line-points."""
    from ._version import __version__
    from .utils import LinePointsError, configure_logging

    parser = argparse.ArgumentParser(
        prog="python -m linepoints",
        description="Line-points - memoizing line-to-point adapter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m linepoints --version             Show version
  python -m linepoints info                  Show detailed system info
  python -m linepoints rasterize 3 1 3 4     Print points of a segment
  python -m linepoints draw --grid           Draw the built-in scene
        """,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"line-points {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $LINEPOINTS_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show detailed version and system information",
        description="Display version, Python, platform, and dependency information.",
    )
    info_parser.set_defaults(func=cmd_info)

    # rasterize command
    rasterize_parser = subparsers.add_parser(
        "rasterize",
        help="Print the integer points of a segment",
        description="Rasterize the segment from (X1, Y1) to (X2, Y2).",
    )
    for name in ("x1", "y1", "x2", "y2"):
        rasterize_parser.add_argument(name, type=int, metavar=name.upper())
    rasterize_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on segments that are not axis-aligned",
    )
    rasterize_parser.set_defaults(func=cmd_rasterize)

    # draw command
    draw_parser = subparsers.add_parser(
        "draw",
        help="Draw a scene through the point cache",
        description="Load a scene file (JSON/YAML/TOML) and draw it point by point.",
    )
    draw_parser.add_argument(
        "scene_file",
        nargs="?",
        help="Path to scene file (json, yaml, yml, toml); default: built-in scene",
    )
    draw_parser.add_argument(
        "--passes",
        "-p",
        type=positive_int,
        default=None,
        help="Number of drawing passes (default: from scene, 2)",
    )
    draw_parser.add_argument(
        "--grid",
        "-g",
        action="store_true",
        help="Render the points as an ASCII picture",
    )
    draw_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on segments that are not axis-aligned",
    )
    draw_parser.set_defaults(func=cmd_draw)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.log_level)

    try:
        return args.func(args)
    except LinePointsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

r"""Drawing vector objects on point-only canvases.

A canvas is anything callable with a single Point: that is the only drawing
primitive available. `draw` bridges vector objects to such a canvas through
a `MemoizingRasterizer`, so redrawing the same objects reuses the cached
points.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, List, Optional, Set, TextIO

from typing_extensions import Protocol

from .geometry import Point, Segment
from .rasterizer import MemoizingRasterizer

logger = logging.getLogger(__name__)

__all__ = ["DrawPoint", "draw", "ConsoleCanvas", "GridCanvas"]


class DrawPoint(Protocol):
    """Callback that draws a single point."""

    def __call__(self, point: Point) -> Any: ...


def draw(
    objects: Iterable[Iterable[Segment]],
    rasterizer: MemoizingRasterizer,
    draw_point: DrawPoint,
) -> int:
    """Draw every segment of every object, point by point.

    Args:
        objects: Vector objects, each an iterable of segments.
        rasterizer: Adapter converting segments to points.
        draw_point: Callback receiving each produced point.

    Returns:
        The number of points forwarded to `draw_point`.
    """
    drawn = 0
    for vector_object in objects:
        for segment in vector_object:
            for point in rasterizer.rasterize(segment):
                draw_point(point)
                drawn += 1
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Drew %d point(s); %r", drawn, rasterizer)
    return drawn


class ConsoleCanvas:
    """Writes one character per point, ignoring coordinates."""

    def __init__(self, stream: Optional[TextIO] = None, mark: str = "."):
        self.stream = stream if stream is not None else sys.stdout
        self.mark = mark
        self.count = 0

    def __call__(self, point: Point) -> None:
        self.stream.write(self.mark)
        self.count += 1


class GridCanvas:
    """Collects points and renders them as an ASCII picture.

    The picture spans the bounding box of the collected points; row 0 is the
    smallest `y`.
    """

    def __init__(self, mark: str = "#", blank: str = " "):
        self.mark = mark
        self.blank = blank
        self.points: Set[Point] = set()

    def __call__(self, point: Point) -> None:
        self.points.add(point)

    def render(self) -> str:
        if not self.points:
            return ""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        left, top = min(xs), min(ys)
        width, height = max(xs) - left + 1, max(ys) - top + 1

        rows: List[List[str]] = [[self.blank] * width for _ in range(height)]
        for p in self.points:
            rows[p.y - top][p.x - left] = self.mark
        return "\n".join("".join(row).rstrip() for row in rows)

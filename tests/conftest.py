"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import List

import pytest

from linepoints import (
    MemoizingRasterizer,
    Point,
    Segment,
    VectorObject,
    VectorRectangle,
)

# =============================================================================
# Fixtures: Fresh Rasterizers
# =============================================================================


@pytest.fixture
def rasterizer():
    """A fresh, non-strict rasterizer for each test."""
    return MemoizingRasterizer()


@pytest.fixture
def strict_rasterizer():
    """A fresh rasterizer that rejects diagonal segments."""
    return MemoizingRasterizer(strict=True)


# =============================================================================
# Fixtures: Sample Segments
# =============================================================================


@pytest.fixture
def vertical_segment():
    return Segment(Point(3, 1), Point(3, 4))


@pytest.fixture
def horizontal_segment():
    return Segment(Point(1, 1), Point(11, 1))


@pytest.fixture
def degenerate_segment():
    return Segment(Point(5, 2), Point(5, 2))


@pytest.fixture
def diagonal_segment():
    return Segment(Point(0, 0), Point(3, 4))


# =============================================================================
# Fixtures: Vector Objects
# =============================================================================


@pytest.fixture
def nested_rectangles() -> List[VectorObject]:
    """The two nested rectangles of the built-in scene."""
    return [VectorRectangle(1, 1, 10, 10), VectorRectangle(3, 3, 6, 6)]


@pytest.fixture
def collecting_canvas():
    """A draw-point callback that records every point it receives."""

    class CollectingCanvas:
        def __init__(self):
            self.points: List[Point] = []

        def __call__(self, point: Point) -> None:
            self.points.append(point)

    return CollectingCanvas()

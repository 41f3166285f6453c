r"""Immutable value types for integer geometry.

Provides:

- Point: a 2D integer coordinate with value equality.
- Segment: an ordered pair of Points with value equality.
- SegmentKey: the structural key a segment is cached under.
- Orientation: how a segment relates to the axes.

Both value types are frozen pydantic models, so they validate their inputs
(strictly: booleans and floats are not coordinates) and cannot be mutated
after construction.
"""

from __future__ import annotations

import enum
from typing import Any, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["Orientation", "Point", "Segment", "SegmentKey"]

# Multiplier of the structural hash mix.
HASH_FACTOR = 397


class Orientation(str, enum.Enum):
    """Orientation of a segment relative to the axes."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"


class SegmentKey(NamedTuple):
    """Structural key of a segment: both endpoints, start first."""

    start_x: int
    start_y: int
    end_x: int
    end_y: int


class Point(BaseModel):
    """An immutable integer coordinate.

    Two points are equal iff both coordinates match. The hash mixes both
    coordinates, so equal points always hash equally.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    x: int
    y: int

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x=x, y=y)

    def __hash__(self) -> int:
        return (self.x * HASH_FACTOR) ^ self.y

    def as_tuple(self) -> Tuple[int, int]:
        """Return the point as an `(x, y)` tuple."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


class Segment(BaseModel):
    """An immutable line segment from `start` to `end`.

    Equality is order-sensitive: a segment from A to B equals one from B to A
    only when A equals B. Endpoints may be given as Points or as `(x, y)`
    pairs.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    start: Point
    end: Point

    def __init__(self, start: Any, end: Any) -> None:
        super().__init__(start=start, end=end)

    @field_validator("start", "end", mode="before")
    @classmethod
    def coerce_pair(cls, value: Any) -> Any:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return Point(*value)
        return value

    @classmethod
    def from_coords(cls, x1: int, y1: int, x2: int, y2: int) -> "Segment":
        """Build a segment from four coordinates."""
        return cls(Point(x1, y1), Point(x2, y2))

    def __hash__(self) -> int:
        return (hash(self.start) * HASH_FACTOR) ^ hash(self.end)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    # -----------------------------------------------------------------------------
    # Structural Properties
    # -----------------------------------------------------------------------------

    def structural_key(self) -> SegmentKey:
        """Return the key this segment is cached under."""
        return SegmentKey(self.start.x, self.start.y, self.end.x, self.end.y)

    @property
    def orientation(self) -> Orientation:
        # Degenerate segments count as vertical.
        if self.start.x == self.end.x:
            return Orientation.VERTICAL
        if self.start.y == self.end.y:
            return Orientation.HORIZONTAL
        return Orientation.DIAGONAL

    @property
    def is_axis_aligned(self) -> bool:
        return self.orientation is not Orientation.DIAGONAL

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

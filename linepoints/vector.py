"""Vector graphics objects: ordered collections of segments."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Union, overload

from .geometry import Point, Segment

__all__ = ["VectorObject", "VectorRectangle"]


class VectorObject(Sequence[Segment]):
    """A graphic object made out of segments."""

    def __init__(self, segments: Iterable[Segment] = ()):
        self._segments: List[Segment] = list(segments)

    def add(self, segment: Segment) -> None:
        self._segments.append(segment)

    @overload
    def __getitem__(self, index: int) -> Segment: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Segment]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Segment, Sequence[Segment]]:
        return self._segments[index]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._segments!r})"


class VectorRectangle(VectorObject):
    """An axis-aligned rectangle with its top-left corner at `(x, y)`.

    Segments are added top, right, left, bottom; the left and bottom edges
    start from the left-hand corners.
    """

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__()
        self.x = x
        self.y = y
        self.width = width
        self.height = height

        right, bottom = x + width, y + height
        self.add(Segment(Point(x, y), Point(right, y)))
        self.add(Segment(Point(right, y), Point(right, bottom)))
        self.add(Segment(Point(x, y), Point(x, bottom)))
        self.add(Segment(Point(x, bottom), Point(right, bottom)))

    def __repr__(self) -> str:
        return (
            f"VectorRectangle(x={self.x}, y={self.y}, "
            f"width={self.width}, height={self.height})"
        )

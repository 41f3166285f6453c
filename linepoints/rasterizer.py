r"""Memoizing line-to-point adapter.

`MemoizingRasterizer` adapts the segment interface of vector graphics to the
point interface of a pixel canvas. Converting a segment into points produces
a lot of intermediate data, so every result is cached under the segment's
structural key: rasterizing an equal segment again, even one built
independently, returns the stored points without recomputation.

Only axis-aligned segments are rasterized. A diagonal segment yields an empty
sequence and is reported as unsupported (or raises, for strict rasterizers).

Usage::

    rasterizer = MemoizingRasterizer()
    points = rasterizer.rasterize(Segment((3, 1), (3, 4)))
    assert [p.as_tuple() for p in points] == [(3, 1), (3, 2), (3, 3), (3, 4)]
    assert rasterizer.invocation_count == 1
"""

from __future__ import annotations

import itertools
import logging
from threading import Lock
from typing import Dict, Iterator, Tuple

from pydantic import BaseModel, ConfigDict

from .geometry import Orientation, Point, Segment, SegmentKey
from .mixin import CacheMutatorMixin
from .storage import ThreadSafeLocalStorage
from .utils import UnsupportedSegmentError, log_debug

logger = logging.getLogger(__name__)

__all__ = ["MemoizingRasterizer", "RasterizerStats", "points_on_segment"]

Points = Tuple[Point, ...]


class RasterizerStats(BaseModel):
    """Diagnostic counters of a rasterizer."""

    model_config = ConfigDict(frozen=True)

    entries: int
    invocations: int
    hits: int
    misses: int
    unsupported: int


# -----------------------------------------------------------------------------
# Rasterization
# -----------------------------------------------------------------------------


def points_on_segment(segment: Segment) -> Points:
    """Return the integer points of an axis-aligned segment.

    Points are ordered by increasing `y` for vertical segments and by
    increasing `x` for horizontal ones. Diagonal segments yield `()`.
    """
    start, end = segment.start, segment.end
    orientation = segment.orientation

    if orientation is Orientation.VERTICAL:
        top, bottom = min(start.y, end.y), max(start.y, end.y)
        return tuple(Point(start.x, y) for y in range(top, bottom + 1))

    if orientation is Orientation.HORIZONTAL:
        left, right = min(start.x, end.x), max(start.x, end.x)
        return tuple(Point(x, start.y) for x in range(left, right + 1))

    return ()


# -----------------------------------------------------------------------------
# Memoizing Adapter
# -----------------------------------------------------------------------------


class MemoizingRasterizer(CacheMutatorMixin[SegmentKey, Points]):
    """Converts segments into points, computing each distinct segment once.

    The cache maps structural keys to point tuples. Entries are never evicted;
    the cache lives as long as the rasterizer.

    Thread safety:
        Concurrent requests for the same key wait on a per-key lock held by
        the first caller, so each key is computed at most once. Lookups of
        cached entries never wait on computations of other keys.

    Args:
        strict: Raise `UnsupportedSegmentError` for diagonal segments instead
            of returning an empty sequence.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._cache: ThreadSafeLocalStorage[SegmentKey, Points] = (
            ThreadSafeLocalStorage()
        )
        self._pending: Dict[SegmentKey, Lock] = {}
        self._pending_lock = Lock()
        self._counter_lock = Lock()
        self._invocations = 0
        self._hits = 0
        self._misses = 0
        self._unsupported = 0

    def _get_mapping(self) -> ThreadSafeLocalStorage[SegmentKey, Points]:  # type: ignore[override]
        return self._cache

    # -----------------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------------

    @log_debug
    def rasterize(self, segment: Segment) -> Points:
        """Return the ordered points of `segment`, computing them at most once.

        Raises:
            UnsupportedSegmentError: if the rasterizer is strict and the
                segment is not axis-aligned.
        """
        if self.strict and not segment.is_axis_aligned:
            self._reject(segment)

        key = segment.structural_key()
        cached = self._cache.get(key)
        if cached is not None:
            self._record_hit()
            return cached

        with self._key_lock(key):
            try:
                cached = self._cache.get(key)
                if cached is not None:
                    # another thread computed it while we waited
                    self._record_hit()
                    return cached
                points = self._compute(segment)
                self._set_artifact(key, points)
            finally:
                with self._pending_lock:
                    self._pending.pop(key, None)
        return points

    def is_cached(self, segment: Segment) -> bool:
        """Return True if `segment` has already been rasterized."""
        return self._has_identifier(segment.structural_key())

    def cached_points(self, segment: Segment) -> Points:
        """Return the cached points of `segment` without computing them.

        Raises:
            CacheLookupError: if `segment` was never rasterized.
        """
        return self._get_artifact(segment.structural_key())

    def iter_points(self) -> Iterator[Point]:
        """Iterate over every cached point, entry by entry in insertion order."""
        return itertools.chain.from_iterable(
            self._get_artifact(key) for key in self._iter_mapping()
        )

    @property
    def invocation_count(self) -> int:
        """Number of first-time computations performed so far."""
        return self._invocations

    def stats(self) -> RasterizerStats:
        with self._counter_lock:
            return RasterizerStats(
                entries=self._len_mapping(),
                invocations=self._invocations,
                hits=self._hits,
                misses=self._misses,
                unsupported=self._unsupported,
            )

    def __len__(self) -> int:
        return self._len_mapping()

    def __contains__(self, segment: object) -> bool:
        return isinstance(segment, Segment) and self.is_cached(segment)

    def __repr__(self) -> str:
        return (
            f"<MemoizingRasterizer(entries={len(self)}, "
            f"invocations={self._invocations}, strict={self.strict})>"
        )

    # -----------------------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------------------

    def _key_lock(self, key: SegmentKey) -> Lock:
        with self._pending_lock:
            return self._pending.setdefault(key, Lock())

    def _compute(self, segment: Segment) -> Points:
        with self._counter_lock:
            self._invocations += 1
            self._misses += 1
            count = self._invocations

        logger.info(
            "%d: Generating points for line [%d, %d]-[%d, %d]",
            count,
            segment.start.x,
            segment.start.y,
            segment.end.x,
            segment.end.y,
        )
        points = points_on_segment(segment)
        if not segment.is_axis_aligned:
            with self._counter_lock:
                self._unsupported += 1
            logger.warning(
                "unsupported: non-axis-aligned segment %s yields no points", segment
            )
        return points

    def _record_hit(self) -> None:
        with self._counter_lock:
            self._hits += 1

    def _reject(self, segment: Segment) -> None:
        with self._counter_lock:
            self._unsupported += 1
        raise UnsupportedSegmentError(
            "unsupported: non-axis-aligned segment",
            [
                "Split the segment into horizontal and vertical parts",
                "Use a non-strict rasterizer to get an empty result instead",
            ],
            {
                "segment": str(segment),
                "orientation": segment.orientation.value,
                "operation": "rasterize",
            },
        )

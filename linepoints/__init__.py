from ._version import __version__
from .drawing import ConsoleCanvas, DrawPoint, GridCanvas, draw
from .engines import SceneFileEngine, ShapeEngine
from .geometry import Orientation, Point, Segment, SegmentKey
from .rasterizer import MemoizingRasterizer, RasterizerStats, points_on_segment
from .scene import SceneConfig, ShapeSpec, build_objects, default_scene, load_scene
from .utils import (
    CacheError,
    CacheLookupError,
    DuplicateEntryError,
    EntryRemovalError,
    LinePointsError,
    SceneConfigError,
    UnsupportedSegmentError,
    configure_logging,
)
from .vector import VectorObject, VectorRectangle

__all__ = [
    "Point",
    "Segment",
    "SegmentKey",
    "Orientation",
    "MemoizingRasterizer",
    "RasterizerStats",
    "points_on_segment",
    "VectorObject",
    "VectorRectangle",
    "DrawPoint",
    "draw",
    "ConsoleCanvas",
    "GridCanvas",
    "SceneConfig",
    "ShapeSpec",
    "load_scene",
    "build_objects",
    "default_scene",
    "SceneFileEngine",
    "ShapeEngine",
    "LinePointsError",
    "CacheError",
    "CacheLookupError",
    "DuplicateEntryError",
    "EntryRemovalError",
    "UnsupportedSegmentError",
    "SceneConfigError",
    "configure_logging",
    "__version__",
]

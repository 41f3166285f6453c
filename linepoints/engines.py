r"""Engine registries for scene loading.

Provides two registries:

- SceneFileEngine: maps file extensions to loader functions
- ShapeEngine: maps shape kinds to vector-object builders

Usage::

    @SceneFileEngine.register_artifact
    def json(filepath: Path) -> dict:
        import json
        return json.load(filepath.open())

    @ShapeEngine.register_artifact
    def rectangle(x: int, y: int, width: int, height: int) -> VectorObject:
        return VectorRectangle(x, y, width, height)
"""

from __future__ import annotations

import json as json_lib
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

import yaml as yaml_lib
from pydantic import validate_call

# TOML: use tomllib (Python 3.11+) or tomli
if sys.version_info >= (3, 11):
    import tomllib as tomli
else:
    import tomli

from .geometry import Segment
from .utils import SceneConfigError, get_func_name
from .vector import VectorObject, VectorRectangle

logger = logging.getLogger(__name__)

__all__ = ["FunctionalRegistry", "SceneFileEngine", "ShapeEngine"]

F = TypeVar("F", bound=Callable[..., Any])


class FunctionalRegistry(Generic[F]):
    """Registry of functions keyed by their names.

    Args:
        name: Human-readable registry name used in error messages.
    """

    def __init__(self, name: str):
        self.name = name
        self._repository: Dict[Hashable, F] = {}

    def register_artifact(self, func: F, key: Optional[Hashable] = None) -> F:
        """Register `func` under `key` (default: the function name).

        Returns `func` unchanged so this can be used as a decorator.
        """
        if not callable(func):
            raise SceneConfigError(
                f"{func!r} is not callable",
                ["Register a function defined with 'def'"],
                {"registry": self.name, "actual_type": type(func).__name__},
            )
        if key is None:
            key = get_func_name(func)
        if key in self._repository:
            raise SceneConfigError(
                f"Key '{key}' is already registered in {self.name}",
                ["Use a different key name"],
                {"registry": self.name, "key": str(key)},
            )
        self._repository[key] = func
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s: registered %s", self.name, key)
        return func

    def get_artifact(self, key: Hashable) -> F:
        """Return the function registered under `key`.

        Raises:
            SceneConfigError: if `key` is not registered.
        """
        if key not in self._repository:
            available = ", ".join(str(k) for k in self._repository)
            raise SceneConfigError(
                f"Key '{key}' is not registered in {self.name}",
                [f"Use one of: {available}"],
                {"registry": self.name, "key": str(key)},
            )
        return self._repository[key]

    def has_identifier(self, key: Hashable) -> bool:
        return key in self._repository

    def keys(self) -> List[Hashable]:
        return list(self._repository)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"<FunctionalRegistry(name={self.name!r}, keys={self.keys()})>"


SceneFileEngine: FunctionalRegistry[Callable[[Path], Dict[str, Any]]] = (
    FunctionalRegistry("SceneFileEngine")
)
"""Loaders from file extension to a raw scene document."""

ShapeEngine: FunctionalRegistry[Callable[..., VectorObject]] = FunctionalRegistry(
    "ShapeEngine"
)
"""Builders from shape kind to a vector object."""


# ============================================================================
# Default Scene File Engines
# ============================================================================


@SceneFileEngine.register_artifact
def json(filepath: Path) -> Dict[str, Any]:
    """Load a scene from a JSON file."""
    with open(filepath, "r") as f:
        return json_lib.load(f)


@SceneFileEngine.register_artifact
def yaml(filepath: Path) -> Dict[str, Any]:
    """Load a scene from a YAML file."""
    with open(filepath, "r") as f:
        return yaml_lib.safe_load(f)


@SceneFileEngine.register_artifact
def yml(filepath: Path) -> Dict[str, Any]:
    """Load a scene from a YML file (alias for yaml)."""
    return yaml(filepath)


@SceneFileEngine.register_artifact
def toml(filepath: Path) -> Dict[str, Any]:
    """Load a scene from a TOML file."""
    with open(filepath, "rb") as f:
        return tomli.load(f)


# ============================================================================
# Default Shape Engines
# ============================================================================


@ShapeEngine.register_artifact
@validate_call
def rectangle(x: int, y: int, width: int, height: int) -> VectorObject:
    """Rectangle with its top-left corner at `(x, y)`."""
    return VectorRectangle(x, y, width, height)


@ShapeEngine.register_artifact
@validate_call
def line(start: Tuple[int, int], end: Tuple[int, int]) -> VectorObject:
    """A single segment from `start` to `end`."""
    return VectorObject([Segment(start, end)])

"""Utility exceptions and helpers for the line-to-point adapter.

This module defines a small hierarchy of rich exceptions used throughout the
cache accessor/mutator mixins, the rasterizer and the scene loaders, plus the
logging helpers shared by the package.

Exceptions:
    LinePointsError: Base class carrying `suggestions` and `context` metadata.
    CacheError: Raised when cache mapping errors occur.
    CacheLookupError: Raised when a segment has no cached entry.
    DuplicateEntryError: Raised when a cache entry would be written twice.
    EntryRemovalError: Raised when a cache entry would be removed.
    UnsupportedSegmentError: Raised by strict rasterizers on diagonal segments.
    SceneConfigError: Raised when a scene file or document cannot be used.

Helpers:
    get_type_name(cls, qualname=False): Return a human-readable type name.
    log_debug(func): Log calls of `func` at DEBUG level.
    configure_logging(level=None): Apply the package's logging format.
"""

import logging
import os
from functools import partial, partialmethod, wraps
from inspect import isclass
from typing import Any, Callable, Dict, List, Optional, TypeVar

from typing_extensions import ParamSpec

__all__ = [
    "LinePointsError",
    "CacheError",
    "CacheLookupError",
    "DuplicateEntryError",
    "EntryRemovalError",
    "UnsupportedSegmentError",
    "SceneConfigError",
    "get_type_name",
    "get_func_name",
    "log_debug",
    "configure_logging",
]

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)-5s] [%(name)s:%(lineno)d] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

P = ParamSpec("P")
R = TypeVar("R")


# -----------------------------------------------------------------------------
# Exception Classes
# -----------------------------------------------------------------------------


class LinePointsError(Exception):
    """Base exception with structured context.

    Attributes:
        message: Human-readable error text.
        suggestions: List of short, imperative hints for remediation.
        context: Free-form key/value details safe to log and render.
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}
        super().__init__(self._build_enhanced_message())

    def _build_enhanced_message(self) -> str:
        """Embed key context and suggestions into the exception string."""
        lines = [self.message]

        if self.context:
            if "segment" in self.context:
                lines.append(f"  Segment: {self.context['segment']}")
            if "orientation" in self.context:
                lines.append(f"  Orientation: {self.context['orientation']}")

        if self.suggestions:
            lines.append("  Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"    • {suggestion}")

        return "\n".join(lines)

    def __str__(self) -> str:
        # KeyError subclasses would otherwise render the repr of the message.
        return self._build_enhanced_message()


class CacheError(LinePointsError):
    """Raised for key-related cache errors with rich context attached."""


class CacheLookupError(CacheError, KeyError):
    """Raised when a structural key has no cached point sequence."""


class DuplicateEntryError(CacheError):
    """Raised when a cached point sequence would be overwritten."""


class EntryRemovalError(CacheError):
    """Raised when a cached point sequence would be removed."""


class UnsupportedSegmentError(LinePointsError, ValueError):
    """Raised by strict rasterizers for segments that are not axis-aligned."""


class SceneConfigError(LinePointsError):
    """Raised when a scene file or scene document cannot be used."""


# -----------------------------------------------------------------------------
# Naming Helpers
# -----------------------------------------------------------------------------


def get_type_name(cls: type, qualname: bool = False) -> str:
    """Return a readable name for a type.

    Args:
        cls: The class or type object.
        qualname: If True, return the qualified name when available.

    Returns:
        The type's `__qualname__`, `__name__`, or a string fallback.
    """
    if not isclass(cls):
        raise LinePointsError(f"{cls} is not a class")
    if qualname and hasattr(cls, "__qualname__"):
        return getattr(cls, "__qualname__")
    elif hasattr(cls, "__name__"):
        return getattr(cls, "__name__")
    else:
        return str(cls)


def get_func_name(func: Callable[..., Any]) -> str:
    """Retrieve the name of a function, resolving partials and wrappers."""
    if isinstance(func, (partial, partialmethod)):
        return get_func_name(func.func)
    while hasattr(func, "__wrapped__"):
        func = getattr(func, "__wrapped__")
    return getattr(func, "__name__", str(func))


# -----------------------------------------------------------------------------
# Logging Helpers
# -----------------------------------------------------------------------------


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the package format.

    Parameters:
        level (Optional[str]): Level name. Defaults to the
            `LINEPOINTS_LOG_LEVEL` environment variable, then "INFO".
    """
    if level is None:
        level = os.getenv("LINEPOINTS_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def log_debug(func: Callable[P, R]) -> Callable[P, R]:
    """
    Decorator to log function calls in debug mode.

    If the environment variable 'LINEPOINTS_QUIET' is set to 'TRUE',
    the function is returned undecorated.

    Parameters:
        func (Callable): The function to decorate.

    Returns:
        Callable: The decorated function.
    """
    if os.getenv("LINEPOINTS_QUIET", "FALSE").upper() == "TRUE":
        return func

    func_logger = logging.getLogger(func.__module__)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if func_logger.isEnabledFor(logging.DEBUG):
            arg_str = ", ".join(repr(a) for a in args)
            kwarg_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
            all_args = ", ".join(filter(None, [arg_str, kwarg_str]))
            func_logger.debug(f"{get_func_name(func)}({all_args})")
        return func(*args, **kwargs)

    return wrapper

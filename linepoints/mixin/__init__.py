"""Public API for the cache mixins package.

Exports:
    CacheAccessorMixin: read-only cache interface.
    CacheMutatorMixin: write-once extensions over accessor.
"""

from .accessor import CacheAccessorMixin
from .mutator import CacheMutatorMixin

__all__ = [
    "CacheAccessorMixin",
    "CacheMutatorMixin",
]

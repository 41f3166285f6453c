r"""Write-once cache mixin with rich error context.

This module adds insert operations on top of the read-only accessor mixin.

Behavior:
  - `_set_artifact` inserts a single entry after asserting the key is absent.
  - There are no replace or delete operations: cached entries live as long
    as the cache that owns them.

Simple inheritance diagram (Doxygen dot):
\dot
digraph CachePattern {
    rankdir=LR;
    node [shape=rectangle];
    "CacheAccessorMixin" -> "CacheMutatorMixin";
}
\enddot
"""

from __future__ import annotations

from typing import Hashable, MutableMapping, TypeVar

from ..utils import DuplicateEntryError, get_type_name
from .accessor import CacheAccessorMixin

__all__ = [
    "CacheMutatorMixin",
]


# -----------------------------------------------------------------------------
# Type Variables
# -----------------------------------------------------------------------------

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


# -----------------------------------------------------------------------------
# Base Mixin for Inserting Cache Entries
# -----------------------------------------------------------------------------


class CacheMutatorMixin(CacheAccessorMixin[KeyType, ValType]):
    """Write-once extensions for a cache.

    Error semantics:
        Inserting an existing key raises `DuplicateEntryError` with rich context.
    """

    def _get_mapping(self) -> MutableMapping[KeyType, ValType]:  # type: ignore[override]
        """Return the underlying writable mapping for this cache."""
        raise NotImplementedError(
            f"Subclasses must implement `{type(self).__name__}._get_mapping` method."
        )

    # -----------------------------------------------------------------------------
    # Setter Functions for Cache Entries
    # -----------------------------------------------------------------------------

    def _set_artifact(self, key: KeyType, item: ValType) -> None:
        """Insert `item` under `key`.

        Raises:
            DuplicateEntryError: if `key` is already present.
        """
        self._assert_absence(key)[key] = item

    # -----------------------------------------------------------------------------
    # Helper Functions for Error Handling with Rich Context
    # -----------------------------------------------------------------------------

    def _assert_absence(self, key: KeyType) -> MutableMapping[KeyType, ValType]:
        """Return mapping if `key` is absent; otherwise raise `DuplicateEntryError`."""
        mapping = self._get_mapping()
        if key in mapping:
            cache_name = get_type_name(type(self))
            suggestions = [
                f"Key '{key}' already exists in {cache_name}",
                "Cached entries are write-once; read the existing entry instead",
            ]
            context = {
                "operation": "assert_absence",
                "cache_type": cache_name,
                "key": str(key),
                "key_type": get_type_name(type(key)),
                "cache_size": len(mapping),
            }
            raise DuplicateEntryError(
                f"Key '{key}' is already found in the cache", suggestions, context
            )
        return mapping

r"""Thread-safe write-once storage backing the point cache."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import RLock
from typing import Dict, Generic, Hashable, Iterator, TypeVar

from .utils import DuplicateEntryError, EntryRemovalError

logger = logging.getLogger(__name__)

__all__ = ["ThreadSafeLocalStorage"]

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


class ThreadSafeLocalStorage(Mapping, Generic[KeyType, ValType]):
    """Thread-safe local storage with write-once, multi-read semantics.

    Entries can be added but never replaced or removed. Every access holds the
    internal lock only for the duration of a single dictionary operation.
    """

    def __init__(self):
        self._storage: Dict[KeyType, ValType] = {}
        self._lock = RLock()

    def __getitem__(self, key: KeyType) -> ValType:
        with self._lock:
            return self._storage[key]

    def __setitem__(self, key: KeyType, value: ValType) -> None:
        with self._lock:
            if key in self._storage:
                raise DuplicateEntryError(
                    f"Key '{key}' is already stored",
                    ["Stored entries are immutable; read the existing value"],
                    {"key": str(key), "storage_size": len(self._storage)},
                )
            self._storage[key] = value
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Stored entry for %s", key)

    def __delitem__(self, key: KeyType) -> None:
        with self._lock:
            raise EntryRemovalError(
                f"Key '{key}' cannot be removed",
                ["Stored entries are kept for the lifetime of the storage"],
                {
                    "key": str(key),
                    "storage_size": len(self._storage),
                    "operation": "delete",
                },
            )

    def __iter__(self) -> Iterator[KeyType]:
        with self._lock:
            return iter(list(self._storage.keys()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._storage

    def __repr__(self) -> str:
        return f"<ThreadSafeLocalStorage(size={len(self)})>"

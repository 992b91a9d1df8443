"""StorageBackend adapter over an in-memory `KVStore`.

Strings are stored as scalars and lists/tuples of strings as list values.
Reads return a plain `str` or a fresh `list`, so callers never hold a
reference into the store.
"""
from __future__ import annotations
import logging
from typing import Any, Iterable, Optional

from simplekv_lib.store.memory_store import KVStore
from simplekv_lib.store.values import ValueType

from .base import StorageBackend

logger = logging.getLogger(__name__)


class KVStoreBackend(StorageBackend):
    def __init__(self, store: Optional[KVStore] = None) -> None:
        self.store = store if store is not None else KVStore()

    def save(self, namespace: str, key: str, value: Any) -> None:
        if isinstance(value, str):
            self.store.scalar_set(namespace, key, value)
            return
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise TypeError(
                f"KVStoreBackend stores str or a sequence of str, got {type(value).__name__}"
            )
        # Replace whatever was there; an empty sequence leaves no key behind.
        self.store.delete(namespace, key)
        for item in value:
            self.store.push_back(namespace, key, item)
        logger.debug("Saved list %s/%s (%d items)", namespace, key, len(value))

    def load(self, namespace: str, key: str) -> Any:
        kind = self.store.type_of(namespace, key)
        if kind is ValueType.STRING:
            return self.store.scalar_get(namespace, key)
        if kind is ValueType.LIST:
            return self.store.list_members(namespace, key)
        raise KeyError(key)

    def delete(self, namespace: str, key: str) -> None:
        if not self.store.delete(namespace, key):
            raise KeyError(key)

    def list_keys(self, namespace: str) -> Iterable[str]:
        return self.store.keys(namespace)

    def exists(self, namespace: str, key: str) -> bool:
        return self.store.key_exists(namespace, key)

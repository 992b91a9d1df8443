"""Storage backend interface definitions.

Defines the StorageBackend abstract class for consumers that want plain
namespaced `save`/`load` semantics on top of the store. The store itself
reports failures as `None`, `False` or `-1` (see `KVStoreProtocol`);
backends translate those into exceptions: `KeyError` for a missing key and
`TypeError` for a value the backend cannot hold.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Iterable


class StorageBackend(ABC):
    """Abstract storage backend.

    Implementations are not required to be thread-safe.
    """

    @abstractmethod
    def save(self, namespace: str, key: str, value: Any) -> None:
        """Save `value` under `namespace` and `key`, replacing any prior value."""

    @abstractmethod
    def load(self, namespace: str, key: str) -> Any:
        """Load and return object stored under `namespace`/`key`.

        Should raise `KeyError` if the key does not exist.
        """

    @abstractmethod
    def delete(self, namespace: str, key: str) -> None:
        """Delete the stored object. Raise `KeyError` if not found."""

    @abstractmethod
    def list_keys(self, namespace: str) -> Iterable[str]:
        """Return an iterable of keys stored in `namespace`."""

    @abstractmethod
    def exists(self, namespace: str, key: str) -> bool:
        """Return True if `key` exists under `namespace`."""

    def configure(self, **options) -> None:
        """Apply backend options. The default accepts and ignores them."""
        return

"""Storage abstraction package for SimpleKV."""

from .base import StorageBackend
from .kv_backend import KVStoreBackend

__all__ = ["StorageBackend", "KVStoreBackend"]

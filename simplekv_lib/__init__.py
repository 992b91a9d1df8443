"""SimpleKV: an in-memory, namespaced key-value store."""

from simplekv_lib.store import KVStore, KeyRef, ValueType

__all__ = ["KVStore", "KeyRef", "ValueType"]

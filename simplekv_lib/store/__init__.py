"""In-memory namespaced store package."""

from .memory_store import KVStore
from .values import KeyRef, ListValue, Scalar, Value, ValueType
from .errors import ErrorKind

__all__ = [
    "KVStore",
    "KeyRef",
    "ListValue",
    "Scalar",
    "Value",
    "ValueType",
    "ErrorKind",
]

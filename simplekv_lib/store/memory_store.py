"""Memory-backed namespaced key-value store.

Values live in a data structure `[<namespace>][<key>]` where each value is
either a `Scalar` or a `ListValue`. A namespace exists only while it holds
at least one key, and a list exists only while it holds at least one
element.

The store is not thread-safe. Callers sharing one instance across threads
must serialize access themselves.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple

from simplekv_lib.config.config import MissingKeyPolicy, StoreSettings

from . import setops
from .errors import ErrorKind
from .values import KeyRef, ListValue, Scalar, Value, ValueType, type_of_value

logger = logging.getLogger(__name__)


class KVStore:
    def __init__(self, settings: Optional[StoreSettings] = None) -> None:
        self.settings = settings or StoreSettings()
        self._store: Dict[str, Dict[str, Value]] = {}

    # -- internal helpers -------------------------------------------------

    def _lookup(self, namespace: str, key: str) -> Optional[Value]:
        ns = self._store.get(namespace)
        if ns is None:
            return None
        return ns.get(key)

    def _put(self, namespace: str, key: str, value: Value) -> None:
        ns = self._store.get(namespace)
        if ns is None:
            logger.debug("Creating namespace %s", namespace)
            ns = self._store[namespace] = {}
        ns[key] = value

    def _list_for_write(self, op: str, namespace: str, key: str) -> Optional[ListValue]:
        """Return the ListValue at namespace/key, logging why when there is none."""
        value = self._lookup(namespace, key)
        if value is None:
            self._reject(op, namespace, key, ErrorKind.NOT_FOUND)
            return None
        if isinstance(value, Scalar):
            self._reject(op, namespace, key, ErrorKind.TYPE_MISMATCH)
            return None
        return value

    def _prune(self, namespace: str, key: str) -> None:
        """Restore the emptiness invariants after a shrinking mutation.

        Drops the key if it holds an empty list, then drops the namespace
        if it holds no keys.
        """
        ns = self._store.get(namespace)
        if ns is None:
            return
        value = ns.get(key)
        if isinstance(value, ListValue) and not value.items:
            logger.debug("Removing emptied list %s/%s", namespace, key)
            del ns[key]
        if not ns:
            logger.debug("Removing empty namespace %s", namespace)
            del self._store[namespace]

    @staticmethod
    def _reject(op: str, namespace: str, key: str, kind: ErrorKind) -> None:
        logger.debug("%s rejected for %s/%s: %s", op, namespace, key, kind.value)

    # -- existence & introspection ---------------------------------------

    def namespaces(self) -> List[str]:
        return list(self._store.keys())

    def keys(self, namespace: str) -> List[str]:
        return list(self._store.get(namespace, {}).keys())

    def namespace_exists(self, namespace: str) -> bool:
        return namespace in self._store

    def key_exists(self, namespace: str, key: str) -> bool:
        return namespace in self._store and key in self._store[namespace]

    def type_of(self, namespace: str, key: str) -> ValueType:
        return type_of_value(self._lookup(namespace, key))

    def delete(self, namespace: str, key: str) -> bool:
        """Remove namespace/key. Returns False if it did not exist."""
        ns = self._store.get(namespace)
        if ns is None or key not in ns:
            self._reject("delete", namespace, key, ErrorKind.NOT_FOUND)
            return False
        del ns[key]
        self._prune(namespace, key)
        return True

    # -- scalars ----------------------------------------------------------

    def scalar_get(self, namespace: str, key: str) -> Optional[str]:
        value = self._lookup(namespace, key)
        if isinstance(value, Scalar):
            return value.value
        return None

    def scalar_set(self, namespace: str, key: str, value: str) -> None:
        """Store `value` as a scalar, replacing whatever the key held."""
        self._put(namespace, key, Scalar(value))

    # -- list elements ----------------------------------------------------

    def list_length(self, namespace: str, key: str) -> int:
        """Number of elements, or -1 when the key is absent or not a list."""
        value = self._lookup(namespace, key)
        if isinstance(value, ListValue):
            return len(value.items)
        return -1

    def list_members(self, namespace: str, key: str) -> Optional[List[str]]:
        value = self._lookup(namespace, key)
        if isinstance(value, ListValue):
            return list(value.items)
        return None

    def list_index(self, namespace: str, key: str, index: int) -> Optional[str]:
        value = self._lookup(namespace, key)
        if isinstance(value, ListValue) and 0 <= index < len(value.items):
            return value.items[index]
        return None

    def list_set(self, namespace: str, key: str, index: int, value: str) -> bool:
        """Overwrite the element at `index`. Never creates or extends a list."""
        if index < 0:
            self._reject("list_set", namespace, key, ErrorKind.INDEX_OUT_OF_RANGE)
            return False
        lst = self._list_for_write("list_set", namespace, key)
        if lst is None:
            return False
        if index >= len(lst.items):
            self._reject("list_set", namespace, key, ErrorKind.INDEX_OUT_OF_RANGE)
            return False
        lst.items[index] = value
        return True

    def _push(self, op: str, namespace: str, key: str, value: str, front: bool) -> bool:
        current = self._lookup(namespace, key)
        if current is None:
            self._put(namespace, key, ListValue([value]))
            return True
        if isinstance(current, Scalar):
            self._reject(op, namespace, key, ErrorKind.TYPE_MISMATCH)
            return False
        if front:
            current.items.insert(0, value)
        else:
            current.items.append(value)
        return True

    def push_front(self, namespace: str, key: str, value: str) -> bool:
        return self._push("push_front", namespace, key, value, front=True)

    def push_back(self, namespace: str, key: str, value: str) -> bool:
        return self._push("push_back", namespace, key, value, front=False)

    def _pop(self, op: str, namespace: str, key: str, front: bool) -> Optional[str]:
        lst = self._list_for_write(op, namespace, key)
        if lst is None:
            return None
        if not lst.items:
            self._reject(op, namespace, key, ErrorKind.INDEX_OUT_OF_RANGE)
            return None
        item = lst.items.pop(0 if front else -1)
        self._prune(namespace, key)
        return item

    def pop_front(self, namespace: str, key: str) -> Optional[str]:
        return self._pop("pop_front", namespace, key, front=True)

    def pop_back(self, namespace: str, key: str) -> Optional[str]:
        return self._pop("pop_back", namespace, key, front=False)

    # -- set algebra ------------------------------------------------------

    def _operands(
        self, op: str, a: KeyRef, b: KeyRef, missing_ok: bool
    ) -> Optional[Tuple[List[str], List[str]]]:
        """Resolve both operands to plain lists.

        A missing key resolves to an empty list when `missing_ok`, otherwise
        the whole operation fails. A scalar operand always fails, and so
        does an operand that is not a (namespace, key) pair.
        """
        refs = []
        for operand in (a, b):
            if isinstance(operand, str) or len(operand) != 2:
                logger.debug(
                    "%s rejected for operand %r: %s", op, operand, ErrorKind.TYPE_MISMATCH.value
                )
                return None
            refs.append(KeyRef(*operand))

        resolved: List[List[str]] = []
        for ref in refs:
            value = self._lookup(ref.namespace, ref.key)
            if value is None:
                if not missing_ok:
                    self._reject(op, ref.namespace, ref.key, ErrorKind.NOT_FOUND)
                    return None
                resolved.append([])
            elif isinstance(value, Scalar):
                self._reject(op, ref.namespace, ref.key, ErrorKind.TYPE_MISMATCH)
                return None
            else:
                resolved.append(value.items)
        return resolved[0], resolved[1]

    def union(self, a: KeyRef, b: KeyRef) -> Optional[List[str]]:
        """Distinct elements of either list. Missing keys count as empty."""
        operands = self._operands("union", a, b, missing_ok=True)
        if operands is None:
            return None
        return setops.union(*operands)

    def intersection(self, a: KeyRef, b: KeyRef) -> Optional[List[str]]:
        """Distinct elements of both lists in first-occurrence order of `a`.

        Fails on a missing key unless `intersection_missing_key` is EMPTY.
        """
        missing_ok = self.settings.intersection_missing_key == MissingKeyPolicy.EMPTY
        operands = self._operands("intersection", a, b, missing_ok=missing_ok)
        if operands is None:
            return None
        return setops.intersection(*operands)

    def difference(self, a: KeyRef, b: KeyRef) -> Optional[List[str]]:
        """Distinct elements of `a` absent from `b`. Missing keys count as empty."""
        operands = self._operands("difference", a, b, missing_ok=True)
        if operands is None:
            return None
        return setops.difference(*operands)

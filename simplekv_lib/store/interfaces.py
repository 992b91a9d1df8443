from typing import List, Optional, Protocol, runtime_checkable

from .values import KeyRef, ValueType


@runtime_checkable
class KVStoreProtocol(Protocol):
    """Key-value store protocol mirroring `simplekv_lib.store.KVStore`.

    Adapters (wire protocols, CLIs, test harnesses) should target this
    operation set. Implementations report failures through return values
    and never raise for missing keys or type mismatches:

    - `None` from `scalar_get`, `list_members`, `list_index`, the pops and
      the set operations when there is nothing to report;
    - `False` from `delete`, `list_set` and the pushes when the write was
      rejected;
    - `-1` from `list_length` for a scalar or an absent key, since an empty
      list is never kept.

    Set operations take `KeyRef(namespace, key)` operands.
    """

    def namespaces(self) -> List[str]: ...

    def keys(self, namespace: str) -> List[str]: ...

    def namespace_exists(self, namespace: str) -> bool: ...

    def key_exists(self, namespace: str, key: str) -> bool: ...

    def type_of(self, namespace: str, key: str) -> ValueType: ...

    def delete(self, namespace: str, key: str) -> bool: ...

    def scalar_get(self, namespace: str, key: str) -> Optional[str]: ...

    def scalar_set(self, namespace: str, key: str, value: str) -> None: ...

    def list_length(self, namespace: str, key: str) -> int: ...

    def list_members(self, namespace: str, key: str) -> Optional[List[str]]: ...

    def list_index(self, namespace: str, key: str, index: int) -> Optional[str]: ...

    def list_set(self, namespace: str, key: str, index: int, value: str) -> bool: ...

    def push_front(self, namespace: str, key: str, value: str) -> bool: ...

    def push_back(self, namespace: str, key: str, value: str) -> bool: ...

    def pop_front(self, namespace: str, key: str) -> Optional[str]: ...

    def pop_back(self, namespace: str, key: str) -> Optional[str]: ...

    def union(self, a: KeyRef, b: KeyRef) -> Optional[List[str]]: ...

    def intersection(self, a: KeyRef, b: KeyRef) -> Optional[List[str]]: ...

    def difference(self, a: KeyRef, b: KeyRef) -> Optional[List[str]]: ...

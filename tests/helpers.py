from typing import Iterable

from simplekv_lib.store import KVStore


def make_list(store: KVStore, namespace: str, key: str, items: Iterable[str]) -> None:
    """Build a list value by pushing `items` to the back in order."""
    for item in items:
        assert store.push_back(namespace, key, item) is True

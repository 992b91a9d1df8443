import pytest

from simplekv_lib.storage import KVStoreBackend, StorageBackend
from simplekv_lib.store import KVStore, ValueType


def test_backend_is_storage_backend():
    assert isinstance(KVStoreBackend(), StorageBackend)


def test_save_load_delete_and_list_keys():
    b = KVStoreBackend()
    ns = "unittest"

    b.save(ns, "item1", "v")
    assert b.exists(ns, "item1") is True
    assert "item1" in list(b.list_keys(ns))
    assert b.load(ns, "item1") == "v"
    b.delete(ns, "item1")
    assert b.exists(ns, "item1") is False
    assert b.store.namespace_exists(ns) is False


def test_save_list_replaces_existing_value():
    store = KVStore()
    b = KVStoreBackend(store)
    b.save("ns", "k", "scalar")
    b.save("ns", "k", ["a", "b", "a"])
    assert store.type_of("ns", "k") is ValueType.LIST
    assert b.load("ns", "k") == ["a", "b", "a"]
    b.save("ns", "k", ("c",))
    assert b.load("ns", "k") == ["c"]


def test_save_empty_list_removes_key():
    b = KVStoreBackend()
    b.save("ns", "k", ["a"])
    b.save("ns", "k", [])
    assert b.exists("ns", "k") is False


def test_load_returns_copy():
    b = KVStoreBackend()
    b.save("ns", "k", ["a"])
    b.load("ns", "k").append("b")
    assert b.load("ns", "k") == ["a"]


def test_missing_key_raises():
    b = KVStoreBackend()
    with pytest.raises(KeyError):
        b.load("ns", "k")
    with pytest.raises(KeyError):
        b.delete("ns", "k")


@pytest.mark.parametrize("value", [{"x": 1}, 3, ["a", 1], None])
def test_unsupported_values_rejected(value):
    b = KVStoreBackend()
    with pytest.raises(TypeError):
        b.save("ns", "k", value)
    assert b.exists("ns", "k") is False


def test_configure_is_a_noop():
    assert KVStoreBackend().configure(foo="bar") is None

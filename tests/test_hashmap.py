import pytest

from utilkit.hashmap import HashMap
from utilkit.strutils import hash32_djb2


def test_initial_state():
    m = HashMap()
    assert len(m) == 0
    assert m.capacity == 32
    assert list(m) == []


def test_insert_returns_djb2_hash():
    m = HashMap()
    assert m.insert("alpha", 1) == hash32_djb2("alpha")


def test_insert_get_update():
    m = HashMap()
    m.insert("alpha", 1)
    m.insert("beta", 2)
    assert m.get("alpha") == 1
    assert m.get("beta") == 2
    m.insert("alpha", 10)
    assert m.get("alpha") == 10
    assert len(m) == 2


def test_get_missing():
    m = HashMap()
    m.insert("alpha", 1)
    assert m.get("gamma") is None


def test_get_by_hash_only():
    m = HashMap()
    h = m.insert("alpha", "value")
    assert m.get(key_hash=h) == "value"


def test_get_needs_key_or_hash():
    with pytest.raises(ValueError):
        HashMap().get()


def test_delete():
    m = HashMap()
    m.insert("alpha", 1)
    m.insert("beta", 2)
    assert m.delete("alpha") == 1
    assert m.get("alpha") is None
    assert len(m) == 1
    assert m.delete("alpha") is None
    assert len(m) == 1


def test_delete_by_hash():
    m = HashMap()
    h = m.insert("alpha", 1)
    assert m.delete(key_hash=h) == 1
    assert len(m) == 0


def test_growth_keeps_all_entries():
    m = HashMap()
    expected = {f"key-{i}": i for i in range(1000)}
    for key, value in expected.items():
        m.insert(key, value)
    assert len(m) == len(expected)
    assert m.capacity > 32
    assert m.capacity & (m.capacity - 1) == 0
    assert all(m.get(key) == value for key, value in expected.items())
    assert dict(m.items()) == expected


def test_capacity_doubles_past_density():
    m = HashMap()
    for i in range(27):
        m.insert(f"k{i}", i)
    assert m.capacity == 64
    assert len(m) == 27


def test_iteration_follows_buckets():
    m = HashMap()
    for i in range(100):
        m.insert(f"item{i}", i)
    mask = m.capacity - 1
    positions = [hash32_djb2(key) & mask for key in m]
    assert positions == sorted(positions)
    assert sorted(m) == sorted(f"item{i}" for i in range(100))


def test_clear_calls_callback_and_resets():
    m = HashMap()
    expected = {"a": 1, "b": 2, "c": 3}
    for key, value in expected.items():
        m.insert(key, value)
    seen = {}
    m.clear(lambda key, value: seen.__setitem__(key, value))
    assert seen == expected
    assert len(m) == 0
    m.insert("d", 4)
    assert m.get("d") == 4
    assert m.capacity == 32
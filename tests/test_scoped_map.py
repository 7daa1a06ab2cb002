import pytest

from gvlayout.adt.scoped_map import ScopedMap


def test_scoped_map():
    m = ScopedMap()
    assert m.is_empty()
    m.push()
    assert len(m) == 1

    m.insert(1, 1)
    m.insert(2, 2)
    m.insert(3, 3)

    assert m.get(1) == 1
    assert m.get(2) == 2
    assert m.get(3) == 3

    assert m.has(1)
    assert m.has(2)
    assert m.has(3)

    m.push()

    assert m.has(1)
    assert m.has(2)
    assert m.has(3)

    m.insert(1, 4)
    m.insert(2, 5)
    m.insert(3, 6)

    assert m.get(1) == 4
    assert m.get(2) == 5
    assert m.get(3) == 6

    m.pop()
    assert m.get(1) == 1
    assert m.get(2) == 2
    assert m.get(3) == 3
    m.pop()
    assert not m.has(1)
    assert not m.has(2)
    assert not m.has(3)


def test_scoped_map2():
    m = ScopedMap()
    m.push()
    m.insert(1, 1)
    m.push()
    m.insert(1, 2)
    m.insert(2, 3)
    m.push()

    flat = m.flatten()
    assert 1 in flat
    assert 2 in flat
    assert 3 not in flat
    assert flat[1] == 2


def test_insert_overwrites_in_same_scope():
    m = ScopedMap()
    m.push()
    m.insert("a", "x")
    m.insert("a", "y")
    assert m.get("a") == "y"
    m.pop()
    assert m.get("a") is None


def test_pop_on_empty_is_noop():
    m = ScopedMap()
    m.pop()
    assert m.is_empty()
    assert len(m) == 0


def test_insert_without_scope_raises():
    m = ScopedMap()
    with pytest.raises(IndexError):
        m.insert("k", "v")


def test_contains_matches_has():
    m = ScopedMap()
    m.push()
    m.insert("k", "v")
    assert ("k" in m) == m.has("k")
    assert "other" not in m
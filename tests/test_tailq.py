import pytest

from bsdcompat.tailq import TailQueue


def test_initial_values_keep_order():
    q = TailQueue(["a", "b", "c"])
    assert list(q) == ["a", "b", "c"]
    assert len(q) == 3
    assert q.first().value == "a"
    assert q.last().value == "c"


def test_empty_queue():
    q = TailQueue()
    assert q.first() is None
    assert q.last() is None
    assert not q
    assert list(reversed(q)) == []


def test_insert_head_and_tail():
    q = TailQueue()
    q.insert_tail(2)
    q.insert_head(1)
    q.insert_tail(3)
    assert list(q) == [1, 2, 3]
    assert list(reversed(q)) == [3, 2, 1]


def test_insert_after_last_updates_tail():
    q = TailQueue([1, 2])
    node = q.insert_after(q.last(), 3)
    assert q.last() is node
    assert list(reversed(q)) == [3, 2, 1]


def test_insert_before_first_updates_head():
    q = TailQueue([2, 3])
    node = q.insert_before(q.first(), 1)
    assert q.first() is node
    assert list(q) == [1, 2, 3]


def test_insert_in_middle():
    q = TailQueue([1, 4])
    first = q.first()
    q.insert_after(first, 2)
    q.insert_before(q.last(), 3)
    assert list(q) == [1, 2, 3, 4]
    assert list(reversed(q)) == [4, 3, 2, 1]


@pytest.mark.parametrize("index", [0, 1, 2])
def test_remove_each_position(index):
    q = TailQueue(["x", "y", "z"])
    node = list(q.nodes())[index]
    assert q.remove(node) == ["x", "y", "z"][index]
    expected = [v for i, v in enumerate(["x", "y", "z"]) if i != index]
    assert list(q) == expected
    assert list(reversed(q)) == expected[::-1]
    assert len(q) == 2


def test_remove_twice_raises():
    q = TailQueue([1])
    node = q.first()
    q.remove(node)
    assert q.first() is None and q.last() is None
    with pytest.raises(ValueError):
        q.remove(node)


def test_foreign_node_rejected():
    a = TailQueue([1])
    b = TailQueue([2])
    with pytest.raises(ValueError):
        a.insert_after(b.first(), 3)
    with pytest.raises(ValueError):
        a.insert_before(b.first(), 3)


def test_remove_during_iteration():
    q = TailQueue(range(6))
    for node in q.nodes():
        if node.value % 2:
            q.remove(node)
    assert list(q) == [0, 2, 4]


def test_concat_moves_nodes():
    a = TailQueue([1, 2])
    b = TailQueue([3, 4])
    moved = b.first()
    a.concat(b)
    assert list(a) == [1, 2, 3, 4]
    assert list(reversed(a)) == [4, 3, 2, 1]
    assert len(a) == 4
    assert len(b) == 0 and list(b) == []
    assert a.remove(moved) == 3
    assert list(a) == [1, 2, 4]


def test_concat_into_empty_and_self():
    a = TailQueue()
    b = TailQueue([5])
    a.concat(b)
    assert list(a) == [5]
    assert a.last().value == 5
    with pytest.raises(ValueError):
        a.concat(a)


def test_swap_exchanges_contents_and_ownership():
    a = TailQueue([1, 2])
    b = TailQueue(["z"])
    node = a.first()
    a.swap(b)
    assert list(a) == ["z"]
    assert list(b) == [1, 2]
    assert b.remove(node) == 1
    with pytest.raises(ValueError):
        a.remove(b.first())
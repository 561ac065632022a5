import pytest

from bsdcompat.dlist import LinkedList


def test_empty_list():
    lst = LinkedList()
    assert lst.first() is None
    assert len(lst) == 0
    assert not lst
    assert list(lst) == []


def test_constructor_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3
    assert list(reversed(lst)) == ["c", "b", "a"]


def test_insert_head_prepends():
    lst = LinkedList()
    lst.insert_head(1)
    lst.insert_head(2)
    lst.insert_head(3)
    assert list(lst) == [3, 2, 1]
    assert lst.first().value == 3


def test_insert_after_and_before():
    lst = LinkedList()
    middle = lst.insert_head("m")
    lst.insert_after(middle, "z")
    lst.insert_before(middle, "a")
    assert list(lst) == ["a", "m", "z"]
    assert lst.first().value == "a"


def test_insert_before_head_updates_first():
    lst = LinkedList(["x"])
    new = lst.insert_before(lst.first(), "w")
    assert lst.first() is new
    assert new.prev is None
    assert new.next.prev is new


def test_links_are_consistent():
    lst = LinkedList(range(5))
    nodes = list(lst.nodes())
    for left, right in zip(nodes, nodes[1:]):
        assert left.next is right
        assert right.prev is left
    assert nodes[0].prev is None
    assert nodes[-1].next is None


@pytest.mark.parametrize("index", [0, 2, 4])
def test_remove_any_position(index):
    values = [10, 20, 30, 40, 50]
    lst = LinkedList(values)
    node = list(lst.nodes())[index]
    assert lst.remove(node) == values[index]
    expected = values[:index] + values[index + 1:]
    assert list(lst) == expected
    assert list(reversed(lst)) == expected[::-1]
    assert len(lst) == 4


def test_remove_detaches_node():
    lst = LinkedList([1, 2])
    node = lst.first()
    lst.remove(node)
    assert node.next is None and node.prev is None
    with pytest.raises(ValueError):
        lst.remove(node)


def test_foreign_node_rejected():
    first = LinkedList([1])
    second = LinkedList([2])
    with pytest.raises(ValueError):
        first.insert_after(second.first(), 3)
    with pytest.raises(ValueError):
        first.remove(second.first())


def test_safe_removal_while_iterating():
    lst = LinkedList(range(10))
    for node in lst.nodes():
        if node.value % 2:
            lst.remove(node)
    assert list(lst) == [0, 2, 4, 6, 8]


def test_swap_exchanges_contents_and_ownership():
    first = LinkedList([1, 2])
    second = LinkedList(["a"])
    node_from_first = first.first()
    first.swap(second)
    assert list(first) == ["a"]
    assert list(second) == [1, 2]
    assert len(first) == 1 and len(second) == 2
    second.remove(node_from_first)
    assert list(second) == [2]
    with pytest.raises(ValueError):
        first.remove(second.first())


def test_swap_with_empty():
    full = LinkedList([1, 2, 3])
    empty = LinkedList()
    full.swap(empty)
    assert not full
    assert list(empty) == [1, 2, 3]
    empty.insert_head(0)
    assert list(empty) == [0, 1, 2, 3]


def test_contains_via_iteration():
    lst = LinkedList(["x", "y"])
    assert "y" in lst
    assert "q" not in lst
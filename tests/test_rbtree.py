import random

import pytest

from bsdcompat.rbtree import RedBlackTree


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.min() is None
    assert tree.max() is None
    assert tree.find(1) is None
    assert tree.nfind(1) is None
    assert tree.remove(1) is None
    assert len(tree) == 0
    assert not tree


def test_insert_keeps_order():
    tree = RedBlackTree([5, 3, 8, 1, 4, 7, 9])
    assert list(tree) == [1, 3, 4, 5, 7, 8, 9]
    assert list(reversed(tree)) == [9, 8, 7, 5, 4, 3, 1]
    assert len(tree) == 7
    tree._check_invariants()


def test_insert_duplicate_returns_existing():
    tree = RedBlackTree()
    assert tree.insert(10) is None
    assert tree.insert(10) == 10
    assert len(tree) == 1


def test_duplicate_by_key_returns_stored_value():
    tree = RedBlackTree(key=lambda pair: pair[0])
    tree.insert((1, "first"))
    assert tree.insert((1, "second")) == (1, "first")
    assert tree.find((1, None)) == (1, "first")


def test_find_and_contains():
    tree = RedBlackTree([10, 20, 30])
    assert tree.find(20) == 20
    assert tree.find(25) is None
    assert 30 in tree
    assert 31 not in tree


def test_nfind():
    tree = RedBlackTree([10, 20, 30])
    assert tree.nfind(15) == 20
    assert tree.nfind(20) == 20
    assert tree.nfind(5) == 10
    assert tree.nfind(31) is None


def test_min_max():
    tree = RedBlackTree([4, 2, 6, 1, 9])
    assert tree.min() == 1
    assert tree.max() == 9


def test_next_and_prev_walk_whole_tree():
    values = list(range(0, 50, 3))
    tree = RedBlackTree(reversed(values))
    forward = [tree.min()]
    while (following := tree.next(forward[-1])) is not None:
        forward.append(following)
    assert forward == values
    backward = [tree.max()]
    while (preceding := tree.prev(backward[-1])) is not None:
        backward.append(preceding)
    assert backward == values[::-1]


def test_next_prev_missing_raise():
    tree = RedBlackTree([1, 2, 3])
    with pytest.raises(KeyError):
        tree.next(7)
    with pytest.raises(KeyError):
        tree.prev(0)


def test_remove_returns_value():
    tree = RedBlackTree([1, 2, 3, 4, 5])
    assert tree.remove(3) == 3
    assert tree.remove(3) is None
    assert list(tree) == [1, 2, 4, 5]
    assert len(tree) == 4
    tree._check_invariants()


def test_remove_root_with_two_children():
    tree = RedBlackTree([2, 1, 3])
    assert tree.remove(2) == 2
    assert list(tree) == [1, 3]
    tree._check_invariants()


def test_remove_all_empties_tree():
    tree = RedBlackTree(range(20))
    for value in range(20):
        assert tree.remove(value) == value
        tree._check_invariants()
    assert not tree
    assert tree.min() is None


def test_sequential_inserts_stay_balanced():
    tree = RedBlackTree(range(1024))
    black_height = tree._check_invariants()
    # A red-black tree of n nodes has height at most 2*log2(n+1).
    assert black_height <= 11
    assert list(tree) == list(range(1024))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_operations_match_set(seed):
    rng = random.Random(seed)
    tree = RedBlackTree()
    reference = set()
    for _ in range(600):
        value = rng.randrange(100)
        if rng.random() < 0.6:
            result = tree.insert(value)
            assert result == (value if value in reference else None)
            reference.add(value)
        else:
            result = tree.remove(value)
            assert result == (value if value in reference else None)
            reference.discard(value)
        tree._check_invariants()
        assert len(tree) == len(reference)
    assert list(tree) == sorted(reference)
    if reference:
        assert tree.min() == min(reference)
        assert tree.max() == max(reference)
"""A red-black balanced binary search tree."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "left", "right", "parent", "red")

    def __init__(self, value: T, parent: Optional["_Node[T]"]) -> None:
        self.value = value
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None
        self.parent = parent
        self.red = True


def _is_black(node: Optional[_Node[Any]]) -> bool:
    return node is None or not node.red


class RedBlackTree(Generic[T]):
    """An ordered set of values kept balanced by red-black colouring.

    Values are ordered by ``key(value)`` (the value itself by default).
    Two values with equal keys are treated as the same element.  Every
    operation is O(log n).
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        key: Optional[Callable[[T], Any]] = None,
    ) -> None:
        self._root: Optional[_Node[T]] = None
        self._len = 0
        self._key = key if key is not None else (lambda v: v)
        for value in values:
            self.insert(value)

    def _compare(self, a: T, b: T) -> int:
        ka, kb = self._key(a), self._key(b)
        if ka < kb:
            return -1
        if kb < ka:
            return 1
        return 0

    def _replace_child(
        self, parent: Optional[_Node[T]], old: _Node[T], new: Optional[_Node[T]]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, elm: _Node[T]) -> None:
        tmp = elm.right
        assert tmp is not None
        elm.right = tmp.left
        if tmp.left is not None:
            tmp.left.parent = elm
        tmp.parent = elm.parent
        self._replace_child(elm.parent, elm, tmp)
        tmp.left = elm
        elm.parent = tmp

    def _rotate_right(self, elm: _Node[T]) -> None:
        tmp = elm.left
        assert tmp is not None
        elm.left = tmp.right
        if tmp.right is not None:
            tmp.right.parent = elm
        tmp.parent = elm.parent
        self._replace_child(elm.parent, elm, tmp)
        tmp.right = elm
        elm.parent = tmp

    def _insert_color(self, elm: _Node[T]) -> None:
        while True:
            parent = elm.parent
            if parent is None or not parent.red:
                break
            gparent = parent.parent
            assert gparent is not None
            if parent is gparent.left:
                uncle = gparent.right
                if uncle is not None and uncle.red:
                    uncle.red = False
                    parent.red = False
                    gparent.red = True
                    elm = gparent
                    continue
                if parent.right is elm:
                    self._rotate_left(parent)
                    parent, elm = elm, parent
                parent.red = False
                gparent.red = True
                self._rotate_right(gparent)
            else:
                uncle = gparent.left
                if uncle is not None and uncle.red:
                    uncle.red = False
                    parent.red = False
                    gparent.red = True
                    elm = gparent
                    continue
                if parent.left is elm:
                    self._rotate_right(parent)
                    parent, elm = elm, parent
                parent.red = False
                gparent.red = True
                self._rotate_left(gparent)
        assert self._root is not None
        self._root.red = False

    def _remove_color(
        self, parent: Optional[_Node[T]], elm: Optional[_Node[T]]
    ) -> None:
        while _is_black(elm) and elm is not self._root:
            assert parent is not None
            if parent.left is elm:
                tmp = parent.right
                assert tmp is not None
                if tmp.red:
                    tmp.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    tmp = parent.right
                    assert tmp is not None
                if _is_black(tmp.left) and _is_black(tmp.right):
                    tmp.red = True
                    elm = parent
                    parent = elm.parent
                else:
                    if _is_black(tmp.right):
                        if tmp.left is not None:
                            tmp.left.red = False
                        tmp.red = True
                        self._rotate_right(tmp)
                        tmp = parent.right
                        assert tmp is not None
                    tmp.red = parent.red
                    parent.red = False
                    if tmp.right is not None:
                        tmp.right.red = False
                    self._rotate_left(parent)
                    elm = self._root
                    break
            else:
                tmp = parent.left
                assert tmp is not None
                if tmp.red:
                    tmp.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    tmp = parent.left
                    assert tmp is not None
                if _is_black(tmp.left) and _is_black(tmp.right):
                    tmp.red = True
                    elm = parent
                    parent = elm.parent
                else:
                    if _is_black(tmp.left):
                        if tmp.right is not None:
                            tmp.right.red = False
                        tmp.red = True
                        self._rotate_left(tmp)
                        tmp = parent.left
                        assert tmp is not None
                    tmp.red = parent.red
                    parent.red = False
                    if tmp.left is not None:
                        tmp.left.red = False
                    self._rotate_right(parent)
                    elm = self._root
                    break
        if elm is not None:
            elm.red = False

    def _remove_node(self, old: _Node[T]) -> None:
        if old.left is None or old.right is None:
            child = old.right if old.left is None else old.left
            parent = old.parent
            was_red = old.red
            if child is not None:
                child.parent = parent
            self._replace_child(parent, old, child)
        else:
            elm = old.right
            while elm.left is not None:
                elm = elm.left
            child = elm.right
            parent = elm.parent
            was_red = elm.red
            if child is not None:
                child.parent = parent
            self._replace_child(parent, elm, child)
            if elm.parent is old:
                parent = elm
            # The successor takes over the removed node's place and colour.
            elm.left, elm.right, elm.parent, elm.red = (
                old.left, old.right, old.parent, old.red,
            )
            self._replace_child(old.parent, old, elm)
            assert old.left is not None
            old.left.parent = elm
            if old.right is not None:
                old.right.parent = elm
        if not was_red:
            self._remove_color(parent, child)
        old.left = old.right = old.parent = None

    def _find_node(self, value: T) -> Optional[_Node[T]]:
        node = self._root
        while node is not None:
            comp = self._compare(value, node.value)
            if comp < 0:
                node = node.left
            elif comp > 0:
                node = node.right
            else:
                return node
        return None

    def _require(self, value: T) -> _Node[T]:
        node = self._find_node(value)
        if node is None:
            raise KeyError(value)
        return node

    def _extreme(self, go_left: bool) -> Optional[T]:
        node = self._root
        parent = None
        while node is not None:
            parent = node
            node = node.left if go_left else node.right
        return None if parent is None else parent.value

    def insert(self, value: T) -> Optional[T]:
        """Add ``value``; return the stored equal value if one exists, else None."""
        parent: Optional[_Node[T]] = None
        comp = 0
        node = self._root
        while node is not None:
            parent = node
            comp = self._compare(value, node.value)
            if comp < 0:
                node = node.left
            elif comp > 0:
                node = node.right
            else:
                return node.value
        new = _Node(value, parent)
        if parent is None:
            self._root = new
        elif comp < 0:
            parent.left = new
        else:
            parent.right = new
        self._insert_color(new)
        self._len += 1
        return None

    def remove(self, value: T) -> Optional[T]:
        """Remove the element equal to ``value``; return it, or None if absent."""
        node = self._find_node(value)
        if node is None:
            return None
        self._remove_node(node)
        self._len -= 1
        return node.value

    def find(self, value: T) -> Optional[T]:
        """Return the stored element equal to ``value``, or None."""
        node = self._find_node(value)
        return None if node is None else node.value

    def nfind(self, value: T) -> Optional[T]:
        """Return the smallest element not less than ``value``, or None."""
        node = self._root
        result: Optional[_Node[T]] = None
        while node is not None:
            comp = self._compare(value, node.value)
            if comp < 0:
                result = node
                node = node.left
            elif comp > 0:
                node = node.right
            else:
                return node.value
        return None if result is None else result.value

    def next(self, value: T) -> Optional[T]:
        """Return the element following ``value``, or None for the largest.

        ``value`` must be in the tree; otherwise KeyError is raised.
        """
        elm: Optional[_Node[T]] = self._require(value)
        assert elm is not None
        if elm.right is not None:
            elm = elm.right
            while elm.left is not None:
                elm = elm.left
            return elm.value
        while elm.parent is not None and elm is elm.parent.right:
            elm = elm.parent
        elm = elm.parent
        return None if elm is None else elm.value

    def prev(self, value: T) -> Optional[T]:
        """Return the element preceding ``value``, or None for the smallest.

        ``value`` must be in the tree; otherwise KeyError is raised.
        """
        elm: Optional[_Node[T]] = self._require(value)
        assert elm is not None
        if elm.left is not None:
            elm = elm.left
            while elm.right is not None:
                elm = elm.right
            return elm.value
        while elm.parent is not None and elm is elm.parent.left:
            elm = elm.parent
        elm = elm.parent
        return None if elm is None else elm.value

    def min(self) -> Optional[T]:
        """Return the smallest element, or None when the tree is empty."""
        return self._extreme(go_left=True)

    def max(self) -> Optional[T]:
        """Return the largest element, or None when the tree is empty."""
        return self._extreme(go_left=False)

    def _check_invariants(self) -> int:
        """Verify the red-black properties; return the black height."""

        def walk(node: Optional[_Node[T]], parent: Optional[_Node[T]]) -> int:
            if node is None:
                return 1
            if node.parent is not parent:
                raise AssertionError("broken parent link")
            if node.red and parent is not None and parent.red:
                raise AssertionError("red node with red parent")
            left = walk(node.left, node)
            right = walk(node.right, node)
            if left != right:
                raise AssertionError("unequal black heights")
            return left + (0 if node.red else 1)

        if self._root is not None and self._root.red:
            raise AssertionError("red root")
        return walk(self._root, None)

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __reversed__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.value
            node = node.left

    def __contains__(self, value: object) -> bool:
        return self._find_node(value) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return f"RedBlackTree({list(self)!r})"
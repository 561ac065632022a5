"""A self-adjusting binary search tree using top-down splaying."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


class SplayTree(Generic[T]):
    """An ordered set of values; every lookup moves the found node to the root.

    Values are ordered by ``key(value)`` (the value itself by default).
    Two values with equal keys are treated as the same element.
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

    def _splay(self, direction: Callable[[_Node[T]], int]) -> None:
        """Splay using ``direction(node)``: <0 go left, >0 go right, 0 stop."""
        root = self._root
        assert root is not None
        header: _Node[T] = _Node(None)
        left = right = header
        while True:
            comp = direction(root)
            if comp < 0:
                tmp = root.left
                if tmp is None:
                    break
                if direction(tmp) < 0:
                    root.left = tmp.right
                    tmp.right = root
                    root = tmp
                    if root.left is None:
                        break
                right.left = root
                right = root
                root = root.left
            elif comp > 0:
                tmp = root.right
                if tmp is None:
                    break
                if direction(tmp) > 0:
                    root.right = tmp.left
                    tmp.left = root
                    root = tmp
                    if root.right is None:
                        break
                left.right = root
                left = root
                root = root.right
            else:
                break
        left.right = root.left
        right.left = root.right
        root.left = header.right
        root.right = header.left
        self._root = root

    def _splay_value(self, value: T) -> int:
        """Splay around ``value``; return its comparison with the new root."""
        self._splay(lambda node: self._compare(value, node.value))
        assert self._root is not None
        return self._compare(value, self._root.value)

    def insert(self, value: T) -> Optional[T]:
        """Add ``value``; return the stored equal value if one exists, else None."""
        node: _Node[T] = _Node(value)
        root = self._root
        if root is not None:
            comp = self._splay_value(value)
            root = self._root
            assert root is not None
            if comp < 0:
                node.left = root.left
                node.right = root
                root.left = None
            elif comp > 0:
                node.right = root.right
                node.left = root
                root.right = None
            else:
                return root.value
        self._root = node
        self._len += 1
        return None

    def remove(self, value: T) -> Optional[T]:
        """Remove the element equal to ``value``; return it, or None if absent."""
        if self._root is None:
            return None
        if self._splay_value(value) != 0:
            return None
        removed = self._root
        assert removed is not None
        if removed.left is None:
            self._root = removed.right
        else:
            right = removed.right
            self._root = removed.left
            self._splay_value(value)
            assert self._root is not None
            self._root.right = right
        self._len -= 1
        return removed.value

    def find(self, value: T) -> Optional[T]:
        """Return the stored element equal to ``value``, or None."""
        if self._root is None:
            return None
        if self._splay_value(value) == 0:
            return self._root.value
        return None

    def next(self, value: T) -> Optional[T]:
        """Return the element following ``value``, or None for the largest.

        ``value`` must be in the tree; otherwise KeyError is raised.
        """
        if self._root is None or self._splay_value(value) != 0:
            raise KeyError(value)
        node = self._root.right
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def min(self) -> Optional[T]:
        """Return the smallest element, or None when the tree is empty."""
        if self._root is None:
            return None
        self._splay(lambda node: -1)
        return self._root.value

    def max(self) -> Optional[T]:
        """Return the largest element, or None when the tree is empty."""
        if self._root is None:
            return None
        self._splay(lambda node: 1)
        return self._root.value

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

    def __contains__(self, value: object) -> bool:
        if self._root is None:
            return False
        return self._splay_value(value) == 0  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return f"SplayTree({list(self)!r})"
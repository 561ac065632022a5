"""A doubly linked tail queue with O(1) access to both ends."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Membership:
    """Token shared by a queue and the nodes it currently holds."""

    __slots__ = ()


class TailQNode(Generic[T]):
    """A node of a :class:`TailQueue`, holding one value."""

    __slots__ = ("value", "_next", "_prev", "_token")

    def __init__(self, value: T) -> None:
        self.value = value
        self._next: Optional[TailQNode[T]] = None
        self._prev: Optional[TailQNode[T]] = None
        self._token: Optional[_Membership] = None

    @property
    def next(self) -> Optional["TailQNode[T]"]:
        """The following node, or None at the end."""
        return self._next

    @property
    def prev(self) -> Optional["TailQNode[T]"]:
        """The preceding node, or None at the head."""
        return self._prev

    def __repr__(self) -> str:
        return f"TailQNode({self.value!r})"


class TailQueue(Generic[T]):
    """A doubly linked queue: insertion anywhere, removal in O(1)."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[TailQNode[T]] = None
        self._tail: Optional[TailQNode[T]] = None
        self._len = 0
        self._token = _Membership()
        for value in values:
            self.insert_tail(value)

    def _check(self, node: TailQNode[T]) -> None:
        if node._token is not self._token:
            raise ValueError("node does not belong to this queue")

    def _adopt(self, value: T) -> TailQNode[T]:
        node = TailQNode(value)
        node._token = self._token
        self._len += 1
        return node

    def first(self) -> Optional[TailQNode[T]]:
        """Return the first node, or None when the queue is empty."""
        return self._head

    def last(self) -> Optional[TailQNode[T]]:
        """Return the last node, or None when the queue is empty."""
        return self._tail

    def insert_head(self, value: T) -> TailQNode[T]:
        """Insert ``value`` at the front and return its node."""
        node = self._adopt(value)
        node._next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head._prev = node
        self._head = node
        return node

    def insert_tail(self, value: T) -> TailQNode[T]:
        """Append ``value`` at the end and return its node."""
        node = self._adopt(value)
        node._prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail._next = node
        self._tail = node
        return node

    def insert_after(self, node: TailQNode[T], value: T) -> TailQNode[T]:
        """Insert ``value`` right after ``node`` and return its node."""
        self._check(node)
        new = self._adopt(value)
        new._next = node._next
        new._prev = node
        if node._next is None:
            self._tail = new
        else:
            node._next._prev = new
        node._next = new
        return new

    def insert_before(self, node: TailQNode[T], value: T) -> TailQNode[T]:
        """Insert ``value`` right before ``node`` and return its node."""
        self._check(node)
        new = self._adopt(value)
        new._prev = node._prev
        new._next = node
        if node._prev is None:
            self._head = new
        else:
            node._prev._next = new
        node._prev = new
        return new

    def remove(self, node: TailQNode[T]) -> T:
        """Unlink ``node`` from the queue and return its value."""
        self._check(node)
        if node._next is None:
            self._tail = node._prev
        else:
            node._next._prev = node._prev
        if node._prev is None:
            self._head = node._next
        else:
            node._prev._next = node._next
        node._next = node._prev = None
        node._token = None
        self._len -= 1
        return node.value

    def concat(self, other: "TailQueue[T]") -> None:
        """Move all nodes of ``other`` to the end of this queue."""
        if other is self:
            raise ValueError("cannot concatenate a queue with itself")
        if other._head is None:
            return
        for node in other.nodes():
            node._token = self._token
        if self._tail is None:
            self._head = other._head
        else:
            self._tail._next = other._head
            other._head._prev = self._tail
        self._tail = other._tail
        self._len += other._len
        other._head = other._tail = None
        other._len = 0

    def swap(self, other: "TailQueue[T]") -> None:
        """Exchange the contents of this queue and ``other``."""
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        self._len, other._len = other._len, self._len
        self._token, other._token = other._token, self._token

    def nodes(self) -> Iterator[TailQNode[T]]:
        """Yield the nodes in order; the current node may be removed."""
        node = self._head
        while node is not None:
            following = node._next
            yield node
            node = following

    def reversed_nodes(self) -> Iterator[TailQNode[T]]:
        """Yield the nodes from last to first; the current one may be removed."""
        node = self._tail
        while node is not None:
            previous = node._prev
            yield node
            node = previous

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        for node in self.reversed_nodes():
            yield node.value

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"TailQueue({list(self)!r})"
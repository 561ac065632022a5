"""A singly linked tail queue: forward links plus a pointer to the tail."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Membership:
    """Token shared by a queue and the nodes it currently holds."""

    __slots__ = ()


class STailQNode(Generic[T]):
    """A node of a :class:`SinglyLinkedTailQueue`, holding one value."""

    __slots__ = ("value", "_next", "_token")

    def __init__(self, value: T) -> None:
        self.value = value
        self._next: Optional[STailQNode[T]] = None
        self._token: Optional[_Membership] = None

    @property
    def next(self) -> Optional["STailQNode[T]"]:
        """The following node, or None at the end."""
        return self._next

    def __repr__(self) -> str:
        return f"STailQNode({self.value!r})"


class SinglyLinkedTailQueue(Generic[T]):
    """A forward-only queue with O(1) insertion at both ends."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[STailQNode[T]] = None
        self._tail: Optional[STailQNode[T]] = None
        self._len = 0
        self._token = _Membership()
        for value in values:
            self.insert_tail(value)

    def _check(self, node: STailQNode[T]) -> None:
        if node._token is not self._token:
            raise ValueError("node does not belong to this queue")

    def _adopt(self, value: T) -> STailQNode[T]:
        node = STailQNode(value)
        node._token = self._token
        self._len += 1
        return node

    def _release(self, node: STailQNode[T]) -> T:
        node._next = None
        node._token = None
        self._len -= 1
        return node.value

    def first(self) -> Optional[STailQNode[T]]:
        """Return the first node, or None when the queue is empty."""
        return self._head

    def last(self) -> Optional[STailQNode[T]]:
        """Return the last node, or None when the queue is empty."""
        return self._tail

    def insert_head(self, value: T) -> STailQNode[T]:
        """Insert ``value`` at the front and return its node."""
        node = self._adopt(value)
        node._next = self._head
        if self._head is None:
            self._tail = node
        self._head = node
        return node

    def insert_tail(self, value: T) -> STailQNode[T]:
        """Append ``value`` at the end and return its node."""
        node = self._adopt(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail._next = node
        self._tail = node
        return node

    def insert_after(self, node: STailQNode[T], value: T) -> STailQNode[T]:
        """Insert ``value`` right after ``node`` and return its node."""
        self._check(node)
        new = self._adopt(value)
        new._next = node._next
        node._next = new
        if new._next is None:
            self._tail = new
        return new

    def remove_head(self) -> T:
        """Remove the first node and return its value."""
        head = self._head
        if head is None:
            raise IndexError("remove from empty queue")
        self._head = head._next
        if self._head is None:
            self._tail = None
        return self._release(head)

    def remove_after(self, node: STailQNode[T]) -> T:
        """Remove the node following ``node`` and return its value."""
        self._check(node)
        victim = node._next
        if victim is None:
            raise IndexError("no node after the given node")
        node._next = victim._next
        if node._next is None:
            self._tail = node
        return self._release(victim)

    def remove(self, node: STailQNode[T]) -> T:
        """Unlink ``node`` from the queue and return its value."""
        self._check(node)
        if self._head is node:
            return self.remove_head()
        current = self._head
        while current is not None and current._next is not node:
            current = current._next
        if current is None:
            raise ValueError("node does not belong to this queue")
        return self.remove_after(current)

    def concat(self, other: "SinglyLinkedTailQueue[T]") -> None:
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
        self._tail = other._tail
        self._len += other._len
        other._head = other._tail = None
        other._len = 0

    def swap(self, other: "SinglyLinkedTailQueue[T]") -> None:
        """Exchange the contents of this queue and ``other``."""
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        self._len, other._len = other._len, self._len
        self._token, other._token = other._token, self._token

    def nodes(self) -> Iterator[STailQNode[T]]:
        """Yield the nodes in order; the current node may be removed."""
        node = self._head
        while node is not None:
            following = node._next
            yield node
            node = following

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.value

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"SinglyLinkedTailQueue({list(self)!r})"
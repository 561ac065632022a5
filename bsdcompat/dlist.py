"""A doubly linked list whose nodes can be removed in constant time."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Membership:
    """Token shared by a list and the nodes it currently holds."""

    __slots__ = ()


class ListNode(Generic[T]):
    """A node of a :class:`LinkedList`, holding one value."""

    __slots__ = ("value", "_next", "_prev", "_token")

    def __init__(self, value: T) -> None:
        self.value = value
        self._next: Optional[ListNode[T]] = None
        self._prev: Optional[ListNode[T]] = None
        self._token: Optional[_Membership] = None

    @property
    def next(self) -> Optional["ListNode[T]"]:
        """The following node, or None at the end."""
        return self._next

    @property
    def prev(self) -> Optional["ListNode[T]"]:
        """The preceding node, or None at the head."""
        return self._prev

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList(Generic[T]):
    """A doubly linked list with insertion at the head, before or after a node."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[ListNode[T]] = None
        self._len = 0
        self._token = _Membership()
        tail: Optional[ListNode[T]] = None
        for value in values:
            tail = self.insert_head(value) if tail is None else self.insert_after(tail, value)

    def _check(self, node: ListNode[T]) -> None:
        if node._token is not self._token:
            raise ValueError("node does not belong to this list")

    def _adopt(self, value: T) -> ListNode[T]:
        node = ListNode(value)
        node._token = self._token
        self._len += 1
        return node

    def first(self) -> Optional[ListNode[T]]:
        """Return the first node, or None when the list is empty."""
        return self._head

    def insert_head(self, value: T) -> ListNode[T]:
        """Insert ``value`` at the front and return its node."""
        node = self._adopt(value)
        node._next = self._head
        if self._head is not None:
            self._head._prev = node
        self._head = node
        return node

    def insert_after(self, node: ListNode[T], value: T) -> ListNode[T]:
        """Insert ``value`` right after ``node`` and return its node."""
        self._check(node)
        new = self._adopt(value)
        new._next = node._next
        if node._next is not None:
            node._next._prev = new
        node._next = new
        new._prev = node
        return new

    def insert_before(self, node: ListNode[T], value: T) -> ListNode[T]:
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

    def remove(self, node: ListNode[T]) -> T:
        """Unlink ``node`` from the list and return its value."""
        self._check(node)
        if node._next is not None:
            node._next._prev = node._prev
        if node._prev is None:
            self._head = node._next
        else:
            node._prev._next = node._next
        node._next = node._prev = None
        node._token = None
        self._len -= 1
        return node.value

    def swap(self, other: "LinkedList[T]") -> None:
        """Exchange the contents of this list and ``other``."""
        self._head, other._head = other._head, self._head
        self._len, other._len = other._len, self._len
        self._token, other._token = other._token, self._token

    def nodes(self) -> Iterator[ListNode[T]]:
        """Yield the nodes in order; the current node may be removed."""
        node = self._head
        while node is not None:
            following = node._next
            yield node
            node = following

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        node = self._head
        if node is None:
            return
        while node._next is not None:
            node = node._next
        while node is not None:
            previous = node._prev
            yield node.value
            node = previous

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
"""A singly linked list with insertion at the head or after a node."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Membership:
    """Token shared by a list and the nodes it currently holds."""

    __slots__ = ()


class SListNode(Generic[T]):
    """A node of a :class:`SinglyLinkedList`, holding one value."""

    __slots__ = ("value", "_next", "_token")

    def __init__(self, value: T) -> None:
        self.value = value
        self._next: Optional[SListNode[T]] = None
        self._token: Optional[_Membership] = None

    @property
    def next(self) -> Optional["SListNode[T]"]:
        """The following node, or None at the end."""
        return self._next

    def __repr__(self) -> str:
        return f"SListNode({self.value!r})"


class SinglyLinkedList(Generic[T]):
    """A forward-only linked list; removing an arbitrary node is O(n)."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[SListNode[T]] = None
        self._len = 0
        self._token = _Membership()
        tail: Optional[SListNode[T]] = None
        for value in values:
            tail = self.insert_head(value) if tail is None else self.insert_after(tail, value)

    def _check(self, node: SListNode[T]) -> None:
        if node._token is not self._token:
            raise ValueError("node does not belong to this list")

    def _adopt(self, value: T) -> SListNode[T]:
        node = SListNode(value)
        node._token = self._token
        self._len += 1
        return node

    def _release(self, node: SListNode[T]) -> T:
        node._next = None
        node._token = None
        self._len -= 1
        return node.value

    def first(self) -> Optional[SListNode[T]]:
        """Return the first node, or None when the list is empty."""
        return self._head

    def insert_head(self, value: T) -> SListNode[T]:
        """Insert ``value`` at the front and return its node."""
        node = self._adopt(value)
        node._next = self._head
        self._head = node
        return node

    def insert_after(self, node: SListNode[T], value: T) -> SListNode[T]:
        """Insert ``value`` right after ``node`` and return its node."""
        self._check(node)
        new = self._adopt(value)
        new._next = node._next
        node._next = new
        return new

    def remove_head(self) -> T:
        """Remove the first node and return its value."""
        head = self._head
        if head is None:
            raise IndexError("remove from empty list")
        self._head = head._next
        return self._release(head)

    def remove_after(self, node: SListNode[T]) -> T:
        """Remove the node following ``node`` and return its value."""
        self._check(node)
        victim = node._next
        if victim is None:
            raise IndexError("no node after the given node")
        node._next = victim._next
        return self._release(victim)

    def remove(self, node: SListNode[T]) -> T:
        """Unlink ``node`` from the list and return its value."""
        self._check(node)
        if self._head is node:
            return self.remove_head()
        current = self._head
        while current is not None and current._next is not node:
            current = current._next
        if current is None:
            raise ValueError("node does not belong to this list")
        return self.remove_after(current)

    def swap(self, other: "SinglyLinkedList[T]") -> None:
        """Exchange the contents of this list and ``other``."""
        self._head, other._head = other._head, self._head
        self._len, other._len = other._len, self._len
        self._token, other._token = other._token, self._token

    def nodes(self) -> Iterator[SListNode[T]]:
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
        return f"SinglyLinkedList({list(self)!r})"
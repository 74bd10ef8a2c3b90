"""A singly linked list that keeps its values unique."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class ListNode(Generic[T]):
    """One link of a :class:`LinkedList`; nodes compare by their data."""

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional["ListNode[T]"] = None) -> None:
        self.data = data
        self.next = next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListNode):
            return NotImplemented
        return self.data == other.data

    def __lt__(self, other: "ListNode[T]") -> bool:
        return self.data < other.data

    def __gt__(self, other: "ListNode[T]") -> bool:
        return self.data > other.data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return f"ListNode({self.data!r})"


class LinkedList(Generic[T]):
    """Singly linked list; appending a value already present is a no-op."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[ListNode[T]] = None
        self._last: Optional[ListNode[T]] = None
        self._size = 0
        for item in items or ():
            self.append(item)

    @property
    def first(self) -> Optional[ListNode[T]]:
        """The head node, or None when empty."""
        return self._root

    @property
    def last(self) -> Optional[ListNode[T]]:
        """The tail node, or None when empty."""
        return self._last

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.data

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[ListNode[T]]:
        """Yield the nodes from head to tail."""
        node = self._root
        while node is not None:
            nxt = node.next
            yield node
            node = nxt

    def append(self, value: T) -> Optional[ListNode[T]]:
        """Add value at the end unless an equal value is present.

        Returns the new node, or None when the value was already there.
        """
        if self.search(value) is not None:
            return None
        node = ListNode(value)
        if self._last is None:
            self._root = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1
        return node

    def insert_after(self, node: Optional[ListNode[T]], value: T) -> Optional[ListNode[T]]:
        """Insert value right after node; with no node, append instead.

        When appending, the tail node is returned, as with the end position.
        """
        if node is None:
            self.append(value)
            return self._last
        new_node = ListNode(value, node.next)
        node.next = new_node
        if node is self._last:
            self._last = new_node
        self._size += 1
        return new_node

    def erase(self, node: Optional[ListNode[T]]) -> Optional[ListNode[T]]:
        """Remove node from the list and return the node that followed it.

        Returns None when node is None or not part of this list.
        """
        if node is None or self._root is None:
            return None
        following = node.next
        if node is self._root:
            self._root = following
            if self._last is node:
                self._last = self._root
            self._size -= 1
            return following
        previous = next((n for n in self.nodes() if n.next is node), None)
        if previous is None:
            return None
        previous.next = following
        if self._last is node:
            self._last = previous
        self._size -= 1
        return following

    def search(self, value: Any) -> Optional[ListNode[T]]:
        """Return the first node whose data equals value, or None."""
        return next((n for n in self.nodes() if n.data == value), None)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[ListNode[T]] = None
        node = self._root
        self._last = node
        while node is not None:
            nxt = node.next
            node.next = previous
            previous = node
            node = nxt
        self._root = previous

    def clear(self) -> None:
        """Remove every node."""
        self._root = None
        self._last = None
        self._size = 0

    def copy(self) -> "LinkedList[T]":
        """Return a new list with new nodes holding the same values."""
        result: LinkedList[T] = LinkedList()
        for value in self:
            node = ListNode(value)
            if result._last is None:
                result._root = node
            else:
                result._last.next = node
            result._last = node
            result._size += 1
        return result

    def format(self) -> str:
        """Describe the list head to tail; empty lists give ''."""
        if self._root is None or self._last is None:
            return ""
        body = " --> ".join(str(value) for value in self)
        return (
            f"Start: {self._root.data} | End: {self._last.data}\n"
            f"List content: {body} --> /"
        )

    def format_reverse(self) -> str:
        """Describe the list tail to head; empty lists give ''."""
        if self._root is None:
            return ""
        body = " --> ".join(str(value) for value in reversed(list(self)))
        return f"Reverse list content: {body} --> /"
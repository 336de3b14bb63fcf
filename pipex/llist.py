"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` before the first element and return its node."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Append ``value`` after the last element and return its node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Any:
        """The value of the last element; ``IndexError`` if the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.value

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value, first to last."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func`` applied to every value, in order."""
        return LinkedList(func(value) for value in self)

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, handing each value to ``release`` first if given."""
        if release is not None:
            for value in self:
                release(value)
        self.head = None
        self._tail = None
        self._size = 0
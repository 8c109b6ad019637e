"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One list cell holding a value and a link to the next cell."""

    value: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list with O(1) append and prepend."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: Any) -> Node:
        """Add a value at the end and return its node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, value: Any) -> Node:
        """Add a value at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def penultimate(self) -> Optional[Node]:
        """Return the node before the last, or None with fewer than two."""
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.next is None:
                return previous
            previous = node
        return None

    def clear(self, on_delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each value to ``on_delete`` in order."""
        if on_delete is not None:
            for node in self._nodes():
                on_delete(node.value)
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every value."""
        return LinkedList(func(value) for value in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
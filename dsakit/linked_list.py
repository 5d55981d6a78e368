"""A singly linked list with constant-time insertion at either end."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked chain."""

    data: Any
    next: Optional[Node] = None


class SinglyLinkedList:
    """A chain of nodes reached from ``head``, with a tail kept for appends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._length = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current head."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._length += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def pop_front(self) -> Any:
        """Remove the head and return its data. Raises ``IndexError`` when empty."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._length -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
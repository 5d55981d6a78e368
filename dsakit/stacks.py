"""Stacks backed by a bounded array or by a linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.linked_list import SinglyLinkedList


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when reading from an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Place ``value`` on top. Raises ``StackOverflow`` when full."""
        if len(self._items) == self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item. Raises ``StackUnderflow`` when empty."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def display(self) -> str:
        """Describe the stack from top to bottom."""
        if not self._items:
            return "Stack is empty"
        return "Stack: " + " ".join(str(item) for item in self)

    def __iter__(self) -> Iterator[Any]:
        """Yield items from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """An unbounded stack whose top is the head of a linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._list = SinglyLinkedList()
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Place ``value`` on top."""
        self._list.push_front(value)

    def pop(self) -> Any:
        """Remove and return the top item. Raises ``StackUnderflow`` when empty."""
        if not self._list:
            raise StackUnderflow("stack underflow")
        return self._list.pop_front()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._list.head is None:
            raise StackUnderflow("stack is empty")
        return self._list.head.data

    def __iter__(self) -> Iterator[Any]:
        """Yield items from top to bottom."""
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)
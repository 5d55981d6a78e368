"""Queues: a linear array queue, a circular buffer and a linked queue."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from dsakit.linked_list import Node


class QueueOverflow(Exception):
    """Raised when enqueuing into a full queue."""


class QueueUnderflow(IndexError):
    """Raised when reading from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")


class ArrayQueue:
    """A linear queue over ``capacity`` slots.

    Slots freed by dequeuing are not reused: once ``capacity`` items have been
    enqueued in total, further enqueues overflow.
    """

    def __init__(self, capacity: int = 5, values: Iterable[Any] = ()) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = []
        self._head = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear. Raises ``QueueOverflow`` when no slot is left."""
        if len(self._slots) == self.capacity:
            raise QueueOverflow("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front item. Raises ``QueueUnderflow`` when empty."""
        value = self.peek()
        self._head += 1
        return value

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self._head >= len(self._slots):
            raise QueueUnderflow("queue underflow")
        return self._slots[self._head]

    def __len__(self) -> int:
        return len(self._slots) - self._head


class CircularQueue:
    """A bounded queue whose slots wrap around and are reused."""

    def __init__(self, capacity: int = 3) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._count = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear. Raises ``QueueOverflow`` when full."""
        if self._count == self.capacity:
            raise QueueOverflow("circular queue overflow")
        self._slots[(self._head + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front item. Raises ``QueueUnderflow`` when empty."""
        value = self.front()
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value

    def front(self) -> Any:
        """Return the front item."""
        if not self._count:
            raise QueueUnderflow("circular queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        """Return the most recently enqueued item."""
        if not self._count:
            raise QueueUnderflow("circular queue is empty")
        return self._slots[(self._head + self._count - 1) % self.capacity]

    def __len__(self) -> int:
        return self._count


class LinkedQueue:
    """An unbounded queue built from linked nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: Optional[Node] = None
        self._last: Optional[Node] = None
        self._count = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front item. Raises ``QueueUnderflow`` when empty."""
        if self._first is None:
            raise QueueUnderflow("queue underflow")
        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        self._count -= 1
        return node.data

    def front(self) -> Any:
        """Return the front item."""
        if self._first is None:
            raise QueueUnderflow("queue is empty")
        return self._first.data

    def rear(self) -> Any:
        """Return the most recently enqueued item."""
        if self._last is None:
            raise QueueUnderflow("queue is empty")
        return self._last.data

    def __len__(self) -> int:
        return self._count
"""Basic operations on sequences: sorting, searching, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the items of ``values`` in ascending order.

    Adjacent out-of-order pairs are swapped pass by pass. Each pass moves the
    largest remaining item to the end of the unsorted part.
    """
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for left, right in zip(range(end), range(1, end + 1)):
            if items[left] > items[right]:
                items[left], items[right] = items[right], items[left]
    return items


def delete_at(values: Iterable[Any], position: int) -> list[Any]:
    """Return a new list without the item at ``position``.

    Later items shift one place to the left. Raises ``IndexError`` when
    ``position`` is not a valid index.
    """
    items = list(values)
    if not 0 <= position < len(items):
        raise IndexError(f"position {position} out of range for {len(items)} items")
    del items[position]
    return items


def insert_at(values: Iterable[Any], position: int, value: Any) -> list[Any]:
    """Return a new list with ``value`` placed at ``position``.

    Items from ``position`` onwards shift one place to the right. ``position``
    may equal the length, which appends. Raises ``IndexError`` otherwise.
    """
    items = list(values)
    if not 0 <= position <= len(items):
        raise IndexError(f"position {position} out of range for {len(items)} items")
    items.insert(position, value)
    return items


def largest(values: Iterable[Any]) -> Any:
    """Return the largest item. Raises ``ValueError`` for an empty input."""
    iterator = iter(values)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("largest() of an empty sequence") from None
    for item in iterator:
        if item > best:
            best = item
    return best


def linear_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or ``None``."""
    return next((index for index, item in enumerate(values) if item == target), None)
"""Binary heaps stored in lists, and heap sort."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any


def _sift_down(
    values: list[Any], size: int, index: int, precedes: Callable[[Any, Any], bool]
) -> None:
    if not 0 <= size <= len(values):
        raise ValueError(f"size {size} out of range for {len(values)} items")
    if index < 0:
        raise ValueError("index must be non-negative")
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and precedes(values[child], values[best]):
                best = child
        if best == index:
            return
        values[index], values[best] = values[best], values[index]
        index = best


def max_heapify(values: list[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down in place within the first ``size`` items of a max-heap."""
    _sift_down(values, size, index, operator.gt)


def min_heapify(values: list[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down in place within the first ``size`` items of a min-heap."""
    _sift_down(values, size, index, operator.lt)


def _build(values: Iterable[Any], heapify: Callable[[list[Any], int, int], None]) -> list[Any]:
    heap = list(values)
    for index in range(len(heap) // 2 - 1, -1, -1):
        heapify(heap, len(heap), index)
    return heap


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` arranged as a max-heap."""
    return _build(values, max_heapify)


def build_min_heap(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` arranged as a min-heap."""
    return _build(values, min_heapify)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with ``values`` in ascending order, sorted by heap sort."""
    heap = build_max_heap(values)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        max_heapify(heap, end, 0)
    return heap
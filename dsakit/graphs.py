"""Graphs given as adjacency matrices: formatting and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check_square(graph: Matrix) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def _check_start(size: int, start: int) -> None:
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} out of range for {size} vertices")


def _neighbours(graph: Matrix, vertex: int) -> list[int]:
    return [other for other, edge in enumerate(graph[vertex]) if edge == 1]


def format_matrix(graph: Matrix) -> str:
    """Render the matrix one row per line, entries separated by spaces."""
    _check_square(graph)
    return "\n".join(" ".join(str(entry) for entry in row) for row in graph)


def bfs(graph: Matrix, start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``.

    An entry equal to 1 marks an edge; neighbours are taken in index order.
    """
    _check_start(_check_square(graph), start)
    visited = {start}
    order: list[int] = []
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for other in _neighbours(graph, vertex):
            if other not in visited:
                visited.add(other)
                pending.append(other)
    return order


def dfs(graph: Matrix, start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``.

    An entry equal to 1 marks an edge; neighbours are explored in index order.
    """
    _check_start(_check_square(graph), start)
    visited: set[int] = set()
    order: list[int] = []
    stack = [start]
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        stack.extend(
            other for other in reversed(_neighbours(graph, vertex)) if other not in visited
        )
    return order
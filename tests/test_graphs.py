import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.graphs import bfs, dfs, format_matrix

SOURCE_GRAPH = [[0, 1, 1, 0], [1, 0, 0, 1], [1, 0, 0, 1], [0, 1, 1, 0]]


def test_format_matrix_source_example():
    graph = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert format_matrix(graph) == "0 1 0\n1 0 1\n0 1 0"


def test_format_matrix_rejects_non_square():
    with pytest.raises(ValueError):
        format_matrix([[0, 1], [1]])


def test_format_matrix_empty():
    assert format_matrix([]) == ""


def test_bfs_source_example():
    assert bfs(SOURCE_GRAPH, 0) == [0, 1, 2, 3]


def test_dfs_source_example():
    assert dfs(SOURCE_GRAPH, 0) == [0, 1, 3, 2]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversal_rejects_bad_start(traverse):
    with pytest.raises(IndexError):
        traverse(SOURCE_GRAPH, 4)


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversal_rejects_non_square(traverse):
    with pytest.raises(ValueError):
        traverse([[0, 1, 0], [1, 0, 1]], 0)


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_unreachable_vertex_is_skipped(traverse):
    graph = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert sorted(traverse(graph, 0)) == [0, 1]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_only_entries_equal_to_one_are_edges(traverse):
    graph = [[0, 2], [2, 0]]
    assert traverse(graph, 0) == [0]


@st.composite
def _graphs_with_start(draw):
    size = draw(st.integers(min_value=1, max_value=8))
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            if draw(st.booleans()):
                matrix[i][j] = matrix[j][i] = 1
    start = draw(st.integers(min_value=0, max_value=size - 1))
    return matrix, start


@given(_graphs_with_start())
def test_bfs_and_dfs_reach_same_vertices(case):
    graph, start = case
    breadth = bfs(graph, start)
    depth = dfs(graph, start)
    assert breadth[0] == start
    assert depth[0] == start
    assert len(set(breadth)) == len(breadth)
    assert len(set(depth)) == len(depth)
    assert set(breadth) == set(depth)


@given(_graphs_with_start())
def test_dfs_steps_follow_edges_back_to_visited(case):
    graph, start = case
    order = dfs(graph, start)
    for position, vertex in enumerate(order[1:], start=1):
        assert any(graph[earlier][vertex] == 1 for earlier in order[:position])


@given(_graphs_with_start())
def test_bfs_reached_set_is_closed(case):
    graph, start = case
    reached = set(bfs(graph, start))
    for vertex in reached:
        for other, edge in enumerate(graph[vertex]):
            if edge == 1:
                assert other in reached
import pytest

from algocollection.graphs import Graph, travelling_salesman

COSTS = [
    [0, 5, 10, 15],
    [5, 0, 20, 30],
    [10, 20, 0, 35],
    [15, 30, 35, 0],
]


def sample_graph():
    g = Graph(4)
    for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        g.add_edge(v, w)
    return g


def test_bfs_sample_from_two():
    assert sample_graph().bfs(2) == [2, 0, 3, 1]


def test_bfs_visits_each_reachable_vertex_once():
    order = sample_graph().bfs(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]


def test_bfs_skips_unreachable():
    g = Graph(3)
    g.add_edge(0, 1)
    assert g.bfs(0) == [0, 1]
    assert g.bfs(2) == [2]


def test_add_edge_out_of_range():
    with pytest.raises(ValueError):
        Graph(2).add_edge(0, 5)


def test_bfs_bad_start():
    with pytest.raises(ValueError):
        Graph(2).bfs(-1)


def test_tsp_symmetric_independent_of_start():
    results = {travelling_salesman(COSTS, start) for start in range(4)}
    assert len(results) == 1


def test_tsp_two_vertices():
    assert travelling_salesman([[0, 3], [4, 0]], 0) == 7


def test_tsp_rejects_non_square():
    with pytest.raises(ValueError):
        travelling_salesman([[0, 1], [1]], 0)


def test_tsp_rejects_bad_start():
    with pytest.raises(ValueError):
        travelling_salesman(COSTS, 4)
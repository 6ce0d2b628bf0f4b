import pytest
from hypothesis import given, strategies as st

from algodrills.graphs import INF, Graph, is_connected_bfs, is_connected_dfs

EDGES = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2),
    (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1),
    (6, 8, 6), (7, 8, 7),
]


def sample_graph():
    g = Graph(9)
    for u, v, w in EDGES:
        g.add_edge(u, v, w)
    return g


def test_worked_example_distances():
    g = sample_graph()
    assert g.shortest_paths(0) == [0, 4, 12, 19, 21, 11, 9, 8, 14]


def test_both_methods_agree_on_example():
    g = sample_graph()
    for source in range(9):
        assert g.shortest_paths(source) == g.shortest_paths_ordered(source)


def test_distances_are_symmetric():
    g = sample_graph()
    table = [g.shortest_paths(s) for s in range(9)]
    for a in range(9):
        assert table[a][a] == 0
        for b in range(9):
            assert table[a][b] == table[b][a]


def test_single_edge_distance_is_its_weight():
    g = Graph(2)
    g.add_edge(0, 1, 5)
    assert g.shortest_paths(0) == [0, 5]
    assert g.shortest_paths_ordered(1) == [5, 0]


def test_unreachable_node_reports_inf():
    g = Graph(3)
    g.add_edge(0, 1, 2)
    assert g.shortest_paths(0)[2] == INF
    assert g.shortest_paths_ordered(0)[2] == INF


def test_invalid_nodes_and_weights_rejected():
    g = Graph(2)
    with pytest.raises(ValueError):
        g.add_edge(0, 2, 1)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, -1)
    with pytest.raises(ValueError):
        g.shortest_paths(3)
    with pytest.raises(ValueError):
        Graph(-1)


@st.composite
def weighted_graphs(draw):
    size = draw(st.integers(min_value=1, max_value=8))
    node = st.integers(min_value=0, max_value=size - 1)
    edges = draw(st.lists(st.tuples(node, node, st.integers(0, 20)), max_size=20))
    return size, edges


@given(weighted_graphs())
def test_methods_agree_and_respect_edges(spec):
    size, edges = spec
    g = Graph(size)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    dist = g.shortest_paths(0)
    assert dist == g.shortest_paths_ordered(0)
    assert dist[0] == 0
    for u, v, w in edges:
        if dist[u] != INF:
            assert dist[v] <= dist[u] + w
        if dist[v] != INF:
            assert dist[u] <= dist[v] + w


def test_connected_path_graph():
    graph = [[1], [0, 2], [1, 3], [2]]
    assert is_connected_bfs(graph) is True
    assert is_connected_dfs(graph) is True


def test_two_components_not_connected():
    graph = [[1], [0], [3], [2]]
    assert is_connected_bfs(graph) is False
    assert is_connected_dfs(graph) is False


def test_empty_graph_is_connected():
    assert is_connected_bfs([]) is True
    assert is_connected_dfs([]) is True


def test_out_of_range_neighbour_rejected():
    with pytest.raises(ValueError):
        is_connected_bfs([[1], [5]])
    with pytest.raises(ValueError):
        is_connected_dfs([[1], [5]])


@given(weighted_graphs())
def test_connectivity_matches_reachability(spec):
    size, edges = spec
    adjacency = [[] for _ in range(size)]
    g = Graph(size)
    for u, v, w in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
        g.add_edge(u, v, w)
    reachable_all = INF not in g.shortest_paths(0)
    assert is_connected_bfs(adjacency) == reachable_all
    assert is_connected_dfs(adjacency) == reachable_all
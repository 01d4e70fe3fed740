import pytest

from puzzlework.components import Graph, main

EDGES = [(1, 0), (2, 1), (2, 3), (4, 3), (4, 5), (6, 1), (7, 0), (9, 10), (9, 2)]


@pytest.fixture
def graph():
    g = Graph(11)
    for v, w in EDGES:
        g.add_edge(v, w)
    return g


def test_components_partition_vertices(graph):
    components = graph.connected_components()
    flat = [v for comp in components for v in comp]
    assert sorted(flat) == list(range(11))
    assert len(flat) == len(set(flat))


def test_edges_stay_within_one_component(graph):
    owner = {v: i for i, comp in enumerate(graph.connected_components()) for v in comp}
    for v, w in EDGES:
        assert owner[v] == owner[w]


def test_isolated_vertex_is_its_own_component(graph):
    assert [8] in graph.connected_components()


def test_depth_first_order(graph):
    assert graph.connected_components()[0] == [0, 1, 2, 3, 4, 5, 9, 10, 6, 7]


def test_graph_without_edges():
    assert Graph(3).connected_components() == [[0], [1], [2]]


def test_edge_to_missing_vertex_rejected():
    with pytest.raises(ValueError):
        Graph(2).add_edge(0, 2)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Following are connected components \n")
    assert "\nsize:1\n" in out
    assert out.count("size:") == 2
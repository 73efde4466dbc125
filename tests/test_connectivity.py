import pytest

from roadtrip.domain.errors import DigraphError
from roadtrip.graph import Digraph, is_strongly_connected, reachable_from


def _graph(vertices, edges):
    graph = Digraph()
    for vertex in vertices:
        graph.add_vertex(vertex, None)
    for from_vertex, to_vertex in edges:
        graph.add_edge(from_vertex, to_vertex, None)
    return graph


def test_empty_graph_is_strongly_connected():
    assert Digraph().is_strongly_connected()


def test_single_vertex_is_strongly_connected():
    assert _graph([7], []).is_strongly_connected()


def test_one_way_edge_is_not_strongly_connected():
    assert not _graph([0, 1], [(0, 1)]).is_strongly_connected()


def test_two_isolated_vertices():
    assert not _graph([0, 1], []).is_strongly_connected()


def test_cycle_through_all_vertices():
    vertices = [10, 20, 30, 40]
    edges = [(10, 20), (20, 30), (30, 40), (40, 10)]
    assert _graph(vertices, edges).is_strongly_connected()


def test_breaking_the_cycle_disconnects():
    graph = _graph([0, 1, 2], [(0, 1), (1, 2), (2, 0)])
    graph.remove_edge(2, 0)
    assert not graph.is_strongly_connected()


def test_indirect_reachability_counts():
    # 0 reaches 2 only through 1; 2 reaches 1 only through 0
    graph = _graph([0, 1, 2], [(0, 1), (1, 2), (2, 0)])
    assert is_strongly_connected(graph)


def test_sink_component():
    # {0, 1} is a cycle but 2 can leave and never come back
    graph = _graph([0, 1, 2], [(0, 1), (1, 0), (1, 2)])
    assert not graph.is_strongly_connected()


def test_reachable_from():
    graph = _graph([0, 1, 2, 3], [(0, 1), (1, 2), (3, 0)])
    assert reachable_from(graph, 0) == {0, 1, 2}
    assert reachable_from(graph, 2) == {2}
    assert reachable_from(graph, 3) == {0, 1, 2, 3}


def test_reachable_from_missing_vertex():
    with pytest.raises(DigraphError):
        reachable_from(Digraph(), 0)


def test_check_does_not_mutate(chain_graph):
    before = sorted(chain_graph.edges())
    chain_graph.is_strongly_connected()
    assert sorted(chain_graph.edges()) == before

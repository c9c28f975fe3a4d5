import pytest

from dsakit.topological import CycleError, Graph, main


def _graph(vertices, edges):
    g = Graph(vertices)
    for v, w in edges:
        g.add_edge(v, w)
    return g


def _assert_valid_order(order, vertices, edges):
    assert sorted(order) == list(range(vertices))
    position = {vertex: index for index, vertex in enumerate(order)}
    for v, w in edges:
        assert position[v] < position[w]


COURSES = [(0, 2), (1, 2), (2, 3), (0, 1)]
BUILD = [(0, 1), (2, 1), (1, 3)]


def test_course_example_order():
    g = _graph(4, COURSES)
    order = g.topological_sort()
    assert order == [0, 1, 2, 3]
    _assert_valid_order(order, 4, COURSES)


def test_build_example_order():
    g = _graph(4, BUILD)
    order = g.topological_sort()
    assert order == [2, 0, 1, 3]
    _assert_valid_order(order, 4, BUILD)


def test_larger_dag_is_valid():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    order = _graph(6, edges).topological_sort()
    _assert_valid_order(order, 6, edges)


def test_cycle_raises():
    g = _graph(3, [(0, 1), (1, 2), (2, 0)])
    with pytest.raises(CycleError):
        g.topological_sort()
    assert g.has_cycle() is True


def test_self_loop_is_cycle():
    g = _graph(2, [(1, 1)])
    assert g.has_cycle() is True


def test_acyclic_has_no_cycle():
    assert _graph(4, COURSES).has_cycle() is False


def test_diamond_is_not_cycle():
    g = _graph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])
    assert g.has_cycle() is False
    _assert_valid_order(g.topological_sort(), 4, [(0, 1), (0, 2), (1, 3), (2, 3)])


def test_empty_graph():
    assert Graph(0).topological_sort() == []


def test_edge_out_of_range():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2)
    with pytest.raises(IndexError):
        g.add_edge(-1, 0)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)


def test_cycle_error_is_value_error():
    with pytest.raises(ValueError):
        _graph(2, [(0, 1), (1, 0)]).topological_sort()


def test_main_reports_cycle(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Course order: [0, 1, 2, 3]" in out
    assert "Detected cyclic dependencies!" in out
import pytest

from adventsolve.day23 import (
    count_t_triangles,
    maximal_cliques,
    parse_graph,
    password,
    solve,
)

NETWORK = "ta-tb\ntb-tc\ntc-ta\ntc-xd\nxd-xe\n"


def test_parse_graph_is_symmetric():
    graph = parse_graph(NETWORK)
    for node, neighbours in graph.items():
        for other in neighbours:
            assert node in graph[other]


def test_parse_graph_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_graph("abc\n")


def test_count_t_triangles():
    assert count_t_triangles(parse_graph(NETWORK)) == 1


def test_no_t_nodes_gives_no_triangles():
    graph = parse_graph("aa-bb\nbb-cc\ncc-aa\n")
    assert count_t_triangles(graph) == 0


def test_maximal_cliques_are_cliques_and_maximal():
    graph = parse_graph(NETWORK)
    cliques = maximal_cliques(graph)
    assert cliques
    for clique in cliques:
        for a in clique:
            for b in clique:
                if a != b:
                    assert b in graph[a]
        outsiders = set(graph) - clique
        for node in outsiders:
            assert not clique <= graph[node]


def test_maximal_cliques_cover_every_edge():
    graph = parse_graph(NETWORK)
    cliques = maximal_cliques(graph)
    for a, neighbours in graph.items():
        for b in neighbours:
            assert any({a, b} <= clique for clique in cliques)


def test_password_of_triangle():
    assert password(parse_graph(NETWORK)) == "ta,tb,tc"


def test_password_of_empty_graph_raises():
    with pytest.raises(ValueError):
        password({})


def test_solve_agrees_with_parts():
    graph = parse_graph(NETWORK)
    assert solve(NETWORK) == (count_t_triangles(graph), password(graph))
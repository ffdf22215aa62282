"""LAN Party: triangles and the largest clique in a network map."""

from __future__ import annotations

Graph = dict[str, set[str]]


def parse_graph(text: str) -> Graph:
    """Undirected adjacency sets from ``a-b`` lines."""
    graph: Graph = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.strip().split("-")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"expected 'a-b', got {line!r}")
        a, b = parts
        graph.setdefault(a, set()).add(b)
        graph.setdefault(b, set()).add(a)
    return graph


def count_t_triangles(graph: Graph) -> int:
    """Distinct triangles holding at least one computer whose name starts with ``t``."""
    triangles: set[frozenset[str]] = set()
    for node, neighbours in graph.items():
        if not node.startswith("t") or len(neighbours) < 2:
            continue
        for adj in neighbours:
            for cousin in graph[adj]:
                if node in graph.get(cousin, ()):
                    triangle = frozenset((node, adj, cousin))
                    if len(triangle) == 3:
                        triangles.add(triangle)
    return len(triangles)


def maximal_cliques(graph: Graph) -> list[frozenset[str]]:
    """Every maximal clique, found by Bron-Kerbosch with pivoting."""
    cliques: list[frozenset[str]] = []
    stack: list[tuple[frozenset[str], set[str], set[str]]] = [
        (frozenset(), set(graph), set())
    ]
    while stack:
        current, candidates, excluded = stack.pop()
        if not candidates and not excluded:
            cliques.append(current)
            continue
        pivot = max(
            sorted(candidates | excluded),
            key=lambda node: len(graph[node] & candidates),
        )
        for node in sorted(candidates - graph[pivot]):
            neighbours = graph[node]
            stack.append(
                (current | {node}, candidates & neighbours, excluded & neighbours)
            )
            candidates.discard(node)
            excluded.add(node)
    return cliques


def password(graph: Graph) -> str:
    """Names of the largest clique, sorted and joined with commas."""
    cliques = maximal_cliques(graph)
    if not graph or not cliques:
        raise ValueError("the network is empty")
    largest = max(len(clique) for clique in cliques)
    best = min(sorted(clique) for clique in cliques if len(clique) == largest)
    return ",".join(best)


def solve(text: str) -> tuple[int, str]:
    graph = parse_graph(text)
    return count_t_triangles(graph), password(graph)
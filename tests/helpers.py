# tests/helpers.py
from typing import Any, Iterable, Tuple

from wgraph import Graph


def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    except Exception as ex:
        raise AssertionError(f"Expected {exc_types}, but got {type(ex).__name__}: {ex}") from ex
    else:
        raise AssertionError(f"Expected {exc_types}, but no exception was raised")


def build_graph(edges: Iterable[Tuple[Any, Any, Any]], **options: Any) -> Graph:
    g: Graph = Graph(**options)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def check_invariants(g: Graph) -> None:
    """Adjacency symmetry, edge/adjacency co-presence and the two counters."""
    nodes = list(g.nodes())
    edges = list(g.edges())
    assert len(nodes) == len(set(nodes)) == g.order == len(g)
    assert len(edges) == len(set(edges)) == g.size

    for u, v in edges:
        assert not (v < u), f"edge key {(u, v)!r} is not canonical"
        assert v in g.neighbors(u) and u in g.neighbors(v)

    for u in nodes:
        for x in g.neighbors(u):
            assert g.contains_node(x)
            assert u in g.neighbors(x)
            assert g.contains_edge(u, x)


def scenario_a() -> Graph:
    return build_graph([(1, 2, 5), (2, 3, 4), (3, 1, 3), (4, 2, 7)])


def mera() -> Graph:
    """7 vertices, 11 edges, every weight 2."""
    pairs = [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (2, 5), (3, 5), (4, 5), (4, 6), (5, 7), (6, 7)]
    return build_graph((u, v, 2) for u, v in pairs)


MERA_ORDER = [(1, 3), (1, 2), (2, 3), (1, 4), (2, 4), (2, 5), (3, 5), (4, 6), (4, 5), (5, 7), (6, 7)]


def triangle_with_pendant() -> Graph:
    return build_graph([(1, 2, 1), (2, 3, 1), (1, 3, 1), (1, 4, 1), (3, 4, 1)])

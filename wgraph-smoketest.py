# wgraph-smoketest.py
# Run with:  python -u wgraph-smoketest.py

import operator
import os
import sys
import traceback
from typing import Callable, List, Tuple

from wgraph import EdgeNotFound, EmptyGraph, Graph, bfs, dfs


class TestRunner:
    def __init__(self) -> None:
        self.passed: int = 0
        self.failed: int = 0
        self._tests: List[Tuple[str, Callable[[], None]]] = []

    def test(self, name: str) -> Callable[[Callable[[], None]], Callable[[], None]]:
        def deco(fn: Callable[[], None]) -> Callable[[], None]:
            self._tests.append((name, fn))
            return fn
        return deco

    def assert_true(self, expr: bool, msg: str = "") -> None:
        if not expr:
            raise AssertionError(msg or "Expected True, got False")

    def assert_equal(self, a, b, msg: str = "") -> None:
        if a != b:
            raise AssertionError(msg or f"Expected {b!r}, got {a!r}")

    def run(self) -> bool:
        print("Running wgraph smoketests...\n")
        show_trace = os.getenv("SHOW_TRACE", "0") not in ("0", "", "false", "False")
        for name, fn in self._tests:
            try:
                fn()
            except Exception as ex:
                print(f"✗ {name}  -- {type(ex).__name__}: {ex}")
                if show_trace:
                    traceback.print_exc()
                self.failed += 1
            else:
                print(f"✓ {name}")
                self.passed += 1
        print("\nFinished:", f"{self.passed} passed,", f"{self.failed} failed.")
        return self.failed == 0


def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    raise AssertionError(f"Expected {exc_types}, but no exception was raised")


def _graph(edges) -> Graph:
    g: Graph = Graph()
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


tr = TestRunner()


@tr.test("add_edge is idempotent and keeps the first weight")
def _():
    g = _graph([(1, 2, 3), (2, 1, 9)])
    tr.assert_equal(g.size, 1)
    tr.assert_equal(g.get_weight(1, 2), 3)
    tr.assert_true(g.contains_edge(2, 1))


@tr.test("remove_node drops every incident edge")
def _():
    g = _graph([(1, 2, 0), (2, 3, 0), (2, 4, 0)])
    g.remove_node(2)
    tr.assert_equal((g.order, g.size), (3, 0))


@tr.test("contraction cost and fusion (sum)")
def _():
    g = _graph([(1, 2, 5), (2, 3, 4), (3, 1, 3), (4, 2, 7)])
    tr.assert_equal(g.contraction_cost(1, 2, operator.add), 19)
    g.contract_edge(1, 2, operator.add)
    tr.assert_equal((g.order, g.size), (3, 2))
    tr.assert_equal(g.get_weight(1, 3), 7)
    tr.assert_true(g.contains_edge(1, 4))


@tr.test("contraction sequence total (product)")
def _():
    pairs = [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (2, 5), (3, 5), (4, 5), (4, 6), (5, 7), (6, 7)]
    g = _graph((u, v, 2) for u, v in pairs)
    order = [(1, 3), (1, 2), (2, 3), (1, 4), (2, 4), (2, 5), (3, 5), (4, 6), (4, 5), (5, 7), (6, 7)]
    tr.assert_equal(g.contract_edges(order, 0, operator.mul), 204)


@tr.test("contraction on a non-edge raises EdgeNotFound")
def _():
    g = _graph([(1, 2, 1), (3, 4, 1)])
    expect_raises(EdgeNotFound, g.contract_edge, 1, 3, operator.add)


@tr.test("random sampling on an empty graph raises EmptyGraph")
def _():
    expect_raises(EmptyGraph, Graph().random_node)
    expect_raises(EmptyGraph, Graph().random_edge)


@tr.test("bfs/dfs visitation order")
def _():
    g = _graph([(1, 2, 1), (2, 3, 1), (1, 3, 1), (1, 4, 1), (3, 4, 1)])
    tr.assert_equal(bfs(1, 2, g), [1, 2])
    tr.assert_equal(dfs(1, 4, g), [1, 2, 3, 4])
    tr.assert_equal(dfs(1, 5, g), None)


if __name__ == "__main__":
    sys.exit(0 if tr.run() else 1)

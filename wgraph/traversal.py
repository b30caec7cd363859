# wgraph/traversal.py

from __future__ import annotations
from collections import deque
from typing import TYPE_CHECKING, Deque, Generic, Hashable, Iterator, List, Optional, Set, TypeVar

if TYPE_CHECKING:
    from .graph import Graph

V = TypeVar("V", bound=Hashable)


class _Visitor(Generic[V]):
    """
    Single-pass lazy walk from ``start``. A vertex is yielded the first time it
    leaves the frontier; already-seen vertices are dropped. The frontier
    discipline (queue or stack) is supplied by subclasses.
    """

    def __init__(self, graph: "Graph[V, object]", start: V) -> None:
        self.graph = graph
        self.seen: Set[V] = set()
        self._revision = graph.revision
        self._frontier: Deque[V] = deque()
        if graph.contains_node(start):
            self._frontier.append(start)

    def _pop(self) -> V:
        raise NotImplementedError

    def _push_neighbors(self, v: V) -> None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[V]:
        return self

    def __next__(self) -> V:
        if self.graph.revision != self._revision:
            raise RuntimeError("graph was mutated during traversal")
        while self._frontier:
            v = self._pop()
            if v not in self.seen:
                self.seen.add(v)
                self._push_neighbors(v)
                return v
        raise StopIteration


class Bfs(_Visitor[V]):
    """Breadth-first visitor: FIFO frontier, neighbors enqueued in insertion order."""

    def _pop(self) -> V:
        return self._frontier.popleft()

    def _push_neighbors(self, v: V) -> None:
        for x in self.graph.neighbors(v):
            if x not in self.seen:
                self._frontier.append(x)


class Dfs(_Visitor[V]):
    """
    Depth-first visitor: LIFO frontier. Neighbors are pushed in reverse so the
    first-inserted neighbor is explored first.
    """

    def _pop(self) -> V:
        return self._frontier.pop()

    def _push_neighbors(self, v: V) -> None:
        for x in reversed(self.graph.neighbors(v)):
            if x not in self.seen:
                self._frontier.append(x)


def bfs(start: V, end: V, graph: "Graph[V, object]") -> Optional[List[V]]:
    """
    Breadth-first visitation order from ``start`` up to and including ``end``.

    Note the result is every vertex visited before ``end``, not a shortest
    route. None if ``end`` is not reachable.
    """
    path: List[V] = []
    for v in Bfs(graph, start):
        path.append(v)
        if v == end:
            return path
    return None


def dfs(start: V, end: Optional[V], graph: "Graph[V, object]") -> Optional[List[V]]:
    """
    Depth-first visitation order from ``start``.

    With ``end=None`` the whole component of ``start`` is returned; otherwise the
    prefix ending at ``end``, or None if it is unreachable. None whenever
    ``start`` is not in the graph.
    """
    if not graph.contains_node(start):
        return None

    path: List[V] = []
    for v in Dfs(graph, start):
        path.append(v)
        if end is not None and v == end:
            return path

    return None if end is not None else path

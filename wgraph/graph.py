# wgraph/graph.py


from __future__ import annotations
from typing import Callable, Generic, Hashable, Iterable, Iterator, Optional, Tuple, Type, TypeVar
import logging
import random

from . import contraction as _contraction
from ._display import safe_str
from ._indexed import IndexedMap, IndexedSet
from .errors import EmptyGraph

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)
W = TypeVar("W")
T = TypeVar("T")


class _Cursor(Generic[T]):
    """
    Lazy, single-pass position into one of the graph's ordered stores.

    The cursor remembers the graph revision it was created at; pulling from it
    after any structural mutation raises RuntimeError, the same way a dict
    complains when it changes size during iteration.
    """

    __slots__ = ("_graph", "_store", "_pos", "_revision")

    def __init__(self, graph: "Graph", store: IndexedMap) -> None:
        self._graph = graph
        self._store = store
        self._pos = 0
        self._revision = graph.revision

    def __iter__(self) -> "_Cursor[T]":
        return self

    def __next__(self) -> T:
        if self._graph.revision != self._revision:
            raise RuntimeError("graph was mutated during iteration")
        if self._pos >= len(self._store):
            raise StopIteration
        key = self._store.key_at(self._pos)
        self._pos += 1
        return key


class Graph(Generic[V, W]):
    """
    Undirected weighted graph with edge contraction:
    - adjacency kept as insertion-ordered, index-addressable sets
    - one weight per undirected edge, stored under the key (min(u, v), max(u, v))
    - order/size maintained incrementally
    - input validation hooks and an optional vertex cap for untrusted data
    - random sampling through an injectable uniform-index source

    Vertices joined by an edge must be comparable with ``<`` and totally
    ordered (ints, strings, tuples of those); add_edge rejects pairs for which
    neither ``u < v`` nor ``v < u`` holds.
    """

    def __init__(
        self,
        *,
        allow_self_loops: bool = True,
        # Validation knobs (all optional; defaults are permissive)
        restrict_vertex_types: Optional[Tuple[Type, ...]] = None,
        vertex_validator: Optional[Callable[[V], bool]] = None,
        # Capacity guard
        max_vertices: Optional[int] = None,
        # Uniform index source: n -> int in [0, n)
        index_source: Optional[Callable[[int], int]] = None,
    ):
        self._adj: IndexedMap[V, IndexedSet[V]] = IndexedMap()
        self._weights: IndexedMap[Tuple[V, V], W] = IndexedMap()
        self._order = 0
        self._size = 0
        self._revision = 0
        self.allow_self_loops = allow_self_loops
        self._restrict_vertex_types = restrict_vertex_types
        self._vertex_validator = vertex_validator
        self._max_vertices = max_vertices
        self._index_source = index_source if index_source is not None else random.Random().randrange

    # ---------- internal helpers ----------

    def _validate_vertex_type(self, v: V) -> None:
        try:
            hash(v)
        except TypeError as e:
            raise TypeError(f"Vertex must be hashable; got {type(v).__name__}") from e

        if self._restrict_vertex_types is not None and not isinstance(v, self._restrict_vertex_types):
            allowed = ", ".join(t.__name__ for t in self._restrict_vertex_types)
            raise TypeError(f"Vertex type {type(v).__name__} not allowed (allowed: {allowed})")

        if self._vertex_validator is not None and not self._vertex_validator(v):
            raise ValueError(f"Vertex {safe_str(v)} failed custom validation")

    def _check_capacity_before_add_vertex(self) -> None:
        if self._max_vertices is not None and self._order >= self._max_vertices:
            raise OverflowError(f"Vertex cap exceeded (max_vertices={self._max_vertices})")

    @staticmethod
    def _key(u: V, v: V) -> Tuple[V, V]:
        return (u, v) if u < v else (v, u)  # type: ignore[operator]

    @staticmethod
    def _checked_key(u: V, v: V) -> Tuple[V, V]:
        try:
            ordered = u == v or u < v or v < u  # type: ignore[operator]
        except TypeError as e:
            raise TypeError(
                f"Vertices {safe_str(u)} and {safe_str(v)} are not comparable "
                f"({type(u).__name__} vs {type(v).__name__})"
            ) from e
        if not ordered:
            raise TypeError(f"Vertices {safe_str(u)} and {safe_str(v)} are not totally ordered")
        return (u, v) if u < v else (v, u)  # type: ignore[operator]

    def _draw(self, n: int) -> int:
        i = self._index_source(n)
        if not 0 <= i < n:
            raise ValueError(f"index_source returned {i!r}, expected an int in [0, {n})")
        return i

    # ---------- counters ----------

    @property
    def order(self) -> int:
        """Number of vertices."""
        return self._order

    @property
    def size(self) -> int:
        """Number of edges."""
        return self._size

    @property
    def revision(self) -> int:
        """Bumped on every structural mutation; live cursors compare against it."""
        return self._revision

    # ---------- mutation ----------

    def add_node(self, u: V) -> None:
        self._validate_vertex_type(u)
        if u not in self._adj:
            self._check_capacity_before_add_vertex()
            self._adj[u] = IndexedSet()
            self._order += 1
            self._revision += 1

    def add_edge(self, u: V, v: V, w: W) -> None:
        """
        Add the undirected edge (u, v) with weight ``w``, creating endpoints as
        needed. Re-adding an existing edge keeps its current weight.
        """
        self._validate_vertex_type(u)
        self._validate_vertex_type(v)

        if not self.allow_self_loops and u == v:
            raise ValueError("Self-loops are disabled (set allow_self_loops=True to permit)")

        # reject incomparable endpoints before anything is touched
        key = self._checked_key(u, v)

        self.add_node(u)
        self.add_node(v)

        u_nbrs = self._adj[u]
        v_nbrs = self._adj[v]
        # a self-loop shares one set, so both flags are taken before inserting
        back = v not in u_nbrs
        forth = u not in v_nbrs
        u_nbrs.add(v)
        v_nbrs.add(u)

        if key not in self._weights:
            self._weights[key] = w

        if back and forth:
            self._size += 1
            self._revision += 1

    def set_weight(self, u: V, v: V, w: W) -> None:
        if self.contains_edge(u, v):
            self._weights[self._key(u, v)] = w

    def update_weight(self, u: V, v: V, func: Callable[[W], W]) -> Optional[W]:
        """Replace the weight of (u, v) with ``func(weight)``; None if there is no such edge."""
        if not self.contains_edge(u, v):
            return None
        key = self._key(u, v)
        w = func(self._weights[key])
        self._weights[key] = w
        return w

    def remove_edge(self, u: V, v: V) -> None:
        if not self.contains_edge(u, v):
            return
        self._adj[u].swap_remove(v)
        self._adj[v].swap_remove(u)
        self._weights.swap_remove(self._key(u, v))
        self._size -= 1
        self._revision += 1

    def remove_node(self, u: V) -> None:
        nbrs = self._adj.swap_remove(u, None)
        if nbrs is None:
            return
        for x in nbrs:
            if x != u:
                self._adj[x].swap_remove(u)
            self._weights.swap_remove(self._key(u, x))
            self._size -= 1
        self._order -= 1
        self._revision += 1

    # ---------- queries ----------

    def contains_node(self, u: V) -> bool:
        return u in self._adj

    def contains_edge(self, u: V, v: V) -> bool:
        # adjacency is symmetric and always paired with a weight entry
        nbrs = self._adj.get(u)
        return nbrs is not None and v in nbrs

    def neighbors(self, u: V) -> Optional[Tuple[V, ...]]:
        """Neighbors of ``u`` in insertion order, or None when ``u`` is absent."""
        nbrs = self._adj.get(u)
        return None if nbrs is None else tuple(nbrs)

    def degree(self, u: V) -> int:
        nbrs = self._adj.get(u)
        return 0 if nbrs is None else len(nbrs)

    def get_weight(self, u: V, v: V) -> Optional[W]:
        if not self.contains_edge(u, v):
            return None
        return self._weights[self._key(u, v)]

    def nodes(self) -> Iterator[V]:
        return _Cursor(self, self._adj)

    def edges(self) -> Iterator[Tuple[V, V]]:
        return _Cursor(self, self._weights)

    def node_idx(self, i: int) -> Optional[V]:
        entry = self._adj.get_index(i)
        return None if entry is None else entry[0]

    def edge_idx(self, i: int) -> Optional[Tuple[V, V, W]]:
        entry = self._weights.get_index(i)
        if entry is None:
            return None
        (u, v), w = entry
        return u, v, w

    def random_node(self) -> V:
        if self._order == 0:
            raise EmptyGraph("random_node() on a graph with no vertices")
        return self._adj.key_at(self._draw(self._order))

    def random_edge(self) -> Tuple[V, V]:
        if self._size == 0:
            raise EmptyGraph("random_edge() on a graph with no edges")
        return self._weights.key_at(self._draw(self._size))

    # ---------- contraction ----------

    def contraction_cost(self, u: V, v: V, combine: Callable[[W, W], W]) -> W:
        return _contraction.contraction_cost(self, u, v, combine)

    def contract_edge(self, u: V, v: V, combine: Callable[[W, W], W]) -> None:
        _contraction.contract_edge(self, u, v, combine)

    def contract_edges(self, edges: Iterable[Tuple[V, V]], base: W, combine: Callable[[W, W], W]) -> W:
        return _contraction.contract_edges(self, edges, base, combine)

    def contract_random_edge(self, combine: Callable[[W, W], W]) -> W:
        return _contraction.contract_random_edge(self, combine)

    # ---------- copying ----------

    def copy(self) -> "Graph[V, W]":
        """Structural copy with the same configuration; weights themselves are shared."""
        g: Graph[V, W] = Graph(
            allow_self_loops=self.allow_self_loops,
            restrict_vertex_types=self._restrict_vertex_types,
            vertex_validator=self._vertex_validator,
            max_vertices=self._max_vertices,
            index_source=self._index_source,
        )
        for u, nbrs in self._adj.items():
            g._adj[u] = nbrs.copy()
        for key, w in self._weights.items():
            g._weights[key] = w
        g._order = self._order
        g._size = self._size
        return g

    # ---------- dunder ----------

    def __len__(self) -> int:
        return self._order

    def __contains__(self, u: object) -> bool:
        return u in self._adj

    def __str__(self) -> str:
        lines = []
        for u, nbrs in self._adj.items():
            parts = [
                f"{safe_str(x)} (w={safe_str(self._weights[self._key(u, x)])})"
                for x in sorted(nbrs, key=safe_str)
            ]
            lines.append(f"{safe_str(u)}: [{', '.join(parts)}]")
        return f"WeightedGraph(order={self._order}, size={self._size}) {{\n  " + "\n  ".join(lines) + "\n}"

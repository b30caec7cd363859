# wgraph/contraction.py

"""
Edge contraction on top of the public Graph API.

Contracting (u, v) fuses ``v`` into ``u``: the edge itself disappears, every
other edge of ``v`` is re-homed onto ``u``, and where ``u`` and ``v`` shared a
neighbor the two parallel edges are merged into one with ``combine``.

The cost of a contraction folds ``combine`` over the weight of (u, v), then the
other edges of ``u``, then the other edges of ``v``, each in neighbor insertion
order. ``combine`` is never assumed commutative, so that order is part of the
result.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Dict, Hashable, Iterable, List, Tuple, TypeVar
import logging

from ._display import safe_str
from .errors import EdgeNotFound, VertexNotFound

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)
W = TypeVar("W")

Combine = Callable[[W, W], W]


def _require_edge(graph: "Graph[V, W]", u: V, v: V) -> None:
    if u == v:
        raise ValueError(f"Cannot contract self-loop on {safe_str(u)}")
    if not graph.contains_edge(u, v):
        raise EdgeNotFound(u, v)


def contraction_cost(graph: "Graph[V, W]", u: V, v: V, combine: Combine) -> W:
    """Cost of fusing ``v`` into ``u``; the graph is left untouched."""
    _require_edge(graph, u, v)
    cost = graph.get_weight(u, v)

    for x in graph.neighbors(u):
        if x != v:
            cost = combine(cost, graph.get_weight(u, x))

    for x in graph.neighbors(v):
        if x != u:
            cost = combine(cost, graph.get_weight(v, x))

    return cost


def contract_edge(graph: "Graph[V, W]", u: V, v: V, combine: Combine) -> None:
    """Fuse ``v`` into ``u``. Raises EdgeNotFound before touching the graph if (u, v) is not an edge."""
    _require_edge(graph, u, v)
    graph.remove_edge(u, v)

    # new weights of the edges that move from v to u
    rehomed: List[Tuple[V, W]] = []
    for x in graph.neighbors(v):
        if x == v:
            continue  # a loop on v goes away with v
        wvx = graph.get_weight(v, x)
        if graph.contains_edge(u, x):
            rehomed.append((x, combine(wvx, graph.get_weight(u, x))))
        else:
            rehomed.append((x, wvx))

    for x, w in rehomed:
        graph.remove_edge(x, v)
        if graph.contains_edge(x, u):
            graph.set_weight(x, u, w)
        else:
            graph.add_edge(x, u, w)

    graph.remove_node(v)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "contracted %s into %s (order=%d, size=%d)",
            safe_str(v), safe_str(u), graph.order, graph.size,
        )


def resolve_alias(aliases: Dict[V, V], v: V) -> V:
    """Follow ``aliases`` from ``v`` until a vertex maps to itself."""
    try:
        current = aliases[v]
    except KeyError:
        raise VertexNotFound(v) from None
    last = v
    while current != last:
        last = current
        current = aliases[current]
    return current


def contract_edges(graph: "Graph[V, W]", edges: Iterable[Tuple[V, V]], base: W, combine: Combine) -> W:
    """
    Contract ``edges`` in order and return ``base`` plus the sum of the
    individual contraction costs.

    Pairs are given in terms of the vertices present when the call starts.
    Each contraction renames its absorbed vertex to the survivor, so later
    pairs are resolved through an alias table first; a pair whose ends have
    already been fused together is skipped.

    Not atomic: if a pair resolves to two vertices that are not adjacent,
    EdgeNotFound is raised and the contractions before it stay applied. Pass
    ``graph.copy()`` when the original graph must survive a failed sequence.
    """
    aliases: Dict[V, V] = {x: x for x in graph.nodes()}
    total = base

    for u, v in edges:
        ru = resolve_alias(aliases, u)
        rv = resolve_alias(aliases, v)
        if ru == rv:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("skipping (%s, %s): already fused into %s", safe_str(u), safe_str(v), safe_str(ru))
            continue

        cost = contraction_cost(graph, ru, rv, combine)
        contract_edge(graph, ru, rv, combine)
        aliases[rv] = ru
        total = total + cost
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "pair (%s, %s) as (%s, %s): cost %s, running total %s",
                safe_str(u), safe_str(v), safe_str(ru), safe_str(rv), safe_str(cost), safe_str(total),
            )

    return total


def contract_random_edge(graph: "Graph[V, W]", combine: Combine) -> W:
    """Contract a uniformly chosen edge and return its cost. Raises EmptyGraph without edges."""
    u, v = graph.random_edge()
    cost = contraction_cost(graph, u, v, combine)
    contract_edge(graph, u, v, combine)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("random edge (%s, %s): cost %s", safe_str(u), safe_str(v), safe_str(cost))
    return cost

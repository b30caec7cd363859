# wgraph/io.py

"""
Edge-list loading.

One edge per line, three unsigned decimal integers separated by whitespace::

    <u> <v> <w>

No header and no comments. Lines are fed to ``Graph.add_edge`` in file order,
which fixes the insertion order of vertices and edges. The first malformed
line aborts the load.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Callable, Iterable, Union
import logging
import re

from ._display import safe_str
from .errors import MalformedEdgeLine
from .graph import Graph

logger = logging.getLogger(__name__)

_EDGE_LINE_RE = re.compile(r"([0-9]+)\s+([0-9]+)\s+([0-9]+)\s*")


def parse_edge_list(
    lines: Iterable[str],
    *,
    vertex_type: Callable[[str], Any] = int,
    weight_type: Callable[[str], Any] = int,
    **graph_options: Any,
) -> Graph:
    """Build a Graph from edge-list lines. ``graph_options`` go to the Graph constructor."""
    graph: Graph = Graph(**graph_options)
    for lineno, line in enumerate(lines, start=1):
        m = _EDGE_LINE_RE.fullmatch(line)
        if m is None:
            raise MalformedEdgeLine(lineno, line.rstrip("\r\n"))
        u, v, w = m.groups()
        graph.add_edge(vertex_type(u), vertex_type(v), weight_type(w))
    return graph


def read_edge_list(
    path: Union[str, Path],
    *,
    vertex_type: Callable[[str], Any] = int,
    weight_type: Callable[[str], Any] = int,
    **graph_options: Any,
) -> Graph:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        graph = parse_edge_list(f, vertex_type=vertex_type, weight_type=weight_type, **graph_options)
    logger.info("loaded %s (order=%d, size=%d)", safe_str(path), graph.order, graph.size)
    return graph

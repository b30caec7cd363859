# wgraph/__init__.py

"""Undirected weighted graphs with edge contraction and BFS/DFS traversal."""

import logging

from .contraction import (
    contract_edge,
    contract_edges,
    contract_random_edge,
    contraction_cost,
    resolve_alias,
)
from .errors import EdgeNotFound, EmptyGraph, GraphError, MalformedEdgeLine, VertexNotFound
from .graph import Graph
from .io import parse_edge_list, read_edge_list
from .traversal import Bfs, Dfs, bfs, dfs

__all__ = [
    "Graph",
    "Bfs",
    "Dfs",
    "bfs",
    "dfs",
    "contraction_cost",
    "contract_edge",
    "contract_edges",
    "contract_random_edge",
    "resolve_alias",
    "parse_edge_list",
    "read_edge_list",
    "GraphError",
    "VertexNotFound",
    "EdgeNotFound",
    "EmptyGraph",
    "MalformedEdgeLine",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

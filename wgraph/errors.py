# wgraph/errors.py


class GraphError(Exception):
    """Base class for errors raised by wgraph operations."""


class VertexNotFound(GraphError, LookupError):
    def __init__(self, vertex: object) -> None:
        super().__init__(f"vertex not found: {vertex!r}")
        self.vertex = vertex


class EdgeNotFound(GraphError, LookupError):
    def __init__(self, u: object, v: object) -> None:
        super().__init__(f"edge not found: ({u!r}, {v!r})")
        self.u = u
        self.v = v


class EmptyGraph(GraphError, ValueError):
    """Raised when sampling from a graph with no vertices (or no edges)."""


class MalformedEdgeLine(GraphError, ValueError):
    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f"malformed edge line {lineno}: {line!r} (expected '<u> <v> <w>')")
        self.lineno = lineno
        self.line = line

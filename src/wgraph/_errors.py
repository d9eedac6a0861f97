"""Exception hierarchy for wgraph."""

from collections.abc import Hashable, Iterable


class WgraphError(Exception):
    """Base class for all wgraph errors."""


class VertexNotFoundError(WgraphError, KeyError):
    """Raised when a query refers to a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} does not exist")

    def __str__(self) -> str:
        return str(self.args[0])


class EdgeNotFoundError(WgraphError, KeyError):
    """Raised when a query refers to an edge that is not in the graph."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Edge {source!r} --> {target!r} does not exist")

    def __str__(self) -> str:
        return str(self.args[0])


class CyclicGraphError(WgraphError, ValueError):
    """Raised when a topological order is required of a cyclic graph."""

    def __init__(self, unsorted_vertices: Iterable[Hashable]) -> None:
        self.unsorted_vertices = tuple(unsorted_vertices)
        super().__init__(
            f"Cycle detected in graph, {len(self.unsorted_vertices)} vertices could not be sorted",
        )


class NoPathComputedError(WgraphError):
    """Raised when a distance or path is queried without a computed path."""


class GraphFileError(WgraphError):
    """Raised when a graph or coordinate file cannot be parsed."""


class ConfigError(WgraphError):
    """Error in wgraph configuration."""

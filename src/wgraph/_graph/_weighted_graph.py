"""Weighted directed graph with forward and backward adjacency indices."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, Set
from typing import Any, Protocol

from wgraph._errors import EdgeNotFoundError, VertexNotFoundError


class SupportsLessThan(Protocol):
    """Vertex keys must be totally ordered (and hashable)."""

    def __lt__(self, other: Any, /) -> bool: ...


class VertexSetView[V: SupportsLessThan](Set[V]):
    """Read-only, live view of a set of vertices, iterated in ascending order.

    The view has no mutating methods. It reflects later insertions into the
    underlying graph.
    """

    __slots__ = ("_keys",)

    def __init__(self, keys: Mapping[V, Any]) -> None:
        self._keys = keys

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._keys

    def __iter__(self) -> Iterator[V]:
        return iter(sorted(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(v) for v in self)}])"


class WeightedDirectedGraph[V: SupportsLessThan]:
    """A mutable, edge-weighted directed graph.

    The graph keeps two adjacency indices that always mirror each other:
    ``successors[u][v]`` and ``predecessors[v][u]`` both hold the weight of
    the edge ``u --> v``. Vertices and edges can only be inserted, never
    removed. All enumerations (vertices, neighbors, edges) run in ascending
    vertex order.

    Example:
        >>> graph = WeightedDirectedGraph[int]()
        >>> graph.add_edge(1, 2, 5.0)
        True
        >>> print(graph, end="")
        1 --> 2 weight = 5.0

    """

    __slots__ = ("_number_of_edges", "_predecessors", "_successors")

    def __init__(self) -> None:
        self._successors: dict[V, dict[V, float]] = {}
        self._predecessors: dict[V, dict[V, float]] = {}
        self._number_of_edges = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[V, V] | tuple[V, V, float]],
    ) -> WeightedDirectedGraph[V]:
        """Build a graph from ``(source, target)`` or ``(source, target, weight)`` tuples.

        Edges without a weight get the default weight of 1.0.
        """
        graph = cls()
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    # -- mutation ----------------------------------------------------------

    def add_vertex(self, vertex: V) -> bool:
        """Insert a vertex.

        Returns:
            True if the vertex was inserted, False if it was already present.

        """
        if vertex in self._successors:
            return False
        self._successors[vertex] = {}
        self._predecessors[vertex] = {}
        return True

    def add_edge(self, source: V, target: V, weight: float = 1.0) -> bool:
        """Insert the edge ``source --> target`` or overwrite its weight.

        Missing endpoints are inserted as well.

        Args:
            source: Tail of the edge.
            target: Head of the edge.
            weight: Non-negative edge weight.

        Returns:
            True if the edge is new, False if an existing edge was re-weighted.

        Raises:
            ValueError: If the weight is negative or NaN.

        """
        weight = float(weight)
        if math.isnan(weight) or weight < 0:
            msg = f"Edge weight must be a non-negative number, got {weight}"
            raise ValueError(msg)

        self.add_vertex(source)
        self.add_vertex(target)
        is_new = target not in self._successors[source]
        self._successors[source][target] = weight
        self._predecessors[target][source] = weight
        if is_new:
            self._number_of_edges += 1
        return is_new

    # -- queries -----------------------------------------------------------

    def contains_vertex(self, vertex: V) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._successors

    def contains_edge(self, source: V, target: V) -> bool:
        """Check if the edge ``source --> target`` is in the graph."""
        successors = self._successors.get(source)
        return successors is not None and target in successors

    def get_weight(self, source: V, target: V) -> float:
        """Get the weight of the edge ``source --> target``.

        Raises:
            EdgeNotFoundError: If the edge or one of its endpoints is absent.

        """
        try:
            return self._successors[source][target]
        except KeyError:
            raise EdgeNotFoundError(source, target) from None

    def get_in_degree(self, vertex: V) -> int:
        """Get the number of edges ending at ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex is absent.

        """
        return len(self._adjacency(self._predecessors, vertex))

    def get_out_degree(self, vertex: V) -> int:
        """Get the number of edges starting at ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex is absent.

        """
        return len(self._adjacency(self._successors, vertex))

    def get_vertex_set(self) -> VertexSetView[V]:
        """Read-only view of all vertices."""
        return VertexSetView(self._successors)

    def get_predecessor_vertex_set(self, vertex: V) -> VertexSetView[V]:
        """Read-only view of the vertices with an edge into ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex is absent.

        """
        return VertexSetView(self._adjacency(self._predecessors, vertex))

    def get_successor_vertex_set(self, vertex: V) -> VertexSetView[V]:
        """Read-only view of the vertices reached by an edge from ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex is absent.

        """
        return VertexSetView(self._adjacency(self._successors, vertex))

    @property
    def vertices(self) -> VertexSetView[V]:
        """All vertices, ascending."""
        return self.get_vertex_set()

    @property
    def number_of_vertices(self) -> int:
        """Number of vertices."""
        return len(self._successors)

    @property
    def number_of_edges(self) -> int:
        """Number of distinct edges ever inserted."""
        return self._number_of_edges

    @property
    def total_weight(self) -> float:
        """Sum of all edge weights."""
        return sum(weight for _, _, weight in self.edges())

    def edges(self) -> Iterator[tuple[V, V, float]]:
        """Iterate ``(source, target, weight)`` triples in ascending order."""
        for source in sorted(self._successors):
            successors = self._successors[source]
            for target in sorted(successors):
                yield source, target, successors[target]

    def invert(self) -> WeightedDirectedGraph[V]:
        """Return a new graph with every edge reversed and weights preserved."""
        inverted: WeightedDirectedGraph[V] = type(self)()
        for vertex in self._successors:
            inverted.add_vertex(vertex)
        for source, target, weight in self.edges():
            inverted.add_edge(target, source, weight)
        return inverted

    def _adjacency(self, index: dict[V, dict[V, float]], vertex: V) -> dict[V, float]:
        try:
            return index[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    # -- dunder ------------------------------------------------------------

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._successors)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._successors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedDirectedGraph):
            return NotImplemented
        return self._successors == other._successors

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{source} --> {target} weight = {weight}\n" for source, target, weight in self.edges())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.number_of_vertices}, "
            f"edges={self.number_of_edges})"
        )

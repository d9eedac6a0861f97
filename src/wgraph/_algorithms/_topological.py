"""Topological sorting (Kahn's algorithm)."""

import logging
from collections import deque

from wgraph._errors import CyclicGraphError
from wgraph._graph import SupportsLessThan, WeightedDirectedGraph

logger = logging.getLogger(__name__)


def _kahn[V: SupportsLessThan](graph: WeightedDirectedGraph[V]) -> tuple[list[V], dict[V, int]]:
    """Run Kahn's algorithm and return the order plus the remaining in-degrees.

    Vertices with a remaining in-degree above zero could not be sorted.
    """
    # Count predecessors not yet placed in the order
    indegree = {vertex: graph.get_in_degree(vertex) for vertex in graph.get_vertex_set()}

    # Start with vertices that have no predecessors, ascending
    queue = deque(vertex for vertex, degree in indegree.items() if degree == 0)
    order: list[V] = []

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for successor in graph.get_successor_vertex_set(vertex):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)

    return order, indegree


class TopologicalSort[V: SupportsLessThan]:
    """Topological order of a graph, computed once on construction.

    A cyclic graph has no topological order. This is an expected outcome,
    not an error: ``sorted_vertices`` is then ``None`` and
    ``unsorted_vertices`` lists every vertex that lies on or behind a cycle.

    Example:
        >>> g = WeightedDirectedGraph.from_edges([("a", "b"), ("b", "c")])
        >>> TopologicalSort(g).sorted_vertices
        ('a', 'b', 'c')
        >>> g.add_edge("c", "a")
        True
        >>> TopologicalSort(g).sorted_vertices is None
        True

    """

    __slots__ = ("_sorted_vertices", "_unsorted_vertices")

    def __init__(self, graph: WeightedDirectedGraph[V]) -> None:
        order, indegree = _kahn(graph)
        if len(order) == graph.number_of_vertices:
            self._sorted_vertices: tuple[V, ...] | None = tuple(order)
            self._unsorted_vertices: tuple[V, ...] = ()
        else:
            self._sorted_vertices = None
            self._unsorted_vertices = tuple(sorted(v for v, degree in indegree.items() if degree > 0))
            logger.warning(
                f"Sorting failed, the graph is cyclic ({len(self._unsorted_vertices)} vertices left unsorted)",
            )

    @property
    def sorted_vertices(self) -> tuple[V, ...] | None:
        """Vertices in topological order, or None if the graph is cyclic."""
        return self._sorted_vertices

    @property
    def is_cyclic(self) -> bool:
        """Check if sorting failed because the graph contains a cycle."""
        return self._sorted_vertices is None

    @property
    def unsorted_vertices(self) -> tuple[V, ...]:
        """Vertices on or downstream of a cycle, ascending. Empty on success."""
        return self._unsorted_vertices

    def require_order(self) -> tuple[V, ...]:
        """Return the topological order.

        Raises:
            CyclicGraphError: If the graph contains a cycle.

        """
        if self._sorted_vertices is None:
            raise CyclicGraphError(self._unsorted_vertices)
        return self._sorted_vertices

"""Depth-first traversal order of a directed graph."""

from collections.abc import Iterator

from wgraph._graph import SupportsLessThan, WeightedDirectedGraph


def iter_depth_first[V: SupportsLessThan](
    graph: WeightedDirectedGraph[V],
    root: V,
    visited: set[V],
) -> Iterator[tuple[V, bool]]:
    """Walk the depth-first tree rooted at ``root`` without recursion.

    Yields ``(vertex, False)`` when a vertex is entered and ``(vertex, True)``
    once all of its successors have been exhausted, which is exactly the
    pre-order/post-order sequence of the recursive formulation. Successors
    are explored in ascending order. Vertices already in ``visited`` are
    skipped; every entered vertex is added to it.

    Args:
        graph: The graph to traverse.
        root: Vertex the tree starts at. Must not be in ``visited``.
        visited: Shared set of visited vertices, updated in place.

    Yields:
        ``(vertex, finished)`` traversal events.

    """
    visited.add(root)
    yield root, False
    stack = [(root, iter(graph.get_successor_vertex_set(root)))]
    while stack:
        vertex, successors = stack[-1]
        for successor in successors:
            if successor not in visited:
                visited.add(successor)
                yield successor, False
                stack.append((successor, iter(graph.get_successor_vertex_set(successor))))
                break
        else:
            stack.pop()
            yield vertex, True


class DepthFirstOrder[V: SupportsLessThan]:
    """Pre-order, post-order and forest size of a depth-first search.

    The search starts a new tree at every still unvisited vertex, taken in
    ascending order, and runs eagerly on construction.

    Example:
        >>> g = WeightedDirectedGraph.from_edges([(1, 2), (2, 5), (5, 1), (2, 6)])
        >>> dfo = DepthFirstOrder(g)
        >>> dfo.pre_order, dfo.post_order
        ((1, 2, 5, 6), (5, 6, 2, 1))

    """

    __slots__ = ("_number_of_df_trees", "_post_order", "_pre_order")

    def __init__(self, graph: WeightedDirectedGraph[V]) -> None:
        pre_order: list[V] = []
        post_order: list[V] = []
        number_of_df_trees = 0
        visited: set[V] = set()

        for vertex in graph.get_vertex_set():
            if vertex in visited:
                continue
            number_of_df_trees += 1
            for visited_vertex, finished in iter_depth_first(graph, vertex, visited):
                (post_order if finished else pre_order).append(visited_vertex)

        self._pre_order = tuple(pre_order)
        self._post_order = tuple(post_order)
        self._number_of_df_trees = number_of_df_trees

    @property
    def pre_order(self) -> tuple[V, ...]:
        """Vertices in the order they were entered."""
        return self._pre_order

    @property
    def post_order(self) -> tuple[V, ...]:
        """Vertices in the order they were finished."""
        return self._post_order

    @property
    def number_of_df_trees(self) -> int:
        """Number of trees in the depth-first forest."""
        return self._number_of_df_trees

"""Strongly connected components (Kosaraju-Sharir)."""

from collections.abc import Mapping
from types import MappingProxyType

from wgraph._errors import VertexNotFoundError
from wgraph._graph import SupportsLessThan, WeightedDirectedGraph

from ._depth_first import DepthFirstOrder, iter_depth_first


class StrongComponents[V: SupportsLessThan]:
    """Decomposition of a graph into its strongly connected components.

    Two vertices share a component iff each is reachable from the other.
    Components are numbered 0, 1, 2, ... in the order they are discovered
    while scanning the reversed depth-first post-order of the graph and
    searching the inverted graph. The numbering is deterministic but has no
    meaning beyond identifying a component.
    """

    __slots__ = ("_component_of", "_components")

    def __init__(self, graph: WeightedDirectedGraph[V]) -> None:
        reversed_post_order = reversed(DepthFirstOrder(graph).post_order)
        inverted = graph.invert()

        components: dict[int, tuple[V, ...]] = {}
        component_of: dict[V, int] = {}
        visited: set[V] = set()
        for vertex in reversed_post_order:
            if vertex in visited:
                continue
            component_id = len(components)
            members = [reached for reached, finished in iter_depth_first(inverted, vertex, visited) if not finished]
            components[component_id] = tuple(sorted(members))
            component_of.update(dict.fromkeys(members, component_id))

        self._components = components
        self._component_of = component_of

    @property
    def number_of_components(self) -> int:
        """Number of strong components."""
        return len(self._components)

    @property
    def components(self) -> Mapping[int, tuple[V, ...]]:
        """Read-only mapping from component id to its members, ascending."""
        return MappingProxyType(self._components)

    def component_of(self, vertex: V) -> int:
        """Get the id of the component containing ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex is not in the graph.

        """
        try:
            return self._component_of[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def __str__(self) -> str:
        return "".join(
            f"Component {component_id}: {''.join(f'{v}, ' for v in members)}\n"
            for component_id, members in self._components.items()
        )

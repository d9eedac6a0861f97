"""Empirical admissibility check for scaled heuristics."""

import logging
import math

from wgraph._graph import SupportsLessThan, WeightedDirectedGraph

from ._engine import ShortestPath
from ._strategy import HEURISTIC_SCALE, Heuristic

logger = logging.getLogger(__name__)


def find_inadmissible_vertices[V: SupportsLessThan](
    graph: WeightedDirectedGraph[V],
    heuristic: Heuristic[V],
    goal: V,
    scale: float = HEURISTIC_SCALE,
) -> dict[V, tuple[float, float]]:
    """Find vertices where the scaled heuristic overestimates the cost to ``goal``.

    The true remaining cost of every vertex is computed by a Dijkstra search
    from ``goal`` over the inverted graph. Vertices that cannot reach the
    goal are ignored.

    Args:
        graph: Graph the heuristic is used on.
        heuristic: Cost estimator to check.
        goal: Target vertex of the searches.
        scale: Factor applied to every estimate.

    Returns:
        Mapping from each offending vertex to ``(scaled estimate, true cost)``.
        An empty mapping means A* with this heuristic and scale finds optimal
        paths to ``goal``.

    Raises:
        VertexNotFoundError: If ``goal`` is not in the graph, or whatever
            ``heuristic`` raises for a vertex it cannot estimate.

    """
    reverse_search = ShortestPath(graph.invert())
    reverse_search.search_shortest_path(goal, goal)

    inadmissible: dict[V, tuple[float, float]] = {}
    for vertex, true_cost in reverse_search.distances.items():
        if math.isinf(true_cost):
            continue
        estimate = heuristic.estimated_cost(vertex, goal) * scale
        if estimate > true_cost:
            inadmissible[vertex] = (estimate, true_cost)

    if inadmissible:
        logger.debug(f"Heuristic overestimates at {len(inadmissible)} vertices for goal {goal!r}")
    return inadmissible

"""Shortest paths with Dijkstra's algorithm or A*."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Callable, Mapping
from types import MappingProxyType

from wgraph._errors import NoPathComputedError, VertexNotFoundError
from wgraph._graph import SupportsLessThan, WeightedDirectedGraph

from ._strategy import HEURISTIC_SCALE, Heuristic, NoHeuristic, SearchStrategy, WithHeuristic

logger = logging.getLogger(__name__)

type VisitObserver[V] = Callable[[V, float], None]


class ShortestPath[V: SupportsLessThan]:
    """Shortest path search in a weighted directed graph.

    Without a heuristic the engine runs Dijkstra's algorithm. It does not
    stop at the goal, so after a search the distance to every reachable
    vertex is exact. With a heuristic it runs A*, ordering candidates by
    ``dist[v] + heuristic.estimated_cost(v, goal) * scale`` and stopping as
    soon as the goal is taken from the candidates. A* is only optimal if the
    scaled heuristic is admissible for the graph; use
    ``find_inadmissible_vertices`` to check.

    Each call to ``search_shortest_path`` replaces the previous result.
    Edge weights must be non-negative.

    Example:
        >>> g = WeightedDirectedGraph.from_edges([(1, 2, 1.0), (2, 3, 1.0), (1, 3, 5.0)])
        >>> sp = ShortestPath(g)
        >>> sp.search_shortest_path(1, 3)
        >>> sp.get_distance(), sp.get_shortest_path()
        (2.0, [1, 2, 3])

    """

    def __init__(
        self,
        graph: WeightedDirectedGraph[V],
        heuristic: Heuristic[V] | None = None,
        *,
        scale: float = HEURISTIC_SCALE,
        observer: VisitObserver[V] | None = None,
    ) -> None:
        """Create a search engine for ``graph``.

        Args:
            graph: Graph to search. It is only read.
            heuristic: Cost estimator for A*. None selects Dijkstra.
            scale: Factor applied to every heuristic estimate.
            observer: Called with ``(vertex, distance)`` for every visited vertex.

        """
        strategy: SearchStrategy = NoHeuristic() if heuristic is None else WithHeuristic(heuristic, scale)
        self._init(graph, strategy, observer)

    @classmethod
    def with_strategy(
        cls,
        graph: WeightedDirectedGraph[V],
        strategy: SearchStrategy,
        *,
        observer: VisitObserver[V] | None = None,
    ) -> ShortestPath[V]:
        """Create a search engine from an explicit search strategy."""
        if not isinstance(strategy, (NoHeuristic, WithHeuristic)):
            msg = f"Unknown search strategy: {strategy!r}"
            raise TypeError(msg)
        engine = cls.__new__(cls)
        engine._init(graph, strategy, observer)
        return engine

    def _init(
        self,
        graph: WeightedDirectedGraph[V],
        strategy: SearchStrategy,
        observer: VisitObserver[V] | None,
    ) -> None:
        self._graph = graph
        self._strategy = strategy
        self._observer = observer
        self._dist: dict[V, float] = {}
        self._pred: dict[V, V] = {}
        self._source: V | None = None
        self._goal: V | None = None
        self._searched = False

    @property
    def strategy(self) -> SearchStrategy:
        """The strategy selecting Dijkstra or A*."""
        return self._strategy

    @property
    def is_dijkstra(self) -> bool:
        """Check if the engine runs without a heuristic."""
        return isinstance(self._strategy, NoHeuristic)

    @property
    def distances(self) -> Mapping[V, float]:
        """Read-only distances of the last search (``inf`` for unreached vertices)."""
        return MappingProxyType(self._dist)

    def set_observer(self, observer: VisitObserver[V] | None) -> None:
        """Set the callback notified of every visited vertex, or None to disable it."""
        self._observer = observer

    def search_shortest_path(self, source: V, goal: V) -> None:
        """Search a shortest path from ``source`` to ``goal``.

        Args:
            source: Start vertex.
            goal: Target vertex.

        Raises:
            VertexNotFoundError: If ``source`` or ``goal`` is not in the graph.

        """
        for vertex in (source, goal):
            if not self._graph.contains_vertex(vertex):
                raise VertexNotFoundError(vertex)

        strategy = self._strategy
        graph = self._graph
        dist = dict.fromkeys(graph.get_vertex_set(), math.inf)
        pred: dict[V, V] = {}
        dist[source] = 0.0

        # Candidates are (priority, first insertion count, vertex). A vertex
        # keeps its first count when pushed again, so equal priorities leave
        # in the order the vertices first joined the candidate set.
        counter = itertools.count()
        first_seen = {source: next(counter)}
        candidates = [(strategy.priority(0.0, source, goal), first_seen[source], source)]
        queued_priority = {source: candidates[0][0]}
        expanded: set[V] = set()

        logger.debug(
            f"Searching {source!r} -> {goal!r} with {'Dijkstra' if self.is_dijkstra else 'A*'}",
        )
        while candidates:
            priority, _, current = heapq.heappop(candidates)
            if current in expanded or priority != queued_priority.get(current):
                continue
            expanded.add(current)
            del queued_priority[current]

            logger.debug(f"Visiting {current!r} with d = {dist[current]:f}")
            if self._observer is not None:
                self._observer(current, dist[current])

            if strategy.stops_at_goal and current == goal:
                break

            for successor in graph.get_successor_vertex_set(current):
                candidate_distance = dist[current] + graph.get_weight(current, successor)
                if candidate_distance < dist[successor]:
                    dist[successor] = candidate_distance
                    pred[successor] = current
                    if successor not in expanded:
                        successor_priority = strategy.priority(candidate_distance, successor, goal)
                        queued_priority[successor] = successor_priority
                        if successor not in first_seen:
                            first_seen[successor] = next(counter)
                        heapq.heappush(candidates, (successor_priority, first_seen[successor], successor))

        self._dist = dist
        self._pred = pred
        self._source = source
        self._goal = goal
        self._searched = True

    def _require_reachable_goal(self) -> V:
        if not self._searched:
            msg = "No shortest path has been computed yet"
            raise NoPathComputedError(msg)
        goal = self._goal
        if math.isinf(self._dist[goal]):
            msg = f"No path from {self._source!r} to {goal!r}"
            raise NoPathComputedError(msg)
        return goal

    def get_shortest_path(self) -> list[V]:
        """Get the vertices of the path found by the last search, from source to goal.

        Raises:
            NoPathComputedError: If no search has been run or the goal is unreachable.

        """
        vertex = self._require_reachable_goal()
        path = [vertex]
        while vertex != self._source:
            vertex = self._pred[vertex]
            path.append(vertex)
        path.reverse()
        return path

    def get_distance(self) -> float:
        """Get the length of the path found by the last search.

        Raises:
            NoPathComputedError: If no search has been run or the goal is unreachable.

        """
        return self._dist[self._require_reachable_goal()]

"""Shortest path search (Dijkstra and A*).

This module contains:
- ShortestPath[V]: search engine, Dijkstra or A* depending on its strategy
- Heuristic[V]: protocol for cost estimators used by A*
- NoHeuristic, WithHeuristic: the two search strategies
- find_inadmissible_vertices: checks a scaled heuristic against true costs
"""

from ._admissibility import find_inadmissible_vertices
from ._engine import ShortestPath, VisitObserver
from ._strategy import HEURISTIC_SCALE, Heuristic, NoHeuristic, SearchStrategy, WithHeuristic

__all__ = [
    "HEURISTIC_SCALE",
    "Heuristic",
    "NoHeuristic",
    "SearchStrategy",
    "ShortestPath",
    "VisitObserver",
    "WithHeuristic",
    "find_inadmissible_vertices",
]

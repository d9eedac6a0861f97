"""Weighted directed graphs with traversal, ordering and shortest path algorithms."""

__all__ = [
    "DEFAULT_TRANSPORT_WEIGHTS",
    "HEURISTIC_SCALE",
    "ConfigError",
    "CyclicGraphError",
    "DepthFirstOrder",
    "EdgeNotFoundError",
    "EuclideanHeuristic",
    "GraphFileError",
    "Heuristic",
    "NoHeuristic",
    "NoPathComputedError",
    "SearchStrategy",
    "ShortestPath",
    "StrongComponents",
    "TopologicalSort",
    "VertexNotFoundError",
    "VertexSetView",
    "WeightedDirectedGraph",
    "WgraphError",
    "WithHeuristic",
    "add_transit_connection",
    "find_inadmissible_vertices",
    "read_coordinates",
    "read_transit_graph",
]

from ._algorithms import DepthFirstOrder, StrongComponents, TopologicalSort
from ._errors import (
    ConfigError,
    CyclicGraphError,
    EdgeNotFoundError,
    GraphFileError,
    NoPathComputedError,
    VertexNotFoundError,
    WgraphError,
)
from ._graph import VertexSetView, WeightedDirectedGraph
from ._io import DEFAULT_TRANSPORT_WEIGHTS, EuclideanHeuristic, add_transit_connection, read_coordinates, read_transit_graph
from ._shortest_path import (
    HEURISTIC_SCALE,
    Heuristic,
    NoHeuristic,
    SearchStrategy,
    ShortestPath,
    WithHeuristic,
    find_inadmissible_vertices,
)

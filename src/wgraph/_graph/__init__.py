"""Graph module providing the weighted directed graph abstraction.

This module contains:
- WeightedDirectedGraph[V]: A mutable, edge-weighted directed graph
- VertexSetView[V]: A read-only, ordered view of a vertex set
"""

from ._weighted_graph import SupportsLessThan, VertexSetView, WeightedDirectedGraph

__all__ = ["SupportsLessThan", "VertexSetView", "WeightedDirectedGraph"]

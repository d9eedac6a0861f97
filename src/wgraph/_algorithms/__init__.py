"""Traversal and ordering algorithms over WeightedDirectedGraph.

This module contains:
- DepthFirstOrder: pre-order, post-order and forest size of a depth-first search
- StrongComponents: Kosaraju-Sharir strong component decomposition
- TopologicalSort: Kahn's algorithm
"""

from ._depth_first import DepthFirstOrder, iter_depth_first
from ._strong_components import StrongComponents
from ._topological import TopologicalSort

__all__ = ["DepthFirstOrder", "StrongComponents", "TopologicalSort", "iter_depth_first"]

"""Search strategies: uniform cost (Dijkstra) or heuristic guided (A*)."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

HEURISTIC_SCALE = 1.0 / 30.0
"""Default damping factor applied to heuristic estimates.

This is not a proof of admissibility. A* only returns optimal paths if the
scaled estimate never exceeds the true remaining cost for the graph at hand.
"""


@runtime_checkable
class Heuristic[V](Protocol):
    """Estimates the cost of travelling between two vertices."""

    def estimated_cost(self, u: V, v: V, /) -> float:
        """Estimate the cost (distance) from ``u`` to ``v``."""
        ...


@dataclass(frozen=True, slots=True)
class NoHeuristic:
    """Uniform cost search: candidates are ordered by distance alone.

    The search drains every candidate, so distances to all reachable
    vertices are exact once it completes.
    """

    stops_at_goal = False

    def priority(self, distance: float, vertex: object, goal: object) -> float:  # noqa: ARG002
        return distance


@dataclass(frozen=True, slots=True)
class WithHeuristic[V]:
    """Heuristic guided search ordered by ``distance + estimate * scale``.

    The search stops as soon as the goal is taken from the candidates.

    Attributes:
        heuristic: Cost estimator.
        scale: Factor applied to every estimate.

    """

    heuristic: Heuristic[V]
    scale: float = HEURISTIC_SCALE

    stops_at_goal = True

    def __post_init__(self) -> None:
        if not self.scale >= 0:
            msg = f"Heuristic scale must be a non-negative number, got {self.scale}"
            raise ValueError(msg)

    def priority(self, distance: float, vertex: V, goal: V) -> float:
        return distance + self.heuristic.estimated_cost(vertex, goal) * self.scale


type SearchStrategy = NoHeuristic | WithHeuristic

"""Readers for transit network edge files and vertex coordinate files.

Edge files hold one connection per line, ``<vertex> <vertex> <mode>``, where
the mode is one of ``Taxi``, ``Bus`` or ``UBahn``. Coordinate files hold one
vertex per line, ``<vertex> <x> <y>``. Reading stops at the first blank line.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from ._errors import GraphFileError, VertexNotFoundError
from ._graph import WeightedDirectedGraph

logger = logging.getLogger(__name__)

DEFAULT_TRANSPORT_WEIGHTS: Mapping[str, float] = MappingProxyType({"Taxi": 2.0, "Bus": 3.0, "UBahn": 5.0})


def _iter_fields(path: Path, field_count: int) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line number, fields)`` for each line up to the first blank one."""
    with path.open(encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                return
            fields = line.split()
            if len(fields) != field_count:
                msg = f"{path}:{line_number}: expected {field_count} fields, got {len(fields)}"
                raise GraphFileError(msg)
            yield line_number, fields


def _parse_int(path: Path, line_number: int, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        msg = f"{path}:{line_number}: {value!r} is not an integer"
        raise GraphFileError(msg) from None


def add_transit_connection(
    graph: WeightedDirectedGraph[int],
    u: int,
    v: int,
    mode: str,
    weights: Mapping[str, float] = DEFAULT_TRANSPORT_WEIGHTS,
) -> bool:
    """Add a two-way connection between ``u`` and ``v`` if ``mode`` is the cheapest so far.

    The connection is inserted if the vertices are not connected yet or if
    ``mode`` is strictly cheaper than the current weight. With the default
    weights, Taxi replaces anything, Bus replaces only UBahn, and UBahn is
    only used for unconnected vertices. Both edge directions are inserted.

    Returns:
        True if the connection changed the graph.

    Raises:
        KeyError: If ``mode`` has no weight.

    """
    weight = weights[mode]
    update = not graph.contains_edge(u, v) or weight < graph.get_weight(u, v)

    if update:
        graph.add_edge(u, v, weight)
        graph.add_edge(v, u, weight)
    return update


def read_transit_graph(
    path: Path,
    weights: Mapping[str, float] = DEFAULT_TRANSPORT_WEIGHTS,
) -> WeightedDirectedGraph[int]:
    """Read a transit network from an edge file.

    When several modes connect the same pair of vertices the cheapest one
    wins, see ``add_transit_connection``.

    Args:
        path: Edge file to read.
        weights: Weight of each transport mode.

    Returns:
        A graph with an edge in each direction for every connection.

    Raises:
        GraphFileError: If a line is malformed or names an unknown mode.

    """
    graph = WeightedDirectedGraph[int]()
    for line_number, (u, v, mode) in _iter_fields(path, 3):
        if mode not in weights:
            msg = f"{path}:{line_number}: unknown transport mode {mode!r}, expected one of {', '.join(weights)}"
            raise GraphFileError(msg)
        add_transit_connection(
            graph,
            _parse_int(path, line_number, u),
            _parse_int(path, line_number, v),
            mode,
            weights,
        )

    logger.info(f"Number of vertices:       {graph.number_of_vertices}")
    logger.info(f"Number of directed edges: {graph.number_of_edges}")
    logger.info(f"Sum of all weights:       {graph.total_weight}")
    return graph


def read_coordinates(path: Path) -> dict[int, tuple[int, int]]:
    """Read vertex coordinates from a coordinate file.

    Raises:
        GraphFileError: If a line is malformed.

    """
    coordinates: dict[int, tuple[int, int]] = {}
    for line_number, fields in _iter_fields(path, 3):
        vertex, x, y = (_parse_int(path, line_number, value) for value in fields)
        coordinates[vertex] = (x, y)
    logger.debug(f"Read coordinates of {len(coordinates)} vertices from {path}")
    return coordinates


class EuclideanHeuristic:
    """Estimates the cost between two vertices by their Euclidean distance."""

    __slots__ = ("_coordinates",)

    def __init__(self, coordinates: Mapping[int, tuple[float, float]]) -> None:
        self._coordinates = dict(coordinates)

    @classmethod
    def from_file(cls, path: Path) -> EuclideanHeuristic:
        return cls(read_coordinates(path))

    def estimated_cost(self, u: int, v: int, /) -> float:
        try:
            ux, uy = self._coordinates[u]
            vx, vy = self._coordinates[v]
        except KeyError as e:
            raise VertexNotFoundError(e.args[0]) from None
        return math.sqrt((ux - vx) ** 2 + (uy - vy) ** 2)

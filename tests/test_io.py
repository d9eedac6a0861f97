"""Tests for transit edge and coordinate file reading."""

import logging
import math
from pathlib import Path

import pytest

from wgraph import (
    DEFAULT_TRANSPORT_WEIGHTS,
    EuclideanHeuristic,
    GraphFileError,
    ShortestPath,
    VertexNotFoundError,
    WeightedDirectedGraph,
    add_transit_connection,
    find_inadmissible_vertices,
    read_coordinates,
    read_transit_graph,
)

EDGES = """\
1 8 Taxi
1 9 Taxi
1 46 Bus
1 46 UBahn
1 58 Bus
8 18 Taxi
9 20 Taxi
46 58 Taxi
58 20 UBahn
58 20 Bus
"""

COORDINATES = """\
1 0 0
8 30 0
9 0 30
18 60 0
20 30 60
46 60 30
58 60 60
"""


@pytest.fixture
def edge_file(tmp_path: Path) -> Path:
    path = tmp_path / "edges.txt"
    path.write_text(EDGES)
    return path


@pytest.fixture
def coordinate_file(tmp_path: Path) -> Path:
    path = tmp_path / "coordinates.txt"
    path.write_text(COORDINATES)
    return path


class TestTransitConnection:
    """Tests for the cheapest-mode-wins rules."""

    def test_taxi_always_wins(self) -> None:
        graph = WeightedDirectedGraph[int]()
        add_transit_connection(graph, 1, 2, "UBahn")
        assert add_transit_connection(graph, 1, 2, "Taxi") is True
        assert graph.get_weight(1, 2) == graph.get_weight(2, 1) == 2.0

    def test_bus_only_replaces_more_expensive(self) -> None:
        graph = WeightedDirectedGraph[int]()
        add_transit_connection(graph, 1, 2, "Taxi")
        assert add_transit_connection(graph, 1, 2, "Bus") is False
        assert graph.get_weight(1, 2) == 2.0

        add_transit_connection(graph, 3, 4, "UBahn")
        assert add_transit_connection(graph, 3, 4, "Bus") is True
        assert graph.get_weight(4, 3) == 3.0

    def test_ubahn_only_if_unconnected(self) -> None:
        graph = WeightedDirectedGraph[int]()
        add_transit_connection(graph, 1, 2, "Bus")
        assert add_transit_connection(graph, 1, 2, "UBahn") is False
        assert graph.get_weight(1, 2) == 3.0
        assert add_transit_connection(graph, 5, 6, "UBahn") is True
        assert graph.get_weight(6, 5) == 5.0

    def test_custom_weights(self) -> None:
        graph = WeightedDirectedGraph[int]()
        add_transit_connection(graph, 1, 2, "Bus", {"Taxi": 1.0, "Bus": 7.0, "UBahn": 9.0})
        assert graph.get_weight(1, 2) == 7.0

    def test_expensive_taxi_keeps_cheaper_bus(self) -> None:
        weights = {"Taxi": 10.0, "Bus": 3.0, "UBahn": 5.0}
        graph = WeightedDirectedGraph[int]()
        add_transit_connection(graph, 1, 2, "Bus", weights)
        assert add_transit_connection(graph, 1, 2, "Taxi", weights) is False
        assert graph.get_weight(1, 2) == graph.get_weight(2, 1) == 3.0

    def test_equal_weight_does_not_replace(self) -> None:
        graph = WeightedDirectedGraph[int]()
        add_transit_connection(graph, 1, 2, "Taxi")
        assert add_transit_connection(graph, 1, 2, "Taxi") is False
        assert graph.number_of_edges == 2


class TestReadTransitGraph:
    """Tests for read_transit_graph."""

    def test_reads_symmetric_graph(self, edge_file: Path) -> None:
        graph = read_transit_graph(edge_file)
        assert graph.number_of_vertices == 7
        assert graph.number_of_edges == 16
        for u, v, weight in graph.edges():
            assert graph.get_weight(v, u) == weight

    def test_cheapest_mode_wins(self, edge_file: Path) -> None:
        graph = read_transit_graph(edge_file)
        assert graph.get_weight(1, 46) == 3.0
        assert graph.get_weight(58, 20) == 3.0
        assert graph.get_weight(1, 8) == 2.0

    def test_total_weight(self, edge_file: Path) -> None:
        graph = read_transit_graph(edge_file)
        # 5 taxi connections (2.0) and 3 bus connections (3.0), both directions
        assert graph.total_weight == 2 * (5 * 2.0 + 3 * 3.0)

    def test_logs_summary(self, edge_file: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="wgraph"):
            read_transit_graph(edge_file)
        assert "Number of vertices:       7" in caplog.text
        assert "Number of directed edges: 16" in caplog.text

    def test_extra_mode_wins_when_cheapest(self, tmp_path: Path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("1 2 UBahn\n1 2 Tram\n3 4 Tram\n3 4 Bus\n")
        graph = read_transit_graph(path, {**DEFAULT_TRANSPORT_WEIGHTS, "Tram": 1.0})
        assert graph.get_weight(1, 2) == graph.get_weight(2, 1) == 1.0
        assert graph.get_weight(3, 4) == 1.0

    def test_stops_at_blank_line(self, tmp_path: Path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("1 2 Taxi\n\n3 4 Taxi\n")
        assert read_transit_graph(path).number_of_vertices == 2

    def test_unknown_mode(self, tmp_path: Path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("1 2 Taxi\n2 3 Ferry\n")
        with pytest.raises(GraphFileError, match=r"edges.txt:2: unknown transport mode 'Ferry'"):
            read_transit_graph(path)

    @pytest.mark.parametrize("line", ["1 2\n", "1 2 Taxi extra\n", "1 x Taxi\n"])
    def test_malformed_line(self, tmp_path: Path, line: str) -> None:
        path = tmp_path / "edges.txt"
        path.write_text(line)
        with pytest.raises(GraphFileError, match=r"edges.txt:1"):
            read_transit_graph(path)


class TestCoordinates:
    """Tests for coordinate files and the Euclidean heuristic."""

    def test_read_coordinates(self, coordinate_file: Path) -> None:
        coordinates = read_coordinates(coordinate_file)
        assert len(coordinates) == 7
        assert coordinates[58] == (60, 60)

    def test_malformed_coordinates(self, tmp_path: Path) -> None:
        path = tmp_path / "coordinates.txt"
        path.write_text("1 0 0\n2 3.5 0\n")
        with pytest.raises(GraphFileError, match=r"coordinates.txt:2: '3.5' is not an integer"):
            read_coordinates(path)

    def test_euclidean_distance(self) -> None:
        heuristic = EuclideanHeuristic({1: (0, 0), 2: (3, 4)})
        assert heuristic.estimated_cost(1, 2) == 5.0
        assert heuristic.estimated_cost(2, 1) == 5.0
        assert heuristic.estimated_cost(1, 1) == 0.0

    def test_missing_coordinates(self) -> None:
        heuristic = EuclideanHeuristic({1: (0, 0)})
        with pytest.raises(VertexNotFoundError) as exc_info:
            heuristic.estimated_cost(1, 7)
        assert exc_info.value.vertex == 7

    def test_from_file(self, coordinate_file: Path) -> None:
        heuristic = EuclideanHeuristic.from_file(coordinate_file)
        assert heuristic.estimated_cost(1, 58) == pytest.approx(math.hypot(60, 60))


class TestTransitShortestPath:
    """Shortest paths on a transit network read from files."""

    @pytest.mark.parametrize(("source", "goal", "distance"), [(1, 20, 4.0), (18, 20, 8.0), (9, 46, 5.0)])
    def test_astar_matches_dijkstra(
        self,
        edge_file: Path,
        coordinate_file: Path,
        source: int,
        goal: int,
        distance: float,
    ) -> None:
        graph = read_transit_graph(edge_file)
        heuristic = EuclideanHeuristic.from_file(coordinate_file)
        assert find_inadmissible_vertices(graph, heuristic, goal) == {}

        dijkstra = ShortestPath(graph)
        dijkstra.search_shortest_path(source, goal)
        astar = ShortestPath(graph, heuristic)
        astar.search_shortest_path(source, goal)
        assert dijkstra.get_distance() == astar.get_distance() == distance

    def test_large_scale_is_flagged(self, edge_file: Path, coordinate_file: Path) -> None:
        graph = read_transit_graph(edge_file)
        heuristic = EuclideanHeuristic.from_file(coordinate_file)
        assert find_inadmissible_vertices(graph, heuristic, 20, scale=1.0) != {}

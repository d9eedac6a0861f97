"""Tests for StrongComponents."""

import pytest

from wgraph import StrongComponents, VertexNotFoundError, WeightedDirectedGraph


def _reachable(graph: WeightedDirectedGraph[int], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        for w in graph.get_successor_vertex_set(stack.pop()):
            if w not in seen:
                seen.add(w)
                stack.append(w)
    return seen


@pytest.fixture
def example_graph() -> WeightedDirectedGraph[int]:
    return WeightedDirectedGraph.from_edges(
        [(1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (1, 4), (5, 4), (5, 7), (6, 5), (7, 6), (7, 8), (8, 2)],
    )


class TestStrongComponents:
    """Tests for the Kosaraju-Sharir decomposition."""

    def test_example_components(self, example_graph: WeightedDirectedGraph[int]) -> None:
        sc = StrongComponents(example_graph)
        assert sc.number_of_components == 4
        assert dict(sc.components) == {
            0: (5, 6, 7),
            1: (8,),
            2: (1, 2, 3),
            3: (4,),
        }

    def test_rendering(self, example_graph: WeightedDirectedGraph[int]) -> None:
        assert str(StrongComponents(example_graph)) == (
            "Component 0: 5, 6, 7, \nComponent 1: 8, \nComponent 2: 1, 2, 3, \nComponent 3: 4, \n"
        )

    def test_component_of(self, example_graph: WeightedDirectedGraph[int]) -> None:
        sc = StrongComponents(example_graph)
        assert sc.component_of(6) == sc.component_of(5) == 0
        assert sc.component_of(4) == 3
        with pytest.raises(VertexNotFoundError):
            sc.component_of(99)

    def test_components_are_read_only(self, example_graph: WeightedDirectedGraph[int]) -> None:
        sc = StrongComponents(example_graph)
        with pytest.raises(TypeError):
            sc.components[4] = (9,)  # type: ignore[index]

    def test_does_not_mutate_graph(self, example_graph: WeightedDirectedGraph[int]) -> None:
        before = str(example_graph)
        StrongComponents(example_graph)
        assert str(example_graph) == before

    def test_empty_graph(self) -> None:
        sc = StrongComponents(WeightedDirectedGraph[int]())
        assert sc.number_of_components == 0
        assert str(sc) == ""

    def test_acyclic_graph_has_singleton_components(self) -> None:
        graph = WeightedDirectedGraph.from_edges([(1, 2), (2, 3), (1, 3)])
        sc = StrongComponents(graph)
        assert sc.number_of_components == 3
        assert sorted(sc.components.values()) == [(1,), (2,), (3,)]

    def test_single_cycle(self) -> None:
        graph = WeightedDirectedGraph.from_edges([(i, (i + 1) % 50) for i in range(50)])
        sc = StrongComponents(graph)
        assert sc.number_of_components == 1
        assert sc.components[0] == tuple(range(50))

    @pytest.mark.parametrize("seed", [3, 7, 11])
    def test_mutual_reachability(self, seed: int) -> None:
        n = 30
        edges = [(i, (i * seed + 5) % n) for i in range(n)] + [(i, (i + seed) % n) for i in range(0, n, 4)]
        graph = WeightedDirectedGraph.from_edges(edges)
        sc = StrongComponents(graph)
        reach = {v: _reachable(graph, v) for v in graph.get_vertex_set()}
        for u in graph.get_vertex_set():
            for v in graph.get_vertex_set():
                mutual = v in reach[u] and u in reach[v]
                assert (sc.component_of(u) == sc.component_of(v)) == mutual

    def test_member_sets_partition_vertices(self, example_graph: WeightedDirectedGraph[int]) -> None:
        sc = StrongComponents(example_graph)
        members = [v for component in sc.components.values() for v in component]
        assert sorted(members) == list(example_graph.get_vertex_set())

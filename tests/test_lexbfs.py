"""Tests for lexicographic breadth-first search."""
import pytest

from graphprops import UndirectedGraph, is_lexbfs_ordering, lexicographic_bfs

from graphs import complete, cycle


class TestLexBFS:
    """Tests for the LexBFS ordering."""

    def test_worked_example(self, chordal_graph):
        assert chordal_graph.lexicographic_bfs() == ["a", "b", "c", "d", "e"]

    def test_empty_graph(self):
        assert lexicographic_bfs(UndirectedGraph()) == []

    def test_single_vertex(self):
        graph = UndirectedGraph()
        graph.add_vertex("x")
        assert lexicographic_bfs(graph) == ["x"]

    def test_ties_follow_insertion_order(self):
        graph = UndirectedGraph({"x": [], "y": [], "z": []})
        assert lexicographic_bfs(graph) == ["x", "y", "z"]

    def test_neighbours_come_first(self):
        graph = UndirectedGraph({3: [1], 1: [2]})
        assert lexicographic_bfs(graph) == [3, 1, 2]

    def test_refinement_prefers_earlier_labels(self):
        # After a, both b and c are candidates; b wins on insertion order,
        # then d (neighbour of a and b) must precede e (neighbour of c only).
        graph = UndirectedGraph({"a": ["b", "c", "d"], "b": ["d"], "c": ["e"]})
        ordering = lexicographic_bfs(graph)
        assert ordering[:2] == ["a", "b"]
        assert ordering.index("d") < ordering.index("e")

    def test_disconnected_components(self):
        graph = UndirectedGraph({"a": ["b"], "c": ["d"]})
        assert lexicographic_bfs(graph) == ["a", "b", "c", "d"]

    def test_split_keeps_insertion_order(self):
        graph = UndirectedGraph()
        graph.add_vertices("s", 30, 20, 10)
        graph.add_edge("s", 10)
        graph.add_edge("s", 30)
        assert lexicographic_bfs(graph) == ["s", 30, 10, 20]

    def test_mixed_vertex_types(self):
        graph = UndirectedGraph({1: ["a"], "a": [2.5]})
        assert lexicographic_bfs(graph) == [1, "a", 2.5]

    @pytest.mark.parametrize("graph", [
        cycle(4), cycle(7), complete(5),
        UndirectedGraph({"a": ["b", "g"], "b": ["c"], "c": ["d"], "d": ["e", "f"], "e": ["f"], "f": ["g"]}),
        UndirectedGraph({0: [1, 2, 3], 1: [4], 2: [4, 5], 3: [5], 6: []}),
    ])
    def test_permutation_with_lexbfs_property(self, graph):
        ordering = lexicographic_bfs(graph)
        assert sorted(ordering, key=str) == sorted(graph.vertices(), key=str)
        assert len(set(ordering)) == len(ordering)
        assert is_lexbfs_ordering(graph, ordering)

    def test_does_not_mutate(self, chordal_graph):
        before = chordal_graph.edges()
        chordal_graph.lexicographic_bfs()
        assert chordal_graph.edges() == before


class TestLexBFSCheck:
    """Tests for the LexBFS ordering verifier."""

    def test_rejects_non_lexbfs_order(self):
        path = UndirectedGraph({"a": ["b"], "b": ["c"]})
        assert not is_lexbfs_ordering(path, ["a", "c", "b"])

    def test_rejects_non_permutation(self, triangle):
        assert not is_lexbfs_ordering(triangle, ["a", "b"])
        assert not is_lexbfs_ordering(triangle, ["a", "b", "b"])

    def test_accepts_other_valid_orders(self, triangle):
        assert is_lexbfs_ordering(triangle, ["c", "a", "b"])

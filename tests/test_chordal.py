"""Tests for chordality and perfect elimination orderings."""
import pytest

from graphprops import (
    UndirectedGraph, is_chordal, is_perfect_elimination_ordering, perfect_elimination_ordering,
)

from graphs import complete, cycle


def relabel(graph: UndirectedGraph, mapping: dict) -> UndirectedGraph:
    """Copy of graph with every vertex renamed through mapping."""
    result = UndirectedGraph()
    result.add_vertices(*(mapping[v] for v in graph))
    for u, v in graph.edges():
        result.add_edge(mapping[u], mapping[v])
    return result


class TestChordal:
    """Tests for chordality."""

    def test_chordal(self, chordal_graph):
        assert chordal_graph.is_chordal()

    def test_removing_chord(self, chordal_graph):
        chordal_graph.remove_edge("b", "c")
        assert not chordal_graph.is_chordal()

    def test_trivial_graphs(self):
        assert is_chordal(UndirectedGraph())
        single = UndirectedGraph()
        single.add_vertex("a")
        assert is_chordal(single)

    @pytest.mark.parametrize("n", [4, 5, 6, 7])
    def test_long_cycles_are_not_chordal(self, n):
        assert not is_chordal(cycle(n))

    def test_triangle_is_chordal(self):
        assert is_chordal(cycle(3))

    @pytest.mark.parametrize("n", [2, 3, 5])
    def test_complete_graphs_are_chordal(self, n):
        assert is_chordal(complete(n))

    def test_tree_is_chordal(self):
        tree = UndirectedGraph({"r": ["a", "b"], "a": ["c", "d"], "b": ["e"], "e": ["f"]})
        assert is_chordal(tree)

    def test_cycle_with_chord(self):
        graph = cycle(4)
        graph.add_edge(0, 2)
        assert is_chordal(graph)

    def test_comparability_example_is_not_chordal(self, comparability_graph):
        assert not is_chordal(comparability_graph)

    @pytest.mark.parametrize("remove", [None, ("b", "c"), ("d", "e")])
    def test_relabeling_invariance(self, chordal_graph, remove):
        if remove:
            chordal_graph.remove_edge(*remove)
        mapping = {"a": 50, "b": 10, "c": 40, "d": 20, "e": 30}
        assert is_chordal(relabel(chordal_graph, mapping)) == is_chordal(chordal_graph)


class TestEliminationOrdering:
    """Tests for perfect elimination orderings."""

    def test_reverse_of_lexbfs(self, chordal_graph):
        assert perfect_elimination_ordering(chordal_graph) == ["e", "d", "c", "b", "a"]

    def test_method(self, chordal_graph):
        assert chordal_graph.perfect_elimination_ordering() == ["e", "d", "c", "b", "a"]

    def test_none_when_not_chordal(self):
        assert perfect_elimination_ordering(cycle(5)) is None

    def test_check(self, chordal_graph):
        assert is_perfect_elimination_ordering(chordal_graph, ["e", "d", "c", "b", "a"])
        # b's later neighbours c, d, e are not a clique (c-e missing)
        assert not is_perfect_elimination_ordering(chordal_graph, ["a", "b", "c", "d", "e"])

    def test_check_rejects_non_permutation(self, chordal_graph):
        assert not is_perfect_elimination_ordering(chordal_graph, ["e", "d", "c", "b"])
        assert not is_perfect_elimination_ordering(chordal_graph, ["e", "d", "c", "b", "z"])
        assert not is_perfect_elimination_ordering(chordal_graph, ["e", "d", "c", "b", "b"])

"""Simple graphs with chordality and comparability recognition."""

from .errors import (
    GraphError, UnknownVertex, UnknownEdge, DuplicateVertex, DuplicateEdge, SelfLoop
)
from .graph import Graph, UndirectedGraph, DirectedGraph
from .lexbfs import lexicographic_bfs, is_lexbfs_ordering
from .chordal import is_chordal, perfect_elimination_ordering, is_perfect_elimination_ordering
from .comparability import (
    implication_class, implication_classes, is_transitive,
    transitive_orientation, is_comparability
)
from .predicates import (
    is_clique, is_complete, two_coloring, is_bipartite, complement, complement_in_place
)

__all__ = [
    "GraphError",
    "UnknownVertex",
    "UnknownEdge",
    "DuplicateVertex",
    "DuplicateEdge",
    "SelfLoop",
    "Graph",
    "UndirectedGraph",
    "DirectedGraph",
    "lexicographic_bfs",
    "is_lexbfs_ordering",
    "is_chordal",
    "perfect_elimination_ordering",
    "is_perfect_elimination_ordering",
    "implication_class",
    "implication_classes",
    "is_transitive",
    "transitive_orientation",
    "is_comparability",
    "is_clique",
    "is_complete",
    "two_coloring",
    "is_bipartite",
    "complement",
    "complement_in_place",
]

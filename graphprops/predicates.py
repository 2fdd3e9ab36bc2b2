"""Adjacency-based predicates and the complement transform."""

from __future__ import annotations
import logging
from collections import deque
from typing import Hashable, Iterable, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from .graph import Graph, UndirectedGraph


logger = logging.getLogger("graphprops.predicates")


def is_clique(graph: UndirectedGraph, vertices: Iterable[Hashable]) -> bool:
    """
    Check whether the given vertices are pairwise adjacent.

    Args:
        graph: The graph to look in
        vertices: Candidate clique; repeats are ignored

    Returns:
        True if every pair of distinct vertices is joined by an edge
        (vacuously true for zero or one vertex)

    Raises:
        UnknownVertex: if a vertex is not in graph
    """
    order = list(dict.fromkeys(vertices))
    matrix, _ = graph.adjacency_matrix(order)
    k = len(order)
    return int(matrix.sum()) == k * (k - 1)


def is_complete(graph: UndirectedGraph) -> bool:
    """True iff every pair of vertices of graph is adjacent."""
    return is_clique(graph, graph)


def two_coloring(graph: UndirectedGraph) -> tuple[set[Hashable], set[Hashable]] | None:
    """
    Properly 2-colour the graph by breadth-first search over every component.

    Returns:
        (first, second) colour classes with no edge inside either class,
        or None if an odd cycle makes that impossible
    """
    color: dict[Hashable, int] = {}
    for start in graph:
        if start in color:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for w in graph.neighbors_of_vertex(v):
                if w not in color:
                    color[w] = 1 - color[v]
                    queue.append(w)
                elif color[w] == color[v]:
                    logger.debug("edge (%r, %r) joins two vertices of the same colour", v, w)
                    return None

    first = {v for v, c in color.items() if c == 0}
    second = {v for v, c in color.items() if c == 1}
    return first, second


def is_bipartite(graph: UndirectedGraph) -> bool:
    return two_coloring(graph) is not None


def _complement_pairs(graph: Graph) -> tuple[list[Hashable], np.ndarray]:
    """Vertex order plus index pairs (i, j) of the non-edges of graph."""
    matrix, order = graph.adjacency_matrix()
    missing = 1 - matrix
    np.fill_diagonal(missing, 0)
    if not graph.directed:
        missing = np.triu(missing, k=1)
    return order, np.argwhere(missing)


def complement(graph: Graph) -> Graph:
    """
    Build the complement of a graph.

    The result has the same vertices (same order) and an edge exactly where
    graph has none. The source graph is left untouched.
    """
    order, pairs = _complement_pairs(graph)
    result = type(graph)()
    result.add_vertices(*order)
    for i, j in pairs:
        result._store.add_arc(order[i], order[j])
    return result


def complement_in_place(graph: Graph) -> None:
    """Replace the edge set of graph with its complement."""
    order, pairs = _complement_pairs(graph)
    graph._store.clear_arcs()
    for i, j in pairs:
        graph._store.add_arc(order[i], order[j])
    logger.debug("complemented %r in place", graph)

"""Chordality testing via perfect elimination orderings.

A graph is chordal iff it has a perfect elimination ordering: an ordering in
which the neighbours of each vertex that come after it form a clique. The
reverse of any LexBFS ordering is such an ordering whenever one exists, so a
single LexBFS pass followed by a clique check per vertex decides chordality.
"""

from __future__ import annotations
import logging
from typing import Hashable, Sequence, TYPE_CHECKING

from .lexbfs import lexicographic_bfs

if TYPE_CHECKING:
    from .graph import UndirectedGraph


logger = logging.getLogger("graphprops.chordal")


def is_perfect_elimination_ordering(
    graph: UndirectedGraph, ordering: Sequence[Hashable]
) -> bool:
    """
    Check that every vertex's later neighbours form a clique.

    This is the direct O(V * D^2) test (D = maximum degree).

    Args:
        graph: The graph the ordering is over
        ordering: All vertices of the graph, each exactly once

    Returns:
        True if ordering is a permutation of the vertices and a perfect
        elimination ordering of graph
    """
    if len(ordering) != len(graph) or set(ordering) != graph.vertices():
        return False
    position = {v: i for i, v in enumerate(ordering)}
    for i, v in enumerate(ordering):
        later = [w for w in graph.neighbors_of_vertex(v) if position[w] > i]
        for x in range(len(later)):
            for y in range(x + 1, len(later)):
                if not graph.edge_exists(later[x], later[y]):
                    logger.debug(
                        "later neighbours of %r are not a clique: %r and %r are not adjacent",
                        v, later[x], later[y],
                    )
                    return False
    return True


def perfect_elimination_ordering(graph: UndirectedGraph) -> list[Hashable] | None:
    """
    Find a perfect elimination ordering.

    Returns:
        The reversed LexBFS ordering if it is a perfect elimination ordering,
        otherwise None (the graph is not chordal)
    """
    ordering = lexicographic_bfs(graph)
    ordering.reverse()
    if is_perfect_elimination_ordering(graph, ordering):
        return ordering
    return None


def is_chordal(graph: UndirectedGraph) -> bool:
    """True iff every cycle of length four or more in graph has a chord."""
    if len(graph) <= 1:
        return True
    return perfect_elimination_ordering(graph) is not None

"""Comparability-graph recognition and transitive orientation.

An orientation of an undirected graph is transitive when a -> b and b -> c
imply a -> c. Graphs that admit one are comparability graphs.

Orientations are found by forcing rather than search. Two arcs are coupled
(the relation Gamma) when they share a tail whose heads are non-adjacent,
(a, b) ~ (a, c) with bc not an edge, or share a head whose tails are
non-adjacent, (a, c) ~ (b, c) with ab not an edge. Coupled arcs must be
oriented the same way, and the transitive closure of the coupling splits the
arcs into implication classes.

transitive_orientation follows the G-decomposition: repeatedly take an
unoriented edge, compute its implication class within the edges still left,
fail if the class holds an arc together with its reverse, otherwise orient
the class and drop it (and its reverse) from the remaining edges. Classes are
recomputed against the remaining edges only, which is what makes the union
of the chosen classes transitive.
"""

from __future__ import annotations
import logging
from collections import deque
from typing import Hashable, Mapping, TYPE_CHECKING
import numpy as np

from .graph import DirectedGraph

if TYPE_CHECKING:
    from .graph import UndirectedGraph


Arc = tuple[Hashable, Hashable]

logger = logging.getLogger("graphprops.comparability")


def implication_class(adjacency: Mapping[Hashable, set[Hashable]], arc: Arc) -> set[Arc]:
    """
    Collect every arc forced to share the orientation of arc.

    Args:
        adjacency: Undirected adjacency (vertex -> neighbour set) of the edges
            taking part; non-adjacency is judged against it as well
        arc: Starting arc (a, b); ab must be an edge of adjacency

    Returns:
        The implication class of arc, as a set of oriented pairs
    """
    members = {arc}
    queue = deque([arc])
    while queue:
        a, b = queue.popleft()
        # Same tail: (a, b) ~ (a, c) when bc is not an edge
        for c in adjacency[a]:
            if c != b and c not in adjacency[b] and (a, c) not in members:
                members.add((a, c))
                queue.append((a, c))
        # Same head: (a, b) ~ (c, b) when ac is not an edge
        for c in adjacency[b]:
            if c != a and c not in adjacency[a] and (c, b) not in members:
                members.add((c, b))
                queue.append((c, b))
    return members


def _has_reversed_arc(members: set[Arc]) -> Arc | None:
    for a, b in members:
        if (b, a) in members:
            return (a, b)
    return None


def implication_classes(graph: UndirectedGraph) -> list[set[Arc]]:
    """
    Partition both orientations of every edge into implication classes.

    Classes are listed in the order of their first edge in sorted_edges(). A
    class that holds some arc together with its reverse shows the graph is not
    a comparability graph; otherwise each class and its reverse are distinct
    classes.
    """
    adjacency = {v: graph.neighbors_of_vertex(v) for v in graph}
    classes: list[set[Arc]] = []
    seen: set[Arc] = set()
    for u, v in graph.sorted_edges():
        for arc in ((u, v), (v, u)):
            if arc in seen:
                continue
            members = implication_class(adjacency, arc)
            seen |= members
            classes.append(members)
    return classes


def is_transitive(graph: DirectedGraph) -> bool:
    """
    Check that a -> b and b -> c imply a -> c for all a != c.

    Computed as one boolean matrix product over the adjacency matrix.
    """
    matrix, _ = graph.adjacency_matrix()
    a = matrix.astype(np.int32)
    two_paths = (a @ a) > 0
    np.fill_diagonal(two_paths, False)
    return not np.any(two_paths & (a == 0))


def transitive_orientation(graph: UndirectedGraph) -> DirectedGraph | None:
    """
    Orient every edge so the resulting relation is transitive.

    Args:
        graph: The undirected graph to orient

    Returns:
        A DirectedGraph on the same vertices holding exactly one orientation of
        each edge, or None if graph is not a comparability graph
    """
    remaining = {v: set(graph.neighbors_of_vertex(v)) for v in graph}
    arcs: list[Arc] = []

    for u, v in graph.sorted_edges():
        if v not in remaining[u]:
            continue  # oriented as part of an earlier class
        members = implication_class(remaining, (u, v))
        clash = _has_reversed_arc(members)
        if clash is not None:
            logger.debug(
                "implication class of %r holds both %r and its reverse; not a comparability graph",
                (u, v), clash,
            )
            return None
        arcs.extend(members)
        for a, b in members:
            remaining[a].discard(b)
            remaining[b].discard(a)

    orientation = DirectedGraph()
    orientation.add_vertices(*graph)
    for a, b in arcs:
        orientation.add_edge(a, b)

    if not is_transitive(orientation):
        logger.debug("orientation of %r is not transitive", graph)
        return None
    return orientation


def is_comparability(graph: UndirectedGraph) -> bool:
    """True iff graph has a transitive orientation."""
    return transitive_orientation(graph) is not None

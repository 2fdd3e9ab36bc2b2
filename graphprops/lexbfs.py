"""Lexicographic breadth-first search by partition refinement.

The unvisited vertices are kept as an ordered sequence of blocks. Each step
emits the first vertex of the first block, then splits every block P into
P ∩ N(v) followed by P \\ N(v). Blocks are linked in both directions so a
split costs time proportional to the neighbours moved, and the whole search
runs in O(V + E).

Within a block, vertices always keep their original insertion order: the
starting block is in insertion order, neighbour lists are laid out in
insertion order up front, and splits preserve relative order. Ties are
therefore broken by insertion order and the output is reproducible.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Hashable, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .graph import UndirectedGraph


@dataclass(eq=False, slots=True)
class _Block:
    """One cell of the partition; members is an insertion-ordered dict used as a set."""
    members: dict[Hashable, None] = field(default_factory=dict)
    prev: _Block | None = None
    next: _Block | None = None


def lexicographic_bfs(graph: UndirectedGraph) -> list[Hashable]:
    """
    Compute a LexBFS ordering of the graph.

    Args:
        graph: The graph to traverse

    Returns:
        Every vertex exactly once, in LexBFS order (empty list for an empty graph)
    """
    vertices = list(graph)
    if not vertices:
        return []

    # Neighbour lists in insertion order, built by one pass over all vertices
    ordered: dict[Hashable, list[Hashable]] = {v: [] for v in vertices}
    for u in vertices:
        for w in graph.neighbors_of_vertex(u):
            ordered[w].append(u)

    head: _Block | None = _Block(dict.fromkeys(vertices))
    owner: dict[Hashable, _Block] = dict.fromkeys(vertices, head)
    ordering: list[Hashable] = []

    while head is not None:
        v = next(iter(head.members))
        del head.members[v]
        del owner[v]
        if not head.members:
            head = head.next
            if head is not None:
                head.prev = None
        ordering.append(v)

        # Group the unvisited neighbours of v by the block holding them
        touched: dict[_Block, list[Hashable]] = {}
        for w in ordered[v]:
            block = owner.get(w)
            if block is not None:
                touched.setdefault(block, []).append(w)

        for block, hits in touched.items():
            if len(hits) == len(block.members):
                continue  # P \ N(v) would be empty
            split = _Block(dict.fromkeys(hits), prev=block.prev, next=block)
            for w in hits:
                del block.members[w]
                owner[w] = split
            if block.prev is None:
                head = split
            else:
                block.prev.next = split
            block.prev = split

    return ordering


def is_lexbfs_ordering(graph: UndirectedGraph, ordering: Sequence[Hashable]) -> bool:
    """
    Check whether an ordering could have been produced by LexBFS.

    Uses the four-point characterisation: whenever a < b < c, ac is an edge
    and ab is not, there must be some d < a adjacent to b but not to c.
    Cubic in the number of vertices; meant for verification, not production.

    Args:
        graph: The graph the ordering is over
        ordering: Candidate ordering of all vertices

    Returns:
        True if ordering is a permutation of the vertices with the LexBFS property
    """
    if len(ordering) != len(graph) or set(ordering) != graph.vertices():
        return False

    n = len(ordering)
    for i in range(n):
        a = ordering[i]
        for j in range(i + 1, n):
            b = ordering[j]
            if graph.edge_exists(a, b):
                continue
            for k in range(j + 1, n):
                c = ordering[k]
                if not graph.edge_exists(a, c):
                    continue
                witnessed = any(
                    graph.edge_exists(d, b) and not graph.edge_exists(d, c)
                    for d in ordering[:i]
                )
                if not witnessed:
                    return False
    return True

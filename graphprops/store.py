"""Adjacency-indexed storage shared by undirected and directed graphs."""

from __future__ import annotations
from typing import Hashable, Iterator


class GraphStore:
    """
    Vertex set plus adjacency index for a simple graph.

    Structure:
        _succ[v] = set of vertices w with an arc v -> w
        _pred[v] = set of vertices u with an arc u -> v

    For an undirected store every edge is kept as two arcs, so _succ and
    _pred are the same mapping. Vertex order is insertion order, and
    _rank[v] records it as a number that only ever grows; a vertex removed
    and added again gets a fresh rank.

    This class does no validation; the graph wrappers check their inputs
    before calling in.
    """

    __slots__ = ("directed", "_succ", "_pred", "_rank", "_next_rank")

    def __init__(self, directed: bool = False):
        self.directed = directed
        self._succ: dict[Hashable, set[Hashable]] = {}
        self._pred: dict[Hashable, set[Hashable]] = {} if directed else self._succ
        self._rank: dict[Hashable, int] = {}
        self._next_rank = 0

    # -------------------- Vertices --------------------

    def has_vertex(self, v: Hashable) -> bool:
        try:
            return v in self._succ
        except TypeError:
            return False

    def add_vertex(self, v: Hashable) -> None:
        self._succ[v] = set()
        if self.directed:
            self._pred[v] = set()
        self._rank[v] = self._next_rank
        self._next_rank += 1

    def remove_vertex(self, v: Hashable) -> None:
        del self._rank[v]
        for w in self._succ.pop(v):
            self._pred[w].discard(v)
        if self.directed:
            for u in self._pred.pop(v):
                self._succ[u].discard(v)

    def vertices(self) -> Iterator[Hashable]:
        return iter(self._succ)

    def vertex_count(self) -> int:
        return len(self._succ)

    def rank(self, v: Hashable) -> int:
        """Position of v in insertion order; only comparisons between ranks are meaningful."""
        return self._rank[v]

    # -------------------- Arcs --------------------

    def has_arc(self, u: Hashable, v: Hashable) -> bool:
        try:
            return u in self._succ and v in self._succ[u]
        except TypeError:
            return False

    def add_arc(self, u: Hashable, v: Hashable) -> None:
        self._succ[u].add(v)
        self._pred[v].add(u)

    def remove_arc(self, u: Hashable, v: Hashable) -> None:
        self._succ[u].discard(v)
        self._pred[v].discard(u)

    def clear_arcs(self) -> None:
        for nbrs in self._succ.values():
            nbrs.clear()
        if self.directed:
            for nbrs in self._pred.values():
                nbrs.clear()

    def successors(self, v: Hashable) -> set[Hashable]:
        return self._succ[v]

    def predecessors(self, v: Hashable) -> set[Hashable]:
        return self._pred[v]

    def arcs(self) -> Iterator[tuple[Hashable, Hashable]]:
        """Iterate over every stored arc (both directions for undirected stores)."""
        for u, nbrs in self._succ.items():
            for v in nbrs:
                yield u, v

    def arc_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._succ.values())

    # -------------------- Cloning --------------------

    def copy(self) -> GraphStore:
        store = GraphStore(self.directed)
        store._succ = {v: set(nbrs) for v, nbrs in self._succ.items()}
        if self.directed:
            store._pred = {v: set(nbrs) for v, nbrs in self._pred.items()}
        else:
            store._pred = store._succ
        store._rank = dict(self._rank)
        store._next_rank = self._next_rank
        return store

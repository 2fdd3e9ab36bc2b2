"""Undirected and directed simple graphs."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Iterator, Mapping
import numpy as np

from .errors import DuplicateEdge, DuplicateVertex, SelfLoop, UnknownEdge, UnknownVertex
from .store import GraphStore


Edge = tuple[Hashable, Hashable]
Adjacency = Mapping[Hashable, Iterable[Hashable]]

# dtype of the 0/1 matrices returned by adjacency_matrix
ADJACENCY_DTYPE = np.int8


class Graph(ABC):
    """
    Simple graph (no self-loops, no parallel edges) backed by a GraphStore.

    A graph is built from an adjacency mapping vertex -> neighbours. Every
    key and every listed neighbour becomes a vertex; vertices are kept in the
    order they are first seen (key first, then its neighbours).

    Subclasses fix `directed` and the canonical edge form; Graph itself
    cannot be instantiated.
    """

    directed: bool = False

    def __init__(self, adjacency: Adjacency | None = None):
        self._store = GraphStore(self.directed)
        if adjacency:
            for v, neighbors in adjacency.items():
                if not self._store.has_vertex(v):
                    self._store.add_vertex(v)
                for w in neighbors:
                    if not self._store.has_vertex(w):
                        self._store.add_vertex(w)
                    self.add_edge(v, w)

    @abstractmethod
    def _edge(self, u: Hashable, v: Hashable) -> Edge:
        """Canonical form of the edge from u to v."""

    def _require_vertex(self, v: Hashable) -> None:
        if not self._store.has_vertex(v):
            raise UnknownVertex(v)

    # -------------------- Vertices --------------------

    def vertices(self) -> set[Hashable]:
        """All vertices of the graph."""
        return set(self._store.vertices())

    def vertex_exists(self, v: Hashable) -> bool:
        return self._store.has_vertex(v)

    def add_vertex(self, v: Hashable) -> None:
        if self._store.has_vertex(v):
            raise DuplicateVertex(v)
        self._store.add_vertex(v)

    def add_vertices(self, *vertices: Hashable) -> None:
        """
        Add several vertices at once.

        Nothing is inserted if any vertex already exists or is listed twice.

        Raises:
            DuplicateVertex: for the first offending vertex
        """
        seen: set[Hashable] = set()
        for v in vertices:
            if v in seen or self._store.has_vertex(v):
                raise DuplicateVertex(v)
            seen.add(v)
        for v in vertices:
            self._store.add_vertex(v)

    def remove_vertex(self, v: Hashable) -> None:
        """Remove v together with every edge incident to it."""
        self._require_vertex(v)
        self._store.remove_vertex(v)

    # -------------------- Edges --------------------

    def edges(self) -> set[Edge]:
        """All edges of the graph, in canonical form."""
        return {self._edge(u, v) for u, v in self._store.arcs()}

    def sorted_edges(self) -> list[Edge]:
        """All edges in canonical form, ordered by the insertion order of their endpoints."""
        rank = self._store.rank
        return sorted(self.edges(), key=lambda e: (rank(e[0]), rank(e[1])))

    def edge_exists(self, u: Hashable, v: Hashable) -> bool:
        return self._store.has_arc(u, v)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Add the edge (u, v).

        Raises:
            UnknownVertex: if u or v is not in the graph
            SelfLoop: if u == v
            DuplicateEdge: if the edge is already present
        """
        self._require_vertex(u)
        self._require_vertex(v)
        if u == v:
            raise SelfLoop(u)
        if self._store.has_arc(u, v):
            raise DuplicateEdge(*self._edge(u, v))
        self._store.add_arc(u, v)

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        self._require_vertex(u)
        self._require_vertex(v)
        if not self._store.has_arc(u, v):
            raise UnknownEdge(u, v)
        self._store.remove_arc(u, v)

    def edges_on_vertex(self, v: Hashable) -> set[Edge]:
        """All edges with v as an endpoint."""
        self._require_vertex(v)
        result = {self._edge(v, w) for w in self._store.successors(v)}
        result.update(self._edge(u, v) for u in self._store.predecessors(v))
        return result

    # -------------------- Neighbourhoods --------------------

    def neighbors_of_vertex(self, v: Hashable) -> set[Hashable]:
        self._require_vertex(v)
        return set(self._store.successors(v))

    def degree(self, v: Hashable) -> int:
        self._require_vertex(v)
        return len(self._store.successors(v))

    # -------------------- Matrix view --------------------

    def adjacency_matrix(
        self, order: Iterable[Hashable] | None = None
    ) -> tuple[np.ndarray, list[Hashable]]:
        """
        Build the adjacency matrix of the graph.

        Args:
            order: Vertices indexing rows and columns (default: insertion order).
                May be a subset of the vertices; arcs leaving it are dropped.

        Returns:
            (matrix, order) where matrix[i, j] = 1 iff there is an arc
            order[i] -> order[j]. Undirected graphs give a symmetric matrix.

        Raises:
            UnknownVertex: if order names an absent vertex
        """
        order = list(self._store.vertices()) if order is None else list(order)
        index: dict[Hashable, int] = {}
        for i, v in enumerate(order):
            self._require_vertex(v)
            if v in index:
                raise ValueError(f"Vertex {v!r} listed twice in order")
            index[v] = i

        matrix = np.zeros((len(order), len(order)), dtype=ADJACENCY_DTYPE)
        for u in order:
            i = index[u]
            for w in self._store.successors(u):
                j = index.get(w)
                if j is not None:
                    matrix[i, j] = 1
        return matrix, order

    # -------------------- Misc --------------------

    def copy(self):
        graph = type(self)()
        graph._store = self._store.copy()
        return graph

    def __len__(self) -> int:
        return self._store.vertex_count()

    def __contains__(self, v: Hashable) -> bool:
        return self._store.has_vertex(v)

    def __iter__(self) -> Iterator[Hashable]:
        return self._store.vertices()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={len(self.edges())})"


class UndirectedGraph(Graph):
    """
    Undirected simple graph.

    Edges are unordered pairs reported as (u, v) with u added to the graph
    before v, so vertices need not be comparable. Building from
    {"a": ["b"], "b": ["a"]} lists the same edge twice and raises
    DuplicateEdge.
    """

    directed = False

    def _edge(self, u: Hashable, v: Hashable) -> Edge:
        return self.order_vertices(u, v)

    def order_vertices(self, u: Hashable, v: Hashable) -> Edge:
        """Canonical form of the edge {u, v}: the endpoint added first comes first."""
        rank = self._store.rank
        return (v, u) if rank(v) < rank(u) else (u, v)

    def adjacent_edges(self, u: Hashable, v: Hashable) -> set[Edge]:
        """
        Edges sharing exactly one endpoint with the edge (u, v).

        Raises:
            UnknownVertex: if u or v is not in the graph
            UnknownEdge: if (u, v) is not an edge
        """
        self._require_vertex(u)
        self._require_vertex(v)
        if not self._store.has_arc(u, v):
            raise UnknownEdge(u, v)
        result = self.edges_on_vertex(u) | self.edges_on_vertex(v)
        result.discard(self.order_vertices(u, v))
        return result

    # -------------------- Orderings --------------------

    def lexicographic_bfs(self) -> list[Hashable]:
        """Vertex ordering produced by lexicographic breadth-first search."""
        from .lexbfs import lexicographic_bfs
        return lexicographic_bfs(self)

    def perfect_elimination_ordering(self) -> list[Hashable] | None:
        from .chordal import perfect_elimination_ordering
        return perfect_elimination_ordering(self)

    def is_chordal(self) -> bool:
        from .chordal import is_chordal
        return is_chordal(self)

    # -------------------- Comparability --------------------

    def transitive_orientation(self) -> DirectedGraph | None:
        """A transitive orientation of the graph, or None if none exists."""
        from .comparability import transitive_orientation
        return transitive_orientation(self)

    def is_comparability(self) -> bool:
        from .comparability import is_comparability
        return is_comparability(self)

    # -------------------- Predicates / transforms --------------------

    def is_clique(self, vertices: Iterable[Hashable]) -> bool:
        from .predicates import is_clique
        return is_clique(self, vertices)

    def is_complete(self) -> bool:
        from .predicates import is_complete
        return is_complete(self)

    def two_coloring(self) -> tuple[set[Hashable], set[Hashable]] | None:
        from .predicates import two_coloring
        return two_coloring(self)

    def is_bipartite(self) -> bool:
        from .predicates import is_bipartite
        return is_bipartite(self)

    def complement(self) -> UndirectedGraph:
        from .predicates import complement
        return complement(self)

    def complement_in_place(self) -> None:
        from .predicates import complement_in_place
        complement_in_place(self)


class DirectedGraph(Graph):
    """
    Directed simple graph.

    Edges are ordered pairs; (u, v) and (v, u) are different edges and may
    both be present. neighbors_of_vertex returns out-neighbours and degree
    counts arcs in both directions.
    """

    directed = True

    def _edge(self, u: Hashable, v: Hashable) -> Edge:
        return (u, v)

    def out_neighbors(self, v: Hashable) -> set[Hashable]:
        return self.neighbors_of_vertex(v)

    def in_neighbors(self, v: Hashable) -> set[Hashable]:
        self._require_vertex(v)
        return set(self._store.predecessors(v))

    def out_degree(self, v: Hashable) -> int:
        self._require_vertex(v)
        return len(self._store.successors(v))

    def in_degree(self, v: Hashable) -> int:
        self._require_vertex(v)
        return len(self._store.predecessors(v))

    def degree(self, v: Hashable) -> int:
        return self.out_degree(v) + self.in_degree(v)

    def reachable_by_two_path(self, v: Hashable) -> set[Hashable]:
        """Vertices w != v reachable by a path v -> u -> w."""
        self._require_vertex(v)
        return {
            w
            for u in self._store.successors(v)
            for w in self._store.successors(u)
            if w != v
        }

    def is_transitive(self) -> bool:
        """True iff a -> b and b -> c always imply a -> c."""
        from .comparability import is_transitive
        return is_transitive(self)

    def transpose(self) -> DirectedGraph:
        """New graph with every edge reversed."""
        graph = DirectedGraph()
        for v in self._store.vertices():
            graph._store.add_vertex(v)
        for u, v in self._store.arcs():
            graph._store.add_arc(v, u)
        return graph

    def underlying_graph(self) -> UndirectedGraph:
        """Undirected graph on the same vertices; opposite arcs become one edge."""
        graph = UndirectedGraph()
        for v in self._store.vertices():
            graph._store.add_vertex(v)
        for u, v in self._store.arcs():
            graph._store.add_arc(u, v)
        return graph

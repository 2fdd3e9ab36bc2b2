"""Errors raised by graph storage and query operations."""

from __future__ import annotations
from typing import Hashable


class GraphError(ValueError):
    """Base class for structural graph errors."""


class UnknownVertex(GraphError):
    """An operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} does not exist")


class DuplicateVertex(GraphError):
    """An insertion referenced a vertex that is already in the graph."""

    def __init__(self, vertex: Hashable):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} already exists")


class UnknownEdge(GraphError):
    """An operation referenced an edge that is not in the graph."""

    def __init__(self, u: Hashable, v: Hashable):
        self.edge = (u, v)
        super().__init__(f"Edge ({u!r}, {v!r}) does not exist")


class DuplicateEdge(GraphError):
    """An insertion referenced an edge that is already in the graph."""

    def __init__(self, u: Hashable, v: Hashable):
        self.edge = (u, v)
        super().__init__(f"Edge ({u!r}, {v!r}) already exists")


class SelfLoop(GraphError):
    """An edge from a vertex to itself was requested."""

    def __init__(self, vertex: Hashable):
        self.vertex = vertex
        super().__init__(f"Self-loop on vertex {vertex!r} is not allowed")

# src/graph/errors.py - v1
"""Exceptions raised by the graph engine."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for graph engine errors."""


class VertexOutOfRangeError(GraphError, IndexError):
    """Raised when a vertex index falls outside [0, N)."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Invalid vertex: {vertex}. Must be between 0 and {vertex_count - 1}"
        )


class EdgeNotFoundError(GraphError, KeyError):
    """Raised when the weight of a missing edge is requested."""

    def __init__(self, u: int, v: int) -> None:
        self.u = u
        self.v = v
        super().__init__(f"Edge not found: {u} -> {v}")

    def __str__(self) -> str:
        return self.args[0]

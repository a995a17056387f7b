# src/graph/base_graph.py - v1
"""Abstract directed, edge-weighted simple graph.

Vertices are dense integers 0..N-1 fixed at construction. Self-loops are
silently ignored and at most one edge exists per ordered pair. Backends only
implement storage; everything derivable from the primitive operations
(relational predicates, connectivity, export) lives here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from collabgraph.graph.errors import VertexOutOfRangeError

if TYPE_CHECKING:
    from collabgraph.graph.identity import IdentityMap


def check_vertex(vertex: int, vertex_count: int) -> None:
    """Raise VertexOutOfRangeError unless 0 <= vertex < vertex_count."""
    if vertex < 0 or vertex >= vertex_count:
        raise VertexOutOfRangeError(vertex, vertex_count)


class BaseGraph(ABC):
    """Unified interface for graph storage backends."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("Number of vertices cannot be negative")
        self._num_vertices = num_vertices
        self._num_edges = 0
        self._vertex_weights = [1.0] * num_vertices

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self._num_vertices}, "
            f"edges={self._num_edges})"
        )

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Backend identifier (e.g., 'sparse', 'dense')."""

    @property
    def vertex_count(self) -> int:
        return self._num_vertices

    @property
    def edge_count(self) -> int:
        return self._num_edges

    def _check(self, *vertices: int) -> None:
        for v in vertices:
            check_vertex(v, self._num_vertices)

    # --- Primitive operations ---

    @abstractmethod
    def has_edge(self, u: int, v: int) -> bool:
        """True if the directed edge u -> v exists."""

    @abstractmethod
    def add_edge(self, u: int, v: int) -> None:
        """Insert u -> v with weight 1.0. No-op for self-loops or existing edges."""

    @abstractmethod
    def remove_edge(self, u: int, v: int) -> None:
        """Delete u -> v. No-op if absent."""

    @abstractmethod
    def set_edge_weight(self, u: int, v: int, weight: float) -> None:
        """Overwrite the weight of u -> v, creating the edge if needed."""

    @abstractmethod
    def get_edge_weight(self, u: int, v: int) -> float:
        """Weight of u -> v. Raises EdgeNotFoundError if absent."""

    @abstractmethod
    def in_degree(self, u: int) -> int:
        """Number of predecessors of u."""

    @abstractmethod
    def out_degree(self, u: int) -> int:
        """Number of successors of u."""

    @abstractmethod
    def successors(self, v: int) -> list[int]:
        """Vertices w such that v -> w exists."""

    @abstractmethod
    def predecessors(self, v: int) -> list[int]:
        """Vertices w such that w -> v exists."""

    @abstractmethod
    def copy(self) -> BaseGraph:
        """Independent copy using the same backend."""

    # --- Derived operations ---

    def is_successor(self, u: int, v: int) -> bool:
        self._check(u, v)
        return self.has_edge(u, v)

    def is_predecessor(self, u: int, v: int) -> bool:
        self._check(u, v)
        return self.has_edge(v, u)

    def is_divergent(self, u1: int, v1: int, u2: int, v2: int) -> bool:
        """Two present edges leaving the same source towards different targets."""
        self._check(u1, v1, u2, v2)
        return u1 == u2 and v1 != v2 and self.has_edge(u1, v1) and self.has_edge(u2, v2)

    def is_convergent(self, u1: int, v1: int, u2: int, v2: int) -> bool:
        """Two present edges reaching the same target from different sources."""
        self._check(u1, v1, u2, v2)
        return v1 == v2 and u1 != u2 and self.has_edge(u1, v1) and self.has_edge(u2, v2)

    def is_incident(self, u: int, v: int, x: int) -> bool:
        """True if edge u -> v exists and x is one of its endpoints."""
        self._check(u, v, x)
        if not self.has_edge(u, v):
            return False
        return x in (u, v)

    def get_vertex_weight(self, v: int) -> float:
        self._check(v)
        return self._vertex_weights[v]

    def set_vertex_weight(self, v: int, weight: float) -> None:
        self._check(v)
        self._vertex_weights[v] = weight

    def degree(self, v: int) -> int:
        """Total degree (in + out)."""
        return self.in_degree(v) + self.out_degree(v)

    def is_empty(self) -> bool:
        return self._num_edges == 0

    def is_complete(self) -> bool:
        n = self._num_vertices
        return self._num_edges == n * (n - 1)

    def is_connected(self) -> bool:
        """Weak connectivity: BFS from vertex 0 ignoring edge direction."""
        n = self._num_vertices
        if n <= 1:
            return True

        visited = [False] * n
        visited[0] = True
        queue = deque([0])
        visited_count = 0

        while queue:
            u = queue.popleft()
            visited_count += 1
            for v in self.successors(u) + self.predecessors(u):
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)

        return visited_count == n

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield (source, target, weight) for every edge, by ascending source."""
        for u in range(self._num_vertices):
            for v in self.successors(u):
                yield u, v, self.get_edge_weight(u, v)

    def export_topology(
        self, path: str, identities: IdentityMap | None = None
    ) -> str:
        """Write the graph as GEXF for external visualization tools."""
        from collabgraph.graph.exporters.gexf_exporter import GexfExporter

        return GexfExporter().export(self, path, identities=identities)

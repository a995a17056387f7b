# src/graph/sparse_graph.py - v1
"""Adjacency-list backend for graphs where |E| is much smaller than N^2.

Each vertex keeps an outgoing and an incoming {neighbour: weight} dict, so
successor/predecessor enumeration and degrees cost O(deg).
"""

from __future__ import annotations

from collabgraph.graph.base_graph import BaseGraph
from collabgraph.graph.errors import EdgeNotFoundError


class SparseGraph(BaseGraph):
    """Directed weighted graph stored as per-vertex adjacency dicts."""

    def __init__(self, num_vertices: int) -> None:
        super().__init__(num_vertices)
        self._adj_out: list[dict[int, float]] = [{} for _ in range(num_vertices)]
        self._adj_in: list[dict[int, float]] = [{} for _ in range(num_vertices)]

    @property
    def backend_name(self) -> str:
        return "sparse"

    def has_edge(self, u: int, v: int) -> bool:
        self._check(u, v)
        return v in self._adj_out[u]

    def add_edge(self, u: int, v: int) -> None:
        self._check(u, v)
        if u == v or v in self._adj_out[u]:
            return
        self._adj_out[u][v] = 1.0
        self._adj_in[v][u] = 1.0
        self._num_edges += 1

    def remove_edge(self, u: int, v: int) -> None:
        self._check(u, v)
        if v in self._adj_out[u]:
            del self._adj_out[u][v]
            del self._adj_in[v][u]
            self._num_edges -= 1

    def set_edge_weight(self, u: int, v: int, weight: float) -> None:
        self._check(u, v)
        if u == v:
            return
        if v not in self._adj_out[u]:
            self._num_edges += 1
        self._adj_out[u][v] = weight
        self._adj_in[v][u] = weight

    def get_edge_weight(self, u: int, v: int) -> float:
        self._check(u, v)
        try:
            return self._adj_out[u][v]
        except KeyError:
            raise EdgeNotFoundError(u, v) from None

    def in_degree(self, u: int) -> int:
        self._check(u)
        return len(self._adj_in[u])

    def out_degree(self, u: int) -> int:
        self._check(u)
        return len(self._adj_out[u])

    def successors(self, v: int) -> list[int]:
        self._check(v)
        return list(self._adj_out[v])

    def predecessors(self, v: int) -> list[int]:
        self._check(v)
        return list(self._adj_in[v])

    def copy(self) -> SparseGraph:
        clone = SparseGraph(self._num_vertices)
        clone._adj_out = [dict(d) for d in self._adj_out]
        clone._adj_in = [dict(d) for d in self._adj_in]
        clone._num_edges = self._num_edges
        clone._vertex_weights = list(self._vertex_weights)
        return clone

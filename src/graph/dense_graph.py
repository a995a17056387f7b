# src/graph/dense_graph.py - v1
"""Adjacency-matrix backend for small or dense graphs.

O(1) edge lookup at O(N^2) memory. Presence is tracked in a boolean mask
next to the weight matrix, so any float (including 0.0) is a valid weight.
"""

from __future__ import annotations

import numpy as np

from collabgraph.graph.base_graph import BaseGraph
from collabgraph.graph.errors import EdgeNotFoundError


class DenseGraph(BaseGraph):
    """Directed weighted graph stored as an N x N numpy matrix."""

    def __init__(self, num_vertices: int) -> None:
        super().__init__(num_vertices)
        self._weights = np.zeros((num_vertices, num_vertices), dtype=np.float64)
        self._present = np.zeros((num_vertices, num_vertices), dtype=bool)

    @property
    def backend_name(self) -> str:
        return "dense"

    def has_edge(self, u: int, v: int) -> bool:
        self._check(u, v)
        return bool(self._present[u, v])

    def add_edge(self, u: int, v: int) -> None:
        self._check(u, v)
        if u == v or self._present[u, v]:
            return
        self._present[u, v] = True
        self._weights[u, v] = 1.0
        self._num_edges += 1

    def remove_edge(self, u: int, v: int) -> None:
        self._check(u, v)
        if self._present[u, v]:
            self._present[u, v] = False
            self._weights[u, v] = 0.0
            self._num_edges -= 1

    def set_edge_weight(self, u: int, v: int, weight: float) -> None:
        self._check(u, v)
        if u == v:
            return
        if not self._present[u, v]:
            self._present[u, v] = True
            self._num_edges += 1
        self._weights[u, v] = weight

    def get_edge_weight(self, u: int, v: int) -> float:
        self._check(u, v)
        if not self._present[u, v]:
            raise EdgeNotFoundError(u, v)
        return float(self._weights[u, v])

    def in_degree(self, u: int) -> int:
        self._check(u)
        return int(np.count_nonzero(self._present[:, u]))

    def out_degree(self, u: int) -> int:
        self._check(u)
        return int(np.count_nonzero(self._present[u, :]))

    def successors(self, v: int) -> list[int]:
        self._check(v)
        return np.flatnonzero(self._present[v, :]).tolist()

    def predecessors(self, v: int) -> list[int]:
        self._check(v)
        return np.flatnonzero(self._present[:, v]).tolist()

    def copy(self) -> DenseGraph:
        clone = DenseGraph(self._num_vertices)
        clone._weights = self._weights.copy()
        clone._present = self._present.copy()
        clone._num_edges = self._num_edges
        clone._vertex_weights = list(self._vertex_weights)
        return clone

# src/graph/graph_factory.py - v1
"""Factory for graph backend instantiation."""

from __future__ import annotations

from collabgraph.config.settings import Settings
from collabgraph.graph.base_graph import BaseGraph

BACKENDS: tuple[str, ...] = ("sparse", "dense")


def create_graph(
    num_vertices: int,
    backend: str | None = None,
    settings: Settings | None = None,
) -> BaseGraph:
    """Instantiate an empty graph on the requested backend.

    Args:
        num_vertices: Fixed vertex count.
        backend: "sparse" or "dense". Overrides settings when given.
        settings: Application settings. Defaults to the sparse backend.

    Returns:
        Empty BaseGraph implementation.
    """
    if backend is None:
        backend = "sparse" if settings is None else settings.graph_backend

    if backend == "sparse":
        from collabgraph.graph.sparse_graph import SparseGraph
        return SparseGraph(num_vertices)

    if backend == "dense":
        from collabgraph.graph.dense_graph import DenseGraph
        return DenseGraph(num_vertices)

    raise ValueError(f"Unsupported graph backend: {backend!r}")

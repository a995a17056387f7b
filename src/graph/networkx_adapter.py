# src/graph/networkx_adapter.py - v1
"""Conversion of a BaseGraph into a networkx.DiGraph for interchange."""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from collabgraph.graph.base_graph import BaseGraph
    from collabgraph.graph.identity import IdentityMap


def to_networkx(
    graph: BaseGraph,
    identities: IdentityMap | None = None,
    weight_format: str | None = None,
) -> nx.DiGraph:
    """Build a DiGraph keyed by vertex index.

    Args:
        graph: Source graph (not modified).
        identities: When given, each node gets its login as ``label``.
        weight_format: Optional format spec applied to edge weights
            (e.g. ".2f"), producing strings instead of floats.

    Returns:
        networkx.DiGraph with ``weight`` edge attributes.
    """
    g = nx.DiGraph()
    for v in range(graph.vertex_count):
        label = identities.login_of(v) if identities is not None else f"Vertex {v}"
        g.add_node(v, label=label)
    for u, v, w in graph.edges():
        weight: float | str = format(w, weight_format) if weight_format else w
        g.add_edge(u, v, weight=weight)
    return g

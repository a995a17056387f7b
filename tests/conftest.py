# tests/conftest.py - v1
"""Shared test fixtures for all unit and integration tests.

Provides backend-parametrized graph builders, the reference interaction
scenario and a few small graphs with hand-computed metrics.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from collabgraph.core.models import InteractionEvent
from collabgraph.graph.base_graph import BaseGraph
from collabgraph.graph.graph_factory import create_graph

GraphBuilder = Callable[[int, Iterable[tuple]], BaseGraph]


@pytest.fixture(params=["sparse", "dense"])
def backend(request) -> str:
    """Run the test once per graph backend."""
    return request.param


@pytest.fixture
def make_graph(backend: str) -> GraphBuilder:
    """Build a graph from (u, v) or (u, v, weight) tuples on the current backend."""

    def _build(n: int, edges: Iterable[tuple] = ()) -> BaseGraph:
        g = create_graph(n, backend=backend)
        for edge in edges:
            if len(edge) == 3:
                g.set_edge_weight(edge[0], edge[1], edge[2])
            else:
                g.add_edge(edge[0], edge[1])
        return g

    return _build


# === FIXTURES: Sample data ===


@pytest.fixture
def scenario_records() -> list[tuple[str, str, float, str]]:
    """Three interactions between a, b and c."""
    return [
        ("a", "b", 3.0, "issue_comment"),
        ("b", "a", 4.0, "pr_review"),
        ("c", "a", 5.0, "pr_merged"),
    ]


@pytest.fixture
def scenario_events(scenario_records) -> list[InteractionEvent]:
    return [
        InteractionEvent(source=s, target=t, weight=w, tag=tag)
        for s, t, w, tag in scenario_records
    ]


@pytest.fixture
def triangle_graph(make_graph) -> BaseGraph:
    """3 vertices, 4 edges: 0->1, 1->2, 2->0, 1->0."""
    return make_graph(3, [(0, 1), (1, 2), (2, 0), (1, 0)])


@pytest.fixture
def two_triangles_graph(make_graph) -> BaseGraph:
    """Two directed triangles {0,1,2} and {3,4,5} joined by the bridge 2->3."""
    return make_graph(6, [
        (0, 1), (1, 2), (2, 0),
        (3, 4), (4, 5), (5, 3),
        (2, 3),
    ])

# src/graph/loader.py - v1
"""Graph construction from weighted edge records.

Two passes: the distinct logins are collected first to size and number the
graph, then every (source, target) pair is inserted with its accumulated
weight.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from collabgraph.config.settings import Settings
from collabgraph.core.interactions import InteractionAggregator, InteractionWeights
from collabgraph.core.models import AggregatedEdge, InteractionEvent
from collabgraph.graph.base_graph import BaseGraph
from collabgraph.graph.graph_factory import create_graph
from collabgraph.graph.identity import IdentityMap

logger = logging.getLogger(__name__)


@dataclass
class LoadedGraph:
    """A graph together with the identity map that numbers its vertices."""

    graph: BaseGraph
    identities: IdentityMap
    edges: list[AggregatedEdge] = field(default_factory=list)


def _add_record(aggregator: InteractionAggregator, record: Any) -> None:
    """Feed one edge model or (source, target, weight[, tag]) sequence."""
    if isinstance(record, AggregatedEdge):
        aggregator.add_aggregated(record)
        return
    if isinstance(record, InteractionEvent):
        aggregator.add_event(record)
        return
    if isinstance(record, Sequence) and not isinstance(record, str) and len(record) >= 3:
        source, target, weight = record[0], record[1], record[2]
        tag = record[3] if len(record) > 3 else None
        if weight is None:
            aggregator.add_tagged(source, target, tag or "")
        else:
            aggregator.add(source, target, float(weight), tag)
        return
    raise TypeError(f"Unsupported edge record: {record!r}")


def build_graph(
    records: Iterable[Any],
    backend: str | None = None,
    settings: Settings | None = None,
) -> LoadedGraph:
    """Build a graph and its identity map from weighted edge records.

    Repeated (source, target) pairs collapse into one edge whose weight is
    the sum of the records. Aggregated records keep their event and tag
    counts. Records without a weight take the configured weight of their
    tag. Self-interactions and blank logins are dropped.

    Args:
        records: AggregatedEdge / InteractionEvent models or tuples
            ``(source, target, weight[, tag])`` (weight may be None).
        backend: "sparse" or "dense"; defaults to settings / sparse.
        settings: Application settings.

    Returns:
        LoadedGraph with graph, identity map and the aggregated edges.
    """
    weights = InteractionWeights.from_settings(settings) if settings is not None else None
    aggregator = InteractionAggregator(weights)
    for record in records:
        _add_record(aggregator, record)

    aggregated = aggregator.edges()
    identities = IdentityMap(aggregator.nodes())
    graph = create_graph(len(identities), backend=backend, settings=settings)

    for edge in aggregated:
        u = identities.index_of(edge.source)
        v = identities.index_of(edge.target)
        graph.add_edge(u, v)
        graph.set_edge_weight(u, v, edge.weight)

    logger.info(
        "Built %s graph: %d vertices, %d edges (%d records skipped)",
        graph.backend_name, graph.vertex_count, graph.edge_count, aggregator.skipped,
    )
    return LoadedGraph(graph=graph, identities=identities, edges=aggregated)


def load_graph(
    path: str | Path,
    backend: str | None = None,
    settings: Settings | None = None,
) -> LoadedGraph:
    """Read an edge-list CSV and build the graph from it."""
    from collabgraph.storage.edge_csv import read_edges_csv

    edges = read_edges_csv(path)
    logger.info("Loaded %d edge rows from %s", len(edges), path)
    return build_graph(edges, backend=backend, settings=settings)

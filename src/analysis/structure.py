# src/analysis/structure.py - v1
"""Structural cohesion metrics: density, clustering, degree assortativity."""

from __future__ import annotations

import math
from collections.abc import Sequence

from collabgraph.graph.base_graph import BaseGraph


def density(graph: BaseGraph) -> float:
    """|E| / (N * (N - 1)) for a directed simple graph; 0.0 when N <= 1."""
    n = graph.vertex_count
    if n <= 1:
        return 0.0
    return graph.edge_count / (n * (n - 1))


def local_clustering(graph: BaseGraph, v: int) -> float:
    """Fraction of ordered neighbour pairs (a, b) with an edge a -> b.

    The neighbourhood ignores direction: successors plus predecessors of v.
    """
    neighbors = set(graph.successors(v))
    neighbors.update(graph.predecessors(v))
    neighbors.discard(v)

    k = len(neighbors)
    if k < 2:
        return 0.0

    links = 0
    for a in neighbors:
        for b in neighbors:
            if a != b and graph.has_edge(a, b):
                links += 1

    return links / (k * (k - 1))


def average_clustering(graph: BaseGraph) -> float:
    """Mean local clustering over all vertices; 0.0 for an empty graph."""
    n = graph.vertex_count
    if n == 0:
        return 0.0
    return sum(local_clustering(graph, v) for v in range(n)) / n


def degree_assortativity(graph: BaseGraph) -> float:
    """Pearson correlation of total degrees across the endpoints of every edge.

    r > 0: hubs link to hubs. r < 0: hubs link to the periphery.
    """
    degrees = [graph.degree(v) for v in range(graph.vertex_count)]
    xs: list[int] = []
    ys: list[int] = []
    for u in range(graph.vertex_count):
        for v in graph.successors(u):
            xs.append(degrees[u])
            ys.append(degrees[v])
    return pearson_correlation(xs, ys)


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Pearson coefficient; 0.0 when empty or either variance is zero."""
    count = len(xs)
    if count == 0:
        return 0.0

    sum_x = float(sum(xs))
    sum_y = float(sum(ys))
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)
    sum_y2 = sum(y * y for y in ys)

    var_x = count * sum_x2 - sum_x * sum_x
    var_y = count * sum_y2 - sum_y * sum_y
    if var_x <= 0 or var_y <= 0:
        return 0.0

    return (count * sum_xy - sum_x * sum_y) / math.sqrt(var_x * var_y)

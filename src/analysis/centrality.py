# src/analysis/centrality.py - v1
"""Centrality metrics: degree, closeness, PageRank and Brandes betweenness.

Pure functions over the BaseGraph contract. Results map vertex index to
score; translation back to logins happens in the analysis service.
"""

from __future__ import annotations

import logging
from collections import deque

from collabgraph.graph.base_graph import BaseGraph

logger = logging.getLogger(__name__)

DEFAULT_DAMPING = 0.85
DEFAULT_MAX_ITER = 20
DEFAULT_TOL = 1e-6


def degree_centrality(graph: BaseGraph) -> dict[int, float]:
    """(in-degree + out-degree) / (N - 1) per vertex; empty when N <= 1."""
    n = graph.vertex_count
    if n <= 1:
        return {}
    return {v: graph.degree(v) / (n - 1) for v in range(n)}


def closeness_centrality(graph: BaseGraph) -> dict[int, float]:
    """Closeness over outgoing BFS distances with a reachability correction.

    closeness(s) = (r / total_dist) * (r / (N - 1)) where r is the number of
    vertices reachable from s. Vertices that reach nothing score 0.0.
    """
    n = graph.vertex_count
    closeness: dict[int, float] = {}

    for s in range(n):
        dist = [-1] * n
        dist[s] = 0
        queue = deque([s])
        total_dist = 0
        reachable = 0

        while queue:
            u = queue.popleft()
            for v in graph.successors(u):
                if dist[v] < 0:
                    dist[v] = dist[u] + 1
                    total_dist += dist[v]
                    reachable += 1
                    queue.append(v)

        if total_dist > 0:
            closeness[s] = (reachable / total_dist) * (reachable / (n - 1))
        else:
            closeness[s] = 0.0

    return closeness


def pagerank(
    graph: BaseGraph,
    damping: float = DEFAULT_DAMPING,
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOL,
) -> dict[int, float]:
    """Weighted PageRank by power iteration.

    Each vertex u hands ``damping * rank(u) * w(u, v) / out_weight(u)`` to
    every successor v. Dangling vertices (zero total out-weight) spread
    ``damping * rank(u) / N`` over all N vertices, themselves included.
    Every vertex also gets a flat ``(1 - damping) / N``. Iteration stops
    once the L1 change drops below ``tol``.

    Args:
        graph: Graph to rank.
        damping: Probability of following an edge.
        max_iter: Maximum number of iterations.
        tol: L1 convergence threshold.

    Returns:
        Dict vertex -> rank; sums to 1.0 for N > 0. Empty for N == 0.
    """
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"damping must be within [0, 1], got {damping}")
    if max_iter < 0:
        raise ValueError(f"max_iter must be >= 0, got {max_iter}")

    n = graph.vertex_count
    if n == 0:
        return {}

    # Outgoing (target, weight) lists and their weight sums, read once
    out_edges: list[list[tuple[int, float]]] = []
    out_weight = [0.0] * n
    for u in range(n):
        targets = [(v, graph.get_edge_weight(u, v)) for v in graph.successors(u)]
        out_edges.append(targets)
        out_weight[u] = sum(w for _, w in targets)

    ranks = [1.0 / n] * n
    base = (1.0 - damping) / n

    for iteration in range(max_iter):
        new_ranks = [base] * n
        dangling_share = 0.0

        for u in range(n):
            if out_weight[u] == 0:
                dangling_share += damping * ranks[u] / n
            else:
                scale = damping * ranks[u] / out_weight[u]
                for v, w in out_edges[u]:
                    new_ranks[v] += scale * w

        if dangling_share:
            new_ranks = [r + dangling_share for r in new_ranks]

        err = sum(abs(new_ranks[i] - ranks[i]) for i in range(n))
        ranks = new_ranks
        if err < tol:
            logger.debug("PageRank converged after %d iterations", iteration + 1)
            break

    return dict(enumerate(ranks))


def betweenness_centrality(graph: BaseGraph) -> dict[int, float]:
    """Un-normalized directed betweenness via Brandes' algorithm.

    Every edge counts as length 1. For each source, a BFS records shortest
    path counts (sigma) and predecessor lists; dependencies are then
    accumulated in reverse BFS order, skipping the source itself.
    """
    n = graph.vertex_count
    cb = [0.0] * n

    for s in range(n):
        stack: list[int] = []
        preds: list[list[int]] = [[] for _ in range(n)]
        sigma = [0.0] * n
        sigma[s] = 1.0
        dist = [-1] * n
        dist[s] = 0
        queue = deque([s])

        while queue:
            v = queue.popleft()
            stack.append(v)
            for w in graph.successors(v):
                if dist[w] < 0:
                    dist[w] = dist[v] + 1
                    queue.append(w)
                if dist[w] == dist[v] + 1:
                    sigma[w] += sigma[v]
                    preds[w].append(v)

        delta = [0.0] * n
        while stack:
            w = stack.pop()
            for v in preds[w]:
                delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
            if w != s:
                cb[w] += delta[w]

    return dict(enumerate(cb))


def rank_vertices(scores: dict[int, float], top_n: int) -> list[tuple[int, float]]:
    """Top ``top_n`` (vertex, score) pairs, highest first, ties by lower index."""
    ordered = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return ordered[:max(top_n, 0)]

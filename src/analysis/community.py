# src/analysis/community.py - v1
"""Girvan-Newman community detection and bridging-tie extraction.

Detection runs on a private, symmetrised copy of the adjacency so the input
graph is never touched. Each split recomputes edge betweenness and removes
the single highest-scoring undirected edge.
"""

from __future__ import annotations

import logging
from collections import deque

from collabgraph.core.models import BridgingTie
from collabgraph.graph.base_graph import BaseGraph

logger = logging.getLogger(__name__)

# Scores closer than this are treated as a tie
_SCORE_EPSILON = 1e-9

Adjacency = list[set[int]]
Edge = tuple[int, int]


def undirected_adjacency(graph: BaseGraph) -> Adjacency:
    """Owned list of neighbour sets; every directed edge links both ways."""
    adj: Adjacency = [set() for _ in range(graph.vertex_count)]
    for u in range(graph.vertex_count):
        for v in graph.successors(u):
            adj[u].add(v)
            adj[v].add(u)
    return adj


def edge_betweenness(adjacency: Adjacency) -> dict[Edge, float]:
    """Brandes accumulation onto undirected edges keyed (min, max).

    Summed over every source vertex, so each unordered pair of endpoints
    contributes from both sides.
    """
    n = len(adjacency)
    scores: dict[Edge, float] = {}

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
            for w in sorted(adjacency[v]):
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
                c = (sigma[v] / sigma[w]) * (1.0 + delta[w])
                key = (v, w) if v < w else (w, v)
                scores[key] = scores.get(key, 0.0) + c
                delta[v] += c

    return scores


def _highest_edge(scores: dict[Edge, float]) -> Edge | None:
    """Edge with the strictly highest score; the lowest pair wins ties."""
    best: Edge | None = None
    best_score = float("-inf")
    for edge in sorted(scores):
        score = scores[edge]
        if score > best_score + _SCORE_EPSILON:
            best, best_score = edge, score
    return best


def connected_components(adjacency: Adjacency) -> list[list[int]]:
    """BFS flood fill; components ordered by their smallest vertex."""
    n = len(adjacency)
    visited = [False] * n
    components: list[list[int]] = []

    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in sorted(adjacency[u]):
                if not visited[v]:
                    visited[v] = True
                    component.append(v)
                    queue.append(v)
        components.append(component)

    return components


def girvan_newman(graph: BaseGraph, max_splits: int) -> list[list[int]]:
    """Detect communities by removing up to ``max_splits`` high-betweenness edges.

    Stops early once no edge is left. The partition is the set of connected
    components of what remains.

    Args:
        graph: Original graph (not modified).
        max_splits: Maximum number of edge removals.

    Returns:
        List of communities, each a list of vertex indices.
    """
    if max_splits < 0:
        raise ValueError(f"max_splits must be >= 0, got {max_splits}")

    adjacency = undirected_adjacency(graph)

    for split in range(max_splits):
        scores = edge_betweenness(adjacency)
        edge = _highest_edge(scores)
        if edge is None:
            logger.debug("No edges left after %d splits", split)
            break
        u, v = edge
        adjacency[u].discard(v)
        adjacency[v].discard(u)
        logger.debug("Split %d: removed %d -- %d (score %.4f)", split + 1, u, v, scores[edge])

    communities = connected_components(adjacency)
    logger.info(
        "Girvan-Newman produced %d communities (max_splits=%d)",
        len(communities), max_splits,
    )
    return communities


def community_membership(communities: list[list[int]]) -> dict[int, int]:
    """Map each vertex to the position of its community."""
    membership: dict[int, int] = {}
    for community_id, members in enumerate(communities):
        for v in members:
            membership[v] = community_id
    return membership


def find_bridging_ties(
    graph: BaseGraph, communities: list[list[int]]
) -> list[BridgingTie]:
    """Directed edges of the original graph joining two different communities.

    Vertices missing from ``communities`` are ignored.
    """
    membership = community_membership(communities)
    ties: list[BridgingTie] = []

    for u in range(graph.vertex_count):
        comm_u = membership.get(u)
        if comm_u is None:
            continue
        for v in sorted(graph.successors(u)):
            comm_v = membership.get(v)
            if comm_v is not None and comm_v != comm_u:
                ties.append(BridgingTie(
                    source=u, target=v,
                    source_community=comm_u, target_community=comm_v,
                ))

    return ties

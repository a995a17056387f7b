# tests/unit/analysis/test_unit_centrality.py - v1
"""Tests for analysis/centrality.py."""

from __future__ import annotations

import random

import networkx as nx
import pytest

from collabgraph.analysis.centrality import (
    betweenness_centrality,
    closeness_centrality,
    degree_centrality,
    pagerank,
    rank_vertices,
)
from collabgraph.graph.networkx_adapter import to_networkx


def _random_edges(seed: int, n: int, p: float) -> list[tuple[int, int]]:
    rng = random.Random(seed)
    return [(u, v) for u in range(n) for v in range(n) if u != v and rng.random() < p]


class TestDegreeCentrality:
    def test_triangle(self, triangle_graph):
        assert degree_centrality(triangle_graph) == pytest.approx({0: 1.5, 1: 1.5, 2: 1.0})

    @pytest.mark.parametrize("n", [0, 1])
    def test_too_small(self, make_graph, n):
        assert degree_centrality(make_graph(n)) == {}


class TestClosenessCentrality:
    def test_scenario(self, make_graph):
        g = make_graph(3, [(0, 1), (1, 0), (2, 0)])
        assert closeness_centrality(g) == pytest.approx({0: 0.5, 1: 0.5, 2: 2 / 3})

    def test_unreachable_is_zero(self, make_graph):
        g = make_graph(3, [(0, 1)])
        result = closeness_centrality(g)
        assert result[1] == 0.0
        assert result[2] == 0.0
        assert result[0] == pytest.approx(0.5)

    @pytest.mark.parametrize("seed", range(4))
    def test_matches_networkx_outward(self, make_graph, seed):
        g = make_graph(8, _random_edges(seed, 8, 0.25))
        expected = nx.closeness_centrality(to_networkx(g).reverse())
        assert closeness_centrality(g) == pytest.approx(expected)


class TestPageRank:
    def test_sums_to_one(self, two_triangles_graph):
        ranks = pagerank(two_triangles_graph)
        assert sum(ranks.values()) == pytest.approx(1.0)
        assert all(r > 0 for r in ranks.values())

    def test_dangling_mass_spread_to_all(self, make_graph):
        g = make_graph(2, [(0, 1)])
        ranks = pagerank(g, max_iter=200, tol=1e-12)
        assert ranks[0] == pytest.approx(0.5 / 1.425, abs=1e-6)
        assert ranks[1] == pytest.approx(1 - 0.5 / 1.425, abs=1e-6)

    def test_single_iteration_uses_weights(self, make_graph):
        g = make_graph(3, [(0, 1, 3.0), (0, 2, 1.0)])
        ranks = pagerank(g, max_iter=1)
        assert ranks[0] == pytest.approx(0.238889, abs=1e-6)
        assert ranks[1] == pytest.approx(0.451389, abs=1e-6)
        assert ranks[2] == pytest.approx(0.309722, abs=1e-6)

    def test_zero_iterations_is_uniform(self, triangle_graph):
        assert pagerank(triangle_graph, max_iter=0) == pytest.approx({0: 1 / 3, 1: 1 / 3, 2: 1 / 3})

    def test_zero_damping_is_uniform(self, triangle_graph):
        assert pagerank(triangle_graph, damping=0.0) == pytest.approx({0: 1 / 3, 1: 1 / 3, 2: 1 / 3})

    def test_edgeless_graph_is_uniform(self, make_graph):
        assert pagerank(make_graph(4)) == pytest.approx({v: 0.25 for v in range(4)})

    def test_empty_graph(self, make_graph):
        assert pagerank(make_graph(0)) == {}

    @pytest.mark.parametrize("damping", [-0.1, 1.5])
    def test_invalid_damping(self, triangle_graph, damping):
        with pytest.raises(ValueError, match="damping"):
            pagerank(triangle_graph, damping=damping)

    def test_invalid_max_iter(self, triangle_graph):
        with pytest.raises(ValueError, match="max_iter"):
            pagerank(triangle_graph, max_iter=-1)


class TestBetweenness:
    def test_scenario(self, make_graph):
        g = make_graph(3, [(0, 1), (1, 0), (2, 0)])
        assert betweenness_centrality(g) == {0: 1.0, 1: 0.0, 2: 0.0}

    def test_path(self, make_graph):
        g = make_graph(4, [(0, 1), (1, 2), (2, 3)])
        assert betweenness_centrality(g) == {0: 0.0, 1: 2.0, 2: 2.0, 3: 0.0}

    @pytest.mark.parametrize("n", [1, 5])
    def test_edgeless_graph_is_zero(self, make_graph, n):
        assert betweenness_centrality(make_graph(n)) == {v: 0.0 for v in range(n)}

    def test_split_paths_share_credit(self, make_graph):
        g = make_graph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])
        assert betweenness_centrality(g) == pytest.approx({0: 0, 1: 0.5, 2: 0.5, 3: 0})

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_networkx(self, make_graph, seed):
        g = make_graph(9, _random_edges(seed, 9, 0.2))
        expected = nx.betweenness_centrality(to_networkx(g), normalized=False)
        assert betweenness_centrality(g) == pytest.approx(expected)


class TestRankVertices:
    def test_orders_by_score_then_index(self):
        scores = {0: 0.2, 1: 0.5, 2: 0.5, 3: 0.1}
        assert rank_vertices(scores, 3) == [(1, 0.5), (2, 0.5), (0, 0.2)]

    def test_top_n_larger_than_input(self):
        assert rank_vertices({0: 1.0}, 5) == [(0, 1.0)]

    def test_zero_top_n(self):
        assert rank_vertices({0: 1.0}, 0) == []

# tests/unit/graph/test_unit_graph_contract.py - v1
"""Tests for graph/base_graph.py contract, run against both backends."""

from __future__ import annotations

import pytest

from collabgraph.graph.base_graph import BaseGraph, check_vertex
from collabgraph.graph.dense_graph import DenseGraph
from collabgraph.graph.errors import EdgeNotFoundError, VertexOutOfRangeError
from collabgraph.graph.graph_factory import create_graph
from collabgraph.graph.sparse_graph import SparseGraph


class TestBaseGraph:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseGraph(3)  # type: ignore[abstract]

    def test_check_vertex(self):
        check_vertex(0, 1)
        with pytest.raises(VertexOutOfRangeError):
            check_vertex(1, 1)
        with pytest.raises(IndexError):
            check_vertex(-1, 5)


class TestConstruction:
    @pytest.mark.parametrize("n", [0, 1, 2, 7])
    def test_fresh_graph_is_empty(self, make_graph, n):
        g = make_graph(n)
        assert g.vertex_count == n
        assert g.edge_count == 0
        assert g.is_empty()
        for v in range(n):
            assert g.in_degree(v) == 0
            assert g.out_degree(v) == 0
            assert g.successors(v) == []
            assert g.predecessors(v) == []

    def test_negative_vertex_count(self, backend):
        with pytest.raises(ValueError, match="negative"):
            create_graph(-1, backend=backend)

    def test_default_vertex_weight(self, make_graph):
        g = make_graph(2)
        assert g.get_vertex_weight(0) == 1.0
        g.set_vertex_weight(1, 2.5)
        assert g.get_vertex_weight(1) == 2.5

    def test_repr(self, make_graph):
        g = make_graph(2, [(0, 1)])
        assert "vertices=2" in repr(g)
        assert "edges=1" in repr(g)


class TestEdges:
    def test_add_then_has(self, make_graph):
        g = make_graph(3)
        g.add_edge(0, 1)
        assert g.has_edge(0, 1)
        assert not g.has_edge(1, 0)
        assert g.get_edge_weight(0, 1) == 1.0
        assert g.edge_count == 1

    def test_add_is_idempotent(self, make_graph):
        g = make_graph(3)
        g.add_edge(0, 1)
        g.set_edge_weight(0, 1, 7.0)
        g.add_edge(0, 1)
        assert g.edge_count == 1
        assert g.get_edge_weight(0, 1) == 7.0

    @pytest.mark.parametrize("u", [0, 1, 2])
    def test_self_loop_ignored(self, make_graph, u):
        g = make_graph(3)
        g.add_edge(u, u)
        g.set_edge_weight(u, u, 4.0)
        assert g.edge_count == 0
        assert not g.has_edge(u, u)

    def test_remove_restores_state(self, make_graph):
        g = make_graph(3, [(1, 2)])
        g.add_edge(0, 1)
        g.remove_edge(0, 1)
        assert g.edge_count == 1
        assert not g.has_edge(0, 1)
        assert g.out_degree(0) == 0
        assert g.in_degree(1) == 0

    def test_remove_absent_is_noop(self, make_graph):
        g = make_graph(3, [(0, 1)])
        g.remove_edge(1, 0)
        assert g.edge_count == 1

    def test_set_weight_creates_edge(self, make_graph):
        g = make_graph(3)
        g.set_edge_weight(2, 0, 0.0)
        assert g.has_edge(2, 0)
        assert g.get_edge_weight(2, 0) == 0.0
        assert g.edge_count == 1

    def test_set_weight_overwrites(self, make_graph):
        g = make_graph(3, [(0, 1, 2.0)])
        g.set_edge_weight(0, 1, 5.5)
        assert g.edge_count == 1
        assert g.get_edge_weight(0, 1) == 5.5

    def test_missing_edge_weight_raises(self, make_graph):
        g = make_graph(3, [(0, 1)])
        with pytest.raises(EdgeNotFoundError, match="1 -> 0"):
            g.get_edge_weight(1, 0)

    def test_missing_edge_is_key_error(self, make_graph):
        g = make_graph(2)
        with pytest.raises(KeyError):
            g.get_edge_weight(0, 1)

    def test_degrees_and_neighbours(self, make_graph):
        g = make_graph(4, [(0, 1), (0, 2), (3, 0), (2, 1)])
        assert g.out_degree(0) == 2
        assert g.in_degree(0) == 1
        assert g.in_degree(1) == 2
        assert g.degree(0) == 3
        assert sorted(g.successors(0)) == [1, 2]
        assert sorted(g.predecessors(1)) == [0, 2]
        assert g.predecessors(3) == []

    def test_degree_sums_match_edge_count(self, make_graph):
        g = make_graph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0), (0, 2)])
        total_in = sum(g.in_degree(v) for v in range(5))
        total_out = sum(g.out_degree(v) for v in range(5))
        assert total_in == total_out == g.edge_count == 6

    def test_edges_iterator(self, make_graph):
        g = make_graph(3, [(2, 0, 1.5), (0, 1, 3.0)])
        assert sorted(g.edges()) == [(0, 1, 3.0), (2, 0, 1.5)]


class TestVertexValidation:
    @pytest.mark.parametrize("op", [
        lambda g: g.has_edge(0, 3),
        lambda g: g.add_edge(-1, 0),
        lambda g: g.remove_edge(3, 0),
        lambda g: g.set_edge_weight(0, 5, 1.0),
        lambda g: g.get_edge_weight(9, 0),
        lambda g: g.in_degree(3),
        lambda g: g.out_degree(-2),
        lambda g: g.successors(3),
        lambda g: g.predecessors(3),
        lambda g: g.get_vertex_weight(3),
        lambda g: g.set_vertex_weight(3, 1.0),
        lambda g: g.is_divergent(0, 1, 0, 3),
    ])
    def test_out_of_range_raises(self, make_graph, op):
        g = make_graph(3)
        with pytest.raises(VertexOutOfRangeError):
            op(g)

    def test_failed_add_does_not_mutate(self, make_graph):
        g = make_graph(3, [(0, 1)])
        with pytest.raises(VertexOutOfRangeError):
            g.set_edge_weight(0, 3, 2.0)
        assert g.edge_count == 1


class TestPredicates:
    def test_successor_predecessor(self, make_graph):
        g = make_graph(3, [(0, 1)])
        assert g.is_successor(0, 1)
        assert g.is_predecessor(1, 0)
        assert not g.is_successor(1, 0)

    def test_divergent(self, make_graph):
        g = make_graph(3, [(0, 1), (0, 2)])
        assert g.is_divergent(0, 1, 0, 2)
        assert not g.is_divergent(0, 1, 0, 1)
        assert not g.is_divergent(0, 1, 1, 2)

    def test_convergent(self, make_graph):
        g = make_graph(3, [(0, 2), (1, 2)])
        assert g.is_convergent(0, 2, 1, 2)
        assert not g.is_convergent(0, 2, 0, 2)
        assert not g.is_convergent(0, 2, 2, 1)

    def test_incident(self, make_graph):
        g = make_graph(3, [(0, 1)])
        assert g.is_incident(0, 1, 0)
        assert g.is_incident(0, 1, 1)
        assert not g.is_incident(0, 1, 2)
        assert not g.is_incident(1, 0, 1)

    def test_complete(self, make_graph):
        g = make_graph(3, [(u, v) for u in range(3) for v in range(3) if u != v])
        assert g.is_complete()
        g.remove_edge(0, 1)
        assert not g.is_complete()


class TestConnectivity:
    @pytest.mark.parametrize("n", [0, 1])
    def test_trivial_graphs_connected(self, make_graph, n):
        assert make_graph(n).is_connected()

    def test_weak_connectivity_ignores_direction(self, make_graph):
        # 1 and 2 only point into 0
        g = make_graph(3, [(1, 0), (2, 0)])
        assert g.is_connected()

    def test_isolated_vertex_disconnects(self, make_graph):
        g = make_graph(3, [(0, 1)])
        assert not g.is_connected()


class TestCopy:
    def test_copy_is_independent(self, make_graph, backend):
        g = make_graph(3, [(0, 1, 2.0)])
        g.set_vertex_weight(2, 9.0)
        clone = g.copy()
        clone.remove_edge(0, 1)
        clone.add_edge(1, 2)
        assert g.has_edge(0, 1)
        assert not g.has_edge(1, 2)
        assert clone.get_vertex_weight(2) == 9.0
        assert clone.backend_name == backend


class TestFactory:
    def test_backends(self):
        assert isinstance(create_graph(2, backend="sparse"), SparseGraph)
        assert isinstance(create_graph(2, backend="dense"), DenseGraph)

    def test_default_is_sparse(self):
        assert create_graph(2).backend_name == "sparse"

    def test_settings_backend(self):
        from collabgraph.config.settings import Settings

        s = Settings(_env_file=None, graph_backend="dense")
        assert create_graph(2, settings=s).backend_name == "dense"

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unsupported graph backend"):
            create_graph(2, backend="csr")

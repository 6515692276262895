# tests/test_graph.py
"""
Tests for the Graph model (graph/graph.py).

Covers:
    • Identifier normalisation and duplicate handling
    • Vertex delete (edge cascade) and rename
    • Edge add / update-in-place / delete / auto-created endpoints
    • Neighbour queries for directed and undirected graphs
    • Directedness flip, representations, to_dict
"""
import logging

import pytest

from algorithms import prim
from graph import Graph, Vertex
from graph.graph import PLACEMENT_X, PLACEMENT_Y


# ═════════════════════════════════════════════════════════════════
#  VERTICES
# ═════════════════════════════════════════════════════════════════

class TestVertexCRUD:

    def test_add_vertex_normalises_id(self, empty_graph):
        v = empty_graph.add_vertex("  a ", 10, 20)
        assert isinstance(v, Vertex)
        assert v.id == "A"
        assert v.label == "A"
        assert (v.x, v.y) == (10, 20)

    def test_duplicate_after_normalisation_is_no_op(self, empty_graph):
        first = empty_graph.add_vertex("a", 1, 1)
        assert empty_graph.add_vertex("A", 5, 5) is None
        assert empty_graph.vertex_ids() == ["A"]
        assert empty_graph.get_vertex("a") is first
        assert (first.x, first.y) == (1, 1)

    def test_unknown_vertex_queries_are_empty(self, empty_graph):
        assert empty_graph.get_vertex("nope") is None
        assert empty_graph.neighbours("nope") == []
        assert not empty_graph.has_vertex("nope")

    def test_delete_vertex_cascades_edges(self, sample_graph):
        sample_graph.delete_vertex("b")
        assert not sample_graph.has_vertex("B")
        assert all(not e.touches("B") for e in sample_graph.edges())
        assert [(e.source, e.target) for e in sample_graph.edges()] == [("A", "C"), ("C", "D")]

    def test_delete_unknown_vertex_is_harmless(self, sample_graph, caplog):
        with caplog.at_level(logging.DEBUG, logger="graph.graph"):
            sample_graph.delete_vertex("Z")
        assert "Deleted vertex" not in caplog.text
        assert sample_graph.vertex_count() == 4
        assert sample_graph.edge_count() == 4

    def test_update_position(self, sample_graph):
        sample_graph.update_vertex_position("c", 3, 4)
        v = sample_graph.get_vertex("C")
        assert (v.x, v.y) == (3, 4)


class TestRename:

    def test_rename_rewrites_edges_and_keeps_edge_order(self, sample_graph):
        assert sample_graph.rename_vertex("b", "x")
        assert sample_graph.vertex_ids() == ["A", "C", "D", "X"]
        assert sample_graph.get_vertex("X").label == "X"
        assert [(e.source, e.target) for e in sample_graph.edges()] == [
            ("A", "X"), ("A", "C"), ("X", "D"), ("C", "D"),
        ]
        assert sample_graph.get_edge("A", "X").weight == 1

    def test_renamed_vertex_moves_to_end_of_order(self, sample_graph):
        sample_graph.rename_vertex("A", "Z")
        assert sample_graph.vertex_ids() == ["B", "C", "D", "Z"]
        # first vertex seeds the spanning tree
        assert next(prim(sample_graph)).node_id == "B"

    def test_rename_to_existing_fails(self, sample_graph):
        assert sample_graph.rename_vertex("A", "c") is False
        assert sample_graph.vertex_ids() == ["A", "B", "C", "D"]

    def test_rename_to_same_id_is_true(self, sample_graph):
        assert sample_graph.rename_vertex("a", " A ")

    def test_rename_unknown_fails(self, sample_graph):
        assert sample_graph.rename_vertex("Q", "R") is False


# ═════════════════════════════════════════════════════════════════
#  EDGES
# ═════════════════════════════════════════════════════════════════

class TestEdgeCRUD:

    def test_add_edge_autocreates_endpoints_inside_placement_box(self, empty_graph):
        empty_graph.add_edge("p", "q")
        assert empty_graph.vertex_ids() == ["P", "Q"]
        for v in empty_graph.vertices():
            assert PLACEMENT_X[0] <= v.x <= PLACEMENT_X[1]
            assert PLACEMENT_Y[0] <= v.y <= PLACEMENT_Y[1]

    def test_add_edge_default_weight_and_directed_flag(self, empty_graph):
        e = empty_graph.add_edge("a", "b")
        assert e.weight == 1
        assert e.directed is False

    def test_duplicate_ordered_pair_updates_weight(self, sample_graph):
        sample_graph.add_edge("a", "b", 9)
        assert sample_graph.edge_count() == 4
        assert sample_graph.get_edge("A", "B").weight == 9
        assert sample_graph.edges()[0].key == ("A", "B")

    def test_reverse_pair_is_a_separate_edge(self, sample_graph):
        sample_graph.add_edge("B", "A", 5)
        assert sample_graph.edge_count() == 5

    def test_delete_edge(self, sample_graph):
        sample_graph.delete_edge("c", "d")
        assert sample_graph.get_edge("C", "D") is None
        assert sample_graph.edge_count() == 3

    def test_delete_edge_is_ordered(self, sample_graph):
        sample_graph.delete_edge("B", "A")
        assert sample_graph.get_edge("A", "B") is not None

    def test_update_edge_weight(self, sample_graph):
        sample_graph.update_edge_weight("b", "d", 7)
        assert sample_graph.get_edge("B", "D").weight == 7
        sample_graph.update_edge_weight("D", "B", 1)   # no such ordered pair
        assert sample_graph.get_edge("B", "D").weight == 7


# ═════════════════════════════════════════════════════════════════
#  QUERIES
# ═════════════════════════════════════════════════════════════════

class TestNeighbours:

    def test_undirected_is_symmetric(self, sample_graph):
        assert sample_graph.neighbours("a") == [("B", 1), ("C", 2)]
        assert sample_graph.neighbours("D") == [("B", 3), ("C", 1)]

    def test_directed_only_outgoing(self, directed_sample):
        assert directed_sample.neighbours("A") == [("B", 1), ("C", 2)]
        assert directed_sample.neighbours("D") == []

    def test_set_directed_retags_edges(self, sample_graph):
        sample_graph.set_directed(True)
        assert all(e.directed for e in sample_graph.edges())
        assert sample_graph.neighbours("D") == []
        sample_graph.set_directed(False)
        assert not any(e.directed for e in sample_graph.edges())
        assert sample_graph.neighbours("D") == [("B", 3), ("C", 1)]

    def test_new_edges_copy_graph_flag(self, directed_sample):
        assert directed_sample.add_edge("D", "E").directed is True


class TestRepresentations:

    def test_matrix_is_sorted_and_mirrored_when_undirected(self):
        g = Graph()
        g.add_edge("c", "a", 4)
        g.add_edge("b", "c", 2)
        rep = g.representations()
        assert rep.labels == ["A", "B", "C"]
        assert rep.matrix == [
            [0, 0, 4],
            [0, 0, 2],
            [4, 2, 0],
        ]
        assert list(rep.adjacency_list) == ["A", "B", "C"]
        assert rep.adjacency_list["C"] == [("A", 4), ("B", 2)]
        assert rep.edge_list == [("C", "A", 4), ("B", "C", 2)]

    def test_matrix_directed(self, directed_sample):
        rep = directed_sample.representations()
        assert rep.matrix[0] == [0, 1, 2, 0]
        assert rep.matrix[3] == [0, 0, 0, 0]

    def test_representations_to_dict(self, sample_graph):
        data = sample_graph.representations().to_dict()
        assert data["labels"] == ["A", "B", "C", "D"]
        assert data["adjacency_list"]["A"] == [{"node": "B", "weight": 1}, {"node": "C", "weight": 2}]
        assert data["edge_list"][0] == {"source": "A", "target": "B", "weight": 1}


class TestUtility:

    def test_to_dict(self, sample_graph):
        data = sample_graph.to_dict()
        assert data["directed"] is False
        assert [v["id"] for v in data["vertices"]] == ["A", "B", "C", "D"]
        assert data["edges"][1] == {"source": "A", "target": "C", "weight": 2, "directed": False}

    def test_clear(self, sample_graph):
        sample_graph.clear()
        assert sample_graph.vertex_count() == 0
        assert sample_graph.edge_count() == 0

    def test_seed_makes_placement_reproducible(self):
        a, b = Graph(seed=3), Graph(seed=3)
        a.add_edge("x", "y")
        b.add_edge("x", "y")
        assert [(v.x, v.y) for v in a.vertices()] == [(v.x, v.y) for v in b.vertices()]

    @pytest.mark.parametrize("raw", ["a", " a", "A ", "\ta\n"])
    def test_normalize_id(self, raw):
        assert Graph.normalize_id(raw) == "A"

# tests/test_bipartite.py
"""
Tests for the two-colouring check (algorithms/bipartite.py).
"""
from algorithms import bipartite
from algorithms.step import StepType


class TestBipartite:

    def test_even_cycle_is_bipartite(self, square):
        steps = list(bipartite(square))
        final = steps[-1]
        assert final.type == StepType.PARTITION
        assert final.partition == {"A": 0, "B": 1, "D": 1, "C": 0}
        zeros = sorted(v for v, c in final.partition.items() if c == 0)
        ones = sorted(v for v, c in final.partition.items() if c == 1)
        assert zeros == ["A", "C"] and ones == ["B", "D"]
        assert "[A, C] and [B, D]" in final.message

    def test_step_sequence(self, square):
        steps = list(bipartite(square))
        assert [(s.type.value, s.node_id or s.edge_to) for s in steps] == [
            ("node-current", "A"),
            ("edge-visit", "B"),
            ("edge-visit", "D"),
            ("node-current", "B"),
            ("edge-visit", "C"),
            ("node-current", "D"),
            ("node-current", "C"),
            ("partition", None),
        ]

    def test_steps_carry_colouring_snapshot(self, square):
        steps = list(bipartite(square))
        assert steps[0].partition == {"A": 0}
        assert steps[1].partition == {"A": 0, "B": 1}

    def test_chord_makes_it_non_bipartite(self, square, of_type):
        square.add_edge("A", "C")
        steps = list(bipartite(square))
        final = steps[-1]
        assert final.type == StepType.PARTITION
        assert (final.edge_from, final.edge_to) == ("B", "C")
        assert final.message.startswith("Not bipartite")
        assert len(of_type(steps, StepType.PARTITION)) == 1

    def test_conflict_stops_the_whole_check(self, empty_graph):
        for a, b in [("A", "B"), ("B", "C"), ("C", "A"), ("X", "Y")]:
            empty_graph.add_edge(a, b)
        steps = list(bipartite(empty_graph))
        assert steps[-1].type == StepType.PARTITION
        assert all(s.node_id not in ("X", "Y") for s in steps)
        assert all(s.edge_to not in ("X", "Y") for s in steps)

    def test_every_component_is_coloured(self, square):
        square.add_edge("X", "Y")
        square.add_vertex("Z")
        final = list(bipartite(square))[-1]
        assert final.partition["X"] == 0
        assert final.partition["Y"] == 1
        assert final.partition["Z"] == 0

    def test_empty_graph_is_trivially_bipartite(self, empty_graph):
        steps = list(bipartite(empty_graph))
        assert len(steps) == 1
        assert steps[0].partition == {}

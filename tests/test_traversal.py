# tests/test_traversal.py
"""
Tests for BFS and DFS (algorithms/bfs.py, algorithms/dfs.py).

Covers:
    • Exact step sequence on the sample graph
    • Completeness: one node-current per reachable vertex, none for unreachable
    • Directed reachability
    • Absent start vertex
"""
import pytest

from algorithms import bfs, dfs
from algorithms.step import StepType


def _shape(steps):
    """(tag, node or edge) tuples; enough to pin the order down."""
    out = []
    for s in steps:
        if s.type == StepType.EDGE_VISIT:
            out.append(("edge", s.edge_from, s.edge_to))
        else:
            out.append((s.type.value, s.node_id))
    return out


class TestBFS:

    def test_sequence_on_sample(self, sample_graph):
        steps = list(bfs(sample_graph, "a"))
        assert _shape(steps) == [
            ("node-current", "A"),
            ("edge", "A", "B"),
            ("edge", "A", "C"),
            ("node-complete", "A"),
            ("node-current", "B"),
            ("edge", "B", "D"),
            ("node-complete", "B"),
            ("node-current", "C"),
            ("node-complete", "C"),
            ("node-current", "D"),
            ("node-complete", "D"),
        ]

    def test_highlight_is_cumulative_visited_set(self, sample_graph):
        steps = list(bfs(sample_graph, "A"))
        assert steps[0].highlight_nodes == ("A",)
        assert steps[2].highlight_nodes == ("A", "B", "C")
        assert steps[-1].highlight_nodes == ("A", "B", "C", "D")

    def test_complete_message_lists_order(self, sample_graph):
        last = list(bfs(sample_graph, "A"))[-1]
        assert last.message.endswith("A → B → C → D")


class TestDFS:

    def test_sequence_on_sample(self, sample_graph):
        steps = list(dfs(sample_graph, "A"))
        assert _shape(steps) == [
            ("node-current", "A"),
            ("edge", "A", "B"),
            ("node-current", "B"),
            ("edge", "B", "D"),
            ("node-current", "D"),
            ("edge", "D", "C"),
            ("node-current", "C"),
            ("node-complete", "C"),
            ("node-complete", "D"),
            ("node-complete", "B"),
            ("node-complete", "A"),
        ]

    def test_neighbour_claimed_by_sibling_subtree_is_skipped(self, sample_graph):
        # C is reached through A → B → D → C, so A never follows A → C
        steps = list(dfs(sample_graph, "A"))
        edges = [(s.edge_from, s.edge_to) for s in steps if s.type == StepType.EDGE_VISIT]
        assert ("A", "C") not in edges

    def test_deep_path_does_not_hit_recursion_limit(self, empty_graph):
        for i in range(1500):
            empty_graph.add_edge(f"v{i}", f"v{i + 1}")
        steps = list(dfs(empty_graph, "v0"))
        assert sum(1 for s in steps if s.type == StepType.NODE_CURRENT) == 1501


@pytest.mark.parametrize("traverse", [bfs, dfs])
class TestTraversalCompleteness:

    def test_each_reachable_vertex_current_once(self, traverse, sample_graph, of_type):
        for start in "ABCD":
            current = [s.node_id for s in of_type(list(traverse(sample_graph, start)), StepType.NODE_CURRENT)]
            assert sorted(current) == ["A", "B", "C", "D"]

    def test_unreachable_vertices_never_stepped(self, traverse, sample_graph, of_type):
        sample_graph.add_edge("X", "Y")
        steps = list(traverse(sample_graph, "A"))
        touched = {s.node_id for s in steps} | {s.edge_to for s in steps}
        assert "X" not in touched and "Y" not in touched

    def test_directed_follows_edge_direction(self, traverse, directed_sample, of_type):
        current = [s.node_id for s in of_type(list(traverse(directed_sample, "B")), StepType.NODE_CURRENT)]
        assert current == ["B", "D"]

    def test_absent_start_yields_nothing(self, traverse, sample_graph):
        assert list(traverse(sample_graph, "Z")) == []

    def test_deterministic(self, traverse, sample_graph):
        assert list(traverse(sample_graph, "A")) == list(traverse(sample_graph, "A"))

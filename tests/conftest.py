# tests/conftest.py
"""
Shared test fixtures.

Sample graph (undirected unless stated):

    A --1-- B
    |       |
    2       3
    |       |
    C --1-- D

Vertices are created by add_edge in the order A, B, C, D.
"""
import pytest

from graph import Graph
from algorithms.step import StepType


SAMPLE_EDGES = [("A", "B", 1), ("A", "C", 2), ("B", "D", 3), ("C", "D", 1)]
SQUARE_EDGES = [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]


def _build(edges, directed=False) -> Graph:
    g = Graph(directed=directed, seed=7)
    for edge in edges:
        g.add_edge(*edge)
    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> Graph:
    return Graph(seed=7)


@pytest.fixture
def sample_graph() -> Graph:
    """Undirected A-B(1), A-C(2), B-D(3), C-D(1)."""
    return _build(SAMPLE_EDGES)


@pytest.fixture
def directed_sample() -> Graph:
    """Same edges as capacities A→B(1), A→C(2), B→D(3), C→D(1)."""
    return _build(SAMPLE_EDGES, directed=True)


@pytest.fixture
def square() -> Graph:
    """Even 4-cycle A-B-C-D-A, unit weights."""
    return _build(SQUARE_EDGES)


@pytest.fixture
def of_type():
    """Filter a step list down to one tag."""
    def _filter(steps, step_type: StepType):
        return [s for s in steps if s.type == step_type]
    return _filter

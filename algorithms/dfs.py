"""
dfs.py — Depth-First Traversal
===============================
Generator-based DFS with an explicit stack of frames instead of Python
recursion.  Each frame is (vertex, iterator over its neighbours), which
reproduces the recursive visiting order exactly: a vertex's neighbour list
is taken when the vertex is first visited and resumed after each child
finishes.

Yields a Step at:
  1. First visit of a vertex                    →  node-current
  2. Descending along an edge to an unseen one  →  edge-visit (before the child's node-current)
  3. Every neighbour examined                   →  node-complete
"""

from typing import Dict, Generator, Iterator, List, Tuple

from graph import Graph
from algorithms.step import Step, StepType, arrow, nodes


def dfs(graph: Graph, source: str) -> Generator[Step, None, None]:
    start = graph.normalize_id(source)
    if not graph.has_vertex(start):
        return

    visited: Dict[str, None] = {}
    order: List[str] = []
    stack: List[Tuple[str, Iterator[Tuple[str, float]]]] = []

    def enter(vertex: str) -> Step:
        visited[vertex] = None
        order.append(vertex)
        stack.append((vertex, iter(graph.neighbours(vertex))))
        return Step(
            StepType.NODE_CURRENT,
            node_id=vertex,
            highlight_nodes=nodes(visited),
            message=f"Visiting vertex {vertex}",
        )

    yield enter(start)

    while stack:
        vertex, pending = stack[-1]

        # next neighbour that is still unseen *now*; earlier siblings'
        # subtrees may have claimed some since this frame was pushed
        nbr = next((n for n, _ in pending if n not in visited), None)

        if nbr is None:
            stack.pop()
            yield Step(
                StepType.NODE_COMPLETE,
                node_id=vertex,
                highlight_nodes=nodes(visited),
                message=f"Finished {vertex}. Order: {arrow(order)}",
            )
            continue

        yield Step(
            StepType.EDGE_VISIT,
            edge_from=vertex,
            edge_to=nbr,
            message=f"Following edge {vertex} → {nbr}",
        )
        yield enter(nbr)

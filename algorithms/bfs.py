"""
bfs.py — Breadth-First Traversal
=================================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Dequeue a vertex             →  node-current (cumulative visited set)
  2. Discover an unseen neighbour →  edge-visit
  3. All edges of the vertex seen →  node-complete (visit order so far)

Edges to already-visited vertices produce no step.  Vertices that are not
reachable from the start are never stepped.
"""

from collections import deque
from typing import Dict, Generator, List

from graph import Graph
from algorithms.step import Step, StepType, arrow, nodes


def bfs(graph: Graph, source: str) -> Generator[Step, None, None]:
    """
    Args:
        graph  : The graph to traverse (read-only).
        source : Start vertex id (normalised here).

    Yields:
        Step – node-current / edge-visit / node-complete per vertex.
    """
    start = graph.normalize_id(source)
    if not graph.has_vertex(start):
        return

    # dict used as an insertion-ordered set
    visited: Dict[str, None] = {start: None}
    queue = deque([start])
    order: List[str] = []

    while queue:
        current = queue.popleft()
        order.append(current)

        yield Step(
            StepType.NODE_CURRENT,
            node_id=current,
            highlight_nodes=nodes(visited),
            message=f"Visiting vertex {current}",
        )

        for nbr, _ in graph.neighbours(current):
            if nbr in visited:
                continue
            visited[nbr] = None
            queue.append(nbr)

            yield Step(
                StepType.EDGE_VISIT,
                edge_from=current,
                edge_to=nbr,
                highlight_nodes=nodes(visited),
                message=f"Discovered {nbr} via edge {current} → {nbr}",
            )

        yield Step(
            StepType.NODE_COMPLETE,
            node_id=current,
            highlight_nodes=nodes(visited),
            message=f"Finished {current}. Order: {arrow(order)}",
        )

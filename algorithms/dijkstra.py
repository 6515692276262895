"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra for a single (source, target) pair.

Selection is a linear scan over the vertices in insertion order rather
than a heap: on equal distances the vertex inserted first wins, which a
heap keyed on (distance, id) would not guarantee.

Yields a Step at:
  1. Vertex selected as the closest unvisited one  →  node-current (value = its distance)
  2. Strict improvement of a neighbour's distance  →  edge-visit (value = new distance)
  3. End of the search                             →  path-found (with or without a path)

Correctness note: Dijkstra requires non-negative weights.
"""

from typing import Dict, Generator, List, Optional

from graph import Graph
from algorithms.step import Step, StepType, arrow, nodes

INF = float("inf")


def dijkstra(graph: Graph, source: str, target: str) -> Generator[Step, None, None]:
    start = graph.normalize_id(source)
    end = graph.normalize_id(target)
    vertex_ids = graph.vertex_ids()

    dist: Dict[str, float] = {vid: INF for vid in vertex_ids}
    parent: Dict[str, Optional[str]] = {vid: None for vid in vertex_ids}
    if start in dist:
        dist[start] = 0
    visited: Dict[str, None] = {}

    # --- main loop ---
    while len(visited) < len(vertex_ids):
        current: Optional[str] = None
        best = INF
        for vid in vertex_ids:
            if vid not in visited and dist[vid] < best:
                best = dist[vid]
                current = vid

        if current is None:
            break   # everything left is unreachable

        visited[current] = None
        yield Step(
            StepType.NODE_CURRENT,
            node_id=current,
            value=best,
            highlight_nodes=nodes(visited),
            message=f"Processing {current} (distance {best})",
        )

        for nbr, weight in graph.neighbours(current):
            if nbr in visited:
                continue
            new_dist = dist[current] + weight
            if new_dist < dist.get(nbr, INF):
                dist[nbr] = new_dist
                parent[nbr] = current
                yield Step(
                    StepType.EDGE_VISIT,
                    edge_from=current,
                    edge_to=nbr,
                    value=new_dist,
                    message=f"Updated distance to {nbr}: {new_dist}",
                )

    # --- reconstruct ---
    path = _reconstruct(parent, end)
    total = dist.get(end, INF)

    if path[0] == start and total != INF:
        yield Step(
            StepType.PATH_FOUND,
            path=tuple(path),
            total_weight=total,
            highlight_nodes=nodes(path),
            message=f"Shortest path: {arrow(path)} (total weight {total})",
        )
    else:
        yield Step(
            StepType.PATH_FOUND,
            message=f"No path exists from {start} to {end}",
        )


# ---------------------------------------------------------------------------
def _reconstruct(parent: Dict[str, Optional[str]], target: str) -> List[str]:
    path, cur = [], target
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path

"""
max_flow.py — Maximum Flow (Ford–Fulkerson with BFS, i.e. Edmonds–Karp)
=========================================================================
Residual capacities live in a nested dict  residual[u][v].  It is seeded
with one entry per stored edge (source → target, capacity = weight); the
reverse entry v → u is created lazily at 0 the first time flow is pushed
along u → v.

If both u → v and v → u exist as original edges they keep their own
entries; pushing flow along one adds to the other's residual as the
reverse capacity.

Each round runs `_augmenting_path`, a sub-generator that yields the BFS
exploration steps and *returns* the path it found (or None); the caller
receives it through `yield from`.  Every successful round raises the flow
by a positive bottleneck, so the loop ends for integer / rational weights.
"""

from collections import deque
from typing import Dict, Generator, List, Optional

from graph import Graph
from algorithms.exceptions import GraphInvariantError
from algorithms.step import Step, StepType, arrow, nodes

Residual = Dict[str, Dict[str, float]]


def edmonds_karp(graph: Graph, source: str, target: str) -> Generator[Step, None, None]:
    src = graph.normalize_id(source)
    sink = graph.normalize_id(target)

    residual: Residual = {vid: {} for vid in graph.vertex_ids()}
    for e in graph.edges():
        if e.source not in residual or e.target not in residual:
            raise GraphInvariantError(f"Edge {e.source} → {e.target} references a missing vertex")
        residual[e.source][e.target] = e.weight

    max_flow = 0

    while True:
        path = yield from _augmenting_path(residual, src, sink)
        if not path or len(path) < 2:
            break

        bottleneck = min(residual[u][v] for u, v in zip(path, path[1:]))

        for u, v in zip(path, path[1:]):
            residual[u][v] -= bottleneck
            residual[v][u] = residual[v].get(u, 0) + bottleneck

        max_flow += bottleneck

        yield Step(
            StepType.FLOW_UPDATE,
            path=tuple(path),
            value=bottleneck,
            total_weight=max_flow,
            message=f"Pushed {bottleneck} along {arrow(path)}. Total flow: {max_flow}",
        )

    yield Step(
        StepType.NODE_COMPLETE,
        total_weight=max_flow,
        message=f"Maximum flow from {src} to {sink}: {max_flow}",
    )


def _augmenting_path(
    residual: Residual,
    source: str,
    sink: str,
) -> Generator[Step, None, Optional[List[str]]]:
    """BFS over strictly positive residual entries.  Returns the path to `sink` or None."""
    if source not in residual:
        return None

    visited: Dict[str, None] = {source: None}
    queue: deque = deque([(source, [source])])

    while queue:
        current, path = queue.popleft()

        yield Step(
            StepType.NODE_CURRENT,
            node_id=current,
            highlight_nodes=nodes(visited),
            message=f"Searching for an augmenting path: {arrow(path)}",
        )

        if current == sink:
            return path

        for nbr, cap in residual[current].items():
            if nbr in visited or cap <= 0:
                continue
            visited[nbr] = None
            queue.append((nbr, path + [nbr]))
            yield Step(
                StepType.EDGE_VISIT,
                edge_from=current,
                edge_to=nbr,
                value=cap,
                message=f"Found edge {current} → {nbr} (residual capacity {cap})",
            )

    return None

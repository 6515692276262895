"""
euler.py — Eulerian Path / Circuit (Hierholzer)
=================================================
Stack-based edge consumption:

    stack ← [start]
    while stack:
        top ← stack[-1]
        if top has an unused edge:  mark it used, push the far end
        else:                       pop top onto the path
    reverse(path)

The start vertex is the first one (insertion order) with odd degree, or
the first vertex when every degree is even.  Degree counts the source
end of every edge, and the target end only for undirected graphs, so
directed graphs get out-degree alone.

No check is made that the graph is connected or has at most two odd
vertices; such input produces a partial path.

`fleury` is registered as a separate algorithm but runs exactly the same
construction; there is no bridge detection.
"""

from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph
from algorithms.exceptions import GraphInvariantError
from algorithms.step import Step, StepType, arrow


def hierholzer(graph: Graph) -> Generator[Step, None, None]:
    directed = graph.directed
    edges = [(e.source, e.target) for e in graph.edges()]
    used = [False] * len(edges)

    start = _start_vertex(graph, edges)
    stack: List[str] = [start] if start is not None else []
    path: List[str] = []

    def unused_edge(vertex: str) -> Optional[Tuple[int, str]]:
        for i, (a, b) in enumerate(edges):
            if used[i]:
                continue
            if a == vertex:
                return i, b
            if not directed and b == vertex:
                return i, a
        return None

    while stack:
        current = stack[-1]

        yield Step(
            StepType.NODE_CURRENT,
            node_id=current,
            path=tuple(path),
            message=f"Top of stack: {current}, stack: [{', '.join(stack)}]",
        )

        found = unused_edge(current)
        if found is not None:
            i, nxt = found
            used[i] = True
            stack.append(nxt)
            yield Step(
                StepType.EDGE_VISIT,
                edge_from=current,
                edge_to=nxt,
                path=tuple(path),
                message=f"Walking edge {current} → {nxt}",
            )
        else:
            stack.pop()
            path.append(current)
            yield Step(
                StepType.EULER_PATH,
                node_id=current,
                path=tuple(path),
                message=f"Added {current} to the path. Path: {arrow(reversed(path))}",
            )

    path.reverse()
    yield Step(
        StepType.NODE_COMPLETE,
        path=tuple(path),
        message=f"Euler path: {arrow(path)}" if path else "Graph has no vertices",
    )


def fleury(graph: Graph) -> Generator[Step, None, None]:
    yield from hierholzer(graph)


# ---------------------------------------------------------------------------
def _start_vertex(graph: Graph, edges: List[Tuple[str, str]]) -> Optional[str]:
    degree: Dict[str, int] = {vid: 0 for vid in graph.vertex_ids()}
    for a, b in edges:
        if a not in degree or b not in degree:
            raise GraphInvariantError(f"Edge {a} → {b} references a missing vertex")
        degree[a] += 1
        if not graph.directed:
            degree[b] += 1

    for vid, deg in degree.items():
        if deg % 2 == 1:
            return vid
    return next(iter(degree), None)

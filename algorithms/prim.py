"""
prim.py — Prim's Minimum Spanning Tree
========================================
Grows the tree from the first inserted vertex.  Every round rescans all
crossing edges (tens of vertices, so no priority queue): in-tree vertices
in vertex insertion order, then each one's edges in edge insertion order.
The strictly lighter edge wins, so on ties the first one found is kept.

A disconnected graph stops early with a partial tree; that is a valid
result, not an error.
"""

from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph
from algorithms.step import Step, StepType, nodes, pairs


def prim(graph: Graph) -> Generator[Step, None, None]:
    vertex_ids = graph.vertex_ids()
    if not vertex_ids:
        return

    root = vertex_ids[0]
    in_tree: Dict[str, None] = {root: None}
    tree_edges: List[Tuple[str, str]] = []
    total = 0

    yield Step(
        StepType.NODE_VISIT,
        node_id=root,
        highlight_nodes=(root,),
        message=f"Starting from vertex {root}",
    )

    while len(in_tree) < len(vertex_ids):
        best: Optional[Tuple[str, str, float]] = None

        for vid in vertex_ids:
            if vid not in in_tree:
                continue
            for nbr, weight in graph.neighbours(vid):
                if nbr in in_tree:
                    continue
                if best is None or weight < best[2]:
                    best = (vid, nbr, weight)

        if best is None:
            break   # disconnected

        src, dst, weight = best
        in_tree[dst] = None
        tree_edges.append((src, dst))
        total += weight

        yield Step(
            StepType.MST_EDGE,
            edge_from=src,
            edge_to=dst,
            value=weight,
            highlight_nodes=nodes(in_tree),
            highlight_edges=pairs(tree_edges),
            message=f"Added edge {src}-{dst} (weight {weight}). Total weight: {total}",
        )

    covered = len(in_tree) == len(vertex_ids)
    yield Step(
        StepType.NODE_COMPLETE,
        highlight_nodes=nodes(in_tree),
        highlight_edges=pairs(tree_edges),
        total_weight=total,
        message=(
            f"Minimum spanning tree complete! Total weight: {total}"
            if covered else
            f"Graph is disconnected; spanning tree covers {len(in_tree)} of "
            f"{len(vertex_ids)} vertices. Total weight: {total}"
        ),
    )

"""
kruskal.py — Kruskal's Minimum Spanning Tree
==============================================
Edges are considered in ascending weight order.  `sorted` is stable, so
equal weights keep edge insertion order.  A union-find over the vertices
rejects any edge whose endpoints are already connected.

Yields, per edge:
  • edge-visit     – the edge is being considered
  • mst-edge       – accepted (endpoints were in different components)
  • node-complete  – rejected, would close a cycle (no structural change)
and a final node-complete with the total weight.
"""

from typing import Dict, Generator, Iterable, List, Tuple

from graph import Graph
from algorithms.exceptions import GraphInvariantError
from algorithms.step import Step, StepType, nodes, pairs


class UnionFind:
    """Disjoint sets with path compression and union by rank."""

    def __init__(self, items: Iterable[str]):
        self.parent: Dict[str, str] = {}
        self.rank:   Dict[str, int] = {}
        for item in items:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, x: str) -> str:
        if x not in self.parent:
            raise GraphInvariantError(f"Edge endpoint {x!r} is not a vertex of the graph")
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b.  False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        return True


def kruskal(graph: Graph) -> Generator[Step, None, None]:
    ordered = sorted(graph.edges(), key=lambda e: e.weight)
    sets = UnionFind(graph.vertex_ids())

    tree_edges: List[Tuple[str, str]] = []
    tree_nodes: Dict[str, None] = {}
    total = 0

    for edge in ordered:
        a, b, w = edge.source, edge.target, edge.weight

        yield Step(
            StepType.EDGE_VISIT,
            edge_from=a,
            edge_to=b,
            value=w,
            highlight_edges=pairs(tree_edges),
            message=f"Considering edge {a}-{b} (weight {w})",
        )

        if sets.union(a, b):
            tree_edges.append((a, b))
            tree_nodes.update(dict.fromkeys((a, b)))
            total += w
            yield Step(
                StepType.MST_EDGE,
                edge_from=a,
                edge_to=b,
                value=w,
                highlight_nodes=nodes(tree_nodes),
                highlight_edges=pairs(tree_edges),
                message=f"Added edge {a}-{b}. Total weight: {total}",
            )
        else:
            yield Step(
                StepType.NODE_COMPLETE,
                highlight_edges=pairs(tree_edges),
                message=f"Rejected edge {a}-{b} (would create a cycle)",
            )

    yield Step(
        StepType.NODE_COMPLETE,
        highlight_edges=pairs(tree_edges),
        total_weight=total,
        message=f"Minimum spanning tree complete! Total weight: {total}",
    )

"""
graph.py — Graph Container
==========================
Single source of truth for the graph.  Algorithms, the API layer and the
renderer all talk to this object.

Responsibilities:
  1. CRUD on vertices & edges               (add / delete / rename / update)
  2. Adjacency queries                      (neighbours, honouring directedness)
  3. Derived structural views               (matrix, adjacency list, edge list)
  4. Serialisation for the API              (to_dict)

Design decisions:
  - Every identifier argument goes through `normalize_id` (trim + upper)
    before lookup, so "a", " a " and "A" name the same vertex.
  - Vertices live in a dict keyed by id; edges in a dict keyed by the
    ordered (source, target) pair.  Both keep insertion order, which the
    algorithms rely on for deterministic tie-breaks.
  - No separate adjacency index: graphs are tens of vertices and the
    neighbour scan over the edge dict keeps edge-insertion order for free.
  - Queries on unknown ids return empty results; duplicate mutations
    return a sentinel (None / False).  Nothing here raises for user input.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from graph.vertex import Vertex
from graph.edge import Edge

logger = logging.getLogger(__name__)

# Auto-created endpoints are dropped somewhere inside this box.
PLACEMENT_X: Tuple[float, float] = (100.0, 700.0)
PLACEMENT_Y: Tuple[float, float] = (100.0, 500.0)


# ---------------------------------------------------------------------------
# Representations: derived, read-only views
# ---------------------------------------------------------------------------
@dataclass
class GraphRepresentation:
    """
    Attributes:
        labels         : Vertex ids sorted lexicographically; index = row/column.
        matrix         : matrix[i][j] = weight of labels[i] → labels[j], 0 if none.
        adjacency_list : {vertex_id: [(neighbour_id, weight)]} in `labels` order.
        edge_list      : [(source, target, weight)] in edge-insertion order.
    """

    labels:         List[str]                                = field(default_factory=list)
    matrix:         List[List[float]]                        = field(default_factory=list)
    adjacency_list: Dict[str, List[Tuple[str, float]]]       = field(default_factory=dict)
    edge_list:      List[Tuple[str, str, float]]             = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "labels": list(self.labels),
            "matrix": [list(row) for row in self.matrix],
            "adjacency_list": {
                vid: [{"node": n, "weight": w} for n, w in nbrs]
                for vid, nbrs in self.adjacency_list.items()
            },
            "edge_list": [
                {"source": s, "target": t, "weight": w} for s, t, w in self.edge_list
            ],
        }


class Graph:
    """
    Attributes:
        directed   : bool – graph-level directedness, copied onto every edge
        _vertices  : {vertex_id: Vertex}
        _edges     : {(source, target): Edge}
        _rng       : random source for auto-placed vertices
    """

    def __init__(self, directed: bool = False, seed: Optional[int] = None):
        self.directed:  bool                         = directed
        self._vertices: Dict[str, Vertex]            = {}
        self._edges:    Dict[Tuple[str, str], Edge]  = {}
        self._rng:      random.Random                = random.Random(seed)

    @staticmethod
    def normalize_id(vertex_id: str) -> str:
        return str(vertex_id).strip().upper()

    # ==================================================================
    # VERTEX CRUD
    # ==================================================================
    def add_vertex(self, vertex_id: str, x: float = 0.0, y: float = 0.0) -> Optional[Vertex]:
        """Add a vertex.  Returns None (and changes nothing) if the id is taken."""
        vid = self.normalize_id(vertex_id)
        if vid in self._vertices:
            return None
        vertex = Vertex(vid, x, y)
        self._vertices[vid] = vertex
        logger.debug("Added vertex %s at (%.1f, %.1f)", vid, x, y)
        return vertex

    def update_vertex_position(self, vertex_id: str, x: float, y: float) -> None:
        vertex = self.get_vertex(vertex_id)
        if vertex is not None:
            vertex.move_to(x, y)

    def delete_vertex(self, vertex_id: str) -> None:
        vid = self.normalize_id(vertex_id)
        if self._vertices.pop(vid, None) is None:
            return
        # cascade: drop every edge touching this vertex
        self._edges = {key: e for key, e in self._edges.items() if not e.touches(vid)}
        logger.debug("Deleted vertex %s", vid)

    def rename_vertex(self, old_id: str, new_id: str) -> bool:
        """
        Rename a vertex and rewrite every edge endpoint that referenced it.
        The vertex moves to the end of the vertex order; edges keep theirs.
        Returns False if `new_id` already exists or `old_id` is unknown.
        """
        old = self.normalize_id(old_id)
        new = self.normalize_id(new_id)

        if old == new:
            return True
        if new in self._vertices or old not in self._vertices:
            return False

        vertex = self._vertices.pop(old)
        vertex.rename(new)
        self._vertices[new] = vertex

        # edges keep their order, only the keys change
        edges: Dict[Tuple[str, str], Edge] = {}
        for e in self._edges.values():
            if e.source == old:
                e.source = new
            if e.target == old:
                e.target = new
            edges[e.key] = e
        self._edges = edges

        logger.debug("Renamed vertex %s -> %s", old, new)
        return True

    def get_vertex(self, vertex_id: str) -> Optional[Vertex]:
        return self._vertices.get(self.normalize_id(vertex_id))

    def has_vertex(self, vertex_id: str) -> bool:
        return self.normalize_id(vertex_id) in self._vertices

    def vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    def vertex_ids(self) -> List[str]:
        return list(self._vertices.keys())

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, source: str, target: str, weight: float = 1) -> Edge:
        """
        Add source → target.  Missing endpoints are created at a random
        position; an existing edge on the same ordered pair just gets the
        new weight.
        """
        src = self.normalize_id(source)
        tgt = self.normalize_id(target)

        for vid in (src, tgt):
            if vid not in self._vertices:
                self.add_vertex(
                    vid,
                    self._rng.uniform(*PLACEMENT_X),
                    self._rng.uniform(*PLACEMENT_Y),
                )

        existing = self._edges.get((src, tgt))
        if existing is not None:
            existing.weight = weight
            logger.debug("Updated edge %s -> %s weight to %s", src, tgt, weight)
            return existing

        edge = Edge(src, tgt, weight=weight, directed=self.directed)
        self._edges[edge.key] = edge
        logger.debug("Added edge %s -> %s (w=%s)", src, tgt, weight)
        return edge

    def delete_edge(self, source: str, target: str) -> None:
        key = (self.normalize_id(source), self.normalize_id(target))
        if self._edges.pop(key, None) is not None:
            logger.debug("Deleted edge %s -> %s", *key)

    def update_edge_weight(self, source: str, target: str, weight: float) -> None:
        edge = self.get_edge(source, target)
        if edge is not None:
            edge.weight = weight

    def get_edge(self, source: str, target: str) -> Optional[Edge]:
        """Exact ordered-pair lookup (no symmetry for undirected graphs)."""
        return self._edges.get((self.normalize_id(source), self.normalize_id(target)))

    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, vertex_id: str) -> List[Tuple[str, float]]:
        """
        Return [(neighbour_id, weight)] in edge-insertion order.
        An undirected edge is reported from both of its endpoints.
        """
        vid = self.normalize_id(vertex_id)
        result: List[Tuple[str, float]] = []
        for e in self._edges.values():
            if e.source == vid:
                result.append((e.target, e.weight))
            if not self.directed and e.target == vid:
                result.append((e.source, e.weight))
        return result

    def set_directed(self, directed: bool) -> None:
        self.directed = directed
        for e in self._edges.values():
            e.directed = directed
        logger.debug("Graph is now %s", "directed" if directed else "undirected")

    # ==================================================================
    # REPRESENTATIONS
    # ==================================================================
    def representations(self) -> GraphRepresentation:
        labels = sorted(self._vertices)
        index = {vid: i for i, vid in enumerate(labels)}
        n = len(labels)

        matrix: List[List[float]] = [[0] * n for _ in range(n)]
        for e in self._edges.values():
            i, j = index.get(e.source), index.get(e.target)
            if i is None or j is None:
                continue
            matrix[i][j] = e.weight
            if not self.directed:
                matrix[j][i] = e.weight

        return GraphRepresentation(
            labels=labels,
            matrix=matrix,
            adjacency_list={vid: self.neighbours(vid) for vid in labels},
            edge_list=[(e.source, e.target, e.weight) for e in self._edges.values()],
        )

    # ==================================================================
    # SERIALISATION / UTILITY
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "directed": self.directed,
            "vertices": [v.to_dict() for v in self._vertices.values()],
            "edges":    [e.to_dict() for e in self._edges.values()],
        }

    def clear(self) -> None:
        self._vertices.clear()
        self._edges.clear()

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()}, directed={self.directed})"

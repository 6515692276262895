"""
edge.py — Graph Edge
====================
Connects two vertices by their identifiers.

Design decisions:
  - `source` and `target` are vertex-id strings, NOT Vertex references.
    Renaming a vertex therefore means rewriting the endpoints here.
  - Weight defaults to 1.  It is a distance for the path / tree
    algorithms and a capacity for max-flow.
  - `directed` is copied from the Graph when the edge is created and
    retagged whenever the Graph flips its flag.
  - An undirected edge is stored once; the Graph treats it as symmetric
    when answering neighbour queries.
"""

from typing import Any, Dict, Optional, Tuple


class Edge:
    """
    Attributes:
        source   : ID of the tail vertex.
        target   : ID of the head vertex.
        weight   : Numeric cost / capacity (default 1).
        directed : If False, traversal works in both directions.
    """

    __slots__ = ("source", "target", "weight", "directed")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1,
        directed: bool = False,
    ):
        self.source:   str   = source
        self.target:   str   = target
        self.weight:   float = weight
        self.directed: bool  = directed

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def key(self) -> Tuple[str, str]:
        """Ordered (source, target) pair; at most one edge per key."""
        return (self.source, self.target)

    def touches(self, vertex_id: str) -> bool:
        return self.source == vertex_id or self.target == vertex_id

    def other_end(self, vertex_id: str) -> Optional[str]:
        """Given one endpoint, return the other. None if it can't be traversed from there."""
        if vertex_id == self.source:
            return self.target
        if vertex_id == self.target and not self.directed:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "source":   self.source,
            "target":   self.target,
            "weight":   self.weight,
            "directed": self.directed,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.key == other.key
            and self.weight == other.weight
            and self.directed == other.directed
        )

    def __hash__(self) -> int:
        return hash(self.key)

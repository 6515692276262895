"""
vertex.py — Graph Vertex
========================
A vertex is identified by a normalised (trimmed, upper-cased) string.
The position is only carried for the renderer; algorithms never read it.
"""

from typing import Any, Dict


class Vertex:
    """
    Attributes:
        id     : Normalised identifier, unique inside one Graph.
        label  : Display label, always equal to `id`.
        x, y   : Canvas coordinates.
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(self, vertex_id: str, x: float = 0.0, y: float = 0.0):
        self.id:    str   = vertex_id
        self.label: str   = vertex_id
        self.x:     float = x
        self.y:     float = y

    def rename(self, new_id: str) -> None:
        self.id    = new_id
        self.label = new_id

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":    self.id,
            "label": self.label,
            "x":     self.x,
            "y":     self.y,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vertex(id={self.id}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Vertex) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

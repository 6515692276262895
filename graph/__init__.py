"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Vertex, Edge
    from graph import GraphRepresentation
"""

from graph.vertex import Vertex
from graph.edge   import Edge
from graph.graph  import Graph, GraphRepresentation

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "GraphRepresentation",
]

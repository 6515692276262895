"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the stepper knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, needs_source, needs_target, …),
        …
    }

Every `fn` is a generator function taking the graph first, then
`source` / `target` when the card says it needs them.  The engine and the
API both consume AlgoInfo, so adding an algorithm is: write the
generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bfs       import bfs
from algorithms.dfs       import dfs
from algorithms.dijkstra  import dijkstra
from algorithms.bipartite import bipartite
from algorithms.prim      import prim
from algorithms.kruskal   import kruskal, UnionFind
from algorithms.max_flow  import edmonds_karp
from algorithms.euler     import hierholzer, fleury
from algorithms.step      import Step, StepType


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # the generator function
    needs_source:     bool      = False      # takes a start / source vertex?
    needs_target:     bool      = False      # takes an end / sink vertex?
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":              self.key,
            "label":            self.label,
            "needs_source":     self.needs_source,
            "needs_target":     self.needs_target,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=bfs, needs_source=True,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores level by level, visiting every neighbour before going deeper.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=dfs, needs_source=True,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Follows one branch as deep as it goes before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=dijkstra,
        needs_source=True, needs_target=True,
        tags=["weighted", "shortest-path"],
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Shortest path between two vertices of a non-negatively weighted graph.",
    ),

    "bipartite": AlgoInfo(
        key="bipartite", label="Bipartite Check", fn=bipartite,
        tags=["property"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Tries to two-colour the graph so that no edge joins equal colours.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", fn=prim,
        tags=["weighted", "mst"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Grows a spanning tree by always adding the lightest edge leaving it.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", fn=kruskal,
        tags=["weighted", "mst", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Adds edges lightest first, skipping any that would close a cycle.",
    ),

    "ford_fulkerson": AlgoInfo(
        key="ford_fulkerson", label="Ford–Fulkerson (Edmonds–Karp)", fn=edmonds_karp,
        needs_source=True, needs_target=True,
        tags=["weighted", "flow"],
        complexity_time="O(V · E²)", complexity_space="O(V²)",
        description="Maximum flow from source to sink via shortest augmenting paths.",
    ),

    "hierholzer": AlgoInfo(
        key="hierholzer", label="Hierholzer's Algorithm", fn=hierholzer,
        tags=["euler"],
        complexity_time="O(E²)", complexity_space="O(E)",
        description="Builds an Euler path or circuit, using every edge exactly once.",
    ),

    "fleury": AlgoInfo(
        key="fleury", label="Fleury's Algorithm", fn=fleury,
        tags=["euler"],
        complexity_time="O(E²)", complexity_space="O(E)",
        description="Euler path / circuit. Runs the same construction as Hierholzer (no bridge check).",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Step",
    "StepType",
    "UnionFind",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "bfs",
    "dfs",
    "dijkstra",
    "bipartite",
    "prim",
    "kruskal",
    "edmonds_karp",
    "hierholzer",
    "fleury",
]

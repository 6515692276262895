"""
step.py — Algorithm Step Record
================================
Every algorithm is a generator that yields Step objects.  A Step is one
externally observable event: "now examining B", "edge A→C accepted into
the tree", "augmenting path applied".  The renderer replays them; it never
looks at the algorithm's private state.

Design decisions:
  - Step is a frozen dataclass.  Sequences are stored as tuples and the
    partition mapping is copied by the producer, so nothing can change
    after the step is yielded.
  - The `type` tag decides which optional fields are meaningful; see
    the table in StepType.
  - `to_dict` drops fields that are None / empty, so the JSON payload for
    each tag carries only what that tag uses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple


# ---------------------------------------------------------------------------
# Step tags
# ---------------------------------------------------------------------------
class StepType(Enum):
    NODE_CURRENT  = "node-current"    # examining node_id right now
    NODE_VISIT    = "node-visit"      # processing of node_id started
    NODE_COMPLETE = "node-complete"   # processing finished / run summary / "no change"
    EDGE_VISIT    = "edge-visit"      # edge_from → edge_to examined or accepted
    PATH_FOUND    = "path-found"      # terminal result of a path search
    PARTITION     = "partition"       # bipartite colouring result or conflict
    MST_EDGE      = "mst-edge"        # edge accepted into the spanning tree
    FLOW_UPDATE   = "flow-update"     # one augmenting path applied
    EULER_PATH    = "euler-path"      # vertex appended to the Euler path


Pair = Tuple[str, str]


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        type            : StepType tag.
        message         : Human-readable description of the event.
        node_id         : Vertex the event is about.
        edge_from       : Tail of the edge the event is about.
        edge_to         : Head of the edge the event is about.
        value           : Distance / weight / capacity / bottleneck, per tag.
        highlight_nodes : Vertices the renderer should emphasise.
        highlight_edges : (from, to) pairs the renderer should emphasise.
        partition       : {vertex_id: 0 | 1} colouring snapshot.
        path            : Ordered vertex ids (path found, augmenting path, Euler path).
        total_weight    : Running / final total (tree weight, flow, path cost).
    """

    type:            StepType
    message:         str                          = ""
    node_id:         Optional[str]                = None
    edge_from:       Optional[str]                = None
    edge_to:         Optional[str]                = None
    value:           Optional[float]              = None
    highlight_nodes: Tuple[str, ...]              = ()
    highlight_edges: Tuple[Pair, ...]             = ()
    partition:       Optional[Dict[str, int]]     = None
    path:            Optional[Tuple[str, ...]]    = None
    total_weight:    Optional[float]              = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value, "message": self.message}
        for name in ("node_id", "edge_from", "edge_to", "value", "total_weight"):
            val = getattr(self, name)
            if val is not None:
                data[name] = val
        if self.highlight_nodes:
            data["highlight_nodes"] = list(self.highlight_nodes)
        if self.highlight_edges:
            data["highlight_edges"] = [{"from": a, "to": b} for a, b in self.highlight_edges]
        if self.partition is not None:
            data["partition"] = dict(self.partition)
        if self.path is not None:
            data["path"] = list(self.path)
        return data


# ---------------------------------------------------------------------------
# Small helpers shared by the producers
# ---------------------------------------------------------------------------
def nodes(ids: Iterable[str]) -> Tuple[str, ...]:
    """Freeze an iterable of vertex ids (list, or a dict used as ordered set)."""
    return tuple(ids)


def pairs(edges: Iterable[Pair]) -> Tuple[Pair, ...]:
    return tuple((a, b) for a, b in edges)


def arrow(path: Iterable[str]) -> str:
    return " → ".join(path)

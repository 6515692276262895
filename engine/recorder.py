"""
recorder.py — Run Recorder & Analytics
========================================
Validates a run request, drives the algorithm generator to exhaustion
(through a Stepper, so playback can start straight away), and computes
the metrics card for the finished trace.

Usage:
    rec = Recorder()
    rec.start(algo_key="dijkstra", graph=g, source="A", target="D")
    rec.run_to_completion()          # materialises every step
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # JSON-ready snapshot for save / replay

Validation happens in `start()`, before any generator exists: the
algorithms themselves never check their endpoints and would simply
treat a missing vertex as unreachable.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from graph import Graph
from algorithms import AlgoInfo, get_algorithm
from algorithms.exceptions import InvalidRunError, UnknownAlgorithmError
from algorithms.step import Step, StepType
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:          str             = ""
    algo_label:        str             = ""
    source:            Optional[str]   = None
    target:            Optional[str]   = None
    total_steps:       int             = 0
    vertices_examined: int             = 0         # distinct node-current vertices
    edges_examined:    int             = 0         # number of edge-visit steps
    result_path:       List[str]       = field(default_factory=list)
    result_weight:     Optional[float] = None      # tree weight / flow / path cost
    wall_time_ms:      float           = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The Stepper holding the materialised trace.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._algo_info: Optional[AlgoInfo] = None
        self._source:    Optional[str]      = None
        self._target:    Optional[str]      = None
        self._graph:     Optional[Graph]    = None
        self._generator  = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        graph: Graph,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> None:
        """Validate the request and create the generator for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownAlgorithmError(f"Unknown algorithm: {algo_key}")

        if graph.vertex_count() == 0:
            raise InvalidRunError("Add vertices to the graph before running an algorithm")

        kwargs: Dict[str, Any] = {}
        if info.needs_source:
            kwargs["source"] = self._require(graph, source, "source")
        if info.needs_target:
            kwargs["target"] = self._require(graph, target, "target")

        self._algo_info = info
        self._graph     = graph
        self._source    = kwargs.get("source")
        self._target    = kwargs.get("target")
        self.steps      = []
        self.metrics    = None
        self._generator = info.fn(graph, **kwargs)
        self.stepper    = Stepper()

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self.stepper is None or self._generator is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.stepper.start(self._generator)
        self._generator = None
        wall_ms = (time.monotonic() - started) * 1000

        self.steps   = list(self.stepper.steps)
        self.metrics = self._compute_metrics(wall_ms)

        logger.info(
            "Run %s finished: %d steps in %.2f ms",
            self.metrics.algo_key, self.metrics.total_steps, self.metrics.wall_time_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "source":   self._source,
            "target":   self._target,
            "graph":    self._graph.to_dict() if self._graph else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _require(graph: Graph, vertex_id: Optional[str], role: str) -> str:
        if vertex_id is None or not str(vertex_id).strip():
            raise InvalidRunError(f"A {role} vertex is required for this algorithm")
        vid = graph.normalize_id(vertex_id)
        if not graph.has_vertex(vid):
            raise InvalidRunError(f"Vertex {vid} does not exist")
        return vid

    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        examined = {s.node_id for s in self.steps if s.type == StepType.NODE_CURRENT}
        edges = sum(1 for s in self.steps if s.type == StepType.EDGE_VISIT)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            source=self._source,
            target=self._target,
            total_steps=len(self.steps),
            vertices_examined=len(examined),
            edges_examined=edges,
            result_path=list(last.path) if last and last.path else [],
            result_weight=last.total_weight if last else None,
            wall_time_ms=round(wall_ms, 2),
        )

"""
workspace.py — One User's Working Set
======================================
Bundles the graph being edited with the selected algorithm, the chosen
source / target and the current trace.

A trace is only valid for the graph state it was computed from, so every
mutation coming through the API calls `invalidate_trace()` first; the
in-flight playback is dropped before the graph changes.
"""

import logging
import uuid
from typing import Any, Dict, Optional

from graph import Graph
from engine.recorder import Recorder, RunMetrics
from engine.stepper import Stepper, SPEED_PRESETS

logger = logging.getLogger(__name__)


class Workspace:

    def __init__(self, graph: Optional[Graph] = None, algo_key: str = "bfs", speed: str = "medium"):
        self.workspace_id: str                = uuid.uuid4().hex
        self.graph:        Graph              = graph if graph is not None else Graph()
        self.algo_key:     str                = algo_key
        self.source:       Optional[str]      = None
        self.target:       Optional[str]      = None
        self.stepper:      Stepper            = Stepper()
        self.recorder:     Optional[Recorder] = None
        self.set_speed(speed)

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------
    def run(
        self,
        algo_key: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> RunMetrics:
        """Validate, materialise and load a fresh trace.  Errors leave the old trace dropped."""
        self.invalidate_trace()
        if algo_key is not None:
            self.algo_key = algo_key
        if source is not None:
            self.source = Graph.normalize_id(source)
        if target is not None:
            self.target = Graph.normalize_id(target)

        rec = Recorder()
        rec.start(self.algo_key, self.graph, source=self.source, target=self.target)
        metrics = rec.run_to_completion()

        speed = self.stepper.speed
        self.stepper = rec.stepper
        self.stepper.set_speed_value(speed)
        self.recorder = rec
        logger.debug("Workspace %s loaded %d steps", self.workspace_id, metrics.total_steps)
        return metrics

    def invalidate_trace(self) -> None:
        self.stepper.reset()
        self.recorder = None

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed: Any) -> None:
        """Accept a preset name or a number of seconds per step."""
        if isinstance(speed, str) and speed in SPEED_PRESETS:
            self.stepper.set_speed(speed)
        else:
            try:
                seconds = float(speed)
            except TypeError:
                raise ValueError(f"Invalid speed: {speed!r}") from None
            self.stepper.set_speed_value(seconds)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------
    def state(self) -> Dict[str, Any]:
        step = self.stepper.current_step
        return {
            "workspace_id": self.workspace_id,
            "algorithm":    self.algo_key,
            "source":       self.source,
            "target":       self.target,
            "state":        self.stepper.state.value,
            "speed":        self.stepper.speed,
            "current_step": self.stepper.current_idx,
            "total_steps":  self.stepper.total_steps,
            "step":         step.to_dict() if step else None,
            "vertices":     self.graph.vertex_count(),
            "edges":        self.graph.edge_count(),
        }

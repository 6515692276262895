"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, Workspace
"""

from engine.stepper   import Stepper, StepperState, SPEED_PRESETS
from engine.recorder  import Recorder, RunMetrics
from engine.workspace import Workspace

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "Workspace",
]

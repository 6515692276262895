"""
stepper.py — Trace Playback
===========================
The Stepper is the ONLY object the UI interacts with during playback.
It owns the materialised trace and exposes a play/pause/next/prev/speed API.

A producer is never paused half-way: `start()` drains the generator into
a list before the first frame is shown, and the generator is dropped.
From then on playback is pure list navigation; it never touches the
graph or the algorithm again, so it can move in either direction at any
speed.

State machine:
    IDLE  →  start() / load()  →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last step reached) → FINISHED
    any     →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe.  Drive it from one thread (the request
  handler, or the UI's timer callback).
"""

import time
from enum import Enum
from typing import Callable, Generator, Iterable, List, Optional

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Playback intervals, in seconds per step
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   2.0,
    "medium": 1.0,    # one step per second
    "fast":   0.5,
    "turbo":  0.1,
}

MIN_INTERVAL = 0.02


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The complete, materialised trace.
        current_idx : Index into `steps` that is currently displayed (-1 = nothing).
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time the current step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        # timestamp of the last auto-advance
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Generator[Step, None, None]) -> None:
        """Drain the producer completely, then show step 0."""
        self.load(list(generator))

    def load(self, steps: Iterable[Step]) -> None:
        """Replay an already-materialised trace."""
        self.steps       = list(steps)
        self.current_idx = -1
        if self.steps:
            self.state = StepperState.PAUSED
            self._goto(0)
        else:
            self.state = StepperState.FINISHED

    def reset(self) -> None:
        """Back to IDLE; caller must call start() or load() again."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Show the following step.  False when the trace is exhausted."""
        if self.current_idx + 1 >= len(self.steps):
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.current_idx == len(self.steps) - 1 and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Show the preceding step.  False when already on step 0."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if not 0 <= idx < len(self.steps):
            return False
        self._goto(idx)
        if self.state == StepperState.FINISHED and idx < len(self.steps) - 1:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Back to the first step, paused."""
        if self.steps:
            self.state = StepperState.PAUSED
            self._goto(0)

    def jump_to_end(self) -> None:
        """Jump to the final step."""
        if self.steps:
            self._goto(len(self.steps) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Auto-play
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Timed advance
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Poll from a timer.  While PLAYING, moves forward once `speed`
        seconds have passed since the previous advance; `now` overrides
        the clock.  True when the position changed.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_INTERVAL, seconds)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])

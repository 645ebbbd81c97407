"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object a UI interacts with during a run.
It owns the algorithm Snapshot, buffers every Step it has seen (enabling
rewind), and exposes a next/prev/goto API.

The Snapshot itself only moves forward.  Rewinding just moves the
display index back through the buffer; the snapshot is asked for a new
decision only when the index runs past the end of the buffer, and never
once it reports is_over().

State machine:
    IDLE    →  start()  →  PAUSED
    PAUSED  →  (snapshot over) → FINISHED
    any     →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe, and neither is the Snapshot it drives.
  Call it from a single thread.
"""

from enum import Enum
from typing import Optional, Callable, List

from algorithms.snapshot import Snapshot
from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : List of all Steps seen so far (buffer for rewind).
        current_idx : Index into `steps` that is currently displayed.
        on_step     : Optional callback(Step) fired every time current step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self._snapshot:   Optional[Snapshot] = None
        self.steps:       List[Step]    = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.on_step:     Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, snapshot: Snapshot) -> None:
        """Attach a fresh snapshot and load its initial state as step 0."""
        self._snapshot   = snapshot
        self.steps       = [snapshot.state()]
        self.current_idx = -1
        self.state       = StepperState.FINISHED if snapshot.is_over() else StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE — caller must call start() again."""
        self._snapshot   = None
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        target = self.current_idx + 1
        if target >= len(self.steps):
            if not self._fetch_next():
                self.state = StepperState.FINISHED
                return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to a step index, stepping the snapshot forward if needed."""
        while idx >= len(self.steps):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.steps:
            self._goto(0)

    def jump_to_end(self) -> None:
        """Run the snapshot until it is over and show the final step."""
        while self._fetch_next():
            pass
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Ask the snapshot for one more decision and buffer the result."""
        if self._snapshot is None or self._snapshot.is_over():
            return False
        self._snapshot.step()
        self.steps.append(self._snapshot.state())
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.steps[idx] if 0 <= idx < len(self.steps) else None)

    def _notify(self, step: Optional[Step]) -> None:
        if self.on_step and step is not None:
            self.on_step(step)

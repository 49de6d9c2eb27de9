from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import time


@dataclass(frozen=True)
class MouseEvent:
    """Immutable record of one synthetic mouse event sent to the page.

    Attributes:
        x (float): clientX of the event.
        y (float): clientY of the event.
        t (float): Seconds since the recorder started (monotonic).
        kind (str): DOM event type, e.g. "mousedown", "mousemove", "click".
        buttons (int): Buttons bitmask carried by the event.
    """

    x: float
    y: float
    t: float
    kind: str
    buttons: int = 0


@dataclass
class TrajectoryRecorder:
    """Collects dispatched mouse events for analysis and visualization."""

    events: List[MouseEvent] = field(default_factory=list)
    start_ts: float = field(default_factory=lambda: time.perf_counter())

    def _now(self) -> float:
        """Return current monotonic time offset from the recorder's start."""
        return time.perf_counter() - self.start_ts

    def log(self, kind: str, x: float, y: float, buttons: int = 0) -> None:
        self.events.append(MouseEvent(x, y, self._now(), kind, buttons))

    def of_kind(self, kind: str) -> List[MouseEvent]:
        return [event for event in self.events if event.kind == kind]

    def last(self) -> Optional[MouseEvent]:
        return self.events[-1] if self.events else None

    def reset(self) -> None:
        """Clear all recorded events and reset the time origin to now."""
        self.events.clear()
        self.start_ts = time.perf_counter()


def get_mouse_recorder(dom) -> TrajectoryRecorder:
    """Per-DOM recorder, created on first use."""
    if not hasattr(dom, "_gesturekit_mouse_recorder"):
        dom._gesturekit_mouse_recorder = TrajectoryRecorder()
    return dom._gesturekit_mouse_recorder

from __future__ import annotations
import logging
from typing import Any, Optional

from .analysis import summarize_path
from .behaviors import SimulationOptions, simulate_click, simulate_drag, simulate_hover
from .config import cfg
from .geometry import Target
from .paths import Path

_GESTURES = {
    "drag": simulate_drag,
    "click": simulate_click,
    "hover": simulate_hover,
}


async def release_handles(dom) -> None:
    """Let the Dom drop element handles it holds, when it keeps any."""
    release = getattr(dom, "release_handles", None)
    if release is not None:
        await release()


class MouseSimulator:
    """Plays one gesture against a Dom and keeps the generated path."""

    def __init__(self, dom, options: SimulationOptions, gesture: str = "drag"):
        if gesture not in _GESTURES:
            raise ValueError(f"Unknown gesture type: {gesture!r}")
        self.dom = dom
        self.options = options
        self.gesture = gesture
        self.path: Path = ()

    async def simulate(self) -> Path:
        logger = logging.getLogger(__name__)
        logger.debug("%s simulation started", self.gesture)
        try:
            self.path = await _GESTURES[self.gesture](self.dom, self.options)
        finally:
            await release_handles(self.dom)
        logger.debug(
            "%s simulation completed: %s",
            self.gesture,
            summarize_path(self.path, self.options.fps),
        )
        return self.path

    def get_path(self) -> Path:
        return self.path


class MouseController:
    """Tiny façade for gestures bound to a specific Dom."""

    def __init__(self, dom):
        """Initialize with a Dom implementation (kept as self.dom)."""
        self.dom = dom

    async def drag(self, from_: Target, to: Target, **options: Any) -> Path:
        return await MouseSimulator(
            self.dom, SimulationOptions(from_=from_, to=to, **options), "drag"
        ).simulate()

    async def click(
        self,
        target: Target,
        *,
        position: str = "center",
        duration: Optional[float] = None,
    ) -> Path:
        options = SimulationOptions(
            from_=target,
            to=target,
            from_position=position,
            to_position=position,
            duration=cfg.CLICK_DURATION_MS if duration is None else duration,
        )
        return await MouseSimulator(self.dom, options, "click").simulate()

    async def hover(self, target: Target, **options: Any) -> Path:
        return await MouseSimulator(
            self.dom, SimulationOptions(target=target, **options), "hover"
        ).simulate()

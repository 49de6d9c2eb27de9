from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from .config import cfg
from .dispatchers import dispatch_drag_path, dispatch_hover_path
from .geometry import GestureTargets, Point, Target, resolve_element, resolve_point
from .paths import Path, bezier_path, hover_path, offset_point


@dataclass(frozen=True)
class SimulationOptions:
    """How a single gesture is played back.

    `from_` / `to` drive drag and click gestures; `target` (or `to` when no
    target is given) is the element hovered by a hover gesture.
    """

    from_: Optional[Target] = None
    to: Optional[Target] = None
    from_position: str = cfg.DEFAULT_ANCHOR
    to_position: str = cfg.DEFAULT_ANCHOR
    duration: float = cfg.DEFAULT_DURATION_MS
    curvature: float = cfg.DEFAULT_CURVATURE
    fps: float = cfg.DEFAULT_FPS
    dispatch_events: bool = True

    target: Optional[Target] = None
    target_position: str = cfg.DEFAULT_ANCHOR
    enter_duration: Optional[float] = None
    hover_duration: Optional[float] = None
    exit_duration: Optional[float] = None

    on_move: Optional[Callable[[Point, float], None]] = None

    def with_overrides(self, **changes: Any) -> "SimulationOptions":
        return replace(self, **changes)


async def simulate_drag(dom, options: SimulationOptions) -> Path:
    """Resolve both ends, build the curved path and play press/move/release/click."""
    if options.from_ is None or options.to is None:
        raise ValueError("A drag gesture needs both 'from' and 'to'")
    targets = GestureTargets()
    # both ends resolve before the first event goes out
    start = await resolve_point(
        dom, options.from_, options.from_position, role="start", targets=targets
    )
    end = await resolve_point(
        dom, options.to, options.to_position, role="end", targets=targets
    )
    logging.getLogger(__name__).debug(
        "Drag path (%.0f, %.0f) -> (%.0f, %.0f)", start.x, start.y, end.x, end.y
    )
    path = bezier_path(start, end, options.duration, options.fps, options.curvature)
    await dispatch_drag_path(
        dom,
        path,
        targets,
        fps=options.fps,
        dispatch_events=options.dispatch_events,
        on_move=options.on_move,
    )
    return path


async def simulate_click(dom, options: SimulationOptions) -> Path:
    """A drag whose start and end coincide, played over a short duration."""
    target = options.from_ if options.from_ is not None else options.to
    if target is None:
        raise ValueError("A click gesture needs 'from' or 'to'")
    position = options.from_position
    click = options.with_overrides(
        from_=target,
        to=target,
        from_position=position,
        to_position=position,
    )
    return await simulate_drag(dom, click)


def _or_default(value: Optional[float], default: float) -> float:
    return default if value is None else value


async def _hover_element(dom, target: Target, point: Point) -> Any:
    if isinstance(target, str):
        return await resolve_element(dom, target)
    return await dom.element_from_point(point.x, point.y)


async def simulate_hover(dom, options: SimulationOptions) -> Path:
    """Approach the target, hold over it, then move away."""
    if options.target is not None:
        target, anchor = options.target, options.target_position
        approach_source, depart_source = options.from_, options.to
    elif options.to is not None:
        target, anchor = options.to, options.to_position
        approach_source, depart_source = options.from_, None
    else:
        raise ValueError("A hover gesture needs 'target' or 'to'")

    hover_point = await resolve_point(dom, target, anchor)
    element = await _hover_element(dom, target, hover_point)
    if approach_source is not None:
        approach_from = await resolve_point(dom, approach_source, options.from_position)
    else:
        approach_from = offset_point(hover_point, cfg.HOVER_APPROACH_OFFSET_PX)
    if depart_source is not None:
        depart_to = await resolve_point(dom, depart_source, options.to_position)
    else:
        depart_to = offset_point(hover_point, cfg.HOVER_DEPART_OFFSET_PX)

    enter_ms = _or_default(options.enter_duration, cfg.HOVER_ENTER_MS)
    exit_ms = _or_default(options.exit_duration, cfg.HOVER_EXIT_MS)
    hold_ms = _or_default(options.hover_duration, cfg.HOVER_HOLD_MS)

    approach, departure = hover_path(
        approach_from, hover_point, depart_to, enter_ms, exit_ms, options.fps
    )
    await dispatch_hover_path(
        dom,
        approach,
        departure,
        element,
        hold_ms=hold_ms,
        fps=options.fps,
        dispatch_events=options.dispatch_events,
        on_move=options.on_move,
    )
    return approach + departure[1:]

from __future__ import annotations
import asyncio
import logging
from typing import Any, Callable, Dict, Optional, Sequence

from .config import cfg
from .geometry import GestureTargets, Point
from .telemetry import get_mouse_recorder

MoveCallback = Optional[Callable[[Point, float], None]]

# Events that do not bubble, matching the platform
_NON_BUBBLING = frozenset({"mouseenter", "mouseleave"})

PRIMARY_BUTTON: int = getattr(cfg, "PRIMARY_BUTTON", 0)
BUTTONS_HELD: int = getattr(cfg, "PRIMARY_BUTTONS_MASK", 1)
MOVE_SEND_TIMEOUT_S: float = getattr(cfg, "MOVE_SEND_TIMEOUT_S", 0.25)


def frame_delay_seconds(fps: float) -> float:
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps!r}")
    return 1.0 / float(fps)


def mouse_event_init(event_type: str, point: Point, buttons: int) -> Dict[str, Any]:
    """MouseEventInit dict with consistent client/screen coordinates."""
    bubbles = event_type not in _NON_BUBBLING
    return {
        "bubbles": bubbles,
        "cancelable": bubbles,
        "clientX": float(point[0]),
        "clientY": float(point[1]),
        "screenX": float(point[0]),
        "screenY": float(point[1]),
        "button": PRIMARY_BUTTON,
        "buttons": int(buttons),
    }


async def _emit(dom, element: Any, event_type: str, point: Point, buttons: int) -> None:
    """Dispatch one synthetic event on element; a missing element is a no-op."""
    if element is None:
        logging.getLogger(__name__).debug(
            "No element for %s at (%.0f, %.0f)", event_type, point[0], point[1]
        )
        return
    get_mouse_recorder(dom).log(event_type, point[0], point[1], buttons)
    await dom.dispatch_mouse_event(
        element, event_type, mouse_event_init(event_type, point, buttons)
    )


async def _emit_move(dom, point: Point, fallback: Any, buttons: int) -> None:
    """Move over whatever occupies point; stalled or failed moves are skipped."""
    logger = logging.getLogger(__name__)
    try:
        element = await dom.element_from_point(point[0], point[1])
        if element is None:
            element = fallback
        await asyncio.wait_for(
            _emit(dom, element, "mousemove", point, buttons),
            timeout=MOVE_SEND_TIMEOUT_S,
        )
    except asyncio.TimeoutError:
        logger.warning(
            "mousemove at (%.1f, %.1f) stalled >%.0f ms; skipped",
            point[0],
            point[1],
            MOVE_SEND_TIMEOUT_S * 1000.0,
        )
    except Exception:
        logger.warning("mousemove failed (skipped this event)", exc_info=True)


async def _target_at(dom, recorded: Any, point: Point) -> Any:
    if recorded is not None:
        return recorded
    return await dom.element_from_point(point[0], point[1])


async def dispatch_drag_path(
    dom,
    path: Sequence[Point],
    targets: GestureTargets,
    *,
    fps: float = cfg.DEFAULT_FPS,
    dispatch_events: bool = True,
    on_move: MoveCallback = None,
) -> None:
    """Play a press → move… → release → click sequence along path.

    Press goes to the recorded start element, release and click to the
    recorded end element (falling back to whatever is under the point for
    literal coordinates). Click follows release with no delay in between.
    """
    if not path:
        return
    delay = frame_delay_seconds(fps)
    start, end = path[0], path[-1]
    last_index = len(path) - 1

    if dispatch_events:
        press_target = await _target_at(dom, targets.start, start)
        await _emit(dom, press_target, "mousedown", start, BUTTONS_HELD)
    else:
        press_target = targets.start
    if on_move is not None:
        on_move(start, 0.0)

    for index in range(1, len(path)):
        await asyncio.sleep(delay)
        point = path[index]
        if dispatch_events:
            await _emit_move(dom, point, press_target, BUTTONS_HELD)
        if on_move is not None:
            on_move(point, index / last_index)

    if dispatch_events:
        release_target = targets.end
        if release_target is None:
            release_target = await _target_at(dom, None, end) or press_target
        await _emit(dom, release_target, "mouseup", end, 0)
        await _emit(dom, release_target, "click", end, 0)


async def _play_moves(
    dom,
    path: Sequence[Point],
    delay: float,
    fallback: Any,
    dispatch_events: bool,
    on_move: MoveCallback,
    *,
    first_index: int = 0,
    last_index: Optional[int] = None,
) -> None:
    """Move along path; indices and progress count over the whole gesture."""
    if last_index is None:
        last_index = first_index + len(path) - 1
    last_index = max(1, last_index)
    for index, point in enumerate(path, start=first_index):
        if index:
            await asyncio.sleep(delay)
        if dispatch_events:
            await _emit_move(dom, point, fallback, 0)
        if on_move is not None:
            on_move(point, index / last_index)


async def dispatch_hover_path(
    dom,
    approach: Sequence[Point],
    departure: Sequence[Point],
    target: Any,
    *,
    hold_ms: float = cfg.HOVER_HOLD_MS,
    fps: float = cfg.DEFAULT_FPS,
    dispatch_events: bool = True,
    on_move: MoveCallback = None,
) -> None:
    """Approach the target, enter/over, hold, leave/out, then depart."""
    delay = frame_delay_seconds(fps)
    # the departure shares its first point with the end of the approach
    last_index = len(approach) + len(departure) - 2
    await _play_moves(
        dom,
        approach,
        delay,
        target,
        dispatch_events,
        on_move,
        last_index=last_index,
    )

    arrival = approach[-1] if approach else departure[0]
    if dispatch_events:
        await _emit(dom, target, "mouseenter", arrival, 0)
        await _emit(dom, target, "mouseover", arrival, 0)

    await asyncio.sleep(max(0.0, float(hold_ms)) / 1000.0)

    if dispatch_events:
        await _emit(dom, target, "mouseleave", arrival, 0)
        await _emit(dom, target, "mouseout", arrival, 0)

    await _play_moves(
        dom,
        departure[1:],
        delay,
        None,
        dispatch_events,
        on_move,
        first_index=len(approach),
        last_index=last_index,
    )

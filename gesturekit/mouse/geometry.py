from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple, Optional, Tuple, Union

from ..errors import ElementNotFoundError
from .config import cfg


class Point(NamedTuple):
    """Absolute viewport coordinate."""

    x: float
    y: float


PointLike = Union[Point, Tuple[float, float], Mapping[str, float]]
Target = Union[str, PointLike]

ANCHORS = (
    "center",
    "top",
    "bottom",
    "left",
    "right",
    "top-left",
    "top-right",
    "bottom-left",
    "bottom-right",
)


@dataclass(frozen=True)
class Rect:
    """Bounding client rectangle of an element."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point:
        return Point(self.left + self.width / 2.0, self.top + self.height / 2.0)


@dataclass
class GestureTargets:
    """Elements that receive press (start) and release/click (end) events."""

    start: Optional[Any] = None
    end: Optional[Any] = None

    def record(self, role: str, element: Any) -> None:
        if role == "end":
            self.end = element
        else:
            self.start = element


def as_point(value: Any) -> Optional[Point]:
    """Return value as a Point if it is a literal coordinate, else None."""
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping) and "x" in value and "y" in value:
        return Point(float(value["x"]), float(value["y"]))
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Point(float(value[0]), float(value[1]))
    return None


def anchor_point(rect: Rect, anchor: str = "center") -> Point:
    """Coordinate of a named anchor on rect; unknown anchors map to center."""
    cx, cy = rect.center
    if anchor == "top":
        return Point(cx, rect.top)
    if anchor == "bottom":
        return Point(cx, rect.bottom)
    if anchor == "left":
        return Point(rect.left, cy)
    if anchor == "right":
        return Point(rect.right, cy)
    if anchor == "top-left":
        return Point(rect.left, rect.top)
    if anchor == "top-right":
        return Point(rect.right, rect.top)
    if anchor == "bottom-left":
        return Point(rect.left, rect.bottom)
    if anchor == "bottom-right":
        return Point(rect.right, rect.bottom)
    if anchor != "center":
        logging.getLogger(__name__).debug("Unknown anchor %r, using center", anchor)
    return Point(cx, cy)


async def resolve_element(dom, selector: str) -> Any:
    """Query selector, preferring a nested hit-target marker inside the match."""
    element = await dom.query(selector)
    if element is None:
        raise ElementNotFoundError(selector)
    marker = getattr(cfg, "HIT_TARGET_SELECTOR", None)
    if marker:
        nested = await dom.query_within(element, marker)
        if nested is not None:
            return nested
    return element


async def resolve_point(
    dom,
    target: Target,
    anchor: Optional[str] = None,
    *,
    role: str = "start",
    targets: Optional[GestureTargets] = None,
) -> Point:
    """Turn a selector or literal coordinate into an absolute viewport Point.

    Literal coordinates are returned unchanged and leave `targets` untouched.
    For selectors the resolved element is stored on `targets` under `role`
    ("start" or "end") so the dispatcher can aim button events at it.
    """
    literal = as_point(target)
    if literal is not None:
        return literal
    if not isinstance(target, str):
        raise TypeError(f"Unsupported gesture target: {target!r}")

    element = await resolve_element(dom, target)
    rect = await dom.bounding_rect(element)
    if targets is not None:
        targets.record(role, element)
    return anchor_point(rect, anchor or cfg.DEFAULT_ANCHOR)

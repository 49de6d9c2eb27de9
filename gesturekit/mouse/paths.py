from __future__ import annotations
import math
from typing import Tuple

from .config import cfg
from .geometry import Point

Path = Tuple[Point, ...]


def frame_count(duration_ms: float, fps: float) -> int:
    """Number of frames (path length minus one) for a gesture."""
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps!r}")
    frames = int(math.floor(max(0.0, float(duration_ms)) / 1000.0 * fps + 0.5))
    return max(cfg.MIN_FRAMES, frames)


def control_point(start: Point, end: Point, curvature: float) -> Point:
    """Midpoint of start/end pushed sideways, perpendicular to the travel vector."""
    dx = end.x - start.x
    dy = end.y - start.y
    bow = float(curvature) * cfg.CONTROL_POINT_SCALE
    mid_x = (start.x + end.x) / 2.0
    mid_y = (start.y + end.y) / 2.0
    return Point(mid_x - dy * bow, mid_y + dx * bow)


def bezier_path(
    start: Point,
    end: Point,
    duration_ms: float = cfg.DEFAULT_DURATION_MS,
    fps: float = cfg.DEFAULT_FPS,
    curvature: float = cfg.DEFAULT_CURVATURE,
) -> Path:
    """Quadratic Bézier trajectory sampled at fps.

    B(t) = (1-t)^2 P0 + 2(1-t)t P1 + t^2 P2 with t running linearly over [0, 1].
    The first and last points are exactly start and end.
    """
    start, end = Point(*start), Point(*end)
    frames = frame_count(duration_ms, fps)
    ctrl = control_point(start, end, curvature)
    points = [start]
    for i in range(1, frames):
        t = i / frames
        inv = 1.0 - t
        x = inv * inv * start.x + 2.0 * inv * t * ctrl.x + t * t * end.x
        y = inv * inv * start.y + 2.0 * inv * t * ctrl.y + t * t * end.y
        points.append(Point(x, y))
    points.append(end)
    return tuple(points)


def linear_path(
    start: Point,
    end: Point,
    duration_ms: float = cfg.DEFAULT_DURATION_MS,
    fps: float = cfg.DEFAULT_FPS,
) -> Path:
    """Straight trajectory sampled at fps."""
    return bezier_path(start, end, duration_ms, fps, curvature=0.0)


def hover_path(
    approach_from: Point,
    target: Point,
    depart_to: Point,
    enter_ms: float = cfg.HOVER_ENTER_MS,
    exit_ms: float = cfg.HOVER_EXIT_MS,
    fps: float = cfg.DEFAULT_FPS,
) -> Tuple[Path, Path]:
    """Approach and departure segments of a hover, each timed independently."""
    approach = linear_path(approach_from, target, enter_ms, fps)
    departure = linear_path(target, depart_to, exit_ms, fps)
    return approach, departure


def offset_point(point: Point, offset: Tuple[float, float]) -> Point:
    return Point(point.x + offset[0], point.y + offset[1])

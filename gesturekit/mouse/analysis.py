from __future__ import annotations
import math
from typing import List, Sequence

from .geometry import Point


def path_length(path: Sequence[Point]) -> float:
    """Total travelled distance along path, in pixels."""
    return sum(
        math.hypot(path[i].x - path[i - 1].x, path[i].y - path[i - 1].y)
        for i in range(1, len(path))
    )


def summarize_path(path: Sequence[Point], fps: float) -> str:
    """Summarize per-frame speeds of a sampled path.

    Each step lasts 1000/fps ms. Reports point count, length, average, p95
    and max speed in px/ms.
    """
    if len(path) < 2 or fps <= 0:
        return "No path data"
    frame_ms = 1000.0 / fps
    speeds_px_per_ms: List[float] = [
        math.hypot(path[i].x - path[i - 1].x, path[i].y - path[i - 1].y) / frame_ms
        for i in range(1, len(path))
    ]
    speeds_sorted = sorted(speeds_px_per_ms)
    n = len(speeds_sorted)
    average = sum(speeds_px_per_ms) / n
    p95 = speeds_sorted[max(0, int(0.95 * n) - 1)]
    return (
        f"points={len(path)}, length={path_length(path):.1f}px, "
        f"speed px/ms: avg={average:.3f}, p95={p95:.3f}, max={speeds_sorted[-1]:.3f}"
    )

from __future__ import annotations
import asyncio
import logging
import re
from pathlib import Path as FSPath
from typing import Awaitable, Callable, List, Optional, Sequence, Set, Tuple
from PIL import Image, ImageColor, ImageDraw

from .geometry import Point

TrajectoryCallback = Optional[Callable[[FSPath], Awaitable[None]]]
_TRAJECTORY_CALLBACK: TrajectoryCallback = None

DEFAULT_PATH_COLOR = "#667eea"


def set_trajectory_callback(cb: TrajectoryCallback) -> None:
    """Register an async callback invoked whenever a path JPEG is saved."""
    global _TRAJECTORY_CALLBACK
    _TRAJECTORY_CALLBACK = cb
    logging.getLogger(__name__).info(
        "Path image callback %s", "registered" if cb else "cleared"
    )


def _parse_color(value: str) -> Tuple[int, int, int]:
    try:
        return ImageColor.getrgb(value)[:3]
    except ValueError:
        logging.getLogger(__name__).warning(
            "Unrecognized path color %r, using %s", value, DEFAULT_PATH_COLOR
        )
        return ImageColor.getrgb(DEFAULT_PATH_COLOR)[:3]


def _draw_cursor(draw: ImageDraw.ImageDraw, x: float, y: float) -> None:
    """Small arrow cursor with its tip at (x, y)."""
    arrow = [
        (x, y),
        (x, y + 16),
        (x + 4, y + 12),
        (x + 8, y + 19),
        (x + 10, y + 18),
        (x + 6, y + 11),
        (x + 11, y + 11),
    ]
    draw.polygon(arrow, fill=(255, 255, 255), outline=(0, 0, 0))


def render_path_image(
    path: Sequence[Point],
    outfile: str,
    *,
    path_color: str = DEFAULT_PATH_COLOR,
    show_cursor: bool = True,
    background_color: Tuple[int, int, int] = (12, 12, 14),
    path_line_width: int = 2,
    end_ring_radius: int = 5,
    canvas_margin: int = 20,
    title: str = "",
) -> str:
    """Draw a gesture path onto a JPEG sized to fit the path (blocking)."""
    max_x = max((p[0] for p in path), default=0.0)
    max_y = max((p[1] for p in path), default=0.0)
    canvas_width = int(max(200.0, max_x + canvas_margin * 2))
    canvas_height = int(max(200.0, max_y + canvas_margin * 2))
    image = Image.new("RGB", (canvas_width, canvas_height), background_color)
    draw = ImageDraw.Draw(image)

    if len(path) < 2:
        draw.text((canvas_margin, canvas_margin), "No path data", fill=(180, 180, 180))
        image.save(outfile, format="JPEG", quality=92, optimize=True)
        return outfile

    def shift(point: Point) -> Tuple[float, float]:
        return canvas_margin + max(0.0, point[0]), canvas_margin + max(0.0, point[1])

    color = _parse_color(path_color)
    draw.line([shift(p) for p in path], fill=color, width=path_line_width)

    sx, sy = shift(path[0])
    draw.ellipse([sx - 4, sy - 4, sx + 4, sy + 4], fill=(60, 205, 60))

    ex, ey = shift(path[-1])
    draw.ellipse(
        [
            ex - end_ring_radius,
            ey - end_ring_radius,
            ex + end_ring_radius,
            ey + end_ring_radius,
        ],
        outline=(255, 200, 80),
        width=2,
    )
    if show_cursor:
        _draw_cursor(draw, ex, ey)

    if title:
        draw.text(
            (canvas_margin, canvas_height - canvas_margin - 14),
            title,
            fill=(200, 200, 200),
        )

    image.save(outfile, format="JPEG", quality=92, optimize=True)
    return outfile


def _slug(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.-]+", "-", name).strip("-") or "gesture"


class ImagePathVisualizer:
    """Renders each test's gesture path into a JPEG under output_dir.

    Rendering runs in a worker thread so the event loop keeps going. When the
    visualization asks for auto removal, the image is deleted remove_delay ms
    after it was written.
    """

    def __init__(self, output_dir: str = "gesture_paths"):
        self.output_dir = FSPath(output_dir)
        self.written: List[str] = []
        self._removals: Set[asyncio.Task] = set()

    async def visualize(self, name: str, path: Sequence[Point], options) -> str:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        outfile = str(self.output_dir / f"{_slug(name)}.jpg")
        outfile_path = await asyncio.to_thread(
            render_path_image,
            tuple(path),
            outfile,
            path_color=options.path_color,
            show_cursor=options.show_cursor,
            title=name,
        )
        self.written.append(outfile_path)

        cb = _TRAJECTORY_CALLBACK
        if cb is not None:
            await cb(FSPath(outfile_path))
        else:
            logging.getLogger(__name__).debug(
                "Path image saved to %s but no callback is registered", outfile_path
            )

        if options.auto_remove:
            task = asyncio.create_task(
                self._remove_later(outfile_path, options.remove_delay)
            )
            self._removals.add(task)
            task.add_done_callback(self._removals.discard)
        return outfile_path

    async def _remove_later(self, outfile: str, delay_ms: float) -> None:
        await asyncio.sleep(max(0.0, float(delay_ms)) / 1000.0)
        FSPath(outfile).unlink(missing_ok=True)

    async def clear(self) -> None:
        """Cancel pending removals and delete every image written so far."""
        for task in list(self._removals):
            task.cancel()
        for outfile in self.written:
            FSPath(outfile).unlink(missing_ok=True)
        self.written.clear()

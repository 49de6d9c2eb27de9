from .behaviors import SimulationOptions, simulate_drag, simulate_click, simulate_hover
from .controller import MouseController, MouseSimulator
from .geometry import ANCHORS, GestureTargets, Point, Rect, anchor_point, resolve_point
from .paths import bezier_path, frame_count, hover_path, linear_path
from .render import ImagePathVisualizer, set_trajectory_callback
from .telemetry import get_mouse_recorder
from .analysis import summarize_path

__all__ = [
    "ANCHORS",
    "GestureTargets",
    "ImagePathVisualizer",
    "MouseController",
    "MouseSimulator",
    "Point",
    "Rect",
    "SimulationOptions",
    "anchor_point",
    "bezier_path",
    "frame_count",
    "get_mouse_recorder",
    "hover_path",
    "linear_path",
    "resolve_point",
    "set_trajectory_callback",
    "simulate_click",
    "simulate_drag",
    "simulate_hover",
    "summarize_path",
]

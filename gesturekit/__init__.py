from __future__ import annotations
from .dom import CdpDom, Dom
from .errors import (
    ElementNotFoundError,
    GestureKitError,
    HookError,
    SpecParseError,
    UnresolvedCallbackError,
)
from .mouse import MouseController, MouseSimulator, SimulationOptions
from .mouse.render import ImagePathVisualizer, set_trajectory_callback
from .testing import (
    SpecRunner,
    TestAutomation,
    TestRunner,
    callbacks,
    run_tests_from_file,
    run_tests_from_object,
)

__all__ = [
    "CdpDom",
    "Dom",
    "ElementNotFoundError",
    "GestureKitError",
    "HookError",
    "ImagePathVisualizer",
    "MouseController",
    "MouseSimulator",
    "SimulationOptions",
    "SpecParseError",
    "SpecRunner",
    "TestAutomation",
    "TestRunner",
    "UnresolvedCallbackError",
    "callbacks",
    "run_tests_from_file",
    "run_tests_from_object",
    "set_trajectory_callback",
]

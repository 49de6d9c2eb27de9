from __future__ import annotations


class cfg:
    """Gesture playback tuning"""

    # --- Path generation ---
    DEFAULT_DURATION_MS = 1000
    DEFAULT_CURVATURE = 0.3
    DEFAULT_FPS = 60
    CONTROL_POINT_SCALE = 0.3  # lateral bow of the control point per unit curvature
    MIN_FRAMES = 1

    # --- Click ---
    CLICK_DURATION_MS = 100

    # --- Hover ---
    HOVER_ENTER_MS = 500
    HOVER_HOLD_MS = 1000
    HOVER_EXIT_MS = 500
    HOVER_APPROACH_OFFSET_PX = (-120.0, -80.0)  # start of approach, relative to target
    HOVER_DEPART_OFFSET_PX = (120.0, 80.0)  # end of departure, relative to target

    # --- Targeting ---
    DEFAULT_ANCHOR = "center"
    HIT_TARGET_SELECTOR = "[data-hit-target]"  # nested grab-handle inside widgets

    # -------------------------------------------------------------------
    # Dispatcher
    # -------------------------------------------------------------------
    PRIMARY_BUTTON = 0
    PRIMARY_BUTTONS_MASK = 1
    CDP_SEND_TIMEOUT_S = 2.0
    CDP_OBJECT_GROUP = "gesturekit"  # element handles, released per gesture
    MOVE_SEND_TIMEOUT_S = 0.25  # moves that stall longer are skipped

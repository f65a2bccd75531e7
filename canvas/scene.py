"""
canvas/scene.py

Application state for the curve viewer: the curve, the viewport size and
the handlers that pointer events, toggle buttons and the frame driver
call into.
"""

from __future__ import annotations

import logging
from typing import Optional

from models import DraggablePoint, Surface, default_point_specs
from canvas.curve import BezierCurve, CurveStyle, TOTAL_STEPS

log = logging.getLogger(__name__)


class CurveScene:
    """
    Holds the single curve and the viewport it is shown in.

    Created once at startup and handed to the view and the main window;
    there is no module-level scene state.

    Args:
        width: Initial viewport width.
        height: Initial viewport height.
        style: Drawing style for the curve.
        total_steps: Animation steps per sweep of ``t``.
    """

    def __init__(
        self,
        width: float,
        height: float,
        style: Optional[CurveStyle] = None,
        total_steps: int = TOTAL_STEPS,
    ):
        self.width = float(width)
        self.height = float(height)
        self.curve = BezierCurve(default_point_specs(self.width, self.height), style, total_steps)
        self.frame_count = 0

    # ------------------------------------------------------------------
    # Host events
    # ------------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Track a new viewport size. Control points keep their positions."""
        self.width = float(width)
        self.height = float(height)

    def reset_points(self) -> None:
        """Reload the default control point placement for the current viewport."""
        self.curve.reload(default_point_specs(self.width, self.height))
        log.info("Control points reset for %.0fx%.0f viewport", self.width, self.height)

    def pointer_down(self, x: float, y: float) -> Optional[DraggablePoint]:
        return self.curve.pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self.curve.pointer_move(x, y)

    def pointer_up(self, x: float, y: float) -> Optional[DraggablePoint]:
        return self.curve.pointer_up(x, y)

    # ------------------------------------------------------------------
    # Frame driver
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Advance one frame: recompute markers and step ``t`` unless paused."""
        self.curve.interpolate()
        self.frame_count += 1

    def render(self, surface: Surface) -> None:
        """Clear the surface and draw the curve."""
        surface.clear()
        self.curve.draw(surface)

    def frame(self, surface: Surface) -> None:
        """One complete frame: update, then clear and draw."""
        self.tick()
        self.render(surface)

    # ------------------------------------------------------------------
    # Toggle controls
    # ------------------------------------------------------------------

    def toggle_interpolation(self) -> bool:
        """Show or hide the construction overlay. Returns the new visibility."""
        self.curve.interpolating = not self.curve.interpolating
        return self.curve.interpolating

    def toggle_pause(self) -> bool:
        """Pause or resume the animation. Returns True if now paused."""
        if self.curve.is_paused():
            self.curve.run()
        else:
            self.curve.pause()
        return self.curve.is_paused()

    def interpolation_button_text(self) -> str:
        return f"{'hide' if self.curve.interpolating else 'show'} interpolation"

    def pause_button_text(self) -> str:
        return "run" if self.curve.is_paused() else "pause"

    def pause_button_visible(self) -> bool:
        return self.curve.interpolating

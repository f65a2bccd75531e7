"""
canvas/curve.py

Cubic Bézier curve with four draggable control points and an animated
De Casteljau construction overlay.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from models import (
    CONTROL_POINT_RADIUS,
    MARKER_COLOR,
    MARKER_RADIUS,
    STATE_COLORS,
    Drawable,
    DraggablePoint,
    InteractionState,
    InvalidArgument,
    LabelStyle,
    Point,
    PointSpec,
    Surface,
    subscript_label,
)

log = logging.getLogger(__name__)

CONTROL_POINT_COUNT = 4
TOTAL_STEPS = 200

# Marker indices in BezierCurve.interpolation_points
Q0, Q1, Q2, R0, R1, B = range(6)


def lerp(a: Tuple[float, float], b: Tuple[float, float], t: float) -> Tuple[float, float]:
    """Linear interpolation ``(1 - t) * a + t * b`` applied per axis."""
    return (
        (1 - t) * a[0] + t * b[0],
        (1 - t) * a[1] + t * b[1],
    )


def _draw_points(surface: Surface, points: Iterable[Drawable]) -> None:
    for point in points:
        point.draw(surface)


@dataclass
class CurveStyle:
    """Colors, widths and sizes used to draw a curve.

    Defaults:
        curve: blue, 5 px
        control lines: #888888, 1 px
        overlay lines: Q magenta, R lime, 2 px
        control points: radius 12; idle #E0E0E0, hover #6666AA, drag blue
        markers: radius 3, black
    """
    curve_color: str = "#0000FF"
    curve_width: float = 5
    control_line_color: str = "#888888"
    control_line_width: float = 1
    q_line_color: str = "#FF00FF"
    r_line_color: str = "#00FF00"
    overlay_line_width: float = 2
    control_point_radius: float = CONTROL_POINT_RADIUS
    marker_radius: float = MARKER_RADIUS
    marker_color: str = MARKER_COLOR
    palette: Dict[InteractionState, str] = field(default_factory=lambda: dict(STATE_COLORS))
    label: LabelStyle = field(default_factory=LabelStyle)

    @classmethod
    def from_settings(cls, settings) -> "CurveStyle":
        """Build a style from an ``AppSettings`` instance."""
        return cls(
            curve_color=settings.curve.curve_color,
            curve_width=settings.curve.curve_width,
            control_line_color=settings.curve.control_line_color,
            control_line_width=settings.curve.control_line_width,
            q_line_color=settings.overlay.q_line_color,
            r_line_color=settings.overlay.r_line_color,
            overlay_line_width=settings.overlay.line_width,
            control_point_radius=settings.points.control_radius,
            marker_radius=settings.points.marker_radius,
            marker_color=settings.points.marker_color,
            palette={
                InteractionState.IDLE: settings.points.default_color,
                InteractionState.HOVERING: settings.points.hover_color,
                InteractionState.DRAGGING: settings.points.drag_color,
            },
            label=LabelStyle(
                color=settings.points.label_color,
                font_family=settings.points.label_font_family,
                font_size=settings.points.label_font_size,
            ),
        )


class BezierCurve:
    """
    A cubic Bézier curve defined by four control points.

    Besides the control points the curve owns six interpolation markers
    showing De Casteljau's construction at the current parameter ``t``:
    three first-order blends (Q0-Q2), two second-order blends (R0, R1)
    and the point on the curve (B).

    Flags:
      - any_dragging: a control point is being dragged; at most one may be.
      - interpolating: the construction overlay is drawn.
      - paused: ``t`` no longer advances; markers still follow the
        control points.

    Args:
        control_points: Exactly four ``PointSpec`` values, mappings with
            ``x``/``y`` (or ``coord``) and ``label``, or tuples.
        style: Drawing style. Defaults to ``CurveStyle()``.
        total_steps: Number of animation steps for ``t`` to cover [0, 1).

    Raises:
        InvalidArgument: If the control point count is not four or
            ``total_steps`` is not positive.
    """

    def __init__(
        self,
        control_points: Iterable[Any],
        style: Optional[CurveStyle] = None,
        total_steps: int = TOTAL_STEPS,
    ):
        if int(total_steps) < 1:
            raise InvalidArgument(f"total_steps must be at least 1, got {total_steps!r}")
        self.style = style or CurveStyle()
        self.total_steps = int(total_steps)
        self.control_points: List[DraggablePoint] = []
        self.load_control_points(control_points)

        self.interpolation_points: List[Point] = []
        for i in range(3):
            self.interpolation_points.append(self._make_marker(subscript_label("Q", i)))
        for i in range(2):
            self.interpolation_points.append(self._make_marker(subscript_label("R", i)))
        self.interpolation_points.append(self._make_marker("B"))
        self._seed_markers()

        self._t = 0.0
        self._step = 0
        self.any_dragging = False
        self.interpolating = False
        self.paused = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _make_marker(self, label: str) -> Point:
        return Point(0.0, 0.0, self.style.marker_radius, self.style.marker_color,
                     label, self.style.label)

    def _seed_markers(self) -> None:
        """Place markers on their construction-time positions.

        Q0-Q2 mirror P0-P2, R0 and R1 mirror P0 and P1, B mirrors R0.
        """
        cp = self.control_points
        for i in range(3):
            self.interpolation_points[Q0 + i].set_position(cp[i].x, cp[i].y)
        for i in range(2):
            self.interpolation_points[R0 + i].set_position(cp[i].x, cp[i].y)
        r0 = self.interpolation_points[R0]
        self.interpolation_points[B].set_position(r0.x, r0.y)

    def load_control_points(self, control_points: Iterable[Any]) -> None:
        """Replace all control points with new ones built from coordinates.

        Raises:
            InvalidArgument: If there are not exactly four coordinates.
        """
        try:
            specs = [PointSpec.from_value(v) for v in control_points]
        except TypeError as e:
            raise InvalidArgument(f"control points must be a sequence, got {control_points!r}") from e
        if len(specs) != CONTROL_POINT_COUNT:
            raise InvalidArgument(
                f"a cubic curve needs {CONTROL_POINT_COUNT} control points, got {len(specs)}"
            )
        self.control_points = [
            DraggablePoint(s.x, s.y, self.style.control_point_radius, s.label,
                           self.style.palette, self.style.label)
            for s in specs
        ]

    def reload(self, control_points: Iterable[Any]) -> None:
        """Replace the control points and restart the construction.

        Markers are re-seeded from the new control points, ``t`` returns
        to 0 and any drag in progress is dropped.
        """
        self.load_control_points(control_points)
        self._seed_markers()
        self.t = 0.0
        self.any_dragging = False
        log.debug("Curve reloaded with %s", [(p.x, p.y) for p in self.control_points])

    # ------------------------------------------------------------------
    # Parameter
    # ------------------------------------------------------------------

    @property
    def t(self) -> float:
        """Curve parameter in [0, 1)."""
        return self._t

    @t.setter
    def t(self, value: float) -> None:
        value = float(value)
        if value < 0.0 or value >= 1.0:
            value = 0.0
        self._t = value
        # Nearest grid step at or below value, tolerating float noise
        self._step = int(value * self.total_steps + 1e-9)

    @property
    def step_size(self) -> float:
        return 1.0 / self.total_steps

    def advance(self) -> None:
        """Move ``t`` one step forward, wrapping to exactly 0.0 at the end.

        ``t`` is kept on the step grid so that ``total_steps`` advances
        from 0 always land back on 0.0.
        """
        self._step += 1
        if self._step >= self.total_steps:
            self._step = 0
        self._t = self._step / self.total_steps

    def is_paused(self) -> bool:
        return self.paused

    def pause(self) -> None:
        self.paused = True

    def run(self) -> None:
        self.paused = False

    # ------------------------------------------------------------------
    # Markers
    # ------------------------------------------------------------------

    @property
    def q_points(self) -> List[Point]:
        return self.interpolation_points[Q0:R0]

    @property
    def r_points(self) -> List[Point]:
        return self.interpolation_points[R0:B]

    @property
    def b_point(self) -> Point:
        return self.interpolation_points[B]

    def recompute(self) -> None:
        """Recompute all markers from the control points at the current ``t``."""
        t = self._t
        cp = [(p.x, p.y) for p in self.control_points]
        q = [lerp(cp[i], cp[i + 1], t) for i in range(3)]
        r = [lerp(q[i], q[i + 1], t) for i in range(2)]
        b = lerp(r[0], r[1], t)
        for i, pos in enumerate(q + r + [b]):
            self.interpolation_points[i].set_position(*pos)

    def interpolate(self) -> None:
        """Per-frame update: recompute markers, then advance ``t`` unless paused."""
        self.recompute()
        if not self.paused:
            self.advance()

    def point_at(self, t: float) -> Tuple[float, float]:
        """Evaluate the curve at ``t`` without touching the markers."""
        pts: Sequence[Tuple[float, float]] = [(p.x, p.y) for p in self.control_points]
        while len(pts) > 1:
            pts = [lerp(pts[i], pts[i + 1], t) for i in range(len(pts) - 1)]
        return pts[0]

    # ------------------------------------------------------------------
    # Pointer interaction
    # ------------------------------------------------------------------

    def pointer_down(self, x: float, y: float) -> Optional[DraggablePoint]:
        """Start dragging the first control point under the pointer.

        Returns:
            The point that started dragging, or None.
        """
        if self.any_dragging:
            return None
        for point in self.control_points:
            if point.contains(x, y):
                point.drag()
                self.any_dragging = True
                log.debug("Drag started on %s at (%.1f, %.1f)", point.label, x, y)
                return point
        return None

    def pointer_move(self, x: float, y: float) -> None:
        """Move the dragged point, or update hover states."""
        for point in self.control_points:
            if point.dragging:
                point.move(x, y)
            elif not self.any_dragging and point.contains(x, y):
                point.hover()
            else:
                point.reset_to_idle()

    def pointer_up(self, x: float, y: float) -> Optional[DraggablePoint]:
        """Drop the dragged point at (x, y).

        Returns:
            The point that was released, or None if nothing was dragged.
        """
        for point in self.control_points:
            if point.dragging:
                point.move(x, y)
                point.reset_to_idle()
                self.any_dragging = False
                log.debug("Drag ended on %s at (%.1f, %.1f)", point.label, x, y)
                return point
        return None

    @property
    def hovered_point(self) -> Optional[DraggablePoint]:
        for point in self.control_points:
            if point.state is InteractionState.HOVERING:
                return point
        return None

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: Surface) -> None:
        """Draw the curve, its control polygon, control points and overlay."""
        s = self.style
        cp = [(p.x, p.y) for p in self.control_points]

        surface.set_stroke_color(s.curve_color)
        surface.set_line_width(s.curve_width)
        surface.stroke_cubic_curve(*cp)

        surface.set_stroke_color(s.control_line_color)
        surface.set_line_width(s.control_line_width)
        surface.stroke_polyline(cp)

        _draw_points(surface, self.control_points)

        if not self.interpolating:
            return

        surface.set_line_width(s.overlay_line_width)
        surface.set_stroke_color(s.q_line_color)
        surface.stroke_polyline([(p.x, p.y) for p in self.q_points])
        surface.set_stroke_color(s.r_line_color)
        surface.stroke_polyline([(p.x, p.y) for p in self.r_points])

        _draw_points(surface, self.interpolation_points)

"""
models.py

Point models and constants for the Bézier curve viewer.

A ``Point`` is a plain geometric shape (position, radius, color, label).
Control points are ``DraggablePoint`` objects, which wrap a ``Point`` and
attach an ``Interaction`` component holding the idle/hover/drag state.
Both satisfy the ``Drawable`` protocol so the curve can hit-test and draw
them uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Protocol


# ----------------------------
# Errors
# ----------------------------

class CurveError(Exception):
    """Base class for errors raised by the curve model."""


class InvalidArgument(CurveError, ValueError):
    """Raised when an operation is given input it is not defined for."""


class InvalidState(CurveError, RuntimeError):
    """Raised when an operation is called in the wrong interaction state."""


# ----------------------------
# Constants
# ----------------------------

DEFAULT_COLOR = "#E0E0E0"
HOVER_COLOR = "#6666AA"
DRAG_COLOR = "#0000FF"
MARKER_COLOR = "#000000"
LABEL_COLOR = "#333333"

LABEL_FONT_FAMILY = "sans-serif"
LABEL_FONT_SIZE = 24  # pixels

CONTROL_POINT_RADIUS = 12.0
MARKER_RADIUS = 3.0

# Label placement relative to the point center
LABEL_OFFSET_X = -16.0
LABEL_OFFSET_RADII = 2.2

SUBSCRIPT_ZERO = 0x2080  # "₀"


def subscript_label(prefix: str, index: int) -> str:
    """Build a label such as ``P₀`` from a prefix and a single-digit index."""
    return f"{prefix}{chr(SUBSCRIPT_ZERO + index)}"


# ----------------------------
# Drawing contract
# ----------------------------

class Surface(Protocol):
    """Immediate-mode 2D drawing surface used by the models.

    Style state (colors, width, font) is set before each primitive and
    stays in effect until changed.
    """

    def set_fill_color(self, color: str) -> None: ...
    def set_stroke_color(self, color: str) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def set_font(self, family: str, pixel_size: int) -> None: ...
    def clear(self) -> None: ...
    def fill_circle(self, x: float, y: float, radius: float) -> None: ...
    def stroke_polyline(self, points: List[tuple]) -> None: ...
    def stroke_cubic_curve(self, p0: tuple, p1: tuple, p2: tuple, p3: tuple) -> None: ...
    def fill_text(self, text: str, x: float, y: float) -> None: ...


class Drawable(Protocol):
    """Capability shared by markers and control points."""

    x: float
    y: float

    def contains(self, x: float, y: float) -> bool: ...
    def draw(self, surface: Surface) -> None: ...


@dataclass
class LabelStyle:
    """Font and color used for point labels."""
    color: str = LABEL_COLOR
    font_family: str = LABEL_FONT_FAMILY
    font_size: int = LABEL_FONT_SIZE


def draw_point(surface: Surface, x: float, y: float, radius: float, color: str,
               label: str = "", label_style: Optional[LabelStyle] = None) -> None:
    """Draw a filled disc and its optional label.

    The label is anchored at ``(x - 16, y - 2.2 * radius)`` so it sits
    above and slightly left of the disc.
    """
    surface.set_fill_color(color)
    surface.fill_circle(x, y, radius)
    if label:
        ls = label_style or LabelStyle()
        surface.set_font(ls.font_family, ls.font_size)
        surface.set_fill_color(ls.color)
        surface.fill_text(label, x + LABEL_OFFSET_X, y - radius * LABEL_OFFSET_RADII)


# ----------------------------
# Point shape
# ----------------------------

@dataclass
class Point:
    """A drawable point with a square hit area.

    Attributes:
        x: Horizontal position in surface coordinates.
        y: Vertical position in surface coordinates.
        radius: Disc radius, also the half-size of the hit box. Must be > 0.
        color: Fill color as a hex string.
        label: Optional short label drawn above the point.
    """
    x: float
    y: float
    radius: float
    color: str = DEFAULT_COLOR
    label: str = ""
    label_style: LabelStyle = field(default_factory=LabelStyle, repr=False)

    def __post_init__(self):
        if not self.radius > 0:
            raise InvalidArgument(f"point radius must be positive, got {self.radius!r}")

    def contains(self, x: float, y: float) -> bool:
        """Return True if (x, y) lies inside the point's bounding box.

        The box edges are inclusive. This is a square test even though the
        point is drawn as a disc.
        """
        r = self.radius
        return (
            self.x - r <= x <= self.x + r
            and self.y - r <= y <= self.y + r
        )

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def draw(self, surface: Surface) -> None:
        draw_point(surface, self.x, self.y, self.radius, self.color, self.label, self.label_style)


# ----------------------------
# Interaction
# ----------------------------

class InteractionState(Enum):
    """Pointer interaction state of a control point."""
    IDLE = "idle"
    HOVERING = "hovering"
    DRAGGING = "dragging"


STATE_COLORS: Dict[InteractionState, str] = {
    InteractionState.IDLE: DEFAULT_COLOR,
    InteractionState.HOVERING: HOVER_COLOR,
    InteractionState.DRAGGING: DRAG_COLOR,
}


@dataclass
class Interaction:
    """Idle/hover/drag state attached to a control point."""
    state: InteractionState = InteractionState.IDLE

    @property
    def dragging(self) -> bool:
        return self.state is InteractionState.DRAGGING

    def hover(self) -> None:
        self.state = InteractionState.HOVERING

    def drag(self) -> None:
        self.state = InteractionState.DRAGGING

    def reset_to_idle(self) -> None:
        self.state = InteractionState.IDLE


class DraggablePoint:
    """A control point: a ``Point`` shape plus an ``Interaction`` component.

    The drawn color is looked up from ``palette`` by the current
    interaction state and is never stored on the point. The caller is
    responsible for keeping at most one point in the DRAGGING state.

    Args:
        x: Initial horizontal position.
        y: Initial vertical position.
        radius: Disc radius and hit-box half-size.
        label: Optional label.
        palette: Mapping from interaction state to fill color.
        label_style: Font and color for the label.
    """

    def __init__(
        self,
        x: float,
        y: float,
        radius: float = CONTROL_POINT_RADIUS,
        label: str = "",
        palette: Optional[Mapping[InteractionState, str]] = None,
        label_style: Optional[LabelStyle] = None,
    ):
        self.shape = Point(x, y, radius, DEFAULT_COLOR, label, label_style or LabelStyle())
        self.interaction = Interaction()
        self.palette: Dict[InteractionState, str] = dict(STATE_COLORS)
        if palette:
            self.palette.update(palette)

    def __repr__(self) -> str:
        return (f"DraggablePoint(x={self.x!r}, y={self.y!r}, label={self.label!r}, "
                f"state={self.state.value})")

    @property
    def x(self) -> float:
        return self.shape.x

    @property
    def y(self) -> float:
        return self.shape.y

    @property
    def radius(self) -> float:
        return self.shape.radius

    @property
    def label(self) -> str:
        return self.shape.label

    @property
    def state(self) -> InteractionState:
        return self.interaction.state

    @property
    def dragging(self) -> bool:
        return self.interaction.dragging

    @property
    def color(self) -> str:
        """Fill color for the current interaction state."""
        return self.palette[self.interaction.state]

    def contains(self, x: float, y: float) -> bool:
        return self.shape.contains(x, y)

    def move(self, x: float, y: float) -> None:
        """Move the point to (x, y).

        Raises:
            InvalidState: If the point is not being dragged.
        """
        if not self.dragging:
            raise InvalidState(
                f"cannot move {self.label or 'control point'} while {self.state.value}"
            )
        self.shape.set_position(x, y)

    def hover(self) -> None:
        self.interaction.hover()

    def drag(self) -> None:
        self.interaction.drag()

    def reset_to_idle(self) -> None:
        self.interaction.reset_to_idle()

    def draw(self, surface: Surface) -> None:
        draw_point(surface, self.x, self.y, self.radius, self.color, self.label,
                   self.shape.label_style)


# ----------------------------
# Control point input
# ----------------------------

@dataclass
class PointSpec:
    """Input coordinates (and optional label) for one control point."""
    x: float
    y: float
    label: str = ""

    @classmethod
    def from_value(cls, value: Any) -> "PointSpec":
        """Coerce a ``PointSpec``, mapping or ``(x, y[, label])`` tuple.

        Mappings may carry the position either flat (``{"x", "y"}``) or
        nested under ``"coord"``.

        Raises:
            InvalidArgument: If the value has no usable coordinates.
        """
        if isinstance(value, PointSpec):
            return value
        if isinstance(value, (str, bytes)):
            raise InvalidArgument(f"not a control point coordinate: {value!r}")
        try:
            if isinstance(value, Mapping):
                coord = value.get("coord", value)
                return cls(float(coord["x"]), float(coord["y"]), str(value.get("label", "") or ""))
            if len(value) == 2:
                return cls(float(value[0]), float(value[1]))
            if len(value) != 3:
                raise InvalidArgument(f"expected (x, y) or (x, y, label), got {value!r}")
            return cls(float(value[0]), float(value[1]), str(value[2]))
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise InvalidArgument(f"not a control point coordinate: {value!r}") from e


def default_point_specs(width: float, height: float) -> List[PointSpec]:
    """Default control point placement for a ``width`` x ``height`` viewport."""
    return [
        PointSpec(width / 8, height * 5 / 6, subscript_label("P", 0)),
        PointSpec(width / 3, height / 6, subscript_label("P", 1)),
        PointSpec(width * 2 / 3, height / 6, subscript_label("P", 2)),
        PointSpec(width * 7 / 8, height * 5 / 6, subscript_label("P", 3)),
    ]

"""
canvas package

Bézier curve model, scene state, and the PyQt6 surface and view that show it.
"""

from canvas.curve import BezierCurve, CurveStyle, lerp
from canvas.scene import CurveScene
from canvas.surface import PainterSurface
from canvas.view import CurveView

__all__ = [
    "BezierCurve",
    "CurveStyle",
    "lerp",
    "CurveScene",
    "PainterSurface",
    "CurveView",
]

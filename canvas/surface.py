"""
canvas/surface.py

QPainter-backed implementation of the drawing surface used by the curve.
"""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen

from utils import hex_to_qcolor, make_font, to_qpointf


class PainterSurface:
    """
    Immediate-mode surface drawing through a QPainter.

    Mirrors a 2D canvas context: style state (fill, stroke, width, font)
    persists between primitives until changed.

    Args:
        painter: Active painter. The caller owns begin/end.
        width: Width of the paint device, used by ``clear``.
        height: Height of the paint device, used by ``clear``.
        background: Hex color used by ``clear``.
    """

    def __init__(self, painter: QPainter, width: float, height: float, background: str = "#FFFFFF"):
        self.painter = painter
        self.width = width
        self.height = height
        self.background = hex_to_qcolor(background, QColor(Qt.GlobalColor.white))
        self._fill = QColor(Qt.GlobalColor.black)
        self._stroke = QColor(Qt.GlobalColor.black)
        self._line_width = 1.0
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)

    def set_fill_color(self, color: str) -> None:
        self._fill = hex_to_qcolor(color, self._fill)

    def set_stroke_color(self, color: str) -> None:
        self._stroke = hex_to_qcolor(color, self._stroke)

    def set_line_width(self, width: float) -> None:
        self._line_width = float(width)

    def set_font(self, family: str, pixel_size: int) -> None:
        self.painter.setFont(make_font(family, pixel_size))

    def _stroke_pen(self) -> QPen:
        pen = QPen(self._stroke, self._line_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        return pen

    def clear(self) -> None:
        self.painter.fillRect(QRectF(0, 0, self.width, self.height), self.background)

    def fill_circle(self, x: float, y: float, radius: float) -> None:
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(self._fill))
        self.painter.drawEllipse(to_qpointf((x, y)), radius, radius)

    def stroke_polyline(self, points: Sequence[Sequence[float]]) -> None:
        if len(points) < 2:
            return
        path = QPainterPath(to_qpointf(points[0]))
        for p in points[1:]:
            path.lineTo(to_qpointf(p))
        self._stroke_path(path)

    def stroke_cubic_curve(self, p0, p1, p2, p3) -> None:
        path = QPainterPath(to_qpointf(p0))
        path.cubicTo(to_qpointf(p1), to_qpointf(p2), to_qpointf(p3))
        self._stroke_path(path)

    def _stroke_path(self, path: QPainterPath) -> None:
        self.painter.setPen(self._stroke_pen())
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPath(path)

    def fill_text(self, text: str, x: float, y: float) -> None:
        # (x, y) is the baseline origin, as with a canvas context
        self.painter.setPen(QPen(self._fill))
        self.painter.drawText(to_qpointf((x, y)), text)


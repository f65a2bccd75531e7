"""
utils.py

Qt conversion helpers for the curve viewer.
"""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QColor, QFont


def hex_to_qcolor(s: str, fallback: QColor) -> QColor:
    """
    Parse a hex string to a QColor.

    Args:
        s: Hex string like "#RGB", "#RRGGBB" or "#RRGGBBAA"
        fallback: Color to return if parsing fails

    Returns:
        Parsed QColor or fallback
    """
    if not s:
        return QColor(fallback)
    s = s.strip().lstrip("#")
    try:
        if len(s) == 3:
            return QColor(int(s[0] * 2, 16), int(s[1] * 2, 16), int(s[2] * 2, 16))
        if len(s) == 6:
            return QColor(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
        if len(s) == 8:
            return QColor(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16), int(s[6:8], 16))
    except ValueError:
        pass
    return QColor(fallback)


def to_qpointf(p: Sequence[float]) -> QPointF:
    """Convert an ``(x, y)`` pair to a QPointF."""
    return QPointF(float(p[0]), float(p[1]))


def make_font(family: str, pixel_size: int) -> QFont:
    """Build a QFont sized in pixels, mapping CSS generic families to Qt hints."""
    font = QFont(family)
    if family == "sans-serif":
        font.setStyleHint(QFont.StyleHint.SansSerif)
    elif family == "serif":
        font.setStyleHint(QFont.StyleHint.Serif)
    elif family == "monospace":
        font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPixelSize(max(1, int(pixel_size)))
    return font

"""
canvas/view.py

QWidget that shows a CurveScene, forwards pointer events to it and drives
the animation with a frame timer.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QSizePolicy, QWidget

from canvas.scene import CurveScene
from canvas.surface import PainterSurface
from debug_trace import trace, trace_frame, trace_pointer


class CurveView(QWidget):
    """
    Immediate-mode view of a curve scene.

    Each timer tick updates the scene once and schedules a repaint;
    ``paintEvent`` only clears and draws, so extra repaints (expose,
    resize) never advance the animation.

    Signals:
        frameAdvanced(float): Emitted after each tick with the new ``t``.
    """

    frameAdvanced = pyqtSignal(float)

    def __init__(self, scene: CurveScene, frame_interval_ms: int = 16,
                 background: str = "#FFFFFF", parent=None):
        super().__init__(parent)
        self.scene = scene
        self.background = background
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._timer = QTimer(self)
        self._timer.setInterval(max(1, int(frame_interval_ms)))
        self._timer.timeout.connect(self.advance_frame)

    # ------------------------------------------------------------------
    # Frame driver
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the frame timer."""
        self._timer.start()

    def stop(self) -> None:
        """Stop the frame timer."""
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def advance_frame(self) -> None:
        """Run one scene update and request a repaint."""
        self.scene.tick()
        trace_frame(self.scene)
        self.frameAdvanced.emit(self.scene.curve.t)
        self.update()

    def set_background(self, color: str) -> None:
        self.background = color
        self.update()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            surface = PainterSurface(painter, self.width(), self.height(), self.background)
            self.scene.render(surface)
        finally:
            painter.end()

    def resizeEvent(self, event):
        size = event.size()
        self.scene.resize(size.width(), size.height())
        trace(f"resize {size.width()}x{size.height()}", "VIEW")
        super().resizeEvent(event)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            point = self.scene.pointer_down(pos.x(), pos.y())
            trace_pointer("down", pos.x(), pos.y(), point)
            self.update()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        pos = event.position()
        self.scene.pointer_move(pos.x(), pos.y())
        self._update_cursor()
        self.update()
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            point = self.scene.pointer_up(pos.x(), pos.y())
            trace_pointer("up", pos.x(), pos.y(), point)
            self._update_cursor()
            self.update()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def _update_cursor(self) -> None:
        curve = self.scene.curve
        if curve.any_dragging:
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        elif curve.hovered_point is not None:
            self.setCursor(Qt.CursorShape.OpenHandCursor)
        else:
            self.unsetCursor()

    def hideEvent(self, event):
        self.stop()
        super().hideEvent(event)

    def showEvent(self, event):
        self.start()
        super().showEvent(event)

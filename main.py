"""
main.py

casteljau - interactive cubic Bézier curve viewer

PyQt6 application showing a cubic Bézier curve with:
- Four draggable control points
- An animated overlay of De Casteljau's construction
- Show/hide and pause/run toggles for the overlay

Usage:
    python main.py

Dependencies:
    pip install PyQt6 platformdirs tomli-w
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QPushButton,
    QToolBar,
)

from canvas import CurveScene, CurveStyle, CurveView
from styles import STYLES, DEFAULT_STYLE, CANVAS_BACKGROUND_COLORS
from settings import SettingsManager, get_settings
from debug_trace import DEBUG_TRACE, close_log, configure, trace, trace_call, trace_exception

INITIAL_SIZE = (1200, 800)


class MainWindow(QMainWindow):
    """Main window: the curve view plus the overlay toggles."""

    def __init__(self, settings_manager: SettingsManager):
        super().__init__()
        self.settings_manager = settings_manager
        s = settings_manager.settings
        self.setWindowTitle("casteljau - cubic Bézier curve")

        self.scene = CurveScene(
            INITIAL_SIZE[0],
            INITIAL_SIZE[1],
            CurveStyle.from_settings(s),
            s.curve.total_steps,
        )
        self.scene.curve.interpolating = s.animation.start_interpolating
        self.scene.curve.paused = s.animation.start_paused

        self.view = CurveView(
            self.scene,
            s.animation.frame_interval_ms,
            CANVAS_BACKGROUND_COLORS.get(s.theme, "#FFFFFF"),
        )
        self.view.frameAdvanced.connect(self._on_frame_advanced)
        self.setCentralWidget(self.view)

        self._build_toolbar()
        self._build_menus()
        self._placed = False
        self._sync_toggle_controls()
        self.statusBar().showMessage("Drag the control points to reshape the curve.")

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Curve", self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.show_button = QPushButton(self)
        self.show_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.show_button.clicked.connect(lambda: self.toggle_interpolation())
        toolbar.addWidget(self.show_button)

        self.pause_button = QPushButton(self)
        self.pause_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.pause_button.clicked.connect(lambda: self.toggle_pause())
        # Toolbar widgets are shown/hidden through their action
        self.pause_action = toolbar.addWidget(self.pause_button)

        toolbar.addSeparator()
        self.reset_act = QAction("Reset points", self)
        self.reset_act.setShortcut(QKeySequence("R"))
        self.reset_act.triggered.connect(lambda: self.reset_points())
        toolbar.addAction(self.reset_act)

    def _build_menus(self) -> None:
        view_menu = self.menuBar().addMenu("&View")

        self.interpolation_act = QAction("Toggle interpolation", self)
        self.interpolation_act.setShortcut(QKeySequence("I"))
        self.interpolation_act.triggered.connect(lambda: self.toggle_interpolation())
        view_menu.addAction(self.interpolation_act)

        self.pause_act = QAction("Pause / run", self)
        self.pause_act.setShortcut(QKeySequence("Space"))
        self.pause_act.triggered.connect(lambda: self.toggle_pause())
        view_menu.addAction(self.pause_act)

        view_menu.addAction(self.reset_act)

        theme_menu = self.menuBar().addMenu("&Theme")
        group = QActionGroup(self)
        group.setExclusive(True)
        for name in STYLES:
            act = QAction(name, self, checkable=True)
            act.setChecked(name == self.settings_manager.settings.theme)
            act.triggered.connect(lambda checked, n=name: self.apply_theme(n))
            group.addAction(act)
            theme_menu.addAction(act)

    def _sync_toggle_controls(self) -> None:
        """Refresh button text and visibility from the curve flags."""
        self.show_button.setText(self.scene.interpolation_button_text())
        self.pause_button.setText(self.scene.pause_button_text())
        self.pause_action.setVisible(self.scene.pause_button_visible())
        self.pause_act.setEnabled(self.scene.pause_button_visible())

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @trace_call("UI")
    def toggle_interpolation(self) -> None:
        self.scene.toggle_interpolation()
        self._sync_toggle_controls()
        self.view.update()

    @trace_call("UI")
    def toggle_pause(self) -> None:
        if not self.scene.pause_button_visible():
            return
        self.scene.toggle_pause()
        self._sync_toggle_controls()

    @trace_call("UI")
    def reset_points(self) -> None:
        self.scene.reset_points()
        self.view.update()
        self.statusBar().showMessage("Control points reset.")

    def apply_theme(self, name: str) -> None:
        if name not in STYLES:
            return
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(STYLES[name])
        self.settings_manager.settings.theme = name
        self.view.set_background(CANVAS_BACKGROUND_COLORS.get(name, "#FFFFFF"))
        trace(f"Theme changed to {name}", "UI")

    def _on_frame_advanced(self, t: float) -> None:
        if self.scene.curve.interpolating:
            state = "paused" if self.scene.curve.is_paused() else "running"
            self.statusBar().showMessage(f"t = {t:.3f} ({state})")

    def showEvent(self, event):
        super().showEvent(event)
        if not self._placed:
            # Place the default points once the view has its real size
            self.scene.resize(self.view.width(), self.view.height())
            self.scene.reset_points()
            self._placed = True

    def closeEvent(self, event):
        self.view.stop()
        super().closeEvent(event)


def main():
    """Application entry point."""
    logging.basicConfig(
        level=logging.DEBUG if DEBUG_TRACE else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    configure()
    trace("Application starting", "MAIN")
    app = QApplication(sys.argv)

    trace("Loading settings", "MAIN")
    settings_manager = get_settings()

    # Ensure settings file has all sections
    settings_manager.ensure_file_complete()

    # Apply saved theme (or default if not set)
    initial_style = settings_manager.settings.theme
    if initial_style not in STYLES:
        initial_style = DEFAULT_STYLE
        settings_manager.settings.theme = initial_style
    app.setStyleSheet(STYLES[initial_style])

    # Save settings on application quit
    def save_on_quit():
        trace("Saving settings on quit", "MAIN")
        settings_manager.save()
        close_log()

    app.aboutToQuit.connect(save_on_quit)

    trace("Creating MainWindow", "MAIN")
    w = MainWindow(settings_manager)
    w.resize(*INITIAL_SIZE)
    w.show()
    trace("Entering event loop", "MAIN")
    sys.exit(app.exec())


def run():
    """Console entry point: ``main()`` with crash tracing installed."""
    def excepthook(exc_type, exc_value, exc_tb):
        logging.getLogger(__name__).critical(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
        close_log()

    sys.excepthook = excepthook

    try:
        main()
    except Exception:
        trace_exception("Fatal exception")
        close_log()
        raise


if __name__ == "__main__":
    run()

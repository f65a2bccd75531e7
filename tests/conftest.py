"""Shared fixtures: a recording drawing surface and a headless QApplication."""
from __future__ import annotations

import os
import sys

import pytest

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingSurface:
    """Drawing surface that records every call as ``(name, args)``."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))
        return record

    def names(self):
        return [name for name, _ in self.calls]

    def primitives(self):
        """Calls that put pixels on the surface, without style changes."""
        return [(n, a) for n, a in self.calls if not n.startswith("set_")]


@pytest.fixture()
def surface():
    return RecordingSurface()


@pytest.fixture()
def square_curve():
    """Curve from the worked example: P0=(0,0) P1=(0,100) P2=(100,100) P3=(100,0)."""
    from canvas.curve import BezierCurve
    return BezierCurve([
        {"x": 0, "y": 0, "label": "P0"},
        {"x": 0, "y": 100, "label": "P1"},
        {"x": 100, "y": 100, "label": "P2"},
        {"x": 100, "y": 0, "label": "P3"},
    ])


@pytest.fixture(scope="session")
def qapp():
    """Provide a single QApplication for the entire test session."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication(sys.argv)
    yield app

"""Opt-in tracing: handler setup, category gating and scene event formatting."""
from __future__ import annotations

import logging

import pytest

import debug_trace
from canvas.scene import CurveScene


@pytest.fixture()
def trace_file(tmp_path):
    path = tmp_path / "trace.log"
    debug_trace.configure(enabled=True, log_file=str(path))
    yield path
    debug_trace.close_log()


def _lines(path):
    debug_trace.close_log()
    return path.read_text(encoding="utf-8").splitlines()


class TestConfigure:
    def test_disabled_by_default(self):
        debug_trace.configure(enabled=False)
        assert not debug_trace.enabled()
        debug_trace.trace("nothing")  # no handlers, no error

    def test_lines_carry_category(self, trace_file):
        debug_trace.trace("starting", "MAIN")
        [line] = _lines(trace_file)
        assert line.endswith("[MAIN] starting")
        assert line.startswith("[")

    def test_configure_is_idempotent(self, trace_file):
        debug_trace.configure(enabled=True, log_file=str(trace_file))
        debug_trace.trace("once", "UI")
        assert len(_lines(trace_file)) == 1

    def test_close_log_restores_logger(self, trace_file):
        debug_trace.close_log()
        assert debug_trace.logger.handlers == []
        assert debug_trace.logger.propagate
        assert debug_trace.logger.level == logging.NOTSET


class TestSceneEvents:
    def test_pointer_names_dragged_point(self, trace_file):
        scene = CurveScene(800, 600)
        p0 = scene.curve.control_points[0]
        debug_trace.trace_pointer("down", p0.x, p0.y, scene.pointer_down(p0.x, p0.y))
        debug_trace.trace_pointer("down", 1, 1, None)
        first, second = _lines(trace_file)
        assert first.endswith(f"[POINTER] down ({p0.x:.1f}, {p0.y:.1f}) -> {p0.label}")
        assert second.endswith("-> -")

    def test_frames_need_their_own_switch(self, trace_file, monkeypatch):
        scene = CurveScene(800, 600)
        scene.tick()
        monkeypatch.setattr(debug_trace, "TRACE_FRAME", False)
        debug_trace.trace_frame(scene)
        monkeypatch.setattr(debug_trace, "TRACE_FRAME", True)
        scene.curve.interpolating = True
        scene.curve.pause()
        debug_trace.trace_frame(scene)
        [line] = _lines(trace_file)
        assert line.endswith("[FRAME] frame 1 t=0.005 overlay paused")


class TestTraceCall:
    def test_entry_and_exit(self, trace_file):
        @debug_trace.trace_call("UI")
        def toggle():
            return 7

        assert toggle() == 7
        enter, leave = _lines(trace_file)
        assert enter.endswith("[UI] >>> TestTraceCall.test_entry_and_exit.<locals>.toggle")
        assert "<<< " in leave and leave.endswith(" ms)")

    def test_exception_propagates(self, trace_file):
        @debug_trace.trace_call("UI")
        def broken():
            raise ValueError("bad")

        with pytest.raises(ValueError):
            broken()
        assert _lines(trace_file)[-1].endswith("[ERROR] !!! TestTraceCall.test_exception_propagates.<locals>.broken raised ValueError: bad")

    def test_passthrough_when_disabled(self):
        @debug_trace.trace_call("UI")
        def plain(x):
            return x * 2

        assert plain(3) == 6

"""Pointer down/move/up state machine on BezierCurve."""
from __future__ import annotations

import pytest

from canvas.curve import BezierCurve
from models import InteractionState


@pytest.fixture()
def overlapping_curve():
    """P0 and P1 have overlapping hit boxes around x=105."""
    return BezierCurve([(100, 100, "P0"), (110, 100, "P1"), (300, 300, "P2"), (500, 100, "P3")])


def _states(curve):
    return [p.state for p in curve.control_points]


IDLE = InteractionState.IDLE
HOVER = InteractionState.HOVERING
DRAG = InteractionState.DRAGGING


class TestPointerDown:
    def test_miss_does_nothing(self, overlapping_curve):
        assert overlapping_curve.pointer_down(0, 0) is None
        assert not overlapping_curve.any_dragging
        assert _states(overlapping_curve) == [IDLE] * 4

    def test_hit_starts_drag(self, overlapping_curve):
        point = overlapping_curve.pointer_down(300, 305)
        assert point is overlapping_curve.control_points[2]
        assert overlapping_curve.any_dragging
        assert _states(overlapping_curve) == [IDLE, IDLE, DRAG, IDLE]

    def test_overlap_first_in_order_wins(self, overlapping_curve):
        overlapping_curve.pointer_down(105, 100)
        assert _states(overlapping_curve) == [DRAG, IDLE, IDLE, IDLE]

    def test_second_press_cannot_start_another_drag(self, overlapping_curve):
        overlapping_curve.pointer_down(105, 100)
        assert overlapping_curve.pointer_down(500, 100) is None
        assert _states(overlapping_curve) == [DRAG, IDLE, IDLE, IDLE]


class TestPointerMove:
    def test_hover_over_point(self, overlapping_curve):
        overlapping_curve.pointer_move(500, 95)
        assert _states(overlapping_curve) == [IDLE, IDLE, IDLE, HOVER]
        assert overlapping_curve.hovered_point is overlapping_curve.control_points[3]

    def test_hover_clears_when_leaving(self, overlapping_curve):
        overlapping_curve.pointer_move(500, 95)
        overlapping_curve.pointer_move(0, 0)
        assert _states(overlapping_curve) == [IDLE] * 4
        assert overlapping_curve.hovered_point is None

    def test_drag_follows_pointer_exactly(self, overlapping_curve):
        overlapping_curve.pointer_down(95, 95)
        overlapping_curve.pointer_move(250, 40)
        p0 = overlapping_curve.control_points[0]
        assert (p0.x, p0.y) == (250, 40)

    def test_hover_suppressed_while_dragging(self, overlapping_curve):
        overlapping_curve.pointer_down(100, 100)
        overlapping_curve.pointer_move(500, 100)
        # P0 followed the pointer onto P3; P3 must not hover
        assert _states(overlapping_curve) == [DRAG, IDLE, IDLE, IDLE]

    def test_move_clears_stale_hover_when_drag_starts(self, overlapping_curve):
        overlapping_curve.pointer_move(300, 300)
        assert overlapping_curve.control_points[2].state is HOVER
        overlapping_curve.pointer_down(100, 100)
        overlapping_curve.pointer_move(120, 120)
        assert overlapping_curve.control_points[2].state is IDLE

    def test_other_points_stay_put(self, overlapping_curve):
        overlapping_curve.pointer_down(300, 300)
        overlapping_curve.pointer_move(0, 0)
        assert [(p.x, p.y) for p in overlapping_curve.control_points] == [(100, 100), (110, 100), (0, 0), (500, 100)]


class TestPointerUp:
    def test_release_drops_at_pointer(self, overlapping_curve):
        overlapping_curve.pointer_down(300, 300)
        overlapping_curve.pointer_move(320, 320)
        released = overlapping_curve.pointer_up(333, 344)
        p2 = overlapping_curve.control_points[2]
        assert released is p2
        assert (p2.x, p2.y) == (333, 344)
        assert p2.state is IDLE
        assert not overlapping_curve.any_dragging

    def test_release_without_drag(self, overlapping_curve):
        assert overlapping_curve.pointer_up(100, 100) is None
        assert (overlapping_curve.control_points[0].x, overlapping_curve.control_points[0].y) == (100, 100)

    def test_new_drag_after_release(self, overlapping_curve):
        overlapping_curve.pointer_down(105, 100)
        overlapping_curve.pointer_up(105, 100)
        overlapping_curve.pointer_down(500, 100)
        assert _states(overlapping_curve) == [IDLE, IDLE, IDLE, DRAG]

    def test_at_most_one_dragging_through_a_sequence(self, overlapping_curve):
        events = [
            ("down", 105, 100), ("move", 110, 100), ("down", 110, 100),
            ("move", 300, 300), ("down", 300, 300), ("up", 300, 300),
            ("down", 300, 300), ("move", 500, 100), ("up", 505, 100),
        ]
        for kind, x, y in events:
            getattr(overlapping_curve, f"pointer_{kind}")(x, y)
            dragging = [p for p in overlapping_curve.control_points if p.dragging]
            assert len(dragging) <= 1
            assert overlapping_curve.any_dragging == bool(dragging)

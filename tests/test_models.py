"""Tests for Point, DraggablePoint and control point input in models.py."""
from __future__ import annotations

import pytest

from models import (
    DEFAULT_COLOR,
    DRAG_COLOR,
    HOVER_COLOR,
    DraggablePoint,
    InteractionState,
    InvalidArgument,
    InvalidState,
    Point,
    PointSpec,
    default_point_specs,
    subscript_label,
)


# ─────────────────────────────────────────────────────────
# Point
# ─────────────────────────────────────────────────────────


class TestPointContains:
    def test_center(self):
        assert Point(100, 100, 12).contains(100, 100)

    def test_right_edge_is_inside(self):
        assert Point(100, 100, 12).contains(112, 100)

    def test_just_past_right_edge(self):
        assert not Point(100, 100, 12).contains(113, 100)

    @pytest.mark.parametrize("x, y", [(88, 100), (112, 100), (100, 88), (100, 112), (88, 88), (112, 112)])
    def test_box_edges_inclusive(self, x, y):
        assert Point(100, 100, 12).contains(x, y)

    @pytest.mark.parametrize("x, y", [(87.99, 100), (112.01, 100), (100, 87.99), (100, 112.01)])
    def test_just_outside(self, x, y):
        assert not Point(100, 100, 12).contains(x, y)

    def test_box_corner_outside_circle_still_hits(self):
        # Square hit area: the corner is farther than the radius but counts
        assert Point(0, 0, 10).contains(10, 10)


class TestPointConstruction:
    def test_zero_radius_rejected(self):
        with pytest.raises(InvalidArgument):
            Point(0, 0, 0)

    def test_negative_radius_rejected(self):
        with pytest.raises(InvalidArgument):
            Point(0, 0, -1)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Point(0, 0, 0)


class TestPointDraw:
    def test_unlabelled_draws_circle_only(self, surface):
        Point(10, 20, 3, "#000000").draw(surface)
        assert surface.primitives() == [("fill_circle", (10, 20, 3))]
        assert ("set_fill_color", ("#000000",)) in surface.calls

    def test_label_offset(self, surface):
        Point(100, 100, 12, label="P").draw(surface)
        text = [a for n, a in surface.calls if n == "fill_text"]
        assert len(text) == 1
        label, x, y = text[0]
        assert label == "P"
        assert x == pytest.approx(84)
        assert y == pytest.approx(100 - 12 * 2.2)

    def test_label_font(self, surface):
        Point(0, 0, 3, label="B").draw(surface)
        assert ("set_font", ("sans-serif", 24)) in surface.calls

    def test_draw_does_not_change_point(self, surface):
        p = Point(5, 6, 3, "#123456", "Q")
        p.draw(surface)
        assert (p.x, p.y, p.radius, p.color, p.label) == (5, 6, 3, "#123456", "Q")


# ─────────────────────────────────────────────────────────
# DraggablePoint
# ─────────────────────────────────────────────────────────


class TestDraggablePointState:
    def test_starts_idle(self):
        p = DraggablePoint(0, 0)
        assert p.state is InteractionState.IDLE
        assert p.color == DEFAULT_COLOR
        assert not p.dragging

    def test_hover_color(self):
        p = DraggablePoint(0, 0)
        p.hover()
        assert p.state is InteractionState.HOVERING
        assert p.color == HOVER_COLOR

    def test_drag_color(self):
        p = DraggablePoint(0, 0)
        p.drag()
        assert p.dragging
        assert p.color == DRAG_COLOR

    def test_reset_to_idle(self):
        p = DraggablePoint(0, 0)
        p.drag()
        p.reset_to_idle()
        assert p.state is InteractionState.IDLE
        assert p.color == DEFAULT_COLOR

    def test_custom_palette(self):
        p = DraggablePoint(0, 0, palette={InteractionState.HOVERING: "#ABCDEF"})
        assert p.color == DEFAULT_COLOR
        p.hover()
        assert p.color == "#ABCDEF"

    def test_two_points_may_both_drag(self):
        # Exclusivity is the curve's job, not the point's
        a, b = DraggablePoint(0, 0), DraggablePoint(5, 5)
        a.drag()
        b.drag()
        assert a.dragging and b.dragging

    def test_draws_with_state_color(self, surface):
        p = DraggablePoint(0, 0, label="P")
        p.hover()
        p.draw(surface)
        assert surface.calls[0] == ("set_fill_color", (HOVER_COLOR,))


class TestDraggablePointMove:
    def test_move_while_dragging(self):
        p = DraggablePoint(0, 0)
        p.drag()
        p.move(40, 50)
        assert (p.x, p.y) == (40, 50)

    def test_move_when_idle_raises(self):
        p = DraggablePoint(0, 0)
        with pytest.raises(InvalidState):
            p.move(1, 1)
        assert (p.x, p.y) == (0, 0)

    def test_move_when_hovering_raises(self):
        p = DraggablePoint(0, 0)
        p.hover()
        with pytest.raises(InvalidState):
            p.move(1, 1)

    def test_contains_follows_move(self):
        p = DraggablePoint(0, 0, radius=12)
        p.drag()
        p.move(200, 200)
        assert p.contains(210, 190)
        assert not p.contains(0, 0)


# ─────────────────────────────────────────────────────────
# Input coordinates
# ─────────────────────────────────────────────────────────


class TestPointSpec:
    def test_flat_mapping(self):
        assert PointSpec.from_value({"x": 1, "y": 2, "label": "A"}) == PointSpec(1.0, 2.0, "A")

    def test_nested_coord_mapping(self):
        assert PointSpec.from_value({"coord": {"x": 3, "y": 4}, "label": "B"}) == PointSpec(3.0, 4.0, "B")

    def test_tuple(self):
        assert PointSpec.from_value((5, 6)) == PointSpec(5.0, 6.0, "")

    def test_tuple_with_label(self):
        assert PointSpec.from_value((5, 6, "C")) == PointSpec(5.0, 6.0, "C")

    def test_missing_coordinate(self):
        with pytest.raises(InvalidArgument):
            PointSpec.from_value({"x": 1})

    def test_garbage(self):
        with pytest.raises(InvalidArgument):
            PointSpec.from_value(42)

    @pytest.mark.parametrize("value", ["12", b"12", "123"])
    def test_strings_rejected(self, value):
        with pytest.raises(InvalidArgument):
            PointSpec.from_value(value)

    def test_four_values_rejected(self):
        with pytest.raises(InvalidArgument):
            PointSpec.from_value((1, 2, "A", "extra"))


class TestDefaultPlacement:
    def test_fractions_of_viewport(self):
        specs = default_point_specs(800, 600)
        assert [(s.x, s.y) for s in specs] == [
            pytest.approx((100, 500)),
            pytest.approx((800 / 3, 100)),
            pytest.approx((1600 / 3, 100)),
            pytest.approx((700, 500)),
        ]

    def test_subscript_labels(self):
        assert [s.label for s in default_point_specs(10, 10)] == ["P₀", "P₁", "P₂", "P₃"]

    def test_subscript_label(self):
        assert subscript_label("Q", 2) == "Q₂"

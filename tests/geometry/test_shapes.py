"""
Tests for shape constructors.
"""

import math

import pytest

from geometry import shapes
from models.enums import VertexCommand
from models.mobject import Mobject
from models.style import Style
from utils import colors


class TestArc:
    """Arcs and circles built from tangent-handle anchors."""

    def test_default_quarter_arc(self):
        arc = shapes.make_arc()
        assert arc.num_points() == 9
        first, last = arc.points[0].position, arc.points[-1].position
        assert first == pytest.approx((1.0, 0.0))
        assert last[0] == pytest.approx(0.0, abs=1e-12)
        assert last[1] == pytest.approx(1.0)

    def test_anchors_lie_on_circle(self):
        arc = shapes.make_arc(angle=math.pi, radius=2.5, num_components=7)
        for anchor in arc.points:
            x, y = anchor.position
            assert math.hypot(x, y) == pytest.approx(2.5)

    def test_handles_are_tangent(self):
        arc = shapes.make_arc(angle=math.pi / 2, num_components=5)
        anchor = arc.points[2]
        px, py = anchor.position
        rx, ry = anchor.right[0] - px, anchor.right[1] - py
        # Radius and handle direction are perpendicular
        assert px * rx + py * ry == pytest.approx(0.0, abs=1e-12)

    def test_num_components_from_config(self, engine_config):
        from dataclasses import replace
        from managers.config_manager import set_engine_config
        set_engine_config(replace(engine_config, arc_components=5))
        assert shapes.make_arc().num_points() == 5

    def test_arc_style_defaults_to_white(self):
        assert shapes.make_arc().style.stroke_color == colors.WHITE

    def test_circle_is_closed_and_red(self):
        circle = shapes.make_circle(radius=3)
        assert circle.path.closed is True
        assert circle.style.stroke_color == colors.RED
        assert circle.points[0].position == pytest.approx(circle.points[-1].position)
        assert circle.get_dimensions().width == pytest.approx(6.0)


class TestPolygons:
    """Straight-edged shapes."""

    def test_polygon_repeats_start_vertex(self):
        poly = shapes.make_polygon([(0, 0), (1, 0), (0, 1)])
        assert poly.num_points() == 4
        assert poly.points[0].position == poly.points[-1].position
        assert poly.path.commands == [VertexCommand.MOVE] + [VertexCommand.LINE] * 3
        assert poly.style.stroke_color == colors.BLUE

    def test_regular_polygon_height(self):
        for sides in (3, 4, 5, 6, 8):
            poly = shapes.make_regular_polygon(sides, height=3)
            dims = poly.get_dimensions()
            assert dims.height == pytest.approx(3.0)
            # Top at y = height / 2
            assert max(a.position[1] for a in poly.points) == pytest.approx(1.5)

    def test_regular_polygon_is_green(self):
        assert shapes.make_pentagon().style.stroke_color == colors.GREEN

    def test_triangle_has_vertex_on_top(self):
        tri = shapes.make_triangle()
        top = tri.points[0].position
        assert top[0] == pytest.approx(0.0, abs=1e-12)
        assert top[1] == pytest.approx(1.0)

    def test_square_has_edge_on_top(self):
        sq = shapes.make_square(side_length=2)
        tops = [a.position for a in sq.points[:-1] if a.position[1] == pytest.approx(1.0)]
        assert len(tops) == 2
        assert sq.get_dimensions().width == pytest.approx(2.0)

    def test_too_few_sides_raises(self):
        with pytest.raises(ValueError):
            shapes.make_regular_polygon(2)

    def test_named_polygons_side_counts(self):
        assert shapes.make_triangle().num_points() == 4
        assert shapes.make_pentagon().num_points() == 6
        assert shapes.make_hexagon().num_points() == 7
        assert shapes.make_octagon().num_points() == 9

    def test_rectangle(self):
        rect = shapes.make_rectangle(height=2, width=4)
        dims = rect.get_dimensions()
        assert dims.width == pytest.approx(4.0)
        assert dims.height == pytest.approx(2.0)
        assert dims.center == pytest.approx((0.0, 0.0))
        assert rect.style.stroke_color == colors.WHITE

    def test_explicit_style_wins(self):
        style = Style(stroke_color="#123456")
        assert shapes.make_rectangle(style=style).style.stroke_color == "#123456"


class TestStars:
    """Stars alternate outer tips and inner corners."""

    def test_five_point_star(self):
        star = shapes.make_star()
        assert star.num_points() == 11
        assert star.get_dimensions().height == pytest.approx(2.0)

    def test_inner_radius_ratio(self):
        star = shapes.make_star(num_points=5, ratio=0.5)
        positions = [a.position for a in star.points[:-1]]
        top = positions[0]
        assert top[1] == pytest.approx(1.0)
        # Center lies on x = 0, equidistant from the top tip and the next tip
        x1, y1 = positions[2]
        cy = (1 - x1 ** 2 - y1 ** 2) / (2 * (1 - y1))
        outer = [math.hypot(x, y - cy) for x, y in positions[0::2]]
        inner = [math.hypot(x, y - cy) for x, y in positions[1::2]]
        assert outer == pytest.approx([outer[0]] * 5)
        assert inner == pytest.approx([0.5 * outer[0]] * 5)

    def test_star_of_david(self):
        star = shapes.make_star_of_david()
        assert star.num_points() == 13
        assert star.style.stroke_color == colors.GREEN


class TestContainers:
    """Empty nodes and groups."""

    def test_vmobject_is_empty(self):
        mob = shapes.make_vmobject()
        assert isinstance(mob, Mobject)
        assert not mob.has_points()
        assert mob.submobjects == []

    def test_group_propagates_style(self, triangle):
        other = triangle.copy()
        group = shapes.make_group(triangle, other)
        group.apply_style(stroke_color="#FF0000")
        assert triangle.style.stroke_color == "#FF0000"
        assert other.style.stroke_color == "#FF0000"
        assert group.style.stroke_color == colors.WHITE

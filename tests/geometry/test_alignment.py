"""
Tests for the alignment engine.

Alignment must make two trees structurally congruent without moving any
visible curve, and must be deterministic.
"""

import pytest

from geometry.alignment import (
    add_n_more_submobjects,
    add_points,
    align_data,
    align_points,
    null_point_align,
)
from geometry.bezier import bezier_point
from geometry.shapes import make_group
from models.mobject import Mobject
from models.path import PathGeometry


def structure(mob: Mobject):
    """Nested (point count, children) shape of a tree"""
    return (mob.num_points(), [structure(sub) for sub in mob.submobjects])


def curve_samples(path: PathGeometry, per_segment: int = 4):
    """Points along the curve, used to compare shapes independent of anchors"""
    samples = []
    for quad in path.to_bezier_quads():
        for k in range(per_segment + 1):
            samples.append(bezier_point(quad, k / per_segment))
    return samples


def point_on_curve(point, path: PathGeometry, tol=1e-7) -> bool:
    """Whether point lies on one of the path's segments (dense sampling)"""
    steps = 400
    for quad in path.to_bezier_quads():
        for k in range(steps + 1):
            q = bezier_point(quad, k / steps)
            if abs(q[0] - point[0]) < tol and abs(q[1] - point[1]) < tol:
                return True
    return False


class TestAddPoints:
    """Point insertion on a single path."""

    def test_grows_to_requested_count(self, square_path):
        result = add_points(square_path, 3)
        assert len(result) == len(square_path) + 3

    def test_original_corners_survive(self, square_path):
        result = add_points(square_path, 4)
        positions = [a.position for a in result.anchors]
        for corner in square_path.anchors:
            assert corner.position in positions

    def test_new_points_lie_on_original_edges(self, square_path):
        result = add_points(square_path, 4)
        for anchor in result.anchors:
            x, y = anchor.position
            on_edge = (
                (y == pytest.approx(0) or y == pytest.approx(2) or x == pytest.approx(0) or x == pytest.approx(2))
                and -1e-9 <= x <= 2 + 1e-9 and -1e-9 <= y <= 2 + 1e-9
            )
            assert on_edge

    def test_curved_path_keeps_shape(self):
        path = PathGeometry.from_bezier_quads([((0, 0), (1, 2), (3, 2), (4, 0))])
        result = add_points(path, 3)
        for point in curve_samples(result):
            assert point_on_curve(point, path, tol=1e-6)

    def test_single_point_is_replicated(self):
        path = PathGeometry.single_point((1.0, 2.0))
        result = add_points(path, 2)
        assert len(result) == 3
        assert all(a.position == (1.0, 2.0) for a in result.anchors)

    def test_zero_extra_returns_copy(self, square_path):
        result = add_points(square_path, 0)
        assert result == square_path
        assert result is not square_path


class TestAlignPoints:
    """Point-count alignment between two nodes."""

    def test_three_vs_five(self, line3, line5):
        align_points(line3, line5)
        assert line3.num_points() == 5
        assert line5.num_points() == 5

    def test_empty_side_is_seeded_at_center(self, line5):
        empty = Mobject()
        align_points(empty, line5)
        assert empty.num_points() == 5
        assert all(a.position == (0.0, 0.0) for a in empty.points)

    def test_equal_counts_untouched(self, line3):
        other = line3.copy()
        before = line3.path.copy()
        align_points(line3, other)
        assert line3.path == before


class TestNullPointAlign:
    """Pushing geometry down when only one side has it."""

    def test_geometry_pushed_into_child(self, triangle):
        group = make_group(Mobject(PathGeometry.single_point((0, 0))))
        null_point_align(group, triangle)

        assert len(triangle.submobjects) == 1
        assert triangle.submobjects[0].num_points() == 4
        assert triangle.num_points() == 1

    def test_both_with_geometry_untouched(self, triangle, line3):
        null_point_align(triangle, line3)
        assert triangle.submobjects == []
        assert line3.submobjects == []


class TestAddSubmobjects:
    """Submobject duplication."""

    def test_original_children_keep_identity(self):
        a = Mobject(PathGeometry.single_point((0, 0)))
        b = Mobject(PathGeometry.single_point((1, 1)))
        parent = make_group(a, b)

        add_n_more_submobjects(parent, 3)

        assert len(parent.submobjects) == 5
        assert parent.submobjects[0] is a
        assert any(sub is b for sub in parent.submobjects)

    def test_copies_are_transparent(self):
        a = Mobject(PathGeometry.single_point((0, 0)))
        parent = make_group(a)

        add_n_more_submobjects(parent, 2)

        assert parent.submobjects[0].style.stroke_opacity == 1.0
        for copy in parent.submobjects[1:]:
            assert copy.style.stroke_opacity == 0.0
            assert copy.style.fill_opacity == 0.0

    def test_childless_gets_point_placeholders(self, triangle):
        add_n_more_submobjects(triangle, 2)
        assert len(triangle.submobjects) == 2
        assert all(sub.num_points() == 1 for sub in triangle.submobjects)


class TestAlignData:
    """Full recursive alignment."""

    def _pair(self):
        left = make_group(
            Mobject(PathGeometry.from_corners([(0, 0), (1, 0), (1, 1)])),
        )
        right = make_group(
            Mobject(PathGeometry.from_corners([(5, 5), (6, 5), (6, 6), (5, 6), (4, 5)])),
            Mobject(PathGeometry.from_corners([(0, 0), (2, 0)], closed=False)),
            Mobject(PathGeometry.single_point((3, 3))),
        )
        return left, right

    def test_trees_become_congruent(self):
        left, right = self._pair()
        align_data(left, right)
        assert structure(left) == structure(right)

    def test_idempotent(self):
        left, right = self._pair()
        align_data(left, right)
        before = (structure(left), structure(right))
        paths_before = [m.path.copy() for m in left.get_family() + right.get_family()]

        align_data(left, right)

        assert (structure(left), structure(right)) == before
        paths_after = [m.path for m in left.get_family() + right.get_family()]
        assert paths_after == paths_before

    def test_deterministic(self):
        l1, r1 = self._pair()
        l2, r2 = self._pair()
        align_data(l1, r1)
        align_data(l2, r2)
        assert [m.path for m in l1.get_family()] == [m.path for m in l2.get_family()]
        assert [m.path for m in r1.get_family()] == [m.path for m in r2.get_family()]

    def test_visible_geometry_preserved(self):
        left, right = self._pair()
        original = left.submobjects[0].path.copy()

        align_data(left, right)

        grown = left.submobjects[0].path
        assert len(grown) > len(original)
        for point in curve_samples(grown):
            assert point_on_curve(point, original, tol=1e-6)

    def test_shape_against_group(self, triangle):
        group = make_group(triangle.copy(), triangle.copy().translate((5, 0)))
        align_data(triangle, group)
        assert structure(triangle) == structure(group)
        assert len(triangle.family_members_with_points()) == len(group.family_members_with_points())

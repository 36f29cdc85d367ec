"""
Cubic Bezier subdivision

Pure functions on single cubic segments given as 4 control points
(start, ctrl1, ctrl2, end). Nothing here knows about paths or mobjects.
"""

import math
from typing import List, Tuple

import numpy as np

from models.errors import GeometryPreconditionError

Point = Tuple[float, float]
BezierQuad = Tuple[Point, Point, Point, Point]


def _check_unit(name: str, value: float):
    if not 0 <= value <= 1:
        raise GeometryPreconditionError(f"{name} must lie in [0, 1]", **{name: value})


def lerp_point(p: Point, q: Point, t: float) -> Point:
    """Point at fraction t on the segment p -> q (exact at t=0 and t=1)"""
    return ((1 - t) * p[0] + t * q[0], (1 - t) * p[1] + t * q[1])


def bezier_point(quad: BezierQuad, t: float) -> Point:
    """Evaluate the cubic at parameter t"""
    p0, p1, p2, p3 = quad
    s = 1 - t
    return (
        s ** 3 * p0[0] + 3 * s * s * t * p1[0] + 3 * s * t * t * p2[0] + t ** 3 * p3[0],
        s ** 3 * p0[1] + 3 * s * s * t * p1[1] + 3 * s * t * t * p2[1] + t ** 3 * p3[1],
    )


def split_bezier(quad: BezierQuad, t: float) -> Tuple[BezierQuad, BezierQuad]:
    """
    de Casteljau split of one cubic at parameter t

    Returns:
        (left, right) segments. left traces [0, t] and right traces [t, 1]
        of the original curve; they share the split point.
    """
    _check_unit("t", t)
    p0, p1, p2, p3 = quad
    p01 = lerp_point(p0, p1, t)
    p12 = lerp_point(p1, p2, t)
    p23 = lerp_point(p2, p3, t)
    p012 = lerp_point(p01, p12, t)
    p123 = lerp_point(p12, p23, t)
    mid = lerp_point(p012, p123, t)
    return (p0, p01, p012, mid), (mid, p123, p23, p3)


def join_bezier(left: BezierQuad, right: BezierQuad, t: float) -> BezierQuad:
    """
    Rebuild the original segment from the two halves of split_bezier(quad, t)

    At t=0 and t=1 one half is the untouched original and is returned as is.
    """
    _check_unit("t", t)
    if t == 0:
        return right
    if t == 1:
        return left
    p0, p01 = left[0], left[1]
    p23, p3 = right[2], right[3]
    s = 1 - t
    p1 = ((p01[0] - s * p0[0]) / t, (p01[1] - s * p0[1]) / t)
    p2 = ((p23[0] - t * p3[0]) / s, (p23[1] - t * p3[1]) / s)
    return (p0, p1, p2, p3)


def partial_bezier_points(quad: BezierQuad, a: float, b: float) -> BezierQuad:
    """
    Single cubic tracing the original restricted to [a, b]

    Splits at b, then splits the left part at a/b. b == 0 yields a
    zero-length segment collapsed onto the start point.
    """
    _check_unit("a", a)
    _check_unit("b", b)
    if a > b:
        raise GeometryPreconditionError("a must not exceed b", a=a, b=b)
    if b == 0:
        return (quad[0], quad[0], quad[0], quad[0])
    left, _ = split_bezier(quad, b)
    if a == 0:
        return left
    return split_bezier(left, a / b)[1]


def integer_interpolate(start: int, end: int, alpha: float) -> Tuple[int, float]:
    """
    Map a fraction of [start, end) onto (index, residue)

    alpha >= 1 returns (end - 1, 1.0) so that the last segment is reported
    complete rather than stepping past the end.

    Example:
        integer_interpolate(0, 4, 0.6)   # (2, 0.4)
        integer_interpolate(0, 4, 1.0)   # (3, 1.0)
    """
    if alpha >= 1:
        return (end - 1, 1.0)
    if alpha <= 0:
        return (start, 0.0)
    scaled = start + alpha * (end - start)
    index = min(int(math.floor(scaled)), end - 1)
    residue = ((end - start) * alpha) % 1
    return (index, residue)


def distribute_new_points(existing_count: int, extra_count: int) -> List[int]:
    """
    How many pieces each existing segment is split into

    With target = existing_count + extra_count, segment i receives
    |{k in [0, target) : floor(k * existing_count / target) == i}| pieces.
    For existing_count = 10, extra_count = 5 this is
    [2, 1, 2, 1, 2, 1, 2, 1, 2, 1].

    Returns:
        existing_count positive integers summing to target
    """
    if existing_count < 1:
        raise GeometryPreconditionError(
            "existing_count must be positive", existing_count=existing_count
        )
    if extra_count < 0:
        raise GeometryPreconditionError(
            "extra_count must not be negative", extra_count=extra_count
        )
    target = existing_count + extra_count
    repeat_indices = (np.arange(target) * existing_count) // target
    return [int(count) for count in np.bincount(repeat_indices, minlength=existing_count)]

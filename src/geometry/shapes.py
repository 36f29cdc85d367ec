"""
Shape constructors

Free functions that all return a plain Mobject. Sampling (angles, vertex
positions) goes through numpy.
"""

import math
from typing import List, Optional, Sequence

import numpy as np

from geometry.bezier import Point
from models.mobject import Mobject
from models.path import PathGeometry
from models.style import Style
from utils import colors

TAU = 2 * math.pi


def _styled(style: Optional[Style], stroke_color: str) -> Style:
    """Caller's style, or the configured default style with the shape's stroke color"""
    if style is not None:
        return style
    from managers.config_manager import get_engine_config
    return get_engine_config().default_style.merged(stroke_color=stroke_color)


def make_vmobject(style: Optional[Style] = None) -> Mobject:
    """Empty node with no geometry and no children"""
    return Mobject(style=style)


def make_group(*mobjects: Mobject) -> Mobject:
    """Family container; styling it restyles its members"""
    return Mobject(submobjects=mobjects, styles_propagate_to_children=True)


def make_arc(
    start_angle: float = 0.0,
    angle: float = TAU / 4,
    radius: float = 1.0,
    num_components: Optional[int] = None,
    style: Optional[Style] = None
) -> Mobject:
    """
    Circular arc centered at the origin

    Args:
        start_angle: Angle of the first anchor (radians)
        angle: Swept angle (radians, may be negative)
        radius: Arc radius
        num_components: Anchor count (defaults to the configured value)
        style: Explicit style (defaults to a white stroke)

    Handles are placed along the tangent at distance d_theta / 3, which
    approximates the circle closely for small d_theta.
    """
    if num_components is None:
        from managers.config_manager import get_engine_config
        num_components = get_engine_config().arc_components
    thetas = np.linspace(start_angle, start_angle + angle, num_components)
    anchors = np.stack([np.cos(thetas), np.sin(thetas)], axis=1)
    # Tangent = anchor rotated 90 degrees, (x, y) -> (-y, x)
    tangents = np.stack([-anchors[:, 1], anchors[:, 0]], axis=1)
    d_theta = angle / (num_components - 1.0)
    handles_in = anchors - (d_theta / 3) * tangents
    handles_out = anchors + (d_theta / 3) * tangents

    path = PathGeometry.from_anchors(
        anchors.tolist(), handles_in.tolist(), handles_out.tolist(),
        closed=math.isclose(abs(angle), TAU),
    )
    mob = Mobject(path, style=_styled(style, colors.WHITE))
    mob.scale_about_origin(radius)
    return mob


def make_circle(radius: float = 1.0, style: Optional[Style] = None) -> Mobject:
    return make_arc(
        start_angle=0.0,
        angle=TAU,
        radius=radius,
        style=_styled(style, colors.RED),
    )


def make_polygon(vertices: Sequence[Point], style: Optional[Style] = None) -> Mobject:
    """Closed straight-edged outline through the vertices"""
    return Mobject(PathGeometry.from_corners(vertices, closed=True), style=_styled(style, colors.BLUE))


def _normalize_height(vertices: List[List[float]], halfway: int, height: float) -> List[List[float]]:
    """Scale so vertex 0 and vertex `halfway` are `height` apart, then put vertex 0 at y = height/2"""
    arr = np.asarray(vertices, dtype=float)
    old_height = abs(arr[0, 1] - arr[halfway, 1])
    arr *= height / old_height
    arr[:, 1] += height / 2 - arr[0, 1]
    return arr.tolist()


def make_regular_polygon(num_sides: int = 3, height: float = 2.0, style: Optional[Style] = None) -> Mobject:
    """
    Regular polygon with a vertex (odd sides) or an edge (even sides) on top

    Args:
        num_sides: Number of sides (>= 3)
        height: Distance between the top and the opposite vertex/edge
    """
    if num_sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {num_sides}")
    angles = TAU * np.arange(num_sides) / num_sides
    if num_sides % 2 == 0:
        angles -= math.pi / num_sides
    vertices = np.stack([np.sin(angles), np.cos(angles)], axis=1).tolist()
    vertices = _normalize_height(vertices, num_sides // 2, height)
    return make_polygon(vertices, style=_styled(style, colors.GREEN))


def make_star(
    num_points: int = 5,
    height: float = 2.0,
    ratio: float = 0.5,
    style: Optional[Style] = None
) -> Mobject:
    """
    Star with num_points outer tips

    Args:
        ratio: Inner radius relative to the outer radius
    """
    vertices = []
    for i in range(num_points):
        angle = TAU * i / num_points
        vertices.append([math.sin(angle), math.cos(angle)])
        angle += math.pi / num_points
        vertices.append([ratio * math.sin(angle), ratio * math.cos(angle)])
    vertices = _normalize_height(vertices, 2 * (num_points // 2), height)
    return make_polygon(vertices, style=_styled(style, colors.GREEN))


def make_star_of_david(height: float = 2.0, ratio: float = 1 / math.sqrt(3), style: Optional[Style] = None) -> Mobject:
    return make_star(num_points=6, height=height, ratio=ratio, style=_styled(style, colors.GREEN))


def make_triangle(height: float = 2.0, style: Optional[Style] = None) -> Mobject:
    return make_regular_polygon(3, height=height, style=style)


def make_pentagon(height: float = 2.0, style: Optional[Style] = None) -> Mobject:
    return make_regular_polygon(5, height=height, style=style)


def make_hexagon(height: float = 2.0, style: Optional[Style] = None) -> Mobject:
    return make_regular_polygon(6, height=height, style=style)


def make_octagon(height: float = 2.0, style: Optional[Style] = None) -> Mobject:
    return make_regular_polygon(8, height=height, style=style)


def make_rectangle(height: float = 2.0, width: float = 4.0, style: Optional[Style] = None) -> Mobject:
    half_width = width / 2
    half_height = height / 2
    vertices = [
        (-half_width, half_height),
        (half_width, half_height),
        (half_width, -half_height),
        (-half_width, -half_height),
    ]
    return make_polygon(vertices, style=_styled(style, colors.WHITE))


def make_square(side_length: float = 2.0, style: Optional[Style] = None) -> Mobject:
    return make_regular_polygon(4, height=side_length, style=style)

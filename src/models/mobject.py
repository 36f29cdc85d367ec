"""
Mobject tree

A mobject owns exactly one PathGeometry (possibly empty) and an ordered
list of child mobjects. Shapes, groups and imported formulas are all plain
Mobject instances; only the `styles_propagate_to_children` flag changes how
styling a node behaves.
"""

import copy
import math
from dataclasses import dataclass, replace
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from geometry.bezier import Point
from geometry.partial import extract_partial
from models.errors import GeometryPreconditionError
from models.path import Anchor, PathGeometry, bounding_box, interpolate_anchors
from models.style import DEFAULT_STYLE, Style, interpolate_styles


@dataclass(frozen=True)
class Dimensions:
    """Axis-aligned bounding box of a mobject hierarchy"""
    center: Point
    width: float
    height: float
    top_left: Point
    top_right: Point
    bottom_right: Point
    bottom_left: Point


class Mobject:
    """
    Node of an animatable vector-geometry tree

    Attributes:
        path: This node's own outline (empty for pure groups)
        submobjects: Ordered children
        style: Stroke/fill style of this node's own path
        styles_propagate_to_children: When True, apply_style() forwards to
            the children instead of restyling this node (family containers)
        opacity: Tree-level opacity multiplier (1.0 = as styled)
        updating_suspended: Set while an animation drives this tree

    Example:
        square = Mobject(PathGeometry.from_corners([(0, 0), (1, 0), (1, 1), (0, 1)]))
        group = Mobject(submobjects=[square], styles_propagate_to_children=True)
        group.apply_style(stroke_color="#FF0000")   # restyles the square
    """

    def __init__(
        self,
        path: Optional[PathGeometry] = None,
        submobjects: Optional[Sequence['Mobject']] = None,
        style: Optional[Style] = None,
        styles_propagate_to_children: bool = False,
        name: Optional[str] = None
    ):
        self.path: PathGeometry = path if path is not None else PathGeometry()
        self.submobjects: List['Mobject'] = []
        self.style: Style = replace(style if style is not None else DEFAULT_STYLE)
        self.styles_propagate_to_children = styles_propagate_to_children
        self.opacity = 1.0
        self.name = name
        self.updating_suspended = False
        if submobjects:
            self.add(*submobjects)

    # ------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------

    @property
    def points(self) -> List[Anchor]:
        return self.path.anchors

    def num_points(self) -> int:
        return len(self.path)

    def has_points(self) -> bool:
        return not self.path.is_empty()

    def add(self, *mobjects: 'Mobject') -> 'Mobject':
        for mob in mobjects:
            if mob is self:
                raise ValueError("Mobject cannot contain itself")
            if not any(mob is existing for existing in self.submobjects):
                self.submobjects.append(mob)
        return self

    def remove(self, *mobjects: 'Mobject') -> 'Mobject':
        self.submobjects = [
            sub for sub in self.submobjects
            if not any(sub is mob for mob in mobjects)
        ]
        return self

    def get_family(self) -> List['Mobject']:
        """Self followed by all descendants, pre-order, de-duplicated by identity"""
        seen = set()
        family = []

        def visit(mob: 'Mobject'):
            if id(mob) in seen:
                return
            seen.add(id(mob))
            family.append(mob)
            for sub in mob.submobjects:
                visit(sub)

        visit(self)
        return family

    # Name used by the animation engine
    get_mobject_hierarchy = get_family

    def family_members_with_points(self) -> List['Mobject']:
        return [mob for mob in self.get_family() if mob.has_points()]

    def copy(self) -> 'Mobject':
        """Deep, fully independent clone of the whole tree"""
        return copy.deepcopy(self)

    # ------------------------------------------------------------
    # Style
    # ------------------------------------------------------------

    def get_style(self) -> Style:
        return replace(self.style)

    def apply_style(self, style: Optional[Style] = None, **fields) -> 'Mobject':
        """
        Restyle this node

        Args:
            style: Full style to apply (fields are overridden by **fields)
            **fields: Individual Style fields (stroke_color, fill_opacity, ...)

        Family containers forward the call to their children instead.
        """
        if self.styles_propagate_to_children:
            for sub in self.submobjects:
                sub.apply_style(style, **fields)
            return self
        base = style if style is not None else self.style
        self.style = base.merged(**fields)
        return self

    def make_transparent(self) -> 'Mobject':
        """Zero stroke and fill opacity on every node of the tree"""
        for mob in self.get_family():
            mob.style = mob.style.transparent()
        return self

    def get_render_style(self) -> dict:
        """Renderer style of this node with its own tree opacity folded in"""
        return self.style.to_render_dict(self.opacity)

    def iter_render_styles(self) -> Iterator[Tuple['Mobject', dict]]:
        """
        Yield (node, renderer style) for every point-bearing node

        Tree-level opacity multiplies down from each ancestor.
        """
        def visit(mob: 'Mobject', inherited: float):
            effective = inherited * mob.opacity
            if mob.has_points():
                yield mob, mob.style.to_render_dict(effective)
            for sub in mob.submobjects:
                yield from visit(sub, effective)

        yield from visit(self, 1.0)

    # ------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------

    def _anchor_positions(self) -> List[Point]:
        return [a.position for mob in self.get_family() for a in mob.points]

    def get_dimensions(self) -> Optional[Dimensions]:
        """Bounding box of all anchor positions in the hierarchy, None if there are none"""
        box = bounding_box(self._anchor_positions())
        if box is None:
            return None
        x_min, y_min, x_max, y_max = box
        center = ((x_max + x_min) / 2, (y_max + y_min) / 2)
        width = x_max - x_min
        height = y_max - y_min
        return Dimensions(
            center=center,
            width=width,
            height=height,
            top_left=(center[0] - width / 2, center[1] - height / 2),
            top_right=(center[0] + width / 2, center[1] - height / 2),
            bottom_right=(center[0] + width / 2, center[1] + height / 2),
            bottom_left=(center[0] - width / 2, center[1] + height / 2),
        )

    def get_center(self) -> Point:
        dims = self.get_dimensions()
        return dims.center if dims is not None else (0.0, 0.0)

    # ------------------------------------------------------------
    # Transformations (whole hierarchy)
    # ------------------------------------------------------------

    def apply_function(self, func: Callable[[Point], Point]) -> 'Mobject':
        for mob in self.get_family():
            mob.path = mob.path.map_points(func)
        return self

    def translate(self, vector: Point) -> 'Mobject':
        dx, dy = vector
        return self.apply_function(lambda p: (p[0] + dx, p[1] + dy))

    def scale_about_origin(self, factor: float) -> 'Mobject':
        return self.apply_function(lambda p: (p[0] * factor, p[1] * factor))

    def scale(self, factor: float) -> 'Mobject':
        """Scale about the bounding-box center"""
        dims = self.get_dimensions()
        if dims is None:
            return self
        cx, cy = dims.center
        self.translate((-cx, -cy))
        self.scale_about_origin(factor)
        self.translate((cx, cy))
        return self

    def move_to(self, point: Point) -> 'Mobject':
        cx, cy = self.get_center()
        return self.translate((point[0] - cx, point[1] - cy))

    def apply_matrix(self, matrix) -> 'Mobject':
        """Apply a 3x3 matrix to every point, treating (x, y) as (x, y, 0)"""
        matrix = np.asarray(matrix, dtype=float)
        if matrix.shape != (3, 3):
            raise ValueError(f"Invalid dimensions for matrix transformation: {matrix.shape}")

        def mapped(p: Point) -> Point:
            x, y, _ = matrix @ np.array([p[0], p[1], 0.0])
            return (float(x), float(y))

        return self.apply_function(mapped)

    def rotate(self, angle: float) -> 'Mobject':
        """Rotate counter-clockwise about the origin"""
        c, s = math.cos(angle), math.sin(angle)
        return self.apply_matrix([[c, -s, 0], [s, c, 0], [0, 0, 1]])

    def apply_transformations(self, transformations: Sequence[Sequence]) -> 'Mobject':
        """
        Apply a list of ("rotate", angle) / ("scale", factor) commands in order

        Raises:
            ValueError: Unknown command
        """
        for command, *args in transformations:
            if command == "rotate":
                self.rotate(*args)
            elif command == "scale":
                self.scale(args[0])
            else:
                raise ValueError(f"Unknown transformation {command} with args {args}")
        return self

    # ------------------------------------------------------------
    # Interpolation support
    # ------------------------------------------------------------

    def interpolate(self, start: 'Mobject', end: 'Mobject', alpha: float) -> 'Mobject':
        """
        Set this node's path and style to the blend of start and end

        Both paths must have the same anchor count (see alignment).
        """
        if len(start.path) != len(end.path):
            raise GeometryPreconditionError(
                "cannot interpolate paths with different point counts",
                start_points=len(start.path),
                end_points=len(end.path),
            )
        anchors = [
            interpolate_anchors(a, b, alpha)
            for a, b in zip(start.points, end.points)
        ]
        closed = end.path.closed if alpha >= 1 else start.path.closed
        self.path = PathGeometry(anchors=anchors, closed=closed)
        self.style = interpolate_styles(start.style, end.style, alpha)
        return self

    def become_partial(self, other: 'Mobject', a: float, b: float) -> 'Mobject':
        """Replace own path with the [a, b] portion of other's path"""
        self.path = extract_partial(other.path, a, b)
        return self

    def get_point_mobject(self) -> 'Mobject':
        """Single-point placeholder at this mobject's center"""
        return Mobject(PathGeometry.single_point(self.get_center()))

    def push_self_into_submobjects(self) -> 'Mobject':
        """
        Move own geometry into a new last child

        The node keeps a one-point placeholder at its former center, so it
        still has points but no visible outline.

        Returns:
            The new child holding the geometry
        """
        child = Mobject(self.path.copy(), style=self.get_style())
        center = self.get_center()
        self.path = PathGeometry.single_point(center)
        self.add(child)
        return child

    # ------------------------------------------------------------
    # Updating hook
    # ------------------------------------------------------------

    def suspend_updating(self) -> 'Mobject':
        for mob in self.get_family():
            mob.updating_suspended = True
        return self

    def resume_updating(self) -> 'Mobject':
        for mob in self.get_family():
            mob.updating_suspended = False
        return self

    def __repr__(self) -> str:
        label = self.name or self.__class__.__name__
        return f"{label}(points={len(self.path)}, submobjects={len(self.submobjects)})"

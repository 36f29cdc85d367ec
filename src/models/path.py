"""
Path geometry - one open or closed cubic-Bezier outline

A path is an ordered list of anchors. Segment i runs from anchor i to
anchor i+1 using anchor i's right control and anchor i+1's left control,
so a path with n anchors has n-1 segments. Closed shapes repeat their
start anchor at the end; `closed` only tells the renderer to close the
outline.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from geometry.bezier import BezierQuad, Point, lerp_point
from models.enums import VertexCommand


@dataclass(frozen=True)
class Anchor:
    """
    One vertex of a path

    Attributes:
        position: Anchor point (x, y)
        left: Incoming control point (absolute coordinates)
        right: Outgoing control point (absolute coordinates)
        command: Path command tag for the renderer
    """
    position: Point
    left: Point
    right: Point
    command: VertexCommand = VertexCommand.CURVE

    @classmethod
    def at(cls, point: Point, command: VertexCommand = VertexCommand.CURVE) -> 'Anchor':
        """Anchor with both controls collapsed onto the point"""
        p = (float(point[0]), float(point[1]))
        return cls(position=p, left=p, right=p, command=command)

    def map_points(self, func: Callable[[Point], Point]) -> 'Anchor':
        return replace(
            self,
            position=_pt(func(self.position)),
            left=_pt(func(self.left)),
            right=_pt(func(self.right)),
        )


@dataclass
class PathGeometry:
    """
    Ordered anchors plus a closed flag

    Zero anchors means "no geometry" (grouping node), one anchor is a
    degenerate point used as an alignment placeholder.
    """
    anchors: List[Anchor] = field(default_factory=list)
    closed: bool = False

    def __len__(self) -> int:
        return len(self.anchors)

    def is_empty(self) -> bool:
        return not self.anchors

    @property
    def segment_count(self) -> int:
        return max(0, len(self.anchors) - 1)

    @property
    def commands(self) -> List[VertexCommand]:
        return [a.command for a in self.anchors]

    def copy(self) -> 'PathGeometry':
        # Anchors are immutable, a shallow list copy is independent
        return PathGeometry(anchors=list(self.anchors), closed=self.closed)

    def points(self) -> List[Point]:
        """Every anchor and control point, used for bounding boxes"""
        result = []
        for a in self.anchors:
            result.extend((a.position, a.left, a.right))
        return result

    def map_points(self, func: Callable[[Point], Point]) -> 'PathGeometry':
        return PathGeometry(anchors=[a.map_points(func) for a in self.anchors], closed=self.closed)

    # === BEZIER QUADS ===

    def to_bezier_quads(self) -> List[BezierQuad]:
        """Flatten into one (start, ctrl1, ctrl2, end) tuple per segment"""
        return [
            (a.position, a.right, b.left, b.position)
            for a, b in zip(self.anchors, self.anchors[1:])
        ]

    @classmethod
    def from_bezier_quads(
        cls,
        quads: Sequence[BezierQuad],
        commands: Optional[Sequence[VertexCommand]] = None,
        closed: bool = False
    ) -> 'PathGeometry':
        """
        Rebuild anchors from consecutive segments

        Args:
            quads: Segments; quad i's end becomes anchor i+1
            commands: One tag per resulting anchor (defaults to M, C, C, ...)
            closed: Closed flag of the result

        The first anchor's left control and the last anchor's right control
        are not part of any segment and collapse onto their anchor.
        """
        if not quads:
            return cls(anchors=[], closed=closed)
        if commands is None:
            commands = [VertexCommand.MOVE] + [VertexCommand.CURVE] * len(quads)
        positions = [quads[0][0]] + [q[3] for q in quads]
        lefts = [quads[0][0]] + [q[2] for q in quads]
        rights = [q[1] for q in quads] + [quads[-1][3]]
        anchors = [
            Anchor(position=p, left=l, right=r, command=c)
            for p, l, r, c in zip(positions, lefts, rights, commands)
        ]
        return cls(anchors=anchors, closed=closed)

    # === CONSTRUCTORS ===

    @classmethod
    def from_anchors(
        cls,
        points: Sequence[Point],
        left_handles: Sequence[Point],
        right_handles: Sequence[Point],
        closed: bool = False
    ) -> 'PathGeometry':
        """Build a curve path from parallel lists of anchors and handles"""
        anchors = []
        for i, (p, l, r) in enumerate(zip(points, left_handles, right_handles)):
            command = VertexCommand.MOVE if i == 0 else VertexCommand.CURVE
            anchors.append(Anchor(position=_pt(p), left=_pt(l), right=_pt(r), command=command))
        return cls(anchors=anchors, closed=closed)

    @classmethod
    def from_corners(cls, vertices: Sequence[Point], closed: bool = True) -> 'PathGeometry':
        """
        Straight-edged path through the vertices

        Each edge is a cubic with controls at 1/3 and 2/3 of the edge. A
        closed path repeats the first vertex at the end.
        """
        corners = [_pt(v) for v in vertices]
        if closed and corners:
            corners.append(corners[0])
        if len(corners) < 2:
            return cls(anchors=[Anchor.at(c, VertexCommand.MOVE) for c in corners], closed=closed)
        quads = []
        for p, q in zip(corners, corners[1:]):
            c1 = (p[0] + (q[0] - p[0]) / 3, p[1] + (q[1] - p[1]) / 3)
            c2 = (p[0] + 2 * (q[0] - p[0]) / 3, p[1] + 2 * (q[1] - p[1]) / 3)
            quads.append((p, c1, c2, q))
        commands = [VertexCommand.MOVE] + [VertexCommand.LINE] * len(quads)
        return cls.from_bezier_quads(quads, commands=commands, closed=closed)

    @classmethod
    def single_point(cls, point: Point) -> 'PathGeometry':
        """Degenerate one-anchor path"""
        return cls(anchors=[Anchor.at(point, VertexCommand.MOVE)], closed=False)


def _pt(p) -> Point:
    return (float(p[0]), float(p[1]))


def interpolate_anchors(a: Anchor, b: Anchor, alpha: float) -> Anchor:
    """Lerp position and both controls; the command switches to b's at alpha >= 1"""
    return Anchor(
        position=lerp_point(a.position, b.position, alpha),
        left=lerp_point(a.left, b.left, alpha),
        right=lerp_point(a.right, b.right, alpha),
        command=b.command if alpha >= 1 else a.command,
    )


def bounding_box(points: Sequence[Point]) -> Optional[Tuple[float, float, float, float]]:
    """(x_min, y_min, x_max, y_max) or None for no points"""
    if not points:
        return None
    arr = np.asarray(points, dtype=float)
    x_min, y_min = arr.min(axis=0)
    x_max, y_max = arr.max(axis=0)
    return float(x_min), float(y_min), float(x_max), float(y_max)

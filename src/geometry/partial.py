"""
Partial-path extraction

Sub-path of a path over a fractional range [a, b], where the range is
measured in segments (every segment counts equally, regardless of length).
"""

from typing import List

from geometry.bezier import BezierQuad, integer_interpolate, partial_bezier_points
from models.enums import VertexCommand
from models.errors import GeometryPreconditionError
from models.path import PathGeometry


def extract_partial(path: PathGeometry, a: float, b: float) -> PathGeometry:
    """
    Sub-path of `path` covering the fraction [a, b] of its segments

    Whole segments before the one containing b are kept verbatim; the
    segment containing b contributes the part of it up to b. With a > 0
    the segment containing a is trimmed the same way from the front.

    Args:
        path: Source path (left untouched)
        a: Start fraction (0.0-1.0)
        b: End fraction (a-1.0)

    Returns:
        New open path. Anchor command tags mirror the source's.

    Raises:
        GeometryPreconditionError: Range outside [0, 1], a > b, or empty path
    """
    if not (0 <= a <= 1 and 0 <= b <= 1 and a <= b):
        raise GeometryPreconditionError("partial range must satisfy 0 <= a <= b <= 1", a=a, b=b)
    if path.is_empty():
        raise GeometryPreconditionError("cannot extract a partial path from an empty path")

    quads = path.to_bezier_quads()
    if not quads:
        # Single anchor: nothing to trim
        return PathGeometry(anchors=list(path.anchors), closed=False)

    count = len(quads)
    a_index, a_residue = integer_interpolate(0, count, a)
    b_index, b_residue = integer_interpolate(0, count, b)

    new_quads: List[BezierQuad]
    if a_index == b_index:
        new_quads = [partial_bezier_points(quads[a_index], a_residue, b_residue)]
    else:
        if a_residue == 0:
            new_quads = [quads[a_index]]
        else:
            new_quads = [partial_bezier_points(quads[a_index], a_residue, 1)]
        new_quads.extend(quads[a_index + 1:b_index])
        new_quads.append(partial_bezier_points(quads[b_index], 0, b_residue))

    commands = path.commands[a_index:a_index + len(new_quads) + 1]
    commands[0] = VertexCommand.MOVE
    return PathGeometry.from_bezier_quads(new_quads, commands=commands, closed=False)

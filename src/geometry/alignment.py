"""
Alignment engine

Makes two mobject trees congruent: the same number of submobjects at every
corresponding level and the same anchor count in every corresponding path.
Only ever adds structure; added anchors lie on the existing curves, so the
visible shapes do not change.

All decisions depend only on counts, so aligning equal inputs always gives
identical structures.
"""

from typing import List

import numpy as np

from geometry.bezier import BezierQuad, distribute_new_points, partial_bezier_points
from models.errors import AlignmentError
from models.mobject import Mobject
from models.path import PathGeometry
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.ALIGNMENT)


def align_data(mob1: Mobject, mob2: Mobject) -> None:
    """
    Mutate both trees until they have identical shape

    Runs null-point, submobject-count and point-count alignment on the pair,
    then recurses into corresponding children.

    Raises:
        AlignmentError: Child counts still differ after alignment
    """
    null_point_align(mob1, mob2)
    align_submobjects(mob1, mob2)
    align_points(mob1, mob2)
    if len(mob1.submobjects) != len(mob2.submobjects):
        raise AlignmentError(
            "submobject counts differ after alignment",
            left=len(mob1.submobjects),
            right=len(mob2.submobjects),
        )
    for sub1, sub2 in zip(mob1.submobjects, mob2.submobjects):
        align_data(sub1, sub2)


def null_point_align(mob1: Mobject, mob2: Mobject) -> None:
    """
    If exactly one side has no own geometry, push the other side's geometry
    down into a new child so both are group-shaped at this level
    """
    if not mob1.has_points() and mob2.has_points():
        mob2.push_self_into_submobjects()
        log.debug("Pushed geometry into submobjects", side="right")
    elif not mob2.has_points() and mob1.has_points():
        mob1.push_self_into_submobjects()
        log.debug("Pushed geometry into submobjects", side="left")


def align_submobjects(mob1: Mobject, mob2: Mobject) -> None:
    """Grow the side with fewer children to match the other"""
    count1, count2 = len(mob1.submobjects), len(mob2.submobjects)
    if count1 == count2:
        return
    if count1 < count2:
        add_n_more_submobjects(mob1, count2 - count1)
    else:
        add_n_more_submobjects(mob2, count1 - count2)


def add_n_more_submobjects(mob: Mobject, n: int) -> None:
    """
    Add n children by duplicating existing ones proportionally

    Child i keeps its place and is followed by split_factor(i) - 1 copies.
    The copies are fully transparent until an animation gives them a style.
    A mobject without children gets n point placeholders instead.
    """
    if n <= 0:
        return
    current = len(mob.submobjects)
    if current == 0:
        for _ in range(n):
            mob.add(mob.get_point_mobject())
        log.debug("Added point submobjects", count=n)
        return

    split_factors = distribute_new_points(current, n)
    new_submobjects: List[Mobject] = []
    for submob, split_factor in zip(mob.submobjects, split_factors):
        new_submobjects.append(submob)
        for _ in range(split_factor - 1):
            new_submobjects.append(submob.copy().make_transparent())
    mob.submobjects = new_submobjects
    log.debug("Duplicated submobjects", before=current, after=len(new_submobjects))


def align_points(mob1: Mobject, mob2: Mobject) -> None:
    """
    Give both paths the same anchor count

    A side without anchors is first seeded with a single anchor at its
    center; the side with fewer anchors is then subdivided.
    """
    if mob1.num_points() == mob2.num_points():
        return

    for mob in (mob1, mob2):
        if not mob.has_points():
            mob.path = PathGeometry.single_point(mob.get_center())

    if mob1.num_points() < mob2.num_points():
        fewer, more = mob1, mob2
    else:
        fewer, more = mob2, mob1
    before = fewer.num_points()
    fewer.path = add_points(fewer.path, more.num_points() - before)
    log.debug("Inserted points", before=before, after=fewer.num_points())


def add_points(path: PathGeometry, n: int) -> PathGeometry:
    """
    Path tracing the same curve with n more anchors

    Segments are subdivided according to distribute_new_points. A
    one-anchor path is padded with copies of its anchor.
    """
    if n <= 0:
        return path.copy()
    if len(path) == 1:
        return PathGeometry(anchors=path.anchors * (n + 1), closed=path.closed)

    quads = path.to_bezier_quads()
    split_factors = distribute_new_points(len(quads), n)

    new_quads: List[BezierQuad] = []
    commands = [path.anchors[0].command]
    for i, (quad, split_factor) in enumerate(zip(quads, split_factors)):
        alphas = np.linspace(0, 1, split_factor + 1)
        for a1, a2 in zip(alphas[:-1], alphas[1:]):
            new_quads.append(partial_bezier_points(quad, float(a1), float(a2)))
        commands.extend([path.anchors[i + 1].command] * split_factor)

    return PathGeometry.from_bezier_quads(new_quads, commands=commands, closed=path.closed)

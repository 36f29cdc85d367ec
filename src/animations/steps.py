"""
Per-kind animation behaviour

For every AnimationKind this module provides the step applied on each
frame, the trees whose point-bearing nodes are paired for that step, the
scene diff, and any setup that has to run around the starting snapshot.
The functions are wired together in animations.engine.
"""

from typing import TYPE_CHECKING, List, Mapping

from geometry.alignment import align_data
from models.diff import ModifyEntry, SceneDiff
from models.mobject import Mobject
from models.style import interpolate_styles
from utils.logger import LogCategory, get_category_logger

if TYPE_CHECKING:
    from animations.base import Animation

log = get_category_logger(LogCategory.ANIMATION)


# ============================================================
# Steps
# ============================================================

def show_creation_step(alpha: float, submob: Mobject, starting: Mobject) -> None:
    if alpha > 0:
        submob.become_partial(starting, 0, alpha)


def replacement_transform_step(alpha: float, submob: Mobject, starting: Mobject, target: Mobject) -> None:
    submob.interpolate(starting, target, alpha)


def write_step(alpha: float, submob: Mobject, starting: Mobject) -> None:
    """
    First half draws the outline, second half fades the fill in

    Both halves rebuild outline and fill from the starting snapshot, so the
    result depends only on alpha.
    """
    if alpha <= 0.5:
        submob.become_partial(starting, 0, 2 * alpha)
        submob.style = submob.style.merged(fill_opacity=starting.style.fill_opacity)
        return
    submob.become_partial(starting, 0, 1)
    submob.style = submob.style.merged(fill_opacity=2 * alpha - 1)


def fade_in_step(alpha: float, submob: Mobject, starting: Mobject) -> None:
    original = starting.style
    submob.style = interpolate_styles(original.transparent(), original, alpha)


def fade_out_step(alpha: float, mobject: Mobject) -> None:
    mobject.opacity = 1 - alpha


def wait_step(alpha: float, mobject: Mobject) -> None:
    pass


# ============================================================
# Trees paired by per-node steps
# ============================================================

def target_and_start(anim: 'Animation') -> List[Mobject]:
    return [anim.mobject, anim.starting_mobject]


def target_start_and_end(anim: 'Animation') -> List[Mobject]:
    return [anim.mobject, anim.starting_mobject, anim.target_copy]


def target_only(anim: 'Animation') -> List[Mobject]:
    return [anim.mobject]


def no_copies(anim: 'Animation') -> List[Mobject]:
    return []


# ============================================================
# Setup around the starting snapshot
# ============================================================

def align_with_target(anim: 'Animation') -> None:
    """
    Align against a copy of the target so the caller's target keeps its
    structure; the live mobject is restructured in place
    """
    anim.target_copy = anim.target_mobject.copy()
    align_data(anim.mobject, anim.target_copy)
    log.debug(
        "Aligned transform endpoints",
        nodes=len(anim.mobject.family_members_with_points()),
    )


def prepare_write(anim: 'Animation') -> None:
    anim.mobject.apply_style(stroke_width=1, fill_opacity=0)


def clear_starting_fill(anim: 'Animation') -> None:
    anim.starting_mobject.apply_style(fill_opacity=0)


# ============================================================
# Scene diffs
# ============================================================

def adds_mobject(anim: 'Animation', scene_objects: Mapping[str, Mobject]) -> SceneDiff:
    return SceneDiff(add=[anim.mobject])


def replaces_with_target(anim: 'Animation', scene_objects: Mapping[str, Mobject]) -> SceneDiff:
    return SceneDiff(add=[anim.target_mobject], remove=[anim.mobject])


def removes_mobject(anim: 'Animation', scene_objects: Mapping[str, Mobject]) -> SceneDiff:
    """
    Remove the faded mobject and record a modify entry on every tracked
    object that holds it as a direct child
    """
    diff = SceneDiff(remove=[anim.mobject])
    for name, obj in scene_objects.items():
        if any(sub is anim.mobject for sub in obj.submobjects):
            diff.modify.append(ModifyEntry(name=name, remove=anim.mobject, add=anim.mobject))
    return diff


def no_diff(anim: 'Animation', scene_objects: Mapping[str, Mobject]) -> SceneDiff:
    return SceneDiff()

"""
Base Animation Class

An Animation drives one mobject tree from its starting snapshot to its end
state as alpha goes from 0 to 1. What happens on each frame depends on the
AnimationKind; see animations.engine for the registered variants.
"""

from typing import List, Mapping, Optional

from animations.engine import get_variant
from animations.rate_functions import RateFunc
from models.config import AnimationDefaults
from models.diff import SceneDiff
from models.enums import AnimationKind, AnimationState, StepScope
from models.errors import AlignmentError, AnimationStateError
from models.mobject import Mobject
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)
scene_log = log.with_category(LogCategory.SCENE)


class Animation:
    """
    One playable animation of a mobject tree

    Lifecycle: UNBEGUN -> begin() -> RUNNING -> finish() -> FINISHED.
    The external driver calls begin() once, then interpolate(alpha) once
    per frame. interpolate() is a pure function of alpha and the frozen
    snapshots, so out-of-order alphas (scrubbing, reverse playback) are fine.

    Parameters left as None are taken from the configured AnimationDefaults
    of the kind.

    Example:
        anim = Animation(AnimationKind.SHOW_CREATION, make_circle())
        anim.begin()
        for frame in range(31):
            anim.interpolate(frame / 30)
        anim.finish()
    """

    def __init__(
        self,
        kind: AnimationKind,
        mobject: Mobject,
        target_mobject: Optional[Mobject] = None,
        rate_func: Optional[RateFunc] = None,
        lag_ratio: Optional[float] = None,
        run_time: Optional[float] = None,
        suspend_mobject_updating: Optional[bool] = None,
        name: Optional[str] = None,
        defaults: Optional[AnimationDefaults] = None
    ):
        if defaults is None:
            from managers.config_manager import get_engine_config
            defaults = get_engine_config().get_animation_defaults(kind)

        if kind == AnimationKind.REPLACEMENT_TRANSFORM and target_mobject is None:
            raise ValueError("REPLACEMENT_TRANSFORM requires a target_mobject")

        self.kind = kind
        self.variant = get_variant(kind)
        self.mobject = mobject
        self.target_mobject = target_mobject
        self.rate_func: RateFunc = rate_func if rate_func is not None else defaults.rate_func
        self.lag_ratio: float = lag_ratio if lag_ratio is not None else defaults.lag_ratio
        self.run_time: float = run_time if run_time is not None else defaults.run_time
        self.suspend_mobject_updating: bool = (
            suspend_mobject_updating if suspend_mobject_updating is not None
            else defaults.suspend_mobject_updating
        )
        self.name = name or kind.name

        self.state = AnimationState.UNBEGUN
        self.starting_mobject: Optional[Mobject] = None
        self.target_copy: Optional[Mobject] = None
        self._suspended = False

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    def begin(self) -> None:
        """
        Snapshot the starting state and move to RUNNING

        Kinds that need congruent endpoints align the live mobject with a
        copy of the target before the snapshot is taken.
        """
        if self.state != AnimationState.UNBEGUN:
            raise AnimationStateError("begin", self.state.name)

        if self.variant.prepare is not None:
            self.variant.prepare(self)
        if self.variant.needs_starting_clone:
            self.starting_mobject = self.mobject.copy()
            if self.variant.after_snapshot is not None:
                self.variant.after_snapshot(self)
        if self.suspend_mobject_updating:
            self.mobject.suspend_updating()
            self._suspended = True

        self.state = AnimationState.RUNNING
        log.info(
            f"Animation {self.name} started",
            kind=self.kind.name,
            run_time=self.run_time,
            lag_ratio=self.lag_ratio,
        )
        self.interpolate(0)

    def interpolate(self, alpha: float) -> None:
        """
        Set the mobject to its state at alpha

        Alpha is clamped to [0, 1] and eased by rate_func before it reaches
        the kind's step.

        Raises:
            AnimationStateError: begin() has not been called
            AlignmentError: Paired trees have different point-bearing node counts
        """
        if self.state == AnimationState.UNBEGUN:
            raise AnimationStateError("interpolate", self.state.name)

        alpha = min(max(alpha, 0.0), 1.0)
        eased = self.rate_func(alpha)

        if self.variant.scope == StepScope.WHOLE_TREE:
            self.variant.step(eased, self.mobject)
            return

        hierarchies = self._get_node_hierarchies()
        if not hierarchies:
            return
        count = len(hierarchies[0])
        for i, nodes in enumerate(zip(*hierarchies)):
            self.variant.step(self.get_sub_alpha(eased, i, count), *nodes)

    def finish(self) -> None:
        """Jump to the end state, resume updating if begin() suspended it"""
        if self.state == AnimationState.UNBEGUN:
            raise AnimationStateError("finish", self.state.name)
        self.interpolate(1)
        if self._suspended:
            self.mobject.resume_updating()
            self._suspended = False
        self.state = AnimationState.FINISHED
        log.info(f"Animation {self.name} finished")

    def is_finished(self, alpha: float) -> bool:
        return alpha >= 1

    # ------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------

    def get_sub_alpha(self, alpha: float, index: int, num_submobjects: int) -> float:
        """
        Progress of node `index` out of `num_submobjects` at overall alpha

        Node i starts lag_ratio * i into a stretched timeline of length
        (num_submobjects - 1) * lag_ratio + 1 and takes one unit of it.
        """
        full_runtime = (num_submobjects - 1) * self.lag_ratio + 1
        full_runtime_alpha = full_runtime * alpha
        start_time = self.lag_ratio * index
        end_time = start_time + 1
        if full_runtime_alpha <= start_time:
            return 0.0
        if end_time <= full_runtime_alpha:
            return 1.0
        return full_runtime_alpha - start_time

    def _get_node_hierarchies(self) -> List[List[Mobject]]:
        hierarchies = [
            tree.family_members_with_points()
            for tree in self.variant.copies(self)
        ]
        lengths = {len(h) for h in hierarchies}
        if len(lengths) > 1:
            raise AlignmentError(
                "paired trees have different numbers of point-bearing nodes",
                animation=self.name,
                lengths=[len(h) for h in hierarchies],
            )
        return hierarchies

    # ------------------------------------------------------------
    # Scene bookkeeping
    # ------------------------------------------------------------

    def get_diff(self, scene_objects: Optional[Mapping[str, Mobject]] = None) -> SceneDiff:
        """
        How playing this animation changes the scene's tracked objects

        Args:
            scene_objects: Tracked objects by name (only FADE_OUT inspects them)
        """
        diff = self.variant.diff(self, scene_objects or {})
        scene_log.debug(
            f"Diff for {self.name}",
            add=len(diff.add),
            remove=len(diff.remove),
            modify=len(diff.modify),
        )
        return diff

    def __repr__(self) -> str:
        return f"Animation({self.name}, state={self.state.name}, run_time={self.run_time})"

"""
Animation Engine - variant registry

One VariantSpec per AnimationKind describes everything that differs between
animation kinds. Animation looks its behaviour up here instead of relying on
subclasses; a kind without a spec fails at import time.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, TYPE_CHECKING

from animations import steps
from models.diff import SceneDiff
from models.enums import AnimationKind, StepScope
from models.errors import UnimplementedVariantError
from models.mobject import Mobject
from utils.logger import get_category_logger, LogCategory

if TYPE_CHECKING:
    from animations.base import Animation

log = get_category_logger(LogCategory.ANIMATION)


@dataclass(frozen=True)
class VariantSpec:
    """
    Behaviour of one animation kind

    Attributes:
        kind: Kind this spec implements
        step: PER_NODE: step(sub_alpha, *paired_nodes)
              WHOLE_TREE: step(alpha, mobject)
        scope: How step is invoked
        diff: diff(animation, scene_objects) -> SceneDiff
        copies: Trees whose point-bearing nodes are paired for PER_NODE steps
        prepare: Runs in begin() before the starting snapshot
        after_snapshot: Runs in begin() right after the starting snapshot
        needs_starting_clone: Whether begin() snapshots the mobject at all
    """
    kind: AnimationKind
    step: Callable[..., None]
    scope: StepScope
    diff: Callable[['Animation', Mapping[str, Mobject]], SceneDiff]
    copies: Callable[['Animation'], List[Mobject]]
    prepare: Optional[Callable[['Animation'], None]] = None
    after_snapshot: Optional[Callable[['Animation'], None]] = None
    needs_starting_clone: bool = True


def _build_variant_registry() -> Dict[AnimationKind, VariantSpec]:
    """Build the registry and check every AnimationKind is covered"""
    specs = [
        VariantSpec(
            kind=AnimationKind.SHOW_CREATION,
            step=steps.show_creation_step,
            scope=StepScope.PER_NODE,
            diff=steps.adds_mobject,
            copies=steps.target_and_start,
        ),
        VariantSpec(
            kind=AnimationKind.REPLACEMENT_TRANSFORM,
            step=steps.replacement_transform_step,
            scope=StepScope.PER_NODE,
            diff=steps.replaces_with_target,
            copies=steps.target_start_and_end,
            prepare=steps.align_with_target,
        ),
        VariantSpec(
            kind=AnimationKind.WRITE,
            step=steps.write_step,
            scope=StepScope.PER_NODE,
            diff=steps.adds_mobject,
            copies=steps.target_and_start,
            prepare=steps.prepare_write,
            after_snapshot=steps.clear_starting_fill,
        ),
        VariantSpec(
            kind=AnimationKind.FADE_IN,
            step=steps.fade_in_step,
            scope=StepScope.PER_NODE,
            diff=steps.adds_mobject,
            copies=steps.target_and_start,
        ),
        VariantSpec(
            kind=AnimationKind.FADE_OUT,
            step=steps.fade_out_step,
            scope=StepScope.WHOLE_TREE,
            diff=steps.removes_mobject,
            copies=steps.target_only,
        ),
        VariantSpec(
            kind=AnimationKind.WAIT,
            step=steps.wait_step,
            scope=StepScope.WHOLE_TREE,
            diff=steps.no_diff,
            copies=steps.no_copies,
            needs_starting_clone=False,
        ),
    ]
    registry = {spec.kind: spec for spec in specs}

    for kind in AnimationKind:
        if kind not in registry:
            raise UnimplementedVariantError(kind.name)

    return registry


VARIANTS: Dict[AnimationKind, VariantSpec] = _build_variant_registry()


def get_variant(kind: AnimationKind) -> VariantSpec:
    """
    Registered spec for kind

    Raises:
        UnimplementedVariantError: kind has no spec
    """
    spec = VARIANTS.get(kind)
    if spec is None:
        log.error(f"Animation kind {kind} not registered")
        raise UnimplementedVariantError(str(kind))
    return spec

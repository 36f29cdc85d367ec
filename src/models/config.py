"""
Engine configuration models

Immutable values built once from the YAML configuration by
ConfigManager.build_engine_config() and read by shape constructors,
formula import and animation constructors.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict

from models.enums import AnimationKind
from models.style import Style


@dataclass(frozen=True)
class AnimationDefaults:
    """Timing defaults for one animation kind"""
    kind: AnimationKind
    rate_func: Callable[[float], float]
    lag_ratio: float = 0.0
    run_time: float = 1.0
    suspend_mobject_updating: bool = True


@dataclass(frozen=True)
class EngineConfig:
    """
    Process-wide engine settings

    Attributes:
        default_style: Style given to shapes constructed without one
        animation_defaults: Timing defaults per AnimationKind
        arc_components: Anchor count of arcs built without num_components
        reference_glyph_height: Height of the "a" glyph after formula import
    """
    default_style: Style = field(default_factory=Style)
    animation_defaults: Dict[AnimationKind, AnimationDefaults] = field(default_factory=dict)
    arc_components: int = 9
    reference_glyph_height: float = 0.15

    def get_animation_defaults(self, kind: AnimationKind) -> AnimationDefaults:
        """Configured defaults for kind, or smooth/1s/no lag if the kind is not configured"""
        defaults = self.animation_defaults.get(kind)
        if defaults is not None:
            return defaults
        from animations.rate_functions import smooth
        return AnimationDefaults(kind=kind, rate_func=smooth)

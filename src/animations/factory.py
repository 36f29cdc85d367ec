"""
Animation constructors

Convenience functions, one per AnimationKind. Arguments left as None fall
back to the configured AnimationDefaults for that kind.
"""

from typing import Optional

from animations.base import Animation
from animations.rate_functions import RateFunc
from models.config import AnimationDefaults
from models.enums import AnimationKind
from models.mobject import Mobject


def show_creation(
    mobject: Mobject,
    rate_func: Optional[RateFunc] = None,
    lag_ratio: Optional[float] = None,
    run_time: Optional[float] = None,
    defaults: Optional[AnimationDefaults] = None
) -> Animation:
    """Draw the outline on progressively"""
    return Animation(
        AnimationKind.SHOW_CREATION,
        mobject,
        rate_func=rate_func,
        lag_ratio=lag_ratio,
        run_time=run_time,
        defaults=defaults,
    )


def replacement_transform(
    mobject: Mobject,
    target_mobject: Mobject,
    rate_func: Optional[RateFunc] = None,
    lag_ratio: Optional[float] = None,
    run_time: Optional[float] = None,
    defaults: Optional[AnimationDefaults] = None
) -> Animation:
    """
    Morph mobject into target_mobject

    begin() restructures mobject to match the target; the target itself is
    left untouched and replaces mobject in the scene diff.
    """
    return Animation(
        AnimationKind.REPLACEMENT_TRANSFORM,
        mobject,
        target_mobject=target_mobject,
        rate_func=rate_func,
        lag_ratio=lag_ratio,
        run_time=run_time,
        defaults=defaults,
    )


def write(
    mobject: Mobject,
    run_time: Optional[float] = None,
    lag_ratio: Optional[float] = None,
    rate_func: Optional[RateFunc] = None,
    defaults: Optional[AnimationDefaults] = None
) -> Animation:
    """
    Hand-writing effect: outline first, then the fill fades in

    Unless given, run time and lag ratio depend on the size of the
    hierarchy: 1s with at most 0.2 lag per node, or 2s without lag for an
    empty hierarchy.
    """
    length = len(mobject.get_family())
    if run_time is None:
        run_time = 1.0 if length else 2.0
    if lag_ratio is None:
        lag_ratio = min(4 / length, 0.2) if length else 0.0
    return Animation(
        AnimationKind.WRITE,
        mobject,
        rate_func=rate_func,
        lag_ratio=lag_ratio,
        run_time=run_time,
        defaults=defaults,
    )


def fade_in(
    mobject: Mobject,
    rate_func: Optional[RateFunc] = None,
    lag_ratio: Optional[float] = None,
    run_time: Optional[float] = None,
    defaults: Optional[AnimationDefaults] = None
) -> Animation:
    return Animation(
        AnimationKind.FADE_IN,
        mobject,
        rate_func=rate_func,
        lag_ratio=lag_ratio,
        run_time=run_time,
        defaults=defaults,
    )


def fade_out(
    mobject: Mobject,
    rate_func: Optional[RateFunc] = None,
    run_time: Optional[float] = None,
    defaults: Optional[AnimationDefaults] = None
) -> Animation:
    return Animation(
        AnimationKind.FADE_OUT,
        mobject,
        rate_func=rate_func,
        run_time=run_time,
        defaults=defaults,
    )


def wait(
    mobject: Optional[Mobject] = None,
    run_time: Optional[float] = None,
    defaults: Optional[AnimationDefaults] = None
) -> Animation:
    """Hold the scene still; the mobject is never touched"""
    return Animation(
        AnimationKind.WAIT,
        mobject if mobject is not None else Mobject(),
        run_time=run_time,
        defaults=defaults,
    )

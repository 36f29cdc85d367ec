"""
Rate functions

Map linear animation progress t (0.0 - 1.0) to perceived progress. Every
function here returns exactly 0.0 at t=0 and 1.0 at t=1, except
there_and_back which returns to 0.0.
"""

import math
from typing import Callable, Dict

from models.errors import UnknownRateFunctionError

RateFunc = Callable[[float], float]


def sigmoid(x: float) -> float:
    return 1.0 / (1.0 + math.exp(-x))


def linear(t: float) -> float:
    """Constant speed"""
    return t


def smooth(t: float, inflection: float = 10.0) -> float:
    """
    Sigmoid ease rescaled to hit 0 and 1 exactly

    Default rate function of most animations.
    """
    error = sigmoid(-inflection / 2)
    value = (sigmoid(inflection * (t - 0.5)) - error) / (1 - 2 * error)
    return min(max(value, 0.0), 1.0)


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start -> fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start -> slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def there_and_back(t: float) -> float:
    """Smooth out to 1.0 at t=0.5, then back to 0.0"""
    new_t = 2 * t if t < 0.5 else 2 * (1 - t)
    return smooth(new_t)


RATE_FUNCTIONS: Dict[str, RateFunc] = {
    "linear": linear,
    "smooth": smooth,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "there_and_back": there_and_back,
}


def get_rate_function(name: str) -> RateFunc:
    """
    Look up a rate function by its config name

    Raises:
        UnknownRateFunctionError: name is not in RATE_FUNCTIONS
    """
    try:
        return RATE_FUNCTIONS[name.lower()]
    except KeyError:
        raise UnknownRateFunctionError(name, sorted(RATE_FUNCTIONS)) from None

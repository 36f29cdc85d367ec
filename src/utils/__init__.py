"""
Utility functions for the path-algebra engine
"""

from .colors import (
    hex_to_rgb,
    rgb_to_hex,
    compose_rgba,
    parse_rgba,
    interpolate_color,
)

__all__ = [
    'hex_to_rgb',
    'rgb_to_hex',
    'compose_rgba',
    'parse_rgba',
    'interpolate_color',
]

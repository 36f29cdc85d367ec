"""
Color conversion utilities

Pure functions for parsing/composing hex colors with alpha and for
interpolating colors in CIE L*a*b* space. Named palette data is loaded
from config/colors.yaml via ColorManager.
"""

from typing import Tuple

# Palette used by shape constructor defaults
WHITE = "#FFFFFF"
BLACK = "#000000"
GRAY = "#888888"
RED = "#FC6255"
GREEN = "#83C167"
BLUE = "#58C4DD"
YELLOW = "#FFFF00"

# D65 reference white
_XN, _YN, _ZN = 0.95047, 1.0, 1.08883
_DELTA = 6 / 29


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert hex string to RGB (0-255)

    Accepts "#RGB", "#RRGGBB" and "#RRGGBBAA" (alpha is ignored).

    Example:
        hex_to_rgb("#FF8000")  # (255, 128, 0)
        hex_to_rgb("#f80")     # (255, 136, 0)
    """
    value = hex_color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) not in (6, 8):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB (0-255) to upper-case "#RRGGBB" """
    return "#{:02X}{:02X}{:02X}".format(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def normalize_hex(hex_color: str) -> str:
    """Canonical "#RRGGBB" form of any accepted hex color"""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def compose_rgba(hex_color: str, alpha: float) -> str:
    """
    Compose a color and an opacity into "#RRGGBBAA" for the renderer

    Args:
        hex_color: Base color
        alpha: Opacity (0.0-1.0, clamped)
    """
    alpha = max(0.0, min(1.0, alpha))
    return normalize_hex(hex_color) + "{:02X}".format(int(round(alpha * 255)))


def parse_rgba(rgba: str) -> Tuple[str, float]:
    """
    Split a renderer color back into ("#RRGGBB", alpha)

    Colors without an alpha channel are fully opaque.
    """
    value = rgba.lstrip("#")
    if len(value) == 8:
        return normalize_hex(value[:6]), int(value[6:8], 16) / 255
    return normalize_hex(rgba), 1.0


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def _srgb_to_linear(c: float) -> float:
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    return c * 12.92 if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > _DELTA ** 3 else t / (3 * _DELTA ** 2) + 4 / 29


def _lab_f_inv(t: float) -> float:
    return t ** 3 if t > _DELTA else 3 * _DELTA ** 2 * (t - 4 / 29)


def rgb_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert sRGB (0-255) to CIE L*a*b* (D65)

    Example:
        rgb_to_lab(255, 255, 255)  # (~100.0, ~0.0, ~0.0)
    """
    rl, gl, bl = (_srgb_to_linear(c / 255) for c in (r, g, b))
    x = 0.4124564 * rl + 0.3575761 * gl + 0.1804375 * bl
    y = 0.2126729 * rl + 0.7151522 * gl + 0.0721750 * bl
    z = 0.0193339 * rl + 0.1191920 * gl + 0.9503041 * bl
    fx, fy, fz = _lab_f(x / _XN), _lab_f(y / _YN), _lab_f(z / _ZN)
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def lab_to_rgb(l: float, a: float, b: float) -> Tuple[int, int, int]:
    """Convert CIE L*a*b* (D65) to sRGB (0-255), clamping out-of-gamut values"""
    fy = (l + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    x = _XN * _lab_f_inv(fx)
    y = _YN * _lab_f_inv(fy)
    z = _ZN * _lab_f_inv(fz)
    rl = 3.2404542 * x - 1.5371385 * y - 0.4985314 * z
    gl = -0.9692660 * x + 1.8760108 * y + 0.0415560 * z
    bl = 0.0556434 * x - 0.2040259 * y + 1.0572252 * z
    return tuple(
        _clamp_channel(_linear_to_srgb(max(0.0, min(1.0, c))) * 255)
        for c in (rl, gl, bl)
    )


def interpolate_color(color1: str, color2: str, alpha: float) -> str:
    """
    Interpolate two hex colors in L*a*b* space

    Endpoints are returned unchanged so that alpha=0 and alpha=1 reproduce
    the inputs exactly.

    Example:
        interpolate_color("#000000", "#FFFFFF", 0.5)  # mid gray (~"#777777")
    """
    if alpha <= 0:
        return normalize_hex(color1)
    if alpha >= 1:
        return normalize_hex(color2)
    lab1 = rgb_to_lab(*hex_to_rgb(color1))
    lab2 = rgb_to_lab(*hex_to_rgb(color2))
    mixed = [(1 - alpha) * c1 + alpha * c2 for c1, c2 in zip(lab1, lab2)]
    return rgb_to_hex(*lab_to_rgb(*mixed))

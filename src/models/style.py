"""
Style model - stroke/fill appearance of a single mobject

Colors are stored as "#RRGGBB" and opacities separately, so every channel
can be interpolated independently.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict

from utils.colors import BLACK, WHITE, compose_rgba, interpolate_color, normalize_hex, parse_rgba

STYLE_FIELDS = ("stroke_color", "stroke_opacity", "fill_color", "fill_opacity", "stroke_width")


@dataclass
class Style:
    """
    Stroke and fill appearance

    Attributes:
        stroke_color: Outline color ("#RRGGBB")
        stroke_opacity: Outline opacity (0.0-1.0)
        fill_color: Interior color ("#RRGGBB")
        fill_opacity: Interior opacity (0.0-1.0)
        stroke_width: Outline width (> 0)
    """
    stroke_color: str = WHITE
    stroke_opacity: float = 1.0
    fill_color: str = BLACK
    fill_opacity: float = 0.0
    stroke_width: float = 4.0

    def __post_init__(self):
        self.stroke_color = normalize_hex(self.stroke_color)
        self.fill_color = normalize_hex(self.fill_color)

    def merged(self, **overrides) -> 'Style':
        """
        Return a copy with the given fields replaced

        Unknown field names raise TypeError, None values are ignored.
        """
        unknown = set(overrides) - set(STYLE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown style fields: {sorted(unknown)}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def transparent(self) -> 'Style':
        """Same colors and width with both opacities at zero"""
        return replace(self, stroke_opacity=0.0, fill_opacity=0.0)

    def to_dict(self) -> Dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    # === RENDERING ===

    def to_render_dict(self, opacity: float = 1.0) -> Dict[str, object]:
        """
        Compose the renderer-facing representation

        Args:
            opacity: Tree-level opacity multiplier folded into both alphas

        Returns:
            {"stroke": "#RRGGBBAA", "fill": "#RRGGBBAA", "linewidth": float}
        """
        return {
            "stroke": compose_rgba(self.stroke_color, self.stroke_opacity * opacity),
            "fill": compose_rgba(self.fill_color, self.fill_opacity * opacity),
            "linewidth": self.stroke_width,
        }

    @classmethod
    def from_render_dict(cls, data: Dict[str, object]) -> 'Style':
        """Inverse of to_render_dict (with opacity=1)"""
        stroke_color, stroke_opacity = parse_rgba(data["stroke"])
        fill_color, fill_opacity = parse_rgba(data["fill"])
        return cls(
            stroke_color=stroke_color,
            stroke_opacity=stroke_opacity,
            fill_color=fill_color,
            fill_opacity=fill_opacity,
            stroke_width=float(data["linewidth"]),
        )


DEFAULT_STYLE = Style()


def _lerp(a: float, b: float, alpha: float) -> float:
    # (1-a)*x + a*y keeps both endpoints exact
    return (1 - alpha) * a + alpha * b


def interpolate_styles(style1: Style, style2: Style, alpha: float) -> Style:
    """
    Component-wise interpolation between two styles

    Numeric channels are lerped, colors are mixed in L*a*b* space.
    """
    return Style(
        stroke_color=interpolate_color(style1.stroke_color, style2.stroke_color, alpha),
        stroke_opacity=_lerp(style1.stroke_opacity, style2.stroke_opacity, alpha),
        fill_color=interpolate_color(style1.fill_color, style2.fill_color, alpha),
        fill_opacity=_lerp(style1.fill_opacity, style2.fill_opacity, alpha),
        stroke_width=_lerp(style1.stroke_width, style2.stroke_width, alpha),
    )

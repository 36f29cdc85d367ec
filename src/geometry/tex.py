"""
Typeset-formula mobjects

Turning TeX into outlines is delegated to a TexImporter. This module only
normalizes what the importer hands back: one glyph node per symbol, scaled
to a fixed reference height and laid out so the pieces of a multi-part
formula sit where they would in the combined formula.
"""

from typing import Dict, List, Optional, Protocol, Sequence

from models.mobject import Mobject
from models.style import Style
from utils import colors
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.GEOMETRY)

# Prepended to every import so every formula is scaled by the same glyph
SCALE_GLYPH = "a"

TEX_STYLE = Style(
    stroke_color=colors.WHITE,
    stroke_opacity=1.0,
    fill_color=colors.WHITE,
    fill_opacity=1.0,
    stroke_width=1.0,
)


class TexImporter(Protocol):
    """Anything that can turn a TeX string into a tree of glyph outlines"""

    def import_tex(self, tex: str) -> Mobject:
        ...


def _glyphs(imported: Mobject) -> List[Mobject]:
    sources = imported.submobjects if imported.submobjects else [imported]
    return [Mobject(src.path.copy(), name="glyph") for src in sources]


def make_single_string_tex(tex: str, importer: TexImporter, style: Optional[Style] = None) -> Mobject:
    """
    Import one TeX string as a container of glyphs

    The result is centered at the origin, scaled so an "a" would have the
    configured reference height.
    """
    from managers.config_manager import get_engine_config
    style = style if style is not None else TEX_STYLE

    glyphs = _glyphs(importer.import_tex(SCALE_GLYPH + tex))
    if not glyphs:
        raise ValueError(f"Importer returned no glyphs for {tex!r}")

    mob = Mobject(submobjects=glyphs, styles_propagate_to_children=True, name=tex)
    mob.apply_style(style)

    scale_dims = glyphs[0].get_dimensions()
    if scale_dims is not None and scale_dims.height > 0:
        mob.scale(get_engine_config().reference_glyph_height / scale_dims.height)
    else:
        log.warn("Scale glyph has no height, skipping normalization", tex=tex)

    mob.remove(glyphs[0])
    cx, cy = mob.get_center()
    mob.translate((-cx, -cy))
    return mob


def make_tex_mobject(
    tex_strings: Sequence[str],
    importer: TexImporter,
    tex_to_color_map: Optional[Dict[str, str]] = None,
    style: Optional[Style] = None,
    start_string: str = "",
    end_string: str = ""
) -> Mobject:
    """
    Formula built from several TeX strings

    Each string becomes its own child container so it can be animated
    separately. Strings listed in tex_to_color_map get that fill color.

    Example:
        eq = make_tex_mobject(["x^2", "+", "y^2"], importer, {"+": colors.YELLOW})
    """
    tex_to_color_map = tex_to_color_map or {}
    style = style if style is not None else TEX_STYLE

    combined = make_single_string_tex(
        f"{start_string}{' '.join(tex_strings)}{end_string}", importer, style
    )

    parts = []
    for tex in tex_strings:
        part_style = style
        if tex in tex_to_color_map:
            part_style = style.merged(fill_color=tex_to_color_map[tex])
        parts.append(make_single_string_tex(f"{start_string}{tex}{end_string}", importer, part_style))

    combined_glyphs = combined.submobjects
    combined_index = 0
    for part in parts:
        if part.submobjects and combined_index < len(combined_glyphs):
            current = part.submobjects[0].get_center()
            target = combined_glyphs[combined_index].get_center()
            part.translate((target[0] - current[0], target[1] - current[1]))
        combined_index += len(part.submobjects)

        # Blank glyphs (spaces) have no counterpart in the parts
        while combined_index < len(combined_glyphs) and not combined_glyphs[combined_index].has_points():
            combined_index += 1

    log.debug("Built tex mobject", parts=len(parts), glyphs=len(combined_glyphs))
    return Mobject(submobjects=parts, styles_propagate_to_children=True, name=" ".join(tex_strings))


def make_text_mobject(
    text_strings: Sequence[str],
    importer: TexImporter,
    tex_to_color_map: Optional[Dict[str, str]] = None,
    style: Optional[Style] = None
) -> Mobject:
    """Plain text in roman font"""
    return make_tex_mobject(
        text_strings,
        importer,
        tex_to_color_map=tex_to_color_map,
        style=style,
        start_string="\\textrm{",
        end_string="}",
    )

"""
Tests for typeset-formula mobjects, using a fake importer that returns one
square glyph per character (see conftest.FakeTexImporter).
"""

import pytest

from geometry.tex import make_single_string_tex, make_tex_mobject, make_text_mobject
from utils import colors


class TestSingleStringTex:
    """Import, scale and center one TeX string."""

    def test_scale_glyph_is_prepended_and_dropped(self, tex_importer):
        mob = make_single_string_tex("xy", tex_importer)
        assert tex_importer.calls == ["axy"]
        assert len(mob.submobjects) == 2

    def test_scaled_to_reference_height(self, tex_importer, engine_config):
        mob = make_single_string_tex("xy", tex_importer)
        # "a" is twice as tall as the other glyphs
        expected = engine_config.reference_glyph_height / 2
        for glyph in mob.submobjects:
            assert glyph.get_dimensions().height == pytest.approx(expected)

    def test_centered_at_origin(self, tex_importer):
        mob = make_single_string_tex("xyz", tex_importer)
        assert mob.get_center() == pytest.approx((0.0, 0.0))

    def test_container_propagates_style(self, tex_importer):
        mob = make_single_string_tex("xy", tex_importer)
        assert mob.styles_propagate_to_children is True
        mob.apply_style(fill_color=colors.BLUE)
        assert all(g.style.fill_color == colors.BLUE for g in mob.submobjects)

    def test_default_tex_style(self, tex_importer):
        mob = make_single_string_tex("x", tex_importer)
        glyph = mob.submobjects[0]
        assert glyph.style.fill_opacity == 1.0
        assert glyph.style.stroke_width == 1.0


class TestTexMobject:
    """Multi-part formulas."""

    def test_one_container_per_string(self, tex_importer):
        mob = make_tex_mobject(["x", "y"], tex_importer)
        assert len(mob.submobjects) == 2
        assert all(part.styles_propagate_to_children for part in mob.submobjects)
        assert tex_importer.calls[0] == "ax y"

    def test_parts_positioned_like_combined_string(self, tex_importer, engine_config):
        mob = make_tex_mobject(["x", "y"], tex_importer)
        x_part, y_part = mob.submobjects
        # Combined "x y": glyph spacing is 2 units per character, so x and y
        # sit 4 units apart before scaling by half the reference height
        offset = 4 * engine_config.reference_glyph_height / 2 / 2
        assert x_part.get_center() == pytest.approx((-offset, 0.0))
        assert y_part.get_center() == pytest.approx((offset, 0.0))

    def test_color_map(self, tex_importer):
        mob = make_tex_mobject(["x", "y"], tex_importer, tex_to_color_map={"y": "#ff0000"})
        x_part, y_part = mob.submobjects
        assert y_part.submobjects[0].style.fill_color == "#FF0000"
        assert x_part.submobjects[0].style.fill_color == colors.WHITE

    def test_text_wraps_in_textrm(self, tex_importer):
        make_text_mobject(["hi"], tex_importer)
        assert tex_importer.calls[0] == "a\\textrm{hi}"
        assert "a\\textrm{hi}" in tex_importer.calls[1:]

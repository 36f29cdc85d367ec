import pytest

from animations.rate_functions import linear
from geometry.shapes import make_polygon
from managers.config_manager import set_engine_config
from models.config import AnimationDefaults, EngineConfig
from models.enums import AnimationKind
from models.mobject import Mobject
from models.path import PathGeometry


@pytest.fixture(autouse=True)
def engine_config():
    """
    Deterministic engine config for every test: linear timing, no lag,
    default style, 9-component arcs.
    """
    config = EngineConfig(
        animation_defaults={
            kind: AnimationDefaults(kind=kind, rate_func=linear)
            for kind in AnimationKind
        },
    )
    set_engine_config(config)
    yield config
    set_engine_config(None)


@pytest.fixture
def triangle():
    """Closed right triangle: 4 anchors, 3 straight segments"""
    return make_polygon([(0, 0), (3, 0), (0, 3)])


@pytest.fixture
def square_path():
    return PathGeometry.from_corners([(0, 0), (2, 0), (2, 2), (0, 2)])


@pytest.fixture
def line3():
    """Open two-segment polyline with 3 anchors"""
    return Mobject(PathGeometry.from_corners([(0, 0), (1, 0), (2, 0)], closed=False))


@pytest.fixture
def line5():
    """Open four-segment polyline with 5 anchors"""
    return Mobject(
        PathGeometry.from_corners([(0, 1), (1, 2), (2, 1), (3, 2), (4, 1)], closed=False),
        style=Mobject().style.merged(stroke_color="#FC6255", stroke_width=2.0),
    )


class FakeTexImporter:
    """
    Importer returning one unit-wide square glyph per character

    Spaces produce a glyph without geometry. The "a" glyph is 2 units tall,
    every other glyph 1 unit.
    """

    def __init__(self):
        self.calls = []

    def import_tex(self, tex: str) -> Mobject:
        self.calls.append(tex)
        glyphs = []
        for i, ch in enumerate(tex):
            if ch == " ":
                glyphs.append(Mobject())
                continue
            height = 2.0 if ch == "a" else 1.0
            x = 2.0 * i
            glyphs.append(Mobject(PathGeometry.from_corners(
                [(x, 0), (x + 1, 0), (x + 1, height), (x, height)]
            )))
        return Mobject(submobjects=glyphs)


@pytest.fixture
def tex_importer():
    return FakeTexImporter()

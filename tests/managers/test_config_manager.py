"""
Tests for ConfigManager and its sub-managers, using the YAML files shipped
in src/config.
"""

import pytest

from animations.rate_functions import linear, smooth
from managers.animation_manager import AnimationManager
from managers.color_manager import ColorManager
from managers.config_manager import ConfigManager, get_engine_config, set_engine_config
from models.config import EngineConfig
from models.enums import AnimationKind
from models.style import Style


@pytest.fixture
def config():
    manager = ConfigManager()
    manager.load()
    return manager


class TestConfigManagerLoading:
    """Include-based loading and fallback."""

    def test_includes_merged(self, config):
        for key in ("palette", "style", "geometry", "animations"):
            assert key in config.data

    def test_sub_managers_initialized(self, config):
        assert isinstance(config.color_manager, ColorManager)
        assert isinstance(config.animation_manager, AnimationManager)
        assert config.color_manager.get_hex("red") == "#FC6255"

    def test_fallback_to_factory_defaults(self):
        manager = ConfigManager(config_path="config/does_not_exist.yaml")
        data = manager.load()
        assert "animations" in data
        assert manager.color_manager.get_hex("white") == "#FFFFFF"

    def test_build_engine_config(self, config):
        engine_config = config.build_engine_config()
        assert isinstance(engine_config, EngineConfig)
        assert engine_config.arc_components == 9
        assert engine_config.reference_glyph_height == pytest.approx(0.15)
        assert engine_config.default_style.stroke_color == "#FFFFFF"
        assert engine_config.default_style.stroke_width == 4.0
        assert set(engine_config.animation_defaults) == set(AnimationKind)

    def test_write_and_wait_defaults(self, config):
        engine_config = config.build_engine_config()
        assert engine_config.get_animation_defaults(AnimationKind.WRITE).rate_func is linear
        wait = engine_config.get_animation_defaults(AnimationKind.WAIT)
        assert wait.suspend_mobject_updating is False


class TestEngineConfigHandle:
    """Process-wide engine config."""

    def test_lazy_load_from_yaml(self):
        set_engine_config(None)
        first = get_engine_config()
        assert first is get_engine_config()
        assert first.get_animation_defaults(AnimationKind.SHOW_CREATION).rate_func is smooth

    def test_explicit_config_wins(self):
        custom = EngineConfig(arc_components=4)
        set_engine_config(custom)
        assert get_engine_config() is custom

    def test_default_style_per_instance(self):
        first, second = EngineConfig(), EngineConfig()
        assert first.default_style == Style()
        assert first.default_style is not second.default_style

    def test_unconfigured_kind_falls_back(self):
        defaults = EngineConfig().get_animation_defaults(AnimationKind.FADE_IN)
        assert defaults.rate_func is smooth
        assert defaults.run_time == 1.0
        assert defaults.lag_ratio == 0.0


class TestAnimationManager:
    """Parsing of the animations: map."""

    def test_parses_known_kinds(self):
        manager = AnimationManager({
            'animations': {
                'fade_in': {'rate_func': 'linear', 'run_time': 2, 'lag_ratio': 0.1},
            }
        })
        defaults = manager.get_defaults(AnimationKind.FADE_IN)
        assert defaults.rate_func is linear
        assert defaults.run_time == 2.0
        assert defaults.lag_ratio == 0.1
        assert defaults.suspend_mobject_updating is True

    def test_skips_unknown_kind(self):
        manager = AnimationManager({'animations': {'SPIN': {'rate_func': 'linear'}}})
        assert manager.get_all_defaults() == []

    def test_skips_unknown_rate_function(self):
        manager = AnimationManager({'animations': {'FADE_IN': {'rate_func': 'bounce'}}})
        assert manager.get_defaults(AnimationKind.FADE_IN) is None

    def test_empty_data(self):
        assert AnimationManager({}).get_all_defaults() == []


class TestColorManager:
    """Named palette lookups."""

    def test_names_case_insensitive(self):
        manager = ColorManager({'palette': {'Teal': '#5cd0b3'}})
        assert manager.get_hex("teal") == "#5CD0B3"
        assert manager.get_hex("TEAL") == "#5CD0B3"
        assert manager.names == ["TEAL"]

    def test_resolve_hex_passthrough(self):
        manager = ColorManager({})
        assert manager.resolve("#abc") == "#AABBCC"

    def test_resolve_unknown_name(self):
        with pytest.raises(KeyError):
            ColorManager({}).resolve("mauve")

    def test_invalid_palette_entry_skipped(self):
        manager = ColorManager({'palette': {'BAD': 'nope', 'RED': '#FF0000'}})
        assert manager.palette == {'RED': '#FF0000'}

"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files, initializes sub-managers and builds the
process-wide EngineConfig.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, TYPE_CHECKING

from models.config import EngineConfig
from models.style import Style
from utils.logger import get_category_logger, LogCategory

if TYPE_CHECKING:
    from managers.animation_manager import AnimationManager
    from managers.color_manager import ColorManager

log = get_category_logger(LogCategory.CONFIG)


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Initializes sub-managers (ColorManager, AnimationManager).

    Example:
        config = ConfigManager()
        config.load()

        # Access via sub-managers
        red = config.color_manager.get_hex("red")
        defaults = config.animation_manager.get_defaults(AnimationKind.WRITE)

        # Immutable engine settings
        engine_config = config.build_engine_config()
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data = {}

        # Sub-managers (initialized in load())
        self.animation_manager: 'AnimationManager'
        self.color_manager: 'ColorManager'

    def load(self):
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat it as a monolithic config
        4. Fallback to factory defaults on failure
        5. Initialize sub-managers

        Returns:
            Merged config data dict
        """
        src_dir = Path(__file__).parent.parent
        try:
            full_path = src_dir / self.config_path

            with open(full_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], full_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            defaults_path = src_dir / self.factory_defaults_path
            with open(defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}

        self._initialize_managers()

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["colors.yaml", "animations.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files win on key clashes)
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    def _initialize_managers(self):
        """
        Initialize sub-managers with loaded config data

        Creates:
        - ColorManager: Named palette
        - AnimationManager: Timing defaults per AnimationKind
        """
        from managers.animation_manager import AnimationManager
        from managers.color_manager import ColorManager

        try:
            self.color_manager = ColorManager({'palette': self.data.get('palette', {})})
            log.info(f"ColorManager initialized with {len(self.color_manager.names)} colors")
        except Exception as ex:
            log.warn("Failed to initialize ColorManager, using empty", error=str(ex))
            self.color_manager = ColorManager({})

        try:
            self.animation_manager = AnimationManager(self.data)
            anims = self.animation_manager.get_all_defaults()
            log.info(f"AnimationManager initialized with {len(anims)} animations")
        except Exception as ex:
            log.error("Failed to initialize AnimationManager, using empty", error=str(ex))
            self.animation_manager = AnimationManager({})

    # ===== Engine config =====

    def _parse_style(self) -> Style:
        """Default style from the 'style' section; colors may be palette names"""
        style_data = dict(self.data.get('style') or {})
        for key in ('stroke_color', 'fill_color'):
            if key in style_data:
                style_data[key] = self.color_manager.resolve(str(style_data[key]))
        return Style().merged(**style_data)

    def build_engine_config(self) -> EngineConfig:
        """
        Freeze the loaded data into an EngineConfig

        Call after load().
        """
        geometry = self.data.get('geometry') or {}
        defaults = EngineConfig()
        config = EngineConfig(
            default_style=self._parse_style(),
            animation_defaults={d.kind: d for d in self.animation_manager.get_all_defaults()},
            arc_components=int(geometry.get('arc_components', defaults.arc_components)),
            reference_glyph_height=float(geometry.get('reference_glyph_height', defaults.reference_glyph_height)),
        )
        log.debug(
            "Engine config built",
            arc_components=config.arc_components,
            animations=len(config.animation_defaults),
        )
        return config

    # ===== Properties for direct access =====

    @property
    def palette(self) -> dict:
        """Get palette section"""
        return self.data.get('palette', {})

    @property
    def animations(self) -> dict:
        """Get animations section"""
        return self.data.get('animations', {})


_engine_config: Optional[EngineConfig] = None


def get_engine_config() -> EngineConfig:
    """Process-wide engine config, loaded from YAML on first use"""
    global _engine_config
    if _engine_config is None:
        manager = ConfigManager()
        manager.load()
        _engine_config = manager.build_engine_config()
    return _engine_config


def set_engine_config(config: Optional[EngineConfig]) -> None:
    """Replace the process-wide engine config (None reloads on next use)"""
    global _engine_config
    _engine_config = config

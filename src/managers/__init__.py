"""
Managers for configuration
"""

from .config_manager import ConfigManager, get_engine_config, set_engine_config
from .color_manager import ColorManager
from .animation_manager import AnimationManager

__all__ = ['ConfigManager', 'ColorManager', 'AnimationManager', 'get_engine_config', 'set_engine_config']

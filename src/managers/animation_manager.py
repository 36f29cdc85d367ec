"""
Animation Manager - Provides per-kind animation timing defaults

Parses the `animations:` map from YAML into AnimationDefaults.
Kinds missing from the config fall back to EngineConfig's built-in defaults.
"""

from typing import Dict, List, Optional

from animations.rate_functions import get_rate_function
from models.config import AnimationDefaults
from models.enums import AnimationKind
from models.errors import DomainError
from utils.enum_helper import EnumHelper
from utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.CONFIG)


class AnimationManager:
    """
    Animation defaults manager

    Responsibilities:
    - Parse animation definitions from config
    - Provide AnimationDefaults per AnimationKind
    """

    def __init__(self, data: dict):
        """
        Initialize with parsed animation config

        Args:
            data: Dict with 'animations' key (map format)
                  {
                      'SHOW_CREATION': {
                          'rate_func': 'smooth',
                          'lag_ratio': 0.0,
                          'run_time': 1.0,
                          'suspend_mobject_updating': True
                      },
                      ...
                  }
        """
        self.animations: Dict[AnimationKind, AnimationDefaults] = {}
        self._process_data(data)

    def _process_data(self, data: dict):
        """
        Process animation configuration data (map format)

        Entries with an unknown kind or rate function are logged and skipped.
        """
        animations_map = data.get('animations') or {}

        for kind_str, anim_data in animations_map.items():
            anim_data = anim_data or {}
            try:
                kind = EnumHelper.from_string(AnimationKind, kind_str)
            except ValueError:
                log.warn(
                    f"Invalid animation kind in config: {kind_str}",
                    valid=str(EnumHelper.list_names(AnimationKind)),
                )
                continue

            try:
                rate_func = get_rate_function(anim_data.get('rate_func', 'smooth'))
            except DomainError as ex:
                log.warn(f"Skipping animation {kind.name}", error=ex.message)
                continue

            self.animations[kind] = AnimationDefaults(
                kind=kind,
                rate_func=rate_func,
                lag_ratio=float(anim_data.get('lag_ratio', 0.0)),
                run_time=float(anim_data.get('run_time', 1.0)),
                suspend_mobject_updating=bool(anim_data.get('suspend_mobject_updating', True)),
            )
            log.debug(f"Loaded animation defaults: {kind.name}")

    def get_defaults(self, kind: AnimationKind) -> Optional[AnimationDefaults]:
        """Get configured defaults for a kind"""
        return self.animations.get(kind)

    def get_all_defaults(self) -> List[AnimationDefaults]:
        """Get all configured defaults (unordered)"""
        return list(self.animations.values())

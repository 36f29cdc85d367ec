"""
Color Manager - Processes the named color palette

Processes color data from ConfigManager (does NOT load files).
Single responsibility: Parse and provide access to palette colors.
"""

from typing import Dict, List

from utils.colors import normalize_hex
from utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.CONFIG)


class ColorManager:
    """
    Named palette (data processor only)

    Responsibilities:
    - Parse palette data
    - Normalize hex strings
    - Resolve color names or hex strings used in style config

    Does NOT load files - receives data from ConfigManager.

    Example:
        # Created by ConfigManager
        color_mgr = ColorManager({'palette': {'RED': '#FC6255'}})

        color_mgr.get_hex("red")         # "#FC6255"
        color_mgr.resolve("#fff")        # "#FFFFFF"
    """

    def __init__(self, data: dict):
        """
        Initialize ColorManager with parsed config data

        Args:
            data: Config dict with a 'palette' key
                  Example: {'palette': {'WHITE': '#FFFFFF', 'BLUE': '#58C4DD'}}
        """
        self.data = data
        self._palette_cache: Dict[str, str] = {}
        self._process_data()

    def _process_data(self):
        """Normalize names to upper case and hex strings to #RRGGBB"""
        for name, value in (self.data.get('palette') or {}).items():
            try:
                self._palette_cache[str(name).upper()] = normalize_hex(str(value))
            except ValueError as ex:
                log.warn(f"Invalid palette color '{name}'", value=value, error=str(ex))

    @property
    def palette(self) -> Dict[str, str]:
        """All palette colors as {NAME: "#RRGGBB"}"""
        return self._palette_cache

    @property
    def names(self) -> List[str]:
        return list(self._palette_cache.keys())

    def get_hex(self, name: str) -> str:
        """
        Hex string of a palette color

        Raises:
            KeyError: If the color doesn't exist
        """
        return self._palette_cache[name.upper()]

    def resolve(self, value: str) -> str:
        """
        Hex string for a palette name or a literal hex color

        Raises:
            KeyError: Unknown palette name
            ValueError: Malformed hex string
        """
        if value.startswith("#"):
            return normalize_hex(value)
        return self.get_hex(value)

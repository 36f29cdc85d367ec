"""
Structured console logger

One process-wide Logger prints a headline per event and a tree of
key/value details below it. Modules bind a category once at import:

    log = get_category_logger(LogCategory.ALIGNMENT)
    log.debug("Inserted points", before=4, after=9)

    [14:23:45] ALIGNMENT · Inserted points
               ├─ before: 4
               └─ after: 9
"""

from datetime import datetime
from typing import Iterable, List, Optional

from models.enums import LogLevel, LogCategory


class Colors:
    """ANSI escape codes"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.GEOMETRY: Colors.BRIGHT_BLUE,
    LogCategory.ALIGNMENT: Colors.BRIGHT_CYAN,
    LogCategory.STYLE: Colors.BRIGHT_MAGENTA,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.SCENE: Colors.BRIGHT_GREEN,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

LEVEL_STYLE = {
    # level: (priority, symbol, color)
    LogLevel.DEBUG: (0, '·', Colors.DIM),
    LogLevel.INFO: (1, '✓', Colors.GREEN),
    LogLevel.WARN: (2, '⚠', Colors.YELLOW),
    LogLevel.ERROR: (3, '✗', Colors.RED),
}

# Width of "[HH:MM:SS] " so detail lines sit under the category column
DETAIL_INDENT = " " * 11
CATEGORY_WIDTH = max(len(c.name) for c in LogCategory)


class Logger:
    """
    Category-aware console logger

    Args:
        min_level: Events below this level are dropped
        use_colors: Emit ANSI colors (turn off when output is captured)
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
        self.min_level = min_level
        self.use_colors = use_colors

    def is_enabled(self, level: LogLevel) -> bool:
        return LEVEL_STYLE[level][0] >= LEVEL_STYLE[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def format_headline(self, category: LogCategory, message: str, level: LogLevel) -> str:
        _, symbol, color = LEVEL_STYLE[level]
        stamp = datetime.now().strftime('[%H:%M:%S]')
        name = self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, Colors.WHITE))
        return f"{stamp} {name} {self._paint(symbol, color)} {self._paint(message, color)}"

    def format_details(self, details: Iterable[str]) -> List[str]:
        """Tree-drawn detail lines; the last one closes the branch"""
        details = list(details)
        lines = []
        for i, detail in enumerate(details):
            branch = "└─" if i == len(details) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {detail}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Print one event

        Args:
            category: Subsystem the event belongs to
            message: Headline
            level: Severity
            details: Preformatted detail strings, printed before kwargs
            **kwargs: Printed as "key: value" detail lines

        Example:
            logger.log(LogCategory.CONFIG, "Loaded colors.yaml", keys="['palette']")
        """
        if not self.is_enabled(level):
            return

        print(self.format_headline(category, message, level))
        extra = [f"{k}: {v}" for k, v in kwargs.items()]
        for line in self.format_details(list(details or []) + extra):
            print(line)

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """
    Logger with a fixed default category

    Holds a reference to the shared Logger, so configure_logger() changes
    apply to bound loggers created earlier.
    """

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        """Sibling logger on the same base, e.g. SCENE next to ANIMATION"""
        return BoundLogger(self._base, category)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """Change level and coloring of the shared logger in place"""
    _logger.min_level = min_level
    _logger.use_colors = use_colors

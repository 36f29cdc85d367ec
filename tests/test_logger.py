"""
Tests for the structured logger singleton.
"""

import pytest

from models.enums import LogCategory, LogLevel
from utils.logger import configure_logger, get_category_logger, get_logger


@pytest.fixture(autouse=True)
def plain_logger():
    configure_logger(min_level=LogLevel.DEBUG, use_colors=False)
    yield get_logger()
    configure_logger(min_level=LogLevel.INFO, use_colors=True)


class TestLoggerSingleton:
    """configure_logger modifies the shared instance"""

    def test_same_instance_after_configure(self):
        before = get_logger()
        configure_logger(min_level=LogLevel.WARN)
        assert get_logger() is before
        assert before.min_level == LogLevel.WARN

    def test_bound_logger_follows_level(self, capsys):
        log = get_category_logger(LogCategory.GEOMETRY)
        configure_logger(min_level=LogLevel.ERROR, use_colors=False)
        log.warn("hidden")
        assert capsys.readouterr().out == ""
        log.error("shown")
        assert "shown" in capsys.readouterr().out


class TestLoggerOutput:
    """Compact category/detail format"""

    def test_message_and_details(self, capsys):
        get_category_logger(LogCategory.ALIGNMENT).info("Inserted points", before=4, after=9)
        lines = capsys.readouterr().out.splitlines()
        assert "ALIGNMENT" in lines[0]
        assert "Inserted points" in lines[0]
        assert lines[1].strip() == "├─ before: 4"
        assert lines[2].strip() == "└─ after: 9"

    def test_debug_filtered_at_info(self, capsys):
        configure_logger(min_level=LogLevel.INFO, use_colors=False)
        get_category_logger(LogCategory.STYLE).debug("quiet")
        assert capsys.readouterr().out == ""

    def test_category_override(self, capsys):
        log = get_category_logger(LogCategory.SCENE)
        log.log("moved", category=LogCategory.ANIMATION)
        assert "ANIMATION" in capsys.readouterr().out

    def test_no_ansi_codes_without_colors(self, capsys):
        get_category_logger(LogCategory.CONFIG).info("plain")
        assert "\033[" not in capsys.readouterr().out

    def test_detail_branches(self):
        lines = get_logger().format_details(["first", "second"])
        assert [line.strip() for line in lines] == ["├─ first", "└─ second"]

    def test_headline_pads_category(self):
        headline = get_logger().format_headline(LogCategory.SCENE, "Diff", LogLevel.INFO)
        assert "SCENE     ✓ Diff" in headline

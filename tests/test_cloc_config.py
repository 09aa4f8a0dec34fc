"""
Tests for cloc_config, cloc_logging and cloc_colors modules.
"""

import json
import logging

import pytest

from cloc_colors import DEFAULT_COLOR, get_color
from cloc_config import DEFAULT_EXCLUDE_DIRS, DEFAULT_THEME, THEMES, ClocConfig
from cloc_logging import get_log_path, setup_logging


@pytest.mark.unit
class TestClocConfig:
    """Tests for ClocConfig dataclass."""

    def test_defaults(self):
        config = ClocConfig()
        assert config.cloc_binary == "cloc"
        assert config.exclude_dirs == DEFAULT_EXCLUDE_DIRS
        assert config.exclude_dirs is not DEFAULT_EXCLUDE_DIRS
        assert config.theme == DEFAULT_THEME
        assert config.show_header is False

    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "cloc_binary": "/opt/cloc",
            "exclude_dirs": ["vendor"],
            "theme": "Nord",
            "log_level": "DEBUG",
        }))

        loaded = ClocConfig.load(path)

        assert loaded.cloc_binary == "/opt/cloc"
        assert loaded.exclude_dirs == ["vendor"]
        assert loaded.theme_colors == THEMES["Nord"]
        assert loaded.log_level == "DEBUG"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert ClocConfig.load(tmp_path / "absent.json") == ClocConfig()

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
    def test_broken_file_gives_defaults(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content)
        assert ClocConfig.load(path) == ClocConfig()

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"theme": "Dracula", "exclude_dirs": "oops"}))
        loaded = ClocConfig.load(path)
        assert loaded.theme == "Dracula"
        assert loaded.exclude_dirs == DEFAULT_EXCLUDE_DIRS

    def test_unknown_theme_falls_back(self):
        assert ClocConfig(theme="Nope").theme_colors == THEMES[DEFAULT_THEME]


@pytest.mark.unit
class TestLogging:
    """Tests for file logging setup."""

    def test_writes_to_file(self, tmp_path):
        log_file = setup_logging("DEBUG", log_dir=tmp_path)
        try:
            logging.getLogger("cloc_runner").info("Running: cloc --json .")
            for handler in logging.getLogger().handlers:
                handler.flush()
            assert log_file == get_log_path(tmp_path)
            assert "Running: cloc --json ." in log_file.read_text(encoding="utf-8")
        finally:
            for handler in list(logging.getLogger().handlers):
                if getattr(handler, "_cloc_tui", False):
                    logging.getLogger().removeHandler(handler)
                    handler.close()

    def test_setup_twice_keeps_one_handler(self, tmp_path):
        setup_logging(log_dir=tmp_path)
        setup_logging(log_dir=tmp_path)
        try:
            ours = [h for h in logging.getLogger().handlers if getattr(h, "_cloc_tui", False)]
            assert len(ours) == 1
        finally:
            for handler in list(logging.getLogger().handlers):
                if getattr(handler, "_cloc_tui", False):
                    logging.getLogger().removeHandler(handler)
                    handler.close()


@pytest.mark.unit
def test_language_colors():
    assert get_color("Python") == "#3572A5"
    assert get_color("Go") == "#00ADD8"
    assert get_color("Klingon") == DEFAULT_COLOR

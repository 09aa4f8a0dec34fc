"""Persistent settings for the cloc dashboard."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(__file__).parent / ".cloc_tui_config.json"

THEMES = {
    "Catppuccin Mocha": {"bg": "#1e1e2e", "fg": "#cdd6f4"},
    "Tokyo Night": {"bg": "#24283b", "fg": "#c0caf5"},
    "Gruvbox Dark": {"bg": "#1d2021", "fg": "#ebdbb2"},
    "Dracula": {"bg": "#282a36", "fg": "#f8f8f2"},
    "Nord": {"bg": "#2e3440", "fg": "#eceff4"},
    "One Dark": {"bg": "#282c34", "fg": "#abb2bf"},
    "Solarized Dark": {"bg": "#002b36", "fg": "#839496"},
    "Monokai": {"bg": "#272822", "fg": "#f8f8f2"},
}
DEFAULT_THEME = "Gruvbox Dark"

DEFAULT_EXCLUDE_DIRS = [
    ".git",
    ".venv",
    "venv",
    "node_modules",
    "__pycache__",
    ".tox",
    ".mypy_cache",
    ".pytest_cache",
]


@dataclass
class ClocConfig:
    """User-configurable settings."""
    cloc_binary: str = "cloc"
    exclude_dirs: list[str] = field(default_factory=lambda: DEFAULT_EXCLUDE_DIRS.copy())
    theme: str = DEFAULT_THEME
    show_header: bool = False
    log_level: str = "INFO"

    @property
    def theme_colors(self) -> dict:
        """Get bg/fg colors of the configured theme."""
        return THEMES.get(self.theme, THEMES[DEFAULT_THEME])

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "ClocConfig":
        """Load config from file, falling back to defaults."""
        if path.exists():
            try:
                data = json.loads(path.read_text())
                exclude_dirs = data.get("exclude_dirs")
                return cls(
                    cloc_binary=data.get("cloc_binary") or "cloc",
                    exclude_dirs=exclude_dirs if isinstance(exclude_dirs, list) else DEFAULT_EXCLUDE_DIRS.copy(),
                    theme=data.get("theme", DEFAULT_THEME),
                    show_header=bool(data.get("show_header", False)),
                    log_level=data.get("log_level", "INFO"),
                )
            except (json.JSONDecodeError, AttributeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", path, e)
        return cls()

"""File logging for the cloc dashboard.

The terminal belongs to the TUI, so log records go to a file under the
user's home directory instead of stderr.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_DIR = Path.home() / ".cloc_tui" / "logs"
LOG_FILE_NAME = "cloc_tui.log"
LOG_FORMAT = '%(asctime)s | %(levelname)-7s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def get_log_path(log_dir: Optional[Path] = None) -> Path:
    """Get the log file path."""
    return (log_dir or LOG_DIR) / LOG_FILE_NAME


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Attach a file handler to the root logger and return the log file path."""
    log_file = get_log_path(log_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Drop handlers from a previous call so records are not written twice
    for handler in list(root.handlers):
        if getattr(handler, "_cloc_tui", False):
            root.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler._cloc_tui = True
    root.addHandler(handler)
    return log_file

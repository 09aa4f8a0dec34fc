"""
Dashboard state machine.

`Dashboard` owns the ResultSet, both views' cursor state, both sort specs and
the current Layout. Every method is called from the UI event loop, one event
at a time; rendering only reads from it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from cloc_layout import Layout, compute_layout
from cloc_models import AnalysisRequest, FileStat, LanguageStat, ResultSet
from cloc_sort import DEFAULT_SORT, SortColumn, SortSpec, sort_files, sort_languages

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24


class ViewMode(Enum):
    LANGUAGE = "language"
    FILES = "files"


class Phase(Enum):
    LOADING = "loading"  # Waiting for cloc
    READY = "ready"      # Result installed
    ERROR = "error"      # cloc failed; only quit is accepted


class Command(Enum):
    """Key commands other than sorting."""
    UP = "up"
    DOWN = "down"
    FIRST = "first"
    LAST = "last"
    OPEN = "open"
    BACK = "back"
    QUIT = "quit"              # Back in the file view, exit elsewhere
    FORCE_QUIT = "force_quit"  # Always exit


@dataclass
class CursorState:
    """Cursor and scroll offset of one table."""
    cursor: int = 0
    offset: int = 0

    def reset(self) -> None:
        self.cursor = 0
        self.offset = 0

    def move_to(self, index: int, row_count: int, visible_rows: int) -> None:
        """Clamp the cursor to the rows and scroll just enough to show it."""
        if row_count <= 0:
            self.reset()
            return
        visible_rows = max(1, visible_rows)
        self.cursor = min(max(index, 0), row_count - 1)
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + visible_rows:
            self.offset = self.cursor - visible_rows + 1

    def window(self, row_count: int, visible_rows: int) -> range:
        """Indices of the rows to draw.

        Does not modify the state: after a resize the stored offset may no
        longer frame the cursor until the next move, so the frame is
        re-derived here the same way `move_to` would.
        """
        if row_count <= 0:
            return range(0)
        visible_rows = max(1, visible_rows)
        cursor = min(self.cursor, row_count - 1)
        offset = min(self.offset, cursor)
        if cursor >= offset + visible_rows:
            offset = cursor - visible_rows + 1
        return range(offset, min(row_count, offset + visible_rows))


@dataclass
class ViewState:
    """Which view is shown and where each view's cursor is."""
    mode: ViewMode = ViewMode.LANGUAGE
    selected_language: Optional[str] = None
    languages: CursorState = field(default_factory=CursorState)
    files: CursorState = field(default_factory=CursorState)

    @property
    def active(self) -> CursorState:
        return self.files if self.mode is ViewMode.FILES else self.languages


class Dashboard:
    """Interactive table state for the language and file views."""

    def __init__(self, request: AnalysisRequest, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        self.request = request
        self.result: Optional[ResultSet] = None
        self.error: Optional[str] = None
        self.view = ViewState()
        self.language_sort: SortSpec = DEFAULT_SORT
        self.file_sort: SortSpec = DEFAULT_SORT
        self.layout: Layout = compute_layout(width, height)
        self._file_rows: list[FileStat] = []

    # ==========================================================================
    # Read-only views
    # ==========================================================================

    @property
    def phase(self) -> Phase:
        if self.error is not None:
            return Phase.ERROR
        if self.result is None:
            return Phase.LOADING
        return Phase.READY

    @property
    def mode(self) -> ViewMode:
        return self.view.mode

    @property
    def language_rows(self) -> list[LanguageStat]:
        return self.result.languages if self.result else []

    @property
    def file_rows(self) -> list[FileStat]:
        return self._file_rows

    @property
    def rows(self) -> list:
        if self.view.mode is ViewMode.FILES:
            return self._file_rows
        return self.language_rows

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def active_sort(self) -> SortSpec:
        return self.file_sort if self.view.mode is ViewMode.FILES else self.language_sort

    def visible_window(self) -> range:
        """Row indices currently inside the scroll window."""
        return self.view.active.window(self.row_count, self.layout.visible_rows)

    def selected_row(self):
        """Row under the cursor, or None when the table is empty."""
        rows = self.rows
        if not rows:
            return None
        return rows[min(self.view.active.cursor, len(rows) - 1)]

    # ==========================================================================
    # External events
    # ==========================================================================

    def resize(self, width: int, height: int) -> None:
        """Recompute the layout. Cursor, scroll and sort stay as they are."""
        self.layout = compute_layout(width, height)

    def receive_result(self, result: ResultSet) -> None:
        """Install the analysis result; only the first arrival counts."""
        if self.phase is not Phase.LOADING:
            logger.warning("Ignoring analysis result in phase %s", self.phase.value)
            return
        self.result = result
        self.result.languages[:] = sort_languages(result.languages, self.language_sort)
        self.view.mode = ViewMode.LANGUAGE
        self.view.languages.reset()
        self.layout = compute_layout(self.layout.width, self.layout.height)
        logger.info("Result installed: %d languages", len(result.languages))

    def receive_error(self, message: str) -> None:
        """Enter the terminal error state."""
        if self.phase is not Phase.LOADING:
            logger.warning("Ignoring analysis error in phase %s: %s", self.phase.value, message)
            return
        self.error = message
        logger.error("Analysis failed: %s", message)

    # ==========================================================================
    # Commands
    # ==========================================================================

    def dispatch(self, command: Command) -> bool:
        """Apply a key command. Returns True when the application should exit."""
        if command is Command.FORCE_QUIT:
            return True
        if command is Command.QUIT:
            if self.phase is Phase.READY and self.view.mode is ViewMode.FILES:
                self.go_back()
                return False
            return True
        if self.phase is not Phase.READY:
            return False

        if command is Command.UP:
            self.move_up()
        elif command is Command.DOWN:
            self.move_down()
        elif command is Command.FIRST:
            self.jump_first()
        elif command is Command.LAST:
            self.jump_last()
        elif command is Command.OPEN:
            self.open_selected()
        elif command is Command.BACK:
            self.go_back()
        return False

    def _move_to(self, index: int) -> None:
        self.view.active.move_to(index, self.row_count, self.layout.visible_rows)

    def move_up(self) -> None:
        self._move_to(self.view.active.cursor - 1)

    def move_down(self) -> None:
        self._move_to(self.view.active.cursor + 1)

    def jump_first(self) -> None:
        self._move_to(0)

    def jump_last(self) -> None:
        self._move_to(self.row_count - 1)

    def open_selected(self) -> bool:
        """Drill into the language under the cursor."""
        if self.phase is not Phase.READY or self.view.mode is not ViewMode.LANGUAGE:
            return False
        language = self.selected_row()
        if language is None:
            return False

        self.view.selected_language = language.name
        self._file_rows = sort_files(self.result.files_for(language.name), self.file_sort)
        self.view.files.reset()
        self.view.mode = ViewMode.FILES
        logger.debug("Opened %s (%d files)", language.name, len(self._file_rows))
        return True

    def go_back(self) -> bool:
        """Return to the language view exactly as it was left."""
        if self.view.mode is not ViewMode.FILES:
            return False
        self.view.mode = ViewMode.LANGUAGE
        return True

    def sort_by(self, column: SortColumn) -> bool:
        """Select a sort column in the current view."""
        if self.phase is not Phase.READY:
            return False

        if self.view.mode is ViewMode.FILES:
            if column is SortColumn.FILES:
                return False
            self.file_sort = self.file_sort.select(column)
            self._file_rows = sort_files(self.result.files_for(self.view.selected_language), self.file_sort)
            self.view.files.reset()
            logger.debug("File sort: %s %s", self.file_sort.column.name, self.file_sort.arrow)
        else:
            self.language_sort = self.language_sort.select(column)
            self.result.languages[:] = sort_languages(self.result.languages, self.language_sort)
            self.view.languages.reset()
            logger.debug("Language sort: %s %s", self.language_sort.column.name, self.language_sort.arrow)
        return True

#!/usr/bin/env python3
"""
cloc TUI - A Terminal User Interface for browsing cloc line counts.

Features:
- Per-language summary with blank/comment/code/total columns
- Drill-down into the files of a language
- Sorting by any column, toggling ascending/descending
- Scroll-windowed tables that follow terminal resizes
- Git revision mode (cloc --git) when given a commit hash
"""

import logging
import sys
import time
from typing import Callable, Optional

from rich.text import Text
from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from cloc_colors import get_color
from cloc_config import ClocConfig
from cloc_logging import setup_logging
from cloc_models import AnalysisRequest, BackendUnavailable, ClocError, InvalidTarget, ResultSet
from cloc_render import render_body, render_help, render_status, render_title, truncate_left
from cloc_runner import INSTALL_HINTS, check_cloc_installed, resolve_request, run_cloc
from cloc_sort import SortColumn
from cloc_state import Command, Dashboard

logger = logging.getLogger(__name__)

Runner = Callable[[AnalysisRequest, ClocConfig], ResultSet]


# =============================================================================
# Modal Screens
# =============================================================================

SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
LOADING_TARGET_WIDTH = 40


def loading_label(request: AnalysisRequest) -> str:
    """What is being counted, as shown under the spinner."""
    if request.is_revision:
        return "git revision (cloc --git)"
    return "working tree"


class LoadingScreen(ModalScreen):
    """Shown while cloc runs. Only quitting is possible."""

    BINDINGS = [
        Binding("q", "app.quit", "Quit"),
        Binding("ctrl+c", "app.quit", "Quit", priority=True),
    ]

    CSS = """
    LoadingScreen {
        align: center middle;
    }

    #loading-box {
        width: 48;
        height: 8;
        background: $panel;
        border: round $accent;
        padding: 1 2;
    }

    #loading-status {
        text-style: bold;
        color: $accent;
    }

    #loading-target {
        padding-top: 1;
    }

    #loading-mode {
        color: $text-muted;
    }
    """

    def __init__(self, request: AnalysisRequest, **kwargs):
        super().__init__(**kwargs)
        self.request = request
        self._frame = 0
        self._started = time.monotonic()

    def compose(self) -> ComposeResult:
        with Vertical(id="loading-box"):
            yield Static(self._status(), id="loading-status")
            yield Static(truncate_left(self.request.target, LOADING_TARGET_WIDTH), id="loading-target")
            yield Static(loading_label(self.request), id="loading-mode")

    def on_mount(self) -> None:
        self.set_interval(0.1, self._tick)

    def _status(self) -> Text:
        elapsed = time.monotonic() - self._started
        return Text.assemble(SPINNER_FRAMES[self._frame], f" Counting lines... {elapsed:.0f}s")

    def _tick(self) -> None:
        self._frame = (self._frame + 1) % len(SPINNER_FRAMES)
        self.query_one("#loading-status", Static).update(self._status())


# =============================================================================
# Main Application
# =============================================================================

class ClocTUI(App):
    """Main TUI application for cloc visualization."""

    BINDINGS = [
        Binding("ctrl+c", "command('force_quit')", "Quit", priority=True),
        Binding("q", "command('quit')", "Quit/Back"),
        Binding("escape", "command('back')", "Back", priority=True),
        Binding("enter", "command('open')", "Files", priority=True),
        Binding("up,k", "command('up')", "Up", show=False),
        Binding("down,j", "command('down')", "Down", show=False),
        Binding("home,g", "command('first')", "First", show=False),
        Binding("end,G", "command('last')", "Last", show=False),
        Binding("1", "sort('1')", "Name", show=False),
        Binding("2", "sort('2')", "Files", show=False),
        Binding("3", "sort('3')", "Blank", show=False),
        Binding("4", "sort('4')", "Comment", show=False),
        Binding("5", "sort('5')", "Code", show=False),
        Binding("6", "sort('6')", "Total", show=False),
    ]

    def __init__(
        self,
        request: AnalysisRequest,
        config: Optional[ClocConfig] = None,
        runner: Runner = run_cloc,
        color_for: Callable[[str], str] = get_color,
    ):
        self.config = config or ClocConfig()
        # Build CSS with theme colors before super().__init__()
        theme_colors = self.config.theme_colors
        bg = theme_colors['bg']
        fg = theme_colors['fg']
        self.CSS = f"""
        Screen {{
            background: {bg};
            color: {fg};
        }}

        #main-container {{
            height: 100%;
            padding: 1 2;
        }}

        #title {{
            height: 2;
        }}

        #table {{
            height: auto;
        }}

        #status-bar {{
            height: 2;
            padding-top: 1;
        }}

        #help {{
            height: 1;
        }}

        Static {{
            background: {bg};
            color: {fg};
        }}
        """
        super().__init__()
        self.request = request
        self.dashboard = Dashboard(request)
        self._runner = runner
        self._color_for = color_for

    def compose(self) -> ComposeResult:
        if self.config.show_header:
            yield Header(show_clock=True)

        with Vertical(id="main-container"):
            yield Static("", id="title")
            yield Static("", id="table")
            yield Static("", id="status-bar")
            yield Static("", id="help")

    def on_mount(self) -> None:
        """Size the layout and start the analysis."""
        self.title = "cloc"
        self.sub_title = self.request.target
        self.dashboard.resize(self.size.width, self.size.height)
        self.refresh_view()
        self.run_analysis()

    def on_resize(self, event: events.Resize) -> None:
        self.dashboard.resize(event.size.width, event.size.height)
        self.refresh_view()

    def refresh_view(self) -> None:
        """Repaint every section from the dashboard state."""
        dashboard = self.dashboard
        self.query_one("#title", Static).update(render_title(dashboard, self._color_for))
        self.query_one("#table", Static).update(render_body(dashboard, self._color_for))
        self.query_one("#status-bar", Static).update(render_status(dashboard))
        self.query_one("#help", Static).update(render_help(dashboard))

    # ==========================================================================
    # Analysis
    # ==========================================================================

    def run_analysis(self) -> None:
        """Run cloc once, in the background."""
        self.push_screen(LoadingScreen(self.request))
        self._do_analysis()

    @work(exclusive=True, thread=True)
    def _do_analysis(self) -> None:
        """Run cloc in background thread."""
        try:
            result = self._runner(self.request, self.config)
        except ClocError as e:
            self.call_from_thread(self._analysis_error, str(e))
        else:
            self.call_from_thread(self._analysis_complete, result)

    def _close_loading(self) -> None:
        if isinstance(self.screen, LoadingScreen):
            self.pop_screen()

    def _analysis_complete(self, result: ResultSet) -> None:
        """Handle analysis completion."""
        self._close_loading()
        self.dashboard.receive_result(result)
        self.refresh_view()

    def _analysis_error(self, error: str) -> None:
        """Handle analysis error."""
        self._close_loading()
        self.dashboard.receive_error(error)
        self.refresh_view()

    # ==========================================================================
    # Actions
    # ==========================================================================

    def action_command(self, name: str) -> None:
        """Forward a key command to the dashboard."""
        if self.dashboard.dispatch(Command(name)):
            self.exit()
            return
        self.refresh_view()

    def action_sort(self, key: str) -> None:
        """Sort the current view by the column bound to `key`."""
        if self.dashboard.sort_by(SortColumn.from_key(key)):
            self.refresh_view()


# =============================================================================
# Entry Point
# =============================================================================

def main():
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else "."
    config = ClocConfig.load()
    log_file = setup_logging(config.log_level)
    logger.info("Starting cloc TUI for %s (log: %s)", target, log_file)

    try:
        request = resolve_request(target)
        check_cloc_installed(config.cloc_binary)
    except InvalidTarget as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except BackendUnavailable as e:
        print(f"Error: {e}", file=sys.stderr)
        for hint in INSTALL_HINTS:
            print(hint, file=sys.stderr)
        sys.exit(1)

    app = ClocTUI(request, config=config)
    app.run()


if __name__ == "__main__":
    main()

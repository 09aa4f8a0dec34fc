"""
Rendering of dashboard state into Rich renderables.

Everything here is a pure read of a `Dashboard`; the Textual app calls these
after every event and puts the results into its Static widgets.
"""

import os
from typing import Callable

from rich.table import Table
from rich.text import Text

from cloc_colors import get_color
from cloc_models import FileStat, LanguageStat
from cloc_sort import SortColumn, SortSpec
from cloc_state import Dashboard, Phase, ViewMode

ColorLookup = Callable[[str], str]

# =============================================================================
# Styles
# =============================================================================

HEADER_STYLE = "bold #FFFFFF on #5C5C5C"
HEADER_ACTIVE_STYLE = "bold #000000 on #7DC4E4"
TITLE_STYLE = "bold #7DC4E4"
CURSOR_STYLE = "bold #7DC4E4"
STATUS_STYLE = "#888888"
HELP_STYLE = "#626262"
HELP_KEY_STYLE = "bold #7DC4E4"

FILES_STYLE = "#F9E2AF"
BLANK_STYLE = "#9399B2"
COMMENT_STYLE = "#89B4FA"
CODE_STYLE = "#A6E3A1"
TOTAL_STYLE = "#CBA6F7"

CURSOR_MARK = "▶ "
NO_CURSOR = "  "
LANGUAGE_DOT = "●"
ELLIPSIS = "…"

LANGUAGE_HEADERS = [
    (SortColumn.NAME, "[1] Language", None),
    (SortColumn.FILES, "[2] Files", FILES_STYLE),
    (SortColumn.BLANK, "[3] Blank", BLANK_STYLE),
    (SortColumn.COMMENT, "[4] Comment", COMMENT_STYLE),
    (SortColumn.CODE, "[5] Code", CODE_STYLE),
    (SortColumn.TOTAL, "[6] Total", TOTAL_STYLE),
]

FILE_HEADERS = [
    (SortColumn.NAME, "[1] File", None),
    (SortColumn.BLANK, "[3] Blank", BLANK_STYLE),
    (SortColumn.COMMENT, "[4] Comment", COMMENT_STYLE),
    (SortColumn.CODE, "[5] Code", CODE_STYLE),
    (SortColumn.TOTAL, "[6] Total", TOTAL_STYLE),
]


# =============================================================================
# Helpers
# =============================================================================

def header_label(label: str, column: SortColumn, spec: SortSpec) -> Text:
    """Column header with the sort arrow on the active column."""
    if column is spec.column:
        return Text(f"{label} {spec.arrow}", style=HEADER_ACTIVE_STYLE)
    return Text(label, style=HEADER_STYLE)


def truncate_left(text: str, width: int) -> str:
    """Keep the tail of `text` so it fits in `width` cells."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return ELLIPSIS
    return ELLIPSIS + text[-(width - 1):]


def display_path(file: FileStat, dashboard: Dashboard) -> str:
    """File path relative to the analyzed directory, fitted to its column."""
    path = file.path
    target = dashboard.request.target
    if not dashboard.request.is_revision and os.path.isabs(path):
        try:
            path = os.path.relpath(path, target)
        except ValueError:
            pass
    return truncate_left(path, dashboard.layout.file_columns.path - len(CURSOR_MARK))


def _cursor(is_selected: bool) -> Text:
    if is_selected:
        return Text(CURSOR_MARK, style=CURSOR_STYLE)
    return Text(NO_CURSOR)


def _new_table(headers: list, widths: tuple[int, ...], spec: SortSpec) -> Table:
    table = Table(box=None, show_edge=False, pad_edge=False, padding=(0, 0), expand=False)
    for (column, label, style), width in zip(headers, widths):
        is_name = column is SortColumn.NAME
        table.add_column(
            header_label(label, column, spec),
            width=width,
            justify="left" if is_name else "right",
            style=style,
            no_wrap=True,
            overflow="ellipsis",
        )
    return table


def _pad_rows(table: Table, drawn: int, visible_rows: int, columns: int) -> None:
    for _ in range(drawn, visible_rows):
        table.add_row(*[""] * columns)


# =============================================================================
# Sections
# =============================================================================

def render_title(dashboard: Dashboard, color_for: ColorLookup = get_color) -> Text:
    if dashboard.phase is Phase.READY and dashboard.mode is ViewMode.FILES:
        language = dashboard.view.selected_language or ""
        return Text(f" 📁 {language} Files ", style=f"bold #FFFFFF on {color_for(language)}")
    target = dashboard.request.target
    if dashboard.request.is_revision:
        target = f"{target} (git)"
    return Text(f" 📊 cloc - {target} ", style=TITLE_STYLE)


def render_language_table(dashboard: Dashboard, color_for: ColorLookup = get_color) -> Table:
    layout = dashboard.layout
    table = _new_table(LANGUAGE_HEADERS, layout.language_columns.widths, dashboard.language_sort)
    rows: list[LanguageStat] = dashboard.language_rows
    window = dashboard.visible_window()
    cursor = dashboard.view.languages.cursor

    for i in window:
        lang = rows[i]
        name = Text.assemble(
            _cursor(i == cursor),
            (LANGUAGE_DOT, color_for(lang.name)),
            " ",
            lang.name,
        )
        table.add_row(
            name,
            str(lang.file_count),
            str(lang.blank),
            str(lang.comment),
            str(lang.code),
            str(lang.total),
        )

    _pad_rows(table, len(window), layout.visible_rows, len(LANGUAGE_HEADERS))
    return table


def render_file_table(dashboard: Dashboard) -> Table:
    layout = dashboard.layout
    table = _new_table(FILE_HEADERS, layout.file_columns.widths, dashboard.file_sort)
    rows = dashboard.file_rows
    window = dashboard.visible_window()
    cursor = dashboard.view.files.cursor

    for i in window:
        file = rows[i]
        table.add_row(
            Text.assemble(_cursor(i == cursor), display_path(file, dashboard)),
            str(file.blank),
            str(file.comment),
            str(file.code),
            str(file.total),
        )

    _pad_rows(table, len(window), layout.visible_rows, len(FILE_HEADERS))
    return table


def render_body(dashboard: Dashboard, color_for: ColorLookup = get_color):
    """Table for the current view, or the loading/error placeholder."""
    phase = dashboard.phase
    if phase is Phase.ERROR:
        return Text(f"Error: {dashboard.error}\n\nPress q to quit.", style="bold red")
    if phase is Phase.LOADING:
        return Text("Loading...", style="dim")
    if dashboard.mode is ViewMode.FILES:
        return render_file_table(dashboard)
    return render_language_table(dashboard, color_for)


def render_status(dashboard: Dashboard) -> Text:
    if dashboard.result is None:
        return Text("")
    total = dashboard.result.total
    sep = (" │ ", STATUS_STYLE)
    return Text.assemble(
        ("Total: ", STATUS_STYLE),
        (str(total.file_count), FILES_STYLE), (" files", STATUS_STYLE), sep,
        (str(total.blank), BLANK_STYLE), (" blank", STATUS_STYLE), sep,
        (str(total.comment), COMMENT_STYLE), (" comment", STATUS_STYLE), sep,
        (str(total.code), CODE_STYLE), (" code", STATUS_STYLE), sep,
        (str(total.total), TOTAL_STYLE), (" lines", STATUS_STYLE),
    )


def _help(entries: list[tuple[str, str]]) -> Text:
    text = Text()
    for i, (key, desc) in enumerate(entries):
        if i:
            text.append(" • ", style=HELP_STYLE)
        text.append(key, style=HELP_KEY_STYLE)
        text.append(f" {desc}", style=HELP_STYLE)
    return text


def render_help(dashboard: Dashboard) -> Text:
    phase = dashboard.phase
    if phase is not Phase.READY:
        return _help([("q", "quit")])
    if dashboard.mode is ViewMode.FILES:
        return _help([
            ("↑/↓", "navigate"),
            ("home/end g/G", "jump"),
            ("1,3-6", "sort"),
            ("esc/q", "back"),
            ("ctrl+c", "quit"),
        ])
    return _help([
        ("↑/↓", "navigate"),
        ("home/end g/G", "jump"),
        ("enter", "view files"),
        ("1-6", "sort"),
        ("q", "quit"),
    ])

"""Column widths and visible rows derived from the terminal size."""

from dataclasses import dataclass

# Padding around the whole dashboard: 2 cells left + 2 cells right
HORIZONTAL_PADDING = 4

# Title, blank line, table header + borders, status bar, help line, padding
RESERVED_LINES = 12

MIN_COL_LANGUAGE = 20
MIN_COL_FILES = 8
MIN_COL_BLANK = 8
MIN_COL_COMMENT = 10
MIN_COL_CODE = 10
MIN_COL_TOTAL = 10

# Color dot and spacing in front of the language name
LANGUAGE_DECORATION = 3

FILE_NUMERIC_COL = 10
FILE_NUMERIC_COLS = 4
FILE_PATH_RESERVED = FILE_NUMERIC_COL * FILE_NUMERIC_COLS + 4
MIN_COL_FILE_PATH = 40


@dataclass(frozen=True)
class LanguageColumns:
    name: int = MIN_COL_LANGUAGE
    files: int = MIN_COL_FILES
    blank: int = MIN_COL_BLANK
    comment: int = MIN_COL_COMMENT
    code: int = MIN_COL_CODE
    total: int = MIN_COL_TOTAL

    @property
    def widths(self) -> tuple[int, ...]:
        return (self.name, self.files, self.blank, self.comment, self.code, self.total)


@dataclass(frozen=True)
class FileColumns:
    path: int = MIN_COL_FILE_PATH
    blank: int = FILE_NUMERIC_COL
    comment: int = FILE_NUMERIC_COL
    code: int = FILE_NUMERIC_COL
    total: int = FILE_NUMERIC_COL

    @property
    def widths(self) -> tuple[int, ...]:
        return (self.path, self.blank, self.comment, self.code, self.total)


@dataclass(frozen=True)
class Layout:
    """Geometry of one frame; replaced wholesale on every resize."""
    width: int
    height: int
    content_width: int
    visible_rows: int
    language_columns: LanguageColumns
    file_columns: FileColumns


def language_columns(content_width: int) -> LanguageColumns:
    """Give half the spare width to the name, the rest 20/20/30/30."""
    minimum = LanguageColumns()
    extra = content_width - sum(minimum.widths) - LANGUAGE_DECORATION
    if extra <= 0:
        return minimum

    name_extra = extra * 50 // 100
    remaining = extra - name_extra
    return LanguageColumns(
        name=MIN_COL_LANGUAGE + name_extra,
        files=MIN_COL_FILES + remaining * 20 // 100,
        blank=MIN_COL_BLANK + remaining * 20 // 100,
        comment=MIN_COL_COMMENT + remaining * 30 // 100,
        code=MIN_COL_CODE + remaining * 30 // 100,
    )


def file_columns(content_width: int) -> FileColumns:
    """The path column takes everything the numeric columns leave over."""
    return FileColumns(path=max(MIN_COL_FILE_PATH, content_width - FILE_PATH_RESERVED))


def compute_layout(width: int, height: int) -> Layout:
    """Compute the layout for a terminal of `width` x `height` cells."""
    content_width = max(0, width - HORIZONTAL_PADDING)
    return Layout(
        width=width,
        height=height,
        content_width=content_width,
        visible_rows=max(1, height - RESERVED_LINES),
        language_columns=language_columns(content_width),
        file_columns=file_columns(content_width),
    )

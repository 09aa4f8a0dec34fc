"""Row ordering for the language and file tables."""

from dataclasses import dataclass, replace
from enum import Enum

from cloc_models import FileStat, LanguageStat


class SortColumn(Enum):
    """Sortable table columns, keyed by the digit that selects them."""
    NAME = "1"
    FILES = "2"
    BLANK = "3"
    COMMENT = "4"
    CODE = "5"
    TOTAL = "6"

    @property
    def default_ascending(self) -> bool:
        """Names read A-Z; numbers read biggest first."""
        return self is SortColumn.NAME

    @classmethod
    def from_key(cls, key: str) -> "SortColumn":
        return cls(key)


@dataclass(frozen=True)
class SortSpec:
    """Active sort column and direction for one view."""
    column: SortColumn = SortColumn.CODE
    ascending: bool = False

    @classmethod
    def for_column(cls, column: SortColumn) -> "SortSpec":
        return cls(column=column, ascending=column.default_ascending)

    def select(self, column: SortColumn) -> "SortSpec":
        """Same column flips direction; a new column takes its default."""
        if column is self.column:
            return replace(self, ascending=not self.ascending)
        return SortSpec.for_column(column)

    @property
    def arrow(self) -> str:
        return "▲" if self.ascending else "▼"


DEFAULT_SORT = SortSpec(SortColumn.CODE, ascending=False)


def _language_key(column: SortColumn):
    if column is SortColumn.NAME:
        return lambda lang: lang.name.lower()
    if column is SortColumn.FILES:
        return lambda lang: lang.file_count
    if column is SortColumn.BLANK:
        return lambda lang: lang.blank
    if column is SortColumn.COMMENT:
        return lambda lang: lang.comment
    if column is SortColumn.CODE:
        return lambda lang: lang.code
    return lambda lang: lang.total


def _file_key(column: SortColumn):
    if column is SortColumn.NAME:
        return lambda f: f.path.lower()
    if column is SortColumn.FILES:
        raise ValueError("files cannot be sorted by file count")
    if column is SortColumn.BLANK:
        return lambda f: f.blank
    if column is SortColumn.COMMENT:
        return lambda f: f.comment
    if column is SortColumn.CODE:
        return lambda f: f.code
    return lambda f: f.total


def sort_languages(languages: list[LanguageStat], spec: SortSpec) -> list[LanguageStat]:
    """Return languages ordered by `spec`; equal keys keep their order."""
    return sorted(languages, key=_language_key(spec.column), reverse=not spec.ascending)


def sort_files(files: list[FileStat], spec: SortSpec) -> list[FileStat]:
    """Return a sorted copy of `files`; the input list is left untouched."""
    return sorted(files, key=_file_key(spec.column), reverse=not spec.ascending)

"""
Tests for cloc_sort module.
"""

import itertools

import pytest

from cloc_models import FileStat, LanguageStat
from cloc_sort import DEFAULT_SORT, SortColumn, SortSpec, sort_files, sort_languages


LANGUAGES = [
    LanguageStat(name="python", file_count=4, blank=40, comment=30, code=200),
    LanguageStat(name="Go", file_count=9, blank=10, comment=20, code=300),
    LanguageStat(name="C", file_count=1, blank=50, comment=5, code=100),
    LanguageStat(name="rust", file_count=2, blank=20, comment=60, code=150),
]

FILES = [
    FileStat(path="src/b.py", language="Python", blank=3, comment=1, code=50),
    FileStat(path="src/A.py", language="Python", blank=1, comment=9, code=70),
    FileStat(path="src/c.py", language="Python", blank=7, comment=4, code=10),
]


def names(rows):
    return [row.name for row in rows]


@pytest.mark.unit
class TestSortSpec:
    """Tests for SortSpec selection rules."""

    def test_default_is_code_descending(self):
        assert DEFAULT_SORT == SortSpec(SortColumn.CODE, ascending=False)

    def test_new_column_takes_default_direction(self):
        assert SortSpec().select(SortColumn.NAME) == SortSpec(SortColumn.NAME, ascending=True)
        for column in (SortColumn.FILES, SortColumn.BLANK, SortColumn.COMMENT, SortColumn.TOTAL):
            assert SortSpec(SortColumn.NAME, True).select(column) == SortSpec(column, ascending=False)

    def test_same_column_flips(self):
        spec = SortSpec(SortColumn.CODE, ascending=False)
        assert spec.select(SortColumn.CODE).ascending is True
        assert spec.select(SortColumn.CODE).select(SortColumn.CODE) == spec

    def test_from_key(self):
        assert SortColumn.from_key("1") is SortColumn.NAME
        assert SortColumn.from_key("6") is SortColumn.TOTAL


@pytest.mark.unit
class TestSortLanguages:
    """Tests for sort_languages function."""

    def test_name_is_case_insensitive(self):
        result = sort_languages(LANGUAGES, SortSpec(SortColumn.NAME, ascending=True))
        assert names(result) == ["C", "Go", "python", "rust"]

    @pytest.mark.parametrize("column,expected", [
        (SortColumn.FILES, ["Go", "python", "rust", "C"]),
        (SortColumn.BLANK, ["C", "python", "rust", "Go"]),
        (SortColumn.COMMENT, ["rust", "python", "Go", "C"]),
        (SortColumn.CODE, ["Go", "python", "rust", "C"]),
        (SortColumn.TOTAL, ["Go", "python", "rust", "C"]),
    ])
    def test_numeric_columns_descending(self, column, expected):
        assert names(sort_languages(LANGUAGES, SortSpec(column, ascending=False))) == expected

    def test_does_not_mutate_input(self):
        before = list(LANGUAGES)
        sort_languages(LANGUAGES, SortSpec(SortColumn.NAME, ascending=True))
        assert LANGUAGES == before

    def test_idempotent(self):
        for column, ascending in itertools.product(SortColumn, (True, False)):
            spec = SortSpec(column, ascending)
            once = sort_languages(LANGUAGES, spec)
            assert sort_languages(once, spec) == once

    def test_reverse_direction_reverses_without_ties(self):
        for column in (SortColumn.NAME, SortColumn.FILES, SortColumn.BLANK, SortColumn.COMMENT, SortColumn.CODE):
            up = sort_languages(LANGUAGES, SortSpec(column, ascending=True))
            down = sort_languages(LANGUAGES, SortSpec(column, ascending=False))
            assert down == list(reversed(up))

    def test_ties_keep_original_order(self):
        tied = [
            LanguageStat(name="first", code=10),
            LanguageStat(name="second", code=10),
            LanguageStat(name="third", code=10),
        ]
        for ascending in (True, False):
            result = sort_languages(tied, SortSpec(SortColumn.CODE, ascending))
            assert names(result) == ["first", "second", "third"]


@pytest.mark.unit
class TestSortFiles:
    """Tests for sort_files function."""

    def test_by_path_case_insensitive(self):
        result = sort_files(FILES, SortSpec(SortColumn.NAME, ascending=True))
        assert [f.path for f in result] == ["src/A.py", "src/b.py", "src/c.py"]

    def test_by_total_descending(self):
        result = sort_files(FILES, SortSpec(SortColumn.TOTAL, ascending=False))
        assert [f.path for f in result] == ["src/A.py", "src/b.py", "src/c.py"]

    def test_returns_copy(self):
        original = list(FILES)
        result = sort_files(FILES, SortSpec(SortColumn.COMMENT, ascending=False))
        assert result is not FILES
        assert FILES == original

    def test_file_count_is_not_a_file_column(self):
        with pytest.raises(ValueError):
            sort_files(FILES, SortSpec(SortColumn.FILES, ascending=False))

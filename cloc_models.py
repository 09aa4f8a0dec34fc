"""Data models and errors for the cloc dashboard."""

from dataclasses import dataclass, field
from enum import Enum


TOTAL_ROW_NAME = "SUM"


class ClocError(Exception):
    """Base class for everything the cloc backend can fail with."""


class BackendUnavailable(ClocError):
    """cloc cannot be located or launched."""


class BackendError(ClocError):
    """cloc ran but failed, or its output could not be parsed."""


class InvalidTarget(ClocError):
    """The requested path does not exist and is not a git ref."""


class MalformedRecord(ClocError):
    """A single language or file entry failed validation."""


class AnalysisMode(Enum):
    """How cloc is pointed at the target."""
    PATH = "path"          # Count files under a directory or file
    REVISION = "revision"  # Count files of a git ref (cloc --git)


@dataclass(frozen=True)
class AnalysisRequest:
    """What to analyze and how."""
    target: str
    mode: AnalysisMode = AnalysisMode.PATH

    @property
    def is_revision(self) -> bool:
        return self.mode is AnalysisMode.REVISION


@dataclass(frozen=True)
class LanguageStat:
    """Aggregate line counts for one language."""
    name: str
    file_count: int = 0
    blank: int = 0
    comment: int = 0
    code: int = 0

    @property
    def total(self) -> int:
        return self.blank + self.comment + self.code


@dataclass(frozen=True)
class FileStat:
    """Line counts for a single file."""
    path: str
    language: str
    blank: int = 0
    comment: int = 0
    code: int = 0

    @property
    def total(self) -> int:
        return self.blank + self.comment + self.code


def sum_languages(languages: list[LanguageStat]) -> LanguageStat:
    """Build the SUM row from a list of languages."""
    return LanguageStat(
        name=TOTAL_ROW_NAME,
        file_count=sum(lang.file_count for lang in languages),
        blank=sum(lang.blank for lang in languages),
        comment=sum(lang.comment for lang in languages),
        code=sum(lang.code for lang in languages),
    )


@dataclass
class ResultSet:
    """Complete cloc analysis result.

    `languages` is the canonical ordering shown in the language view and may
    be re-sorted in place. `files_by_language` is read-only after creation:
    file listings are sorted copies.
    """
    languages: list[LanguageStat] = field(default_factory=list)
    files_by_language: dict[str, list[FileStat]] = field(default_factory=dict)
    total: LanguageStat = field(default_factory=lambda: LanguageStat(name=TOTAL_ROW_NAME))

    @classmethod
    def build(cls, languages: list[LanguageStat], files_by_language: dict[str, list[FileStat]]) -> "ResultSet":
        """Create a result whose total is derived from `languages`."""
        return cls(
            languages=list(languages),
            files_by_language={lang: list(files) for lang, files in files_by_language.items()},
            total=sum_languages(languages),
        )

    @property
    def is_empty(self) -> bool:
        return not self.languages

    def files_for(self, language: str) -> list[FileStat]:
        """Files of one language, in stored order. Do not mutate."""
        return self.files_by_language.get(language, [])

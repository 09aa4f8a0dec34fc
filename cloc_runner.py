"""
cloc runner - invokes cloc and merges its JSON reports into a ResultSet.

Two reports are requested from cloc: the per-language summary
(`cloc --json`) and the per-file breakdown (`cloc --json --by-file`).
"""

import json
import logging
import os
import shutil
import subprocess
from typing import Optional

from cloc_config import ClocConfig
from cloc_models import (
    TOTAL_ROW_NAME,
    AnalysisMode,
    AnalysisRequest,
    BackendError,
    BackendUnavailable,
    FileStat,
    InvalidTarget,
    LanguageStat,
    MalformedRecord,
    ResultSet,
)
from cloc_sort import DEFAULT_SORT, sort_files, sort_languages

logger = logging.getLogger(__name__)

HEADER_KEY = "header"

INSTALL_HINTS = [
    "  macOS: brew install cloc",
    "  Ubuntu: apt install cloc",
]


# =============================================================================
# Bootstrap
# =============================================================================

def is_git_ref(value: str) -> bool:
    """Check if a string looks like a git commit hash (7-40 hex chars)."""
    if not 7 <= len(value) <= 40:
        return False
    return all(c in "0123456789abcdefABCDEF" for c in value)


def resolve_request(target: str) -> AnalysisRequest:
    """Turn a command-line argument into an AnalysisRequest.

    Existing paths win; a hex string that is not a path is treated as a git
    revision of the repository in the current directory.
    """
    path = os.path.abspath(os.path.expanduser(target))
    if os.path.exists(path):
        return AnalysisRequest(target=path, mode=AnalysisMode.PATH)
    if is_git_ref(target):
        return AnalysisRequest(target=target, mode=AnalysisMode.REVISION)
    raise InvalidTarget(f"Path does not exist: {path}")


def check_cloc_installed(binary: str = "cloc") -> str:
    """Return the full path of the cloc binary or raise BackendUnavailable."""
    found = shutil.which(binary)
    if not found:
        raise BackendUnavailable(f"'{binary}' is not installed. Please install it first.")
    return found


# =============================================================================
# Parsers
# =============================================================================

def _count(record: dict, key: str) -> int:
    value = record.get(key)
    # bool is an int subclass; cloc never emits it for counts
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecord(f"{key!r} is not an integer: {value!r}")
    if value < 0:
        raise MalformedRecord(f"{key!r} is negative: {value}")
    return value


def parse_language_record(name: str, record) -> LanguageStat:
    """Validate one entry of the per-language report."""
    if not isinstance(record, dict):
        raise MalformedRecord(f"language entry {name!r} is not an object")
    return LanguageStat(
        name=name,
        file_count=_count(record, "nFiles"),
        blank=_count(record, "blank"),
        comment=_count(record, "comment"),
        code=_count(record, "code"),
    )


def parse_file_record(path: str, record) -> FileStat:
    """Validate one entry of the per-file report."""
    if not isinstance(record, dict):
        raise MalformedRecord(f"file entry {path!r} is not an object")
    language = record.get("language")
    if not isinstance(language, str) or not language:
        raise MalformedRecord(f"file entry {path!r} has no language")
    return FileStat(
        path=path,
        language=language,
        blank=_count(record, "blank"),
        comment=_count(record, "comment"),
        code=_count(record, "code"),
    )


def load_report(output: str, label: str) -> dict:
    """Decode a cloc JSON report, raising BackendError if it is unusable."""
    if not output or not output.strip():
        raise BackendError(f"cloc produced no {label} output")
    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise BackendError(f"cloc {label} output is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise BackendError(f"cloc {label} output is not a JSON object")
    return data


def parse_language_report(output: str) -> tuple[list[LanguageStat], Optional[LanguageStat]]:
    """Parse `cloc --json` into languages plus the reported SUM row."""
    data = load_report(output, "summary")
    languages = []
    reported_total = None

    for key, value in data.items():
        if key == HEADER_KEY:
            continue
        try:
            stat = parse_language_record(key, value)
        except MalformedRecord as e:
            logger.warning("Skipping language record: %s", e)
            continue
        if key == TOTAL_ROW_NAME:
            reported_total = stat
        else:
            languages.append(stat)

    return languages, reported_total


def parse_file_report(output: str) -> dict[str, list[FileStat]]:
    """Parse `cloc --json --by-file` into files grouped by language."""
    data = load_report(output, "by-file")
    files: dict[str, list[FileStat]] = {}

    for key, value in data.items():
        if key in (HEADER_KEY, TOTAL_ROW_NAME):
            continue
        try:
            stat = parse_file_record(key, value)
        except MalformedRecord as e:
            logger.warning("Skipping file record: %s", e)
            continue
        files.setdefault(stat.language, []).append(stat)

    return files


def merge_reports(summary_output: str, by_file_output: str) -> ResultSet:
    """Merge both cloc reports into one consistent ResultSet."""
    languages, reported_total = parse_language_report(summary_output)
    files = parse_file_report(by_file_output)

    known = {lang.name for lang in languages}
    for language in list(files):
        if language not in known:
            logger.warning("Dropping %d file(s) of unknown language %r", len(files[language]), language)
            del files[language]

    result = ResultSet.build(
        sort_languages(languages, DEFAULT_SORT),
        {lang: sort_files(entries, DEFAULT_SORT) for lang, entries in files.items()},
    )
    if reported_total is not None and reported_total != result.total:
        logger.warning("cloc SUM row %s differs from merged total %s", reported_total, result.total)
    return result


# =============================================================================
# cloc Runner
# =============================================================================

def build_cloc_command(request: AnalysisRequest, config: ClocConfig, by_file: bool = False) -> list[str]:
    """Build the cloc command line for one report."""
    cmd = [config.cloc_binary, "--json"]
    if by_file:
        cmd.append("--by-file")
    if config.exclude_dirs:
        cmd.append("--exclude-dir=" + ",".join(config.exclude_dirs))
    if request.is_revision:
        cmd.append("--git")
    cmd.append(request.target)
    return cmd


def run_command(cmd: list[str]) -> str:
    """Run cloc and return stdout.

    cloc echoes file names byte for byte, so undecodable bytes are replaced
    instead of failing the whole report.
    """
    logger.info("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", errors="replace")
    except OSError as e:
        raise BackendUnavailable(f"cannot launch {cmd[0]}: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        detail = stderr.splitlines()[-1] if stderr else f"exit status {result.returncode}"
        logger.error("cloc failed (%d): %s", result.returncode, stderr)
        raise BackendError(f"cloc failed: {detail}")
    return result.stdout


def run_cloc(request: AnalysisRequest, config: ClocConfig) -> ResultSet:
    """Run both cloc reports synchronously and merge them."""
    summary_output = run_command(build_cloc_command(request, config))
    by_file_output = run_command(build_cloc_command(request, config, by_file=True))
    result = merge_reports(summary_output, by_file_output)
    if result.is_empty:
        logger.warning("cloc found no countable source files in %s", request.target)
        return result
    logger.info(
        "Analyzed %s: %d languages, %d files, %d code lines",
        request.target, len(result.languages), result.total.file_count, result.total.code,
    )
    return result

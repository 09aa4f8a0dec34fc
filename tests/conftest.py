"""
Shared pytest fixtures and configuration.
"""

import json

import pytest

from cloc_models import AnalysisMode, AnalysisRequest, FileStat, LanguageStat, ResultSet
from cloc_state import Dashboard


def make_summary(languages: dict, total: dict = None) -> str:
    """Build `cloc --json` output from {name: (files, blank, comment, code)}."""
    data = {"header": {"cloc_url": "github.com/AlDanial/cloc", "n_files": 0, "n_lines": 0}}
    for name, (files, blank, comment, code) in languages.items():
        data[name] = {"nFiles": files, "blank": blank, "comment": comment, "code": code}
    if total is None:
        total = {
            "nFiles": sum(v[0] for v in languages.values()),
            "blank": sum(v[1] for v in languages.values()),
            "comment": sum(v[2] for v in languages.values()),
            "code": sum(v[3] for v in languages.values()),
        }
    data["SUM"] = total
    return json.dumps(data)


def make_by_file(files: dict) -> str:
    """Build `cloc --json --by-file` output from {path: (language, blank, comment, code)}."""
    data = {"header": {"cloc_url": "github.com/AlDanial/cloc"}}
    for path, (language, blank, comment, code) in files.items():
        data[path] = {"blank": blank, "comment": comment, "code": code, "language": language}
    data["SUM"] = {
        "blank": sum(v[1] for v in files.values()),
        "comment": sum(v[2] for v in files.values()),
        "code": sum(v[3] for v in files.values()),
        "nFiles": len(files),
    }
    return json.dumps(data)


# Shell stand-in for cloc that reports one Python file with a Latin-1 name
FAKE_CLOC = r"""#!/bin/sh
if [ "$2" = "--by-file" ]; then
  printf '{"header": {}, "/src/caf\351.py": {"blank": 1, "comment": 0, "code": 3, "language": "Python"}, "SUM": {"blank": 1, "comment": 0, "code": 3, "nFiles": 1}}'
else
  printf '{"header": {}, "Python": {"nFiles": 1, "blank": 1, "comment": 0, "code": 3}, "SUM": {"blank": 1, "comment": 0, "code": 3, "nFiles": 1}}'
fi
"""


def write_executable(path, content: str):
    """Write `content` to `path` and mark it executable."""
    path.write_text(content)
    path.chmod(0o755)
    return path


@pytest.fixture
def request_path(tmp_path):
    """An AnalysisRequest pointing at a temporary directory."""
    return AnalysisRequest(target=str(tmp_path), mode=AnalysisMode.PATH)


@pytest.fixture
def go_ts_result(tmp_path):
    """Two languages: Go (3 files, 300 code) and TS (2 files, 150 code)."""
    go_files = [
        FileStat(path=str(tmp_path / "main.go"), language="Go", blank=10, comment=5, code=150),
        FileStat(path=str(tmp_path / "util.go"), language="Go", blank=8, comment=2, code=100),
        FileStat(path=str(tmp_path / "cmd" / "run.go"), language="Go", blank=2, comment=3, code=50),
    ]
    ts_files = [
        FileStat(path=str(tmp_path / "web" / "app.ts"), language="TS", blank=5, comment=1, code=100),
        FileStat(path=str(tmp_path / "web" / "index.ts"), language="TS", blank=5, comment=1, code=50),
    ]
    languages = [
        LanguageStat(name="Go", file_count=3, blank=20, comment=10, code=300),
        LanguageStat(name="TS", file_count=2, blank=10, comment=2, code=150),
    ]
    return ResultSet.build(languages, {"Go": go_files, "TS": ts_files})


def make_many_languages(count: int) -> ResultSet:
    """A result with `count` languages with distinct code counts."""
    languages = [
        LanguageStat(name=f"Lang{i:03d}", file_count=1, blank=i, comment=i, code=1000 - i)
        for i in range(count)
    ]
    files = {
        lang.name: [FileStat(path=f"/src/{lang.name}.txt", language=lang.name, code=lang.code)]
        for lang in languages
    }
    return ResultSet.build(languages, files)


@pytest.fixture
def dashboard(request_path, go_ts_result):
    """A dashboard with the Go/TS result installed, 100x30 terminal."""
    dash = Dashboard(request_path, width=100, height=30)
    dash.receive_result(go_ts_result)
    return dash


@pytest.fixture
def big_dashboard(request_path):
    """A dashboard with 50 languages on a 100x17 terminal (5 visible rows)."""
    dash = Dashboard(request_path, width=100, height=17)
    dash.receive_result(make_many_languages(50))
    return dash

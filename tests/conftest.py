"""Shared test fixtures for ts-quality tests."""

import textwrap
from pathlib import Path

import pytest

from ts_quality.scanning import parse_source


@pytest.fixture
def parse():
    """Parse a (dedented) TypeScript snippet into a SourceTree."""

    def _parse(code: str, language: str = "typescript", path: str = "sample.ts"):
        return parse_source(textwrap.dedent(code), path=path, language=language)

    return _parse


@pytest.fixture
def write_file(tmp_path):
    """Write a file under tmp_path, creating parent directories."""

    def _write(name: str, content: str = "") -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(textwrap.dedent(content))
        return p

    return _write


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and TS_QUALITY_* env vars out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in ("VERBOSITY", "ON_PARSE_ERROR", "EXCLUDE_DIRS", "FOLLOW_SYMLINKS", "MAX_FILE_SIZE_MB"):
        monkeypatch.delenv(f"TS_QUALITY_{key}", raising=False)
    return tmp_path



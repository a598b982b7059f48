"""Tests for the ts-quality exception hierarchy."""

from pathlib import Path

import pytest

from ts_quality.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
    ParsingError,
    TsQualityError,
    UnsupportedLanguageError,
)


class TestHierarchy:
    """Every error can be caught as TsQualityError."""

    @pytest.mark.parametrize(
        "error,parent",
        [
            (FileAccessError(Path("a.ts"), "denied"), AnalysisError),
            (ParsingError(Path("a.ts"), "typescript", "bad"), AnalysisError),
            (UnsupportedLanguageError(".js", ["typescript"]), AnalysisError),
            (InvalidPathError(Path("x"), "missing"), ConfigurationError),
            (InvalidConfigError("verbosity", "loud", "bad"), ConfigurationError),
        ],
    )
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, TsQualityError)


class TestMessages:
    def test_plain_message(self):
        assert str(TsQualityError("boom")) == "boom"

    def test_details_appended(self):
        error = TsQualityError("boom", details={"a": "1", "b": "2"})
        assert str(error) == "boom (a=1, b=2)"

    def test_file_access(self):
        error = FileAccessError(Path("src/a.ts"), "Permission denied")
        assert error.message == "Cannot access file: src/a.ts"
        assert error.details["reason"] == "Permission denied"
        assert error.filepath == Path("src/a.ts")

    def test_parsing(self):
        error = ParsingError(Path("a.ts"), "tsx", "syntax errors")
        assert "Failed to parse tsx file: a.ts" in str(error)
        assert error.reason == "syntax errors"
        assert error.line is None
        assert "line" not in error.details

    def test_parsing_with_line(self):
        error = ParsingError(Path("a.ts"), "typescript", "syntax error at line 7", line=7)
        assert error.line == 7
        assert error.details["line"] == "7"

    def test_unsupported_language(self):
        error = UnsupportedLanguageError(".py", ["typescript", "tsx"])
        assert error.details["supported"] == "typescript, tsx"
        assert error.supported_languages == ["typescript", "tsx"]

    def test_invalid_path(self):
        error = InvalidPathError(Path("nope"), "path does not exist")
        assert str(error) == "Invalid path: nope (path=nope, reason=path does not exist)"

    def test_invalid_config(self):
        error = InvalidConfigError("max_file_size_mb", -1, "must be positive")
        assert error.value == -1
        assert error.details["value"] == "-1"

"""Analysis-related exceptions: file access, parsing, grammar support."""

from pathlib import Path
from typing import List, Optional

from .base import TsQualityError


class AnalysisError(TsQualityError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when a source file contains syntax errors and the run must stop.

    ``line`` is the 1-based line of the first error node, when known.
    """

    def __init__(self, filepath: Path, language: str, reason: str, line: Optional[int] = None):
        details = {"filepath": str(filepath), "language": language, "reason": reason}
        if line is not None:
            details["line"] = str(line)
        super().__init__(f"Failed to parse {language} file: {filepath}", details=details)
        self.filepath = filepath
        self.language = language
        self.reason = reason
        self.line = line


class UnsupportedLanguageError(AnalysisError):
    """Raised when a file has no matching grammar."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages

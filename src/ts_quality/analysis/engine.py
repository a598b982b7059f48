"""Per-file analysis: parse, measure, score, suggest."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig
from ..discovery import find_typescript_files
from ..exceptions import FileAccessError, ParsingError, UnsupportedLanguageError
from ..logging_config import get_logger
from ..metrics import compute_metrics
from ..models import Metric, ScoreResult
from ..scanning import (
    SourceTree,
    TreeSitterParser,
    default_parser,
    detect_language,
    get_supported_languages,
)
from ..scoring import WEIGHTS, calculate_score, generate_suggestions

logger = get_logger(__name__)


class QualityAnalyzer:
    """Scores TypeScript files.

    Files are independent: nothing is carried over from one file to the
    next, so results depend only on each file's own content.

    Usage:
        analyzer = QualityAnalyzer()
        results = analyzer.analyze_path(Path("src"))
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        parser: Optional[TreeSitterParser] = None,
        weights: Mapping[Metric, float] = WEIGHTS,
    ) -> None:
        self.config = config or AnalysisConfig()
        self._parser = parser or default_parser()
        self._weights = weights

    def score_tree(self, tree: SourceTree) -> ScoreResult:
        """Run all metrics over a parsed file and build its ScoreResult."""
        metrics = compute_metrics(tree)
        return ScoreResult(
            file=tree.path,
            score=calculate_score(metrics, self._weights),
            metrics=metrics,
            suggestions=tuple(generate_suggestions(metrics)),
        )

    def parse(self, code: bytes, path: str, language: str) -> SourceTree:
        tree = self._parser.parse(code, language)
        if tree is None:
            raise UnsupportedLanguageError(language, get_supported_languages())
        return SourceTree(path, language, tree)

    def analyze_source(
        self, code: str, path: str = "<memory>", language: str = "typescript"
    ) -> ScoreResult:
        """Score source text directly, without the parse-error policy."""
        tree = self.parse(code.encode("utf-8", errors="replace"), path, language)
        return self.score_tree(tree)

    def analyze_file(self, path: Path) -> Optional[ScoreResult]:
        """Score one file.

        Returns:
            The file's ScoreResult, or None if the file was skipped (too
            large, or malformed under the "skip" policy)

        Raises:
            FileAccessError: If the file cannot be read
            UnsupportedLanguageError: If the extension has no grammar
            ParsingError: If the file is malformed under the "abort" policy
        """
        language = detect_language(path)
        if language is None:
            raise UnsupportedLanguageError(path.suffix or str(path), get_supported_languages())

        try:
            size = path.stat().st_size
            if size > self.config.max_file_size_bytes:
                logger.warning(f"Skipping {path}: {size} bytes exceeds size limit")
                return None
            code = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, f"Cannot read file: {e}")

        tree = self.parse(code, str(path), language)

        if tree.has_errors:
            line = tree.first_error_line
            where = f" at line {line}" if line is not None else ""
            policy = self.config.on_parse_error
            if policy == "abort":
                raise ParsingError(path, language, f"syntax error{where}", line=line)
            if policy == "skip":
                logger.warning(f"Skipping {path}: syntax error{where}")
                return None
            logger.warning(f"{path}: syntax error{where}; scoring the recovered tree")

        result = self.score_tree(tree)
        logger.debug(f"Scored {path}: {result.score:.2f}")
        return result

    def analyze_path(self, path: Path) -> list[ScoreResult]:
        """Score every TypeScript file under ``path``, in discovery order."""
        results: list[ScoreResult] = []
        for file_path in find_typescript_files(path, self.config):
            result = self.analyze_file(file_path)
            if result is not None:
                results.append(result)
        logger.info(f"Scored {len(results)} file(s) under {path}")
        return results


def analyze(path: Path | str, config: Optional[AnalysisConfig] = None) -> list[ScoreResult]:
    """Score every TypeScript file under a path with default settings."""
    return QualityAnalyzer(config).analyze_path(Path(path))

"""Plain-text formatter for ts-quality."""

from typing import Sequence

from ..models import ScoreResult
from .base import BaseFormatter

NO_SUGGESTIONS = "No suggestions, great job!"


class TextFormatter(BaseFormatter):
    """Human-readable report: score, per-metric percentages, suggestions.

    Each file block starts with a blank line; blocks are separated by one
    more blank line.
    """

    def format(self, results: Sequence[ScoreResult]) -> str:
        return "\n\n".join(self._format_result(r) for r in results)

    def _format_result(self, result: ScoreResult) -> str:
        metric_lines = "\n".join(
            f"{metric.value}: {ratio * 100:.2f}%" for metric, ratio in result.metrics.items()
        )
        if result.suggestions:
            suggestions = "SUGGESTIONS:\n" + "\n".join(result.suggestions)
        else:
            suggestions = NO_SUGGESTIONS
        return (
            f"\nFILE: {result.file}\n\n"
            f"SCORE: {result.score:.2f}/100\n\n"
            f"{metric_lines}\n\n"
            f"{suggestions}"
        )

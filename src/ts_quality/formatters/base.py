"""Base formatter interface for ts-quality output rendering."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import ScoreResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, results: Sequence[ScoreResult]) -> None:
        """Print the formatted report to stdout."""
        print(self.format(results))

    @abstractmethod
    def format(self, results: Sequence[ScoreResult]) -> str:
        """Return formatted string representation of results."""

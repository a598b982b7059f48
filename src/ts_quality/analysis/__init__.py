"""Analysis engine."""

from .engine import QualityAnalyzer, analyze

__all__ = ["QualityAnalyzer", "analyze"]

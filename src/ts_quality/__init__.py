"""
ts-quality - TypeScript best-practice scoring

Parses TypeScript with tree-sitter and rates each file 0-100 across ten
heuristics (any usage, return types, access modifiers, complexity, nesting,
const over let, assertions, readonly properties, var usage, optional
chaining), with a suggestion for every heuristic that is not fully met.
"""

__version__ = "1.0.0"

from .analysis import QualityAnalyzer, analyze
from .metrics import compute_metrics
from .models import Metric, MetricSet, ScoreResult
from .scanning import SourceTree, parse_source
from .scoring import WEIGHTS, calculate_score, generate_suggestions

__all__ = [
    "analyze",  # Main entry point
    "QualityAnalyzer",
    "Metric",
    "MetricSet",
    "ScoreResult",
    "SourceTree",
    "WEIGHTS",
    "calculate_score",
    "compute_metrics",
    "generate_suggestions",
    "parse_source",
]

"""Score aggregation and improvement suggestions.

calculate_score() folds a MetricSet into one 0-100 number using a weight
per metric; generate_suggestions() turns every metric below 1.0 into a
fixed hint. Both tables are keyed by Metric and must cover all of them.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

import numpy as np

from .models import Metric, MetricKey, MetricSet

# Uniform weights; each entry can be changed independently.
WEIGHTS: Mapping[Metric, float] = MappingProxyType({
    Metric.AVOID_ANY: 10.0,
    Metric.RETURN_TYPES: 10.0,
    Metric.ACCESS_MODIFIERS: 10.0,
    Metric.COMPLEXITY: 10.0,
    Metric.NESTING: 10.0,
    Metric.PREFER_CONST: 10.0,
    Metric.AVOID_ASSERTIONS: 10.0,
    Metric.USE_READONLY: 10.0,
    Metric.AVOID_VAR: 10.0,
    Metric.OPTIONAL_CHAINING: 10.0,
})

SUGGESTIONS: Mapping[Metric, str] = MappingProxyType({
    Metric.AVOID_ANY: "Replace `any` with specific types or `unknown`.",
    Metric.RETURN_TYPES: "Add explicit return types to functions.",
    Metric.ACCESS_MODIFIERS: "Add access modifiers (public/private) to class members.",
    Metric.COMPLEXITY: "Simplify functions with high complexity by extracting logic.",
    Metric.NESTING: "Reduce nesting with early returns or function extraction.",
    Metric.PREFER_CONST: "Use `const` instead of `let` for non-reassigned variables.",
    Metric.AVOID_ASSERTIONS: "Replace type assertions with type guards.",
    Metric.USE_READONLY: "Mark immutable properties as `readonly`.",
    Metric.AVOID_VAR: "Replace `var` with `let` or `const`.",
    Metric.OPTIONAL_CHAINING: (
        "Use optional chaining (`?.`) and nullish coalescing (`??`) for null checks."
    ),
})

for _table_name, _table in (("WEIGHTS", WEIGHTS), ("SUGGESTIONS", SUGGESTIONS)):
    _missing = [m.value for m in Metric if m not in _table]
    if _missing:
        raise RuntimeError(f"{_table_name} has no entry for: {', '.join(_missing)}")


def _as_metric(key: MetricKey) -> Optional[Metric]:
    try:
        return Metric(key)
    except ValueError:
        return None


def calculate_score(
    metrics: Mapping[MetricKey, float], weights: Mapping[MetricKey, float] = WEIGHTS
) -> float:
    """Weighted average of metric ratios, as a percentage.

    ``sum(weight[m] * ratio[m]) / sum(weight[m]) * 100``. The numerator runs
    over metrics that have a weight; the denominator over the whole weight
    table, so a weighted metric missing from ``metrics`` counts as 0.
    Metrics without a weight are ignored.

    Args:
        metrics: Ratio per metric (a MetricSet or any mapping keyed by
            Metric or metric name)
        weights: Weight per metric; defaults to WEIGHTS

    Returns:
        Score in [0, 100], unrounded. 0.0 if the total weight is zero.

    Raises:
        ValueError: If a weight is negative
    """
    ratios: dict[Metric, float] = {}
    for key, value in metrics.items():
        metric = _as_metric(key)
        if metric is not None:
            ratios[metric] = float(value)

    weighted: list[tuple[Metric, float]] = []
    for key, weight in weights.items():
        metric = _as_metric(key)
        if metric is None:
            continue
        if weight < 0:
            raise ValueError(f"Weight for {metric.value} must be non-negative, got {weight}")
        weighted.append((metric, float(weight)))

    w = np.array([weight for _, weight in weighted], dtype=float)
    total_weight = float(w.sum()) if w.size else 0.0
    if total_weight <= 0:
        return 0.0

    r = np.array([ratios.get(metric, 0.0) for metric, _ in weighted], dtype=float)
    score = float(np.dot(w, r)) / total_weight * 100
    return min(100.0, max(0.0, score))


def generate_suggestions(metrics: Mapping[MetricKey, float]) -> list[str]:
    """One hint per metric strictly below 1.0, in canonical Metric order.

    A plain mapping may leave metrics out; those get no hint.

    Raises:
        ValueError: If a ratio is outside [0, 1]
    """
    if not isinstance(metrics, MetricSet):
        present = {}
        for key, value in metrics.items():
            metric = _as_metric(key)
            if metric is not None:
                present[metric] = value
        metrics = MetricSet({m: present.get(m, 1.0) for m in Metric})
    return [SUGGESTIONS[m] for m in metrics.below_perfect()]

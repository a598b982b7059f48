"""The ten quality metrics.

Each metric is a pure function ``SourceTree -> float`` returning a ratio in
[0, 1], where 1.0 means fully compliant. METRIC_FUNCTIONS maps every Metric
to its function; compute_metrics runs all of them over one tree.
"""

from __future__ import annotations

from typing import Callable

from ..models import Metric, MetricSet
from ..scanning import SourceTree
from .annotations import avoid_any, avoid_assertions, return_types
from .bindings import avoid_var, prefer_const
from .classes import access_modifiers, use_readonly
from .control_flow import complexity, function_complexity, nesting, nesting_depth
from .null_safety import optional_chaining

MetricFunction = Callable[[SourceTree], float]

METRIC_FUNCTIONS: dict[Metric, MetricFunction] = {
    Metric.AVOID_ANY: avoid_any,
    Metric.RETURN_TYPES: return_types,
    Metric.ACCESS_MODIFIERS: access_modifiers,
    Metric.COMPLEXITY: complexity,
    Metric.NESTING: nesting,
    Metric.PREFER_CONST: prefer_const,
    Metric.AVOID_ASSERTIONS: avoid_assertions,
    Metric.USE_READONLY: use_readonly,
    Metric.AVOID_VAR: avoid_var,
    Metric.OPTIONAL_CHAINING: optional_chaining,
}

_unregistered = [m.value for m in Metric if m not in METRIC_FUNCTIONS]
if _unregistered:
    raise RuntimeError(f"No metric function registered for: {', '.join(_unregistered)}")


def compute_metrics(tree: SourceTree) -> MetricSet:
    """Run every metric over one parsed file."""
    return MetricSet({metric: fn(tree) for metric, fn in METRIC_FUNCTIONS.items()})


__all__ = [
    "METRIC_FUNCTIONS",
    "MetricFunction",
    "access_modifiers",
    "avoid_any",
    "avoid_assertions",
    "avoid_var",
    "complexity",
    "compute_metrics",
    "function_complexity",
    "nesting",
    "nesting_depth",
    "optional_chaining",
    "prefer_const",
    "return_types",
    "use_readonly",
]

"""Data models for ts-quality results."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union


class Metric(str, Enum):
    """The ten quality metrics, in canonical report order.

    The value is the name used in JSON and text output.
    """

    AVOID_ANY = "avoidAny"
    RETURN_TYPES = "returnTypes"
    ACCESS_MODIFIERS = "accessModifiers"
    COMPLEXITY = "complexity"
    NESTING = "nesting"
    PREFER_CONST = "preferConst"
    AVOID_ASSERTIONS = "avoidAssertions"
    USE_READONLY = "useReadonly"
    AVOID_VAR = "avoidVar"
    OPTIONAL_CHAINING = "optionalChaining"


MetricKey = Union[Metric, str]


class MetricSet(Mapping):
    """Immutable mapping of every Metric to its ratio in [0, 1].

    Keys may be given as Metric members or their string names. Iteration
    follows the canonical Metric order regardless of input order.

    Raises:
        ValueError: If a metric is missing, unknown, or outside [0, 1]
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[MetricKey, float]) -> None:
        normalized: dict[Metric, float] = {}
        for key, value in values.items():
            normalized[Metric(key)] = float(value)

        missing = [m.value for m in Metric if m not in normalized]
        if missing:
            raise ValueError(f"MetricSet is missing metrics: {', '.join(missing)}")

        for metric, value in normalized.items():
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{metric.value} must be between 0.0 and 1.0, got {value}")

        self._values = MappingProxyType({m: normalized[m] for m in Metric})

    def __getitem__(self, key: MetricKey) -> float:
        try:
            metric = Metric(key)
        except ValueError:
            raise KeyError(key) from None
        return self._values[metric]

    def __iter__(self) -> Iterator[Metric]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{m.value}={v:.4f}" for m, v in self._values.items())
        return f"MetricSet({inner})"

    def to_dict(self) -> dict[str, float]:
        """Plain ``{name: ratio}`` dict in canonical order."""
        return {m.value: v for m, v in self._values.items()}

    def below_perfect(self) -> list[Metric]:
        """Metrics with a ratio strictly below 1.0, in canonical order."""
        return [m for m, v in self._values.items() if v < 1.0]


@dataclass(frozen=True)
class ScoreResult:
    """Quality result for one analyzed file.

    Attributes:
        file: File identifier (path as discovered)
        score: Weighted aggregate in [0, 100], unrounded
        metrics: The file's MetricSet
        suggestions: Improvement hints, one per metric below 1.0
    """

    file: str
    score: float
    metrics: MetricSet
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.suggestions, tuple):
            object.__setattr__(self, "suggestions", tuple(self.suggestions))

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "score": self.score,
            "metrics": self.metrics.to_dict(),
            "suggestions": list(self.suggestions),
        }

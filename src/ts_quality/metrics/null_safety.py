"""Null-safety metric: `?.` / `??` versus manual `&&` guards."""

from __future__ import annotations

from ..scanning import NodeKind, SourceTree


def optional_chaining(tree: SourceTree) -> float:
    """Share of null-safe operators among all null-check patterns.

    Every ``&&`` expression is treated as a potential manual guard
    (``x && x.y``); the check is syntactic and does not look at operands.
    A file with no null checks of either kind is fully compliant.
    """
    manual_null_checks = sum(
        1
        for expr in tree.descendants_of_kind(NodeKind.BINARY_EXPRESSION)
        if expr.operator == "&&"
    )
    modern_operators = len(tree.descendants_of_kind(NodeKind.QUESTION_DOT_TOKEN)) + len(
        tree.descendants_of_kind(NodeKind.QUESTION_QUESTION_TOKEN)
    )
    total = manual_null_checks + modern_operators
    if total == 0:
        return 1.0
    return modern_operators / total

"""Type-annotation metrics: `any` usage, return types, type assertions."""

from __future__ import annotations

from ..scanning import NodeKind, SourceTree


def avoid_any(tree: SourceTree) -> float:
    """Share of type references that are not `any`.

    The denominator is the number of type-reference nodes (``Foo``,
    ``Array<T>``, ``ns.Bar``). Primitive keywords such as ``string`` are not
    type references, so a file typed only with primitives and `any` falls
    back to the `any` count itself (ratio 0), and a file with neither scores 1.
    """
    any_count = len(tree.descendants_of_kind(NodeKind.ANY_KEYWORD))
    type_ref_count = len(tree.descendants_of_kind(NodeKind.TYPE_REFERENCE))
    if type_ref_count > 0:
        denominator = type_ref_count
    elif any_count > 0:
        denominator = any_count
    else:
        denominator = 1
    return max(0.0, 1 - any_count / denominator)


def return_types(tree: SourceTree) -> float:
    """Share of top-level functions with an explicit return type."""
    functions = tree.functions()
    if not functions:
        return 1.0
    annotated = sum(1 for f in functions if f.return_type is not None)
    return annotated / len(functions)


def avoid_assertions(tree: SourceTree) -> float:
    """Penalize ``<T>value`` assertions and ``value!`` non-null assertions.

    There is no cheap count of "all expressions", so as/call/binary
    expressions stand in for it. ``as`` casts are part of the denominator
    but are not themselves penalized.
    """
    assertions = len(tree.descendants_of_kind(NodeKind.TYPE_ASSERTION)) + len(
        tree.descendants_of_kind(NodeKind.NON_NULL_EXPRESSION)
    )
    total_expressions = (
        len(tree.descendants_of_kind(NodeKind.AS_EXPRESSION))
        + len(tree.descendants_of_kind(NodeKind.CALL_EXPRESSION))
        + len(tree.descendants_of_kind(NodeKind.BINARY_EXPRESSION))
    ) or 1
    return max(0.0, 1 - assertions / total_expressions)

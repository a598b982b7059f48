"""Variable binding metrics: const over let, no var."""

from __future__ import annotations

from ..scanning import NodeKind, SourceTree

_BLOCK_SCOPED = ("const", "let")


def prefer_const(tree: SourceTree) -> float:
    """Share of ``const`` among ``const`` + ``let`` declarations."""
    consts = 0
    lets = 0
    for declaration in tree.descendants_of_kind(NodeKind.VARIABLE_DECLARATION):
        binding = declaration.binding
        if binding == "const":
            consts += 1
        elif binding == "let":
            lets += 1
    total = consts + lets
    return 1.0 if total == 0 else consts / total


def avoid_var(tree: SourceTree) -> float:
    """0 if any declaration is neither const nor let, else 1."""
    for declaration in tree.descendants_of_kind(NodeKind.VARIABLE_DECLARATION):
        if declaration.binding not in _BLOCK_SCOPED:
            return 0.0
    return 1.0

"""Class metrics: access modifiers and readonly properties."""

from __future__ import annotations

from ..scanning import NodeKind, SourceTree


def access_modifiers(tree: SourceTree) -> float:
    """Share of members of top-level classes that carry at least one modifier.

    Members that cannot have modifiers (static blocks) count toward the
    total but never as modified.
    """
    classes = tree.classes()
    if not classes:
        return 1.0
    members = 0
    with_modifiers = 0
    for cls in classes:
        for member in cls.members:
            members += 1
            if member.has_modifiers and member.modifiers:
                with_modifiers += 1
    return 1.0 if members == 0 else with_modifiers / members


def use_readonly(tree: SourceTree) -> float:
    properties = tree.descendants_of_kind(NodeKind.PROPERTY_DECLARATION)
    if not properties:
        return 1.0
    readonly_count = sum(1 for p in properties if p.is_readonly)
    return readonly_count / len(properties)

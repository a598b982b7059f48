"""Control-flow metrics: cyclomatic complexity and nesting depth.

Both metrics look at top-level function declarations and walk each
function's full subtree, so constructs inside nested functions and
callbacks are charged to the enclosing declaration as well.
"""

from __future__ import annotations

from ..scanning import NodeKind, SourceTree, SyntaxNode

# Constructs that open a nested block of control flow
NESTING_KINDS = frozenset(
    {
        NodeKind.IF_STATEMENT,
        NodeKind.SWITCH_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.FOR_IN_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.DO_STATEMENT,
    }
)

BRANCH_KINDS = NESTING_KINDS | {
    NodeKind.TRY_STATEMENT,
    NodeKind.CATCH_CLAUSE,
    NodeKind.CONDITIONAL_EXPRESSION,
}

SHORT_CIRCUIT_OPERATORS = frozenset({"&&", "||"})

# Average complexity at which the ratio reaches 0
COMPLEXITY_CEILING = 6
# Nesting depth at which the ratio reaches 0
NESTING_CEILING = 4


def function_complexity(function: SyntaxNode) -> int:
    """Cyclomatic complexity of one function: 1 + branches + `&&`/`||`."""
    complexity = 1
    for node in function.walk():
        if node.kind in BRANCH_KINDS:
            complexity += 1
        elif node.kind is NodeKind.BINARY_EXPRESSION and node.operator in SHORT_CIRCUIT_OPERATORS:
            complexity += 1
    return complexity


def nesting_depth(function: SyntaxNode) -> int:
    """Deepest stack of nested branching/looping constructs in a function.

    Depth only grows when descending into a NESTING_KINDS node. An
    ``else if`` is an if statement inside the else branch, so it nests one
    level deeper than its parent ``if``.
    """
    max_depth = 0
    stack: list[tuple[SyntaxNode, int]] = [(function, 0)]
    while stack:
        node, depth = stack.pop()
        for child in node.children:
            child_depth = depth + 1 if child.kind in NESTING_KINDS else depth
            if child_depth > max_depth:
                max_depth = child_depth
            stack.append((child, child_depth))
    return max_depth


def complexity(tree: SourceTree) -> float:
    """Map average function complexity onto [0, 1].

    This is a fixed linear decay, not a statistical normalization:
    complexity 1 gives 1.0, each extra decision point costs 0.2, and
    anything at or above COMPLEXITY_CEILING gives 0.0.
    """
    functions = tree.functions()
    if not functions:
        return 1.0
    total = sum(function_complexity(f) for f in functions)
    average = total / len(functions)
    return max(0.0, 1 - (average - 1) / (COMPLEXITY_CEILING - 1))


def nesting(tree: SourceTree) -> float:
    """Map the deepest nesting across all functions onto [0, 1]."""
    functions = tree.functions()
    if not functions:
        return 1.0
    deepest = max(nesting_depth(f) for f in functions)
    return max(0.0, 1 - deepest / NESTING_CEILING)

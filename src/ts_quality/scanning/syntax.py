"""Syntax models for parsed TypeScript files.

SyntaxNode wraps a tree-sitter node and gives it a NodeKind tag that follows
the TypeScript compiler's vocabulary (TypeReference, BinaryExpression, ...)
rather than the grammar's raw node types. Kind-specific data is exposed
through capability properties that are defined on every node and simply
return an empty value when the node cannot carry that data:

    node.has_modifiers / node.modifiers      class members
    node.has_operator / node.operator        binary expressions
    node.return_type                         function declarations
    node.is_readonly                         property declarations
    node.binding                             variable declarations
    node.members                             class declarations

SourceTree is one parsed file. It indexes the whole tree by kind once, so
metrics can ask for "all call expressions" without re-walking.
"""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Any, Iterator


class NodeKind(str, Enum):
    """Node kinds the quality metrics care about."""

    ANY_KEYWORD = "any_keyword"
    TYPE_REFERENCE = "type_reference"
    FUNCTION_DECLARATION = "function_declaration"
    CLASS_DECLARATION = "class_declaration"
    PROPERTY_DECLARATION = "property_declaration"
    VARIABLE_DECLARATION = "variable_declaration"
    IF_STATEMENT = "if_statement"
    SWITCH_STATEMENT = "switch_statement"
    FOR_STATEMENT = "for_statement"
    FOR_IN_STATEMENT = "for_in_statement"  # covers for...of as well
    WHILE_STATEMENT = "while_statement"
    DO_STATEMENT = "do_statement"
    TRY_STATEMENT = "try_statement"
    CATCH_CLAUSE = "catch_clause"
    CONDITIONAL_EXPRESSION = "conditional_expression"
    BINARY_EXPRESSION = "binary_expression"
    AS_EXPRESSION = "as_expression"
    CALL_EXPRESSION = "call_expression"
    TYPE_ASSERTION = "type_assertion"
    NON_NULL_EXPRESSION = "non_null_expression"
    QUESTION_DOT_TOKEN = "question_dot_token"
    QUESTION_QUESTION_TOKEN = "question_question_token"
    OTHER = "other"


# Grammar node types that map onto a kind without looking at context
_TYPE_KINDS: dict[str, NodeKind] = {
    "function_declaration": NodeKind.FUNCTION_DECLARATION,
    "generator_function_declaration": NodeKind.FUNCTION_DECLARATION,
    # Overloads and `declare function` have no body
    "function_signature": NodeKind.FUNCTION_DECLARATION,
    "class_declaration": NodeKind.CLASS_DECLARATION,
    "abstract_class_declaration": NodeKind.CLASS_DECLARATION,
    "public_field_definition": NodeKind.PROPERTY_DECLARATION,
    "variable_declarator": NodeKind.VARIABLE_DECLARATION,
    "if_statement": NodeKind.IF_STATEMENT,
    "switch_statement": NodeKind.SWITCH_STATEMENT,
    "for_statement": NodeKind.FOR_STATEMENT,
    "for_in_statement": NodeKind.FOR_IN_STATEMENT,
    "while_statement": NodeKind.WHILE_STATEMENT,
    "do_statement": NodeKind.DO_STATEMENT,
    "try_statement": NodeKind.TRY_STATEMENT,
    "catch_clause": NodeKind.CATCH_CLAUSE,
    "ternary_expression": NodeKind.CONDITIONAL_EXPRESSION,
    # Assignments are binary expressions in the TypeScript compiler's tree
    "binary_expression": NodeKind.BINARY_EXPRESSION,
    "assignment_expression": NodeKind.BINARY_EXPRESSION,
    "augmented_assignment_expression": NodeKind.BINARY_EXPRESSION,
    "as_expression": NodeKind.AS_EXPRESSION,
    "call_expression": NodeKind.CALL_EXPRESSION,
    "type_assertion": NodeKind.TYPE_ASSERTION,
    "non_null_expression": NodeKind.NON_NULL_EXPRESSION,
    # Member access wraps `?.` in an optional_chain node; optional calls do not
    "?.": NodeKind.QUESTION_DOT_TOKEN,
    "??": NodeKind.QUESTION_QUESTION_TOKEN,
}

_TYPE_REFERENCE_TYPES = frozenset({"type_identifier", "generic_type", "nested_type_identifier"})

# Parents whose `name` field declares a type instead of referring to one
_DECLARING_PARENTS = frozenset(
    {
        "class_declaration",
        "abstract_class_declaration",
        "class",
        "interface_declaration",
        "type_alias_declaration",
        "type_parameter",
        "mapped_type_clause",
    }
)

# Parents under which a type name is part of something else: the name of a
# generic/qualified type, a heritage clause, or an `infer` binding
_NON_REFERENCE_PARENTS = frozenset(
    {
        "generic_type",
        "nested_type_identifier",
        "implements_clause",
        "extends_type_clause",
        "infer_type",
    }
)

# Class member node types that can carry modifiers. Static blocks, decorators
# and comments cannot.
_MODIFIABLE_MEMBERS = frozenset(
    {
        "method_definition",
        "method_signature",
        "abstract_method_signature",
        "public_field_definition",
        "index_signature",
    }
)

_KEYWORD_MODIFIERS = frozenset({"static", "readonly", "abstract", "async", "declare", "accessor"})

_NON_MEMBER_TYPES = frozenset({"decorator", "comment"})

_LOOP_BINDING_TYPES = frozenset({"identifier", "object_pattern", "array_pattern"})

# `export default function () {}` and `export default class {}` are parsed as
# expressions but declare the module's default function or class
_DEFAULT_EXPORT_KINDS: dict[str, NodeKind] = {
    "function_expression": NodeKind.FUNCTION_DECLARATION,
    "function": NodeKind.FUNCTION_DECLARATION,
    "generator_function": NodeKind.FUNCTION_DECLARATION,
    "class": NodeKind.CLASS_DECLARATION,
}


def _same_node(a: Any, b: Any) -> bool:
    return a is not None and b is not None and (a.start_byte, a.end_byte, a.type) == (
        b.start_byte,
        b.end_byte,
        b.type,
    )


def _field_type(node: Any, field_name: str) -> str | None:
    child = node.child_by_field_name(field_name)
    return child.type if child is not None else None


def _classify(node: Any) -> NodeKind:
    """Map a raw tree-sitter node onto a NodeKind."""
    node_type = node.type

    kind = _TYPE_KINDS.get(node_type)
    if kind is not None:
        return kind

    if node_type == "predefined_type":
        return NodeKind.ANY_KEYWORD if node.text == b"any" else NodeKind.OTHER

    if node_type in _DEFAULT_EXPORT_KINDS and node.is_named:
        parent = node.parent
        if parent is not None and parent.type == "export_statement":
            return _DEFAULT_EXPORT_KINDS[node_type]
        return NodeKind.OTHER

    if node_type in _TYPE_REFERENCE_TYPES:
        parent = node.parent
        if parent is None:
            return NodeKind.TYPE_REFERENCE
        if parent.type in _NON_REFERENCE_PARENTS:
            return NodeKind.OTHER
        if parent.type in _DECLARING_PARENTS and _same_node(
            parent.child_by_field_name("name"), node
        ):
            return NodeKind.OTHER
        return NodeKind.TYPE_REFERENCE

    # `for (const x of xs)` declares x without a variable_declarator node
    if node_type in _LOOP_BINDING_TYPES:
        parent = node.parent
        if (
            parent is not None
            and parent.type == "for_in_statement"
            and parent.child_by_field_name("kind") is not None
            and _same_node(parent.child_by_field_name("left"), node)
        ):
            return NodeKind.VARIABLE_DECLARATION

    return NodeKind.OTHER


class SyntaxNode:
    """Read-only view of one tree-sitter node."""

    __slots__ = ("_node", "_parent", "kind")

    def __init__(self, node: Any, parent: SyntaxNode | None = None) -> None:
        self._node = node
        self._parent = parent
        self.kind = _classify(node)

    def __repr__(self) -> str:
        row, col = self._node.start_point
        return f"SyntaxNode({self.kind.value}, {self.type!r}, {row + 1}:{col + 1})"

    @property
    def type(self) -> str:
        """Raw grammar node type."""
        return self._node.type

    @property
    def text(self) -> str:
        raw = self._node.text
        return raw.decode("utf-8", errors="replace") if raw else ""

    @property
    def line(self) -> int:
        return self._node.start_point[0] + 1

    @property
    def is_error(self) -> bool:
        """True for ERROR and MISSING nodes left by error recovery."""
        return bool(self._node.is_error or self._node.is_missing)

    @property
    def parent(self) -> SyntaxNode | None:
        if self._parent is None and self._node.parent is not None:
            self._parent = SyntaxNode(self._node.parent)
        return self._parent

    @property
    def children(self) -> list[SyntaxNode]:
        return [SyntaxNode(child, self) for child in self._node.children]

    def field(self, name: str) -> SyntaxNode | None:
        """Child stored under a grammar field, if any."""
        child = self._node.child_by_field_name(name)
        return SyntaxNode(child, self) if child is not None else None

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield every descendant in document order (this node excluded)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def descendants_of_kind(self, kind: NodeKind) -> list[SyntaxNode]:
        return [node for node in self.walk() if node.kind is kind]

    # -- capabilities -------------------------------------------------------

    @property
    def has_operator(self) -> bool:
        return self.kind is NodeKind.BINARY_EXPRESSION

    @property
    def operator(self) -> str | None:
        """Operator token of a binary expression (``=`` for plain assignments)."""
        if not self.has_operator:
            return None
        op_type = _field_type(self._node, "operator")
        if op_type is not None:
            return op_type
        if self.type == "assignment_expression":
            return "="
        return None

    @property
    def has_modifiers(self) -> bool:
        return self.type in _MODIFIABLE_MEMBERS

    @property
    def modifiers(self) -> tuple[str, ...]:
        """Modifier keywords on a class member, in source order."""
        if not self.has_modifiers:
            return ()
        found: list[str] = []
        for child in self._node.children:
            if child.type == "accessibility_modifier":
                found.append(child.text.decode("utf-8", errors="replace"))
            elif child.type == "override_modifier":
                found.append("override")
            elif child.type in _KEYWORD_MODIFIERS:
                found.append(child.type)
        return tuple(found)

    @property
    def return_type(self) -> SyntaxNode | None:
        """Return-type annotation of a function declaration."""
        if self.kind is not NodeKind.FUNCTION_DECLARATION:
            return None
        return self.field("return_type")

    @property
    def is_readonly(self) -> bool:
        return self.kind is NodeKind.PROPERTY_DECLARATION and "readonly" in self.modifiers

    @property
    def binding(self) -> str | None:
        """Declaration keyword (``const``, ``let``, ``var``) of a variable declaration."""
        if self.kind is not NodeKind.VARIABLE_DECLARATION:
            return None
        parent = self._node.parent
        if parent is None:
            return None
        if parent.type == "variable_declaration":
            return "var"
        if parent.type in ("lexical_declaration", "for_in_statement"):
            keyword = parent.child_by_field_name("kind")
            if keyword is None and parent.type == "lexical_declaration":
                keyword = parent.children[0] if parent.children else None
            return keyword.type if keyword is not None else None
        return None

    @property
    def members(self) -> list[SyntaxNode]:
        """Members of a class declaration."""
        if self.kind is not NodeKind.CLASS_DECLARATION:
            return []
        body = self.field("body")
        if body is None:
            return []
        return [
            child
            for child in body.children
            if child._node.is_named and child.type not in _NON_MEMBER_TYPES
        ]


def _unwrap_statement(node: SyntaxNode) -> SyntaxNode:
    """The declaration inside ``export`` / ``declare`` wrappers, or the node itself."""
    while True:
        if node.type == "export_statement":
            inner = node.field("declaration") or node.field("value")
        elif node.type == "ambient_declaration":
            inner = next((c for c in node.children if c._node.is_named), None)
        else:
            return node
        if inner is None:
            return node
        node = inner


class SourceTree:
    """One parsed TypeScript file.

    Attributes:
        path: File identifier used in reports
        language: Grammar name the file was parsed with
        root: Root SyntaxNode (the ``program`` node)
        has_errors: True if tree-sitter had to recover from syntax errors
    """

    def __init__(self, path: str, language: str, tree: Any) -> None:
        self.path = path
        self.language = language
        self.root = SyntaxNode(tree.root_node)
        self.has_errors = bool(tree.root_node.has_error)
        self._tree = tree
        self._index: dict[NodeKind, list[SyntaxNode]] | None = None

    def __repr__(self) -> str:
        return f"SourceTree({self.path!r}, language={self.language!r})"

    def _build_index(self) -> dict[NodeKind, list[SyntaxNode]]:
        index: dict[NodeKind, list[SyntaxNode]] = defaultdict(list)
        for node in self.root.walk():
            if node.kind is not NodeKind.OTHER:
                index[node.kind].append(node)
        return index

    @property
    def first_error_line(self) -> int | None:
        """1-based line of the first syntax error, None for a clean parse."""
        if not self.has_errors:
            return None
        for node in self.root.walk():
            if node.is_error:
                return node.line
        return None

    def descendants_of_kind(self, kind: NodeKind) -> list[SyntaxNode]:
        """All nodes of a kind, in document order."""
        if self._index is None:
            self._index = self._build_index()
        return list(self._index.get(kind, ()))

    def _statements(self) -> Iterator[SyntaxNode]:
        """Top-level statements, looking through ``export`` and ``declare`` wrappers."""
        for child in self.root.children:
            yield _unwrap_statement(child)

    def functions(self) -> list[SyntaxNode]:
        """Top-level function declarations, default exports and `declare`d functions."""
        return [s for s in self._statements() if s.kind is NodeKind.FUNCTION_DECLARATION]

    def classes(self) -> list[SyntaxNode]:
        """Top-level class declarations, default exports and `declare`d classes."""
        return [s for s in self._statements() if s.kind is NodeKind.CLASS_DECLARATION]

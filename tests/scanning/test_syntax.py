"""Tests for the SyntaxNode / SourceTree adapter."""

from ts_quality.scanning import NodeKind


def _texts(nodes):
    return [n.text for n in nodes]


class TestTypeKinds:
    """`any` and type-reference classification."""

    def test_any_keyword(self, parse):
        tree = parse("let a: any; let b: string; let c: number[];")
        assert len(tree.descendants_of_kind(NodeKind.ANY_KEYWORD)) == 1

    def test_primitives_are_not_type_references(self, parse):
        tree = parse("let a: string; let b: number; let c: boolean;")
        assert tree.descendants_of_kind(NodeKind.TYPE_REFERENCE) == []

    def test_type_references(self, parse):
        tree = parse("let a: Foo; let b: Array<string>; let c: ns.Bar;")
        refs = tree.descendants_of_kind(NodeKind.TYPE_REFERENCE)
        assert _texts(refs) == ["Foo", "Array<string>", "ns.Bar"]

    def test_declared_names_are_not_references(self, parse):
        tree = parse(
            """
            interface Shape { area: number }
            class Square implements Shape { area = 1; }
            type Alias = string;
            """
        )
        assert tree.descendants_of_kind(NodeKind.TYPE_REFERENCE) == []

    def test_type_parameter_name_is_not_a_reference(self, parse):
        tree = parse("function id<T>(x: T): T { return x; }")
        assert _texts(tree.descendants_of_kind(NodeKind.TYPE_REFERENCE)) == ["T", "T"]


class TestExpressionKinds:
    def test_binary_operators(self, parse):
        tree = parse("a && b; c || d; e ?? f; x = 1; y += 2; z &&= w;")
        binaries = tree.descendants_of_kind(NodeKind.BINARY_EXPRESSION)
        assert [b.operator for b in binaries] == ["&&", "||", "??", "=", "+=", "&&="]

    def test_nullish_coalescing_token(self, parse):
        tree = parse("const v = a ?? b ?? c;")
        assert len(tree.descendants_of_kind(NodeKind.QUESTION_QUESTION_TOKEN)) == 2

    def test_optional_chain_tokens(self, parse):
        tree = parse("a?.b; c?.d?.e; f?.(); g?.<string>();")
        assert len(tree.descendants_of_kind(NodeKind.QUESTION_DOT_TOKEN)) == 5

    def test_ternary_is_not_an_optional_chain(self, parse):
        tree = parse("const v = a ? b : c;")
        assert tree.descendants_of_kind(NodeKind.QUESTION_DOT_TOKEN) == []

    def test_assertion_kinds(self, parse):
        tree = parse("const a = <Foo>b; const c = d!; const e = f as Bar; g();")
        assert len(tree.descendants_of_kind(NodeKind.TYPE_ASSERTION)) == 1
        assert len(tree.descendants_of_kind(NodeKind.NON_NULL_EXPRESSION)) == 1
        assert len(tree.descendants_of_kind(NodeKind.AS_EXPRESSION)) == 1
        assert len(tree.descendants_of_kind(NodeKind.CALL_EXPRESSION)) == 1

    def test_for_of_and_for_in_share_a_kind(self, parse):
        tree = parse("for (const x of xs) {} for (const k in o) {}")
        assert len(tree.descendants_of_kind(NodeKind.FOR_IN_STATEMENT)) == 2


class TestDeclarations:
    def test_bindings_in_document_order(self, parse):
        tree = parse(
            """
            const a = 1;
            let b = 2;
            var c = 3;
            for (const x of xs) {}
            for (let i = 0; i < 1; i++) {}
            """
        )
        declarations = tree.descendants_of_kind(NodeKind.VARIABLE_DECLARATION)
        assert [d.binding for d in declarations] == ["const", "let", "var", "const", "let"]

    def test_plain_for_in_target_is_not_a_declaration(self, parse):
        tree = parse("let k; for (k in o) {}")
        declarations = tree.descendants_of_kind(NodeKind.VARIABLE_DECLARATION)
        assert [d.binding for d in declarations] == ["let"]

    def test_functions_are_top_level_declarations(self, parse):
        tree = parse(
            """
            function a() {}
            export function b() {}
            const c = () => {};
            class K { m() {} }
            function outer() { function inner() {} }
            """
        )
        assert [f.field("name").text for f in tree.functions()] == ["a", "b", "outer"]

    def test_classes_are_top_level_declarations(self, parse):
        tree = parse(
            """
            class A {}
            export class B {}
            abstract class C {}
            const D = class {};
            function f() { class E {} }
            """
        )
        assert [c.field("name").text for c in tree.classes()] == ["A", "B", "C"]

    def test_default_exports(self, parse):
        tree = parse(
            """
            export default function () {}
            const g = function () {};
            """
        )
        (function,) = tree.functions()
        assert function.kind is NodeKind.FUNCTION_DECLARATION
        assert function.return_type is None

    def test_default_exported_class(self, parse):
        (cls,) = parse("export default class { x = 1; }").classes()
        assert len(cls.members) == 1

    def test_ambient_declarations(self, parse):
        tree = parse(
            """
            declare function f(): void;
            declare class K { x: number; }
            export declare function g(a: string): number;
            """
        )
        functions = tree.functions()
        assert [f.field("name").text for f in functions] == ["f", "g"]
        assert all(f.return_type is not None for f in functions)
        assert [c.field("name").text for c in tree.classes()] == ["K"]

    def test_return_type(self, parse):
        tree = parse("function f(): number { return 1; } function g() {}")
        f, g = tree.functions()
        assert f.return_type is not None
        assert f.return_type.text == ": number"
        assert g.return_type is None


class TestClassMembers:
    SOURCE = """
        class A {
          private x = 1;
          static readonly y = 2;
          z = 3;
          constructor() {}
          protected async run(): Promise<void> {}
        }
        """

    def test_members_exclude_punctuation(self, parse):
        (cls,) = parse(self.SOURCE).classes()
        assert len(cls.members) == 5

    def test_modifiers(self, parse):
        (cls,) = parse(self.SOURCE).classes()
        assert [m.modifiers for m in cls.members] == [
            ("private",),
            ("static", "readonly"),
            (),
            (),
            ("protected", "async"),
        ]

    def test_readonly_properties(self, parse):
        tree = parse(self.SOURCE)
        properties = tree.descendants_of_kind(NodeKind.PROPERTY_DECLARATION)
        assert [p.is_readonly for p in properties] == [False, True, False]


class TestCapabilities:
    """Capability queries are safe on every node."""

    def test_non_applicable_node(self, parse):
        tree = parse("foo;")
        identifier = next(n for n in tree.root.walk() if n.type == "identifier")
        assert identifier.kind is NodeKind.OTHER
        assert identifier.has_modifiers is False
        assert identifier.modifiers == ()
        assert identifier.has_operator is False
        assert identifier.operator is None
        assert identifier.return_type is None
        assert identifier.is_readonly is False
        assert identifier.binding is None
        assert identifier.members == []

    def test_parent_navigation(self, parse):
        tree = parse("a && b;")
        (binary,) = tree.descendants_of_kind(NodeKind.BINARY_EXPRESSION)
        assert binary.parent.type == "expression_statement"
        assert binary.parent.parent.type == "program"
        assert all(child.parent is binary for child in binary.children)

    def test_walk_handles_deep_nesting(self, parse):
        depth = 500
        tree = parse("let x = " + "(" * depth + "1" + ")" * depth + ";")
        nodes = list(tree.root.walk())
        assert sum(1 for n in nodes if n.type == "parenthesized_expression") == depth

    def test_has_errors(self, parse):
        assert parse("function f( {").has_errors
        assert not parse("function f() {}").has_errors

    def test_first_error_line(self, parse):
        assert parse("const a = 1;\nconst b = 2;\nlet x = ;\n").first_error_line == 3
        assert parse("const a = 1;").first_error_line is None

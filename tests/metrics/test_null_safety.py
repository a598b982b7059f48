"""Tests for optionalChaining."""

import pytest

from ts_quality.metrics import optional_chaining


class TestOptionalChaining:
    def test_no_null_checks(self, parse):
        assert optional_chaining(parse("x = 1;")) == 1.0

    def test_modern_operators_only(self, parse):
        assert optional_chaining(parse("const v = a?.b ?? c;")) == 1.0

    def test_mixed(self, parse):
        tree = parse("a && a.b; c?.d; e ?? f;")
        assert optional_chaining(tree) == pytest.approx(2 / 3)

    def test_manual_guards_only(self, parse):
        """Chained `&&` counts once per binary expression."""
        assert optional_chaining(parse("a && b && c;")) == 0.0

    def test_logical_assignment_is_not_a_guard(self, parse):
        assert optional_chaining(parse("z &&= w;")) == 1.0

    def test_optional_calls_count(self, parse):
        """`f?.()` has no optional_chain wrapper but is still null-safe."""
        assert optional_chaining(parse("a?.() && x;")) == pytest.approx(0.5)

    def test_generic_optional_call(self, parse):
        assert optional_chaining(parse("f?.<string>() && g;")) == pytest.approx(0.5)

"""Tests for expression tree nodes, rendering and loading."""

import pytest
import yaml

from reckon.expressions import (
    Add,
    Apply,
    ApplyMultiply,
    Call,
    Convert,
    Factorial,
    Identifier,
    Literal,
    Multiply,
    Negate,
    Parens,
    Power,
    Reciprocal,
    Subtract,
    TreeError,
    UnaryPlus,
    format_tree,
    node_from_data,
)


class TestFormatTree:
    def test_binary_operators(self):
        tree = Add(Literal("2"), Multiply(Literal("3"), Identifier("x")))
        assert format_tree(tree) == "(2+(3*x))"
        assert format_tree(Power(Identifier("a"), Subtract(Literal("1"), Literal("2")))) == "(a^(1-2))"

    def test_unary_operators(self):
        assert format_tree(Negate(Identifier("x"))) == "(-x)"
        assert format_tree(UnaryPlus(Identifier("x"))) == "(+x)"
        assert format_tree(Reciprocal(Identifier("x"))) == "(/x)"
        assert format_tree(Factorial(Literal("5"))) == "5!"
        assert format_tree(Parens(Literal("5"))) == "(5)"

    def test_application_and_conversion(self):
        assert format_tree(Apply(Identifier("f"), Identifier("x"))) == "(f (x))"
        assert format_tree(Call(Identifier("f"), Identifier("x"))) == "(f x)"
        assert format_tree(ApplyMultiply(Literal("2"), Identifier("x"))) == "(2 x)"
        assert format_tree(Convert(Literal("255"), Identifier("hex"))) == "(255 as hex)"

    def test_str_uses_format_tree(self):
        assert str(Add(Literal("1"), Literal("2"))) == "(1+2)"


class TestNodes:
    def test_nodes_are_immutable(self):
        node = Literal("1")
        with pytest.raises(AttributeError):
            node.text = "2"

    def test_node_kinds_are_distinct(self):
        assert Apply(Literal("1"), Literal("2")) != ApplyMultiply(Literal("1"), Literal("2"))
        assert Add(Literal("1"), Literal("2")) == Add(Literal("1"), Literal("2"))


class TestNodeFromData:
    def test_scalars(self):
        assert node_from_data(42) == Literal("42")
        assert node_from_data(2.5) == Literal("2.5")
        assert node_from_data("pi") == Identifier("pi")

    def test_explicit_leaves(self):
        assert node_from_data({"num": "3.141592653589793238"}) == Literal("3.141592653589793238")
        assert node_from_data({"ident": "approx."}) == Identifier("approx.")

    def test_nested(self):
        data = {"add": [2, {"mul": [3, "x"]}]}
        assert node_from_data(data) == Add(Literal("2"), Multiply(Literal("3"), Identifier("x")))

    def test_unary(self):
        assert node_from_data({"neg": "x"}) == Negate(Identifier("x"))
        assert node_from_data({"factorial": 5}) == Factorial(Literal("5"))

    def test_from_yaml(self):
        data = yaml.safe_load("as: [255, hex]")
        assert node_from_data(data) == Convert(Literal("255"), Identifier("hex"))

    def test_application_tags(self):
        assert node_from_data({"call": ["sqrt", 9]}) == Call(Identifier("sqrt"), Literal("9"))
        assert node_from_data({"apply_mul": [2, "x"]}) == ApplyMultiply(
            Literal("2"), Identifier("x")
        )

    @pytest.mark.parametrize(
        "data",
        [
            True,
            None,
            [1, 2],
            {"add": [1]},
            {"add": 1},
            {"frobnicate": 1},
            {"add": [1, 2], "sub": [1, 2]},
        ],
    )
    def test_malformed(self, data):
        with pytest.raises(TreeError):
            node_from_data(data)

"""Expression tree node types.

Trees are produced by an external parser (or by node_from_data from plain
YAML/JSON data) and are immutable. Every node owns its children.

Application nodes come in three flavours, chosen by whoever builds the tree:
- Apply: call the left side if it is a function, otherwise multiply
- Call: the left side must be a function
- ApplyMultiply: always multiply
"""

from dataclasses import dataclass
from typing import Any


class TreeError(Exception):
    """Malformed expression tree data."""


# -----------------------------------------------------------------------------
# AST Node Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ASTNode:
    """Base class for AST nodes."""

    def __str__(self) -> str:
        return format_tree(self)


@dataclass(frozen=True)
class Literal(ASTNode):
    """A numeric literal, kept as its source text (e.g. "3.14")."""
    text: str


@dataclass(frozen=True)
class Identifier(ASTNode):
    """A builtin name or a scope binding."""
    name: str


@dataclass(frozen=True)
class UnaryNode(ASTNode):
    operand: ASTNode


@dataclass(frozen=True)
class Parens(UnaryNode):
    """Parenthesized expression."""


@dataclass(frozen=True)
class Negate(UnaryNode):
    """Unary minus (-x)."""


@dataclass(frozen=True)
class UnaryPlus(UnaryNode):
    """Unary plus (+x); only asserts that x is a number."""


@dataclass(frozen=True)
class Reciprocal(UnaryNode):
    """The 1/x shorthand (/x)."""


@dataclass(frozen=True)
class Factorial(UnaryNode):
    """Postfix factorial (x!)."""


@dataclass(frozen=True)
class BinaryNode(ASTNode):
    left: ASTNode
    right: ASTNode


@dataclass(frozen=True)
class Add(BinaryNode):
    pass


@dataclass(frozen=True)
class Subtract(BinaryNode):
    pass


@dataclass(frozen=True)
class Multiply(BinaryNode):
    pass


@dataclass(frozen=True)
class Divide(BinaryNode):
    pass


@dataclass(frozen=True)
class Power(BinaryNode):
    pass


@dataclass(frozen=True)
class Apply(BinaryNode):
    """Juxtaposition: function call if left is a function, else multiplication."""


@dataclass(frozen=True)
class Call(BinaryNode):
    """Juxtaposition that must be a function call."""


@dataclass(frozen=True)
class ApplyMultiply(BinaryNode):
    """Juxtaposition that is always a multiplication."""


@dataclass(frozen=True)
class Convert(BinaryNode):
    """Conversion (left as right); right decides what kind of conversion."""


# -----------------------------------------------------------------------------
# Debug rendering
# -----------------------------------------------------------------------------

_BINARY_SYMBOLS: dict[type, str] = {
    Add: "+",
    Subtract: "-",
    Multiply: "*",
    Divide: "/",
    Power: "^",
}


def format_tree(node: ASTNode) -> str:
    """Render a tree in a compact, fully parenthesized debug form."""
    if isinstance(node, Literal):
        return node.text
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, Parens):
        return f"({format_tree(node.operand)})"
    if isinstance(node, Negate):
        return f"(-{format_tree(node.operand)})"
    if isinstance(node, UnaryPlus):
        return f"(+{format_tree(node.operand)})"
    if isinstance(node, Reciprocal):
        return f"(/{format_tree(node.operand)})"
    if isinstance(node, Factorial):
        return f"{format_tree(node.operand)}!"
    if isinstance(node, Apply):
        return f"({format_tree(node.left)} ({format_tree(node.right)}))"
    if isinstance(node, (Call, ApplyMultiply)):
        return f"({format_tree(node.left)} {format_tree(node.right)})"
    if isinstance(node, Convert):
        return f"({format_tree(node.left)} as {format_tree(node.right)})"
    if isinstance(node, BinaryNode):
        symbol = _BINARY_SYMBOLS[type(node)]
        return f"({format_tree(node.left)}{symbol}{format_tree(node.right)})"
    raise TreeError(f"Unknown node type: {type(node).__name__}")


# -----------------------------------------------------------------------------
# Loading from plain data
# -----------------------------------------------------------------------------

UNARY_TAGS: dict[str, type[UnaryNode]] = {
    "parens": Parens,
    "neg": Negate,
    "plus": UnaryPlus,
    "recip": Reciprocal,
    "factorial": Factorial,
}

BINARY_TAGS: dict[str, type[BinaryNode]] = {
    "add": Add,
    "sub": Subtract,
    "mul": Multiply,
    "div": Divide,
    "pow": Power,
    "apply": Apply,
    "call": Call,
    "apply_mul": ApplyMultiply,
    "as": Convert,
}


def node_from_data(data: Any) -> ASTNode:
    """Build a tree from YAML/JSON-style data.

    Scalars: numbers become literals, strings become identifiers.
    Mappings have exactly one key naming the node kind:

        {"add": [2, {"mul": [3, "x"]}]}
        {"as": [255, "hex"]}
        {"num": "3.141592653589793238"}
        {"neg": "x"}
    """
    if isinstance(data, bool):
        raise TreeError(f"Booleans are not expressions: {data!r}")
    if isinstance(data, (int, float)):
        return Literal(repr(data) if isinstance(data, float) else str(data))
    if isinstance(data, str):
        return Identifier(data)
    if not isinstance(data, dict) or len(data) != 1:
        raise TreeError(f"Expected a number, a name or a single-key mapping, got {data!r}")

    ((tag, body),) = data.items()

    if tag == "num":
        return Literal(str(body))
    if tag == "ident":
        return Identifier(str(body))
    if tag in UNARY_TAGS:
        return UNARY_TAGS[tag](node_from_data(body))
    if tag in BINARY_TAGS:
        if not isinstance(body, list) or len(body) != 2:
            raise TreeError(f"'{tag}' expects a list of two operands, got {body!r}")
        return BINARY_TAGS[tag](node_from_data(body[0]), node_from_data(body[1]))

    raise TreeError(f"Unknown node kind '{tag}'")

"""Calculator expression evaluation.

This module provides:
- Expression tree node types (produced by an external parser or node_from_data)
- Value: the result kinds of evaluation
- Scope: user bindings consulted after the builtin table
- Evaluator: walks a tree with cooperative cancellation
- FunctionRegistry: builtin function implementations

Importing this package registers the builtin functions.
"""

from reckon.expressions.builtins import register_all_builtins
from reckon.expressions.errors import (
    EvaluationError,
    InternalError,
    Interrupted,
    NumberError,
    TypeMismatchError,
    UnknownIdentifierError,
)
from reckon.expressions.evaluator import Evaluator, Outcome, evaluate, run
from reckon.expressions.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionRegistry,
)
from reckon.expressions.interrupt import (
    DeadlineInterrupt,
    EventInterrupt,
    Interrupt,
    NeverInterrupt,
)
from reckon.expressions.numbers import Base, FormattingStyle, Number
from reckon.expressions.resolver import builtin_names, resolve_identifier
from reckon.expressions.scope import Scope
from reckon.expressions.tree import (
    Add,
    Apply,
    ApplyMultiply,
    ASTNode,
    Call,
    Convert,
    Divide,
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
from reckon.expressions.values import (
    DP,
    BaseValue,
    FormatValue,
    FunctionValue,
    NumberValue,
    PrecisionMarker,
    Value,
)

register_all_builtins()

__all__ = [
    # Errors
    "EvaluationError",
    "InternalError",
    "Interrupted",
    "NumberError",
    "TypeMismatchError",
    "UnknownIdentifierError",
    # Evaluator
    "Evaluator",
    "Outcome",
    "evaluate",
    "run",
    # Functions
    "FunctionCategory",
    "FunctionDefinition",
    "FunctionRegistry",
    "register_all_builtins",
    # Interrupts
    "DeadlineInterrupt",
    "EventInterrupt",
    "Interrupt",
    "NeverInterrupt",
    # Numbers
    "Base",
    "FormattingStyle",
    "Number",
    # Resolution
    "Scope",
    "builtin_names",
    "resolve_identifier",
    # Tree
    "ASTNode",
    "Add",
    "Apply",
    "ApplyMultiply",
    "Call",
    "Convert",
    "Divide",
    "Factorial",
    "Identifier",
    "Literal",
    "Multiply",
    "Negate",
    "Parens",
    "Power",
    "Reciprocal",
    "Subtract",
    "TreeError",
    "UnaryPlus",
    "format_tree",
    "node_from_data",
    # Values
    "DP",
    "BaseValue",
    "FormatValue",
    "FunctionValue",
    "NumberValue",
    "PrecisionMarker",
    "Value",
]

"""Identifier resolution against the builtin table, falling back to scope.

The builtin table depends on EvaluationConfig.compatibility_mode:
- default: constants (pi, e, i), function references, format names, "dp",
  and base markers
- compatibility: a handful of functions plus the "approximately" alias
Any other name is looked up in scope; a miss there is an
UnknownIdentifierError. Resolution never binds anything.
"""

import logging

from reckon.config import EvaluationConfig
from reckon.expressions.errors import expect_infallible
from reckon.expressions.interrupt import Interrupt
from reckon.expressions.numbers import AUTO, EXACT, FLOAT, FRACTION, Base, Number
from reckon.expressions.scope import Scope
from reckon.expressions.tree import Apply, Identifier, Literal
from reckon.expressions.values import (
    DP,
    BaseValue,
    FormatValue,
    FunctionValue,
    NumberValue,
    Value,
)

logger = logging.getLogger(__name__)

PI_DIGITS = "3.141592653589793238"
E_DIGITS = "2.718281828459045235"

COMPAT_IDENTIFIERS: dict[str, Value] = {
    "exp": FunctionValue("exp"),
    "sqrt": FunctionValue("sqrt"),
    "ln": FunctionValue("ln"),
    "log2": FunctionValue("log2"),
    "log10": FunctionValue("log10"),
    "tan": FunctionValue("tan"),
    "asin": FunctionValue("asin"),
    "approx.": FunctionValue("approximately"),
    "approximately": FunctionValue("approximately"),
}

FUNCTION_NAMES = [
    "sqrt",
    "cbrt",
    "abs",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    "ln",
    "log2",
    "log10",
    "exp",
    "base",
]

FIXED_IDENTIFIERS: dict[str, Value] = {
    **{name: FunctionValue(name) for name in FUNCTION_NAMES},
    "approx.": FunctionValue("approximately"),
    "approximately": FunctionValue("approximately"),
    "auto": FormatValue(AUTO),
    "exact": FormatValue(EXACT),
    "fraction": FormatValue(FRACTION),
    "float": FormatValue(FLOAT),
    "dp": DP,
}

BASE_IDENTIFIERS: dict[str, int] = {
    "decimal": 10,
    "hex": 16,
    "hexadecimal": 16,
    "binary": 2,
    "octal": 8,
}

CONSTANT_DIGITS: dict[str, str] = {
    "pi": PI_DIGITS,
    "e": E_DIGITS,
}


def _bootstrap_constant(name: str, scope: Scope, interrupt: Interrupt) -> Value:
    """Evaluate `approximately <digits>` for a builtin constant."""
    from reckon.expressions.evaluator import Evaluator

    logger.debug("Bootstrapping constant %s", name)
    tree = Apply(Identifier("approximately"), Literal(CONSTANT_DIGITS[name]))
    evaluator = Evaluator(scope, EvaluationConfig(), interrupt)
    return expect_infallible(lambda: evaluator.evaluate(tree), f"Constant '{name}'")


def resolve_identifier(
    name: str,
    scope: Scope,
    config: EvaluationConfig,
    interrupt: Interrupt,
) -> Value:
    """Resolve a name to a value.

    Raises:
        UnknownIdentifierError: Not a builtin and not bound in scope
        NumberError: A builtin base marker could not be constructed
        Interrupted: Cancellation during constant bootstrap
    """
    if config.compatibility_mode:
        if name in COMPAT_IDENTIFIERS:
            return COMPAT_IDENTIFIERS[name]
        return scope.get(name)

    if name in CONSTANT_DIGITS:
        return _bootstrap_constant(name, scope, interrupt)
    if name == "i":
        return NumberValue(Number.i())
    if name in FIXED_IDENTIFIERS:
        return FIXED_IDENTIFIERS[name]
    if name in BASE_IDENTIFIERS:
        return BaseValue(Base.from_plain_base(BASE_IDENTIFIERS[name]))
    return scope.get(name)


def builtin_names(config: EvaluationConfig) -> list[str]:
    """Names the builtin table defines for a mode (scope bindings excluded)."""
    if config.compatibility_mode:
        return sorted(COMPAT_IDENTIFIERS)
    return sorted([*CONSTANT_DIGITS, "i", *FIXED_IDENTIFIERS, *BASE_IDENTIFIERS])

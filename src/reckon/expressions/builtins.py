"""Built-in functions for calculator expressions.

This module registers all built-in functions with the FunctionRegistry.
Importing reckon.expressions registers them; tests re-register through
register_all_builtins() after clearing the registry.

Categories:
- Algebraic: sqrt, cbrt, abs
- Trigonometric: sin, cos, tan, asin, acos, atan
- Hyperbolic: sinh, cosh, tanh, asinh, acosh, atanh
- Exponential: exp, ln, log2, log10
- Presentation: approximately, base
"""

from reckon.expressions.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionRegistry,
)
from reckon.expressions.interrupt import Interrupt
from reckon.expressions.numbers import Base, Number
from reckon.expressions.values import BaseValue, NumberValue, Value


def register_all_builtins() -> None:
    """Register all built-in functions with the FunctionRegistry."""
    _register_algebraic_functions()
    _register_trigonometric_functions()
    _register_hyperbolic_functions()
    _register_exponential_functions()
    _register_presentation_functions()


def _numeric(name: str):
    """Implementation that applies a named function of the number primitives."""

    def implementation(argument: Number, interrupt: Interrupt) -> Value:
        return NumberValue(argument.apply_function(name))

    implementation.__name__ = f"_{name}"
    return implementation


def _register_numeric(
    category: FunctionCategory, descriptions: dict[str, str], examples: dict[str, list[str]]
) -> None:
    for name, description in descriptions.items():
        FunctionRegistry.register(
            FunctionDefinition(
                name=name,
                description=description,
                category=category,
                implementation=_numeric(name),
                examples=examples.get(name, []),
            )
        )


# -----------------------------------------------------------------------------
# Algebraic Functions
# -----------------------------------------------------------------------------


def _register_algebraic_functions() -> None:
    _register_numeric(
        FunctionCategory.ALGEBRAIC,
        {
            "sqrt": "Square root (principal root for negative input)",
            "cbrt": "Cube root (real root for real input)",
            "abs": "Absolute value (modulus for complex input)",
        },
        {"sqrt": ["sqrt 9", "sqrt 2 as dp"], "cbrt": ["cbrt (-8)"], "abs": ["abs (-3)"]},
    )


# -----------------------------------------------------------------------------
# Trigonometric and Hyperbolic Functions
# -----------------------------------------------------------------------------


def _register_trigonometric_functions() -> None:
    _register_numeric(
        FunctionCategory.TRIGONOMETRIC,
        {
            "sin": "Sine of an angle in radians",
            "cos": "Cosine of an angle in radians",
            "tan": "Tangent of an angle in radians",
            "asin": "Inverse sine, in radians",
            "acos": "Inverse cosine, in radians",
            "atan": "Inverse tangent, in radians",
        },
        {"sin": ["sin (pi / 2)"], "atan": ["4 atan 1"]},
    )


def _register_hyperbolic_functions() -> None:
    _register_numeric(
        FunctionCategory.HYPERBOLIC,
        {
            "sinh": "Hyperbolic sine",
            "cosh": "Hyperbolic cosine",
            "tanh": "Hyperbolic tangent",
            "asinh": "Inverse hyperbolic sine",
            "acosh": "Inverse hyperbolic cosine",
            "atanh": "Inverse hyperbolic tangent",
        },
        {},
    )


# -----------------------------------------------------------------------------
# Exponential Functions
# -----------------------------------------------------------------------------


def _register_exponential_functions() -> None:
    _register_numeric(
        FunctionCategory.EXPONENTIAL,
        {
            "exp": "e raised to the given power",
            "ln": "Natural logarithm",
            "log2": "Base-2 logarithm",
            "log10": "Base-10 logarithm",
        },
        {"ln": ["ln e"], "log10": ["log10 1000"]},
    )


# -----------------------------------------------------------------------------
# Presentation Functions
# -----------------------------------------------------------------------------


def _approximately(argument: Number, interrupt: Interrupt) -> Value:
    """Mark a number as approximate."""
    return NumberValue(argument.approximately())


def _base(argument: Number, interrupt: Interrupt) -> Value:
    """Build a base marker from an integer radix (e.g. `base 3`)."""
    return BaseValue(Base.from_plain_base(argument.to_int()))


def _register_presentation_functions() -> None:
    FunctionRegistry.register(
        FunctionDefinition(
            name="approximately",
            description="Marks a value as approximate",
            category=FunctionCategory.PRESENTATION,
            implementation=_approximately,
            examples=["approx. 3.14159"],
        )
    )

    FunctionRegistry.register(
        FunctionDefinition(
            name="base",
            description="Display base from a radix between 2 and 36",
            category=FunctionCategory.PRESENTATION,
            implementation=_base,
            examples=["100 as base 3"],
        )
    )

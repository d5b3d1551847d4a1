"""Result values produced by evaluation.

A Value is exactly one of:
- NumberValue: a number, the only kind that supports arithmetic
- FunctionValue: a builtin function that has not been applied yet
- FormatValue: a formatting style request (auto, exact, fraction, float)
- PrecisionMarker: "dp", render approximately to a fixed digit count
- BaseValue: a display base (decimal, hex, octal, binary, ...)
"""

from dataclasses import dataclass

from reckon.expressions.errors import EvaluationError, TypeMismatchError
from reckon.expressions.functions import FunctionRegistry
from reckon.expressions.interrupt import Interrupt
from reckon.expressions.numbers import Base, FormattingStyle, Number


@dataclass(frozen=True)
class Value:
    """Base class for result values."""

    kind = "value"

    def expect_number(self) -> Number:
        """Return the wrapped number, or raise if this is not a number."""
        raise TypeMismatchError(f"Expected a number, found {self.kind} '{self}'")

    def apply(
        self,
        other: "Value",
        *,
        allow_multiply: bool,
        force_multiply: bool,
        interrupt: Interrupt,
    ) -> "Value":
        """Apply this value to other (juxtaposition).

        Args:
            other: The already evaluated right-hand side
            allow_multiply: Whether a number on the left multiplies instead
                of raising "not a function"
            force_multiply: Whether a function on the left is rejected
                instead of being called
            interrupt: Cancellation handle passed to the primitives
        """
        if isinstance(self, FunctionValue):
            if force_multiply:
                raise TypeMismatchError(
                    f"Cannot multiply function '{self.name}', it is not a number"
                )
            return self.call(other, interrupt)

        if isinstance(self, NumberValue):
            if not allow_multiply:
                raise TypeMismatchError(f"'{self}' is not a function")
            return NumberValue(self.number.mul(other.expect_number(), interrupt))

        if not allow_multiply:
            raise TypeMismatchError(f"{self.kind.capitalize()} '{self}' is not a function")
        raise TypeMismatchError(f"Expected a number or a function, found {self.kind} '{self}'")


@dataclass(frozen=True)
class NumberValue(Value):
    number: Number

    kind = "number"

    def expect_number(self) -> Number:
        return self.number

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True)
class FunctionValue(Value):
    name: str

    kind = "function"

    def call(self, argument: Value, interrupt: Interrupt) -> Value:
        """Call the builtin with an evaluated argument."""
        if not FunctionRegistry.is_registered(self.name):
            raise EvaluationError(f"Unknown function: {self.name}")
        func_def = FunctionRegistry.get(self.name)
        if isinstance(argument, FunctionValue):
            raise TypeMismatchError(
                f"Cannot pass function '{argument.name}' to '{self.name}', "
                "this is not a multiplication"
            )
        return func_def.implementation(argument.expect_number(), interrupt)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FormatValue(Value):
    style: FormattingStyle

    kind = "format"

    def __str__(self) -> str:
        return str(self.style)


@dataclass(frozen=True)
class PrecisionMarker(Value):
    kind = "precision marker"

    def __str__(self) -> str:
        return "dp"


@dataclass(frozen=True)
class BaseValue(Value):
    base: Base

    kind = "base"

    def __str__(self) -> str:
        return str(self.base)


DP = PrecisionMarker()

"""Number primitives consumed by the evaluator.

Arithmetic is delegated to sympy, which keeps rationals exact and carries
the imaginary unit and transcendental functions symbolically. This module
only adds the calculator-facing bits around it: approximate vs exact
tracking, a requested formatting style, a display base, and errors raised
as NumberError instead of sympy's infinities and NaNs.

Units are not modelled; every Number is dimensionless.
"""

from dataclasses import dataclass, replace
from decimal import Decimal, localcontext
from enum import Enum
from fractions import Fraction

import sympy as sp

from reckon.expressions.errors import NumberError
from reckon.expressions.interrupt import Interrupt, NeverInterrupt, check_interrupt

# How many multiplications factorial performs between interrupt polls
FACTORIAL_POLL_INTERVAL = 256

class FormatKind(Enum):
    """Output style requested with `as <style>`."""

    AUTO = "auto"
    EXACT_FLOAT_WITH_FRACTION_FALLBACK = "exact"
    EXACT_FRACTION = "fraction"
    EXACT_FLOAT = "float"
    APPROX_FLOAT = "approx_float"


@dataclass(frozen=True)
class FormattingStyle:
    """A formatting style; APPROX_FLOAT carries a significant-digit count."""

    kind: FormatKind
    digits: int | None = None

    @classmethod
    def approx_float(cls, digits: int) -> "FormattingStyle":
        return cls(FormatKind.APPROX_FLOAT, digits)

    def __str__(self) -> str:
        if self.kind == FormatKind.APPROX_FLOAT:
            return f"{self.digits} significant digits"
        return self.kind.value


AUTO = FormattingStyle(FormatKind.AUTO)
EXACT = FormattingStyle(FormatKind.EXACT_FLOAT_WITH_FRACTION_FALLBACK)
FRACTION = FormattingStyle(FormatKind.EXACT_FRACTION)
FLOAT = FormattingStyle(FormatKind.EXACT_FLOAT)


@dataclass(frozen=True)
class Base:
    """Numeric base used when displaying a number."""

    radix: int

    @classmethod
    def from_plain_base(cls, radix: int) -> "Base":
        if radix < 2 or radix > 36:
            raise NumberError(f"Base must be between 2 and 36 (inclusive), got {radix}")
        return cls(radix)

    @property
    def prefix(self) -> str:
        return {16: "0x", 8: "0o", 2: "0b"}.get(self.radix, "")

    def __str__(self) -> str:
        names = {2: "binary", 8: "octal", 10: "decimal", 16: "hexadecimal"}
        return names.get(self.radix, f"base {self.radix}")


DECIMAL = Base(10)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_FUNCTIONS = {
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "sinh": sp.sinh,
    "cosh": sp.cosh,
    "tanh": sp.tanh,
    "asinh": sp.asinh,
    "acosh": sp.acosh,
    "atanh": sp.atanh,
    "ln": sp.log,
    "log2": lambda x: sp.log(x, 2),
    "log10": lambda x: sp.log(x, 10),
    "exp": sp.exp,
    "abs": sp.Abs,
    "sqrt": sp.sqrt,
}


def _is_exact(expr: sp.Expr) -> bool:
    re_part, im_part = expr.as_real_imag()
    return bool(re_part.is_Rational and im_part.is_Rational)


def _check_finite(expr: sp.Expr, what: str) -> sp.Expr:
    if expr.has(sp.zoo, sp.oo, -sp.oo, sp.nan):
        raise NumberError(f"{what} is undefined")
    return expr


@dataclass(frozen=True)
class Number:
    """An exact-or-approximate complex number with presentation hints.

    Attributes:
        value: The sympy expression holding the value
        approx: True once the value is known only approximately
        style: Requested formatting style
        base: Requested display base
    """

    value: sp.Expr
    approx: bool = False
    style: FormattingStyle = AUTO
    base: Base = DECIMAL

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_literal(cls, text: str) -> "Number":
        """Build an exact number from decimal literal text (e.g. "3.14", "1e3")."""
        try:
            fraction = Fraction(text.replace("_", ""))
        except (ValueError, ZeroDivisionError) as e:
            raise NumberError(f"Invalid number literal '{text}'") from e
        return cls(sp.Rational(fraction.numerator, fraction.denominator))

    @classmethod
    def from_int(cls, value: int) -> "Number":
        return cls(sp.Integer(value))

    @classmethod
    def i(cls) -> "Number":
        return cls(sp.I)

    def _derive(self, value: sp.Expr, *others: "Number") -> "Number":
        value = sp.expand(value) if value.has(sp.I) else value
        approx = self.approx or any(o.approx for o in others) or not _is_exact(value)
        return replace(self, value=value, approx=approx)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def negate(self) -> "Number":
        return self._derive(-self.value)

    def add(self, other: "Number", interrupt: Interrupt = NeverInterrupt()) -> "Number":
        check_interrupt(interrupt)
        return self._derive(self.value + other.value, other)

    def sub(self, other: "Number", interrupt: Interrupt = NeverInterrupt()) -> "Number":
        check_interrupt(interrupt)
        return self._derive(self.value - other.value, other)

    def mul(self, other: "Number", interrupt: Interrupt = NeverInterrupt()) -> "Number":
        check_interrupt(interrupt)
        return self._derive(self.value * other.value, other)

    def div(self, other: "Number", interrupt: Interrupt = NeverInterrupt()) -> "Number":
        check_interrupt(interrupt)
        if other.value.is_zero:
            raise NumberError("Division by zero")
        return self._derive(_check_finite(self.value / other.value, "Division"), other)

    def pow(self, other: "Number", interrupt: Interrupt = NeverInterrupt()) -> "Number":
        check_interrupt(interrupt)
        if self.value.is_zero and other.value.is_extended_negative:
            raise NumberError("Division by zero")
        result = _check_finite(sp.Pow(self.value, other.value), "Exponentiation")
        return self._derive(result, other)

    def factorial(self, interrupt: Interrupt = NeverInterrupt()) -> "Number":
        """Compute n! for a non-negative integer, polling the interrupt."""
        if not self.value.is_Integer or self.value.is_negative:
            raise NumberError("Factorial is only supported for non-negative integers")
        n = int(self.value)
        result = 1
        for k in range(2, n + 1):
            if k % FACTORIAL_POLL_INTERVAL == 0:
                check_interrupt(interrupt)
            result *= k
        return self._derive(sp.Integer(result))

    # -------------------------------------------------------------------------
    # Builtin functions
    # -------------------------------------------------------------------------

    def apply_function(self, name: str) -> "Number":
        """Apply a named transcendental/algebraic function."""
        if name == "cbrt":
            value = sp.real_root(self.value, 3) if self.value.is_real else sp.cbrt(self.value)
        elif name in _FUNCTIONS:
            value = _FUNCTIONS[name](self.value)
        else:
            raise NumberError(f"Unknown function '{name}'")
        return self._derive(_check_finite(value, f"{name}({self})"))

    def approximately(self) -> "Number":
        return replace(self, approx=True)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert_to(self, target: "Number", interrupt: Interrupt = NeverInterrupt()) -> "Number":
        """Convert to the units of target.

        Both sides are dimensionless, so the value and presentation of the
        left operand are kept.
        """
        check_interrupt(interrupt)
        return self

    def with_format(self, style: FormattingStyle) -> "Number":
        return replace(self, style=style)

    def with_base(self, base: Base) -> "Number":
        return replace(self, base=base)

    def to_int(self) -> int:
        if not self.value.is_Integer:
            raise NumberError(f"Expected an integer, got {self}")
        return int(self.value)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        re_part, im_part = self.value.as_real_imag()
        if im_part.is_zero:
            return self._render_real(re_part)
        if re_part.is_zero:
            return self._render_imaginary(im_part)
        sign = " - " if im_part.is_negative else " + "
        return f"{self._render_real(re_part)}{sign}{self._render_imaginary(abs(im_part))}"

    def _render_imaginary(self, value: sp.Expr) -> str:
        if value == 1:
            return "i"
        if value == -1:
            return "-i"
        return f"{self._render_real(value)}i"

    def _render_real(self, value: sp.Expr) -> str:
        if self.style.kind == FormatKind.APPROX_FLOAT:
            return self._render_approx(value, self.style.digits or 10)
        if self.approx or not value.is_Rational:
            return f"approx. {self._render_approx(value, 10)}"

        rational = sp.Rational(value)
        if rational.q == 1:
            return self._render_integer(int(rational.p))
        if self.style.kind == FormatKind.EXACT_FRACTION:
            return self._render_fraction(rational)
        decimal = self._render_terminating(rational)
        if decimal is not None:
            return decimal
        if self.style.kind == FormatKind.EXACT_FLOAT:
            return f"approx. {self._render_approx(value, 10)}"
        return self._render_fraction(rational)

    def _render_integer(self, n: int) -> str:
        if self.base.radix == 10:
            return str(n)
        sign = "-" if n < 0 else ""
        n = abs(n)
        digits = ""
        while True:
            n, rem = divmod(n, self.base.radix)
            digits = _DIGITS[rem] + digits
            if n == 0:
                break
        if self.base.prefix:
            return f"{sign}{self.base.prefix}{digits}"
        return f"{sign}{digits} (base {self.base.radix})"

    def _render_fraction(self, rational: sp.Rational) -> str:
        return f"{self._render_integer(int(rational.p))}/{self._render_integer(int(rational.q))}"

    def _render_terminating(self, rational: sp.Rational) -> str | None:
        if self.base.radix != 10:
            return None
        q = int(rational.q)
        twos = fives = 0
        while q % 2 == 0:
            q //= 2
            twos += 1
        while q % 5 == 0:
            q //= 5
            fives += 1
        if q != 1:
            return None
        places = max(twos, fives)
        scaled = abs(int(rational.p * 10**places // rational.q))
        sign = "-" if rational.is_negative else ""
        text = str(scaled).rjust(places + 1, "0")
        return f"{sign}{text[:-places]}.{text[-places:]}"

    @staticmethod
    def _render_approx(value: sp.Expr, digits: int) -> str:
        """Round to `digits` significant digits at arbitrary magnitude."""
        number = sp.N(value, digits)
        if number.is_zero:
            return "0"
        with localcontext() as ctx:
            ctx.prec = digits
            rounded = (+Decimal(str(number))).normalize()
        return f"{rounded:.{digits}g}"

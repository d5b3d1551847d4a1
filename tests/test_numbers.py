"""Tests for the number primitives."""

import re

import pytest
import sympy as sp

from reckon.expressions import (
    Base,
    EventInterrupt,
    FormattingStyle,
    Interrupted,
    Number,
    NumberError,
)

from reckon.expressions.numbers import EXACT, FLOAT, FRACTION


def n(value: int) -> Number:
    return Number.from_int(value)


class TestConstruction:
    def test_from_literal_decimal(self):
        assert Number.from_literal("2.5") == Number.from_literal("5").div(n(2))

    def test_from_literal_exponent_and_separators(self):
        assert Number.from_literal("1e3") == n(1000)
        assert Number.from_literal("1_000") == n(1000)

    def test_from_literal_rejects_garbage(self):
        with pytest.raises(NumberError, match="Invalid number literal"):
            Number.from_literal("abc")

    def test_base_range(self):
        assert Base.from_plain_base(36) == Base(36)
        with pytest.raises(NumberError):
            Base.from_plain_base(1)
        with pytest.raises(NumberError):
            Base.from_plain_base(37)


class TestArithmetic:
    def test_negate(self):
        assert n(3).negate() == n(-3)

    def test_division_by_zero(self):
        with pytest.raises(NumberError):
            n(1).div(n(0))

    def test_zero_to_negative_power(self):
        with pytest.raises(NumberError):
            n(0).pow(n(-1))

    def test_fractional_power_is_approximate(self):
        result = n(2).pow(Number.from_literal("0.5"))
        assert result.approx is True

    def test_approximation_is_contagious(self):
        assert n(2).approximately().add(n(1)).approx is True
        assert n(2).add(n(1).approximately()).approx is True

    def test_complex_arithmetic(self):
        one_plus_i = n(1).add(Number.i())
        assert one_plus_i.mul(one_plus_i) == n(2).mul(Number.i())

    def test_factorial(self):
        assert n(0).factorial() == n(1)
        assert n(10).factorial() == n(3628800)

    def test_factorial_of_negative(self):
        with pytest.raises(NumberError):
            n(-1).factorial()

    def test_factorial_is_interruptible(self):
        interrupt = EventInterrupt()
        interrupt.cancel()
        with pytest.raises(Interrupted):
            n(1000).factorial(interrupt)

    def test_interrupt_checked_by_primitives(self):
        interrupt = EventInterrupt()
        interrupt.cancel()
        with pytest.raises(Interrupted):
            n(1).add(n(2), interrupt)


class TestFunctions:
    def test_exact_results_stay_exact(self):
        assert n(9).apply_function("sqrt") == n(3)
        assert n(1).apply_function("ln") == n(0)
        assert n(0).apply_function("exp") == n(1)
        assert n(-4).apply_function("abs") == n(4)

    def test_sqrt_of_negative_is_imaginary(self):
        assert n(-4).apply_function("sqrt") == n(2).mul(Number.i())

    def test_atanh_of_one_is_undefined(self):
        with pytest.raises(NumberError):
            n(1).apply_function("atanh")

    def test_unknown_function(self):
        with pytest.raises(NumberError):
            n(1).apply_function("frobnicate")

    def test_to_int(self):
        assert n(16).to_int() == 16
        with pytest.raises(NumberError):
            Number.from_literal("1.5").to_int()


class TestRendering:
    def test_integers(self):
        assert str(n(42)) == "42"
        assert str(n(-7)) == "-7"

    def test_terminating_decimal(self):
        assert str(Number.from_literal("-2.75")) == "-2.75"

    def test_repeating_decimal_falls_back_to_fraction(self):
        assert str(n(1).div(n(3))) == "1/3"
        assert str(n(1).div(n(3)).with_format(EXACT)) == "1/3"

    def test_fraction_style(self):
        assert str(Number.from_literal("0.5").with_format(FRACTION)) == "1/2"

    def test_float_style(self):
        assert str(Number.from_literal("0.5").with_format(FLOAT)) == "0.5"
        assert str(n(2).div(n(3)).with_format(FLOAT)) == "approx. 0.6666666667"

    def test_approx_float_style(self):
        style = FormattingStyle.approx_float(4)
        assert str(n(2).div(n(3)).with_format(style)) == "0.6667"

    def test_approximate_number(self):
        assert str(n(2).approximately()) == "approx. 2"

    def test_bases(self):
        assert str(n(255).with_base(Base(16))) == "0xff"
        assert str(n(-255).with_base(Base(16))) == "-0xff"
        assert str(n(0).with_base(Base(2))) == "0b0"
        assert str(n(35).with_base(Base(36))) == "z (base 36)"

    def test_complex(self):
        i = Number.i()
        assert str(i) == "i"
        assert str(i.negate()) == "-i"
        assert str(n(1).add(i)) == "1 + i"
        assert str(n(1).sub(n(2).mul(i))) == "1 - 2i"
        assert str(n(3).mul(i)) == "3i"

    def test_approximate_complex_with_negative_imaginary_part(self):
        result = Number.i().negate().apply_function("exp")
        assert str(result) == "approx. 0.5403023059 - approx. 0.8414709848i"

    def test_approximate_beyond_double_range(self):
        huge = Number(sp.pi).pow(n(1000))
        assert re.fullmatch(r"approx\. 1\.41\d+e\+497", str(huge))

    def test_approximate_below_double_range(self):
        tiny = Number(sp.pi).pow(n(-1000))
        assert re.fullmatch(r"approx\. 7\.08\d+e-498", str(tiny))

    def test_exact_power_with_digits_beyond_double_range(self):
        style = FormattingStyle.approx_float(10)
        assert str(n(10).pow(n(400)).with_format(style)) == "1e+400"

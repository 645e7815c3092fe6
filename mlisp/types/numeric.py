"""Numeric tower: Integer, Rational and Float.

Promotion follows Integer -> Rational -> Float:

- Integer op Integer stays Integer, except `/` which yields a Float.
- Any operand pair involving a Float yields a Float.
- Otherwise a Rational is involved and the result is a Rational.

Equality compares converted float values within EPSILON, so 1, 1.0 and 2/2
are all equal. Ordering compares exact values.
"""

from __future__ import annotations

import math
import operator
from fractions import Fraction
from typing import Callable

import numpy as np

from mlisp.errors import MLispDivisionByZero, MLispOutOfRange
from mlisp.types.value import EPSILON, Value, invalid_operands

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def format_float(value: float, trim: str = "0") -> str:
    """Shortest round-tripping text for a float.

    The default trim mode keeps a decimal point ("1.0"); trim="-" drops it for
    whole numbers ("1"), which is how matrix cells are shown.
    """
    return np.format_float_positional(value, unique=True, trim=trim)


class Numeric(Value):
    __slots__ = ()

    type_repr = "<Numeric>"

    def to_float(self) -> float:
        raise NotImplementedError

    def exact(self) -> int | Fraction | float:
        """The value as the closest Python number, used for ordering and hashing."""
        raise NotImplementedError

    def as_fraction(self) -> Fraction:
        raise NotImplementedError

    def is_zero(self) -> bool:
        return abs(self.to_float()) <= EPSILON

    # --- comparison ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (int, float, Fraction)) and not isinstance(other, bool):
            other = from_python(other)
        if not isinstance(other, Numeric):
            return False
        return abs(self.to_float() - other.to_float()) <= EPSILON

    def __hash__(self) -> int:
        return hash(self.exact())

    def _compare(self, other: Value, op: Callable[[object, object], bool]) -> bool:
        if not isinstance(other, Numeric):
            raise invalid_operands(self, other)
        return op(self.exact(), other.exact())

    def __lt__(self, other: Value) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Value) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Value) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Value) -> bool:
        return self._compare(other, operator.ge)

    # --- arithmetic ---

    def _arith(self, other: Value, op: Callable[[object, object], object]) -> Numeric:
        if not isinstance(other, Numeric):
            raise invalid_operands(self, other)
        if isinstance(self, Float) or isinstance(other, Float):
            return Float(op(self.to_float(), other.to_float()))
        if isinstance(self, Rational) or isinstance(other, Rational):
            return Rational.from_fraction(op(self.as_fraction(), other.as_fraction()))
        return Integer(op(self.value, other.value))

    def __add__(self, other: Value) -> Numeric:
        return self._arith(other, operator.add)

    def __sub__(self, other: Value) -> Numeric:
        return self._arith(other, operator.sub)

    def __mul__(self, other: Value) -> Numeric:
        return self._arith(other, operator.mul)

    def __truediv__(self, other: Value) -> Numeric:
        if not isinstance(other, Numeric):
            raise invalid_operands(self, other)
        if other.is_zero():
            raise MLispDivisionByZero(f"{self.render()} / {other.render()}")
        if isinstance(self, Integer) and isinstance(other, Integer):
            return Float(self.value / other.value)
        return self._arith(other, operator.truediv)


class Integer(Numeric):
    __slots__ = ("value",)

    type_repr = "<Integer>"

    def __init__(self, value: int):
        value = int(value)
        if not fits_int64(value):
            raise MLispOutOfRange(f"{value} does not fit in a 64-bit integer")
        self.value = value

    def to_float(self) -> float:
        return float(self.value)

    def exact(self) -> int:
        return self.value

    def as_fraction(self) -> Fraction:
        return Fraction(self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    def render(self) -> str:
        return str(self.value)


class Float(Numeric):
    __slots__ = ("value",)

    type_repr = "<Float>"

    def __init__(self, value: float):
        value = float(value)
        if not math.isfinite(value):
            raise MLispOutOfRange(f"{value} is not a finite float")
        self.value = value

    def to_float(self) -> float:
        return self.value

    def exact(self) -> float:
        return self.value

    def as_fraction(self) -> Fraction:
        return Fraction(self.value)

    def render(self) -> str:
        return format_float(self.value)


class Rational(Numeric):
    """A fraction kept in lowest terms with a positive denominator."""

    __slots__ = ("numerator", "denominator")

    type_repr = "<Rational>"

    def __init__(self, numerator: int, denominator: int = 1):
        numerator, denominator = int(numerator), int(denominator)
        if denominator == 0:
            raise MLispDivisionByZero(f"{numerator}/{denominator}")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor
        if not (fits_int64(numerator) and fits_int64(denominator)):
            raise MLispOutOfRange(f"{numerator}/{denominator} does not fit in 64-bit integers")
        self.numerator = numerator
        self.denominator = denominator

    @classmethod
    def from_fraction(cls, value: Fraction) -> Rational:
        return cls(value.numerator, value.denominator)

    def to_float(self) -> float:
        return self.numerator / self.denominator

    def exact(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def as_fraction(self) -> Fraction:
        return self.exact()

    def render(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def from_python(value: int | float | Fraction) -> Numeric:
    """Wrap a plain Python number in the matching Numeric variant."""
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert {value!r} to a numeric value")
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, Fraction):
        return Rational.from_fraction(value)
    return Float(value)

"""Base class for every runtime value in mlisp.

Each variant (Symbol, numbers, Boolean, Nil, sequences, functions, numeric
vectors and matrices) derives from `Value` and overrides the parts of the
operator contract it supports. Anything left at the default raises a
MLispTypeError naming both operand types.
"""

from __future__ import annotations

import sys

from mlisp.errors import MLispTypeError

# Tolerance for numeric equality and zero-divisor checks.
EPSILON = sys.float_info.epsilon


def invalid_operands(lhs: Value, rhs: object) -> MLispTypeError:
    """Build the error raised when an operator does not support a pair of values."""
    rhs_type = rhs.type_name() if isinstance(rhs, Value) else f"<{type(rhs).__name__}>"
    return MLispTypeError(f"Invalid operands type: {lhs.type_name()} @ {rhs_type}")


class Value:
    __slots__ = ()

    type_repr = "<Object>"

    def type_name(self) -> str:
        return self.type_repr

    def render(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement render()")

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()})"

    # Lisp truthiness: only nil and false are falsy.
    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return self is other

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self.render())

    def __lt__(self, other: Value) -> bool:
        raise invalid_operands(self, other)

    def __le__(self, other: Value) -> bool:
        raise invalid_operands(self, other)

    def __gt__(self, other: Value) -> bool:
        raise invalid_operands(self, other)

    def __ge__(self, other: Value) -> bool:
        raise invalid_operands(self, other)

    def __add__(self, other: Value) -> Value:
        raise invalid_operands(self, other)

    def __sub__(self, other: Value) -> Value:
        raise invalid_operands(self, other)

    def __mul__(self, other: Value) -> Value:
        raise invalid_operands(self, other)

    def __truediv__(self, other: Value) -> Value:
        raise invalid_operands(self, other)

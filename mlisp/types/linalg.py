"""Dense numeric containers backed by numpy: NumericVector and Matrix.

Both store float64 arrays that are copied on construction and marked
read-only, so a value never changes after it has been built. Arithmetic is
elementwise against a value of the same kind and shape, or broadcasts a
scalar Numeric right operand across every element.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Callable

import numpy as np

from mlisp.errors import MLispDivisionByZero, MLispShapeError
from mlisp.types.numeric import Numeric, format_float
from mlisp.types.value import EPSILON, Value, invalid_operands


def _frozen(data, ndim: int) -> np.ndarray:
    array = np.array(data, dtype=np.float64)
    if array.ndim != ndim:
        raise MLispShapeError(f"Expected {ndim}-dimensional data, got shape {array.shape}")
    array.flags.writeable = False
    return array


class _NumericArray(Value):
    __slots__ = ("data",)

    data: np.ndarray

    @property
    def shape(self) -> tuple[int, ...]:
        return self.data.shape

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self) or other.shape != self.shape:
            return False
        return bool(np.all(np.abs(self.data - other.data) <= EPSILON))

    def __hash__(self) -> int:
        return hash((self.shape, self.data.tobytes()))

    def _elementwise(self, other: Value, op: Callable, divide: bool = False):
        if isinstance(other, Numeric):
            rhs = other.to_float()
        elif type(other) is type(self):
            if other.shape != self.shape:
                raise MLispShapeError(
                    f"Shape mismatch: {self.type_name()} @ {other.type_name()}"
                )
            rhs = other.data
        else:
            raise invalid_operands(self, other)
        if divide and np.any(np.abs(rhs) <= EPSILON):
            raise MLispDivisionByZero(f"{self.render()} / {other.render()}")
        return type(self)(op(self.data, rhs))

    def __add__(self, other: Value):
        return self._elementwise(other, operator.add)

    def __sub__(self, other: Value):
        return self._elementwise(other, operator.sub)

    def __mul__(self, other: Value):
        return self._elementwise(other, operator.mul)

    def __truediv__(self, other: Value):
        return self._elementwise(other, operator.truediv, divide=True)


class NumericVector(_NumericArray):
    __slots__ = ()

    type_repr = "<NumericVector>"

    def __init__(self, data: Iterable[float] | np.ndarray = ()):
        self.data = _frozen(list(data) if not isinstance(data, np.ndarray) else data, 1)

    def __len__(self) -> int:
        return self.data.shape[0]

    def __iter__(self) -> Iterator[float]:
        return iter(self.data.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self.data[index])

    def render(self) -> str:
        return "[" + " ".join(format_float(float(x)) for x in self.data) + "]"


class Matrix(_NumericArray):
    """Rectangular matrix; all rows have the same length by construction."""

    __slots__ = ()

    def __init__(self, data: Iterable[Iterable[float]] | np.ndarray = ()):
        if isinstance(data, np.ndarray):
            array = data
        else:
            rows = [list(row) for row in data]
            if any(len(row) != len(rows[0]) for row in rows):
                raise MLispShapeError("All rows in matrix must be the same size")
            array = rows if rows else np.zeros((0, 0))
        self.data = _frozen(array, 2)

    @property
    def m(self) -> int:
        return self.data.shape[0]

    @property
    def n(self) -> int:
        return self.data.shape[1]

    def type_name(self) -> str:
        return f"<Matrix({self.m},{self.n})>"

    def rows(self) -> Iterator[NumericVector]:
        for row in self.data:
            yield NumericVector(row)

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    def transpose(self) -> Matrix:
        return Matrix(self.data.T)

    def dot(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            raise invalid_operands(self, other)
        if self.n != other.m:
            raise MLispShapeError(
                f"Matrix sizes don't match: {self.type_name()} @ {other.type_name()}"
            )
        return Matrix(self.data @ other.data)

    def render(self) -> str:
        if self.data.size == 0:
            return "[]"
        cells = [[format_float(float(x), trim="-") for x in row] for row in self.data]
        widths = [max(len(row[j]) for row in cells) for j in range(self.n)]
        lines = [" ".join(cell.rjust(w) for cell, w in zip(row, widths)) for row in cells]
        return "[" + "\n ".join(lines) + "]"

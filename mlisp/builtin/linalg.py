"""Linear-algebra builtins: numeric vectors, matrices and their constructors.

Matrix literals are written as vectors whose rows are separated by the `;`
symbol, e.g. `(matrix [1 2 ; 3 4])`.
"""
from __future__ import annotations

from typing import Callable

import numpy as np

from mlisp import LispValue
from mlisp.builtin.core import check_arity, check_arity_range
from mlisp.errors import MLispTypeError, MLispValueError
from mlisp.types.environment import Environment
from mlisp.types.linalg import Matrix, NumericVector
from mlisp.types.numeric import Integer, Numeric
from mlisp.types.sequence import Vector
from mlisp.types.symbol import Symbol

ROW_SEPARATOR = Symbol(";")
RANDMAT_MAX = 2147483647

BuiltinFn = Callable[[Environment, list[LispValue]], LispValue]


def _numeric(value: LispValue) -> float:
    if not isinstance(value, Numeric):
        raise MLispTypeError(f"Value type must be <Numeric>: {value}")
    return value.to_float()


def _dimension(name: str, value: LispValue) -> int:
    if not isinstance(value, Integer):
        raise MLispTypeError(f"'{name}' arguments must be an <Integer> type")
    if value.value < 0:
        raise MLispValueError(f"'{name}' dimensions must be non-negative, got {value}")
    return value.value


def _vector_arg(name: str, args: list[LispValue]) -> Vector:
    check_arity(name, args, 1)
    if not isinstance(args[0], Vector):
        raise MLispTypeError(f"'{name}' takes vector as argument")
    return args[0]


def nvector(env: Environment, args: list[LispValue]) -> NumericVector:
    """(nvector [1 2 3]) -> NumericVector of floats."""
    items = _vector_arg("nvector", args)
    return NumericVector([_numeric(e) for e in items])


def matrix(env: Environment, args: list[LispValue]) -> Matrix:
    """(matrix [1 2 ; 3 4]) -> 2x2 Matrix.

    Every row must hold the same number of values, otherwise a
    MLispShapeError is raised.
    """
    items = _vector_arg("matrix", args)
    rows: list[list[float]] = [[]]
    for e in items:
        if e == ROW_SEPARATOR:
            rows.append([])
        else:
            rows[-1].append(_numeric(e))
    return Matrix(rows)


def dot(env: Environment, args: list[LispValue]) -> Matrix:
    check_arity("**", args, 2)
    left, right = args
    if not isinstance(left, Matrix) or not isinstance(right, Matrix):
        raise MLispTypeError("'**' required 2 matrices")
    return left.dot(right)


def eye(env: Environment, args: list[LispValue]) -> Matrix:
    check_arity("eye", args, 1)
    n = _dimension("eye", args[0])
    return Matrix(np.eye(n))


def zeros(env: Environment, args: list[LispValue]) -> Matrix:
    check_arity_range("zeros", args, 1, 2)
    m = _dimension("zeros", args[0])
    n = _dimension("zeros", args[1]) if len(args) > 1 else m
    return Matrix(np.zeros((m, n)))


def transpose(env: Environment, args: list[LispValue]) -> Matrix:
    check_arity("transpose", args, 1)
    if not isinstance(args[0], Matrix):
        raise MLispTypeError(f"{args[0]} not a <Matrix>")
    return args[0].transpose()


def _random_shape(name: str, args: list[LispValue]) -> tuple[int, int]:
    check_arity_range(name, args, 1, 4)
    m = _dimension(name, args[0])
    n = _dimension(name, args[1]) if len(args) > 1 else m
    return m, n


def make_randmat(rng: np.random.Generator) -> BuiltinFn:
    """Build `randmat`, drawing integer-valued matrices from `rng`.

    (randmat m [n] [min] [max]) fills an m x n matrix with integers from the
    closed interval [min, max].
    """

    def randmat(env: Environment, args: list[LispValue]) -> Matrix:
        m, n = _random_shape("randmat", args)
        bounds = []
        for value in args[2:]:
            if not isinstance(value, Integer):
                raise MLispTypeError("'randmat' arguments must be an <Integer> type")
            bounds.append(value.value)
        low = bounds[0] if len(bounds) > 0 else 0
        high = bounds[1] if len(bounds) > 1 else RANDMAT_MAX
        if high < low:
            raise MLispValueError("Max value < min value")
        return Matrix(rng.integers(low, high, size=(m, n), endpoint=True).astype(np.float64))

    return randmat


def make_randmatf(rng: np.random.Generator) -> BuiltinFn:
    """Build `randmatf`, drawing float matrices uniformly from [min, max)."""

    def randmatf(env: Environment, args: list[LispValue]) -> Matrix:
        m, n = _random_shape("randmatf", args)
        bounds = [_numeric(value) for value in args[2:]]
        low = bounds[0] if len(bounds) > 0 else 0.0
        high = bounds[1] if len(bounds) > 1 else 1.0
        if high < low:
            raise MLispValueError("Max value < min value")
        return Matrix(rng.uniform(low, high, size=(m, n)))

    return randmatf


LINALG_BUILTINS = {
    "nvector": nvector,
    "matrix": matrix,
    "**": dot,
    "eye": eye,
    "zeros": zeros,
    "transpose": transpose,
}

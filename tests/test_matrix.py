import numpy as np
import pytest
from hypothesis import given, strategies as st

from mlisp.builtin import build_namespace
from mlisp.errors import (
    MLispArityError, MLispDivisionByZero, MLispShapeError, MLispTypeError,
    MLispValueError,
)
from mlisp.interpreter import Interpreter
from mlisp.types import FALSE, Float, Integer, Matrix, NumericVector, TRUE


# -------------------------------
# Construction
# -------------------------------
def test_matrix_literal(run):
    m = run("(matrix [1 2 ; 3 4])")
    assert isinstance(m, Matrix)
    assert m.shape == (2, 2)
    assert m[1, 0] == 3.0
    assert m.type_name() == "<Matrix(2,2)>"


def test_matrix_accepts_mixed_numerics(run):
    m = run("(matrix [1 0.5 1/4])")
    assert m.shape == (1, 3)
    assert list(next(m.rows())) == [1.0, 0.5, 0.25]


@pytest.mark.parametrize("source", ["(matrix [1 2 ; 3])", "(matrix [1 ; 2 3])", "(matrix [1 2 ;])"])
def test_ragged_matrix_is_value_error(run, source):
    with pytest.raises(MLispValueError, match="same size"):
        run(source)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(matrix [1 true])", MLispTypeError),
        ("(matrix (list 1 2))", MLispTypeError),
        ("(matrix [1] [2])", MLispArityError),
        ("(nvector [1 true])", MLispTypeError),
        ("(nvector 1)", MLispTypeError),
    ]
)
def test_construction_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_nvector(run):
    v = run("(nvector [1 2.5 1/2])")
    assert isinstance(v, NumericVector)
    assert list(v) == [1.0, 2.5, 0.5]
    assert v.render() == "[1.0 2.5 0.5]"
    assert run("(type? (nvector [1]))").render() == "<NumericVector>"


def test_eye(run):
    m = run("(eye 3)")
    assert m.shape == (3, 3)
    assert np.array_equal(m.data, np.eye(3))
    assert run("(= (eye 3) (eye 3))") is TRUE
    assert run("(= (eye 3) (eye 2))") is FALSE


def test_zeros(run):
    assert run("(zeros 2)").shape == (2, 2)
    m = run("(zeros 2 3)")
    assert m.shape == (2, 3)
    assert not m.data.any()


@pytest.mark.parametrize(
    "source,error",
    [
        ("(eye 1.5)", MLispTypeError),
        ("(eye -1)", MLispValueError),
        ("(eye)", MLispArityError),
        ("(zeros 1 2 3)", MLispArityError),
        ("(zeros 2 'a)", MLispTypeError),
    ]
)
def test_dimension_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_transpose(run):
    m = run("(transpose (matrix [1 2 3 ; 4 5 6]))")
    assert m.shape == (3, 2)
    assert m == Matrix([[1, 4], [2, 5], [3, 6]])
    with pytest.raises(MLispTypeError):
        run("(transpose [1 2])")


# -------------------------------
# Products and elementwise ops
# -------------------------------
def test_dot_with_identity(run):
    assert run("(= (** (matrix [1 2 ; 3 4]) (matrix [1 0 ; 0 1])) (matrix [1 2 ; 3 4]))") is TRUE


def test_dot_product_shape(run):
    m = run("(** (matrix [1 2 3 ; 4 5 6]) (matrix [1 ; 1 ; 1]))")
    assert m.shape == (2, 1)
    assert m == Matrix([[6], [15]])


def test_dot_size_mismatch(run):
    with pytest.raises(MLispShapeError, match="Matrix sizes don't match"):
        run("(** (matrix [1 2]) (matrix [1 2]))")


@pytest.mark.parametrize("source", ["(** 1 2)", "(** (eye 2) 2)", "(** (nvector [1]) (nvector [1]))"])
def test_dot_requires_matrices(run, source):
    with pytest.raises(MLispTypeError):
        run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ (matrix [1 2 ; 3 4]) (matrix [1 1 ; 1 1]))", [[2, 3], [4, 5]]),
        ("(- (matrix [1 2 ; 3 4]) (matrix [1 1 ; 1 1]))", [[0, 1], [2, 3]]),
        ("(* (matrix [1 2 ; 3 4]) (matrix [2 2 ; 2 2]))", [[2, 4], [6, 8]]),
        ("(/ (matrix [2 4 ; 6 8]) (matrix [2 2 ; 2 2]))", [[1, 2], [3, 4]]),
        ("(* (matrix [1 2 ; 3 4]) 2)", [[2, 4], [6, 8]]),
        ("(+ (matrix [1 2 ; 3 4]) 0.5)", [[1.5, 2.5], [3.5, 4.5]]),
        ("(/ (matrix [1 2]) 1/2)", [[2, 4]]),
    ]
)
def test_elementwise_matrix_ops(run, source, expected):
    assert run(source) == Matrix(expected)


def test_elementwise_vector_ops(run):
    assert run("(+ (nvector [1 2]) (nvector [3 4]))") == NumericVector([4, 6])
    assert run("(* (nvector [1 2]) 3)") == NumericVector([3, 6])


@pytest.mark.parametrize(
    "source",
    [
        "(+ (matrix [1 2]) (matrix [1 2 ; 3 4]))",
        "(+ (nvector [1 2]) (nvector [1 2 3]))",
    ]
)
def test_elementwise_shape_mismatch(run, source):
    with pytest.raises(MLispShapeError):
        run(source)


def test_elementwise_kind_mismatch(run):
    with pytest.raises(MLispTypeError):
        run("(+ (matrix [1 2]) (nvector [1 2]))")
    with pytest.raises(MLispTypeError):
        run("(+ 2 (matrix [1 2]))")


def test_elementwise_division_by_zero(run):
    with pytest.raises(MLispDivisionByZero):
        run("(/ (matrix [1 2]) 0)")
    with pytest.raises(MLispDivisionByZero):
        run("(/ (matrix [1 2]) (matrix [1 0]))")


def test_matrices_are_read_only(run):
    m = run("(eye 2)")
    with pytest.raises(ValueError):
        m.data[0, 0] = 5.0


def test_matrix_copies_input_rows():
    rows = [[1.0, 2.0]]
    m = Matrix(rows)
    rows[0][0] = 9.0
    assert m[0, 0] == 1.0


def test_matrix_rows_are_vectors():
    rows = list(Matrix([[1, 2], [3, 4]]).rows())
    assert rows == [NumericVector([1, 2]), NumericVector([3, 4])]
    assert Matrix([list(row) for row in rows]) == Matrix([[1, 2], [3, 4]])


# -------------------------------
# Rendering
# -------------------------------
@pytest.mark.parametrize(
    "source,text",
    [
        ("(matrix [1 2 ; 3 4])", "[1 2\n 3 4]"),
        ("(matrix [1 20 ; 300 4])", "[  1 20\n 300  4]"),
        ("(matrix [1.5 2])", "[1.5 2]"),
        ("(eye 2)", "[1 0\n 0 1]"),
        ("(zeros 0)", "[]"),
    ]
)
def test_matrix_render(interp, source, text):
    assert interp.rep(source) == text


# -------------------------------
# Random matrices
# -------------------------------
def test_randmat_shape_and_range(run):
    m = run("(randmat 3 4 -5 5)")
    assert m.shape == (3, 4)
    assert (m.data >= -5).all() and (m.data <= 5).all()
    assert np.array_equal(m.data, np.round(m.data))


def test_randmat_defaults(run):
    assert run("(randmat 2)").shape == (2, 2)
    m = run("(randmat 2 3 7)")
    assert (m.data >= 7).all()
    assert (m.data <= 2147483647).all()


def test_randmat_degenerate_range(run):
    assert run("(randmat 2 2 3 3)") == Matrix([[3, 3], [3, 3]])


def test_randmatf_shape_and_range(run):
    m = run("(randmatf 5 2 -1 1)")
    assert m.shape == (5, 2)
    assert (m.data >= -1).all() and (m.data < 1).all()
    d = run("(randmatf 3)")
    assert d.shape == (3, 3)
    assert (d.data >= 0).all() and (d.data < 1).all()


@pytest.mark.parametrize(
    "source,error",
    [
        ("(randmat 2 2 5 1)", MLispValueError),
        ("(randmatf 2 2 1.0 0.5)", MLispValueError),
        ("(randmat 2 2 0 1.5)", MLispTypeError),
        ("(randmat 1.5)", MLispTypeError),
        ("(randmatf 2 2 0 'a)", MLispTypeError),
        ("(randmat)", MLispArityError),
        ("(randmatf 1 2 3 4 5)", MLispArityError),
    ]
)
def test_random_matrix_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_seeded_generators_repeat():
    first = Interpreter(build_namespace(np.random.default_rng(7))).eval("(randmat 3)")
    second = Interpreter(build_namespace(np.random.default_rng(7))).eval("(randmat 3)")
    assert first == second


@given(st.integers(min_value=0, max_value=6), st.integers(min_value=0, max_value=6))
def test_zeros_and_transpose_shapes(m, n):
    interp = Interpreter()
    z = interp.eval(f"(zeros {m} {n})")
    assert z.shape == (m, n)
    assert interp.eval(f"(transpose (zeros {m} {n}))").shape == (n, m)


def test_identity_dot_property(run):
    run("(def! a (randmatf 4 4))")
    assert run("(= (** a (eye 4)) a)") is TRUE
    assert run("(= (** (eye 4) a) a)") is TRUE


def test_matrix_scalar_types_are_floats(run):
    m = run("(* (matrix [1 2]) 3)")
    assert isinstance(m[0, 1], float)
    assert Float(m[0, 1]) == Integer(6)

from fractions import Fraction
from math import gcd

import pytest
from hypothesis import assume, given, strategies as st

from mlisp.errors import (
    MLispDivisionByZero, MLispOutOfRange, MLispTypeError,
)
from mlisp.types import (
    EPSILON, FALSE, TRUE, Boolean, Float, HashMap, Integer, List, Nil,
    Rational, Symbol, Vector, from_python,
)

int64 = st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1)
small_ints = st.integers(min_value=-10 ** 6, max_value=10 ** 6)
nonzero_ints = small_ints.filter(lambda x: x != 0)


# -------------------------------
# Rendering
# -------------------------------
@pytest.mark.parametrize(
    "value,text",
    [
        (Integer(42), "42"),
        (Integer(-7), "-7"),
        (Float(1.0), "1.0"),
        (Float(0.5), "0.5"),
        (Float(-2.25), "-2.25"),
        (Float(1e20), "100000000000000000000.0"),
        (Rational(1, 2), "1/2"),
        (Rational(2, 4), "1/2"),
        (Rational(3, -6), "-1/2"),
        (Rational(4, 2), "2/1"),
        (TRUE, "true"),
        (FALSE, "false"),
        (Nil, "nil"),
        (Symbol("abc"), "abc"),
        (List([Integer(1), Symbol("a")]), "(1 a)"),
        (Vector([Integer(1), Vector()]), "[1 []]"),
        (HashMap([(Symbol("a"), Integer(1))]), "{a 1}"),
        (List(), "()"),
    ]
)
def test_render(value, text):
    assert value.render() == text
    assert str(value) == text


@pytest.mark.parametrize(
    "value,name",
    [
        (Integer(1), "<Integer>"),
        (Float(1.0), "<Float>"),
        (Rational(1, 2), "<Rational>"),
        (TRUE, "<Bool>"),
        (Nil, "<Nil>"),
        (Symbol("x"), "<Symbol>"),
        (List(), "<List>"),
        (Vector(), "<Vector>"),
        (HashMap(), "<HashMap>"),
    ]
)
def test_type_name(value, name):
    assert value.type_name() == name


# -------------------------------
# Truthiness
# -------------------------------
@pytest.mark.parametrize("value", [Nil, FALSE])
def test_falsy_values(value):
    assert not value


@pytest.mark.parametrize(
    "value",
    [TRUE, Integer(0), Float(0.0), Float(1e-300), Float(0.5), Rational(0, 1),
     List(), Vector(), HashMap(), Symbol("x")],
)
def test_truthy_values(value):
    assert value


# -------------------------------
# Equality
# -------------------------------
def test_numeric_equality_ignores_tag():
    assert Integer(1) == Float(1.0)
    assert Float(0.5) == Rational(1, 2)
    assert Rational(2, 2) == Integer(1)
    assert Float(1.0 + EPSILON / 2) == Integer(1)
    assert Integer(1) != Float(1.1)


def test_equal_numbers_hash_alike():
    assert len({Integer(1), Float(1.0), Rational(2, 2)}) == 1


def test_equality_never_raises_across_kinds():
    assert Integer(1) != Symbol("1")
    assert Nil != FALSE
    assert List() != Nil
    assert Symbol("a") != Integer(0)
    assert HashMap() != Vector()


def test_list_and_vector_compare_by_elements():
    assert List([Integer(1), Integer(2)]) == Vector([Float(1.0), Rational(2, 1)])
    assert List([Integer(1)]) != List([Integer(1), Integer(2)])
    assert List([Integer(1), Integer(2)]) != List([Integer(2), Integer(1)])


def test_hashmap_equality_is_structural():
    a = HashMap([(Symbol("a"), Integer(1)), (Symbol("b"), Integer(2))])
    b = HashMap([(Symbol("b"), Float(2.0)), (Symbol("a"), Integer(1))])
    assert a == b
    assert a != HashMap([(Symbol("a"), Integer(1))])
    assert b.get(Symbol("a")) == Integer(1)
    assert Symbol("c") not in b


@pytest.mark.parametrize(
    "left,right",
    [
        (Float(0.3), Float(0.1 + 0.2)),
        (Integer(1), Float(1.0 + EPSILON)),
        (List([Float(0.3)]), List([Float(0.1 + 0.2)])),
        (Vector([Integer(1), Float(0.3)]), List([Float(1.0), Float(0.1 + 0.2)])),
    ]
)
def test_hashmap_keys_match_within_epsilon(left, right):
    assert left == right
    assert HashMap([(left, Integer(1))]) == HashMap([(right, Integer(1))])
    assert HashMap([(left, Integer(1))]) != HashMap([(right, Integer(2))])


def test_hashmap_equality_through_interpreter(run):
    assert run("(= {0.3 1} {0.30000000000000004 1})") is TRUE
    assert run("(= {0.3 1} {0.4 1})") is FALSE


def test_containers_work_as_map_keys():
    key = List([Integer(1), Symbol("x")])
    m = HashMap([(key, TRUE)])
    assert m.get(List([Integer(1), Symbol("x")])) is TRUE


def test_containers_are_immutable():
    items = [Integer(1)]
    v = Vector(items)
    items.append(Integer(2))
    assert len(v) == 1
    assert not hasattr(v, "append")


# -------------------------------
# Numeric tower
# -------------------------------
@pytest.mark.parametrize(
    "lhs,rhs,expected,kind",
    [
        (Integer(2), Integer(3), Integer(5), Integer),
        (Integer(2), Float(0.5), Float(2.5), Float),
        (Float(0.5), Integer(2), Float(2.5), Float),
        (Integer(1), Rational(1, 2), Rational(3, 2), Rational),
        (Rational(1, 2), Rational(1, 3), Rational(5, 6), Rational),
        (Rational(1, 2), Float(0.25), Float(0.75), Float),
    ]
)
def test_addition_promotion(lhs, rhs, expected, kind):
    result = lhs + rhs
    assert result == expected
    assert type(result) is kind


@pytest.mark.parametrize(
    "lhs,rhs,expected,kind",
    [
        (Integer(1), Integer(2), Float(0.5), Float),
        (Integer(6), Integer(3), Float(2.0), Float),
        (Rational(1, 2), Integer(2), Rational(1, 4), Rational),
        (Integer(1), Rational(1, 3), Rational(3, 1), Rational),
        (Float(1.0), Integer(4), Float(0.25), Float),
    ]
)
def test_division_promotion(lhs, rhs, expected, kind):
    result = lhs / rhs
    assert result == expected
    assert type(result) is kind


@pytest.mark.parametrize(
    "divisor",
    [Integer(0), Float(0.0), Float(EPSILON / 2), Rational(0, 1)],
)
def test_division_by_zero(divisor):
    with pytest.raises(MLispDivisionByZero):
        Integer(1) / divisor


def test_rational_zero_denominator():
    with pytest.raises(MLispDivisionByZero):
        Rational(1, 0)


def test_integer_overflow():
    with pytest.raises(MLispOutOfRange):
        Integer(2 ** 63 - 1) + Integer(1)
    with pytest.raises(MLispOutOfRange):
        Integer(2 ** 62) * Integer(4)


def test_ordering_uses_exact_values():
    assert Integer(1) < Float(1.5)
    assert Rational(1, 3) < Float(0.34)
    assert Integer(2) >= Rational(4, 2)
    assert not Float(1.0) > Integer(1)


@pytest.mark.parametrize(
    "lhs,rhs",
    [(Integer(1), Symbol("a")), (Symbol("a"), Integer(1)), (Nil, Nil), (List(), List())],
)
def test_ordering_non_numbers_raises(lhs, rhs):
    with pytest.raises(MLispTypeError, match="Invalid operands type"):
        lhs < rhs


@pytest.mark.parametrize(
    "lhs,rhs",
    [(Integer(1), Symbol("a")), (TRUE, FALSE), (Nil, Integer(1)), (List(), List())],
)
def test_arithmetic_on_non_numbers_raises(lhs, rhs):
    with pytest.raises(MLispTypeError, match="Invalid operands type"):
        lhs + rhs


def test_from_python():
    assert type(from_python(3)) is Integer
    assert type(from_python(3.0)) is Float
    assert type(from_python(Fraction(1, 3))) is Rational
    with pytest.raises(TypeError):
        from_python(True)


def test_boolean_of_returns_singletons():
    assert Boolean.of(1) is TRUE
    assert Boolean.of([]) is FALSE


# -------------------------------
# Properties
# -------------------------------
@given(small_ints, small_ints)
def test_integer_addition_matches_python(a, b):
    result = Integer(a) + Integer(b)
    assert type(result) is Integer
    assert result.value == a + b


@given(small_ints)
def test_integer_division_by_zero_always_fails(a):
    with pytest.raises(MLispDivisionByZero):
        Integer(a) / Integer(0)


@given(int64, nonzero_ints)
def test_rational_is_normalized(n, d):
    assume(abs(n) < 2 ** 62)
    r = Rational(n, d)
    assert r.denominator > 0
    assert Fraction(r.numerator, r.denominator) == Fraction(n, d)
    assert gcd(abs(r.numerator), r.denominator) == 1


@given(small_ints, nonzero_ints, st.integers(min_value=1, max_value=1000))
def test_scaled_rationals_render_identically(n, d, k):
    assert Rational(n * k, d * k).render() == Rational(n, d).render()


@given(small_ints, small_ints)
def test_ordering_agrees_with_python(a, b):
    assert (Integer(a) < Integer(b)) == (a < b)
    assert (Integer(a) <= Float(b)) == (a <= b)

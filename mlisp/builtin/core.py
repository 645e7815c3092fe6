"""Built-in functions for the mlisp runtime environment.

This module defines core arithmetic, comparison, sequence introspection and
display builtins. Each one receives the caller's environment and the list of
evaluated arguments, and checks its own arity and argument types.
"""
from __future__ import annotations

import sys

from mlisp import LispValue
from mlisp.errors import MLispArityError, MLispTypeError
from mlisp.printer import pr_seq
from mlisp.types.boolean import Boolean
from mlisp.types.environment import Environment
from mlisp.types.nil import Nil, NilType
from mlisp.types.numeric import Integer
from mlisp.types.sequence import List, Sequence
from mlisp.types.symbol import Symbol


def check_arity(name: str, args: list[LispValue], expected: int) -> None:
    """Raise MLispArityError unless exactly `expected` arguments were given."""
    if len(args) != expected:
        raise MLispArityError(
            f"'{name}' takes {expected} args, but {len(args)} were given"
        )


def check_arity_range(name: str, args: list[LispValue], low: int, high: int) -> None:
    if not low <= len(args) <= high:
        raise MLispArityError(
            f"'{name}' takes {low} to {high} args, but {len(args)} were given"
        )


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """(+ a b): sum, promoted along the numeric tower or elementwise for arrays."""
    check_arity("+", args, 2)
    return args[0] + args[1]


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity("-", args, 2)
    return args[0] - args[1]


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity("*", args, 2)
    return args[0] * args[1]


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """(/ a b): Integer / Integer gives a Float; zero divisors raise DivisionByZero."""
    check_arity("/", args, 2)
    return args[0] / args[1]


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> Boolean:
    """Structural equality; numbers compare within epsilon across types."""
    check_arity("=", args, 2)
    return Boolean.of(args[0] == args[1])


def not_equals(env: Environment, args: list[LispValue]) -> Boolean:
    check_arity("!=", args, 2)
    return Boolean.of(args[0] != args[1])


def lt(env: Environment, args: list[LispValue]) -> Boolean:
    check_arity("<", args, 2)
    return Boolean.of(args[0] < args[1])


def lte(env: Environment, args: list[LispValue]) -> Boolean:
    check_arity("<=", args, 2)
    return Boolean.of(args[0] <= args[1])


def gt(env: Environment, args: list[LispValue]) -> Boolean:
    check_arity(">", args, 2)
    return Boolean.of(args[0] > args[1])


def gte(env: Environment, args: list[LispValue]) -> Boolean:
    check_arity(">=", args, 2)
    return Boolean.of(args[0] >= args[1])


def logical_not(env: Environment, args: list[LispValue]) -> Boolean:
    """Logical NOT for a single value; only nil and false are considered falsey."""
    check_arity("not", args, 1)
    return Boolean.of(not args[0])


# -------------------------------
# Sequences
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> List:
    return List(args)


def is_list(env: Environment, args: list[LispValue]) -> Boolean:
    check_arity("list?", args, 1)
    return Boolean.of(isinstance(args[0], List))


def is_empty(env: Environment, args: list[LispValue]) -> Boolean:
    check_arity("empty?", args, 1)
    seq = args[0]
    if not isinstance(seq, Sequence):
        raise MLispTypeError(f"{seq} is not a <Sequence>")
    return Boolean.of(seq.is_empty())


def count(env: Environment, args: list[LispValue]) -> LispValue:
    """(count xs): number of elements; nil counts as empty."""
    check_arity("count", args, 1)
    seq = args[0]
    if isinstance(seq, NilType):
        return Integer(0)
    if not isinstance(seq, Sequence):
        raise MLispTypeError(f"{seq} is not a <Sequence>")
    return Integer(len(seq))


def type_of(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity("type?", args, 1)
    return Symbol(args[0].type_name())


# -------------------------------
# Display
# -------------------------------
def prn(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated representations of args followed by newline; returns nil."""
    if args:
        print(pr_seq(args), file=sys.stdout)
    return Nil


CORE_BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "!=": not_equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "list": list_builtin,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "type?": type_of,
    "prn": prn,
}

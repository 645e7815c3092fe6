"""Core evaluator for the mlisp interpreter.

Dispatches on the shape of the value being evaluated: symbols are looked up,
vectors and maps evaluate their contents, lists are either special forms or
function applications, and everything else evaluates to itself.
"""

from __future__ import annotations

from mlisp import SExpression, LispValue
from mlisp.evaluation.apply import apply
from mlisp.evaluation.special_forms import SPECIAL_FORMS
from mlisp.types.environment import Environment
from mlisp.types.sequence import HashMap, List, Vector
from mlisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return the resulting value."""
    match expr:
        case List() if len(expr) == 0:
            return expr
        case List():
            head = expr.items[0]
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](expr.items[1:], env, evaluate)

            # Generic application: evaluate every element left to right, then apply.
            fn, *args = eval_ast(expr, env)
            return apply(fn, args, env, evaluate)

    return eval_ast(expr, env)


def eval_ast(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate the parts of a form without treating it as a call."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case List():
            return List(evaluate(e, env) for e in expr)
        case Vector():
            return Vector(evaluate(e, env) for e in expr)
        case HashMap():
            return HashMap((k, evaluate(v, env)) for k, v in expr.items())

    # --- Atoms return as-is ---
    return expr

"""Application engine for mlisp.

Centralizes function application so the evaluator and builtins share one set
of rules:
- Closures get a fresh frame whose outer link is the closure's defining
  environment (lexical scope), with parameters bound pairwise to arguments.
- Native functions are called with the caller's environment and the evaluated
  arguments, and validate arity and types themselves.
- Anything else cannot be applied.
"""

from mlisp import LispValue, EvaluatorFn
from mlisp.errors import MLispNotFound
from mlisp.types.environment import Environment
from mlisp.types.function import Closure, NativeFunction


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    Raises MLispArityError when the argument count does not match the
    parameter list.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a NativeFunction; anything else is not callable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, NativeFunction):
        return head(env, args)
    else:
        raise MLispNotFound(f"<function> {head}()")

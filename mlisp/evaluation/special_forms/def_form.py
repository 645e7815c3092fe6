from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispSyntaxError
from mlisp.types.environment import Environment
from mlisp.types.sequence import List
from mlisp.types.symbol import Symbol


def def_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise MLispSyntaxError(f"def! requires exactly 2 arguments: {List([Symbol('def!'), *tail])}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MLispSyntaxError(f"def! expects a symbol name, got {name}")
    value = evaluate_fn(val_expr, env)
    return env.bind(name, value)

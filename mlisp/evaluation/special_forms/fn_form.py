from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispSyntaxError
from mlisp.types.environment import Environment
from mlisp.types.function import Closure
from mlisp.types.sequence import Sequence
from mlisp.types.symbol import Symbol


def fn_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn* [params] body)
    Captures the defining environment; nothing is evaluated until the call.
    """
    if len(tail) != 2:
        raise MLispSyntaxError("fn* (args) (body)")

    params, body = tail
    if not isinstance(params, Sequence) or not all(isinstance(p, Symbol) for p in params):
        raise MLispSyntaxError(f"fn* parameters must be a list or vector of symbols, got {params}")

    return Closure(params, body, env)

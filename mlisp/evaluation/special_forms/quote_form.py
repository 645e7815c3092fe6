from mlisp import SExpression, LispValue, EvaluatorFn
from mlisp.errors import MLispSyntaxError
from mlisp.types.environment import Environment


def quote_form(
    tail: tuple[SExpression, ...], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MLispSyntaxError("quote expects exactly 1 argument")
    return tail[0]

from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.types.environment import Environment
from mlisp.types.nil import Nil


def do_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result

from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispSyntaxError
from mlisp.types.environment import Environment
from mlisp.types.nil import Nil


def if_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not 2 <= len(tail) <= 3:
        raise MLispSyntaxError("if (condition) (true_expr) [(false_expr)]")

    cond = evaluate_fn(tail[0], env)
    # Lisp truthiness: anything but nil and false is true, including 0 and 0.0
    if cond:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil

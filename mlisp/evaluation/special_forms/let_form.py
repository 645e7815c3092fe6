from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispSyntaxError
from mlisp.types.environment import Environment
from mlisp.types.sequence import Sequence
from mlisp.types.symbol import Symbol


def let_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* [name1 expr1 name2 expr2 ...] body)

    Bindings are evaluated in order in a new child frame, so each expression
    sees the names bound before it. The body is evaluated in that frame.
    """
    if len(tail) != 2:
        raise MLispSyntaxError("let* requires a binding list and a body")

    bindings, body = tail
    if not isinstance(bindings, Sequence):
        raise MLispSyntaxError(f"let* bindings must be a list or vector, got {bindings}")
    if len(bindings) % 2 != 0:
        raise MLispSyntaxError(f"let* bindings need an even number of forms: {bindings}")

    local_env = Environment(outer=env)
    items = bindings.items
    for name, expr in zip(items[0::2], items[1::2]):
        if not isinstance(name, Symbol):
            raise MLispSyntaxError(f"let* can only bind symbols, got {name}")
        local_env.bind(name, evaluate_fn(expr, local_env))
    return evaluate_fn(body, local_env)

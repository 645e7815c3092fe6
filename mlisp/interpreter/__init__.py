from __future__ import annotations

import logging
from typing import Optional

from mlisp import LispValue
from mlisp.builtin import build_root_environment
from mlisp.errors import MLispError
from mlisp.evaluation.evaluator import evaluate
from mlisp.printer import pr_str
from mlisp.reader.parser import lex, TokenStream
from mlisp.types.environment import Environment
from mlisp.types.nil import Nil
from mlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def format_error(error: BaseException) -> str:
    """One-line report for a failed evaluation, e.g. `[TypeError]: ...`."""
    kind = error.kind if isinstance(error, MLispError) else type(error).__name__
    return f"[{kind}]: {error}"


class Interpreter:
    """
    Orchestrates reading and evaluating mlisp code.

    The builtins live in a root frame; user definitions go into a session frame
    chained to it, so they persist across calls and may shadow builtins.
    """

    def __init__(self, namespace: Optional[dict[Symbol, LispValue]] = None):
        self.root: Environment = build_root_environment(namespace)
        self.env: Environment = Environment(outer=self.root)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value, or Nil if there are none."""
        stream = TokenStream(lex(code))
        result: LispValue = Nil
        while (expr := stream.parse_expr()) is not None:
            logger.debug("eval %s", pr_str(expr))
            result = evaluate(expr, self.env)
        return result

    def rep(self, line: str) -> str:
        """Read, evaluate and print one line; failures come back as an error report."""
        try:
            return pr_str(self.eval(line))
        except (MLispError, RecursionError) as ex:
            logger.debug("evaluation failed: %r", ex)
            return format_error(ex)


__all__ = ["Interpreter", "format_error"]

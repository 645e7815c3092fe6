# Core type aliases for mlisp's data model.
# Code and data share one representation: the reader produces trees of
# mlisp.types.Value and the evaluator consumes and produces them.
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` so the value modules can import them without
# an import cycle; they document intent only.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., LispValue]

from mlisp.reader.parser import read, read_all  # noqa: E402
from mlisp.evaluation.evaluator import evaluate  # noqa: E402
from mlisp.builtin import build_namespace, build_root_environment  # noqa: E402
from mlisp.printer import pr_str  # noqa: E402
from mlisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "read",
    "read_all",
    "evaluate",
    "build_namespace",
    "build_root_environment",
    "pr_str",
    "Interpreter",
]

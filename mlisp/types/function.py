"""Function values: builtins implemented in Python, and closures built by fn*."""

from __future__ import annotations

from typing import Callable

from mlisp import LispValue
from mlisp.types.environment import Environment
from mlisp.types.sequence import Sequence
from mlisp.types.value import Value

BuiltinFn = Callable[[Environment, list[LispValue]], LispValue]


class Function(Value):
    __slots__ = ()

    type_repr = "<Function>"

    def __hash__(self) -> int:
        return id(self)


class NativeFunction(Function):
    """A builtin; receives the caller's environment and the evaluated arguments."""

    __slots__ = ("fn", "name")

    def __init__(self, fn: BuiltinFn, name: str | None = None):
        self.fn = fn
        self.name = name or fn.__name__

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def render(self) -> str:
        return f"#<Function {self.name}>"


class Closure(Function):
    """A first-class fn* with parameters, body, and the environment it was defined in."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: Sequence, body: LispValue, env: Environment):
        self.params: Sequence = params
        self.body: LispValue = body
        # Strong reference: the defining frame lives as long as the closure
        self.env: Environment = env

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind the argument values to the parameters in a fresh frame over the closure env."""
        return Environment(outer=self.env, binds=list(self.params), exprs=args)

    def render(self) -> str:
        return f"#<Function (fn* {self.params.render()} {self.body.render()})>"

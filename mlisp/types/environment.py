"""Runtime environment for mlisp.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. A frame only ever writes to its own
bindings; lookups walk outwards until a binding is found.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from mlisp import LispValue
from mlisp.errors import MLispArityError, MLispNotFound, MLispTypeError
from mlisp.types.sequence import List
from mlisp.types.symbol import Symbol

# Marks the parameter that collects remaining arguments, as in (fn* [a & more] ...)
REST_MARKER = Symbol("&")


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        binds: Optional[Iterable[LispValue]] = None,
        exprs: Optional[Iterable[LispValue]] = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        if binds is not None or exprs is not None:
            self._bind_pairwise(list(binds or ()), list(exprs or ()))

    def _bind_pairwise(self, binds: list[LispValue], exprs: list[LispValue]) -> None:
        """Bind each parameter symbol to the argument at the same position.

        Raises MLispArityError (a TypeError kind) when the counts differ.
        """
        if REST_MARKER in binds:
            split = binds.index(REST_MARKER)
            if split != len(binds) - 2:
                raise MLispTypeError(f"'&' must be followed by exactly one parameter: {_seq_repr(binds)}")
            if len(exprs) < split:
                raise MLispArityError(
                    f"{_seq_repr(binds)} needs at least {split} args, but {len(exprs)} were given"
                )
            for name, value in zip(binds[:split], exprs[:split]):
                self.bind(name, value)
            self.bind(binds[-1], List(exprs[split:]))
            return

        if len(binds) != len(exprs):
            raise MLispArityError(
                f"{_seq_repr(binds)} and {_seq_repr(exprs)} must be the same size"
            )
        for name, value in zip(binds, exprs):
            self.bind(name, value)

    def bind(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame only.

        Raises MLispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MLispTypeError(f"Cannot bind {name} as a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises MLispNotFound if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise MLispNotFound(f"'{name}' not found")
        return env.vars[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.bind(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Frame sizes along the chain; frames can hold the whole builtin table."""
        sizes = []
        env: Optional[Environment] = self
        while env is not None:
            sizes.append(str(len(env.vars)))
            env = env.outer
        return f"<Environment chain: {' -> '.join(sizes)} bindings>"


def _seq_repr(values: list[LispValue]) -> str:
    return "(" + " ".join(str(v) for v in values) + ")"

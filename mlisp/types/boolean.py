from __future__ import annotations

from mlisp.types.value import Value


class Boolean(Value):
    __slots__ = ("value",)

    type_repr = "<Bool>"

    def __init__(self, value: bool):
        self.value = bool(value)

    @staticmethod
    def of(flag: object) -> Boolean:
        """Return the shared TRUE/FALSE instance for a Python truth value."""
        return TRUE if flag else FALSE

    def render(self) -> str:
        return "true" if self.value else "false"

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.render())


TRUE = Boolean(True)
FALSE = Boolean(False)

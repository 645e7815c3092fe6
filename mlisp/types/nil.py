from __future__ import annotations

from mlisp.types.value import Value


class NilType(Value):
    __slots__ = ()

    type_repr = "<Nil>"

    def render(self) -> str:
        return "nil"

    def __repr__(self):
        return "nil"

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash("nil")


Nil = NilType()

from __future__ import annotations
import sys

from mlisp.types.value import Value


class Symbol(Value):
    __slots__ = ("id",)

    type_repr = "<Symbol>"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def matches(self, name: str) -> bool:
        return self.id == name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def render(self) -> str:
        return self.id

    def __repr__(self):
        return f"Symbol({self.id!r})"

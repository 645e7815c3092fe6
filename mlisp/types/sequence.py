"""Container values: List, Vector and HashMap.

Containers are filled once, at construction, and expose no mutators
afterwards. Code that builds one incrementally collects the elements in a
plain Python list (or dict) and constructs the value at the end.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from mlisp.types.value import Value


class Sequence(Value):
    __slots__ = ("items",)

    type_repr = "<Sequence>"
    open_delim = "("
    close_delim = ")"

    def __init__(self, items: Iterable[Value] = ()):
        self.items: tuple[Value, ...] = tuple(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.items[index])
        return self.items[index]

    def is_empty(self) -> bool:
        return not self.items

    # List and Vector compare equal when their elements do.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or len(self.items) != len(other.items):
            return False
        return all(a == b for a, b in zip(self.items, other.items))

    def __hash__(self) -> int:
        return hash(self.items)

    def render(self) -> str:
        return self.open_delim + " ".join(x.render() for x in self.items) + self.close_delim


class List(Sequence):
    __slots__ = ()

    type_repr = "<List>"


class Vector(Sequence):
    __slots__ = ()

    type_repr = "<Vector>"
    open_delim = "["
    close_delim = "]"


class HashMap(Value):
    """Mapping from values to values; keys match by structural equality."""

    __slots__ = ("_data",)

    type_repr = "<HashMap>"

    def __init__(self, pairs: Mapping[Value, Value] | Iterable[tuple[Value, Value]] = ()):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        self._data: dict[Value, Value] = {}
        for key, value in pairs:
            self._data[key] = value

    def get(self, key: Value, default: Optional[Value] = None) -> Optional[Value]:
        return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._data)

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def items(self):
        return self._data.items()

    def _lookup(self, key: Value) -> Optional[Value]:
        # keys equal within EPSILON can hash apart
        if key in self._data:
            return self._data[key]
        found_key = next((k for k in self._data if k == key), None)
        return None if found_key is None else self._data[found_key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMap) or len(self) != len(other):
            return False
        for key, value in self._data.items():
            found = other._lookup(key)
            if found is None or not found == value:
                return False
        return True

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def render(self) -> str:
        return "{" + " ".join(f"{k.render()} {v.render()}" for k, v in self._data.items()) + "}"

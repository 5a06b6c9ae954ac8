"""
Two ways of walking a container.

- own-key enumeration: reflective enumeration of an object's own enumerable
  string keys, see `enumerate_own_keys`.
- iterator traversal: the collection's self-declared `keys()`, `values()` or
  `entries()` accessor, see `iterate_keys`.

Own-key enumeration only sees what is stored as own attributes (or positions
of a sequence). A collection that keeps its entries in private storage, such as
`AssociativeMap` or a builtin `dict`, enumerates as empty no matter how many
entries it holds.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from msgspec import Struct

from keywalk.ds import Record
from keywalk.errors import NotIterableError


T = TypeVar("T")


class KeySequence(Generic[T]):
    """
    A lazy, finite and restartable sequence.

    Every call to `iter` asks the factory for a fresh iterator, nothing is
    evaluated before that.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KeySequence):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def is_enumerable(name: str) -> bool:
    return not name.startswith("_")


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, Mapping)


def _own_keys(container: Any) -> Iterator[str]:
    if isinstance(container, Record):
        yield from vars(container)
    elif _is_sequence(container):
        for idx in range(len(container)):
            yield str(idx)
    elif isinstance(container, Struct):
        yield from filter(is_enumerable, container.__struct_fields__)
    else:
        try:
            attrs = vars(container)
        except TypeError:  # no instance __dict__, nothing is owned
            return
        for name in attrs:
            if isinstance(name, str) and is_enumerable(name):
                yield name


def enumerate_own_keys(container: Any) -> KeySequence[str]:
    """
    Enumerate the own enumerable string keys of `container`.

    - Record: every inserted key, in insertion order
    - Sequence: stringified indices `"0"` to `"n-1"`
    - Struct: declared field names
    - other objects: public instance attribute names
    - AssociativeMap, dict and other objects without own attributes: nothing

    Never raises.
    """
    return KeySequence(lambda: _own_keys(container))


def _accessor(collection: Any, *names: str) -> Callable[[], Iterable[Any]]:
    for name in names:
        method = getattr(collection, name, None)
        if callable(method):
            return method
    raise NotIterableError(collection, names[0])


def iterate_keys(collection: Any) -> KeySequence[Any]:
    "Walk `collection` through its own `keys()` iterator accessor."
    keys = _accessor(collection, "keys")
    return KeySequence(lambda: iter(keys()))


def iterate_values(collection: Any) -> KeySequence[Any]:
    values = _accessor(collection, "values")
    return KeySequence(lambda: iter(values()))


def iterate_entries(collection: Any) -> KeySequence[tuple[Any, Any]]:
    entries = _accessor(collection, "entries", "items")
    return KeySequence(lambda: (tuple(pair) for pair in entries()))

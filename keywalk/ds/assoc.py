from collections.abc import ItemsView, Iterator, KeysView, MutableMapping, ValuesView
from typing import Any, Iterable, TypeVar, overload

from typing_extensions import Self

_NOT_FOUND: Any = object()

K = TypeVar("K")
V = TypeVar("V")


class AssociativeMap(MutableMapping[K, V]):
    """
    An insertion-ordered, key-unique map.

    Entries live in a private slot, so the map has no instance ``__dict__``
    and reflective attribute enumeration sees none of them. They are reached
    through ``keys()``, ``values()``, ``entries()`` and the accessor methods.

    Re-inserting an existing key replaces its value in place: the key keeps
    its original position and no second entry is created.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[tuple[K, V]] = ()):
        self._entries: dict[K, V] = {}
        for key, value in entries:
            self._entries[key] = value

    def set(self, key: K, value: V) -> Self:
        self._entries[key] = value
        return self

    @overload
    def get(self, key: K) -> V | None: ...
    @overload
    def get(self, key: K, default: V) -> V: ...

    def get(self, key: K, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def has(self, key: K) -> bool:
        return key in self._entries

    def delete(self, key: K) -> bool:
        "remove `key` if present, return whether an entry was removed"
        return self._entries.pop(key, _NOT_FOUND) is not _NOT_FOUND

    def clear(self) -> None:
        self._entries.clear()

    @property
    def size(self) -> int:
        return len(self._entries)

    def keys(self) -> KeysView[K]:
        return self._entries.keys()

    def values(self) -> ValuesView[V]:
        return self._entries.values()

    def items(self) -> ItemsView[K, V]:
        return self._entries.items()

    entries = items

    def __getitem__(self, key: K) -> V:
        return self._entries[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._entries[key] = value

    def __delitem__(self, key: K) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r} => {v!r}" for k, v in self._entries.items())
        return f"{type(self).__name__}({{{body}}})"

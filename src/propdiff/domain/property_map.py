"""Immutable string-to-string property collections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, KeysView, Mapping
from typing import TYPE_CHECKING, TypeAlias

from .errors import InvalidPropertyError

if TYPE_CHECKING:
    PropertyEntries: TypeAlias = Mapping[str, str] | Iterable[tuple[str, str]]


def _validate(key: object, value: object) -> None:
    if not isinstance(key, str):
        raise InvalidPropertyError(f"Property key must be a string, got {type(key).__name__}")
    if not key:
        raise InvalidPropertyError("Property key must not be empty")
    if not isinstance(value, str):
        raise InvalidPropertyError(
            f"Value for property {key!r} must be a string, got {type(value).__name__}"
        )


class PropertyMap(Mapping[str, str]):
    """A property collection: unique non-empty keys mapped to string values.

    Maps are immutable once built. Insertion order is preserved so output is
    deterministic, but equality compares key/value content only.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: PropertyEntries | None = None) -> None:
        store: dict[str, str] = {}
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in pairs:
                _validate(key, value)
                store[key] = value
        self._entries = store

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        return self._entries.get(key, default)

    def keys(self) -> KeysView[str]:
        return self._entries.keys()

    def to_dict(self) -> dict[str, str]:
        """Return a mutable copy of the entries."""

        return dict(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class PropertyMapBuilder:
    """Collect entries for a new :class:`PropertyMap`."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def put(self, key: str, value: str) -> None:
        _validate(key, value)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    def build(self) -> PropertyMap:
        return PropertyMap(self._entries)

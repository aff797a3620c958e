"""Port for producing property maps from external sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from propdiff.domain.property_map import PropertyMap


@runtime_checkable
class PropertyLoader(Protocol):
    """Callable port that loads one property collection.

    Implementations raise :class:`~propdiff.domain.errors.LoadError` when the
    source is missing, unreadable, or malformed; they never return a partial map.
    """

    def __call__(self, source: str) -> PropertyMap: ...


__all__ = ["PropertyLoader"]

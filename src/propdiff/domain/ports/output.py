"""Port for emitting reconciliation results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from propdiff.domain.property_map import PropertyMap


@runtime_checkable
class PropertySink(Protocol):
    """Unit-of-work boundary around the results of one reconciliation run.

    Calling the sink stages one result under ``name`` with a header ``comment``;
    nothing reaches the destination until :meth:`commit`. Leaving the ``with``
    block on an exception rolls back everything staged or written so far.
    Implementations raise :class:`~propdiff.domain.errors.StoreError` when a
    result cannot be encoded or a destination cannot be written.
    """

    def __call__(self, properties: PropertyMap, *, name: str, comment: str) -> None: ...

    def __enter__(self) -> PropertySink: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


__all__ = ["PropertySink"]

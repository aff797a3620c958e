"""Error types raised at the edges of the reconciliation domain.

The engine itself is total over valid maps; these errors belong to loading and
emitting property collections.
"""

from __future__ import annotations


class PropDiffError(RuntimeError):
    """Base class for propdiff failures surfaced to the user."""


class InvalidPropertyError(ValueError):
    """Raised when a key or value cannot be stored in a property map."""


class LoadError(PropDiffError):
    """Raised when a property collection could not be produced from its source."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"when opening {source}: {reason}")
        self.source = source
        self.reason = reason


class PropertyFormatError(LoadError):
    """Raised when a source contains malformed ``key=value`` content."""

    def __init__(self, source: str, reason: str, *, line: int | None = None) -> None:
        location = f"line {line}: {reason}" if line is not None else reason
        super().__init__(source, location)
        self.line = line


class StoreError(PropDiffError):
    """Raised when a reconciliation result could not be written."""

    def __init__(self, destination: str, reason: str) -> None:
        super().__init__(f"when saving to {destination}: {reason}")
        self.destination = destination
        self.reason = reason

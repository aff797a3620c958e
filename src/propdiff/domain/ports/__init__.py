"""Domain port definitions for adapters."""

from __future__ import annotations

from .loading import PropertyLoader
from .output import PropertySink

__all__ = [
    "PropertyLoader",
    "PropertySink",
]

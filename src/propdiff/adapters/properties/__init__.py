"""Adapters for the ``.properties`` text format."""

from __future__ import annotations

from .codec import dump_properties, escape_key, escape_value, parse_properties
from .loader import FilePropertyLoader
from .sinks import FileSink, StreamSink, build_sink

__all__ = [
    "FilePropertyLoader",
    "FileSink",
    "StreamSink",
    "build_sink",
    "dump_properties",
    "escape_key",
    "escape_value",
    "parse_properties",
]

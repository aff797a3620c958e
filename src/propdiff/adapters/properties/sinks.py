"""Destinations for reconciliation results: files or a console stream.

Sinks follow the unit-of-work shape: calling a sink stages a rendered result,
``commit`` writes everything staged, and leaving the ``with`` block on an
exception rolls back whatever was staged or already written.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Self, TextIO

from propdiff.config.output import DEFAULT_ENCODING, OutputConfig
from propdiff.domain.errors import StoreError

from .codec import dump_properties

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from propdiff.domain.ports.output import PropertySink
    from propdiff.domain.property_map import PropertyMap

log = getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _stdout() -> TextIO:
    return sys.stdout


def _snapshot(path: Path) -> bytes | None:
    """Current content of ``path``, or ``None`` when there is no regular file to restore."""

    return path.read_bytes() if path.is_file() else None


@dataclass(slots=True, kw_only=True)
class _RenderingSink(ABC):
    line_separator: str = "\n"
    timestamp: bool = True
    escape_unicode: bool = True
    clock: Callable[[], datetime] = _local_now

    def render(self, properties: PropertyMap, *, comment: str) -> str:
        return dump_properties(
            properties,
            comment=comment,
            timestamp=self.clock() if self.timestamp else None,
            line_separator=self.line_separator,
            escape_unicode=self.escape_unicode,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    @abstractmethod
    def __call__(self, properties: PropertyMap, *, name: str, comment: str) -> None: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...


@dataclass(slots=True, kw_only=True)
class FileSink(_RenderingSink):
    """Write each result to ``<prefix><name>``.

    Results are encoded when staged, so an unencodable result fails before any
    file is touched. Parent directories are not created; a missing directory is
    a store failure. A failed commit restores files it overwrote and removes
    files it created.
    """

    prefix: str = ""
    encoding: str = DEFAULT_ENCODING
    _staged: list[tuple[Path, bytes, int]] = field(
        default_factory=list["tuple[Path, bytes, int]"], init=False, repr=False
    )
    _written: list[tuple[Path, bytes | None]] = field(
        default_factory=list["tuple[Path, bytes | None]"], init=False, repr=False
    )

    def path_for(self, name: str) -> Path:
        return Path(f"{self.prefix}{name}")

    def __call__(self, properties: PropertyMap, *, name: str, comment: str) -> None:
        path = self.path_for(name)
        text = self.render(properties, comment=comment)
        try:
            data = text.encode(self.encoding)
        except UnicodeEncodeError as exc:
            raise StoreError(str(path), f"cannot encode as {self.encoding}: {exc.reason}") from exc
        self._staged.append((path, data, len(properties)))
        log.debug("Staged %d properties for %s", len(properties), path)

    def commit(self) -> None:
        staged, self._staged = self._staged, []
        for path, data, count in staged:
            try:
                self._written.append((path, _snapshot(path)))
                path.write_bytes(data)
            except OSError as exc:
                self.rollback()
                raise StoreError(str(path), exc.strerror or str(exc)) from exc
            log.info("Wrote %d properties to %s", count, path)
        self._written.clear()

    def rollback(self) -> None:
        self._staged.clear()
        written, self._written = self._written, []
        for path, previous in reversed(written):
            try:
                if previous is not None:
                    path.write_bytes(previous)
                elif path.is_file():
                    path.unlink()
                else:
                    continue
            except OSError:
                log.warning("Could not roll back %s", path, exc_info=True)
                continue
            log.info("Rolled back %s", path)


@dataclass(slots=True, kw_only=True)
class StreamSink(_RenderingSink):
    """Write each result to a text stream, separated by a blank line."""

    stream: TextIO = field(default_factory=_stdout)
    _staged: list[str] = field(default_factory=list["str"], init=False, repr=False)

    def __call__(self, properties: PropertyMap, *, name: str, comment: str) -> None:
        self._staged.append(self.render(properties, comment=comment) + self.line_separator)
        log.debug("Staged %d properties for %s", len(properties), name)

    def commit(self) -> None:
        staged, self._staged = self._staged, []
        try:
            self.stream.write("".join(staged))
            self.stream.flush()
        except OSError as exc:
            raise StoreError(getattr(self.stream, "name", "<stream>"), str(exc)) from exc
        log.debug("Streamed %d results", len(staged))

    def rollback(self) -> None:
        self._staged.clear()


def build_sink(config: OutputConfig, *, stream: TextIO | None = None) -> PropertySink:
    """Return the sink selected by ``config``: console for prefix ``-``, files otherwise."""

    if config.to_console:
        return StreamSink(
            stream=stream if stream is not None else sys.stdout,
            line_separator=config.line_separator,
            timestamp=config.timestamp,
        )
    return FileSink(
        prefix=config.prefix,
        encoding=config.encoding,
        line_separator=config.line_separator,
        timestamp=config.timestamp,
    )

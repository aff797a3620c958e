"""Output configuration for reconciliation results."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
from typing import Final

from .env import read_env, read_env_flag
from .errors import ConfigurationError

CONSOLE_PREFIX: Final[str] = "-"
DEFAULT_ENCODING: Final[str] = "latin-1"
LINE_SEPARATORS: Final[dict[str, str]] = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Where and how reconciliation results are written.

    ``prefix`` is prepended to each result file name, so it can be a directory
    (``out/``), a file name stem (``run1-``) or both. The special prefix ``-``
    streams every result to the console instead.
    """

    prefix: str = ""
    encoding: str = DEFAULT_ENCODING
    line_separator: str = LINE_SEPARATORS["lf"]
    timestamp: bool = True

    @property
    def to_console(self) -> bool:
        return self.prefix == CONSOLE_PREFIX

    def with_overrides(
        self,
        *,
        prefix: str | None = None,
        encoding: str | None = None,
    ) -> OutputConfig:
        config = self
        if prefix is not None:
            config = replace(config, prefix=prefix)
        if encoding is not None:
            config = replace(config, encoding=_validate_encoding(encoding))
        return config


def _validate_encoding(name: str) -> str:
    try:
        return codecs.lookup(name).name
    except LookupError as exc:
        raise ConfigurationError(f"Unknown encoding: {name}") from exc


def _parse_line_separator(value: str) -> str:
    try:
        return LINE_SEPARATORS[value.strip().lower()]
    except KeyError as exc:
        choices = ", ".join(LINE_SEPARATORS)
        raise ConfigurationError(
            f"Invalid line separator {value!r} (expected one of: {choices})"
        ) from exc


def get_output_config() -> OutputConfig:
    return OutputConfig(
        prefix=read_env("PROPDIFF_OUTPUT_PREFIX", ""),
        encoding=_validate_encoding(read_env("PROPDIFF_ENCODING", DEFAULT_ENCODING)),
        line_separator=_parse_line_separator(read_env("PROPDIFF_LINE_SEPARATOR", "lf")),
        timestamp=read_env_flag("PROPDIFF_TIMESTAMP", default=True),
    )

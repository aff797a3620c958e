"""Shared logging helpers for propdiff."""

from __future__ import annotations

import logging

from .env import read_env
from .errors import ConfigurationError


def get_log_level() -> int:
    """Resolve the default log level from ``PROPDIFF_LOG_LEVEL``."""

    name = read_env("PROPDIFF_LOG_LEVEL", "INFO").strip().upper()
    try:
        return logging.getLevelNamesMapping()[name]
    except KeyError as exc:
        raise ConfigurationError(f"Invalid log level: {name}") from exc


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``PROPDIFF_LOG_LEVEL`` (INFO when unset) and records go to stderr so
    results streamed to stdout stay parseable. Pass ``force=True`` to reconfigure
    during tests or specialised entry points.
    """

    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )

"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env, read_env_flag
from .errors import ConfigurationError
from .logging import configure_logging, get_log_level
from .output import CONSOLE_PREFIX, LINE_SEPARATORS, OutputConfig, get_output_config

__all__ = [
    "CONSOLE_PREFIX",
    "LINE_SEPARATORS",
    "ConfigurationError",
    "OutputConfig",
    "configure_logging",
    "get_log_level",
    "get_output_config",
    "read_env",
    "read_env_flag",
]

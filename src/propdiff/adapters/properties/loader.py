"""File-system loader producing property maps."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from propdiff.config.output import DEFAULT_ENCODING
from propdiff.domain.errors import LoadError

from .codec import parse_properties

if TYPE_CHECKING:
    from propdiff.domain.property_map import PropertyMap

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilePropertyLoader:
    """Load a ``.properties`` file by path.

    Every failure (missing file, permission denied, undecodable bytes, malformed
    content) surfaces as :class:`LoadError`; a partially read map is never returned.
    """

    encoding: str = DEFAULT_ENCODING

    def __call__(self, source: str) -> PropertyMap:
        path = Path(source)
        try:
            text = path.read_text(encoding=self.encoding)
        except FileNotFoundError as exc:
            raise LoadError(source, "file not found") from exc
        except PermissionError as exc:
            raise LoadError(source, "permission denied") from exc
        except IsADirectoryError as exc:
            raise LoadError(source, "is a directory") from exc
        except UnicodeDecodeError as exc:
            raise LoadError(source, f"cannot decode as {self.encoding}: {exc.reason}") from exc
        except OSError as exc:
            raise LoadError(source, exc.strerror or str(exc)) from exc

        properties = parse_properties(text, source=source)
        log.debug("Loaded %d properties from %s", len(properties), source)
        return properties

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from propdiff.domain.property_map import PropertyMap

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_propdiff_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PROPDIFF_OUTPUT_PREFIX",
        "PROPDIFF_ENCODING",
        "PROPDIFF_LINE_SEPARATOR",
        "PROPDIFF_TIMESTAMP",
        "PROPDIFF_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_map() -> PropertyMap:
    return PropertyMap({"host": "a", "port": "80", "mode": "x"})


@pytest.fixture
def override_map() -> PropertyMap:
    return PropertyMap({"host": "b", "timeout": "30", "mode": "x"})


@pytest.fixture
def write_properties(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="latin-1")
        return path

    return _write

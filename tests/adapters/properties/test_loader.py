from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from propdiff.adapters.properties import FilePropertyLoader
from propdiff.domain.errors import LoadError, PropertyFormatError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_loader_reads_properties_file(write_properties: Callable[[str, str], Path]) -> None:
    path = write_properties("p1.properties", "# defaults\nhost=a\nport=80\n")

    properties = FilePropertyLoader()(str(path))

    assert properties == {"host": "a", "port": "80"}


def test_loader_defaults_to_latin1(tmp_path: Path) -> None:
    path = tmp_path / "latin.properties"
    path.write_bytes("name=caf\u00e9\n".encode("latin-1"))

    assert FilePropertyLoader()(str(path)) == {"name": "café"}


def test_loader_honours_encoding(tmp_path: Path) -> None:
    path = tmp_path / "utf8.properties"
    path.write_text("name=caf\u00e9\n", encoding="utf-8")

    assert FilePropertyLoader(encoding="utf-8")(str(path)) == {"name": "café"}


def test_loader_reports_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.properties"

    with pytest.raises(LoadError, match="file not found") as excinfo:
        FilePropertyLoader()(str(missing))

    assert excinfo.value.source == str(missing)


def test_loader_reports_directory(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        FilePropertyLoader()(str(tmp_path))


@pytest.mark.skipif(
    os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="file permissions are not enforced",
)
def test_loader_reports_permission_denied(write_properties: Callable[[str, str], Path]) -> None:
    path = write_properties("secret.properties", "a=1\n")
    path.chmod(0)

    try:
        with pytest.raises(LoadError, match="permission denied"):
            FilePropertyLoader()(str(path))
    finally:
        path.chmod(0o600)


def test_loader_reports_undecodable_content(tmp_path: Path) -> None:
    path = tmp_path / "binary.properties"
    path.write_bytes(b"a=\xff\xfe\n")

    with pytest.raises(LoadError, match="cannot decode as utf-8"):
        FilePropertyLoader(encoding="utf-8")(str(path))


def test_loader_reports_malformed_content(
    write_properties: Callable[[str, str], Path],
) -> None:
    path = write_properties("bad.properties", "ok=1\nbad=\\uZZZZ\n")

    with pytest.raises(PropertyFormatError) as excinfo:
        FilePropertyLoader()(str(path))

    assert excinfo.value.line == 2
    assert str(path) in str(excinfo.value)

"""Catalogue of the six reconciliation operations.

Each operation knows its command-line flag letter, the file name its result is
stored under, and the header comment written above the stored result.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class Operation(StrEnum):
    """One derived collection produced from a ``base``/``override`` pair."""

    INTERSECT_EQUAL = "intersect_equal"
    INTERSECT_DIFF = "intersect_diff"
    COMMON = "common"
    ONLY_IN_OVERRIDE = "only_in_override"
    ONLY_IN_BASE = "only_in_base"
    UNION = "union"

    @property
    def flag(self) -> str:
        return _FLAGS[self]

    @property
    def filename(self) -> str:
        return _FILENAMES[self]

    def describe(self, base_name: str, override_name: str) -> str:
        """Return the header comment stored above this operation's result."""

        return _DESCRIPTIONS[self].format(base=base_name, override=override_name)

    @classmethod
    def ordered(cls) -> tuple[Operation, ...]:
        """All operations in the order a full run emits them."""

        return tuple(cls)

    @classmethod
    def from_flags(cls, flags: Iterable[str]) -> tuple[Operation, ...]:
        """Select operations by flag letter; no letters selects every operation.

        Unknown letters raise ``ValueError``. The result follows :meth:`ordered`,
        not the order of ``flags``.
        """

        letters = {letter.lower() for letter in flags}
        if not letters:
            return cls.ordered()
        known = {operation.flag for operation in cls}
        unknown = sorted(letters - known)
        if unknown:
            raise ValueError(f"Unknown operation flag(s): {', '.join(unknown)}")
        return tuple(operation for operation in cls.ordered() if operation.flag in letters)


_FLAGS: dict[Operation, str] = {
    Operation.INTERSECT_EQUAL: "e",
    Operation.INTERSECT_DIFF: "d",
    Operation.COMMON: "c",
    Operation.ONLY_IN_OVERRIDE: "2",
    Operation.ONLY_IN_BASE: "1",
    Operation.UNION: "u",
}

_FILENAMES: dict[Operation, str] = {
    Operation.INTERSECT_EQUAL: "intersectEqual.properties",
    Operation.INTERSECT_DIFF: "intersectDiff.properties",
    Operation.COMMON: "common.properties",
    Operation.ONLY_IN_OVERRIDE: "onlyInP2.properties",
    Operation.ONLY_IN_BASE: "onlyInP1.properties",
    Operation.UNION: "union.properties",
}

_DESCRIPTIONS: dict[Operation, str] = {
    Operation.INTERSECT_EQUAL: (
        " intersection showing values that are equal for {base}  and  {override}"
    ),
    Operation.INTERSECT_DIFF: (
        " intersection showing properties in {override} that override property values in {base}"
    ),
    Operation.COMMON: (
        " intersection of {base}  and  {override} where the latter takes precedence"
        " if values differ."
    ),
    Operation.ONLY_IN_OVERRIDE: " properties in {override} that are not present in {base}",
    Operation.ONLY_IN_BASE: " properties in {base} that are not present in {override}",
    Operation.UNION: (
        " union of {base} and {override} where the latter has precedence if values differ"
    ),
}

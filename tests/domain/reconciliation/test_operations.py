from __future__ import annotations

import pytest

from propdiff.domain.reconciliation import Operation


def test_ordered_follows_emission_order() -> None:
    assert [operation.flag for operation in Operation.ordered()] == ["e", "d", "c", "2", "1", "u"]


def test_filenames_match_result_files() -> None:
    assert {operation.filename for operation in Operation} == {
        "intersectEqual.properties",
        "intersectDiff.properties",
        "common.properties",
        "onlyInP2.properties",
        "onlyInP1.properties",
        "union.properties",
    }


def test_from_flags_without_letters_selects_everything() -> None:
    assert Operation.from_flags("") == Operation.ordered()


def test_from_flags_keeps_emission_order_and_ignores_case() -> None:
    assert Operation.from_flags("UC1") == (
        Operation.COMMON,
        Operation.ONLY_IN_BASE,
        Operation.UNION,
    )


def test_from_flags_rejects_unknown_letters() -> None:
    with pytest.raises(ValueError, match="x, z"):
        Operation.from_flags("zcx")


def test_describe_names_both_sources() -> None:
    assert Operation.UNION.describe("p1.properties", "p2.properties") == (
        " union of p1.properties and p2.properties where the latter has precedence"
        " if values differ"
    )
    assert Operation.ONLY_IN_BASE.describe("p1", "p2") == (
        " properties in p1 that are not present in p2"
    )

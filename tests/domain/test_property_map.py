from __future__ import annotations

import pytest

from propdiff.domain.errors import InvalidPropertyError
from propdiff.domain.property_map import PropertyMap, PropertyMapBuilder


def test_property_map_lookup_and_absence() -> None:
    properties = PropertyMap({"host": "a", "empty": ""})

    assert properties.get("host") == "a"
    assert properties.get("empty") == ""
    assert properties.get("missing") is None
    assert properties.get("missing", "fallback") == "fallback"
    assert "empty" in properties
    assert "missing" not in properties


def test_property_map_keys_are_stable_and_ordered() -> None:
    properties = PropertyMap([("b", "1"), ("a", "2"), ("c", "3")])

    assert list(properties.keys()) == ["b", "a", "c"]
    assert list(properties.keys()) == list(properties.keys())


def test_property_map_duplicate_pairs_keep_last_value_first_position() -> None:
    properties = PropertyMap([("a", "1"), ("b", "2"), ("a", "3")])

    assert list(properties.items()) == [("a", "3"), ("b", "2")]


def test_property_map_equality_ignores_order() -> None:
    assert PropertyMap({"a": "1", "b": "2"}) == PropertyMap({"b": "2", "a": "1"})
    assert PropertyMap({"a": "1"}) == {"a": "1"}
    assert PropertyMap({"a": "1"}) != PropertyMap({"a": "2"})
    assert PropertyMap() == PropertyMap([])


def test_property_map_copies_its_input() -> None:
    source = {"a": "1"}
    properties = PropertyMap(source)

    source["a"] = "changed"
    source["b"] = "2"

    assert properties == {"a": "1"}


def test_property_map_to_dict_returns_independent_copy() -> None:
    properties = PropertyMap({"a": "1"})

    copy = properties.to_dict()
    copy["a"] = "changed"

    assert properties["a"] == "1"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("", "value"),
        (1, "value"),
        ("key", None),
        ("key", 2),
    ],
)
def test_property_map_rejects_invalid_entries(key: object, value: object) -> None:
    with pytest.raises(InvalidPropertyError):
        PropertyMap([(key, value)])  # type: ignore[list-item]


def test_builder_put_does_not_leak_into_built_maps() -> None:
    builder = PropertyMapBuilder()
    builder.put("a", "1")
    first = builder.build()

    builder.put("b", "2")
    second = builder.build()

    assert first == {"a": "1"}
    assert second == {"a": "1", "b": "2"}
    assert len(builder) == 2


def test_builder_validates_entries() -> None:
    builder = PropertyMapBuilder()

    with pytest.raises(InvalidPropertyError, match="must not be empty"):
        builder.put("", "value")

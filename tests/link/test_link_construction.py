# topmark:header:start
#
#   project      : HalLink
#   file         : test_link_construction.py
#   file_relpath : tests/link/test_link_construction.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Tests for `Link` construction and read accessors."""

from __future__ import annotations

from typing import Any

import pytest

from hallink import EvolvableLinkLike, Link, LinkConstructionError, LinkError, LinkLike
from tests.conftest import parametrize


def test_requires_relation() -> None:
    """Omitting the relation argument is an arity error."""
    with pytest.raises(TypeError):
        Link()  # type: ignore[call-arg]


def test_can_construct_link_with_relation() -> None:
    """A relation alone yields empty href, not templated, no attributes."""
    link = Link("self")

    assert isinstance(link, LinkLike)
    assert isinstance(link, EvolvableLinkLike)
    assert link.get_rels() == ["self"]
    assert link.get_href() == ""
    assert link.is_templated() is False
    assert link.get_attributes() == {}


def test_can_construct_link_with_relation_and_uri() -> None:
    """The href is stored verbatim."""
    link = Link("self", "https://example.com/api/link")

    assert link.get_rels() == ["self"]
    assert link.get_href() == "https://example.com/api/link"


def test_can_construct_link_with_relation_and_templated_flag() -> None:
    """A link may be templated with an empty href."""
    link = Link("self", "", True)

    assert link.get_rels() == ["self"]
    assert link.get_href() == ""
    assert link.is_templated() is True


def test_can_construct_link_with_relation_and_attributes() -> None:
    """Attributes passed at construction are readable unchanged."""
    link = Link("self", "", False, {"foo": "bar"})

    assert link.get_rels() == ["self"]
    assert link.get_attributes() == {"foo": "bar"}


def test_can_construct_fully_populated_link() -> None:
    """All four fields read back exactly as given."""
    link = Link(
        ["self", "link"],
        "https://example.com/api/link{/id}",
        True,
        {"foo": "bar"},
    )

    assert link.get_rels() == ["self", "link"]
    assert link.get_href() == "https://example.com/api/link{/id}"
    assert link.is_templated() is True
    assert link.get_attributes() == {"foo": "bar"}


def test_keyword_arguments() -> None:
    """Optional fields may be passed by keyword."""
    link = Link("item", href="/orders/1", attributes={"title": "Order 1"})

    assert link.get_href() == "/orders/1"
    assert link.is_templated() is False
    assert link.get_attributes() == {"title": "Order 1"}


def test_duplicate_relations_are_kept() -> None:
    """Relations are stored as given, without de-duplication."""
    link = Link(("self", "item", "self"))

    assert link.get_rels() == ["self", "item", "self"]


@parametrize(
    "relations",
    [[], (), "", ["self", ""], ["self", 1], None, 1, {"rel": "self"}],
    ids=[
        "empty-list",
        "empty-tuple",
        "empty-string",
        "empty-entry",
        "int-entry",
        "none",
        "int",
        "dict",
    ],
)
def test_rejects_unusable_relations(relations: Any) -> None:
    """A link always has at least one non-empty string relation."""
    with pytest.raises(LinkConstructionError):
        Link(relations)


def test_construction_error_is_a_type_error() -> None:
    """Construction errors share the programming-error class of arity errors."""
    with pytest.raises(TypeError):
        Link([])
    assert issubclass(LinkConstructionError, LinkError)


@parametrize("href", [None, 1, b"/x"], ids=["none", "int", "bytes"])
def test_rejects_non_string_href(href: Any) -> None:
    """The constructor only accepts a string href."""
    with pytest.raises(LinkConstructionError):
        Link("self", href)


def test_rejects_non_mapping_attributes() -> None:
    """Attributes must be a mapping."""
    with pytest.raises(LinkConstructionError):
        Link("self", "", False, [("foo", "bar")])  # type: ignore[arg-type]


def test_construction_does_not_validate_attribute_values() -> None:
    """Values passed at construction are stored without validation."""
    link = Link("self", attributes={"count": 3, "meta": None})  # type: ignore[dict-item]

    assert link.get_attributes() == {"count": 3, "meta": None}


def test_constructor_copies_inputs() -> None:
    """Mutating the caller's containers after construction does not affect the link."""
    rels: list[str] = ["self"]
    hreflang: list[str] = ["en"]
    attributes: dict[str, Any] = {"hreflang": hreflang}
    link = Link(rels, attributes=attributes)

    rels.append("item")
    hreflang.append("fr")
    attributes["title"] = "changed"

    assert link.get_rels() == ["self"]
    assert link.get_attributes() == {"hreflang": ["en"]}


def test_nested_attribute_values_are_not_aliased() -> None:
    """Containers nested in attribute values are copied in and out."""
    meta: dict[str, Any] = {"a": 1}
    nested: list[Any] = [["x"]]
    tags: set[str] = {"a"}
    link = Link("self", attributes={"meta": meta, "nested": nested, "tags": tags})

    meta["b"] = 2
    nested[0].append("y")
    tags.add("b")
    attributes = link.get_attributes()
    attributes["meta"]["c"] = 3  # type: ignore[index]
    attributes["nested"][0].append("z")  # type: ignore[index,union-attr]

    assert link.get_attributes() == {"meta": {"a": 1}, "nested": [["x"]], "tags": {"a"}}


def test_link_with_nested_attributes_is_hashable() -> None:
    """Nested mappings and lists are frozen, so the link can be hashed."""
    attributes: dict[str, Any] = {"meta": {"a": [1, 2]}}
    link = Link("self", attributes=attributes)

    assert hash(link) == hash(Link("self", attributes=attributes))


@parametrize("name", [1, "", None, ("a",)], ids=["int", "empty", "none", "tuple"])
def test_rejects_invalid_attribute_names(name: Any) -> None:
    """Attribute names must be non-empty strings; they are never coerced."""
    with pytest.raises(LinkConstructionError):
        Link("self", attributes={name: "x"})


def test_accessors_return_independent_copies() -> None:
    """Changing what an accessor returned never changes the link."""
    link = Link(["self"], attributes={"hreflang": ["en", "de"]})

    link.get_rels().append("item")
    attributes = link.get_attributes()
    attributes["title"] = "x"
    hreflang = attributes["hreflang"]
    assert isinstance(hreflang, list)
    hreflang.append("fr")

    assert link.get_rels() == ["self"]
    assert link.get_attributes() == {"hreflang": ["en", "de"]}


def test_templated_flag_is_coerced_to_bool() -> None:
    """Truthy values become ``True``."""
    link = Link("self", "/x{?q}", 1)  # type: ignore[arg-type]

    assert link.is_templated() is True


def test_as_collection_attribute_name() -> None:
    """The reserved collection attribute name is exposed on the class."""
    link = Link("item").with_attribute(Link.AS_COLLECTION, True)

    assert Link.AS_COLLECTION == "__FORCE_COLLECTION__"
    assert link.get_attributes() == {"__FORCE_COLLECTION__": True}

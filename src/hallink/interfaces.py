# topmark:header:start
#
#   project      : HalLink
#   file         : interfaces.py
#   file_relpath : src/hallink/interfaces.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Structural link contracts.

These Protocols describe links and link providers by shape, so a serialization
layer can accept any conforming object without depending on
[`Link`][hallink.link.Link] or [`LinkCollection`][hallink.collection.LinkCollection].

Contracts:
    - `LinkLike`: read side of a link (relations, target, templated, attributes).
    - `EvolvableLinkLike`: `LinkLike` plus non-destructive ``with_*``/``without_*``
      mutators returning a link of the same kind.
    - `LinkProviderLike`: read side of a container of links.
    - `EvolvableLinkProviderLike`: `LinkProviderLike` plus ``with_link``/``without_link``.

All Protocols are runtime-checkable; ``isinstance`` only verifies that the
methods exist, not their signatures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from hallink.types import AttributeValue, HrefLike

_L = TypeVar("_L", bound="EvolvableLinkLike")
_P = TypeVar("_P", bound="EvolvableLinkProviderLike")


@runtime_checkable
class LinkLike(Protocol):
    """Readable hypermedia link."""

    def get_rels(self) -> list[str]:
        """Return the relation types of the link, in order."""
        ...

    def get_href(self) -> str:
        """Return the target of the link; empty when there is none."""
        ...

    def is_templated(self) -> bool:
        """Return whether the target is a URI Template."""
        ...

    def get_attributes(self) -> dict[str, AttributeValue]:
        """Return the auxiliary attributes of the link."""
        ...


@runtime_checkable
class EvolvableLinkLike(LinkLike, Protocol):
    """Link whose mutators return a new link instead of changing the receiver."""

    def with_rel(self: _L, relation: object) -> _L:
        """Return a link that also carries ``relation``."""
        ...

    def without_rel(self: _L, relation: object) -> _L:
        """Return a link without the first occurrence of ``relation``."""
        ...

    def with_href(self: _L, uri: HrefLike) -> _L:
        """Return a link pointing at ``uri``."""
        ...

    def with_attribute(self: _L, name: object, value: object) -> _L:
        """Return a link with attribute ``name`` set to ``value``."""
        ...

    def without_attribute(self: _L, name: object) -> _L:
        """Return a link without attribute ``name``."""
        ...


@runtime_checkable
class LinkProviderLike(Protocol):
    """Readable container of links."""

    def get_links(self) -> list[LinkLike]:
        """Return all links, in insertion order."""
        ...

    def get_links_by_rel(self, rel: str) -> list[LinkLike]:
        """Return the links carrying relation ``rel``, in insertion order."""
        ...


@runtime_checkable
class EvolvableLinkProviderLike(LinkProviderLike, Protocol):
    """Link container whose mutators return a new container."""

    def with_link(self: _P, link: LinkLike) -> _P:
        """Return a container that also holds ``link``."""
        ...

    def without_link(self: _P, link: LinkLike) -> _P:
        """Return a container that no longer holds ``link``."""
        ...

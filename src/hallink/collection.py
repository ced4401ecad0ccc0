# topmark:header:start
#
#   project      : HalLink
#   file         : collection.py
#   file_relpath : src/hallink/collection.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Immutable, evolvable container of links.

[`LinkCollection`][hallink.collection.LinkCollection] is the link provider a
resource representation carries: it holds links in insertion order and answers
"which links carry relation X". Like [`Link`][hallink.link.Link], it never
changes in place; ``with_link``/``without_link`` return a new collection, or the
receiver when nothing would change.

Membership is by identity: the same `Link` instance is never held twice, while
equal-but-distinct links may coexist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hallink.config.logging import get_logger
from hallink.errors import InvalidArgumentError
from hallink.interfaces import LinkLike

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from hallink.config.logging import HallinkLogger

logger: HallinkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True, init=False)
class LinkCollection:
    """Ordered, immutable provider of links.

    Attributes:
        links (tuple[LinkLike, ...]): The held links, in insertion order.
    """

    links: tuple[LinkLike, ...]

    def __init__(self, links: Iterable[LinkLike] = ()) -> None:
        """Create a collection from ``links``.

        Args:
            links (Iterable[LinkLike]): Initial links. Repeated instances are kept once.

        Raises:
            InvalidArgumentError: If an item is not a link.
        """
        held: list[LinkLike] = []
        for link in links:
            _require_link(link)
            if not any(existing is link for existing in held):
                held.append(link)
        object.__setattr__(self, "links", tuple(held))

    def __len__(self) -> int:
        return len(self.links)

    def __iter__(self) -> Iterator[LinkLike]:
        return iter(self.links)

    def __contains__(self, link: object) -> bool:
        return any(held is link for held in self.links)

    def get_links(self) -> list[LinkLike]:
        """Return all links, in insertion order."""
        return list(self.links)

    def get_links_by_rel(self, rel: str) -> list[LinkLike]:
        """Return the links carrying relation ``rel``, in insertion order.

        Args:
            rel (str): Relation type to look for.

        Returns:
            list[LinkLike]: Matching links; empty if none carry ``rel``.
        """
        return [link for link in self.links if rel in link.get_rels()]

    def with_link(self, link: LinkLike) -> LinkCollection:
        """Return a collection that also holds ``link``.

        Args:
            link (LinkLike): Link to add.

        Returns:
            LinkCollection: This collection if ``link`` is already held, otherwise a
                new collection with ``link`` appended.

        Raises:
            InvalidArgumentError: If ``link`` is not a link.
        """
        _require_link(link)
        if link in self:
            logger.trace("with_link: %r already held", link)
            return self
        return LinkCollection((*self.links, link))

    def without_link(self, link: LinkLike) -> LinkCollection:
        """Return a collection that no longer holds ``link``.

        Args:
            link (LinkLike): Link to remove.

        Returns:
            LinkCollection: This collection if ``link`` is not held, otherwise a new
                collection without it.
        """
        if link not in self:
            logger.trace("without_link: %r not held", link)
            return self
        return LinkCollection(held for held in self.links if held is not link)


def _require_link(link: object) -> None:
    if not isinstance(link, LinkLike):
        logger.debug("Rejected link %r", link)
        raise InvalidArgumentError("link", link, "an object implementing LinkLike")

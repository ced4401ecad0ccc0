# topmark:header:start
#
#   project      : HalLink
#   file         : link.py
#   file_relpath : src/hallink/link.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Immutable Web Linking (RFC 8288) link value object.

A [`Link`][hallink.link.Link] holds one or more relation types, a target
(absolute URI, relative reference, or ``""`` for "no href"), a templated flag,
and auxiliary attributes. It satisfies
[`EvolvableLinkLike`][hallink.interfaces.EvolvableLinkLike]: every ``with_*`` /
``without_*`` method returns a new `Link`, or the receiver itself when the
operation would change nothing.

Storage:
    Relations are kept as a ``tuple``. Attribute values are frozen recursively
    (lists to tuples, mappings to key/value tuples, sets to frozensets), so no
    container reachable from a `Link` is shared with the caller. Accessors hand
    out fresh ``list``/``dict``/``set`` copies.

Example:
    >>> link = Link("self", "/orders/{id}", templated=True)
    >>> link.with_rel("self") is link
    True
    >>> link.with_rel("item").get_rels()
    ['self', 'item']
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from hallink.config.logging import get_logger
from hallink.constants import AS_COLLECTION_ATTRIBUTE
from hallink.errors import LinkConstructionError
from hallink.validation import (
    is_non_empty_string,
    require_attribute,
    require_href,
    require_relation,
)

if TYPE_CHECKING:
    from hallink.config.logging import HallinkLogger
    from hallink.types import AttributeValue, HrefLike, RelationsLike

logger: HallinkLogger = get_logger(__name__)

# Internal attribute representation: container values frozen recursively.
_StoredValue = bool | int | float | str | tuple[str, ...]

_SCALARS: Final[tuple[type, ...]] = (bool, int, float, complex, str, bytes, type(None))

_EMPTY_ATTRIBUTES: Final[Mapping[str, AttributeValue]] = {}


class _FrozenMapping(tuple):  # type: ignore[type-arg]
    """Key/value pairs of a mapping nested in an attribute value."""

    __slots__ = ()


def _freeze_value(value: object) -> object:
    """Return an immutable copy of ``value``, recursing into containers."""
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, Mapping):
        return _FrozenMapping((k, _freeze_value(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze_value(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze_value(item) for item in value)
    return copy.deepcopy(value)


def _thaw_value(value: object) -> object:
    """Return a fresh mutable copy of a value produced by `_freeze_value`."""
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, _FrozenMapping):
        return {k: _thaw_value(v) for k, v in value}
    if isinstance(value, tuple):
        return [_thaw_value(item) for item in value]
    if isinstance(value, frozenset):
        return {_thaw_value(item) for item in value}
    return copy.deepcopy(value)


def _freeze_attributes(attributes: Mapping[object, object]) -> dict[str, _StoredValue]:
    """Return a deep-frozen copy of constructor attributes.

    Raises:
        LinkConstructionError: If a key is not a non-empty string.
    """
    frozen: dict[str, _StoredValue] = {}
    for key, value in attributes.items():
        if not is_non_empty_string(key):
            raise LinkConstructionError(
                f"Link attribute names must be non-empty strings, received {key!r}"
            )
        frozen[key] = _freeze_value(value)  # type: ignore[assignment]
    return frozen


def _normalize_relations(relations: object) -> tuple[str, ...]:
    """Return ``relations`` as a tuple of relation types.

    Args:
        relations (object): A relation type or a sequence of relation types.

    Returns:
        tuple[str, ...]: The relations in the given order, duplicates kept.

    Raises:
        LinkConstructionError: If no non-empty relation results, or an entry is not
            a non-empty string.
    """
    if isinstance(relations, str):
        rels: tuple[object, ...] = (relations,)
    elif isinstance(relations, Sequence):
        rels = tuple(relations)
    else:
        raise LinkConstructionError(
            f"A link requires a relation or a sequence of relations, "
            f"received {type(relations).__name__}"
        )
    if not rels:
        raise LinkConstructionError("A link requires at least one relation")
    for rel in rels:
        if not is_non_empty_string(rel):
            raise LinkConstructionError(
                f"Link relations must be non-empty strings, received {rel!r}"
            )
    return rels  # type: ignore[return-value]


@dataclass(frozen=True, slots=True, init=False, repr=False)
class Link:
    """Immutable hypermedia link.

    Attributes:
        AS_COLLECTION (str): Reserved attribute name asking a serializer to render
            the link's relation as a list even if it is the only link carrying it.

    Equality is structural: two links are equal when relations (in order), href,
    templated flag and attributes are equal. Links are hashable.
    """

    AS_COLLECTION: ClassVar[str] = AS_COLLECTION_ATTRIBUTE

    _relations: tuple[str, ...]
    _href: str
    _templated: bool
    _attributes: dict[str, _StoredValue]

    def __init__(
        self,
        relations: RelationsLike,
        href: str = "",
        templated: bool = False,
        attributes: Mapping[str, AttributeValue] | None = None,
    ) -> None:
        """Create a link.

        Args:
            relations (RelationsLike): A relation type (e.g. ``"self"``) or an ordered
                sequence of relation types. Mandatory.
            href (str): The link target; ``""`` means the link has no href.
            templated (bool): Whether ``href`` is a URI Template.
            attributes (Mapping[str, AttributeValue] | None): Auxiliary attributes.
                Values are not validated; they are deep-copied into immutable form.

        Raises:
            LinkConstructionError: If ``relations`` yields no valid relation, ``href``
                is not a string, ``attributes`` is not a mapping, or an attribute name
                is not a non-empty string.
        """
        if not isinstance(href, str):
            raise LinkConstructionError(
                f"Link href must be a string, received {type(href).__name__}"
            )
        if attributes is None:
            attributes = _EMPTY_ATTRIBUTES
        elif not isinstance(attributes, Mapping):
            raise LinkConstructionError(
                f"Link attributes must be a mapping, received {type(attributes).__name__}"
            )
        self._assign(
            _normalize_relations(relations),
            href,
            bool(templated),
            _freeze_attributes(attributes),  # type: ignore[arg-type]
        )

    def _assign(
        self,
        relations: tuple[str, ...],
        href: str,
        templated: bool,
        attributes: dict[str, _StoredValue],
    ) -> None:
        object.__setattr__(self, "_relations", relations)
        object.__setattr__(self, "_href", href)
        object.__setattr__(self, "_templated", templated)
        object.__setattr__(self, "_attributes", attributes)

    def _evolve(
        self,
        *,
        relations: tuple[str, ...] | None = None,
        href: str | None = None,
        attributes: dict[str, _StoredValue] | None = None,
    ) -> Link:
        """Return a new link sharing the unchanged (immutable) fields of this one."""
        new = object.__new__(type(self))
        new._assign(
            self._relations if relations is None else relations,
            self._href if href is None else href,
            self._templated,
            dict(self._attributes) if attributes is None else attributes,
        )
        return new

    # ---- Accessors ----

    def get_rels(self) -> list[str]:
        """Return the relation types of the link, in order."""
        return list(self._relations)

    def get_href(self) -> str:
        """Return the link target; ``""`` when the link has no href."""
        return self._href

    def is_templated(self) -> bool:
        """Return whether the target is a URI Template."""
        return self._templated

    def get_attributes(self) -> dict[str, AttributeValue]:
        """Return a copy of the link attributes.

        Container values, nested ones included, are returned as new lists, dicts
        and sets; changing the result never affects the link.
        """
        return {k: _thaw_value(v) for k, v in self._attributes.items()}  # type: ignore[misc]

    # ---- Relations ----

    def with_rel(self, relation: object) -> Link:
        """Return a link that also carries ``relation``.

        Args:
            relation (object): Relation type to add; must be a non-empty string.

        Returns:
            Link: This link if ``relation`` is already present, otherwise a new link
                with ``relation`` appended.

        Raises:
            InvalidArgumentError: If ``relation`` is not a non-empty string.
        """
        rel: str = require_relation(relation)
        if rel in self._relations:
            logger.trace("with_rel(%r): relation already present", rel)
            return self
        return self._evolve(relations=(*self._relations, rel))

    def without_rel(self, relation: object) -> Link:
        """Return a link that no longer carries ``relation``.

        Invalid or absent relations are not an error: the link is returned unchanged.

        Args:
            relation (object): Relation type to remove.

        Returns:
            Link: This link if nothing was removed, otherwise a new link without the
                first occurrence of ``relation``.

        Raises:
            LinkConstructionError: If ``relation`` is the only relation of the link.
        """
        if not is_non_empty_string(relation) or relation not in self._relations:
            logger.trace("without_rel(%r): nothing to remove", relation)
            return self
        rels: list[str] = list(self._relations)
        rels.remove(relation)
        if not rels:
            raise LinkConstructionError(
                f"Cannot remove {relation!r}: a link requires at least one relation"
            )
        return self._evolve(relations=tuple(rels))

    # ---- Target ----

    def with_href(self, uri: HrefLike) -> Link:
        """Return a link pointing at ``uri``.

        A new link is returned even when the target does not change.

        Args:
            uri (HrefLike): A string, or an object with a string form such as a URI
                value object.

        Returns:
            Link: A new link whose href is ``str(uri)``.

        Raises:
            InvalidArgumentError: If ``uri`` is neither a string nor stringable.
        """
        return self._evolve(href=require_href(uri))

    # ---- Attributes ----

    def with_attribute(self, name: object, value: object) -> Link:
        """Return a link with attribute ``name`` set to ``value``.

        Args:
            name (object): Attribute name; must be a non-empty string.
            value (object): ``bool``, ``int``, ``float``, ``str`` or a sequence of strings.

        Returns:
            Link: A new link; existing attributes with the same name are replaced.

        Raises:
            InvalidArgumentError: If ``name`` (parameter ``name``) or ``value``
                (parameter ``value``) is not acceptable.
        """
        key, checked = require_attribute(name, value)
        attributes: dict[str, _StoredValue] = dict(self._attributes)
        attributes[key] = _freeze_value(checked)  # type: ignore[assignment]
        return self._evolve(attributes=attributes)

    def without_attribute(self, name: object) -> Link:
        """Return a link without attribute ``name``.

        Invalid or absent names are not an error: the link is returned unchanged.

        Args:
            name (object): Attribute name to remove.

        Returns:
            Link: This link if nothing was removed, otherwise a new link.
        """
        if not is_non_empty_string(name) or name not in self._attributes:
            logger.trace("without_attribute(%r): nothing to remove", name)
            return self
        attributes: dict[str, _StoredValue] = dict(self._attributes)
        del attributes[name]
        return self._evolve(attributes=attributes)

    # ---- Value semantics ----

    def __hash__(self) -> int:
        return hash(
            (
                self._relations,
                self._href,
                self._templated,
                frozenset(self._attributes.items()),
            )
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({list(self._relations)!r}, href={self._href!r}, "
            f"templated={self._templated!r}, attributes={self.get_attributes()!r})"
        )

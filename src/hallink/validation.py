# topmark:header:start
#
#   project      : HalLink
#   file         : validation.py
#   file_relpath : src/hallink/validation.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Argument checks for link construction and mutation.

Each parameter accepts a small, closed set of input variants:

    * relation / attribute name: a non-empty ``str``.
    * href: a ``str``, or a *stringable* object (its class defines ``__str__``),
      excluding ``None``, booleans, numbers, bytes, mappings, sequences and sets.
    * attribute value: ``bool``, ``int``, ``float``, ``str``, or a list/tuple of ``str``.

Predicates return ``bool``; ``require_*`` helpers raise
[`InvalidArgumentError`][hallink.errors.InvalidArgumentError] naming the parameter.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from numbers import Number
from typing import TYPE_CHECKING, TypeGuard

from hallink.config.logging import get_logger
from hallink.errors import InvalidArgumentError

if TYPE_CHECKING:
    from hallink.config.logging import HallinkLogger
    from hallink.types import AttributeValue

logger: HallinkLogger = get_logger(__name__)

_NOT_STRINGABLE: tuple[type, ...] = (
    bool,
    Number,
    bytes,
    bytearray,
    memoryview,
    list,
    tuple,
    Mapping,
    Set,
)


def is_non_empty_string(value: object) -> TypeGuard[str]:
    """Return True if ``value`` is a ``str`` with at least one character."""
    return isinstance(value, str) and value != ""


def is_stringable(value: object) -> bool:
    """Return True if ``value`` is a string or converts losslessly to one.

    An object qualifies when some class in its MRO other than ``object`` defines
    ``__str__``. Lists, tuples, mappings, sets, numbers and ``None`` never
    qualify even though they can be printed. String-like sequences such as
    ``collections.UserString`` do.

    Args:
        value (object): Candidate href.

    Returns:
        bool: True if ``str(value)`` is an acceptable link target.
    """
    if isinstance(value, str):
        return True
    if value is None or isinstance(value, _NOT_STRINGABLE):
        return False
    return any("__str__" in vars(klass) for klass in type(value).__mro__ if klass is not object)


def is_attribute_value(value: object) -> bool:
    """Return True if ``value`` may be stored as a link attribute value.

    Args:
        value (object): Candidate attribute value.

    Returns:
        bool: True for ``bool``, ``int``, ``float``, ``str``, or a list/tuple whose
            items are all strings.
    """
    if isinstance(value, (bool, int, float, str)):
        return True
    if isinstance(value, (list, tuple)):
        return all(isinstance(item, str) for item in value)
    return False


def require_relation(relation: object) -> str:
    """Return ``relation`` if it is a valid relation type.

    Args:
        relation (object): Candidate relation.

    Returns:
        str: The validated relation.

    Raises:
        InvalidArgumentError: If ``relation`` is not a non-empty string.
    """
    if not is_non_empty_string(relation):
        logger.debug("Rejected relation %r", relation)
        raise InvalidArgumentError("relation", relation, "a non-empty string")
    return relation


def require_href(uri: object) -> str:
    """Return the string form of ``uri`` if it is an acceptable link target.

    Args:
        uri (object): A string or a stringable object such as a URI value object.

    Returns:
        str: ``str(uri)``.

    Raises:
        InvalidArgumentError: If ``uri`` is neither a string nor stringable.
    """
    if not is_stringable(uri):
        logger.debug("Rejected href %r", uri)
        raise InvalidArgumentError("uri", uri, "a string or an object with a string form")
    return str(uri)


def require_attribute(name: object, value: object) -> tuple[str, AttributeValue]:
    """Validate an attribute name/value pair.

    Args:
        name (object): Candidate attribute name.
        value (object): Candidate attribute value.

    Returns:
        tuple[str, AttributeValue]: The validated pair; tuples are returned as lists.

    Raises:
        InvalidArgumentError: If ``name`` is not a non-empty string (parameter
            ``name``), or ``value`` is not an accepted value (parameter ``value``).
    """
    if not is_non_empty_string(name):
        logger.debug("Rejected attribute name %r", name)
        raise InvalidArgumentError("name", name, "a non-empty string")
    if not is_attribute_value(value):
        logger.debug("Rejected value %r for attribute %r", value, name)
        raise InvalidArgumentError(
            "value", value, "a bool, int, float, str, or a sequence of strings"
        )
    if isinstance(value, tuple):
        return name, list(value)
    return name, value  # type: ignore[return-value]

# topmark:header:start
#
#   project      : HalLink
#   file         : types.py
#   file_relpath : src/hallink/types.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Lightweight type aliases shared by the link modules.

Keep this module free of side effects and project imports so it can be
imported from anywhere without causing cycles.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

# Scalar or list-of-strings value of a link attribute (e.g. ``type``, ``hreflang``).
AttributeValue = bool | int | float | str | list[str]

# What the `Link` constructor accepts for its relations.
RelationsLike = str | Sequence[str]


class Stringable(Protocol):
    """Object with a meaningful string conversion, such as a URI value object."""

    def __str__(self) -> str:
        """Return the string form of the object."""
        ...


# Accepted targets for `Link.with_href`.
HrefLike = str | Stringable

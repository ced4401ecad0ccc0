# topmark:header:start
#
#   project      : HalLink
#   file         : __init__.py
#   file_relpath : src/hallink/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""HalLink package.

HalLink provides the immutable hypermedia link value object that HAL
(Hypertext Application Language) serializers read when rendering ``_links``,
together with an evolvable link collection and structural link contracts.

Public API:
    - `Link`: immutable Web Linking link with ``with_*``/``without_*`` mutators.
    - `LinkCollection`: immutable, evolvable provider of links.
    - `LinkLike`, `EvolvableLinkLike`, `LinkProviderLike`,
      `EvolvableLinkProviderLike`: structural contracts.
    - `LinkError`, `LinkConstructionError`, `InvalidArgumentError`: errors.
"""

from __future__ import annotations

from hallink.collection import LinkCollection
from hallink.constants import HALLINK_VERSION
from hallink.errors import InvalidArgumentError, LinkConstructionError, LinkError
from hallink.interfaces import (
    EvolvableLinkLike,
    EvolvableLinkProviderLike,
    LinkLike,
    LinkProviderLike,
)
from hallink.link import Link

__version__: str = HALLINK_VERSION

__all__ = [
    "EvolvableLinkLike",
    "EvolvableLinkProviderLike",
    "InvalidArgumentError",
    "Link",
    "LinkCollection",
    "LinkConstructionError",
    "LinkError",
    "LinkLike",
    "LinkProviderLike",
    "__version__",
]

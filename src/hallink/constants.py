# topmark:header:start
#
#   project      : HalLink
#   file         : constants.py
#   file_relpath : src/hallink/constants.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""HalLink Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

HALLINK_VERSION: str = get_version("hallink")

# Environment variable consulted by `hallink.config.logging.resolve_env_log_level`:
LOG_LEVEL_ENV_VAR: Final[str] = "HALLINK_LOG_LEVEL"

# Reserved attribute name: a serializer renders the relation as a list even for one link.
AS_COLLECTION_ATTRIBUTE: Final[str] = "__FORCE_COLLECTION__"

# topmark:header:start
#
#   project      : HalLink
#   file         : __init__.py
#   file_relpath : src/hallink/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Runtime configuration for HalLink.

HalLink has no configuration files. The only runtime knob is the log level,
read from the ``HALLINK_LOG_LEVEL`` environment variable by
[`hallink.config.logging`][hallink.config.logging].
"""

from __future__ import annotations

# topmark:header:start
#
#   project      : HalLink
#   file         : errors.py
#   file_relpath : src/hallink/errors.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Exceptions for HalLink.

Usage:
    All errors derive from `LinkError`. They signal programming errors (bad
    arguments or violated invariants) and are raised before any new instance is
    built, so an operation either succeeds completely or has no effect.

Kinds:
    - `LinkConstructionError`: a `Link` would be built without a usable
      relation. Also a `TypeError`, like the interpreter's own arity error when
      the relation argument is omitted altogether.
    - `InvalidArgumentError`: a mutator received a value of the wrong shape.
      Also a `ValueError`; `parameter` names the offending argument.
"""

from __future__ import annotations


class LinkError(Exception):
    """Base class for all HalLink errors."""


class LinkConstructionError(LinkError, TypeError):
    """Error for a `Link` that would end up with no valid relation."""


class InvalidArgumentError(LinkError, ValueError):
    """Error for an argument of the wrong type or shape.

    Attributes:
        parameter (str): Name of the rejected parameter (e.g. ``"name"``).
        value (object): The rejected value.
    """

    def __init__(self, parameter: str, value: object, expected: str) -> None:
        """Build the error message from the parameter name and expectation.

        Args:
            parameter (str): Name of the rejected parameter.
            value (object): The rejected value.
            expected (str): Human-readable description of what is accepted.
        """
        self.parameter: str = parameter
        self.value: object = value
        super().__init__(
            f"Invalid argument '{parameter}': expected {expected}, "
            f"received {type(value).__name__} ({value!r})"
        )

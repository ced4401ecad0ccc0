# topmark:header:start
#
#   project      : HalLink
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""Pytest configuration for the HalLink test suite.

This file sets up global fixtures, typed wrappers around pytest decorators, and
the logging configuration for test runs.

Notes:
    Links are immutable. Tests assert both halves of every mutation: the value
    returned, and that the receiver still reads exactly as before.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from hallink.config import logging
from hallink.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

# Takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_hallink_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so mutator decisions are exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


class Uri:
    """Minimal URI value object with a string form."""

    def __init__(self, uri: str) -> None:
        self._uri = uri

    def __str__(self) -> str:
        return self._uri


class PlainObject:
    """Object without a string conversion of its own."""

    def __init__(self, **fields: object) -> None:
        self.__dict__.update(fields)


# Shared invalid-input tables. Each entry is (id, value).

INVALID_RELATIONS: list[tuple[str, object]] = [
    ("none", None),
    ("false", False),
    ("true", True),
    ("zero", 0),
    ("int", 1),
    ("zero-float", 0.0),
    ("float", 1.1),
    ("empty-string", ""),
    ("list", ["link"]),
    ("object", PlainObject(href="link")),
    ("dict", {"href": "link"}),
]

INVALID_URIS: list[tuple[str, object]] = [
    ("none", None),
    ("false", False),
    ("true", True),
    ("zero", 0),
    ("int", 1),
    ("zero-float", 0.0),
    ("float", 1.1),
    ("list", ["link"]),
    ("dict", {"href": "link"}),
    ("bytes", b"https://example.com"),
    ("plain-object", PlainObject(href="link")),
]

INVALID_ATTRIBUTE_NAMES: list[tuple[str, object]] = [
    ("none", None),
    ("false", False),
    ("true", True),
    ("zero", 0),
    ("int", 1),
    ("zero-float", 0.0),
    ("float", 1.1),
    ("empty-string", ""),
    ("list", ["attribute"]),
    ("object", PlainObject(name="attribute")),
]


def ids_of(table: list[tuple[str, object]]) -> list[str]:
    """Return the ids of an invalid-input table, for ``parametrize(ids=...)``."""
    return [case_id for case_id, _ in table]


def values_of(table: list[tuple[str, object]]) -> list[object]:
    """Return the values of an invalid-input table."""
    return [value for _, value in table]

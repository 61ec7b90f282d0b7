"""Helpers for values that may be None."""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

from dbc import validate

T = TypeVar("T")

DEFAULT_REQUIRED_EX_MESSAGE = "No value present"


def required(value: T | None, message: str | None = None, *args: Any) -> T:
    """Unwrap an optional value.

    Raises IllegalArgumentValidationException when ``value`` is None.
    """
    if message is None:
        message = DEFAULT_REQUIRED_EX_MESSAGE
    validate.is_true(value is not None, message, *args)
    return value


def stream(value: T | None) -> Iterator[T]:
    """Iterate over the value if there is one."""
    if value is not None:
        yield value

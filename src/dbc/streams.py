"""Reducers for use with ``functools.reduce``."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from dbc import validate

T = TypeVar("T")

DEFAULT_TO_ONLY_ONE_EX_MESSAGE = "Duplicates not allowed"


def to_only_one(message: str | None = None, *args: Any) -> Callable[[T, T], T]:
    """Reducer that accepts at most one element.

    ``reduce(to_only_one(), matches)`` returns the single match and raises
    IllegalStateValidationException as soon as a second one shows up::

        user = reduce(to_only_one("Duplicate user %s", name), found)
    """
    if message is None:
        message = DEFAULT_TO_ONLY_ONE_EX_MESSAGE

    def reducer(first: T, second: T) -> T:
        validate.valid_state(False, message, *args)
        return first

    return reducer

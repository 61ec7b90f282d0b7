"""Validator — the shared validation engine behind every façade.

A Validator implements each check exactly once.  Which exception a failed
check raises is decided by the ExceptionFactory it is built with, so the
validation, requirement, ensurance, invariance and bad-request façades all
share this code and differ only in their factory.

Conventions shared by every check:

- On success the checked value is returned as is (the same object), so
  checks can be chained: ``name = require.not_blank(name)``.
- ``message`` is an optional printf-style template; when omitted the check's
  default message is used.  ``args`` are substituted into ``message`` and
  are ignored when there are more than the template asks for.
- Messages are only built once a check has failed.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Sized, TypeVar

from dbc.domain.factory import ExceptionFactory
from dbc.domain.formatting import (
    format_message,
    index_of_null_element,
    is_blank,
    type_name,
)

T = TypeVar("T")
S = TypeVar("S", bound=Sized)
It = TypeVar("It", bound=Iterable)
C = TypeVar("C", str, bytes)

# ---------------------------------------------------------------------------
# Default messages
# ---------------------------------------------------------------------------
DEFAULT_IS_TRUE_EX_MESSAGE = "The validated expression is false"
DEFAULT_IS_FALSE_EX_MESSAGE = "The validated expression is true"
DEFAULT_NOT_NULL_EX_MESSAGE = "The validated object is null"
DEFAULT_IS_NULL_EX_MESSAGE = "The validated object is not null"
DEFAULT_NOT_BLANK_EX_MESSAGE = "The validated character sequence is blank"
DEFAULT_VALID_STATE_EX_MESSAGE = "The validated state is false"
DEFAULT_MATCHES_PATTERN_EX_MESSAGE = "The string %s does not match the pattern %s"
DEFAULT_INCLUSIVE_BETWEEN_EX_MESSAGE = (
    "The value %s is not in the specified inclusive range of %s to %s"
)
DEFAULT_EXCLUSIVE_BETWEEN_EX_MESSAGE = (
    "The value %s is not in the specified exclusive range of %s to %s"
)
DEFAULT_IS_INSTANCE_OF_EX_MESSAGE = "Expected type: %s, actual: %s"
DEFAULT_IS_ASSIGNABLE_EX_MESSAGE = "Cannot assign a %s to a %s"

# Container kinds, as named in the default messages
CHARS = "character sequence"
MAP = "map"
ARRAY = "array"
COLLECTION = "collection"

DEFAULT_NOT_EMPTY_EX_MESSAGES = {
    CHARS: "The validated character sequence is empty",
    MAP: "The validated map is empty",
    ARRAY: "The validated array is empty",
    COLLECTION: "The validated collection is empty",
}
DEFAULT_NO_NULL_ELEMENTS_EX_MESSAGES = {
    MAP: "The validated collection contains null element at index: %d",
    ARRAY: "The validated array contains null element at index: %d",
    COLLECTION: "The validated collection contains null element at index: %d",
}
DEFAULT_VALID_INDEX_EX_MESSAGES = {
    CHARS: "The validated character sequence index is invalid: %d",
    MAP: "The validated collection index is invalid: %d",
    ARRAY: "The validated array index is invalid: %d",
    COLLECTION: "The validated collection index is invalid: %d",
}


def _template(message: str | None, default: str) -> str:
    return default if message is None else message


def container_kind(container: object) -> str:
    """Classify a container the way the default messages name it."""
    if isinstance(container, (str, bytes, bytearray)):
        return CHARS
    if isinstance(container, Mapping):
        return MAP
    if isinstance(container, Sequence):
        return ARRAY
    return COLLECTION


class Validator:
    """Validation engine bound to one ExceptionFactory.

    Instances are immutable and hold no other state, so one instance can be
    shared freely between threads.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: ExceptionFactory) -> None:
        if not isinstance(factory, ExceptionFactory):
            raise TypeError(
                f"Validator requires an ExceptionFactory, got {type(factory).__name__}"
            )
        object.__setattr__(self, "_factory", factory)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self._factory).__name__})"

    # --- Boolean expressions --------------------------------------------------

    def is_true(self, expression: Any, message: str | None = None, *args: Any) -> None:
        if not expression:
            self._fail(_template(message, DEFAULT_IS_TRUE_EX_MESSAGE), args)

    def is_false(self, expression: Any, message: str | None = None, *args: Any) -> None:
        if expression:
            self._fail(_template(message, DEFAULT_IS_FALSE_EX_MESSAGE), args)

    def valid_state(self, expression: Any, message: str | None = None, *args: Any) -> None:
        """Check a state expression; raises the illegal-state kind."""
        if not expression:
            message = _template(message, DEFAULT_VALID_STATE_EX_MESSAGE)
            self._fail_illegal_state(message, args)

    # --- None checks ----------------------------------------------------------

    def not_null(self, obj: T | None, message: str | None = None, *args: Any) -> T:
        if obj is None:
            self._fail_null(_template(message, DEFAULT_NOT_NULL_EX_MESSAGE), args)
        return obj

    def is_null(self, obj: Any, message: str | None = None, *args: Any) -> None:
        if obj is not None:
            self._fail(_template(message, DEFAULT_IS_NULL_EX_MESSAGE), args)

    # --- Containers -----------------------------------------------------------

    def not_empty(self, container: S | None, message: str | None = None, *args: Any) -> S:
        """Check that a string, sequence, mapping or collection has elements.

        None raises the null-pointer kind, an empty container the
        illegal-argument kind.  Both use the same message.
        """
        if container is None:
            self._fail_null(_template(message, DEFAULT_NOT_NULL_EX_MESSAGE), args)
        if len(container) == 0:
            default = DEFAULT_NOT_EMPTY_EX_MESSAGES[container_kind(container)]
            self._fail(_template(message, default), args)
        return container

    def not_blank(self, chars: C | None, message: str | None = None, *args: Any) -> C:
        """Check that a string is neither None, empty nor whitespace only."""
        if chars is None:
            self._fail_null(_template(message, DEFAULT_NOT_BLANK_EX_MESSAGE), args)
        if is_blank(chars):
            self._fail(_template(message, DEFAULT_NOT_BLANK_EX_MESSAGE), args)
        return chars

    def no_null_elements(
        self, iterable: It | None, message: str | None = None, *args: Any
    ) -> It:
        """Check that no element of ``iterable`` is None.

        The index of the first None is appended to ``args`` before the message
        is formatted, so a custom template can refer to it as its last
        placeholder.  A None ``iterable`` always fails with the default
        null message.

        One-shot iterators are consumed by the scan.
        """
        self.not_null(iterable)
        index = index_of_null_element(iterable)
        if index != -1:
            default = DEFAULT_NO_NULL_ELEMENTS_EX_MESSAGES[container_kind(iterable)]
            self._fail_with_index(_template(message, default), args, index)
        return iterable

    def valid_index(
        self, container: S | None, index: int, message: str | None = None, *args: Any
    ) -> S:
        """Check that ``0 <= index < len(container)``.

        A None ``container`` always fails with the default null message.
        """
        self.not_null(container)
        if index < 0 or index >= len(container):
            if message is None:
                message = DEFAULT_VALID_INDEX_EX_MESSAGES[container_kind(container)]
                args = (index,)
            self._fail_index_out_of_bounds(message, args)
        return container

    # --- Strings --------------------------------------------------------------

    def matches_pattern(
        self,
        chars: C,
        pattern: str | re.Pattern,
        message: str | None = None,
        *args: Any,
    ) -> C:
        """Check that the whole of ``chars`` matches the regular expression."""
        if re.fullmatch(pattern, chars) is None:
            if message is None:
                message = DEFAULT_MATCHES_PATTERN_EX_MESSAGE
                args = (chars, getattr(pattern, "pattern", pattern))
            self._fail(message, args)
        return chars

    # --- Ranges ---------------------------------------------------------------

    def inclusive_between(
        self, start: Any, end: Any, value: T, message: str | None = None, *args: Any
    ) -> T:
        """Check ``start <= value <= end`` for any mutually comparable values."""
        if value < start or value > end:
            if message is None:
                message = DEFAULT_INCLUSIVE_BETWEEN_EX_MESSAGE
                args = (value, start, end)
            self._fail(message, args)
        return value

    def exclusive_between(
        self, start: Any, end: Any, value: T, message: str | None = None, *args: Any
    ) -> T:
        """Check ``start < value < end`` for any mutually comparable values."""
        if value <= start or value >= end:
            if message is None:
                message = DEFAULT_EXCLUSIVE_BETWEEN_EX_MESSAGE
                args = (value, start, end)
            self._fail(message, args)
        return value

    # --- Types ----------------------------------------------------------------

    def is_instance_of(
        self, type_: type, obj: T, message: str | None = None, *args: Any
    ) -> T:
        """Check ``isinstance(obj, type_)``.  None is never an instance."""
        if obj is None or not isinstance(obj, type_):
            if message is None:
                message = DEFAULT_IS_INSTANCE_OF_EX_MESSAGE
                args = (type_name(type_), type_name(None if obj is None else type(obj)))
            self._fail(message, args)
        return obj

    def is_assignable_from(
        self, super_type: type, type_: type[T], message: str | None = None, *args: Any
    ) -> type[T]:
        """Check ``issubclass(type_, super_type)``."""
        if type_ is None or not issubclass(type_, super_type):
            if message is None:
                message = DEFAULT_IS_ASSIGNABLE_EX_MESSAGE
                args = (type_name(type_), type_name(super_type))
            self._fail(message, args)
        return type_

    # --- Failure paths --------------------------------------------------------

    def _fail(self, message: str, args: tuple) -> None:
        raise self._factory.illegal_argument(format_message(message, *args))

    def _fail_null(self, message: str, args: tuple) -> None:
        raise self._factory.null_pointer(format_message(message, *args))

    def _fail_index_out_of_bounds(self, message: str, args: tuple) -> None:
        raise self._factory.index_out_of_bounds(format_message(message, *args))

    def _fail_illegal_state(self, message: str, args: tuple) -> None:
        raise self._factory.illegal_state(format_message(message, *args))

    def _fail_with_index(self, message: str, args: tuple, index: int) -> None:
        try:
            text = format_message(message, *args, index)
        except (TypeError, ValueError) as exc:
            raise self._factory.illegal_argument_with_cause(
                f"Cannot add null element index {index} to the arguments of {message!r}",
                exc,
            ) from exc
        raise self._factory.illegal_argument(text)

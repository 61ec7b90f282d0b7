"""Checks for click commands and parameter callbacks.

Failures are click.BadParameter errors, which click reports as usage errors
(exit code 2)::

    @click.command()
    @click.option("--port", type=int)
    def serve(port):
        bad_request.inclusive_between(1, 65535, port, "Invalid port %d", port)

Every check raises a subclass of :class:`dbc.infrastructure.click_exceptions.BadRequestException`.
"""

from __future__ import annotations

from dbc.infrastructure.bootstrap import bad_request_validator

__all__ = [
    "exclusive_between",
    "inclusive_between",
    "is_assignable_from",
    "is_false",
    "is_instance_of",
    "is_null",
    "is_true",
    "matches_pattern",
    "no_null_elements",
    "not_blank",
    "not_empty",
    "not_null",
    "valid_index",
    "valid_state",
]

_validator = bad_request_validator()

exclusive_between = _validator.exclusive_between
inclusive_between = _validator.inclusive_between
is_assignable_from = _validator.is_assignable_from
is_false = _validator.is_false
is_instance_of = _validator.is_instance_of
is_null = _validator.is_null
is_true = _validator.is_true
matches_pattern = _validator.matches_pattern
no_null_elements = _validator.no_null_elements
not_blank = _validator.not_blank
not_empty = _validator.not_empty
not_null = _validator.not_null
valid_index = _validator.valid_index
valid_state = _validator.valid_state

"""Preconditions, checked on what a caller passes in::

    from dbc import require

    def withdraw(account, amount):
        require.not_null(account)
        require.exclusive_between(0, account.balance + 1, amount)

Every check raises a subclass of :class:`dbc.domain.exceptions.RequirementException`.
"""

from __future__ import annotations

from dbc.infrastructure.bootstrap import requirement_validator

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

_validator = requirement_validator()

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

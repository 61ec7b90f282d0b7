"""Composition root — wires each exception family to a Validator.

This is the only place that knows which exception classes belong to which
façade.  Validators are built once, at import time, and every accessor
returns the same instance.
"""

from __future__ import annotations

import logging

from dbc.domain.exceptions import (
    IllegalArgumentEnsuranceException,
    IllegalArgumentInvarianceException,
    IllegalArgumentRequirementException,
    IllegalArgumentValidationException,
    IllegalStateEnsuranceException,
    IllegalStateInvarianceException,
    IllegalStateRequirementException,
    IllegalStateValidationException,
    IndexOutOfBoundsEnsuranceException,
    IndexOutOfBoundsInvarianceException,
    IndexOutOfBoundsRequirementException,
    IndexOutOfBoundsValidationException,
    NullPointerEnsuranceException,
    NullPointerInvarianceException,
    NullPointerRequirementException,
    NullPointerValidationException,
)
from dbc.domain.validator import Validator
from dbc.infrastructure.click_exceptions import (
    IllegalArgumentBadRequestException,
    IllegalStateBadRequestException,
    IndexOutOfBoundsBadRequestException,
    NullPointerBadRequestException,
)
from dbc.infrastructure.exception_factory import FamilyExceptionFactory

logger = logging.getLogger(__name__)


def _wire(name: str, factory: FamilyExceptionFactory) -> Validator:
    validator = Validator(factory)
    logger.debug("Wired %s validator with %r", name, factory)
    return validator


_VALIDATION = _wire(
    "validation",
    FamilyExceptionFactory(
        illegal_argument=IllegalArgumentValidationException,
        null_pointer=NullPointerValidationException,
        index_out_of_bounds=IndexOutOfBoundsValidationException,
        illegal_state=IllegalStateValidationException,
    ),
)

_REQUIREMENT = _wire(
    "requirement",
    FamilyExceptionFactory(
        illegal_argument=IllegalArgumentRequirementException,
        null_pointer=NullPointerRequirementException,
        index_out_of_bounds=IndexOutOfBoundsRequirementException,
        illegal_state=IllegalStateRequirementException,
    ),
)

_ENSURANCE = _wire(
    "ensurance",
    FamilyExceptionFactory(
        illegal_argument=IllegalArgumentEnsuranceException,
        null_pointer=NullPointerEnsuranceException,
        index_out_of_bounds=IndexOutOfBoundsEnsuranceException,
        illegal_state=IllegalStateEnsuranceException,
    ),
)

_INVARIANCE = _wire(
    "invariance",
    FamilyExceptionFactory(
        illegal_argument=IllegalArgumentInvarianceException,
        null_pointer=NullPointerInvarianceException,
        index_out_of_bounds=IndexOutOfBoundsInvarianceException,
        illegal_state=IllegalStateInvarianceException,
    ),
)

_BAD_REQUEST = _wire(
    "bad request",
    FamilyExceptionFactory(
        illegal_argument=IllegalArgumentBadRequestException,
        null_pointer=NullPointerBadRequestException,
        index_out_of_bounds=IndexOutOfBoundsBadRequestException,
        illegal_state=IllegalStateBadRequestException,
    ),
)


def validation_validator() -> Validator:
    return _VALIDATION


def requirement_validator() -> Validator:
    return _REQUIREMENT


def ensurance_validator() -> Validator:
    return _ENSURANCE


def invariance_validator() -> Validator:
    return _INVARIANCE


def bad_request_validator() -> Validator:
    return _BAD_REQUEST

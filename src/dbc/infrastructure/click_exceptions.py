"""Bad-request exception family for click applications.

These are ``click.BadParameter`` errors, so a check that fails inside a click
command or parameter callback is reported to the user as a usage error
instead of a traceback.
"""

from __future__ import annotations

import click

from dbc.domain.exceptions import ContractViolation


class BadRequestException(ContractViolation, click.BadParameter):
    """The caller sent a value the command cannot accept."""


class IllegalArgumentBadRequestException(BadRequestException, ValueError):
    pass


class NullPointerBadRequestException(BadRequestException, TypeError):
    pass


class IndexOutOfBoundsBadRequestException(BadRequestException, IndexError):
    pass


class IllegalStateBadRequestException(BadRequestException, RuntimeError):
    pass

"""Abstract exception factory used by the validation engine."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ExceptionFactory(ABC):
    """Builds the exceptions a Validator raises.

    Hooks return the exception; the engine raises it.  These five kinds are
    the complete set of failures a check can produce.
    """

    @abstractmethod
    def illegal_argument(self, message: str) -> Exception:
        """An argument failed a check."""

    @abstractmethod
    def null_pointer(self, message: str) -> Exception:
        """A required value was None."""

    @abstractmethod
    def index_out_of_bounds(self, message: str) -> Exception:
        """An index fell outside its container."""

    @abstractmethod
    def illegal_state(self, message: str) -> Exception:
        """A state check was false."""

    @abstractmethod
    def illegal_argument_with_cause(self, message: str, cause: BaseException) -> Exception:
        """An argument failed a check and the message could not be built."""

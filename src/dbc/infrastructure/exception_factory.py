"""Concrete ExceptionFactory that builds one family of exception classes."""

from __future__ import annotations

from dbc.domain.factory import ExceptionFactory


class FamilyExceptionFactory(ExceptionFactory):
    """Maps the five failure kinds onto the four classes of one family.

    The illegal-argument-with-cause kind reuses the illegal-argument class and
    chains the cause onto it.
    """

    def __init__(
        self,
        illegal_argument: type[Exception],
        null_pointer: type[Exception],
        index_out_of_bounds: type[Exception],
        illegal_state: type[Exception],
    ) -> None:
        for name, cls in (
            ("illegal_argument", illegal_argument),
            ("null_pointer", null_pointer),
            ("index_out_of_bounds", index_out_of_bounds),
            ("illegal_state", illegal_state),
        ):
            if not (isinstance(cls, type) and issubclass(cls, Exception)):
                raise TypeError(f"{name} must be an exception class, got {cls!r}")
        self._illegal_argument = illegal_argument
        self._null_pointer = null_pointer
        self._index_out_of_bounds = index_out_of_bounds
        self._illegal_state = illegal_state

    # --- ExceptionFactory interface -------------------------------------------

    def illegal_argument(self, message: str) -> Exception:
        return self._illegal_argument(message)

    def null_pointer(self, message: str) -> Exception:
        return self._null_pointer(message)

    def index_out_of_bounds(self, message: str) -> Exception:
        return self._index_out_of_bounds(message)

    def illegal_state(self, message: str) -> Exception:
        return self._illegal_state(message)

    def illegal_argument_with_cause(self, message: str, cause: BaseException) -> Exception:
        exc = self._illegal_argument(message)
        exc.__cause__ = cause
        return exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._illegal_argument.__name__}, ...)"

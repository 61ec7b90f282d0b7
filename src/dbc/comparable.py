"""Comparable mixin — readable comparisons from a single ``compare_to``."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Comparable(ABC):
    """Derives named comparisons and ordering operators from ``compare_to``.

    ``compare_to`` returns a negative number, zero or a positive number when
    ``self`` is less than, equal to or greater than ``other``.  The ordering
    operators make subclasses usable with ``inclusive_between`` and
    ``exclusive_between``.  Equality and hashing are left to the subclass.
    """

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        """Three-way comparison with ``other``."""

    def is_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) == 0

    def is_not_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) != 0

    def is_less_than(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def is_less_than_or_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) <= 0

    def is_greater_than(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def is_greater_than_or_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) >= 0

    # --- Ordering operators ---------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        return self.is_less_than(other)

    def __le__(self, other: Any) -> bool:
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: Any) -> bool:
        return self.is_greater_than(other)

    def __ge__(self, other: Any) -> bool:
        return self.is_greater_than_or_equal_to(other)

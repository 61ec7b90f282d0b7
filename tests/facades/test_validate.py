"""Documented behaviour of the canonical validate façade."""

import pytest

from dbc import validate
from dbc.domain.exceptions import (
    IllegalArgumentValidationException,
    IndexOutOfBoundsValidationException,
    NullPointerValidationException,
)


class TestDocumentedScenarios:

    def test_is_true_custom_message(self):
        with pytest.raises(IllegalArgumentValidationException) as exc_info:
            validate.is_true(False, "Must be %s", True)
        assert str(exc_info.value) == "Must be True"

    def test_precision_without_digits_in_custom_message(self):
        with pytest.raises(IllegalArgumentValidationException) as exc_info:
            validate.is_true(False, "Value %.f", 3.7)
        assert str(exc_info.value) == "Value 4"

    def test_not_empty_none_is_null_pointer(self):
        with pytest.raises(NullPointerValidationException) as exc_info:
            validate.not_empty(None, "Must not be %s", "empty")
        assert str(exc_info.value) == "Must not be empty"

    def test_exclusive_between_upper_bound(self):
        with pytest.raises(IllegalArgumentValidationException) as exc_info:
            validate.exclusive_between(0, 5, 5)
        assert str(exc_info.value) == "The value 5 is not in the specified exclusive range of 0 to 5"

    def test_valid_index(self):
        array = ["Hi"]
        assert validate.valid_index(array, 0) is array
        with pytest.raises(IndexOutOfBoundsValidationException) as exc_info:
            validate.valid_index(array, 1)
        assert str(exc_info.value) == "The validated array index is invalid: 1"

    def test_matches_pattern(self):
        with pytest.raises(IllegalArgumentValidationException) as exc_info:
            validate.matches_pattern("hi", "[0-9]*")
        assert str(exc_info.value) == "The string hi does not match the pattern [0-9]*"

    def test_is_assignable_from(self):
        with pytest.raises(IllegalArgumentValidationException) as exc_info:
            validate.is_assignable_from(list, str)
        assert str(exc_info.value) == "Cannot assign a str to a list"


class TestChaining:

    def test_checks_compose_on_the_returned_value(self):
        name = validate.not_blank(validate.not_null("  Ada  ")).strip()
        assert name == "Ada"

    def test_no_null_elements_reports_first_index(self):
        with pytest.raises(IllegalArgumentValidationException, match="index: 2$"):
            validate.no_null_elements(["a", "b", None, None])

    def test_builtin_except_clauses_still_work(self):
        with pytest.raises(ValueError):
            validate.inclusive_between(1, 3, 4)
        with pytest.raises(IndexError):
            validate.valid_index("abc", 3)
        with pytest.raises(TypeError):
            validate.not_null(None)

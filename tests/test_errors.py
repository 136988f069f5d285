# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for babysitter error classes."""

import pytest

from babysitter._errors import (
    ItemExistsError,
    ItemNotFoundError,
    SitterError,
    ValidationError,
)


class TestSitterError:
    """Tests for base SitterError class."""

    def test_default_initialization(self):
        error = SitterError()
        assert str(error) == "babysitter error"
        assert error.message == "babysitter error"
        assert error.details == {}
        assert error.status_code == 500

    def test_custom_message(self):
        error = SitterError("Custom error message")
        assert str(error) == "Custom error message"
        assert error.message == "Custom error message"

    def test_with_details(self):
        details = {"key": "value", "count": 42}
        error = SitterError("Error", details=details)
        assert error.details == details

    def test_with_status_code(self):
        error = SitterError("Error", status_code=418)
        assert error.status_code == 418
        assert SitterError.status_code == 500

    def test_with_cause(self):
        cause = ValueError("Original error")
        error = SitterError("Wrapped error", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict_basic(self):
        error = SitterError("Test error", status_code=400)
        assert error.to_dict() == {
            "error": "SitterError",
            "message": "Test error",
            "status_code": 400,
        }

    def test_to_dict_with_details(self):
        error = SitterError("Error", details={"field": "value"})
        assert error.to_dict()["details"] == {"field": "value"}

    def test_to_dict_with_cause(self):
        error = SitterError("Error", cause=ValueError("Root cause"))
        result = error.to_dict(include_cause=True)
        assert result["cause"] == "ValueError('Root cause')"

    def test_to_dict_without_cause(self):
        result = SitterError("Error").to_dict(include_cause=True)
        assert "cause" not in result


class TestValidationError:

    def test_defaults(self):
        error = ValidationError()
        assert error.message == "Validation failed"
        assert error.status_code == 422

    def test_from_value(self):
        error = ValidationError.from_value(
            "1", expected="int", message="Position must be an integer."
        )
        assert error.message == "Position must be an integer."
        assert error.details == {"value": "1", "type": "str", "expected": "int"}

    def test_from_value_extra_details(self):
        error = ValidationError.from_value(3, field="at_position")
        assert error.details["field"] == "at_position"
        assert "expected" not in error.details


@pytest.mark.parametrize(
    "cls, status, message",
    [
        (ItemNotFoundError, 404, "Item not found"),
        (ItemExistsError, 409, "Item already exists"),
    ],
)
def test_item_errors(cls, status, message):
    error = cls()
    assert isinstance(error, SitterError)
    assert error.status_code == status
    assert error.message == message


def test_errors_are_catchable_as_base():
    with pytest.raises(SitterError):
        raise ItemNotFoundError("missing", details={"identity": 1})

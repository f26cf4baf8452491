"""Tests for privacy_grade.utils.errors — error message extraction."""

from __future__ import annotations

from privacy_grade.utils.errors import get_error_message


class TestGetErrorMessage:
    """Tests for get_error_message()."""

    def test_exception_with_message(self) -> None:
        assert get_error_message(ValueError("Invalid IPv6 URL")) == "Invalid IPv6 URL"

    def test_exception_without_message(self) -> None:
        assert get_error_message(ValueError()) == "ValueError"

    def test_custom_exception(self) -> None:
        class CustomError(Exception):
            pass

        assert get_error_message(CustomError("custom")) == "custom"

    def test_non_exception(self) -> None:
        assert get_error_message("oops") == "Unknown error"

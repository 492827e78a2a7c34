"""Tests for the built-in check library."""

import re
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from typea.checks import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    URL_PATTERN,
    UUID_PATTERN,
    check_in,
    passthrough,
)
from typea.checks.builtins import (
    BUILTIN_TYPES,
    array_type,
    boolean_type,
    date_type,
    exact_length,
    integer_type,
    max_length,
    maximum,
    min_length,
    minimum,
    number_type,
    object_type,
    reg,
    string_type,
    trim,
)
from typea.types import CheckError


# =============================================================================
# Pattern Tests
# =============================================================================


class TestPatterns:
    """Test the regex patterns used by the formatted string types."""

    def test_email_valid(self):
        valid_emails = [
            "test@example.com",
            "user.name@domain.co.uk",
            "user+tag@example.org",
            "user123@test.io",
        ]
        for email in valid_emails:
            assert EMAIL_PATTERN.match(email), f"{email} should be valid"

    def test_email_invalid(self):
        invalid_emails = [
            "not-an-email",
            "@example.com",
            "user@",
            "user@.com",
            "user name@example.com",
        ]
        for email in invalid_emails:
            assert not EMAIL_PATTERN.match(email), f"{email} should be invalid"

    def test_phone_valid(self):
        valid_phones = [
            "123-456-7890",
            "(123) 456-7890",
            "+1 123 456 7890",
            "1234567890",
            "+44 20 7946 0958",
        ]
        for phone in valid_phones:
            assert PHONE_PATTERN.match(phone), f"{phone} should be valid"

    def test_url(self):
        assert URL_PATTERN.match("https://sub.domain.com/path?query=1")
        assert URL_PATTERN.match("http://localhost:8080")
        assert not URL_PATTERN.match("ftp://example.com")
        assert not URL_PATTERN.match("example.com")

    def test_uuid(self):
        assert UUID_PATTERN.match("550e8400-e29b-41d4-a716-446655440000")
        assert UUID_PATTERN.match("F47AC10B-58CC-4372-A567-0E02B2C3D479")
        assert not UUID_PATTERN.match("550e8400e29b41d4a716446655440000")


# =============================================================================
# Common Checks
# =============================================================================


class TestCommonChecks:
    def test_passthrough(self):
        value = object()
        assert passthrough(value, None, None) is value

    def test_in_accepts_member(self):
        assert check_in("red", ["red", "green"], None) == "red"

    def test_in_rejects_non_member(self):
        with pytest.raises(CheckError, match="must be one of: 'red', 'green'"):
            check_in("blue", ["red", "green"], None)

    def test_in_rejects_unhashable_against_set(self):
        with pytest.raises(CheckError):
            check_in(["red"], {"red"}, None)


# =============================================================================
# String Checks
# =============================================================================


class TestStringChecks:
    def test_string_type(self):
        assert string_type("abc", None, None) == "abc"
        with pytest.raises(CheckError, match="must be a string"):
            string_type(123, None, None)

    def test_trim(self):
        assert trim("  abc ", True, None) == "abc"
        assert trim("  abc ", False, None) == "  abc "

    def test_length_bounds(self):
        assert min_length("abc", 3, None) == "abc"
        assert max_length("abc", 3, None) == "abc"
        with pytest.raises(CheckError, match="at least 4 characters"):
            min_length("abc", 4, None)
        with pytest.raises(CheckError, match="at most 2 characters"):
            max_length("abc", 2, None)

    def test_exact_length_on_arrays(self):
        assert exact_length([1, 2], 2, None) == [1, 2]
        with pytest.raises(CheckError, match="exactly 3 elements"):
            exact_length([1, 2], 3, None)

    def test_reg_searches(self):
        assert reg("order-123", r"\d+", None) == "order-123"
        assert reg("ABC", re.compile("^abc$", re.IGNORECASE), None) == "ABC"
        with pytest.raises(CheckError, match="must match pattern"):
            reg("abc", r"^\d+$", None)


# =============================================================================
# Numeric Checks
# =============================================================================


class TestNumberChecks:
    def test_numbers_pass_through(self):
        assert number_type(3, None, None) == 3
        assert number_type(2.5, None, None) == 2.5
        assert number_type(Decimal("1.1"), None, None) == Decimal("1.1")

    def test_numeric_strings_are_parsed(self):
        assert number_type("42", None, None) == 42
        assert isinstance(number_type("42", None, None), int)
        assert number_type(" -4.5 ", None, None) == -4.5

    def test_rejects_non_numbers(self):
        for value in ["abc", "nan", True, [], {}]:
            with pytest.raises(CheckError, match="must be a number"):
                number_type(value, None, None)

    def test_rejects_nan(self):
        with pytest.raises(CheckError):
            number_type(float("nan"), None, None)

    def test_rejects_decimal_nan(self):
        for value in [Decimal("NaN"), Decimal("sNaN")]:
            with pytest.raises(CheckError, match="must be a number"):
                number_type(value, None, None)

    def test_integer_type(self):
        assert integer_type(7, None, None) == 7
        assert integer_type("7", None, None) == 7
        assert integer_type(7.0, None, None) == 7
        with pytest.raises(CheckError, match="must be an integer"):
            integer_type(7.5, None, None)
        with pytest.raises(CheckError, match="must be an integer"):
            integer_type(float("inf"), None, None)

    def test_bounds(self):
        assert minimum(5, 5, None) == 5
        assert maximum(5, 5, None) == 5
        with pytest.raises(CheckError, match="must be at least 6"):
            minimum(5, 6, None)
        with pytest.raises(CheckError, match="must be at most 4"):
            maximum(5, 4, None)


# =============================================================================
# Other Types
# =============================================================================


class TestBooleanType:
    def test_accepts_booleans_and_spellings(self):
        assert boolean_type(True, None, None) is True
        assert boolean_type("false", None, None) is False
        assert boolean_type("TRUE", None, None) is True
        assert boolean_type(1, None, None) is True
        assert boolean_type("0", None, None) is False

    def test_rejects_other_values(self):
        for value in ["yes", 2, 1.0, None]:
            with pytest.raises(CheckError, match="must be a boolean"):
                boolean_type(value, None, None)


class TestDateType:
    def test_dates_pass_through(self):
        today = date(2024, 1, 31)
        assert date_type(today, None, None) is today

    def test_iso_strings(self):
        assert date_type("2024-01-31T10:00:00", None, None) == datetime(2024, 1, 31, 10)
        assert date_type("2024-01-31T10:00:00Z", None, None) == datetime(
            2024, 1, 31, 10, tzinfo=timezone.utc
        )

    def test_timestamps_are_utc(self):
        assert date_type(0, None, None) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_rejects_garbage(self):
        for value in ["not a date", True, [2024]]:
            with pytest.raises(CheckError, match="must be a valid date"):
                date_type(value, None, None)

    def test_bounds_accept_iso_strings(self):
        value = datetime(2024, 6, 1, 12)
        assert minimum(value, "2024-01-01", None) == value
        with pytest.raises(CheckError):
            maximum(value, "2024-05-31", None)

    def test_bounds_mix_aware_and_naive(self):
        aware = datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert minimum(aware, datetime(2024, 1, 1), None) == aware
        naive = datetime(2024, 6, 1)
        assert maximum(naive, datetime(2024, 12, 1, tzinfo=timezone.utc), None) == naive

    def test_bounds_on_plain_dates(self):
        assert minimum(date(2024, 6, 1), datetime(2024, 1, 1, 8), None) == date(2024, 6, 1)


class TestContainerTypes:
    def test_object_type_copies_mapping(self):
        source = {"a": 1}
        result = object_type(source, None, None)
        assert result == source
        assert result is not source
        with pytest.raises(CheckError, match="must be an object"):
            object_type([1], None, None)

    def test_array_type(self):
        assert array_type((1, 2), None, None) == [1, 2]
        with pytest.raises(CheckError, match="must be an array"):
            array_type("12", None, None)


class TestBuiltinBundles:
    def test_formatted_types_validate_format(self):
        email = BUILTIN_TYPES["Email"]["type"]
        assert email("a@b.io", None, None) == "a@b.io"
        with pytest.raises(CheckError, match="must be a valid email address"):
            email("nope", None, None)

    def test_every_bundle_has_type_check(self):
        for name, checks in BUILTIN_TYPES.items():
            assert "type" in checks, name

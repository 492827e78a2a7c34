"""Built-in types for typea.

Each type is a bundle of check functions following the check contract
`(data, option, origin) -> coerced data`, raising CheckError on rejection.

Types:
- String: trim, minLength, maxLength, length, reg, in
- Number / Integer: min, max, in
- Boolean: in
- Date: min, max
- Object: in
- Array: minLength, maxLength, length
- Email, Phone, URL, UUID: formatted strings
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from typea.checks.common import check_in
from typea.types import Check, CheckError

if TYPE_CHECKING:
    from typea.registry import TypeRegistry


# =============================================================================
# Format Patterns
# =============================================================================

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$"
)

PHONE_PATTERN = re.compile(
    r"^[\+]?[(]?[0-9]{1,3}[)]?[-\s\.]?[(]?[0-9]{1,4}[)]?[-\s\.]?[0-9]{1,4}[-\s\.]?[0-9]{1,9}$"
)

URL_PATTERN = re.compile(
    r"^https?://[^\s/$.?#].[^\s]*$",
    re.IGNORECASE
)

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE
)

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


# =============================================================================
# String Checks
# =============================================================================


def string_type(data: Any, option: Any, origin: Any) -> str:
    if not isinstance(data, str):
        raise CheckError("must be a string")
    return data


def trim(data: Any, option: Any, origin: Any) -> Any:
    """Strip surrounding whitespace when the option is true."""
    if option and isinstance(data, str):
        return data.strip()
    return data


def min_length(data: Any, option: int, origin: Any) -> Any:
    if len(data) < option:
        raise CheckError(f"must be at least {option} {_length_unit(data)}")
    return data


def max_length(data: Any, option: int, origin: Any) -> Any:
    if len(data) > option:
        raise CheckError(f"must be at most {option} {_length_unit(data)}")
    return data


def exact_length(data: Any, option: int, origin: Any) -> Any:
    if len(data) != option:
        raise CheckError(f"must be exactly {option} {_length_unit(data)}")
    return data


def reg(data: Any, option: str | re.Pattern[str], origin: Any) -> Any:
    """Require a regex match anywhere in the string."""
    pattern = option if isinstance(option, re.Pattern) else re.compile(option)
    if not isinstance(data, str) or not pattern.search(data):
        raise CheckError(f"must match pattern {pattern.pattern}")
    return data


def _length_unit(data: Any) -> str:
    return "characters" if isinstance(data, str) else "elements"


def _format_type(pattern: re.Pattern[str], description: str) -> Check:
    def check(data: Any, option: Any, origin: Any) -> str:
        if not isinstance(data, str) or not pattern.match(data):
            raise CheckError(f"must be a valid {description}")
        return data

    check.__name__ = f"{description.replace(' ', '_')}_type"
    return check


# =============================================================================
# Numeric Checks
# =============================================================================


def number_type(data: Any, option: Any, origin: Any) -> int | float | Decimal:
    """Accept numbers and numeric strings; reject booleans and NaN."""
    if isinstance(data, bool):
        raise CheckError("must be a number")
    if isinstance(data, int):
        return data
    if isinstance(data, Decimal):
        if data.is_nan():
            raise CheckError("must be a number")
        return data
    if isinstance(data, float):
        if math.isnan(data):
            raise CheckError("must be a number")
        return data
    if isinstance(data, str):
        text = data.strip()
        if INTEGER_PATTERN.match(text):
            return int(text)
        try:
            value = float(text)
        except ValueError:
            raise CheckError("must be a number") from None
        if math.isnan(value):
            raise CheckError("must be a number")
        return value
    raise CheckError("must be a number")


def integer_type(data: Any, option: Any, origin: Any) -> int:
    value = number_type(data, option, origin)
    if isinstance(value, int):
        return value
    try:
        if value == int(value):
            return int(value)
    except (OverflowError, ValueError, InvalidOperation):
        pass
    raise CheckError("must be an integer")


def minimum(data: Any, option: Any, origin: Any) -> Any:
    if data < _comparable(data, option):
        raise CheckError(f"must be at least {option}")
    return data


def maximum(data: Any, option: Any, origin: Any) -> Any:
    if data > _comparable(data, option):
        raise CheckError(f"must be at most {option}")
    return data


def _comparable(data: Any, option: Any) -> Any:
    """Bring a bound to the data's kind (dates may be given as ISO strings)."""
    if not isinstance(data, date):
        return option
    if not isinstance(option, date):
        option = date_type(option, None, None)
    if not isinstance(data, datetime):
        return option.date() if isinstance(option, datetime) else option
    if not isinstance(option, datetime):
        return datetime(option.year, option.month, option.day, tzinfo=data.tzinfo)
    if data.tzinfo is None and option.tzinfo is not None:
        return option.astimezone(timezone.utc).replace(tzinfo=None)
    if data.tzinfo is not None and option.tzinfo is None:
        return option.replace(tzinfo=timezone.utc)
    return option


# =============================================================================
# Other Types
# =============================================================================


def boolean_type(data: Any, option: Any, origin: Any) -> bool:
    if isinstance(data, bool):
        return data
    if isinstance(data, int) and data in (0, 1):
        return bool(data)
    if isinstance(data, str):
        text = data.strip().lower()
        if text in ("true", "1"):
            return True
        if text in ("false", "0"):
            return False
    raise CheckError("must be a boolean")


def date_type(data: Any, option: Any, origin: Any) -> date:
    """Accept dates, ISO-8601 strings and UNIX timestamps (as UTC)."""
    if isinstance(data, date):
        return data
    if isinstance(data, (int, float)) and not isinstance(data, bool):
        try:
            return datetime.fromtimestamp(data, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise CheckError("must be a valid date") from None
    if isinstance(data, str):
        text = data.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            raise CheckError("must be a valid date") from None
    raise CheckError("must be a valid date")


def object_type(data: Any, option: Any, origin: Any) -> dict[Any, Any]:
    if not isinstance(data, Mapping):
        raise CheckError("must be an object")
    return dict(data)


def array_type(data: Any, option: Any, origin: Any) -> list[Any]:
    if not isinstance(data, (list, tuple)):
        raise CheckError("must be an array")
    return list(data)


# =============================================================================
# Registration
# =============================================================================

_STRING_CHECKS: dict[str, Check] = {
    "trim": trim,
    "minLength": min_length,
    "maxLength": max_length,
    "length": exact_length,
    "reg": reg,
    "in": check_in,
}

_NUMBER_CHECKS: dict[str, Check] = {
    "min": minimum,
    "max": maximum,
    "in": check_in,
}

BUILTIN_TYPES: dict[str, dict[str, Check]] = {
    "String": {"type": string_type, **_STRING_CHECKS},
    "Number": {"type": number_type, **_NUMBER_CHECKS},
    "Integer": {"type": integer_type, **_NUMBER_CHECKS},
    "Boolean": {"type": boolean_type, "in": check_in},
    "Date": {"type": date_type, "min": minimum, "max": maximum},
    "Object": {"type": object_type, "in": check_in},
    "Array": {
        "type": array_type,
        "minLength": min_length,
        "maxLength": max_length,
        "length": exact_length,
    },
    "Email": {"type": _format_type(EMAIL_PATTERN, "email address"), **_STRING_CHECKS},
    "Phone": {"type": _format_type(PHONE_PATTERN, "phone number"), **_STRING_CHECKS},
    "URL": {"type": _format_type(URL_PATTERN, "URL"), **_STRING_CHECKS},
    "UUID": {"type": _format_type(UUID_PATTERN, "UUID"), **_STRING_CHECKS},
}

BUILTIN_ALIASES: dict[type, str] = {
    str: "String",
    float: "Number",
    int: "Integer",
    bool: "Boolean",
    datetime: "Date",
    date: "Date",
    dict: "Object",
    list: "Array",
}


def register_builtin_types(registry: TypeRegistry) -> None:
    """Register all built-in types and their class aliases with a registry."""
    for name, checks in BUILTIN_TYPES.items():
        registry.use(name, checks)
    for cls, name in BUILTIN_ALIASES.items():
        registry.alias(cls, name)

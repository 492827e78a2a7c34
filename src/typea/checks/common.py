"""Checks every type gets when it is minted by name."""

from typing import Any

from typea.types import Check, CheckError


def passthrough(data: Any, option: Any, origin: Any) -> Any:
    """Accept any non-empty value unchanged."""
    return data


def check_in(data: Any, option: Any, origin: Any) -> Any:
    """Require the value to be one of the allowed values."""
    try:
        allowed = data in option
    except TypeError:
        allowed = False
    if not allowed:
        choices = ", ".join(repr(choice) for choice in option)
        raise CheckError(f"must be one of: {choices}")
    return data


COMMON_CHECKS: dict[str, Check] = {
    "type": passthrough,
    "in": check_in,
}

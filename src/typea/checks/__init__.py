"""Check library for typea.

This module provides the common check bundle every named type starts from
and the built-in types registered with the default registry.
"""

from typea.checks.common import COMMON_CHECKS, check_in, passthrough
from typea.checks.builtins import (
    BUILTIN_ALIASES,
    BUILTIN_TYPES,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    URL_PATTERN,
    UUID_PATTERN,
    register_builtin_types,
)

__all__ = [
    "BUILTIN_ALIASES",
    "BUILTIN_TYPES",
    "COMMON_CHECKS",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "URL_PATTERN",
    "UUID_PATTERN",
    "check_in",
    "passthrough",
    "register_builtin_types",
]

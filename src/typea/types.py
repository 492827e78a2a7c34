"""Core types for the typea validator.

This module defines the foundational types shared by every layer:
- Mode: how absence of a value is treated (default, strict, loose)
- MISSING: marker for "no value" (absent key, missing array element, no output)
- Path segments and ValidationFailure: the structured error channel
- CheckError: raised by check functions to reject a value
- Result: what the public entry points return
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable


class Mode(Enum):
    """Validation mode.

    DEFAULT: empty fields without allowNull/default are omitted from output
    STRICT: empty fields without allowNull/default are errors
    LOOSE: empty compound values are skipped outright
    """

    DEFAULT = "default"
    STRICT = "strict"
    LOOSE = "loose"


class _Missing:
    """Marker for an absent value. Distinct from None, which is a real value."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

# Values treated as "empty" unless a field overrides them with `ignore`
EMPTY_VALUES: tuple[Any, ...] = (MISSING, None, "")

# Check signature: (data, option, origin) -> coerced data; raises CheckError
Check = Callable[[Any, Any, Any], Any]


def is_empty(value: Any, empty_values: Iterable[Any] | None = None) -> bool:
    """Return True if value is one of the empty values.

    Matching is by identity or by equality between values of the same type,
    so 0 and False are never confused with each other.
    """
    candidates = EMPTY_VALUES if empty_values is None else empty_values
    for candidate in candidates:
        if value is candidate:
            return True
        if type(value) is type(candidate) and value == candidate:
            return True
    return False


def strict_equals(left: Any, right: Any) -> bool:
    """Equality without cross-kind coercion (True never equals 1)."""
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    numeric = (int, float, Decimal)
    if isinstance(left, numeric) and isinstance(right, numeric):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right


# -----------------------------------------------------------------------------
# Error channel
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldSegment:
    """A mapping key in an error path, optionally displayed under an alias."""

    key: Any
    label: str | None = None

    def render(self, first: bool) -> str:
        text = self.label if self.label is not None else str(self.key)
        return text if first else f".{text}"


@dataclass(frozen=True)
class IndexSegment:
    """A sequence index in an error path."""

    index: int

    def render(self, first: bool) -> str:
        return f"[{self.index}]"


PathSegment = FieldSegment | IndexSegment


def render_path(path: Iterable[PathSegment]) -> str:
    """Render a path as `a.b[2].c`."""
    return "".join(segment.render(i == 0) for i, segment in enumerate(path))


class CheckError(Exception):
    """Raised by a check function to reject a value.

    The message should describe the problem without naming the field,
    e.g. "must be at least 3 characters". The path is added by the evaluator.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationFailure(Exception):
    """The first violation found while evaluating an expression.

    Raised at the failing leaf; every structural level on the way back up
    prepends its own segment with `within()` and re-raises.

    Attributes:
        message: What went wrong, without the path
        path: Segments from the root to the failing value
        label: Alias of the failing field, applied to the next field segment
    """

    def __init__(self, message: str, label: str | None = None):
        self.message = message
        self.path: list[PathSegment] = []
        self.label = label
        super().__init__(message)

    def within(self, segment: PathSegment) -> "ValidationFailure":
        """Prepend a segment to the path and return self for re-raising."""
        if isinstance(segment, FieldSegment) and self.label is not None:
            segment = FieldSegment(segment.key, self.label)
        self.label = None
        self.path.insert(0, segment)
        return self

    def render(self) -> str:
        if self.path:
            return f"{render_path(self.path)}: {self.message}"
        if self.label is not None:
            return f"{self.label}: {self.message}"
        return self.message

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Result:
    """Outcome of a validation call.

    Exactly one of `error` and `data` is meaningful: `error` is None on
    success, and `data` is None on failure.

    Attributes:
        error: Rendered error message, or None on success
        data: The sanitized/coerced data on success
        failure: The structured failure, for callers that want the path
    """

    error: str | None = None
    data: Any = None
    failure: ValidationFailure | None = field(default=None, compare=False, repr=False)

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def path(self) -> list[PathSegment]:
        if self.failure is None:
            return []
        return list(self.failure.path)

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error, "path": render_path(self.path)}
        return {"error": None, "data": self.data}

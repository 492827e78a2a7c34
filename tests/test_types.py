"""Tests for the core typea types: emptiness, equality, paths and results."""

import copy
from decimal import Decimal

from typea.types import (
    MISSING,
    FieldSegment,
    IndexSegment,
    Result,
    ValidationFailure,
    is_empty,
    render_path,
    strict_equals,
)


# =============================================================================
# Emptiness
# =============================================================================


class TestIsEmpty:
    def test_default_empty_values(self):
        assert is_empty(MISSING)
        assert is_empty(None)
        assert is_empty("")

    def test_falsy_values_are_not_empty(self):
        assert not is_empty(0)
        assert not is_empty(False)
        assert not is_empty([])
        assert not is_empty({})
        assert not is_empty(" ")

    def test_custom_empty_values(self):
        assert is_empty(0, (0,))
        assert not is_empty(False, (0,))
        assert not is_empty("", (None,))

    def test_unhashable_values(self):
        assert not is_empty([1, 2])
        assert is_empty([], ([],))


class TestMissing:
    def test_missing_is_falsy_singleton(self):
        assert not MISSING
        assert copy.deepcopy(MISSING) is MISSING
        assert repr(MISSING) == "MISSING"


# =============================================================================
# Strict equality
# =============================================================================


class TestStrictEquals:
    def test_same_values(self):
        assert strict_equals("a", "a")
        assert strict_equals(3, 3)
        assert strict_equals(None, None)

    def test_bool_never_equals_int(self):
        assert not strict_equals(True, 1)
        assert not strict_equals(0, False)
        assert strict_equals(True, True)

    def test_numbers_compare_across_kinds(self):
        assert strict_equals(1, 1.0)
        assert strict_equals(Decimal("2.5"), 2.5)

    def test_no_string_coercion(self):
        assert not strict_equals("1", 1)
        assert not strict_equals(None, "")


# =============================================================================
# Paths and failures
# =============================================================================


class TestPaths:
    def test_render_nested_path(self):
        path = [FieldSegment("items"), IndexSegment(2), FieldSegment("price")]
        assert render_path(path) == "items[2].price"

    def test_render_path_starting_with_index(self):
        assert render_path([IndexSegment(0), FieldSegment("a")]) == "[0].a"

    def test_label_replaces_key(self):
        assert render_path([FieldSegment("a", "Alias"), FieldSegment("b")]) == "Alias.b"


class TestValidationFailure:
    def test_root_failure_renders_message_only(self):
        assert str(ValidationFailure("value must equal 3")) == "value must equal 3"

    def test_within_prepends_segments(self):
        failure = ValidationFailure("value must be a string")
        failure.within(FieldSegment("d")).within(FieldSegment("c"))
        assert failure.render() == "c.d: value must be a string"

    def test_label_applies_to_next_field_segment(self):
        failure = ValidationFailure("must be a string", label="User name")
        failure.within(FieldSegment("name")).within(FieldSegment("user"))
        assert failure.render() == "user.User name: must be a string"
        assert failure.label is None

    def test_label_is_dropped_by_index_segment(self):
        failure = ValidationFailure("bad", label="Alias")
        failure.within(IndexSegment(1))
        assert failure.render() == "[1]: bad"

    def test_label_at_root(self):
        assert ValidationFailure("bad", label="Alias").render() == "Alias: bad"


class TestResult:
    def test_success(self):
        result = Result(data={"a": 1})
        assert result.valid
        assert result.path == []
        assert result.to_dict() == {"error": None, "data": {"a": 1}}

    def test_failure(self):
        failure = ValidationFailure("bad").within(FieldSegment("a"))
        result = Result(error=failure.render(), failure=failure)
        assert not result.valid
        assert result.data is None
        assert result.path == [FieldSegment("a")]
        assert result.to_dict() == {"error": "a: bad", "path": "a"}

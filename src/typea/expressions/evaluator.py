"""Evaluator for typea expressions.

Walks the node tree alongside the data, returning the sanitized value or
raising ValidationFailure at the first violation. Each structural level
catches the failure, prepends its own path segment and re-raises, so the
failure reaching the caller carries the full path from the root.
"""

from collections.abc import Mapping
from typing import Any

from typea.expressions.nodes import (
    ArrayShape,
    Field,
    Literal,
    Node,
    ObjectShape,
    TypeRef,
)
from typea.registry import TypeKey, TypeRegistry
from typea.types import (
    MISSING,
    CheckError,
    FieldSegment,
    IndexSegment,
    Mode,
    ValidationFailure,
    is_empty,
    strict_equals,
)

EMPTY_NOT_ALLOWED = "value not allowed to be empty"


class Evaluator:
    """Evaluates an expression tree against data.

    Usage:
        evaluator = Evaluator(registry, Mode.STRICT, origin=payload)
        sanitized = evaluator.evaluate(compile_expression(expr), payload)

    Attributes:
        registry: Where type identifiers are resolved
        mode: Emptiness policy for fields without allowNull/default
        origin: Root data of the call, passed to every check
        reject_extra_items: Fail positional arrays that have more elements
            than the expression
    """

    def __init__(
        self,
        registry: TypeRegistry,
        mode: Mode = Mode.DEFAULT,
        origin: Any = MISSING,
        reject_extra_items: bool = False,
    ):
        self.registry = registry
        self.mode = mode
        self.origin = origin
        self.reject_extra_items = reject_extra_items

    def evaluate(self, node: Node, data: Any, key: Any = None) -> Any:
        """Evaluate a node and return the sanitized data, or MISSING for no output."""
        method_name = f"_eval_{type(node).__name__.lower()}"
        method = getattr(self, method_name, None)

        if method is None:
            raise TypeError(f"Unknown expression node: {type(node).__name__}")

        return method(node, data, key)

    # -------------------------------------------------------------------------
    # Node type evaluators
    # -------------------------------------------------------------------------

    def _eval_literal(self, node: Literal, data: Any, key: Any) -> Any:
        # None output is dropped by null-filtering, so absence must match too
        if node.value is None and data is MISSING:
            return MISSING
        if strict_equals(data, node.value):
            return data
        raise ValidationFailure(f"value must equal {node.value!r}")

    def _eval_typeref(self, node: TypeRef, data: Any, key: Any) -> Any:
        if is_empty(data):
            if self.mode is Mode.STRICT:
                raise ValidationFailure(EMPTY_NOT_ALLOWED)
            return MISSING

        registered = self.registry.get(node.type)
        if registered is None:
            raise ValidationFailure(_unsupported(node.type, key))

        try:
            return registered.coerce(data, self.origin)
        except CheckError as e:
            raise ValidationFailure(f"value {e.message}") from None

    def _eval_objectshape(self, node: ObjectShape, data: Any, key: Any) -> Any:
        if not isinstance(data, Mapping):
            if self.mode is Mode.LOOSE and is_empty(data):
                return MISSING
            raise ValidationFailure("value must be an object")

        result: dict[Any, Any] = {}
        for name, child in node.fields.items():
            try:
                value = self.evaluate(child, data.get(name, MISSING), name)
            except ValidationFailure as failure:
                raise failure.within(FieldSegment(name))
            if value is not MISSING:
                result[name] = value
        return result

    def _eval_arrayshape(self, node: ArrayShape, data: Any, key: Any) -> Any:
        if not isinstance(data, (list, tuple)):
            if self.mode is Mode.LOOSE and is_empty(data):
                return MISSING
            raise ValidationFailure("value must be an array")

        if node.wildcard:
            pairs = [(node.items[0], item) for item in data]
        else:
            if self.reject_extra_items and len(data) > len(node.items):
                raise ValidationFailure(f"value must have at most {len(node.items)} elements")
            pairs = [
                (child, data[index] if index < len(data) else MISSING)
                for index, child in enumerate(node.items)
            ]

        result: list[Any] = []
        for index, (child, item) in enumerate(pairs):
            try:
                value = self.evaluate(child, item, index)
            except ValidationFailure as failure:
                raise failure.within(IndexSegment(index))
            # Keep positions aligned: no output becomes None
            result.append(None if value is MISSING else value)
        return result

    def _eval_field(self, node: Field, data: Any, key: Any) -> Any:
        try:
            return self._evaluate_field(node, data, key)
        except ValidationFailure as failure:
            if node.name is not None:
                failure.label = node.name
            raise

    def _evaluate_field(self, node: Field, data: Any, key: Any) -> Any:
        if is_empty(data, node.ignore):
            if node.has_default:
                data = node.resolve_default()
            elif node.allow_null is False:
                raise ValidationFailure(EMPTY_NOT_ALLOWED)
            elif node.allow_null is True:
                return MISSING
            elif self.mode is Mode.STRICT:
                raise ValidationFailure(EMPTY_NOT_ALLOWED)
            else:
                return MISSING

        if node.nested:
            return self.evaluate(node.type, data, key)

        registered = self.registry.get(node.type)
        if registered is None:
            raise ValidationFailure(_unsupported(node.type, node.name or key))

        for name, option in node.check_options():
            check = registered.checks.get(name)
            if check is None:
                continue
            try:
                data = check(data, option, self.origin)
            except CheckError as e:
                raise ValidationFailure(e.message) from None
        return data


def _unsupported(type_: Any, field_name: Any) -> str:
    type_name = type_.name if isinstance(type_, TypeKey) else getattr(type_, "__name__", type_)
    if field_name is None or field_name == "":
        return f"misconfigured expression: unsupported type {type_name!r}"
    return f"misconfigured field {str(field_name)!r}: unsupported type {type_name!r}"

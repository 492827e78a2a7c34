"""Validation entry points for typea.

Usage:
    from typea import types, validate, validate_strict

    expression = {
        "name": {"type": types.String, "allowNull": False, "maxLength": 40},
        "tags": [types.String],
        "address": {"city": types.String, "zip": {"type": types.String, "reg": r"^\\d{5}$"}},
    }

    result = validate(expression, payload)
    if result.error:
        ...  # e.g. "address.zip: must match pattern ^\\d{5}$"
    else:
        payload = result.data
"""

import logging
from collections.abc import Mapping
from typing import Any

from typea.checks import register_builtin_types
from typea.expressions import Evaluator, Node, ObjectShape, compile_expression
from typea.registry import TypeKey, TypeNamespace, TypeRegistry
from typea.types import MISSING, Check, Mode, Result, ValidationFailure

logger = logging.getLogger(__name__)

# Output field name -> literal value, or a function of the validated data
Extensions = Mapping[str, Any]


def create_registry() -> TypeRegistry:
    """Create a registry holding the built-in types."""
    registry = TypeRegistry()
    register_builtin_types(registry)
    return registry


# Process-wide registry used when callers don't pass their own
default_registry = create_registry()

types: TypeNamespace = default_registry.types


def register_type(identifier: Any, checks: Mapping[str, Check] | None = None) -> TypeKey | None:
    """Register or extend a type in the default registry.

    See TypeRegistry.use() for the resolution rules.
    """
    return default_registry.use(identifier, checks)


# -----------------------------------------------------------------------------
# Post-processing
# -----------------------------------------------------------------------------


def filter_null(value: Any) -> Any:
    """Return a copy of value with None-valued mapping keys removed, recursively.

    List elements are kept (positions matter) but mappings inside lists
    are filtered too.
    """
    if isinstance(value, Mapping):
        return {key: filter_null(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [filter_null(item) for item in value]
    return value


def apply_extensions(data: Any, extend: Extensions) -> Any:
    """Add computed fields to a validated object.

    Results that are not objects (arrays, scalars, MISSING) are returned
    unchanged.
    """
    if not isinstance(data, dict):
        return data
    for name, value in extend.items():
        if callable(value):
            value = value(data)
        data[name] = value
    return data


# -----------------------------------------------------------------------------
# Entry points
# -----------------------------------------------------------------------------


def run(
    expression: Any,
    data: Any,
    extend: Extensions | None = None,
    mode: Mode = Mode.DEFAULT,
    *,
    registry: TypeRegistry | None = None,
    reject_extra_items: bool = False,
) -> Result:
    """Validate data against an expression in the given mode.

    Args:
        expression: Literal expression, compiled Node, or Schema
        data: The data to validate
        extend: Computed fields added to the result on success
        mode: Emptiness policy
        registry: Type registry (defaults to the process-wide one)
        reject_extra_items: Fail positional arrays with extra elements

    Returns:
        Result with either `error` or `data` set
    """
    if isinstance(expression, Schema):
        expression = expression.node
    node = compile_expression(expression)
    evaluator = Evaluator(
        registry if registry is not None else default_registry,
        mode=mode,
        origin=data,
        reject_extra_items=reject_extra_items,
    )

    try:
        sanitized = evaluator.evaluate(node, data)
    except ValidationFailure as failure:
        logger.debug("Validation failed (%s mode): %s", mode.value, failure)
        return Result(error=failure.render(), failure=failure)

    if extend:
        # An absent object root still receives its computed fields
        if sanitized is MISSING and isinstance(node, ObjectShape):
            sanitized = {}
        sanitized = apply_extensions(sanitized, extend)

    if sanitized is MISSING:
        return Result(data=None)
    return Result(data=filter_null(sanitized))


def validate(expression: Any, data: Any, extend: Extensions | None = None, **kwargs: Any) -> Result:
    """Validate in default mode: empty fields are omitted unless required."""
    return run(expression, data, extend, Mode.DEFAULT, **kwargs)


def validate_strict(expression: Any, data: Any, extend: Extensions | None = None, **kwargs: Any) -> Result:
    """Validate in strict mode: empty fields fail unless allowNull/default say otherwise."""
    return run(expression, data, extend, Mode.STRICT, **kwargs)


def validate_loose(expression: Any, data: Any, extend: Extensions | None = None, **kwargs: Any) -> Result:
    """Validate in loose mode: empty objects and arrays are skipped."""
    return run(expression, data, extend, Mode.LOOSE, **kwargs)


class Schema:
    """A compiled expression held for reuse across many validations.

    Example:
        create_user = Schema({"name": types.String}, extend={"source": "api"})
        result = create_user(payload)
        result = create_user.strict(payload)
    """

    def __init__(
        self,
        expression: Any,
        extend: Extensions | None = None,
        *,
        registry: TypeRegistry | None = None,
        reject_extra_items: bool = False,
    ):
        self.node: Node = compile_expression(expression)
        self.extend = extend
        self.registry = registry
        self.reject_extra_items = reject_extra_items

    def __call__(self, data: Any) -> Result:
        return self.validate(data)

    def run(self, data: Any, mode: Mode) -> Result:
        return run(
            self.node,
            data,
            self.extend,
            mode,
            registry=self.registry,
            reject_extra_items=self.reject_extra_items,
        )

    def validate(self, data: Any) -> Result:
        return self.run(data, Mode.DEFAULT)

    def strict(self, data: Any) -> Result:
        return self.run(data, Mode.STRICT)

    def loose(self, data: Any) -> Result:
        return self.run(data, Mode.LOOSE)

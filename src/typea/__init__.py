"""typea: runtime data validation against literal expressions.

An expression describes the expected shape of a value using ordinary dicts
and lists:
- Object shapes: {"name": ..., "address": {...}}
- Array shapes: [T] applies T to every element, [T1, T2] matches by position
- Typed fields: {"type": types.String, "maxLength": 20, "allowNull": False}
- Type references: types.Number, or a Python class such as int or str
- Literals: any other value must be matched exactly

Usage:
    from typea import types, validate, validate_strict, register_type

    result = validate({"id": types.Integer, "tags": [str]}, payload)
    if result.error:
        ...

    # At application startup
    register_type("Even", {"type": check_even})
"""

from typea.config import ValidatorConfig
from typea.expressions import (
    ArrayShape,
    Evaluator,
    Field,
    Literal,
    Node,
    ObjectShape,
    TypeRef,
    compile_expression,
    field,
)
from typea.registry import RegisteredType, TypeKey, TypeNamespace, TypeRegistry
from typea.types import (
    EMPTY_VALUES,
    MISSING,
    CheckError,
    FieldSegment,
    IndexSegment,
    Mode,
    Result,
    ValidationFailure,
)
from typea.validator import (
    Schema,
    apply_extensions,
    create_registry,
    default_registry,
    filter_null,
    register_type,
    run,
    types,
    validate,
    validate_loose,
    validate_strict,
)

__all__ = [
    # Types
    "EMPTY_VALUES",
    "MISSING",
    "CheckError",
    "FieldSegment",
    "IndexSegment",
    "Mode",
    "Result",
    "ValidationFailure",
    # Registry
    "RegisteredType",
    "TypeKey",
    "TypeNamespace",
    "TypeRegistry",
    "create_registry",
    "default_registry",
    "register_type",
    "types",
    # Expressions
    "ArrayShape",
    "Evaluator",
    "Field",
    "Literal",
    "Node",
    "ObjectShape",
    "TypeRef",
    "compile_expression",
    "field",
    # Validation
    "Schema",
    "apply_extensions",
    "filter_null",
    "run",
    "validate",
    "validate_loose",
    "validate_strict",
    # Config
    "ValidatorConfig",
]

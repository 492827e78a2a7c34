"""Expression nodes for typea.

Expressions are authored as plain Python literals and compiled once into a
small tree of nodes:

    {"name": {"type": String, "maxLength": 20},   -> ObjectShape
     "tags": [String],                             -> ArrayShape (wildcard)
     "point": [Number, Number],                    -> ArrayShape (positional)
     "kind": "user",                               -> Literal
     "age": int}                                   -> TypeRef

A dict carrying a non-None `type` key is a typed field (Field); every other
dict is an object shape.
"""

import copy
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Callable, Iterator, Mapping

from typea.registry import TypeKey
from typea.types import MISSING

# Keys of a typed field that configure the field itself rather than name a check
RESERVED_KEYS = frozenset({"type", "default", "allowNull", "ignore", "name"})


# -----------------------------------------------------------------------------
# Node Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Node:
    """Base class for expression nodes."""
    pass


@dataclass(frozen=True)
class Literal(Node):
    """An exact value the data must equal."""
    value: Any


@dataclass(frozen=True)
class TypeRef(Node):
    """A bare reference to a registered type (TypeKey or aliased class)."""
    type: Any


@dataclass(frozen=True)
class ObjectShape(Node):
    """A mapping of field keys to nested expressions."""
    fields: Mapping[Any, Node]


@dataclass(frozen=True)
class ArrayShape(Node):
    """A sequence expression.

    One item is a wildcard applied to every element; more items are
    matched to elements by position.
    """
    items: tuple[Node, ...]

    @property
    def wildcard(self) -> bool:
        return len(self.items) == 1


@dataclass(frozen=True)
class Field(Node):
    """A typed field: a type plus check options and emptiness handling.

    Attributes:
        type: Type identifier, or a nested ObjectShape/ArrayShape/Field
            (nested types take no check options)
        options: Check options in declaration order, excluding reserved keys
        default: Value substituted for empty data (MISSING when unset)
        allow_null: False forbids empty data, True permits it, None defers to mode
        ignore: Values treated as empty for this field (None for the default set)
        name: Alias shown in error paths instead of the structural key
    """
    type: Any
    options: Mapping[str, Any] = dataclass_field(default_factory=dict)
    default: Any = MISSING
    allow_null: bool | None = None
    ignore: tuple[Any, ...] | None = None
    name: str | None = None

    @property
    def nested(self) -> bool:
        return isinstance(self.type, Node)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING and self.default is not None

    def resolve_default(self) -> Any:
        """Return a fresh default value.

        Callables are called; mutable values are deep-copied so outputs
        never share state with the expression.
        """
        if callable(self.default):
            return self.default()
        return copy.deepcopy(self.default)

    def check_options(self) -> Iterator[tuple[str, Any]]:
        """Yield (check name, option) pairs; the `type` check always comes first."""
        yield "type", self.type
        yield from self.options.items()


# -----------------------------------------------------------------------------
# Compilation
# -----------------------------------------------------------------------------


def compile_expression(expression: Any) -> Node:
    """Compile a literal expression into a node tree.

    Already-compiled nodes are returned unchanged, so nodes built with
    `field()` can be mixed into literal expressions.
    """
    if isinstance(expression, Node):
        return expression
    if isinstance(expression, Mapping):
        if expression.get("type") is not None:
            return _compile_field(expression)
        return ObjectShape({key: compile_expression(value) for key, value in expression.items()})
    if isinstance(expression, (list, tuple)):
        return ArrayShape(tuple(compile_expression(item) for item in expression))
    if isinstance(expression, (TypeKey, type)):
        return TypeRef(expression)
    return Literal(expression)


def _compile_field(expression: Mapping[str, Any]) -> Field:
    type_ = expression["type"]
    options = {key: value for key, value in expression.items() if key not in RESERVED_KEYS}
    if isinstance(type_, (Mapping, list, tuple, Node)):
        type_ = compile_expression(type_)
        if options:
            raise ValueError(
                f"Check options {sorted(options)} need a registered type, "
                f"not a {type(type_).__name__} structure"
            )

    ignore = expression.get("ignore")
    allow_null = expression.get("allowNull")
    return Field(
        type=type_,
        options=options,
        default=expression.get("default", MISSING),
        allow_null=None if allow_null is None else bool(allow_null),
        ignore=None if ignore is None else tuple(ignore),
        name=expression.get("name"),
    )


def field(
    type: Any,
    *,
    default: Any = MISSING,
    allow_null: bool | None = None,
    ignore: Any = None,
    name: str | None = None,
    **checks: Any,
) -> Field:
    """Build a typed field with Python keyword names.

    Example:
        field(types.String, allow_null=False, maxLength=20)
        # same as {"type": types.String, "allowNull": False, "maxLength": 20}
    """
    expression: dict[str, Any] = {"type": type, **checks}
    if default is not MISSING:
        expression["default"] = default
    if allow_null is not None:
        expression["allowNull"] = allow_null
    if ignore is not None:
        expression["ignore"] = ignore
    if name is not None:
        expression["name"] = name
    return _compile_field(expression)

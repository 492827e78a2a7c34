"""Expression tree for typea.

This module provides:
- Nodes: Literal, TypeRef, ObjectShape, ArrayShape, Field
- compile_expression / field: build nodes from literal expressions
- Evaluator: evaluates nodes against data
"""

from typea.expressions.evaluator import Evaluator
from typea.expressions.nodes import (
    RESERVED_KEYS,
    ArrayShape,
    Field,
    Literal,
    Node,
    ObjectShape,
    TypeRef,
    compile_expression,
    field,
)

__all__ = [
    # Evaluator
    "Evaluator",
    # Nodes
    "ArrayShape",
    "Field",
    "Literal",
    "Node",
    "ObjectShape",
    "RESERVED_KEYS",
    "TypeRef",
    "compile_expression",
    "field",
]

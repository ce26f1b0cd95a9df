"""
Schema AST module.

Contains the AST node definitions and the component schema parser.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    ComponentSchema,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaNode,
    UnionNode,
    UnknownNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "RefNode",
    "UnionNode",
    "ObjectNode",
    "PropertyDef",
    "EnumNode",
    "PrimitiveNode",
    "ArrayNode",
    "UnknownNode",
    "ComponentSchema",
    "SchemaParser",
]

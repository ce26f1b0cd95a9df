"""
AST (Abstract Syntax Tree) node definitions for OpenAPI component schemas.

These nodes represent the parsed structure of the component schemas before
any reference resolution or target-specific processing. Each property schema
becomes exactly one node variant; the parser settles which one when a raw
schema carries several shapes at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in the document (for log and error messages)
    source_path: str = ""


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref to another component."""

    ref_path: str = ""  # e.g., "#/components/schemas/Owner"
    target: str = ""  # Component name the ref points to, e.g., "Owner"


@dataclass
class UnionNode(SchemaNode):
    """Represents an anyOf union."""

    variants: list[SchemaNode] = field(default_factory=list)


@dataclass
class PropertyDef(SchemaNode):
    """Represents a named property in an object."""

    name: str = ""
    type_node: SchemaNode | None = None


@dataclass
class ObjectNode(SchemaNode):
    """Represents an inline object with its own properties."""

    properties: list[PropertyDef] = field(default_factory=list)
    required: list[str] = field(default_factory=list)


@dataclass
class EnumNode(SchemaNode):
    """Represents a string restricted to a list of literals."""

    values: list[str] = field(default_factory=list)


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a primitive type (string, integer, number, boolean)."""

    type_name: str = ""
    format: str | None = None


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: SchemaNode | None = None


@dataclass
class UnknownNode(SchemaNode):
    """Represents any shape that is not modeled (translated to opaque JSON)."""

    type_name: str | None = None


@dataclass
class ComponentSchema(SchemaNode):
    """Represents a named component from components.schemas."""

    name: str = ""
    properties: list[PropertyDef] = field(default_factory=list)
    required: list[str] = field(default_factory=list)

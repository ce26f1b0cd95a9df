"""
Property translator.

Maps one property schema node to an IR type, recursively, registering the
named enums it synthesizes in the run context.
"""

from __future__ import annotations

from ...utils import snake_to_pascal
from ..schema_ast.nodes import (
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaNode,
    UnionNode,
)
from .ir_nodes import FieldDef, TypeKind, TypeRef
from .registry import ResolutionContext

# Property name whose enum is written inline instead of being named
INLINE_ENUM_PROPERTY = "object"

# Suffix of synthesized enum names
ENUM_SUFFIX = "Enum"

# Integer format translated to a timestamp
UNIX_TIME_FORMAT = "unix-time"

PRIMITIVE_TYPE_MAP = {
    "string": "string",
    "integer": "integer",
    "number": "float",
    "boolean": "boolean",
}


def enum_name(owner_name: str, property_name: str) -> str:
    """Name of the enum synthesized for property_name of component owner_name."""
    return snake_to_pascal(owner_name) + snake_to_pascal(property_name) + ENUM_SUFFIX


class PropertyTranslator:
    """Translates property schemas into IR types."""

    def __init__(self, context: ResolutionContext):
        """
        Initialize the translator.

        Args:
            context: The run context, receives the synthesized enums
        """
        self.context = context

    def translate_properties(self, properties: list[PropertyDef], required: list[str], owner_name: str) -> list[FieldDef]:
        """Translate a property list, keeping declaration order."""
        return [self.translate_property(prop.name, prop.type_node, owner_name, prop.name in required) for prop in properties]

    def translate_property(self, name: str, node: SchemaNode | None, owner_name: str, is_required: bool) -> FieldDef:
        """
        Translate one property.

        Args:
            name: Property name
            node: Property schema node
            owner_name: Original name of the owning component
            is_required: Whether the owner lists the property as required

        Returns:
            FieldDef carrying the type and whether the required modifier applies
        """
        type_ref = self.translate_type(name, node, owner_name)
        # Enum types never carry the required modifier
        return FieldDef(name=name, type_ref=type_ref, is_required=is_required and not type_ref.is_enum)

    def translate_type(self, name: str, node: SchemaNode | None, owner_name: str) -> TypeRef:
        """Translate a schema node. Every shape that is not modeled becomes opaque JSON."""
        match node:
            case RefNode(target=target):
                return TypeRef(kind=TypeKind.REF, name=snake_to_pascal(target))
            case UnionNode(variants=[variant]):
                return self.translate_type(name, variant, owner_name)
            case UnionNode():
                return self._json()
            case ObjectNode(properties=[]):
                return self._json()
            case ObjectNode(properties=properties, required=required):
                return TypeRef(kind=TypeKind.COMPOSITE, fields=self.translate_properties(properties, required, owner_name))
            case EnumNode(values=values):
                return self._translate_enum(name, values, owner_name)
            case PrimitiveNode(type_name="integer", format=fmt) if fmt == UNIX_TIME_FORMAT:
                return TypeRef(kind=TypeKind.PRIMITIVE, name="timestamp")
            case PrimitiveNode(type_name=type_name) if type_name in PRIMITIVE_TYPE_MAP:
                return TypeRef(kind=TypeKind.PRIMITIVE, name=PRIMITIVE_TYPE_MAP[type_name])
            case ArrayNode(items=items):
                return TypeRef(kind=TypeKind.ARRAY, type_args=[self.translate_type(name, items, owner_name)])
            case _:
                return self._json()

    def _translate_enum(self, name: str, values: list[str], owner_name: str) -> TypeRef:
        if name == INLINE_ENUM_PROPERTY:
            return TypeRef(kind=TypeKind.INLINE_ENUM, enum_values=list(values))
        key = enum_name(owner_name, name)
        self.context.enums.register_if_absent(key, values)
        return TypeRef(kind=TypeKind.ENUM_REF, name=key)

    def _json(self) -> TypeRef:
        return TypeRef(kind=TypeKind.JSON)

"""
OpenAPI component schema parser that builds an AST.

Phase 1 of the pipeline: parse the raw components.schemas mapping into
ComponentSchema nodes without resolving references or doing any
target-specific processing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ...utils import ref_target
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

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses component schemas into an AST."""

    # Primitive type names
    PRIMITIVE_TYPES = {"string", "integer", "number", "boolean"}

    # Where components live in an OpenAPI v3 document
    COMPONENTS_PATH = "#/components/schemas"

    def parse(self, schemas: Mapping[str, Any]) -> dict[str, ComponentSchema]:
        """
        Parse a mapping of component name to raw schema.

        Args:
            schemas: The components.schemas mapping of the document

        Returns:
            Mapping of component name to ComponentSchema, in document order
        """
        components = {}
        for name, raw in schemas.items():
            components[name] = self.parse_component(name, raw)
        logger.debug("Parsed %d component schemas", len(components))
        return components

    def parse_component(self, name: str, raw: Any) -> ComponentSchema:
        """Parse one named component."""
        path = f"{self.COMPONENTS_PATH}/{name}"
        if not isinstance(raw, Mapping):
            logger.debug("Component %s is not a mapping, treating it as having no properties", name)
            return ComponentSchema(name=name, source_path=path)

        properties = raw.get("properties")
        if not isinstance(properties, Mapping):
            properties = {}
        return ComponentSchema(
            name=name,
            properties=self._parse_properties(properties, path),
            required=self._parse_required(raw),
            source_path=path,
        )

    def _parse_properties(self, properties: Mapping[str, Any], path: str) -> list[PropertyDef]:
        """Parse a properties mapping, keeping declaration order."""
        result = []
        for prop_name, prop_schema in properties.items():
            prop_path = f"{path}/properties/{prop_name}"
            result.append(
                PropertyDef(
                    name=prop_name,
                    type_node=self._parse_schema_node(prop_schema, prop_path),
                    source_path=prop_path,
                )
            )
        return result

    def _parse_required(self, schema: Mapping[str, Any]) -> list[str]:
        required = schema.get("required")
        if not isinstance(required, list):
            return []
        return [name for name in required if isinstance(name, str)]

    def _parse_schema_node(self, schema: Any, path: str) -> SchemaNode:
        """
        Parse a property schema recursively.

        The checks run in the same order the translator resolves shapes, so a
        node carrying a $ref and properties at once becomes a RefNode.

        Args:
            schema: The raw property schema
            path: Current path in the document (for messages)

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, Mapping):
            return UnknownNode(source_path=path)

        # Handle $ref
        if isinstance(schema.get("$ref"), str):
            return RefNode(ref_path=schema["$ref"], target=ref_target(schema["$ref"]), source_path=path)

        # Handle anyOf
        if isinstance(schema.get("anyOf"), list):
            return self._parse_union_node(schema["anyOf"], path)

        # Handle inline object (properties present, even if empty)
        if "properties" in schema:
            return self._parse_object_node(schema, path)

        return self._parse_type_node(schema, path)

    def _parse_union_node(self, variants_schema: list[Any], path: str) -> UnionNode:
        """Parse an anyOf union node."""
        variants = []
        for i, variant in enumerate(variants_schema):
            variants.append(self._parse_schema_node(variant, f"{path}/anyOf/{i}"))
        return UnionNode(variants=variants, source_path=path)

    def _parse_object_node(self, schema: Mapping[str, Any], path: str) -> SchemaNode:
        """Parse an inline object node."""
        properties = schema["properties"]
        if not isinstance(properties, Mapping):
            return UnknownNode(type_name=schema.get("type"), source_path=path)
        return ObjectNode(
            properties=self._parse_properties(properties, path),
            required=self._parse_required(schema),
            source_path=path,
        )

    def _parse_type_node(self, schema: Mapping[str, Any], path: str) -> SchemaNode:
        """Parse a node by its declared type."""
        type_value = schema.get("type")

        if type_value == "string" and isinstance(schema.get("enum"), list):
            return EnumNode(values=list(schema["enum"]), source_path=path)

        if type_value == "array":
            items = schema.get("items")
            items_node = self._parse_schema_node(items, f"{path}/items") if items is not None else None
            return ArrayNode(items=items_node, source_path=path)

        if type_value in self.PRIMITIVE_TYPES:
            fmt = schema.get("format")
            return PrimitiveNode(
                type_name=type_value,
                format=fmt if isinstance(fmt, str) else None,
                source_path=path,
            )

        # Fallback: not modeled, becomes opaque JSON
        return UnknownNode(type_name=type_value if isinstance(type_value, str) else None, source_path=path)

"""
Reference resolver for $ref closure computation.

Finds every component reachable from the included components and
records the ones that were not requested as sub-components.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence

from ..schema_ast.nodes import (
    ArrayNode,
    ComponentSchema,
    ObjectNode,
    PropertyDef,
    RefNode,
    SchemaNode,
    UnionNode,
)
from .registry import ResolutionContext

logger = logging.getLogger(__name__)


class UnknownComponentError(KeyError):
    """Raised when a $ref points to a component missing from the document."""

    def __init__(self, name: str, source_path: str = ""):
        super().__init__(name)
        self.name = name
        self.source_path = source_path

    def __str__(self) -> str:
        location = f" (referenced from {self.source_path})" if self.source_path else ""
        return f"Unknown component '{self.name}'{location}"


class ReferenceResolver:
    """Computes the reference closure of the included components."""

    def __init__(self, components: Mapping[str, ComponentSchema]):
        """
        Initialize the resolver.

        Args:
            components: Every component of the document, by name
        """
        self.components = components

    def resolve(self, context: ResolutionContext, include: Sequence[str] | None = None) -> None:
        """
        Fill the included and sub-component partitions of context.

        Args:
            context: The run context to populate
            include: Component names to include; None or empty means all

        Raises:
            UnknownComponentError: If a reachable $ref has no target component
        """
        for name in self._included_names(include):
            context.include(self.components[name])

        # Depth-first over components; the partitions double as the visited set
        stack = list(reversed(list(context.included.values())))
        while stack:
            component = stack.pop()
            for ref in self._iter_refs(component.properties):
                if context.knows(ref.target):
                    continue
                target = self.get_component(ref.target, ref.source_path)
                context.add_sub_component(target)
                logger.debug("Found sub-component %s via %s", ref.target, ref.source_path)
                stack.append(target)

        logger.debug(
            "Resolved %d included and %d sub-components",
            len(context.included),
            len(context.sub_components),
        )

    def get_component(self, name: str, source_path: str = "") -> ComponentSchema:
        """Get a component by name, failing loudly when it does not exist."""
        try:
            return self.components[name]
        except KeyError:
            raise UnknownComponentError(name, source_path) from None

    def _included_names(self, include: Sequence[str] | None) -> list[str]:
        if not include:
            return list(self.components)
        names = []
        for name in include:
            if name not in self.components:
                logger.warning("Included component '%s' is not defined in the document, skipping it", name)
                continue
            names.append(name)
        return names

    def _iter_refs(self, properties: list[PropertyDef]) -> Iterator[RefNode]:
        """Yield every $ref under a property list, including nested shapes.

        Walks with an explicit stack so deeply nested inline objects do not
        grow the Python call stack.
        """
        stack: list[SchemaNode | None] = [prop.type_node for prop in reversed(properties)]
        while stack:
            node = stack.pop()
            match node:
                case RefNode():
                    yield node
                case UnionNode(variants=variants):
                    stack.extend(reversed(variants))
                case ArrayNode(items=items):
                    stack.append(items)
                case ObjectNode(properties=nested):
                    stack.extend(prop.type_node for prop in reversed(nested))

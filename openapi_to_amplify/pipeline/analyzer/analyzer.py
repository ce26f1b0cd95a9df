"""
Schema analyzer.

Phase 2 and 3 of the pipeline: resolve the reference closure of the
included components, then translate every resolved component into IR.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ...utils import snake_to_pascal
from ..schema_ast.nodes import ComponentSchema
from .ir_nodes import IR, ComponentDef, EnumDef
from .property_translator import PropertyTranslator
from .reference_resolver import ReferenceResolver
from .registry import ResolutionContext

logger = logging.getLogger(__name__)


class NameCollisionError(ValueError):
    """Raised when distinct component names translate to the same type name."""

    def __init__(self, type_name: str, component_names: list[str]):
        self.type_name = type_name
        self.component_names = component_names
        names = " and ".join(f"'{name}'" for name in component_names)
        super().__init__(f"Components {names} both translate to '{type_name}'")


class SchemaAnalyzer:
    """Builds the IR of one translation run."""

    def __init__(self, components: Mapping[str, ComponentSchema]):
        """
        Initialize the analyzer.

        Args:
            components: Every parsed component of the document, by name
        """
        self.components = components
        self.resolver = ReferenceResolver(components)

    def analyze(self, include: Sequence[str] | None = None, context: ResolutionContext | None = None) -> IR:
        """
        Resolve and translate the components.

        Args:
            include: Component names to include; None or empty means all
            context: Run context to fill, a new one is created when omitted

        Returns:
            The IR with every partition sorted by name
        """
        if context is None:
            context = ResolutionContext()
        self.resolve(context, include)
        return self.translate(context)

    def resolve(self, context: ResolutionContext, include: Sequence[str] | None = None) -> None:
        """
        Fill the component partitions of context.

        Raises:
            UnknownComponentError: If a $ref points to a missing component
            NameCollisionError: If two resolved components share a type name
        """
        self.resolver.resolve(context, include)
        self._check_name_collisions(context)
        logger.debug("Resolved %d included and %d sub-components", len(context.included), len(context.sub_components))

    def translate(self, context: ResolutionContext) -> IR:
        """Translate the resolved partitions of context, registering enums in it."""
        translator = PropertyTranslator(context)
        included = self._translate_partition(context.included, translator)
        sub_components = self._translate_partition(context.sub_components, translator)
        enums = [EnumDef(name=name, values=list(values)) for name, values in context.enums.sorted_items()]

        return IR(included=included, sub_components=sub_components, enums=enums)

    def _translate_partition(self, partition: Mapping[str, ComponentSchema], translator: PropertyTranslator) -> list[ComponentDef]:
        """Translate a partition, sorted by component name."""
        return [self.translate_component(partition[name], translator) for name in sorted(partition)]

    def translate_component(self, component: ComponentSchema, translator: PropertyTranslator) -> ComponentDef:
        return ComponentDef(
            name=snake_to_pascal(component.name),
            original_name=component.name,
            fields=translator.translate_properties(component.properties, component.required, component.name),
        )

    def _check_name_collisions(self, context: ResolutionContext) -> None:
        """Fail when distinct component names normalize to the same type name."""
        seen: dict[str, str] = {}
        for name in sorted([*context.included, *context.sub_components]):
            normalized = snake_to_pascal(name)
            if normalized in seen:
                raise NameCollisionError(normalized, [seen[normalized], name])
            seen[normalized] = name

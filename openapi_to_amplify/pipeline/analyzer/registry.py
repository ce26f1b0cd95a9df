"""
Per-run registries for resolved components and synthesized enums.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..schema_ast.nodes import ComponentSchema

logger = logging.getLogger(__name__)


class EnumRegistry:
    """Deduplicated store of synthesized enums. The first writer of a name wins."""

    def __init__(self):
        self._enums: dict[str, tuple[str, ...]] = {}

    def register_if_absent(self, name: str, values: Sequence[str]) -> bool:
        """
        Store values under name unless the name is already known.

        Args:
            name: Synthesized enum name
            values: Enum literals, stored verbatim

        Returns:
            True if the values were stored, False if the call was ignored
        """
        if name in self._enums:
            if tuple(values) != self._enums[name]:
                logger.debug("Enum %s already registered, ignoring different values %r", name, list(values))
            return False
        self._enums[name] = tuple(values)
        return True

    def get(self, name: str) -> tuple[str, ...] | None:
        return self._enums.get(name)

    def sorted_items(self) -> list[tuple[str, tuple[str, ...]]]:
        return sorted(self._enums.items())

    def __contains__(self, name: object) -> bool:
        return name in self._enums

    def __len__(self) -> int:
        return len(self._enums)


@dataclass
class ResolutionContext:
    """State of one translation run.

    Created empty for every run and passed explicitly to the resolver and
    the translator. Components are only ever inserted, and a name lives in
    at most one of the two component partitions.
    """

    included: dict[str, ComponentSchema] = field(default_factory=dict)
    sub_components: dict[str, ComponentSchema] = field(default_factory=dict)
    enums: EnumRegistry = field(default_factory=EnumRegistry)

    def knows(self, name: str) -> bool:
        """Whether name is already in either component partition."""
        return name in self.included or name in self.sub_components

    def include(self, component: ComponentSchema) -> bool:
        if self.knows(component.name):
            return False
        self.included[component.name] = component
        return True

    def add_sub_component(self, component: ComponentSchema) -> bool:
        if self.knows(component.name):
            return False
        self.sub_components[component.name] = component
        return True

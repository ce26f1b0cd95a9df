"""
Analyzer module.

Contains reference resolution, property translation and IR building.
"""

from __future__ import annotations

from .analyzer import NameCollisionError, SchemaAnalyzer
from .ir_nodes import (
    IR,
    ComponentDef,
    EnumDef,
    FieldDef,
    TypeKind,
    TypeRef,
)
from .property_translator import PropertyTranslator, enum_name
from .reference_resolver import ReferenceResolver, UnknownComponentError
from .registry import EnumRegistry, ResolutionContext

__all__ = [
    "ComponentDef",
    "FieldDef",
    "TypeRef",
    "TypeKind",
    "EnumDef",
    "IR",
    "SchemaAnalyzer",
    "NameCollisionError",
    "PropertyTranslator",
    "enum_name",
    "ReferenceResolver",
    "UnknownComponentError",
    "EnumRegistry",
    "ResolutionContext",
]

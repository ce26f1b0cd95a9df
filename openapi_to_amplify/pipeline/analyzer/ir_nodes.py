"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed and resolved components, ready for
emission. All references are resolved and every property has a type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # string, integer, float, boolean, timestamp
    REF = "ref"  # Reference to a component
    ENUM_REF = "enum_ref"  # Reference to a synthesized enum
    INLINE_ENUM = "inline_enum"  # Unnamed enum written in place
    ARRAY = "array"  # array of T
    COMPOSITE = "composite"  # Inline custom type with its own fields
    JSON = "json"  # Opaque JSON fallback


@dataclass
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.JSON
    name: str = ""  # Primitive name, or the component / enum name for refs

    # For arrays: the item type
    type_args: list[TypeRef] = field(default_factory=list)

    # For inline enums
    enum_values: list[str] = field(default_factory=list)

    # For composites
    fields: list[FieldDef] = field(default_factory=list)

    @property
    def is_enum(self) -> bool:
        return self.kind in (TypeKind.ENUM_REF, TypeKind.INLINE_ENUM)


@dataclass
class FieldDef:
    """A property of a component or of an inline composite."""

    name: str = ""
    type_ref: TypeRef = field(default_factory=TypeRef)
    is_required: bool = False


@dataclass
class ComponentDef:
    """A translated component, declared under its normalized name."""

    name: str = ""  # Normalized name (e.g., "PetOwner")
    original_name: str = ""  # Key in components.schemas (e.g., "pet_owner")
    fields: list[FieldDef] = field(default_factory=list)


@dataclass
class EnumDef:
    """A synthesized named enum."""

    name: str = ""
    values: list[str] = field(default_factory=list)


@dataclass
class IR:
    """The frozen result of one translation run, sorted by name."""

    included: list[ComponentDef] = field(default_factory=list)
    sub_components: list[ComponentDef] = field(default_factory=list)
    enums: list[EnumDef] = field(default_factory=list)

"""
Utility functions for OpenAPI to Amplify generator.
"""

import json
import re

# Names usable as a bare TypeScript object key
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

# Characters dropped before splitting, e.g. "v1.pet_owner" -> "v1pet_owner"
_STRIPPED_CHARACTERS = "."


def _strip_characters(text: str) -> str:
    """Remove characters that cannot appear in a type name."""
    for character in _STRIPPED_CHARACTERS:
        text = text.replace(character, "")
    return text


def _split_into_words(text: str) -> list[str]:
    """Split text into words on underscores."""
    return text.split("_")


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal(text: str) -> str:
    """Convert a snake_case component or property name to PascalCase.

    Each underscore separated segment keeps its first character upper-cased
    and the rest lower-cased, so the result only depends on the segments.

    Examples:
        "pet_owner" -> "PetOwner"
        "PET_OWNER" -> "PetOwner"
        "PetOwner" -> "Petowner"
        "v1.pet" -> "V1pet"
        "kind" -> "Kind"

    Args:
        text: The name to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    stripped = _strip_characters(text)
    words = _split_into_words(stripped)
    return _capitalize_and_join(words)


def ref_target(ref: str) -> str:
    """Return the component name a $ref points to (its last path segment).

    Examples:
        "#/components/schemas/Owner" -> "Owner"
        "Owner" -> "Owner"
    """
    return ref.rsplit("/", 1)[-1]


def parse_include(value: str | None) -> list[str]:
    """Split a comma separated list of component names.

    Examples:
        "Pet, Owner" -> ["Pet", "Owner"]
        "" -> []
    """
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def ts_string_literal(value) -> str:
    """Quote a value as a single-quoted TypeScript string literal.

    Booleans, numbers and null are written as their JSON text first.

    Examples:
        "dog" -> "'dog'"
        True -> "'true'"
        None -> "'null'"
    """
    if isinstance(value, str):
        text = value
    elif value is None or isinstance(value, (bool, int, float)):
        text = json.dumps(value)
    else:
        text = str(value)
    text = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{text}'"


def ts_property_key(name: str) -> str:
    """Write name as an object key, quoting it when it is not a valid identifier.

    Examples:
        "owner" -> "owner"
        "x-rate-limit" -> "'x-rate-limit'"
    """
    if _IDENTIFIER_PATTERN.fullmatch(name):
        return name
    return ts_string_literal(name)

"""
OpenAPI document loading.

Reads a JSON or YAML document and extracts its component schemas.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

_BOOL_TAG = "tag:yaml.org,2002:bool"


class DocumentError(Exception):
    """Raised when the input document cannot be loaded."""


class DocumentLoader(yaml.SafeLoader):
    """Safe YAML loader with YAML 1.2 booleans.

    Only true and false are booleans, so yes/no/on/off stay strings as they
    would in the equivalent JSON document.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


DocumentLoader.add_implicit_resolver(_BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF"))


def load_document(path: Path | str) -> Mapping[str, Any]:
    """
    Load an OpenAPI document from a JSON or YAML file.

    Args:
        path: Path of the document

    Returns:
        The decoded document

    Raises:
        DocumentError: If the file is missing, not JSON or YAML, or malformed
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise DocumentError(
            "Only input files of type 'application/json' (.json) or 'text/yaml' (.yaml|.yml) are supported: " f"{path}"
        )
    if not path.is_file():
        raise DocumentError(f"Input file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if suffix in YAML_SUFFIXES:
        try:
            document = yaml.load(text, Loader=DocumentLoader)
        except yaml.YAMLError as exc:
            raise DocumentError(f"Failed to parse YAML document {path}: {exc}") from exc
    else:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentError(f"Failed to parse JSON document {path}: {exc}") from exc

    if not isinstance(document, Mapping):
        raise DocumentError(f"Document root must be a mapping: {path}")
    logger.debug("Loaded document %s", path)
    return document


def extract_components(document: Mapping[str, Any]) -> dict[str, Any]:
    """Return the components.schemas mapping of a document, or an empty one."""
    components = document.get("components") or {}
    if not isinstance(components, Mapping):
        return {}
    schemas = components.get("schemas") or {}
    if not isinstance(schemas, Mapping):
        return {}
    return dict(schemas)

"""
Pipeline - OpenAPI components to Amplify data schema generator.

This module provides a multi-phase architecture for translating the
component schemas of an OpenAPI document:

1. Phase 1 (Parser): Parse component schemas into a Schema AST
2. Phase 2 (Resolver): Compute the reference closure of the included components
3. Phase 3 (Translator): Translate every property into IR, synthesizing enums
4. Phase 4 (Backend): Emit the sorted blocks through an output sink
"""

from __future__ import annotations

from .analyzer import NameCollisionError, UnknownComponentError
from .config import CodeGeneratorConfig, OutputConfig
from .generator import PipelineGenerator, RunPhase
from .sink import FileSink, OutputExistsError, OutputSink, StringSink, UnsupportedOutputError

__all__ = [
    "PipelineGenerator",
    "RunPhase",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputSink",
    "FileSink",
    "StringSink",
    "OutputExistsError",
    "UnsupportedOutputError",
    "UnknownComponentError",
    "NameCollisionError",
]

"""OpenAPI to Amplify Generator

A Python package for generating AWS Amplify data schema definitions
from the component schemas of an OpenAPI v3 document (JSON or YAML).
"""

__version__ = "1.0.0"

from .loader import DocumentError, extract_components, load_document
from .pipeline import (
    CodeGeneratorConfig,
    FileSink,
    NameCollisionError,
    OutputConfig,
    OutputExistsError,
    PipelineGenerator,
    StringSink,
    UnknownComponentError,
    UnsupportedOutputError,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "FileSink",
    "StringSink",
    "OutputExistsError",
    "UnsupportedOutputError",
    "UnknownComponentError",
    "NameCollisionError",
    "DocumentError",
    "load_document",
    "extract_components",
]

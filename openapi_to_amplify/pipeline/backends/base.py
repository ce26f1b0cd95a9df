"""
Base class for code generation backends.

Defines the interface that all target-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ... import __version__
from ...cli_utils import reconstruct_command_line
from ..analyzer.ir_nodes import IR, TypeRef
from ..config import CodeGeneratorConfig
from ..sink import OutputSink


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from IR primitive names to target expressions
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Comment prefix of the target language
    COMMENT_PREFIX: str = "//"

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.block_template = self.jinja_env.get_template(f"block.{self.FILE_EXTENSION}.jinja2")
        self.suffix_template = self.jinja_env.get_template(f"suffix.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def emit(self, ir: IR, sink: OutputSink) -> None:
        """
        Write the code for ir to sink.

        Args:
            ir: The intermediate representation
            sink: Destination of the generated code (not closed here)
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef, depth: int = 0) -> str:
        """
        Translate an IR type to a target type expression.

        Args:
            type_ref: The type reference
            depth: Nesting depth of the expression (0 for a component)

        Returns:
            Target type expression
        """

    def generation_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        # Reconstruct command line using CLI utilities
        from ...openapi_to_amplify import openapi_to_amplify as click_command  # noqa

        command_line = reconstruct_command_line(click_command)

        return f"{self.COMMENT_PREFIX} Generated by openapi_to_amplify v{__version__} : {command_line}"

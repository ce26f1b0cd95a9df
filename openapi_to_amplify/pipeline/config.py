"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils import parse_include


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        overwrite: Whether an output file that already has content may be replaced
    """

    overwrite: bool = False


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Components to include (empty = all components)
    include: list[str] = field(default_factory=list)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Module the schema builder `a` is imported from
    import_module: str = "@aws-amplify/backend"

    # One level of indentation in the generated file
    indent: str = "\t"

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                config.output = OutputConfig(overwrite=v.get("overwrite", False))
            elif k == "include" and isinstance(v, str):
                config.include = parse_include(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "include": self.include,
            "add_generation_comment": self.add_generation_comment,
            "import_module": self.import_module,
            "indent": self.indent,
            "output": {
                "overwrite": self.output.overwrite,
            },
        }

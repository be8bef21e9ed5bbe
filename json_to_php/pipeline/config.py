"""
Configuration for the JSON to PHP pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    FORCE = "force"  # Default: overwrite the existing file
    ERROR_IF_EXISTS = "error"  # Raise an error if the file exists


class CollisionPolicy(str, Enum):
    """What to do when two generated classes share a property name."""

    OVERWRITE = "overwrite"  # Last visited class wins
    ERROR = "error"  # Raise ClassCollisionError


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check the PHP text before writing
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> OutputConfig:
        """Create an output config from a dictionary."""
        config = OutputConfig()
        if "mode" in d:
            config.mode = OutputMode(d["mode"])
        if "validate_before_write" in d:
            config.validate_before_write = bool(d["validate_before_write"])
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "mode": self.mode.value,
            "validate_before_write": self.validate_before_write,
        }


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Policy for classes sharing a property name anywhere in a document
    class_collision: CollisionPolicy = CollisionPolicy.OVERWRITE

    # Maximum nesting of objects and arrays accepted in a document
    max_depth: int = 512

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Number of spaces per indentation level in generated code
    indent: int = 4

    # Output file handling
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "class_collision":
                config.class_collision = CollisionPolicy(v)
            elif k == "output":
                config.output = OutputConfig.from_dict(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "class_collision": self.class_collision.value,
            "max_depth": self.max_depth,
            "add_generation_comment": self.add_generation_comment,
            "indent": self.indent,
            "output": self.output.to_dict(),
        }

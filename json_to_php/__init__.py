"""JSON to PHP Generator

A Python package for generating PHP value classes from sample JSON documents.
Every JSON object becomes a class with typed properties, a static ``create``
factory and a private constructor.
"""

__version__ = "1.0.0"

from .errors import JsonToPhpError
from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    CollisionPolicy,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    generate_from_path,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "CollisionPolicy",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "JsonToPhpError",
    "generate_from_path",
]

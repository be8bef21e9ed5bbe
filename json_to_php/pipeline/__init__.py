"""
Pipeline - JSON document to PHP classes generator.

1. Phase 1 (Analyzer): infer Primitive / ClassRef / ArrayOf nodes from JSON
2. Phase 2 (Backend): render every class with Jinja2 templates
3. Phase 3 (Writer): atomically write the generated file
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, CollisionPolicy, OutputConfig, OutputMode
from .generator import PipelineGenerator, generate_from_path, write_output
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "CollisionPolicy",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "generate_from_path",
    "write_output",
]

"""
Pipeline generator: JSON documents to PHP source.

1. Inference: classify the JSON value tree into classes (TypeInferrer)
2. Rendering: turn each class into a PHP definition (PhpBackend)
3. Writing: atomically write the whole file (AtomicWriter), only once every
   document has been generated
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..errors import ClassCollisionError, InputNotFoundError, JsonToPhpError
from ..loader import discover_json_files, load_json_file
from ..logging_config import get_logger
from .analyzer import ClassRef, TypeInferrer
from .backends import PhpBackend
from .config import CodeGeneratorConfig
from .writer import AtomicWriter

logger = get_logger(__name__)


class PipelineGenerator:
    """Generates the PHP classes for a single JSON document."""

    def __init__(self, name: str, data: Any, config: CodeGeneratorConfig | None = None):
        """
        Args:
            name: Name the root class is derived from
            data: Parsed JSON document
            config: Code generation configuration
        """
        self.name = name
        self.data = data
        self.config = config or CodeGeneratorConfig()
        self.inferrer = TypeInferrer(self.config)
        self.backend = PhpBackend(self.config)

    def infer_classes(self) -> list[ClassRef]:
        """Return the root class followed by every nested class."""
        return list(self.inferrer.infer_document(self.data, self.name).values())

    def generate_definitions(self) -> str:
        """Render the class definitions without the file header."""
        return self.backend.render_document(self.infer_classes())

    def generate(self, generation_comment: str = "") -> str:
        """Render a complete PHP file for the document."""
        return _assemble(self.backend, [self.generate_definitions()], generation_comment)


def _assemble(backend: PhpBackend, sections: list[str], generation_comment: str) -> str:
    comment = generation_comment if backend.config.add_generation_comment else ""
    return "\n\n".join([backend.render_prefix(comment), *sections]) + "\n"


def generate_from_path(
    input_path: str | Path,
    config: CodeGeneratorConfig | None = None,
    name: str | None = None,
    generation_comment: str = "",
) -> str:
    """
    Generate the PHP file for a JSON file or a directory of JSON files.

    Each document is inferred and rendered on its own; in directory mode the
    sections are concatenated in path order, each preceded by a source comment,
    and every root class is named after its file. A class name generated by two
    documents is a ClassCollisionError.

    Args:
        input_path: JSON file or directory
        config: Code generation configuration
        name: Root class name for a single file (defaults to the file stem)
        generation_comment: Header comment, used if enabled in the config

    Raises:
        JsonToPhpError: The first error met, with the offending document attached
    """
    config = config or CodeGeneratorConfig()
    input_path = Path(input_path)
    backend = PhpBackend(config)

    if not input_path.exists():
        raise InputNotFoundError(f"Input not found: {input_path}")

    if not input_path.is_dir():
        classes = _infer_document(input_path, name or input_path.stem, config)
        return _assemble(backend, [backend.render_document(classes)], generation_comment)

    files = discover_json_files(input_path)
    if not files:
        raise InputNotFoundError(f"No JSON files found in {input_path}")

    sections = []
    sources: dict[str, Path] = {}
    for file_path in files:
        relative = file_path.relative_to(input_path)
        classes = _infer_document(file_path, file_path.stem, config)
        for class_ref in classes:
            first = sources.setdefault(class_ref.class_name, relative)
            if first != relative:
                raise ClassCollisionError(
                    f"Class {class_ref.class_name} is generated by both {first.as_posix()} "
                    f"and {relative.as_posix()}",
                    path=class_ref.class_name,
                    document=file_path,
                )
        sections.append(f"// Source: {relative.as_posix()}\n{backend.render_document(classes)}")
    return _assemble(backend, sections, generation_comment)


def _infer_document(file_path: Path, name: str, config: CodeGeneratorConfig) -> list[ClassRef]:
    logger.info("Generating classes for %s", file_path)
    data = load_json_file(file_path)
    try:
        return PipelineGenerator(name, data, config).infer_classes()
    except JsonToPhpError as e:
        e.with_document(file_path)
        raise


def write_output(output_path: str | Path, content: str, config: CodeGeneratorConfig | None = None) -> None:
    """Atomically write generated code to ``output_path``."""
    config = config or CodeGeneratorConfig()
    AtomicWriter(config.output).write(Path(output_path), content)

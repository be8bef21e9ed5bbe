"""
PHP code generation backend.

Renders ClassRef nodes as readonly-style PHP value classes: a docblock listing
every member, a static ``create`` factory forwarding its parameters to a
private promoted-property constructor.

Each member contributes three fragments, kept in member order:

- an annotation line for the docblocks (``@var array<array<int>> $ids``)
- a ``create`` parameter (``array $ids``)
- a constructor field declaration (``public array $ids``)
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import jinja2

from ...utils import to_pascal_case
from ..analyzer.type_nodes import ArrayOf, ClassRef, Primitive, Property
from ..config import CodeGeneratorConfig


class PhpBackend:
    """Renders inferred classes as PHP source."""

    # Template directory name
    TEMPLATE_LANG: str = "php"

    # File extension
    FILE_EXTENSION: str = "php"

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")

    def translate_type(self, prop: Property) -> str:
        """
        Translate a property to the PHP type used in docblocks.

        Arrays are spelled out with their full nesting, e.g. ``array<array<int>>``.
        """
        match prop:
            case Primitive(type_name=type_name):
                return type_name
            case ClassRef(class_name=class_name):
                return class_name
            case ArrayOf(item=item, nesting=nesting):
                type_str = to_pascal_case(item.class_name) if isinstance(item, ClassRef) else item.type_name
                for _ in range(nesting):
                    type_str = f"array<{type_str}>"
                return type_str
            case _:
                raise TypeError(f"Unknown property type: {prop!r}")

    def declared_type(self, prop: Property) -> str:
        """Translate a property to the PHP type used in signatures."""
        match prop:
            case Primitive(type_name=type_name):
                return type_name
            case ClassRef(class_name=class_name):
                return class_name
            case ArrayOf():
                # PHP has no typed arrays, the nesting only lives in the docblock
                return "array"
            case _:
                raise TypeError(f"Unknown property type: {prop!r}")

    def annotation_fragment(self, prop: Property) -> str:
        return f"@var {self.translate_type(prop)} ${prop.property_name}"

    def create_parameter_fragment(self, prop: Property) -> str:
        return f"{self.declared_type(prop)} ${prop.property_name}"

    def field_declaration_fragment(self, prop: Property) -> str:
        return f"public {self.declared_type(prop)} ${prop.property_name}"

    def _prepare_class_context(self, class_ref: ClassRef) -> dict[str, Any]:
        """
        Prepare the template context for a class.

        Args:
            class_ref: The class to render

        Returns:
            Dictionary of template variables
        """
        members = list(class_ref.members.values())
        return {
            "CLASS_NAME": class_ref.class_name,
            "I": " " * self.config.indent,
            "annotations": [self.annotation_fragment(prop) for prop in members],
            "create_parameters": [self.create_parameter_fragment(prop) for prop in members],
            "field_declarations": [self.field_declaration_fragment(prop) for prop in members],
            "arguments": [f"${prop.property_name}" for prop in members],
        }

    def render_class(self, class_ref: ClassRef) -> str:
        """Render one class definition."""
        return self.class_template.render(self._prepare_class_context(class_ref))

    def render_document(self, class_refs: Iterable[ClassRef]) -> str:
        """Render class definitions separated by a blank line."""
        return "\n\n".join(self.render_class(class_ref) for class_ref in class_refs)

    def render_prefix(self, generation_comment: str = "") -> str:
        """Render the file header: the PHP open tag and the optional generation comment."""
        return self.prefix_template.render(GENERATION_COMMENT=generation_comment).rstrip("\n")

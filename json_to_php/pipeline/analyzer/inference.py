"""
Type inference from JSON values.

Walks a parsed JSON value (dict / list / scalars, as produced by ``json.load``)
and classifies every node as a Primitive, ClassRef or ArrayOf. Objects become
classes named after the chain of keys leading to them; arrays are typed from
their first element only.

The walk uses an explicit stack so deeply nested documents are bounded by
``CodeGeneratorConfig.max_depth`` instead of the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Any

from ...errors import (
    ClassCollisionError,
    EmptyArrayError,
    MaxDepthExceededError,
    UnsupportedRootTypeError,
)
from ...logging_config import get_logger
from ...utils import sanitize_key, to_camel_case, to_pascal_case
from ..config import CodeGeneratorConfig, CollisionPolicy
from .type_nodes import ArrayOf, ClassRef, Primitive, Property

logger = get_logger(__name__)


def _join_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


class _ObjectFrame:
    """Pending JSON object: members are inferred one at a time."""

    def __init__(self, value: dict, property_key: str, prefix_path: str, path: str):
        self.property_key = property_key
        self.prefix_path = prefix_path
        self.path = path
        self.pending = iter(value.items())
        self.current_key = ""
        self.members: dict[str, Property] = {}

    def next_child(self) -> tuple[Any, str, str, str] | None:
        entry = next(self.pending, None)
        if entry is None:
            return None
        key, value = entry
        self.current_key = sanitize_key(key)
        return value, key, f"{self.prefix_path}{self.property_key}_", _join_path(self.path, key)

    def accept(self, prop: Property) -> None:
        # Keys sanitizing to the same member replace the earlier one
        self.members[self.current_key] = prop

    def finish(self) -> ClassRef:
        return ClassRef(
            class_name=to_pascal_case(sanitize_key(self.prefix_path + self.property_key)),
            property_name=to_camel_case(sanitize_key(self.property_key)),
            members=self.members,
        )


class _ArrayFrame:
    """Pending JSON array: only its first element is inferred."""

    def __init__(self, value: list, property_key: str, prefix_path: str, path: str):
        self.first = value[0]
        self.property_key = property_key
        self.prefix_path = prefix_path
        self.path = path
        self.visited = False
        self.item: Property | None = None

    def next_child(self) -> tuple[Any, str, str, str] | None:
        if self.visited:
            return None
        self.visited = True
        return self.first, self.property_key, self.prefix_path, f"{self.path}[0]"

    def accept(self, prop: Property) -> None:
        self.item = prop

    def finish(self) -> ArrayOf:
        match self.item:
            case ArrayOf(item=item, nesting=nesting):
                return ArrayOf(item=item, nesting=nesting + 1)
            case Primitive() | ClassRef():
                return ArrayOf(item=self.item, nesting=1)
            case _:
                raise TypeError(f"Unexpected array item: {self.item!r}")


class TypeInferrer:
    """Infers PHP property types and classes from JSON values."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()

    def infer(self, value: Any, property_key: str, prefix_path: str = "", path: str = "") -> Property:
        """
        Infer the type of a JSON value.

        Args:
            value: Parsed JSON value
            property_key: JSON key the value is stored under
            prefix_path: Underscore-joined keys of the enclosing objects, with
                a trailing underscore ("" at the top level)
            path: Dotted JSON path of the value, used in error messages

        Returns:
            The inferred Primitive, ClassRef or ArrayOf

        Raises:
            EmptyArrayError: If an array with no element is found
            MaxDepthExceededError: If nesting exceeds the configured max_depth
        """
        root = self._enter(value, property_key, prefix_path, path)
        if not isinstance(root, (_ObjectFrame, _ArrayFrame)):
            return root

        stack: list[_ObjectFrame | _ArrayFrame] = [root]
        result: Property | None = None
        while stack:
            frame = stack[-1]
            child = frame.next_child()
            if child is None:
                stack.pop()
                done = frame.finish()
                if stack:
                    stack[-1].accept(done)
                else:
                    result = done
                continue

            child_value, child_key, child_prefix, child_path = child
            if isinstance(child_value, (dict, list)) and len(stack) >= self.config.max_depth:
                raise MaxDepthExceededError(
                    f"Nesting deeper than {self.config.max_depth} levels at '{child_path}'",
                    path=child_path,
                )

            node = self._enter(child_value, child_key, child_prefix, child_path)
            if isinstance(node, (_ObjectFrame, _ArrayFrame)):
                stack.append(node)
            else:
                frame.accept(node)

        return result

    def _enter(self, value: Any, property_key: str, prefix_path: str, path: str):
        """Return a frame for containers or the finished Primitive for scalars."""
        if isinstance(value, list):
            if not value:
                raise EmptyArrayError(
                    f"Cannot infer the item type of empty array '{path or property_key}'",
                    path=path or property_key,
                )
            return _ArrayFrame(value, property_key, prefix_path, path)
        if isinstance(value, dict):
            return _ObjectFrame(value, property_key, prefix_path, path)
        return Primitive(type_name=self._scalar_type(value), property_name=to_camel_case(sanitize_key(property_key)))

    @staticmethod
    def _scalar_type(value: Any) -> str:
        # bool is a subclass of int, check it first
        if isinstance(value, str):
            return "string"
        if isinstance(value, bool):
            return "bool"
        if isinstance(value, int):
            return "int"
        if isinstance(value, float):
            return "float"
        return "mixed"

    def infer_document(self, value: Any, root_name: str = "root") -> dict[str, ClassRef]:
        """
        Infer the root class of a document and every class nested in it.

        Args:
            value: Parsed JSON document; must be an object
            root_name: Name the root class is derived from

        Returns:
            Classes keyed by class name: the root first, then every nested
            class in pre-order (member order). When two nested classes share a
            property name, the last one visited replaces the first, unless the
            collision policy is "error". The root is never replaced.

        Raises:
            UnsupportedRootTypeError: If the document is not a JSON object
            ClassCollisionError: On a property name collision with policy "error",
                or when two kept classes end up with the same class name
        """
        if not isinstance(value, dict):
            raise UnsupportedRootTypeError(
                f"Top-level JSON value must be an object, got {type(value).__name__}",
            )

        root = self.infer(value, root_name)
        classes = self.flatten(root)
        logger.info("Inferred %d classes for '%s'", len(classes), root.class_name)
        return classes

    def flatten(self, root: ClassRef) -> dict[str, ClassRef]:
        """
        Collect ``root`` and every ClassRef reachable from it, keyed by class name.

        Nested classes are deduplicated by property name among themselves; the
        root is always kept and always first.
        """
        nested: dict[str, ClassRef] = {}
        stack = [root]
        while stack:
            class_ref = stack.pop()
            if class_ref is not root:
                self._collect(nested, class_ref)

            children = []
            for prop in class_ref.members.values():
                match prop:
                    case ClassRef():
                        children.append(prop)
                    case ArrayOf(item=ClassRef() as item):
                        children.append(item)
                    case ArrayOf() | Primitive():
                        pass
                    case _:
                        raise TypeError(f"Unexpected property: {prop!r}")
            # Reversed so members are visited in order
            stack.extend(reversed(children))

        classes = {root.class_name: root}
        for class_ref in nested.values():
            existing = classes.get(class_ref.class_name)
            if existing is not None:
                # Replacing would drop a class that is still referenced
                raise ClassCollisionError(
                    f"Classes stored as '{existing.property_name}' and '{class_ref.property_name}' "
                    f"are both named {class_ref.class_name}",
                    path=class_ref.property_name,
                )
            classes[class_ref.class_name] = class_ref
        return classes

    def _collect(self, classes: dict[str, ClassRef], class_ref: ClassRef) -> None:
        existing = classes.get(class_ref.property_name)
        if existing is not None:
            if self.config.class_collision == CollisionPolicy.ERROR:
                raise ClassCollisionError(
                    f"Classes {existing.class_name} and {class_ref.class_name} share the property name "
                    f"'{class_ref.property_name}'",
                    path=class_ref.property_name,
                )
            logger.warning(
                "Class %s replaces %s: both are stored as '%s'",
                class_ref.class_name,
                existing.class_name,
                class_ref.property_name,
            )
        logger.debug("Collected class %s as '%s'", class_ref.class_name, class_ref.property_name)
        classes[class_ref.property_name] = class_ref

"""
Type nodes inferred from a JSON document.

A property is exactly one of three immutable variants:

- Primitive: a JSON scalar or null ("string", "bool", "int", "float", "mixed")
- ClassRef: a JSON object, rendered as its own PHP class
- ArrayOf: a JSON array, possibly several levels deep, around a non-array item
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

PRIMITIVE_TYPES = ("string", "bool", "int", "float", "mixed")


@dataclass(frozen=True)
class Primitive:
    """A scalar property."""

    type_name: str
    property_name: str

    def __post_init__(self) -> None:
        if self.type_name not in PRIMITIVE_TYPES:
            raise ValueError(f"Unknown primitive type: {self.type_name}")


@dataclass(frozen=True)
class ClassRef:
    """An object property and the class generated for it."""

    class_name: str
    property_name: str
    # sanitized JSON key -> property, in JSON key order
    members: Mapping[str, Property] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))


@dataclass(frozen=True)
class ArrayOf:
    """An array property, ``nesting`` levels deep around ``item``."""

    item: Primitive | ClassRef
    nesting: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.item, ArrayOf):
            raise TypeError("ArrayOf item must not be an ArrayOf, increase nesting instead")
        if self.nesting < 1:
            raise ValueError(f"ArrayOf nesting must be at least 1, got {self.nesting}")

    @property
    def property_name(self) -> str:
        return self.item.property_name


Property = Union[Primitive, ClassRef, ArrayOf]

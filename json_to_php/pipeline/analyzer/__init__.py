"""
Analyzer module.

Contains the type nodes and the inference engine building them from JSON.
"""

from __future__ import annotations

from .inference import TypeInferrer
from .type_nodes import ArrayOf, ClassRef, Primitive, Property

__all__ = [
    "ArrayOf",
    "ClassRef",
    "Primitive",
    "Property",
    "TypeInferrer",
]

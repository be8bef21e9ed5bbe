"""
Code generation backends.

Render the inferred classes as source code.
"""

from __future__ import annotations

from .php_backend import PhpBackend

__all__ = ["PhpBackend"]

"""
Exceptions raised while turning JSON documents into PHP classes.

Core errors (inference) carry the JSON property path of the offending value.
The driver attaches the document path before surfacing them.
"""

from __future__ import annotations

from pathlib import Path


class JsonToPhpError(Exception):
    """Base class for all json_to_php errors."""

    def __init__(self, message: str, document: str | Path | None = None):
        super().__init__(message)
        self.message = message
        self.document = str(document) if document is not None else None

    def with_document(self, document: str | Path) -> JsonToPhpError:
        """Attach the path of the document being processed and return self."""
        self.document = str(document)
        return self

    def __str__(self) -> str:
        if self.document:
            return f"{self.document}: {self.message}"
        return self.message


class MissingArgumentsError(JsonToPhpError):
    """Raised when the command line lacks the input or output argument."""


class InputNotFoundError(JsonToPhpError):
    """Raised when the input file or directory does not exist."""


class InputUnreadableError(JsonToPhpError):
    """Raised when the input exists but cannot be read."""


class JSONParseError(JsonToPhpError):
    """Raised when an input file is not valid JSON."""

    def __init__(self, message: str, document: str | Path | None = None, line: int | None = None, column: int | None = None):
        super().__init__(message, document)
        self.line = line
        self.column = column


class InferenceError(JsonToPhpError):
    """Base class for errors raised while inferring types from a JSON value.

    Attributes:
        path: Dotted JSON property path of the offending value ("" for the root)
    """

    def __init__(self, message: str, path: str = "", document: str | Path | None = None):
        super().__init__(message, document)
        self.path = path


class UnsupportedRootTypeError(InferenceError):
    """Raised when the top-level JSON value is not an object."""


class EmptyArrayError(InferenceError):
    """Raised when an empty array is found; its item type cannot be inferred."""


class MaxDepthExceededError(InferenceError):
    """Raised when the document nests deeper than the configured limit."""


class ClassCollisionError(InferenceError):
    """Raised when generated classes would share a property name or a class name."""


class OutputExistsError(JsonToPhpError):
    """Raised when the output file exists and overwriting is not allowed."""


class OutputWriteError(JsonToPhpError):
    """Raised when the output file cannot be written or fails validation."""

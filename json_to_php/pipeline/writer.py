"""
Atomic file writer for generated PHP code.

Ensures that file writes are atomic so an interrupted or failed generation
never leaves a partial output file behind.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputExistsError, OutputWriteError
from ..logging_config import get_logger
from .config import OutputConfig, OutputMode

logger = get_logger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(
        self,
        config: OutputConfig | None = None,
        validate_php: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            config: Output configuration (mode, validation)
            validate_php: Optional validation function for PHP code
        """
        self.config = config or OutputConfig()
        self._validate_php = validate_php or self._default_validate_php

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OutputExistsError: If the file exists and the mode forbids overwriting
            OutputWriteError: If validation or any file operation fails
        """
        path = Path(path)
        if self.config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputExistsError(f"Output file already exists: {path}. Use --mode force to overwrite it.")

        if self.config.validate_before_write:
            self._validate_php(content)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise OutputWriteError(f"Cannot write output {path}: {e}") from e

        temp_path = Path(temp_path_str)
        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise OutputWriteError(f"Cannot write output {path}: {e}") from e

        logger.info("Wrote %d bytes to %s", len(content.encode("utf-8")), path)

    def _default_validate_php(self, content: str) -> None:
        """Default PHP validation.

        Args:
            content: PHP code to validate

        Raises:
            OutputWriteError: If validation fails
        """
        # Basic structural checks, no PHP parser available
        if not content.startswith("<?php"):
            raise OutputWriteError("Generated PHP code does not start with <?php")

        # Comment lines may carry file names or command lines with braces
        code_lines = [line for line in content.splitlines() if not line.lstrip().startswith("//")]
        open_braces = sum(line.count("{") for line in code_lines)
        close_braces = sum(line.count("}") for line in code_lines)
        if open_braces != close_braces:
            raise OutputWriteError(f"Generated PHP code has unbalanced braces: {open_braces} open, {close_braces} close")

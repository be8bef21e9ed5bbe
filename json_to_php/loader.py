"""Loading JSON documents from files and directories."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import InputNotFoundError, InputUnreadableError, JSONParseError
from .logging_config import get_logger

logger = get_logger(__name__)


def load_json_file(file_path: str | Path) -> Any:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        The parsed JSON data.

    Raises:
        InputNotFoundError: If the file doesn't exist.
        InputUnreadableError: If the file cannot be read.
        JSONParseError: If the file is not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load JSON from file: %s", file_path)

    if not file_path.exists():
        raise InputNotFoundError(f"Input not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise JSONParseError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            document=file_path,
            line=e.lineno,
            column=e.colno,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadableError(f"Cannot read input: {e}", document=file_path) from e

    logger.info("Loaded JSON from %s", file_path)
    return data


def discover_json_files(directory: str | Path) -> list[Path]:
    """Return every ``*.json`` file below ``directory``, sorted by path.

    Raises:
        InputNotFoundError: If the directory doesn't exist.
        InputUnreadableError: If the directory cannot be listed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise InputNotFoundError(f"Input directory not found: {directory}")

    try:
        files = sorted(path for path in directory.rglob("*.json") if path.is_file())
    except OSError as e:
        raise InputUnreadableError(f"Cannot list input directory: {e}", document=directory) from e

    logger.info("Found %d JSON files in %s", len(files), directory)
    return files

"""Utility functions for loading JSON data.

This module provides functions for loading JSON from files and text with
proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read or JSON is invalid or nested too deeply.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Successfully loaded JSON from {file_path}")
        return f"📄 {file_path}", data
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except RecursionError as e:
        logger.error(f"JSON in file {file_path} is nested too deeply")
        raise JSONLoaderError(f"JSON in file {file_path} is nested too deeply") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_text(text: str, source: str = "<text>") -> tuple[str, Any]:
    """Parse JSON text.

    Args:
        text: JSON document.
        source: Description of where the text came from.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If the text is not valid JSON or is nested too deeply.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {source}: {e}")
        raise JSONLoaderError(f"Invalid JSON in {source}: {e}") from e
    except RecursionError as e:
        logger.error(f"JSON in {source} is nested too deeply")
        raise JSONLoaderError(f"JSON in {source} is nested too deeply") from e
    return source, data

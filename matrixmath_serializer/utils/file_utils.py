"""
File Utilities Module

Provides helpers for saving JSON documents (for example a set of keyed
vector/matrix fragments) to disk and loading them back.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


def save_document(document: Any, filepath: Union[str, Path], indent: Optional[int] = 2) -> Path:
    """
    Save a JSON document to a file.

    Args:
        document: JSON-compatible document (dict, list, ...)
        filepath: Path to save the JSON file
        indent: Indentation for the written file, None for compact output

    Returns:
        Path: The path that was written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=indent, ensure_ascii=False)

    logger.debug(f"Saved JSON document to {filepath}")
    return filepath


def load_document(filepath: Union[str, Path]) -> Any:
    """
    Load a JSON document from a file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The decoded document

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        document = json.load(f)

    logger.debug(f"Loaded JSON document from {filepath}")
    return document

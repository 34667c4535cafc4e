"""
Matrixmath Serializer - Utilities Module

This module contains utility functions for:
- Numeric string conversion
- JSON document files
- Logging setup
"""

from .numeric_strings import number_to_string, string_to_number, resolve_dtype
from .file_utils import save_document, load_document
from .logging_utils import setup_logging

__all__ = [
    'number_to_string',
    'string_to_number',
    'resolve_dtype',
    'save_document',
    'load_document',
    'setup_logging',
]

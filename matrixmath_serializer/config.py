"""
Centralized configuration loaded from environment variables (and a .env file if present).
Supplies the defaults used when serializers are built with from_config().
"""

import os
from typing import Optional
from dotenv import load_dotenv

from .utils.numeric_strings import resolve_dtype

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    """Interpret common textual booleans, rejecting anything else."""
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


class Config:
    """
    Settings container for the serializers.
    Values are read once at construction; invalid values raise ValueError immediately.
    """

    def __init__(self):
        """
        Load all configuration values from environment variables with sensible defaults.
        MATRIXMATH_DTYPE defaults to float64; set it to longdouble to keep values
        written with more than 17 significant digits (e.g. by long double producers).
        """
        self.DTYPE = resolve_dtype(os.getenv("MATRIXMATH_DTYPE", "float64"))

        self.STRICT_ROWS = _parse_bool(
            "MATRIXMATH_STRICT_ROWS",
            os.getenv("MATRIXMATH_STRICT_ROWS", "false")
        )

        self.JSON_INDENT = self._parse_indent(os.getenv("MATRIXMATH_JSON_INDENT"))

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def _parse_indent(raw: Optional[str]) -> Optional[int]:
        """Unset or blank means compact output."""
        if raw is None or not raw.strip():
            return None
        try:
            indent = int(raw)
        except ValueError as e:
            raise ValueError(f"Invalid MATRIXMATH_JSON_INDENT: {raw!r}") from e
        if indent < 0:
            raise ValueError(f"MATRIXMATH_JSON_INDENT must be non-negative, got {indent}")
        return indent

    def __repr__(self) -> str:
        """Generate a human-readable summary of key configuration values."""
        return (
            f"Config(\n"
            f"  DType: {self.DTYPE.name}\n"
            f"  Strict Rows: {self.STRICT_ROWS}\n"
            f"  JSON Indent: {self.JSON_INDENT}\n"
            f"  Log Level: {self.LOG_LEVEL}\n"
            f")"
        )

"""
Numeric String Conversion Module

Converts numpy scalars to full-precision decimal strings and back.
Every element of a serialized vector or matrix goes through these two functions.
"""

import numpy as np
from typing import Any, Union

from ..exceptions import MalformedDocumentError

DTypeLike = Union[str, type, np.dtype]


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Resolve a dtype name or object to a floating numpy dtype.

    Args:
        dtype: Name ("float64", "longdouble", ...), numpy type or dtype

    Returns:
        np.dtype: The resolved floating dtype

    Raises:
        ValueError: If the dtype is unknown or not a floating type
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Unknown dtype: {dtype!r}") from e

    if resolved.kind != 'f':
        raise ValueError(
            f"Unsupported dtype: {resolved.name}. "
            f"Use a floating type such as float64 or longdouble"
        )
    return resolved


def number_to_string(value: Any) -> str:
    """
    Convert a number to its full decimal expansion.

    Floating values use the shortest positional string that parses back to
    the same value in the value's own precision, so 4.5e-12 becomes
    "0.0000000000045" and 2.0 becomes "2.0".

    Args:
        value: numpy or Python floating/integer scalar

    Returns:
        str: Decimal representation

    Raises:
        TypeError: If the value is not a real number
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Boolean values cannot be serialized as numbers")
    if isinstance(value, (np.integer, int)):
        return str(int(value))
    if isinstance(value, (np.floating, float)):
        return np.format_float_positional(value, unique=True, trim='0')
    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")


def string_to_number(value: Any, dtype: DTypeLike = np.float64) -> np.floating:
    """
    Parse a decimal string into a scalar of the given dtype without going
    through an intermediate lower-precision float.

    Native JSON numbers are accepted too, parsed from their repr.

    Args:
        value: Numeric string (or int/float) taken from a JSON document
        dtype: Target floating dtype

    Returns:
        np.floating: Parsed scalar

    Raises:
        MalformedDocumentError: If the value is not numeric text or does not
            fit the dtype as a finite number
    """
    scalar_type = np.dtype(dtype).type

    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise MalformedDocumentError(
            f"Expected a numeric string, got {type(value).__name__}: {value!r}"
        )

    text = value if isinstance(value, str) else repr(value)
    try:
        with np.errstate(over='ignore'):
            number = scalar_type(text.strip())
    except (ValueError, OverflowError) as e:
        raise MalformedDocumentError(f"Invalid numeric string: {value!r}") from e

    if not np.isfinite(number):
        raise MalformedDocumentError(
            f"Numeric value is not finite in {np.dtype(dtype).name}: {value!r}"
        )
    return number

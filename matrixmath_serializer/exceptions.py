"""
Error types raised by the vector and matrix serializers.
Each failure mode gets its own class so callers can tell a missing key from a malformed payload.
"""


class SerializationError(ValueError):
    """Base class for every error raised while converting arrays to or from JSON."""


class InvalidInputError(SerializationError):
    """
    The caller passed something the serializer cannot work with:
    None, a non-numeric array, an array of the wrong dimension, or a non-string key.
    """


class MalformedDocumentError(SerializationError):
    """The JSON text or document does not have the expected array shape or content."""


class RaggedMatrixError(MalformedDocumentError):
    """A matrix row has a different number of cells than the first row (strict mode only)."""


class EmptyDocumentError(SerializationError):
    """After skipping null entries there is nothing left to build a container from."""


class MissingKeyError(SerializationError, LookupError):
    """The requested key is not present in the parent JSON object."""

    def __init__(self, key: str):
        super().__init__(f"Key not found in JSON object: {key!r}")
        self.key = key


class CopyIncompatibleError(SerializationError):
    """The destination array cannot receive the fetched values."""

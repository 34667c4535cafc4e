"""
Shared machinery for the vector and matrix serializers.
Handles JSON text encoding/decoding, keyed fragments and fetching from larger documents,
leaving the array-specific document layout to subclasses.
"""

import json
import logging
import numpy as np
from typing import Any, Dict, List, Optional

from ..exceptions import (
    CopyIncompatibleError,
    InvalidInputError,
    MalformedDocumentError,
    MissingKeyError,
)
from ..utils.numeric_strings import DTypeLike, resolve_dtype

logger = logging.getLogger(__name__)


class BaseSerializer:
    """
    Converts numpy arrays of a fixed dimension to and from JSON arrays of numeric strings.
    Subclasses set NDIM and KIND and implement the document-level conversions.
    """

    NDIM = 0
    KIND = "array"

    def __init__(self, dtype: DTypeLike = np.float64, indent: Optional[int] = None):
        """
        Set the dtype of deserialized arrays and the indentation of encoded text.
        indent=None produces compact text such as ["1.5","2.5"].
        """
        self.dtype = resolve_dtype(dtype)
        self.indent = indent

    @classmethod
    def from_config(cls, config) -> "BaseSerializer":
        """
        Factory method that builds a serializer from a Config object.
        """
        return cls(dtype=config.DTYPE, indent=config.JSON_INDENT)

    def serialize_to_document(self, array: np.ndarray) -> List[Any]:
        raise NotImplementedError

    def deserialize_from_document(self, document: Any) -> np.ndarray:
        raise NotImplementedError

    def serialize(self, array: np.ndarray) -> str:
        """
        Encode an array straight to JSON text.
        """
        document = self.serialize_to_document(array)
        return self._encode(document)

    def serialize_to_fragment(self, key: str, array: np.ndarray) -> Dict[str, List[Any]]:
        """
        Wrap the serialized array in a single-key object, ready to be merged
        into a larger document: {key: [...]}.
        """
        if not isinstance(key, str):
            raise InvalidInputError(f"Fragment key must be a string, got {type(key).__name__}")
        return {key: self.serialize_to_document(array)}

    def deserialize(self, data: Any) -> np.ndarray:
        """
        Decode JSON text and build a new array from it.
        The caller owns the returned array.
        """
        document = self._decode(data)
        return self.deserialize_from_document(document)

    def deserialize_and_fetch(self, key: str, parent: Any) -> np.ndarray:
        """
        Build a new array from the value stored under key in a JSON object.
        """
        if parent is None:
            raise InvalidInputError(f"No JSON object given to fetch {self.KIND} {key!r} from")
        if not isinstance(parent, dict):
            raise MalformedDocumentError(
                f"Expected a JSON object to fetch {key!r} from, got {type(parent).__name__}"
            )
        if key not in parent:
            raise MissingKeyError(key)

        value = parent[key]
        if not isinstance(value, list):
            raise MalformedDocumentError(
                f"Value under {key!r} is not a JSON array: {type(value).__name__}"
            )
        return self.deserialize_from_document(value)

    def fetch_into(self, destination: np.ndarray, key: str, parent: Any) -> None:
        """
        Fill an existing array in place with the values stored under key.
        The destination keeps its identity; on any failure it is left untouched.
        """
        if not isinstance(destination, np.ndarray):
            raise InvalidInputError(
                f"Destination must be a numpy array, got {type(destination).__name__}"
            )

        source = self.deserialize_and_fetch(key, parent)

        if destination.shape != source.shape:
            raise CopyIncompatibleError(
                f"Cannot copy {self.KIND} of shape {source.shape} "
                f"into destination of shape {destination.shape}"
            )
        if not np.can_cast(source.dtype, destination.dtype, "safe"):
            raise CopyIncompatibleError(
                f"Cannot copy {source.dtype} values into a {destination.dtype} "
                f"destination without losing precision"
            )
        if not destination.flags.writeable:
            raise CopyIncompatibleError("Destination array is read-only")

        destination[...] = source
        logger.debug(f"Copied {self.KIND} {key!r} into destination of shape {destination.shape}")

    def _coerce(self, array: Any) -> np.ndarray:
        """
        Validate an input container before serialization.
        Accepts any array-like with the right dimension whose dtype casts safely
        to the serializer's dtype, and returns it converted to that dtype so the
        written decimals parse back to the same values.
        """
        if array is None:
            raise InvalidInputError(f"No {self.KIND} given to serialize")

        try:
            array = np.asarray(array)
        except ValueError as e:
            raise InvalidInputError(f"Cannot convert input to a {self.KIND}: {e}") from e

        if array.ndim != self.NDIM:
            raise InvalidInputError(
                f"Expected a {self.NDIM}-D {self.KIND}, got {array.ndim}-D array"
            )
        if array.size == 0:
            raise InvalidInputError(f"Cannot serialize an empty {self.KIND}: shape {array.shape}")
        if array.dtype.kind not in 'fiu':
            raise InvalidInputError(f"Unsupported {self.KIND} dtype: {array.dtype}")
        if not np.can_cast(array.dtype, self.dtype, "safe"):
            raise InvalidInputError(
                f"Cannot serialize {array.dtype} {self.KIND} with a {self.dtype.name} serializer "
                f"without losing precision"
            )

        array = array.astype(self.dtype)
        if not np.all(np.isfinite(array)):
            raise InvalidInputError(f"Cannot serialize a {self.KIND} with non-finite values")
        return array

    def _encode(self, document: Any) -> str:
        """Compact separators unless an indent is configured."""
        if self.indent is None:
            return json.dumps(document, separators=(",", ":"), ensure_ascii=False)
        return json.dumps(document, indent=self.indent, ensure_ascii=False)

    def _decode(self, data: Any) -> Any:
        """Turn JSON text into a document, mapping decoder errors to MalformedDocumentError."""
        if data is None:
            raise InvalidInputError(f"No JSON data given to deserialize {self.KIND}")
        if not isinstance(data, (str, bytes, bytearray)):
            raise InvalidInputError(f"JSON data must be text, got {type(data).__name__}")

        try:
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedDocumentError(f"Invalid JSON for {self.KIND}: {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dtype={self.dtype.name}, indent={self.indent})"

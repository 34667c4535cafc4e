"""
Vector serialization: 1-D numpy arrays <-> flat JSON arrays of numeric strings.

Example wire format: ["0.0000000000045","320.2519111111193"]
"""

import logging
import numpy as np
from typing import Any, List

from ..config import Config
from ..exceptions import EmptyDocumentError, InvalidInputError, MalformedDocumentError
from ..utils.numeric_strings import number_to_string, string_to_number
from .base_serializer import BaseSerializer

logger = logging.getLogger(__name__)


class VectorSerializer(BaseSerializer):
    """
    Serializes vectors element by element in index order.
    Null entries are skipped on the way back in, so [null, "1.5"] yields a vector of length 1.
    Values are parsed into the serializer's dtype (float64 by default); use
    dtype=np.longdouble for text carrying more than 17 significant digits.
    """

    NDIM = 1
    KIND = "vector"

    def serialize_to_document(self, vector: np.ndarray) -> List[str]:
        """
        Build a JSON array holding one decimal string per vector position.
        """
        vector = self._coerce(vector)
        try:
            document = [number_to_string(value) for value in vector]
        except TypeError as e:
            raise InvalidInputError(f"Cannot serialize vector element: {e}") from e

        logger.debug(f"Serialized vector of capacity {len(document)}")
        return document

    def deserialize_from_document(self, document: Any) -> np.ndarray:
        """
        Build a new vector from a JSON array.

        The first pass counts non-null entries to size the vector, the second
        writes each entry into the next free slot in traversal order.
        """
        if document is None:
            raise InvalidInputError("No JSON document given to deserialize vector")
        if not isinstance(document, list):
            raise MalformedDocumentError(
                f"Expected a JSON array for vector, got {type(document).__name__}"
            )
        if not document:
            raise EmptyDocumentError("Vector JSON array is empty")

        capacity = sum(1 for item in document if item is not None)
        if capacity == 0:
            raise EmptyDocumentError("Vector JSON array contains only null entries")

        vector = np.zeros(capacity, dtype=self.dtype)
        index = 0
        for item in document:
            if item is None:
                continue
            vector[index] = string_to_number(item, self.dtype)
            index += 1

        skipped = len(document) - capacity
        if skipped:
            logger.debug(f"Skipped {skipped} null entries while deserializing vector")
        logger.debug(f"Deserialized vector of capacity {capacity}")
        return vector


def serialize_vector(vector: np.ndarray) -> str:
    """Serialize a vector using settings from the environment."""
    return VectorSerializer.from_config(Config()).serialize(vector)


def deserialize_vector(data: str) -> np.ndarray:
    """Deserialize a vector using settings from the environment."""
    return VectorSerializer.from_config(Config()).deserialize(data)

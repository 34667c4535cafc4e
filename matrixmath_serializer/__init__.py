"""
Matrixmath Serializer

Converts numpy vectors and matrices to and from JSON, storing every element
as a full-precision decimal string so values survive the round trip exactly.
"""

from .config import Config
from .exceptions import (
    SerializationError,
    InvalidInputError,
    MalformedDocumentError,
    RaggedMatrixError,
    EmptyDocumentError,
    MissingKeyError,
    CopyIncompatibleError,
)
from .serializers import (
    VectorSerializer,
    MatrixSerializer,
    serialize_vector,
    deserialize_vector,
    serialize_matrix,
    deserialize_matrix,
)
from .utils.numeric_strings import number_to_string, string_to_number

__version__ = "0.1.0"

__all__ = [
    'Config',
    'SerializationError',
    'InvalidInputError',
    'MalformedDocumentError',
    'RaggedMatrixError',
    'EmptyDocumentError',
    'MissingKeyError',
    'CopyIncompatibleError',
    'VectorSerializer',
    'MatrixSerializer',
    'serialize_vector',
    'deserialize_vector',
    'serialize_matrix',
    'deserialize_matrix',
    'number_to_string',
    'string_to_number',
]

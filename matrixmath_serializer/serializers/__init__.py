"""
Matrixmath Serializer - Serializers Module

This module contains the array codecs:
- VectorSerializer: 1-D arrays <-> JSON arrays of numeric strings
- MatrixSerializer: 2-D arrays <-> JSON arrays of rows of numeric strings
"""

from .base_serializer import BaseSerializer
from .vector_serializer import VectorSerializer, serialize_vector, deserialize_vector
from .matrix_serializer import MatrixSerializer, serialize_matrix, deserialize_matrix

__all__ = [
    'BaseSerializer',
    'VectorSerializer',
    'MatrixSerializer',
    'serialize_vector',
    'deserialize_vector',
    'serialize_matrix',
    'deserialize_matrix',
]

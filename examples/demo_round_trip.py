"""
Round Trip Demo

Serializes a vector and a matrix to JSON, embeds them in a larger document,
and reads them back without losing precision.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from matrixmath_serializer import Config, MatrixSerializer, VectorSerializer
from matrixmath_serializer.utils import setup_logging


def main():
    """Demonstrate vector and matrix round trips."""
    config = Config()
    setup_logging(config.LOG_LEVEL)

    print("=" * 60)
    print("Matrixmath Serializer - Round Trip Demo")
    print("=" * 60)
    print(config)
    print()

    vectors = VectorSerializer.from_config(config)
    matrices = MatrixSerializer.from_config(config)

    print("Vector")
    print("-" * 60)
    vector = np.array([0.0000000000045, 320.2519111111193], dtype=config.DTYPE)
    vector_string = vectors.serialize(vector)
    print(f"Serialized Vector String: {vector_string}")
    restored_vector = vectors.deserialize(vector_string)
    print(f"Unserialized Vector: {restored_vector!r}")
    print(f"Exact: {np.array_equal(vector, restored_vector)}\n")

    print("Matrix")
    print("-" * 60)
    matrix = np.array([
        [0.0000000000045, 320.2519111111193],
        [4.634254238956, 83.5793259741265],
    ], dtype=config.DTYPE)
    matrix_string = matrices.serialize(matrix)
    print(f"Serialized Matrix String: {matrix_string}")
    restored_matrix = matrices.deserialize(matrix_string)
    print(f"Unserialized Matrix:\n{restored_matrix!r}")
    print(f"Exact: {np.array_equal(matrix, restored_matrix)}\n")

    print("Embedded fragments")
    print("-" * 60)
    document = {"name": "demo"}
    document.update(vectors.serialize_to_fragment("bias", vector))
    document.update(matrices.serialize_to_fragment("weights", matrix))
    print(f"Document: {document}")

    destination = np.zeros((2, 2), dtype=config.DTYPE)
    matrices.fetch_into(destination, "weights", document)
    print(f"Fetched weights into existing array:\n{destination!r}")


if __name__ == "__main__":
    main()

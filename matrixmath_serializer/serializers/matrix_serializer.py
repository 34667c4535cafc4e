"""
Matrix serialization: 2-D numpy arrays <-> JSON arrays of rows of numeric strings.

Example wire format: [["0.0000000000045","320.2519111111193"],["4.634254238956","83.5793259741265"]]
"""

import logging
import numpy as np
from typing import Any, List, Optional

from ..config import Config
from ..exceptions import (
    EmptyDocumentError,
    InvalidInputError,
    MalformedDocumentError,
    RaggedMatrixError,
)
from ..utils.numeric_strings import DTypeLike, number_to_string, string_to_number
from .base_serializer import BaseSerializer

logger = logging.getLogger(__name__)


class MatrixSerializer(BaseSerializer):
    """
    Serializes matrices in row-major order, one JSON array per row.

    The column count of a deserialized matrix comes from the first non-null row.
    Later rows with a different number of cells are truncated or zero-padded
    unless strict_rows is set, in which case they are rejected.

    As with vectors, float64 is the default dtype; pass dtype=np.longdouble to
    keep text with more than 17 significant digits exact.
    """

    NDIM = 2
    KIND = "matrix"

    def __init__(
        self,
        dtype: DTypeLike = np.float64,
        indent: Optional[int] = None,
        strict_rows: bool = False
    ):
        super().__init__(dtype=dtype, indent=indent)
        self.strict_rows = strict_rows

    @classmethod
    def from_config(cls, config) -> "MatrixSerializer":
        """
        Factory method that builds a serializer from a Config object.
        """
        return cls(
            dtype=config.DTYPE,
            indent=config.JSON_INDENT,
            strict_rows=config.STRICT_ROWS
        )

    def serialize_to_document(self, matrix: np.ndarray) -> List[List[str]]:
        """
        Build a JSON array of row arrays, each holding the row's cells as decimal strings.
        """
        matrix = self._coerce(matrix)
        rows, columns = matrix.shape

        document = []
        for j in range(rows):
            try:
                row_items = [number_to_string(matrix[j, k]) for k in range(columns)]
            except TypeError as e:
                raise InvalidInputError(f"Cannot serialize matrix element in row {j}: {e}") from e
            document.append(row_items)

        logger.debug(f"Serialized matrix of shape {rows}x{columns}")
        return document

    def deserialize_from_document(self, document: Any) -> np.ndarray:
        """
        Build a new matrix from a JSON array of rows.

        Null rows and null cells are skipped. The first pass sizes the matrix
        (non-null rows x non-null cells of the first non-null row), the second
        fills it row by row.
        """
        if document is None:
            raise InvalidInputError("No JSON document given to deserialize matrix")
        if not isinstance(document, list):
            raise MalformedDocumentError(
                f"Expected a JSON array for matrix, got {type(document).__name__}"
            )
        if not document:
            raise EmptyDocumentError("Matrix JSON array is empty")

        rows = 0
        first_row = None
        for row in document:
            if row is None:
                continue
            rows += 1
            if first_row is None:
                first_row = row

        if first_row is None:
            raise EmptyDocumentError("Matrix JSON array contains only null rows")
        if not isinstance(first_row, list):
            raise MalformedDocumentError(
                f"Expected matrix rows to be JSON arrays, got {type(first_row).__name__}"
            )

        columns = sum(1 for cell in first_row if cell is not None)
        if columns == 0:
            raise EmptyDocumentError("First matrix row contains no values")

        matrix = np.zeros((rows, columns), dtype=self.dtype)
        j = 0
        for row in document:
            if row is None:
                continue
            if not isinstance(row, list):
                raise MalformedDocumentError(
                    f"Expected matrix row {j} to be a JSON array, got {type(row).__name__}"
                )

            cells = [cell for cell in row if cell is not None]
            if len(cells) != columns:
                if self.strict_rows:
                    raise RaggedMatrixError(
                        f"Matrix row {j} has {len(cells)} values, expected {columns}"
                    )
                logger.warning(
                    f"Matrix row {j} has {len(cells)} values, expected {columns}; "
                    f"{'truncating' if len(cells) > columns else 'padding with zeros'}"
                )

            for k, cell in enumerate(cells[:columns]):
                matrix[j, k] = string_to_number(cell, self.dtype)
            j += 1

        logger.debug(f"Deserialized matrix of shape {rows}x{columns}")
        return matrix

    def __repr__(self) -> str:
        return (
            f"MatrixSerializer(dtype={self.dtype.name}, indent={self.indent}, "
            f"strict_rows={self.strict_rows})"
        )


def serialize_matrix(matrix: np.ndarray) -> str:
    """Serialize a matrix using settings from the environment."""
    return MatrixSerializer.from_config(Config()).serialize(matrix)


def deserialize_matrix(data: str) -> np.ndarray:
    """Deserialize a matrix using settings from the environment."""
    return MatrixSerializer.from_config(Config()).deserialize(data)

"""
Utilities Tests

Tests saving/loading JSON documents of keyed fragments and the logging setup.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging

import numpy as np
import pytest

from matrixmath_serializer import MatrixSerializer, VectorSerializer
from matrixmath_serializer.utils import load_document, save_document, setup_logging


def test_save_and_load_fragments(tmp_path):
    vectors = VectorSerializer()
    matrices = MatrixSerializer()
    bias = np.array([0.1, -0.2, 0.3])
    weights = np.array([[1e-9, 2.5], [3.0, 4.75]])

    document = {"layer": "dense"}
    document.update(vectors.serialize_to_fragment("bias", bias))
    document.update(matrices.serialize_to_fragment("weights", weights))

    path = save_document(document, tmp_path / "nested" / "model.json")
    assert path.exists()

    loaded = load_document(path)
    assert loaded["layer"] == "dense"
    assert np.array_equal(vectors.deserialize_and_fetch("bias", loaded), bias)

    destination = np.zeros((2, 2))
    matrices.fetch_into(destination, "weights", loaded)
    assert np.array_equal(destination, weights)


def test_save_compact(tmp_path):
    path = save_document({"v": ["1.5"]}, tmp_path / "v.json", indent=None)
    assert path.read_text(encoding="utf-8") == '{"v": ["1.5"]}'


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.json")


def test_setup_logging(tmp_path):
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    try:
        assert setup_logging("WARNING") is None
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].level == logging.WARNING

        log_file = setup_logging("INFO", log_dir=tmp_path / "logs")
        assert log_file is not None and log_file.exists()
        assert len(root_logger.handlers) == 2
    finally:
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)

from __future__ import annotations

import logging

import pytest

from button_api.sources import MockSource
from button_api.utils import HybridLogger


@pytest.fixture
def hybrid_logger(tmp_path):
    main_logger = HybridLogger("button_api.test", log_dir=str(tmp_path), console=False)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def source() -> MockSource:
    return MockSource()

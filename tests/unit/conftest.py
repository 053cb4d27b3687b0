import pytest
from unittest.mock import Mock

from src.modules.logging.base import BaseLogger
from src.modules.runtime import Runtime
from tests.utils.test_logger import create_test_logger


@pytest.fixture
def mock_logger():
    return Mock(spec=BaseLogger)


@pytest.fixture
def test_logger():
    return create_test_logger()


@pytest.fixture
def runtime(test_logger):
    return Runtime(test_logger)


@pytest.fixture
def call_log():
    return []

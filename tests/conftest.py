import logging

import pytest

from py_fixedvector import VectorSettings
from py_fixedvector.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def default_settings():
    VectorSettings.restore_defaults()
    yield
    VectorSettings.restore_defaults()

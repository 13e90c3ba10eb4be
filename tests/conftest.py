"""Common test fixtures."""

import sys

import pytest
from loguru import logger

from schema_normalizer.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_logging():
    """Put loguru back on the real stderr after tests that install their own sink."""
    yield
    logger.remove()
    logger.add(sys.stderr)

# ABOUTME: Shared pytest fixtures for the visualizer test suite
# ABOUTME: Resets global logging configuration so tests do not leak sinks into each other

import pytest
import structlog
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    logger.remove()

import logging

import pytest

from route_pattern.types import Options


@pytest.fixture
def options():
    """Default options."""
    return Options()


@pytest.fixture
def package_logger():
    """Package logger restored to its pristine state after the test."""
    logger = logging.getLogger("route_pattern")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate

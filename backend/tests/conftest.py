"""Root conftest — shared test configuration."""

import logging
import os

import pytest

# Keep test runs independent of a developer's .env
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("MAX_RANGE_SPAN", "10000")


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging binds a handler to the current stderr — drop it after each test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)

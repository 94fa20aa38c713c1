"""Configuration for unit tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def setup_logging():
    """Log everything from the plugin while unit tests run."""
    logging.getLogger("tropy_tumblr").setLevel(logging.DEBUG)
    yield

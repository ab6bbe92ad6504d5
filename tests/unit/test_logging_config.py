"""Unit tests for the argonhash logging setup."""

import io
import logging

import pytest

from argonhash.core.params import Params, normalize
from argonhash.logging_config import LOGGER_NAME, configure_logging


@pytest.fixture
def package_logger():
    """Restores the argonhash logger after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_leaves_root_logger_alone(package_logger):
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level

    configure_logging(logging.DEBUG, stream=io.StringIO())

    assert root.handlers == root_handlers
    assert root.level == root_level
    assert package_logger.level == logging.DEBUG


def test_configure_logging_writes_package_messages(package_logger):
    stream = io.StringIO()
    configure_logging(logging.DEBUG, stream=stream)

    normalize(Params(8, 0, 1, 16, 16))

    output = stream.getvalue()
    assert "DEBUG argonhash.core.params:" in output
    assert "iterations" in output


def test_configure_logging_respects_level(package_logger):
    stream = io.StringIO()
    configure_logging(logging.INFO, stream=stream)

    normalize(Params(8, 0, 1, 16, 16))

    assert stream.getvalue() == ""


def test_configure_logging_twice_keeps_one_handler(package_logger):
    first = configure_logging(stream=io.StringIO())
    second = configure_logging(stream=io.StringIO())

    assert second in package_logger.handlers
    assert first not in package_logger.handlers
    assert sum(getattr(h, "_argonhash_handler", False) for h in package_logger.handlers) == 1


def test_package_installs_null_handler():
    assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger(LOGGER_NAME).handlers)

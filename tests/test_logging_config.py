"""
Tests for the logging configuration helpers.
"""

import io
import logging

import pytest

from topocalc.core import logging_config
from topocalc.core.logging_config import (
    setup_logging,
    get_logger,
    set_log_level,
    enable_debug,
    disable_debug,
    LOGGER_PREFIX,
)
from topocalc.core.geometry import line_intersection
from topocalc.core.models import Coordinate


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo any handler or level installed by a test."""
    yield
    root = logging.getLogger(LOGGER_PREFIX)
    if logging_config._handler is not None:
        root.removeHandler(logging_config._handler)
        logging_config._handler = None
    root.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_returns_package_logger(self):
        logger = setup_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == LOGGER_PREFIX

    def test_setup_with_debug_level(self):
        logger = setup_logging(level=logging.DEBUG)
        assert logger.level == logging.DEBUG

    def test_repeated_setup_replaces_handler(self):
        root = setup_logging()
        count = len(root.handlers)
        setup_logging()
        assert len(root.handlers) == count

    def test_engine_warnings_reach_the_stream(self):
        stream = io.StringIO()
        setup_logging(level=logging.WARNING, stream=stream)

        line_intersection(Coordinate(0, 0), Coordinate(1, 0), Coordinate(0, 1), Coordinate(1, 1))

        output = stream.getvalue()
        assert "[WARNING] topocalc.core.geometry.primitives" in output
        assert "parallel" in output


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_uses_prefix(self):
        assert get_logger("survey_app").name == "topocalc.survey_app"

    def test_package_names_are_not_prefixed_twice(self):
        assert get_logger("topocalc.core.solver").name == "topocalc.core.solver"
        assert get_logger(LOGGER_PREFIX).name == LOGGER_PREFIX

    def test_same_name_same_logger(self):
        assert get_logger("same_name") is get_logger("same_name")


class TestLogLevels:
    """Tests for set_log_level, enable_debug and disable_debug."""

    def test_set_warning_level(self):
        setup_logging()
        set_log_level(logging.WARNING)
        assert logging.getLogger(LOGGER_PREFIX).level == logging.WARNING

    def test_enable_then_disable_debug(self):
        setup_logging()
        root = logging.getLogger(LOGGER_PREFIX)

        enable_debug()
        assert root.level == logging.DEBUG

        disable_debug()
        assert root.level == logging.INFO

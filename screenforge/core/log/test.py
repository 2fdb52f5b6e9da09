"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, parse_level, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "screenforge"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Logging setup leaves per-logger levels untouched."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once the root logger has handlers
        assert logger.level == logging.NOTSET


class TestParseLevel:
    """Tests for level name resolution."""

    @pytest.mark.unit
    def test_names_case_insensitive(self) -> None:
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("WARNING") == logging.WARNING

    @pytest.mark.unit
    def test_int_passthrough(self) -> None:
        assert parse_level(logging.ERROR) == logging.ERROR

    @pytest.mark.unit
    def test_unknown_falls_back(self) -> None:
        assert parse_level("chatty") == logging.INFO
        assert parse_level(None, default=logging.WARNING) == logging.WARNING

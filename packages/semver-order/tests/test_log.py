# SPDX-License-Identifier: MIT
"""Tests for semver_order logging setup."""

import io
import logging

import pytest

from semver_order import try_parse
from semver_order.log import ROOT_LOGGER, get_logger, setup_logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_namespacing(self):
        """Test that loggers land in the package namespace."""
        assert get_logger().name == "semver_order"
        assert get_logger("semver_order.semver").name == "semver_order.semver"
        assert get_logger("plugin").name == "semver_order.plugin"

    def test_silent_by_default(self):
        """Test that the package logger has a NullHandler."""
        root = logging.getLogger(ROOT_LOGGER)
        assert any(isinstance(h, logging.NullHandler) for h in root.handlers)


@pytest.mark.usefixtures("reset_logging")
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_verbose_logs_rejections(self, monkeypatch):
        """Test that parse rejections are visible at DEBUG."""
        monkeypatch.setenv("NO_COLOR", "1")
        stream = io.StringIO()
        setup_logging(verbose=True, stream=stream)

        assert try_parse("1.2") is None
        assert "Rejected malformed version '1.2'" in stream.getvalue()

    def test_default_level_hides_debug(self, monkeypatch):
        """Test that INFO level hides parse rejections."""
        monkeypatch.setenv("NO_COLOR", "1")
        stream = io.StringIO()
        setup_logging(stream=stream)

        try_parse("1.2")
        get_logger("test").info("hello")
        assert stream.getvalue() == "INFO: hello\n"

    def test_repeat_calls_replace_handler(self):
        """Test that calling twice leaves a single handler."""
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())
        assert len(logging.getLogger(ROOT_LOGGER).handlers) == 1

"""Tests for logging_config.py module."""

import logging
from unittest.mock import patch

import colorlog
import pytest

from framebot.errors.handling import error_tally
from framebot.logging_config import LoggerConfigurator


class TestLoggerConfigurator:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_configure_uses_colorlog(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        with patch("framebot.logging_config.atexit.register") as mock_register:
            LoggerConfigurator().configure()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, colorlog.ColoredFormatter)
        assert logging.getLogger("websockets").level == logging.INFO
        mock_register.assert_called_once()

    @pytest.mark.parametrize("value", ["true", "1", "YES"])
    def test_debug_env(self, monkeypatch, value):
        monkeypatch.setenv("DEBUG", value)
        with patch("framebot.logging_config.atexit.register"):
            LoggerConfigurator().configure()
        assert logging.getLogger().level == logging.DEBUG

    def test_final_summary(self):
        with patch.object(error_tally, "log_summary") as mock_summary:
            LoggerConfigurator()._log_final_error_summary()
        mock_summary.assert_called_once()

"""Tests for root logger setup."""

from __future__ import annotations

import logging

import pytest

from app.config import settings
from app.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_format_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "log_format", "%(levelname)s %(message)s")
        monkeypatch.setattr(settings, "log_datefmt", "%Y")
        setup_logging("DEBUG")

        (handler,) = logging.getLogger().handlers
        assert handler.formatter._fmt == "%(levelname)s %(message)s"
        assert handler.formatter.datefmt == "%Y"
        assert logging.getLogger().level == logging.DEBUG

    def test_level_defaults_to_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "log_level", "warning")
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_repeat_calls_keep_one_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.getLogger().handlers) == 1

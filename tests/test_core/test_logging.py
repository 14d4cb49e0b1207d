"""Tests for src/core/logging.py — level parsing and handler wiring."""

from __future__ import annotations

import logging

from src.core.config import LoggingConfig
from src.core.logging import parse_level, setup_logging


class TestParseLevel:
    def test_standard_names(self) -> None:
        assert parse_level("DEBUG") == logging.DEBUG
        assert parse_level("error") == logging.ERROR

    def test_aliases(self) -> None:
        assert parse_level("warn") == logging.WARNING
        assert parse_level("trace") == logging.DEBUG

    def test_unknown_falls_back_to_warning(self) -> None:
        assert parse_level("chatty") == logging.WARNING
        assert parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_defaults_to_warning(self) -> None:
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_config_level(self) -> None:
        setup_logging(LoggingConfig(level="INFO", format="json"))
        assert logging.getLogger().level == logging.INFO

    def test_override_beats_config(self) -> None:
        setup_logging(LoggingConfig(level="INFO"), level="ERROR")
        assert logging.getLogger().level == logging.ERROR

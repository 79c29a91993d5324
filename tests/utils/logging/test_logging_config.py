# ABOUTME: Tests for logging configuration module
# ABOUTME: Validates dual-mode logging setup and third-party library suppression

import logging
import os
from unittest.mock import patch

import pytest

from wiki_visualizer.utils.logging import get_logger
from wiki_visualizer.utils.logging.config import (
    QUIET_LOGGERS,
    LoggingMode,
    configure_logging,
    detect_logging_mode,
    get_logging_status,
)


class TestLoggingMode:
    def test_logging_mode_constants(self):
        assert LoggingMode.INTERACTIVE == "interactive"
        assert LoggingMode.PRODUCTION == "production"


class TestDetectLoggingMode:
    """Test logging mode detection logic."""

    @pytest.mark.parametrize("value", ["interactive", "production", "PRODUCTION"])
    def test_detect_mode_from_env(self, value):
        with patch.dict(os.environ, {"WIKI_VISUALIZER_LOG_MODE": value}):
            assert detect_logging_mode() == value.lower()

    def test_detect_mode_from_env_invalid(self):
        """Test fallback when environment variable has invalid value."""
        with (
            patch.dict(os.environ, {"WIKI_VISUALIZER_LOG_MODE": "invalid"}),
            patch("sys.stdout.isatty", return_value=True),
        ):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_tty_production(self):
        with patch.dict(os.environ, {}, clear=True), patch("sys.stdout.isatty", return_value=False):
            assert detect_logging_mode() == LoggingMode.PRODUCTION


class TestConfigureLogging:
    """Test logging configuration functionality."""

    def teardown_method(self):
        for logger_name in ["", *QUIET_LOGGERS, "py.warnings"]:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.NOTSET)
        logging.captureWarnings(False)

    def test_configure_interactive_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO")
        get_logger("tests").info("Interactive logging ready", answer=42)

        assert (tmp_path / "logs").is_dir()
        assert "Interactive logging ready" in (tmp_path / "logs" / "wiki-visualizer.log").read_text()
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_custom_log_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        custom_log_file = tmp_path / "custom.log"

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO", log_file=str(custom_log_file))
        get_logger("tests").warning("Written to the custom file")

        assert "Written to the custom file" in custom_log_file.read_text()

    def test_production_mode_logs_to_stderr_only(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")
        get_logger("tests").info("Fetched page source", page="Population")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Fetched page source" in captured.err
        assert not (tmp_path / "logs").exists()

    def test_log_level_filters_structlog_calls(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.PRODUCTION, log_level="WARNING")
        get_logger("tests").info("Too chatty")

        assert "Too chatty" not in capsys.readouterr().err
        assert logging.getLogger().level == logging.WARNING


class TestGetLoggingStatus:
    def test_get_status_interactive_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "logs").mkdir()

        with patch("wiki_visualizer.utils.logging.config.detect_logging_mode", return_value=LoggingMode.INTERACTIVE):
            status = get_logging_status()

        assert status["mode"] == LoggingMode.INTERACTIVE
        assert status["log_directory"] is not None
        assert status["log_files"]["main"].endswith("wiki-visualizer.log")
        assert "httpx" in status["third_party_suppressed"]

    def test_get_status_production_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with patch("wiki_visualizer.utils.logging.config.detect_logging_mode", return_value=LoggingMode.PRODUCTION):
            status = get_logging_status()

        assert status["log_directory"] is None
        assert status["log_files"] == {"main": None, "json": None, "errors": None}

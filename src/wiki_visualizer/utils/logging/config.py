# ABOUTME: Logging configuration using loguru sinks for the visualizer
# ABOUTME: Dual-mode operation: interactive CLI writes log files, production emits JSON to stderr

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

LOG_DIRECTORY = Path("logs")

# Third-party loggers that would otherwise chatter during page fetches
QUIET_LOGGERS = ["httpx", "httpcore", "urllib3", "asyncio"]


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("WIKI_VISUALIZER_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Keep HTTP client logging out of the CLI output."""
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    # structlog call sites render key=value text and hand it to the loguru sinks below
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True)],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=lambda *args: logger,
        cache_logger_on_first_use=False,
    )

    logger.remove()

    if mode == LoggingMode.INTERACTIVE:
        try:
            LOG_DIRECTORY.mkdir(exist_ok=True)
        except OSError:
            # Read-only working directory: fall back to JSON on stderr
            mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stderr, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)
        return

    log_file_path = log_file or str(LOG_DIRECTORY / "wiki-visualizer.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="7 days",
    )

    # JSON logs for machine processing
    logger.add(
        LOG_DIRECTORY / "wiki-visualizer.json",
        level=log_level,
        format="{time} | {level} | {name} | {message}",
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        LOG_DIRECTORY / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIRECTORY.absolute()) if LOG_DIRECTORY.exists() else None,
        "log_files": {
            "main": str(LOG_DIRECTORY / "wiki-visualizer.log") if interactive else None,
            "json": str(LOG_DIRECTORY / "wiki-visualizer.json") if interactive else None,
            "errors": str(LOG_DIRECTORY / "errors.log") if interactive else None,
        },
        "third_party_suppressed": list(QUIET_LOGGERS) + ["py.warnings"],
    }

# ABOUTME: structlog logger access plus decorators that time pipeline stages and API calls
# ABOUTME: Every tracked call gets a short operation id so its start and end lines can be paired

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_LOGGER_NAME = "wiki_visualizer"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after ``name`` or, if omitted, the calling module."""
    if name is None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame else None
        name = caller.f_globals.get("__name__") if caller else None

    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


def generate_operation_id() -> str:
    return uuid.uuid4().hex[:8]


def _elapsed(started: float) -> float:
    return round(time.perf_counter() - started, 3)


def with_operation_context(operation: str, **context) -> Callable[[F], F]:
    """Log the start, completion and failure of a synchronous pipeline stage.

    Failures are logged at warning level and re-raised unchanged: most of
    them are expected extraction errors that the service turns into results.

    Args:
        operation: Stage name, used in the log messages
        **context: Extra fields bound to every line of the stage
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = get_logger(func.__module__).bind(
                operation=operation, operation_id=generate_operation_id(), function=func.__name__, **context
            )
            log.debug(f"Starting {operation}")
            started = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.warning(
                    f"Failed {operation}",
                    duration_seconds=_elapsed(started),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

            log.debug(f"Completed {operation}", duration_seconds=_elapsed(started), success=True)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def log_api_call(api_name: str, **context) -> Callable[[F], F]:
    """Log an awaited call to a remote API, with its duration and outcome."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            log = get_logger(func.__module__).bind(api_name=api_name, call_id=generate_operation_id(), **context)
            log.debug(f"API call to {api_name}")
            started = time.perf_counter()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                log.error(
                    f"API call to {api_name} failed",
                    duration_seconds=_elapsed(started),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

            log.info(f"API call to {api_name} succeeded", duration_seconds=_elapsed(started), success=True)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


class LogContext:
    """Bind fields to a logger for the duration of a ``with`` block.

    An exception leaving the block is logged once, then propagates.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound_logger: structlog.stdlib.BoundLogger | None = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound_logger is not None:
            self.bound_logger.error("Context operation failed", error=str(exc_val), error_type=exc_type.__name__)


def with_pipeline_context(pipeline_name: str, **context) -> LogContext:
    """Context for one visualization run: pipeline name, operation id and request fields."""
    return LogContext(get_logger(), pipeline=pipeline_name, operation_id=generate_operation_id(), **context)

from __future__ import annotations

import logging

from ..logging_config import log_structured_error
from .parsing import ConfigError, FormatError, ParseError


def categorize_error(error: BaseException) -> str:
    """Map an exception onto the category used for structured logging."""
    if isinstance(error, ParseError):
        return "parsing"
    if isinstance(error, FormatError):
        return "format"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, OSError | UnicodeDecodeError):
        return "io"
    return "unknown"


def log_error(
    message: str,
    error: Exception,
    context: dict | None = None,
    level: int = logging.ERROR,
) -> None:
    """Logs an error message with the associated exception details.

    Structured data carried by package errors (``IrcLineError.data``) is
    merged into the logged context; explicit ``context`` entries win.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
        level: Logging level passed through to the structured logger.
    """
    merged: dict = {}
    data = getattr(error, "data", None)
    if isinstance(data, dict):
        merged.update({k: v for k, v in data.items() if v is not None})
    if context:
        merged.update(context)

    log_structured_error(
        error_type=categorize_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
        level=level,
    )

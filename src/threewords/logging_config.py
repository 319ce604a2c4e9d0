"""Structured logging configuration using structlog.

Output format and level come from the LOG_FORMAT and LOG_LEVEL environment
variables, or from a ``Settings`` instance when one is passed in:

- json: one JSON object per line (default)
- text: human-readable console lines

Example:
    LOG_FORMAT=text LOG_LEVEL=DEBUG threewords suggest "filled.count.soap"
"""

import os
import sys
import logging
from typing import TextIO, Optional

import structlog


def _rename_event_to_message(logger, method_name, event_dict):
    """Rename 'event' key to 'message' for consistency with standard logging."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(settings=None, stream: Optional[TextIO] = None) -> None:
    """Configure structured logging.

    Args:
        settings: Optional ``Settings``; its log_format/log_level win over
            the environment.
        stream: Optional output stream for testing. If None, uses sys.stderr
            so that command output on stdout stays machine-readable.
    """
    if settings is not None:
        log_format = settings.log_format.lower()
        log_level = settings.log_level.upper()
    else:
        log_format = os.getenv("LOG_FORMAT", "json").lower()
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors.append(_rename_event_to_message)
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,  # Disable cache for testing
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Example:
        logger = get_logger(__name__)
        logger.info("Request sent", path="/v3/autosuggest")
    """
    return structlog.get_logger(name)


def bind_request_id(request_id: str) -> None:
    """Attach request_id to every log line emitted in the current context."""
    structlog.contextvars.bind_contextvars(request_id=request_id)


def clear_request_id() -> None:
    structlog.contextvars.clear_contextvars()

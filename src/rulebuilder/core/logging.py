"""Structured logging for the rule engine and its HTTP surface.

structlog is configured with a shared processor chain and either a console
renderer (development) or a JSON renderer (everything else). Request
handlers bind a correlation ID so every entry emitted while serving a
request can be traced back to it.
"""

import logging
import sys
import uuid
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from rulebuilder.core.config import get_settings

DEFAULT_LOGGER_NAME = "rulebuilder"


def new_correlation_id() -> str:
    """Generate a correlation ID in the ``cid_<hex>`` form."""
    return f"cid_{uuid.uuid4().hex[:12]}"


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Ensure every entry carries a correlation ID.

    Entries logged inside a request already have one from the bound
    context; anything else gets a throwaway ID.
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = new_correlation_id()
    return event_dict


def add_logger_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the logger name, falling back to the package name for PrintLogger."""
    event_dict["logger"] = logger.name if hasattr(logger, "name") else DEFAULT_LOGGER_NAME
    return event_dict


def rename_message_field(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename structlog's ``event`` key to ``message``."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_correlation_id,
        rename_message_field,
    ]


def configure_logging(settings: Any | None = None, stream: Any | None = None) -> None:
    """Configure structured logging.

    Args:
        settings: Optional settings instance. If not provided, will load from environment.
        stream: Where entries are written. Defaults to stdout; the CLI passes
            stderr so command output stays machine-readable.
    """
    if stream is None:
        stream = sys.stdout
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level)
    use_console = settings.is_development or settings.log_format == "console"

    if use_console:
        renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=_shared_processors() + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=not use_console,
    )

    # Third-party libraries (uvicorn, json_logic) log through the stdlib.
    logging.basicConfig(format="%(message)s", stream=stream, level=level)
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "json_logic"]:
        logging.getLogger(logger_name).setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Optional logger name. If not provided, uses 'rulebuilder'.

    Returns:
        BoundLogger: Configured structured logger instance.
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


class LoggingContext:
    """Context manager that binds key-value pairs to every entry in its scope.

    Example:
        with LoggingContext(correlation_id="abc123", rule="is_trade_hub"):
            logger.info("Evaluating rule")
    """

    def __init__(self, **kwargs: str) -> None:
        self.context = kwargs
        self.token: Any | None = None

    def __enter__(self) -> "LoggingContext":
        self.token = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        if self.token is not None:
            structlog.contextvars.unbind_contextvars(*self.context.keys())


def bind_correlation_id(correlation_id: str) -> None:
    """Bind a correlation ID to the current logging context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_context() -> None:
    """Clear all context variables so they don't leak between requests."""
    structlog.contextvars.clear_contextvars()

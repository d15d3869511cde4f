"""Log output for the retouch API server.

Modules log through plain ``logging.getLogger(__name__)``; their records are
rendered by structlog, as console lines or JSON, and tagged with the
``request_id`` the server middleware sets for each incoming request.
"""

import logging
import sys
from contextvars import ContextVar

import structlog

# Set per request by the server middleware, echoed as X-Request-ID
current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def add_request_id(_logger, _method_name, event_dict):
    """Add the current request ID to every record logged while handling a request."""
    request_id = current_request_id.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def setup_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Route all stdlib loggers through structlog rendering.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, output JSON logs (for production). If False, use colored console output.
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_request_id,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # google-genai logs every request at INFO
    noisy_loggers = [
        "httpx",
        "httpcore",
        "google_genai",
        "google_genai.models",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def set_request_context(request_id: str) -> None:
    """Set the current request ID for log correlation.

    Args:
        request_id: Request ID to include in all subsequent log messages
    """
    current_request_id.set(request_id)


def clear_request_context() -> None:
    """Clear the current request context."""
    current_request_id.set(None)

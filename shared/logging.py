"""
Shared logging configuration for the club site service.

Logs are structured with structlog and emitted through stdlib logging. JSON
is rendered everywhere except local development, where a console renderer is
easier to read. Request-scoped values (request id, path) are bound through
structlog's contextvars so every log line of a request carries them.
"""

import logging
import sys
import uuid
from typing import Any, Dict, Optional

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars, merge_contextvars

# Keys whose values never reach the log output
SENSITIVE_KEYS = frozenset({"secret", "revalidation_secret", "password", "authorization"})
# Personal data submitted through the contact form
PERSONAL_KEYS = frozenset({"email", "your-email", "contact_message", "your-message"})

REDACTED = "[redacted]"


def configure_logging(service_name: str, log_level: str = "info", env: str = "local") -> None:
    """Configure structured logging for a service."""

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if env == "local"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context(service_name),
            redact_sensitive,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )


def add_service_context(service_name: str):
    """Build a processor stamping the owning service on every event."""

    def processor(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def redact_sensitive(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Mask webhook secrets and contact details."""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS or key.lower() in PERSONAL_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def set_request_id(request_id: Optional[str] = None) -> str:
    """Bind a request id (generated when absent) to the current context."""
    if not request_id:
        request_id = str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    return request_id


def get_request_id() -> Optional[str]:
    return get_contextvars().get("request_id")


def clear_context() -> None:
    """Drop every value bound for the current request."""
    clear_contextvars()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)

"""
Log setup for the StreamTitle backend.

Every record gets the id of the request it belongs to and has provider
credentials scrubbed before it reaches a handler. Output is one JSON object
per line when LOG_FORMAT=json (the production default), plain text otherwise.

    logger = get_logger(__name__)
    logger.info("Facts resolved", extra={"source": "Steam", "searched_name": "Baldur's Gate 3"})
"""

import logging
import os
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "streamtitle-backend"

_request_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    return _request_id.get()


@contextmanager
def correlation_id_context(correlation_id: Optional[str] = None) -> Iterator[str]:
    """Bind a request id (given by the client, or a fresh one) for the enclosed block."""
    request_id = correlation_id or f"req-{uuid.uuid4().hex[:16]}"
    token = _request_id.set(request_id)
    try:
        yield request_id
    finally:
        _request_id.reset(token)


class CorrelationIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "none"
        return True


class SensitiveDataFilter(logging.Filter):
    """Replaces LLM and CurseForge credentials in record args and extras with [REDACTED]."""

    SENSITIVE_KEYS = frozenset({
        "api_key", "x-api-key", "x-goog-api-key", "authorization", "token", "secret",
        "gemini_api_key", "openrouter_api_key", "curseforge_api_key",
    })

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.args = self._scrub(record.args)
        for key in [k for k in vars(record) if k.lower() in self.SENSITIVE_KEYS]:
            setattr(record, key, "[REDACTED]")
        return True

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: "[REDACTED]" if str(k).lower() in self.SENSITIVE_KEYS else self._scrub(v)
                for k, v in value.items()
            }
        # %-formatting needs tuple args to stay a tuple
        if isinstance(value, (tuple, list)):
            return type(value)(self._scrub(item) for item in value)
        return value


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.update(
            timestamp=self.formatTime(record, self.datefmt),
            level=record.levelname,
            logger=record.name,
            correlation_id=getattr(record, "correlation_id", "none"),
            environment=os.getenv("ENVIRONMENT", "development"),
            service=SERVICE_NAME,
        )
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return ServiceJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(correlation_id)s %(message)s",
            rename_fields={"timestamp": "@timestamp"},
        )
    return logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(correlation_id)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging() -> None:
    """Install a single root handler.

    LOG_LEVEL sets the level (default INFO). LOG_FORMAT picks json or text,
    defaulting to json only when ENVIRONMENT=production.
    """
    default_format = "json" if os.getenv("ENVIRONMENT") == "production" else "text"
    log_format = os.getenv("LOG_FORMAT", default_format)

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(log_format))
    handler.addFilter(CorrelationIDFilter())
    handler.addFilter(SensitiveDataFilter())

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # httpx logs full request URLs, which can carry API keys
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


setup_logging()

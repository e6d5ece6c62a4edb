"""Structured Logging — log formatting for catalog requests.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Catalog context (path, cheese_id, error_code, count) appended when the
      call site passed it via ``extra``; in both JSON and text mode
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - Formatters written against stdlib logging, no structlog dependency
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = ("path", "cheese_id", "error_code", "count")

_HANDLER_NAME = "cheese_api"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for production log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local development, context as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if not context:
            return line
        head, sep, tail = line.partition("\n")
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app's root handler, replacing one from a previous call."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

"""Structured Logging — JSON and text formatters keyed on the record being touched.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - entity/identifier (e.g. Company/c1, Job/7) are surfaced in both formats
    - Other extras (username, error_code, path) only appear in JSON
    - setup_logging is idempotent: a second call replaces, never stacks, its handler
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "entity", "identifier", "username", "error_code", "path",
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _subject(record: logging.LogRecord) -> str | None:
    """'Company/c1' when the record names an entity, else None."""
    entity = getattr(record, "entity", None)
    if entity is None:
        return None
    identifier = getattr(record, "identifier", None)
    return entity if identifier is None else f"{entity}/{identifier}"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class EntityTextFormatter(logging.Formatter):
    """Human-readable lines with a trailing [Entity/identifier] tag."""

    def __init__(self):
        super().__init__(_TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        subject = _subject(record)
        return line if subject is None else f"{line} [{subject}]"


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    global _handler
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(JSONFormatter() if fmt == "json" else EntityTextFormatter())
    logging.root.addHandler(_handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

"""Request Logging — JSON and text formatters carrying schedule context.

Invariants:
    - Every line has the record time (UTC), level, logger name and message
    - Schedule context extras (user_id, schedule_id, error_code, path, operation)
      appear in both formats when set on the record, in that fixed order
    - setup_logging is idempotent: a second call replaces the handler it
      installed before instead of stacking another one

Design Decisions:
    - stdlib logging only: services attach context through ``extra=``
    - Timestamps come from ``record.created`` so background tasks log the time
      the event happened, not the time the handler flushed it
"""

import json
import logging
from datetime import datetime, timezone

LOG_EXTRA_FIELDS = ("user_id", "schedule_id", "error_code", "path", "operation")
LOG_FORMATS = ("json", "text")

_HANDLER_MARK = "_jadwal_handler"


def log_extras(record: logging.LogRecord) -> dict:
    """Schedule context attached to a record, skipping unset keys."""
    return {
        key: record.__dict__[key]
        for key in LOG_EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


def _record_time(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": _record_time(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **log_extras(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with the schedule context appended as key=value."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = log_extras(record)
        if not extras:
            return line
        head, sep, tail = line.partition("\n")
        context = " ".join(f"{key}={value}" for key, value in extras.items())
        return f"{head} [{context}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the jadwal handler on the root logger and return it.

    Unknown formats fall back to json; unknown levels fall back to INFO.
    """
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(TextFormatter() if fmt == "text" else JSONFormatter())
    setattr(handler, _HANDLER_MARK, True)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

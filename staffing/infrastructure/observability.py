"""Structured Logging — JSON lines carrying whatever context the engines attach.

Invariants:
    - Every line has timestamp (record creation time, UTC), level, logger, message
    - Any `extra=` key a caller passes is emitted as-is; nothing is allow-listed
    - Non-JSON values (UUIDs, datetimes) are rendered with str()
    - The text format appends the same context as key=value pairs

Design Decisions:
    - stdlib logging only; setup_logging is called once from the app lifespan
"""

import json
import logging
from datetime import datetime, timezone

# Attributes every LogRecord has; anything else came from `extra=`.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__,
) | {"message", "asctime", "taskName"}


def record_context(record: logging.LogRecord) -> dict:
    """Caller-supplied fields of a record, in the order they were attached."""
    return {
        key: value for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and value is not None
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable lines for local development."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        return f"{line} [{pairs}]"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

"""Structured Logging — JSON formatter and setup for service observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (recruiter, company, operation, error_code, jobs_updated) surfaced when present
    - setup_logging is idempotent: repeated calls replace the handler it installed

Design Decisions:
    - JSONFormatter on the standard logging module, no extra dependency
    - setup_logging called once by the composition root (bootstrap.py)
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "recruiter", "company", "operation", "error_code", "jobs_updated",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _JobOfferHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _JobOfferHandler):
            logging.root.removeHandler(existing)
    handler = _JobOfferHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from joboffer.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "joboffer.services.recruiter_service", logging.INFO, __file__, 1,
        "Recruiter updated", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "joboffer.services.recruiter_service"
    assert payload["message"] == "Recruiter updated"
    assert "timestamp" in payload


def test_json_formatter_surfaces_extra_fields():
    payload = json.loads(JSONFormatter().format(_record(
        recruiter="Patricia Maidana (28123456)",
        operation="update_recruiter",
        jobs_updated=1,
    )))
    assert payload["recruiter"] == "Patricia Maidana (28123456)"
    assert payload["operation"] == "update_recruiter"
    assert payload["jobs_updated"] == 1
    assert "company" not in payload


def test_setup_logging_does_not_stack_handlers():
    handlers_before = list(logging.root.handlers)
    level_before = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        added = [h for h in logging.root.handlers if h not in handlers_before]
        assert len(added) == 1
        assert logging.root.level == logging.WARNING
    finally:
        for handler in logging.root.handlers:
            if handler not in handlers_before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(level_before)

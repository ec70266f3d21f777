"""Structured Logging — JSON formatter fields and handler setup.

Tests:
    - JSON output carries the base fields plus known extras when present
    - Unknown or None extras are omitted
    - Repeated setup_logging replaces its handler instead of stacking
"""

import json
import logging

from reflect_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="reflect_api.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg="quote served", args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "reflect_api.test"
    assert payload["message"] == "quote served"
    assert "timestamp" in payload


def test_json_formatter_includes_known_extras():
    record = _record(route="quote", status_code=404, error_kind="UNSUPPORTED_OPERATION")
    payload = json.loads(JSONFormatter().format(record))
    assert payload["route"] == "quote"
    assert payload["status_code"] == 404
    assert payload["error_kind"] == "UNSUPPORTED_OPERATION"


def test_json_formatter_skips_none_and_unknown_extras():
    record = _record(cluster=None, signer="9WzD")
    payload = json.loads(JSONFormatter().format(record))
    assert "cluster" not in payload
    assert "signer" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    level = logging.root.level
    setup_logging("DEBUG", "text")
    setup_logging("WARNING", "json")
    added = [h for h in logging.root.handlers if h not in before]
    try:
        assert len(added) == 1
        assert isinstance(added[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        for handler in added:
            logging.root.removeHandler(handler)
        logging.root.setLevel(level)

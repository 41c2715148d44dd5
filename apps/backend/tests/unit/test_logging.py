"""
Name: Structured Logging Tests

Responsibilities:
  - Redaction and truncation of extra fields
  - Request context fields attached to each JSON line
"""

from __future__ import annotations

import json
import logging

import pytest

from feedback.context import bind_request, current_log_fields, release_request
from feedback.crosscutting.logger import REDACTED, JsonLogFormatter, scrub

pytestmark = pytest.mark.unit


def _record(**extra) -> logging.LogRecord:
    record = logging.makeLogRecord({"name": "feedback-api", "levelname": "INFO", "msg": "hello"})
    record.__dict__.update(extra)
    return record


def test_scrub_redacts_sensitive_keys_at_any_depth():
    value = {"user": {"email": "ana@example.com", "name": "Ana"}, "redis_url": "redis://x"}

    assert scrub(value) == {"user": {"email": REDACTED, "name": "Ana"}, "redis_url": REDACTED}


def test_scrub_truncates_long_strings():
    assert scrub("x" * 5000).endswith("...")
    assert len(scrub("x" * 5000)) < 5000


def test_formatter_emits_json_with_extras():
    line = JsonLogFormatter().format(_record(review_id="r-1", email="ana@example.com"))

    entry = json.loads(line)
    assert entry["msg"] == "hello"
    assert entry["level"] == "INFO"
    assert entry["review_id"] == "r-1"
    assert entry["email"] == REDACTED


def test_formatter_includes_request_context():
    token = bind_request(request_id="req-9", method="PATCH", path="/reviews/1")
    try:
        entry = json.loads(JsonLogFormatter().format(_record()))
    finally:
        release_request(token)

    assert (entry["request_id"], entry["method"], entry["path"]) == (
        "req-9",
        "PATCH",
        "/reviews/1",
    )
    assert current_log_fields() == {}

from __future__ import annotations

import json
import logging

from customer_importer.utils.logging import _json_formatter

EXPECTED_ROWS = 10
EXPECTED_DOMAINS = 3


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.rows = EXPECTED_ROWS
    record.source = "customers.csv"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["rows"] == EXPECTED_ROWS
    assert payload["source"] == "customers.csv"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"domains": EXPECTED_DOMAINS}

    payload = json.loads(_json_formatter(record))

    assert payload["domains"] == EXPECTED_DOMAINS

import logging

import pytest
from environs import Env

from impact_calc.log_filters import RedactingFilter, mask_api_key
from impact_calc.logging_config import (
    HTTP_LOGGERS,
    configure_http_loggers,
    resolve_log_level,
)


def make_record(msg, args=()):
    return logging.LogRecord("httpx", logging.INFO, __file__, 1, msg, args, None)


def test_mask_api_key():
    url = "https://api.nasa.gov/neo/rest/v1/feed?start_date=2025-01-01&api_key=SECRET123&x=1"
    assert mask_api_key(url) == (
        "https://api.nasa.gov/neo/rest/v1/feed?start_date=2025-01-01&api_key=***&x=1"
    )
    assert mask_api_key("no key here") == "no key here"


def test_key_in_arguments_is_masked():
    record = make_record(
        'HTTP Request: %s %s "%s %d %s"',
        ("GET", "https://api.example.com/feed?api_key=SECRET123", "HTTP/1.1", 200, "OK"),
    )
    assert RedactingFilter().filter(record) is True
    message = record.getMessage()
    assert "SECRET123" not in message
    assert "api_key=***" in message


def test_truncation_never_leaves_part_of_key():
    # Cutting mid-key must not leave a prefix of the key behind
    url = "https://api.example.com/feed?start_date=2025-01-01&api_key=ABCDEFGHIJKLMNOP"
    record = make_record("HTTP Request: GET %s", (url,))
    RedactingFilter(max_length=60).filter(record)
    message = record.getMessage()
    assert "ABC" not in message
    assert message.endswith("...")
    assert len(message) == 63


def test_long_payload_is_truncated():
    record = make_record("Feed: %s", ("x" * 300,))
    RedactingFilter(max_length=20).filter(record)
    assert record.getMessage() == "Feed: " + "x" * 14 + "..."


def test_short_messages_untouched():
    record = make_record("short %d", (5,))
    RedactingFilter().filter(record)
    assert record.args == (5,)
    assert record.getMessage() == "short 5"


@pytest.mark.parametrize(
    "env_vars, expected",
    [
        ({}, logging.INFO),
        ({"LOGGING_LEVEL": "warning"}, logging.WARNING),
        ({"LOGGING_LEVEL": "ERROR", "DEBUG": "true"}, logging.DEBUG),
    ],
)
def test_resolve_log_level(monkeypatch, env_vars, expected):
    monkeypatch.delenv("LOGGING_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    assert resolve_log_level(Env()) == expected


def test_resolve_log_level_rejects_unknown(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setenv("LOGGING_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="Invalid log level: LOUD"):
        resolve_log_level(Env())


def test_configure_http_loggers_adds_one_filter():
    configure_http_loggers(logging.INFO)
    configure_http_loggers(logging.INFO)

    for name in HTTP_LOGGERS:
        filters = [
            f for f in logging.getLogger(name).filters if isinstance(f, RedactingFilter)
        ]
        assert len(filters) == 1

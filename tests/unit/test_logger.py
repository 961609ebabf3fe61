import json
import logging

import pytest

from typedenv import JsonFormatter, PlainFormatter, configure_logging, get_logger


@pytest.fixture()
def _restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield root
    finally:
        root.handlers = handlers
        root.setLevel(level)


def test_configure_logging_from_env(monkeypatch, _restore_root):
    monkeypatch.setenv("TYPEDENV_LOG_LEVEL", "debug")
    monkeypatch.setenv("TYPEDENV_LOG_FORMAT", "JSON")
    monkeypatch.setenv("TYPEDENV_LOG_UTC", "false")

    configure_logging()

    root = _restore_root
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    fmt = root.handlers[0].formatter
    assert isinstance(fmt, JsonFormatter)
    assert fmt.utc is False


def test_configure_logging_args_override_env(monkeypatch, _restore_root):
    monkeypatch.setenv("TYPEDENV_LOG_FORMAT", "json")

    configure_logging(level="warning", fmt="plain", utc=True)

    root = _restore_root
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, PlainFormatter)


def test_json_formatter_includes_extras():
    rec = get_logger().makeRecord(
        "typedenv", logging.WARNING, __file__, 1, "error while parsing %s", ("K",), None,
        extra={"env_key": "K"},
    )
    payload = json.loads(JsonFormatter().format(rec))
    assert payload["msg"] == "error while parsing K"
    assert payload["level"] == "WARNING"
    assert payload["extra"] == {"env_key": "K"}
    assert payload["ts"].endswith("Z")

"""
Unit tests for core.logger module.

Tests:
- Logger initialization
- format_kv_pairs() quoting, escaping and truncation
- StructuredFormatter output
- Structured extra fields and JSON output for every level
- configure_logging() root handler installation
"""

import json
import logging

import pytest

from relayhints.core import Logger
from relayhints.core.logger import StructuredFormatter, configure_logging, format_kv_pairs


class TestInit:
    """Logger initialization."""

    def test_name(self):
        assert Logger("hints")._logger.name == "hints"

    def test_default_not_json(self):
        assert Logger("test")._json_output is False

    def test_json_mode(self):
        assert Logger("test", json_output=True)._json_output is True

    def test_default_max_value_length(self):
        assert Logger("test")._max_value_length == 1000


class TestFormatKvPairs:
    """Key-value pairs formatting and escaping."""

    def test_simple(self):
        assert format_kv_pairs({"relay": "wss://nos.lol"}) == " relay=wss://nos.lol"
        assert format_kv_pairs({"serial": 3}) == " serial=3"

    def test_with_spaces(self):
        assert format_kv_pairs({"key": "hello world"}) == ' key="hello world"'

    def test_with_equals(self):
        assert format_kv_pairs({"key": "foo=bar"}) == ' key="foo=bar"'

    def test_with_double_quotes(self):
        assert format_kv_pairs({"key": 'say "hi"'}) == ' key="say \\"hi\\""'

    def test_empty_value(self):
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_empty_dict(self):
        assert format_kv_pairs({}) == ""

    def test_multiple_keys_keep_order(self):
        assert format_kv_pairs({"a": 1, "b": 2}) == " a=1 b=2"

    def test_truncation(self):
        result = format_kv_pairs({"relay": "x" * 1500}, max_value_length=1000)
        assert "truncated 500 chars" in result

    def test_no_truncation(self):
        result = format_kv_pairs({"relay": "x" * 1500}, max_value_length=None)
        assert "truncated" not in result

    def test_custom_prefix(self):
        assert format_kv_pairs({"key": "val"}, prefix="") == "key=val"


class TestStructuredFormatter:
    """Root formatter output."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("hints", logging.DEBUG, __file__, 1, "hint_saved", None, None)
        for k, v in extra.items():
            setattr(record, k, v)
        return record

    def test_plain_record(self):
        assert StructuredFormatter().format(self._record()) == "debug hints hint_saved"

    def test_structured_record(self):
        record = self._record(structured_kv={"relay": "wss://nos.lol", "serial": 0})
        assert (
            StructuredFormatter().format(record)
            == "debug hints hint_saved relay=wss://nos.lol serial=0"
        )


class TestLevels:
    """Every level emits a record with structured extras."""

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("critical", logging.CRITICAL),
        ],
    )
    def test_kv_mode(self, caplog, method: str, level: int):
        logger = Logger("test_levels")
        with caplog.at_level(logging.DEBUG, logger="test_levels"):
            getattr(logger, method)("event_name", count=3)

        (record,) = caplog.records
        assert record.levelno == level
        assert record.getMessage() == "event_name"
        assert record.structured_kv == {"count": 3}

    def test_json_mode(self, caplog):
        logger = Logger("test_json", json_output=True)
        with caplog.at_level(logging.DEBUG, logger="test_json"):
            logger.warning("relay_interned", relay="wss://nos.lol", serial=7)

        payload = json.loads(caplog.records[0].getMessage())
        assert payload["message"] == "relay_interned"
        assert payload["level"] == "warning"
        assert payload["service"] == "test_json"
        assert payload["serial"] == 7
        assert "timestamp" in payload

    def test_exception_includes_traceback(self, caplog):
        logger = Logger("test_exc")
        with caplog.at_level(logging.DEBUG, logger="test_exc"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.exception("failed", step=1)

        (record,) = caplog.records
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None

    def test_disabled_level_skipped(self, caplog):
        logger = Logger("test_disabled")
        with caplog.at_level(logging.WARNING, logger="test_disabled"):
            logger.debug("hidden")
        assert caplog.records == []
        assert logger.is_enabled_for(logging.ERROR)

    def test_long_values_pre_truncated(self, caplog):
        logger = Logger("test_trunc", max_value_length=10)
        with caplog.at_level(logging.DEBUG, logger="test_trunc"):
            logger.info("msg", relay="wss://" + "a" * 50)

        value = caplog.records[0].structured_kv["relay"]
        assert value.startswith("wss://aaaa")
        assert "truncated" in value


class TestConfigureLogging:
    """Root handler installation."""

    def test_installs_structured_formatter(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        try:
            configure_logging("debug")
            added = [h for h in root.handlers if h not in handlers]
            assert len(added) == 1
            assert isinstance(added[0].formatter, StructuredFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = handlers
            root.setLevel(level)

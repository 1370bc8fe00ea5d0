"""Tests for utils/log.py — JSON formatter and root logger setup."""
import io
import json
import logging
import sys

import pytest

from utils.config import AppConfig
from utils.log import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg="hello %s", args=("world",), **extra):
    record = logging.LogRecord("needs.need", logging.ERROR, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_basic_fields(self):
        data = json.loads(JsonFormatter().format(_record()))
        assert data["level"] == "ERROR"
        assert data["logger"] == "needs.need"
        assert data["message"] == "hello world"
        assert "timestamp" in data

    def test_known_extras_included(self):
        data = json.loads(JsonFormatter().format(
            _record(content_id="abc", operation="save", colour="blue")))
        assert data["content_id"] == "abc"
        assert data["operation"] == "save"
        assert "colour" not in data

    def test_exception_text(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()
        data = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in data["exc_info"]


class TestConfigureLogging:
    def test_json_output(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level="INFO", log_format="json", stream=stream)
        logging.getLogger("needs.need").info("saved", extra={"content_id": "abc"})
        line = json.loads(stream.getvalue().strip())
        assert line["message"] == "saved"
        assert line["content_id"] == "abc"

    def test_text_output_and_level(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream)
        log = logging.getLogger("maslow")
        log.info("quiet")
        log.warning("loud")
        output = stream.getvalue()
        assert "quiet" not in output
        assert "WARNING maslow loud" in output

    def test_values_from_config(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("MASLOW_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("MASLOW_LOG_FORMAT", "json")
        handler = configure_logging(AppConfig.from_env(), stream=io.StringIO())
        assert isinstance(handler.formatter, JsonFormatter)
        assert logging.getLogger().level == logging.ERROR

    def test_explicit_level_beats_config(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("MASLOW_LOG_LEVEL", "ERROR")
        configure_logging(AppConfig.from_env(), level="DEBUG", stream=io.StringIO())
        assert logging.getLogger().level == logging.DEBUG

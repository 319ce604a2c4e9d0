"""Tests for logging configuration."""

import json
from io import StringIO

import pytest

from threewords.config import Settings
from threewords.logging_config import (
    bind_request_id,
    clear_request_id,
    configure_logging,
    get_logger,
)


class TestLoggingConfig:
    """Test suite for logging configuration."""

    def teardown_method(self):
        clear_request_id()

    def test_json_format_output(self, monkeypatch):
        """Test that JSON format outputs valid JSON."""
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        log_output = StringIO()
        configure_logging(stream=log_output)

        logger = get_logger("test")
        logger.info("test message", key="value")

        log_output.seek(0)
        log_data = json.loads(log_output.readline().strip())

        assert log_data["message"] == "test message"
        assert log_data["key"] == "value"
        assert log_data["level"] == "info"
        assert "T" in log_data["timestamp"]

    def test_text_format_output(self, monkeypatch):
        """Test that text format outputs human-readable text."""
        monkeypatch.setenv("LOG_FORMAT", "text")
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        log_output = StringIO()
        configure_logging(stream=log_output)

        get_logger("test").info("test message")

        log_output.seek(0)
        log_line = log_output.readline()

        with pytest.raises(json.JSONDecodeError):
            json.loads(log_line)
        assert "test message" in log_line

    def test_log_level_filtering(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        log_output = StringIO()
        configure_logging(stream=log_output)

        logger = get_logger("test")
        logger.debug("debug message")
        logger.info("info message")

        output = log_output.getvalue()
        assert "debug message" not in output
        assert "info message" in output

    def test_settings_override_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "text")
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        log_output = StringIO()
        configure_logging(Settings(log_format="json", log_level="DEBUG"), stream=log_output)

        get_logger("test").debug("debug message")

        log_data = json.loads(log_output.getvalue().strip())
        assert log_data["message"] == "debug message"
        assert log_data["level"] == "debug"

    def test_bind_request_id(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        log_output = StringIO()
        configure_logging(stream=log_output)

        bind_request_id("req_7f3a9b2c")
        get_logger("test").info("with id")
        clear_request_id()
        get_logger("test").info("without id")

        lines = [json.loads(line) for line in log_output.getvalue().splitlines()]
        assert lines[0]["request_id"] == "req_7f3a9b2c"
        assert "request_id" not in lines[1]

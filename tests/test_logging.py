import json
import logging
import re
from io import StringIO

import pytest

from liberica_locator.logging import (
    JsonFormatter,
    configure_logging,
    get_logger,
    log_with_data,
)

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def test_format_json_log():
    """Test JSON log formatting"""
    formatter = JsonFormatter()
    record = logging.LogRecord(
        "liberica_locator.test", logging.INFO, "test.py", 10, "Test message", (), None
    )

    data = json.loads(ANSI_ESCAPE.sub("", formatter.format(record)))

    assert data["level"] == "INFO"
    assert data["msg"] == "Test message"
    assert data["logger"] == "liberica_locator.test"
    assert "data" not in data


@pytest.mark.parametrize(
    "level,expected_color",
    [
        (logging.DEBUG, "\033[34m"),
        (logging.INFO, "\033[32m"),
        (logging.WARNING, "\033[33m"),
        (logging.ERROR, "\033[31m\033[1m"),
        (logging.CRITICAL, "\033[35m\033[1m"),
    ],
)
def test_format_json_log_colors(level, expected_color):
    """Test log level color coding"""
    formatter = JsonFormatter()
    record = logging.LogRecord("test", level, "test.py", 10, "Test message", (), None)

    output = formatter.format(record)
    assert output.startswith(expected_color)
    assert output.endswith("\033[0m")


def test_log_with_data_json_structure():
    """Test structured logging produces valid JSON"""
    logger = logging.getLogger("test_log_with_data")
    logger.setLevel(logging.INFO)
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    try:
        test_data = {"tag": "jdk-17.0.1+9", "assets": 3}
        log_with_data(logger, logging.INFO, "Fetched tagged release", test_data)
    finally:
        logger.removeHandler(handler)

    data = json.loads(ANSI_ESCAPE.sub("", stream.getvalue().strip()))
    assert "ts" in data
    assert data["msg"] == "Fetched tagged release"
    assert data["data"] == test_data


def test_get_logger():
    """Test logger retrieval"""
    assert get_logger("matching").name == "liberica_locator.matching"
    assert get_logger("liberica_locator.github").name == "liberica_locator.github"


def test_configure_logging():
    """Test logging configuration"""
    configure_logging("DEBUG")
    configure_logging("WARNING")
    logger = logging.getLogger("liberica_locator")

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    assert not logger.propagate

"""Unit tests for logging configuration."""

import json
import logging

import pytest

from weather_lambda.logging_config import get_logger, log_with_context, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_info_goes_to_stdout_and_errors_to_stderr(capsys):
    """Test the two channels are independent."""
    setup_logging("INFO", "text")
    logger = get_logger("weather_lambda.test")

    logger.info("fetching Seattle")
    logger.error("save failed")

    captured = capsys.readouterr()
    assert "fetching Seattle" in captured.out
    assert "save failed" not in captured.out
    assert "save failed" in captured.err
    assert "fetching Seattle" not in captured.err


def test_text_lines_carry_severity_and_source(capsys):
    """Test each line names its level and source location."""
    setup_logging("INFO", "text")

    get_logger("weather_lambda.test").info("hello")

    line = capsys.readouterr().out.strip()
    assert line.startswith("INFO: ")
    assert "test_logging_config.py:" in line


def test_json_lines_include_context(capsys):
    """Test JSON format includes extra context fields."""
    setup_logging("INFO", "json")

    log_with_context(get_logger("weather_lambda.test"), "info", "Cache hit", cache_key="Seattle")

    record = json.loads(capsys.readouterr().out.strip())
    assert record["message"] == "Cache hit"
    assert record["cache_key"] == "Seattle"
    assert record["levelname"] == "INFO"
    assert "lineno" in record


def test_level_filters_debug(capsys):
    """Test records below the configured level are dropped."""
    setup_logging("INFO", "text")

    get_logger("weather_lambda.test").debug("noisy")

    assert capsys.readouterr().out == ""


def test_third_party_loggers_quietened():
    """Test SDK and HTTP loggers are raised to WARNING."""
    setup_logging("DEBUG", "text")

    assert logging.getLogger("botocore").level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING

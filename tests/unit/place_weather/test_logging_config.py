"""Unit tests for logging configuration."""

import json
import logging

import pytest

from place_weather.logging_config import get_logger, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_json(tmp_path, restore_root_logger):
    """Test structured fields end up in the JSON log file."""
    setup_logging("INFO", tmp_path)
    logger = get_logger("place_weather.test")

    log_with_context(logger, "info", "Weather data retrieved", place="Paris", event_type="weather_retrieved")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = (tmp_path / "place_weather.log").read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "Weather data retrieved"
    assert record["place"] == "Paris"
    assert record["event_type"] == "weather_retrieved"
    assert record["levelname"] == "INFO"


def test_setup_logging_levels(tmp_path, restore_root_logger):
    root = setup_logging("warning", tmp_path)

    assert root.level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING

"""Tests for logging helpers."""

import logging

from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled
from constants import Constants


def test_extra_context_drops_none():
    """Test None fields are dropped."""
    assert extra_context(component="manifest", target=None) == {"component": "manifest"}


def test_is_debug_enabled():
    """Test the debug check follows the logger level."""
    logger = logging.getLogger("drop.test_logging_utils")
    logger.setLevel(logging.DEBUG)
    assert is_debug_enabled(logger)
    logger.setLevel(logging.INFO)
    assert not is_debug_enabled(logger)
    logger.setLevel(logging.NOTSET)


def test_configure_logging_from_env(monkeypatch):
    """Test the level comes from the argument or OCEAN_LOG_LEVEL."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "debug")
    configure_logging()
    configure_logging("warning")
    configure_logging("nonsense")
    assert [call["level"] for call in calls] == [logging.DEBUG, logging.WARNING, logging.INFO]
    assert all(call["format"] == Constants.LOG_FORMAT and call["force"] for call in calls)


def test_timer():
    """Test the timer measures elapsed time."""
    with Timer() as timer:
        pass
    assert timer.duration_ms() >= 0

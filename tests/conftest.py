import logging

import pytest
import structlog

from vouch import integer, list_of, map_of, string
from vouch.config import get_settings
from vouch.logging import LoggerRegistry


@pytest.fixture
def max_depth(monkeypatch):
    """Set VOUCH_MAX_DEPTH for the duration of a test."""
    def _set(depth: int) -> None:
        monkeypatch.setenv("VOUCH_MAX_DEPTH", str(depth))
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


@pytest.fixture
def fresh_logging():
    """Reset structlog so capture_logs sees every event."""
    LoggerRegistry._loggers.clear()
    structlog.reset_defaults()
    yield
    LoggerRegistry._loggers.clear()
    structlog.reset_defaults()
    lib_logger = logging.getLogger("vouch")
    lib_logger.handlers = []
    lib_logger.propagate = True


@pytest.fixture
def person():
    address = map_of({
        "city": string(required=True),
        "state": string(required=True, min=2, max=2),
    })
    return map_of({
        "name": string(required=True),
        "age": integer(min=1),
        "addresses": list_of(address),
    })

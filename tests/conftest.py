"""
LogBridge Test Configuration and Fixtures

This module provides common fixtures and configuration for LogBridge tests.
"""

import io
import logging
import os

import pytest
from unittest.mock import Mock

from logbridge.config import reset_config
from logbridge.core.entities.structured_record import StructuredRecord
from logbridge.core.interfaces.logger_interface import (
    ILogger,
    IMarkerAwareLogger,
    ILocationAwareLogger,
    IMessageLogger,
)
from logbridge.factories.logger_factory import reset_logger_factory
from logbridge.wrappers.event_logger import EventLogger
from tests.fixtures.test_data import SAMPLE_FIELDS, SAMPLE_ID, SAMPLE_MESSAGE, SAMPLE_TYPE


def _stub_backend(interface, name="stub"):
    mock = Mock(spec=interface)
    mock.name = name
    mock.is_enabled.return_value = True
    return mock


@pytest.fixture
def plain_backend():
    """Mock backend implementing only the plain protocol."""
    return _stub_backend(ILogger)


@pytest.fixture
def marker_backend():
    """Mock backend implementing the marker-aware protocol."""
    return _stub_backend(IMarkerAwareLogger)


@pytest.fixture
def location_backend():
    """Mock backend implementing the location-aware protocol."""
    return _stub_backend(ILocationAwareLogger)


@pytest.fixture
def message_backend():
    """Mock backend implementing the message-aware protocol."""
    return _stub_backend(IMessageLogger)


@pytest.fixture
def sample_record():
    """Record used by the canonical rendering examples."""
    return StructuredRecord(id=SAMPLE_ID, message=SAMPLE_MESSAGE, type=SAMPLE_TYPE, fields=SAMPLE_FIELDS)


@pytest.fixture
def stream():
    """In-memory text stream for backends that write output."""
    return io.StringIO()


@pytest.fixture
def capture_logger():
    """Stdlib logger with a handler that keeps emitted records."""
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    stdlib_logger = logging.getLogger("tests.capture")
    handler = ListHandler(level=logging.NOTSET)
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(1)
    stdlib_logger.propagate = False
    stdlib_logger.records = records
    yield stdlib_logger
    stdlib_logger.removeHandler(handler)
    del stdlib_logger.records


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from LOGBRIDGE_* variables and process-wide state."""
    for key in list(os.environ):
        if key.startswith("LOGBRIDGE_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    reset_logger_factory()
    EventLogger.reset()
    yield
    reset_config()
    reset_logger_factory()
    EventLogger.reset()

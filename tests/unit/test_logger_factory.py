"""
Unit Tests for logger factories, the binder and the module-level API
"""

import logging
import sys

import pytest
from unittest.mock import Mock

from logbridge.config import LogBridgeConfig
from logbridge.core.exceptions import BindingError
from logbridge.core.interfaces.logger_interface import ILoggerFactory, IMessageLogger
from logbridge.core.value_objects.capability import CapabilityTier
from logbridge.factories.logger_factory import (
    LoggerFactoryBinder,
    LoggerFactoryBuilder,
    StdlibLoggerFactory,
    StructuredLoggerFactory,
    get_logger,
    get_logger_factory,
    reset_logger_factory,
    set_logger_factory,
)
from logbridge.infrastructure.logging.stdlib_logger import StdlibLogger
from logbridge.infrastructure.logging.structured_logger import StructuredLogger
from logbridge.infrastructure.nop_logger import NOP_LOGGER, NOPLoggerFactory
from logbridge.wrappers.logger_wrapper import LoggerWrapper


class CustomFactory(ILoggerFactory):
    """Factory resolvable through a "module:attribute" path."""

    def get_logger(self, name):
        return NOP_LOGGER


def make_factory():
    return CustomFactory()


NOT_A_FACTORY = 42


def _config(monkeypatch, **env):
    for key, value in env.items():
        monkeypatch.setenv(f"LOGBRIDGE_{key}", value)
    return LogBridgeConfig()


class TestBuiltinFactories:
    """Test suite for the built-in factories."""

    def test_stdlib_factory(self):
        """Test that the stdlib factory applies level and propagation."""
        backend = StdlibLoggerFactory(log_level="ERROR", propagate=False).get_logger("tests.factory.stdlib")
        assert isinstance(backend, StdlibLogger)
        assert backend.logger.level == logging.ERROR
        assert backend.logger.propagate is False

    def test_structured_factory_caches_per_name(self):
        """Test that one JSON backend exists per logger name."""
        factory = StructuredLoggerFactory()
        first = factory.get_logger("tests.factory.json")
        assert isinstance(first, StructuredLogger)
        assert factory.get_logger("tests.factory.json") is first
        assert factory.get_logger("tests.factory.json2") is not first


class TestLoggerFactoryBuilder:
    """Test suite for LoggerFactoryBuilder."""

    def test_default_is_stdlib(self):
        """Test the default backend."""
        assert isinstance(LoggerFactoryBuilder().build(), StdlibLoggerFactory)

    def test_json_backend(self):
        """Test building the JSON factory with a stream."""
        factory = (LoggerFactoryBuilder()
                   .with_backend("JSON")
                   .with_log_level("DEBUG")
                   .with_stream("stderr")
                   .build())
        assert isinstance(factory, StructuredLoggerFactory)
        backend = factory.get_logger("tests.builder.json")
        assert backend.logger.level == logging.DEBUG
        assert backend.logger.handlers[0].stream is sys.stderr

    def test_nop_backend(self):
        """Test building the NOP factory."""
        assert isinstance(LoggerFactoryBuilder().with_backend("nop").build(), NOPLoggerFactory)

    def test_unknown_backend(self):
        """Test that unknown backends are rejected."""
        with pytest.raises(ValueError):
            LoggerFactoryBuilder().with_backend("syslog").build()


class TestLoggerFactoryBinder:
    """Test suite for LoggerFactoryBinder."""

    def test_binds_configured_class(self, monkeypatch):
        """Test that a factory class is instantiated."""
        config = _config(monkeypatch, LOGGER_FACTORY=f"{__name__}:CustomFactory")
        assert isinstance(LoggerFactoryBinder(config).bind(), CustomFactory)

    def test_binds_callable(self, monkeypatch):
        """Test that a callable attribute is invoked."""
        config = _config(monkeypatch, LOGGER_FACTORY=f"{__name__}:make_factory")
        assert isinstance(LoggerFactoryBinder(config).bind(), CustomFactory)

    @pytest.mark.parametrize("target", [
        "no_colon_here",
        "no.such.module:Factory",
        f"{__name__}:Missing",
        f"{__name__}:NOT_A_FACTORY",
    ])
    def test_load_failures(self, monkeypatch, target):
        """Test that unusable targets raise BindingError."""
        binder = LoggerFactoryBinder(_config(monkeypatch))
        with pytest.raises(BindingError) as exc_info:
            binder.load_factory(target)
        assert exc_info.value.error_code == "BINDING_FAILED"
        assert exc_info.value.details["target"] == target

    def test_failure_falls_back_to_backend(self, monkeypatch, caplog):
        """Test that binding failures are reported and the backend is used."""
        config = _config(monkeypatch, LOGGER_FACTORY="no.such.module:Factory", BACKEND="nop")
        with caplog.at_level(logging.WARNING, logger="logbridge.factories.logger_factory"):
            factory = LoggerFactoryBinder(config).bind()
        assert isinstance(factory, NOPLoggerFactory)
        assert "no.such.module:Factory" in caplog.text

    def test_configured_backend(self, monkeypatch):
        """Test that without a factory path the backend setting decides."""
        config = _config(monkeypatch, BACKEND="json", LOG_LEVEL="WARN")
        assert isinstance(LoggerFactoryBinder(config).bind(), StructuredLoggerFactory)


class TestModuleApi:
    """Test suite for get_logger and the process-wide factory."""

    def test_get_logger_by_name(self):
        """Test that get_logger wraps the factory's backend."""
        backend = Mock(spec=IMessageLogger)
        factory = Mock(spec=ILoggerFactory)
        factory.get_logger.return_value = backend
        set_logger_factory(factory)

        wrapper = get_logger("app.service")
        assert isinstance(wrapper, LoggerWrapper)
        assert wrapper.backend is backend
        assert wrapper.tier == CapabilityTier.MESSAGE_AWARE
        factory.get_logger.assert_called_once_with("app.service")

    def test_get_logger_by_class(self):
        """Test that classes are named by module and qualified name."""
        factory = Mock(spec=ILoggerFactory)
        factory.get_logger.return_value = NOP_LOGGER
        set_logger_factory(factory)

        get_logger(CustomFactory)
        factory.get_logger.assert_called_once_with(f"{__name__}.CustomFactory")

    def test_fresh_wrapper_per_call(self):
        """Test that wrappers are not cached."""
        set_logger_factory(NOPLoggerFactory())
        first = get_logger("x", caller_boundary="a.B")
        second = get_logger("x")
        assert first is not second
        assert first.caller_boundary == "a.B"
        assert second.caller_boundary == LoggerWrapper.FQCN

    def test_lazy_binding_from_environment(self, monkeypatch):
        """Test that the first lookup binds from configuration."""
        monkeypatch.setenv("LOGBRIDGE_BACKEND", "nop")
        reset_logger_factory()
        assert isinstance(get_logger_factory(), NOPLoggerFactory)
        assert get_logger_factory() is get_logger_factory()
        assert get_logger("anything").backend is NOP_LOGGER

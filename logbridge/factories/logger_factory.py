"""
Logger factories and the binder that selects one at startup.
"""
import importlib
import logging
import sys
import threading
from typing import Any, Dict, Optional, TextIO, Union

from ..config import LogBridgeConfig, get_config
from ..core.exceptions.logbridge_exceptions import BindingError
from ..core.interfaces.logger_interface import ILogger, ILoggerFactory
from ..core.value_objects.level import Level
from ..infrastructure.logging.stdlib_logger import StdlibLogger
from ..infrastructure.logging.structured_logger import StructuredLogger
from ..infrastructure.nop_logger import NOPLoggerFactory
from ..wrappers.logger_wrapper import LoggerWrapper

logger = logging.getLogger(__name__)


class StdlibLoggerFactory(ILoggerFactory):
    """Factory for backends over standard library loggers."""

    def __init__(self, log_level: Optional[str] = None, propagate: Optional[bool] = None):
        self._log_level = log_level
        self._propagate = propagate

    def get_logger(self, name: str) -> ILogger:
        backend = StdlibLogger(name)
        if self._log_level is not None:
            backend.logger.setLevel(Level.from_name(self._log_level).stdlib_level)
        if self._propagate is not None:
            backend.logger.propagate = self._propagate
        return backend


class StructuredLoggerFactory(ILoggerFactory):
    """Factory for JSON backends, one instance per logger name."""

    def __init__(self, log_level: str = "INFO", stream: Optional[TextIO] = None):
        self._log_level = log_level
        self._stream = stream
        self._logger_instances: Dict[str, StructuredLogger] = {}
        self._lock = threading.Lock()

    def get_logger(self, name: str) -> ILogger:
        """Get or create the logger instance for ``name``."""
        with self._lock:
            if name not in self._logger_instances:
                self._logger_instances[name] = StructuredLogger(
                    name=name,
                    level=self._log_level,
                    stream=self._stream
                )
            return self._logger_instances[name]


class LoggerFactoryBuilder:
    """Builder for the built-in logger factories."""

    def __init__(self):
        self._backend = "stdlib"
        self._log_level: Optional[str] = None
        self._stream: Optional[TextIO] = None
        self._propagate: Optional[bool] = None

    def with_backend(self, backend: str) -> 'LoggerFactoryBuilder':
        """Select the backend: stdlib, json or nop."""
        self._backend = backend.lower()
        return self

    def with_log_level(self, log_level: str) -> 'LoggerFactoryBuilder':
        self._log_level = log_level
        return self

    def with_stream(self, stream: Union[str, TextIO]) -> 'LoggerFactoryBuilder':
        """Output stream for the json backend; "stdout", "stderr" or a file object."""
        if isinstance(stream, str):
            stream = sys.stderr if stream == "stderr" else sys.stdout
        self._stream = stream
        return self

    def with_propagate(self, propagate: bool) -> 'LoggerFactoryBuilder':
        self._propagate = propagate
        return self

    @classmethod
    def from_config(cls, config: LogBridgeConfig) -> 'LoggerFactoryBuilder':
        return (cls()
                .with_backend(config.binding.backend)
                .with_log_level(config.output.log_level)
                .with_stream(config.output.stream)
                .with_propagate(config.output.propagate))

    def build(self) -> ILoggerFactory:
        """Build the configured factory.

        Raises:
            ValueError: if the backend name is unknown
        """
        if self._backend == "nop":
            return NOPLoggerFactory()
        if self._backend == "json":
            return StructuredLoggerFactory(log_level=self._log_level or "INFO", stream=self._stream)
        if self._backend == "stdlib":
            return StdlibLoggerFactory(log_level=self._log_level, propagate=self._propagate)
        raise ValueError(f"Unknown backend: {self._backend}")


class LoggerFactoryBinder:
    """Resolves the process-wide logger factory from configuration.

    A ``logger_factory`` setting of the form ``package.module:attribute``
    takes precedence. The attribute is called when it is callable, and the
    result must provide ``get_logger``. When that setting is empty or
    cannot be resolved, the configured built-in backend is used.
    """

    def __init__(self, config: Optional[LogBridgeConfig] = None):
        self._config = config or get_config()

    def load_factory(self, target: str) -> ILoggerFactory:
        """Import and instantiate the factory named by ``target``.

        Raises:
            BindingError: if the target cannot be imported or is not a factory
        """
        module_name, sep, attr = target.partition(":")
        if not sep or not module_name or not attr:
            raise BindingError(target, "expected 'package.module:attribute'")

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise BindingError(target, str(e)) from e

        try:
            factory: Any = getattr(module, attr)
        except AttributeError as e:
            raise BindingError(target, f"module has no attribute '{attr}'") from e

        if isinstance(factory, type) or not hasattr(factory, "get_logger"):
            if not callable(factory):
                raise BindingError(target, "object is neither a factory nor callable")
            try:
                factory = factory()
            except Exception as e:
                raise BindingError(target, f"factory construction failed: {e}") from e

        if not callable(getattr(factory, "get_logger", None)):
            raise BindingError(target, "object does not provide get_logger()")
        return factory

    def bind(self) -> ILoggerFactory:
        """Return the configured factory, falling back to the built-in backend."""
        target = self._config.binding.logger_factory
        if target:
            try:
                factory = self.load_factory(target)
                logger.debug("Bound logger factory %s", target)
                return factory
            except BindingError as e:
                logger.warning("%s; falling back to the %s backend", e, self._config.binding.backend)

        return LoggerFactoryBuilder.from_config(self._config).build()


_factory: Optional[ILoggerFactory] = None
_factory_lock = threading.Lock()


def get_logger_factory() -> ILoggerFactory:
    """Get the process-wide logger factory, binding it on first use"""
    global _factory
    with _factory_lock:
        if _factory is None:
            _factory = LoggerFactoryBinder().bind()
        return _factory


def set_logger_factory(factory: ILoggerFactory) -> None:
    """Replace the process-wide logger factory"""
    global _factory
    with _factory_lock:
        _factory = factory


def reset_logger_factory() -> None:
    """Forget the bound factory; the next lookup binds again"""
    global _factory
    with _factory_lock:
        _factory = None


def _logger_name(name_or_class: Union[str, type, Any]) -> str:
    if isinstance(name_or_class, str):
        return name_or_class
    cls = name_or_class if isinstance(name_or_class, type) else type(name_or_class)
    return f"{cls.__module__}.{cls.__qualname__}"


def get_logger(name_or_class: Union[str, type, Any], caller_boundary: Optional[str] = None) -> LoggerWrapper:
    """Return a facade logger for a name or a class.

    A new wrapper is created on every call; wrappers carry no state worth
    sharing.
    """
    backend = get_logger_factory().get_logger(_logger_name(name_or_class))
    return LoggerWrapper(backend, caller_boundary)

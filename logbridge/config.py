"""
LogBridge Configuration Module

Centralizes loading of binding, output and event settings from defaults,
an optional YAML file and environment variables.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "LOGBRIDGE_"

VALID_BACKENDS = ("stdlib", "json", "nop")
VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "WARN", "WARNING", "ERROR")
VALID_STREAMS = ("stdout", "stderr")
VALID_EVENT_FORMATS = ("structured", "json", "xml")


@dataclass
class BindingConfig:
    """Which logger factory backs the facade"""
    # "package.module:attribute" path; wins over ``backend`` when it resolves
    logger_factory: str = ""

    # Built-in fallback: stdlib | json | nop
    backend: str = "stdlib"


@dataclass
class OutputConfig:
    """Settings applied to the built-in backends"""
    log_level: str = "INFO"
    stream: str = "stdout"
    # stdlib backend only; JSON loggers never propagate
    propagate: bool = True


@dataclass
class EventConfig:
    """Event logging settings"""
    logger_name: str = "EventLogger"
    marker: str = "EVENT"
    format: str = "structured"


class LogBridgeConfig:
    """
    LogBridge configuration settings.

    Values are layered: dataclass defaults, then the YAML file named by
    ``config_file`` or ``LOGBRIDGE_CONFIG_FILE``, then ``LOGBRIDGE_*``
    environment variables.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration from file and environment variables"""
        self.binding = BindingConfig()
        self.output = OutputConfig()
        self.events = EventConfig()

        self.config_file = config_file or os.getenv(f"{ENV_PREFIX}CONFIG_FILE") or None
        if self.config_file:
            self._load_file(self.config_file)

        self._load_environment_variables()
        self._validate_configuration()

    def _load_file(self, path: str) -> None:
        """Load settings from a YAML file with binding/output/events sections"""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not load configuration file %s: %s", path, e)
            return

        if not isinstance(data, dict):
            logger.warning("Configuration file %s must contain a mapping, ignoring it", path)
            return

        for section_name, section in (("binding", self.binding), ("output", self.output),
                                      ("events", self.events)):
            values = data.get(section_name) or {}
            if not isinstance(values, dict):
                logger.warning("Section '%s' in %s must be a mapping, ignoring it", section_name, path)
                continue
            for key, value in values.items():
                if hasattr(section, key):
                    setattr(section, key, value)
                else:
                    logger.warning("Unknown setting %s.%s in %s", section_name, key, path)

    def _load_environment_variables(self):
        """Load environment variables into focused config objects"""

        # ==== BINDING CONFIG ====
        self.binding.logger_factory = self._get_string("LOGGER_FACTORY", self.binding.logger_factory)
        self.binding.backend = self._get_string("BACKEND", self.binding.backend).lower()

        # ==== OUTPUT CONFIG ====
        self.output.log_level = self._get_string("LOG_LEVEL", self.output.log_level).upper()
        self.output.stream = self._get_string("STREAM", self.output.stream).lower()
        self.output.propagate = self._get_bool("PROPAGATE", self.output.propagate)

        # ==== EVENT CONFIG ====
        self.events.logger_name = self._get_string("EVENT_LOGGER_NAME", self.events.logger_name)
        self.events.marker = self._get_string("EVENT_MARKER", self.events.marker)
        self.events.format = self._get_string("EVENT_FORMAT", self.events.format).lower()

    def _get_string(self, key: str, default: str) -> str:
        """Get string value from environment"""
        value = os.getenv(f"{ENV_PREFIX}{key}")
        if value is not None:
            return value
        return str(default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean value from environment with validation"""
        value = self._get_string(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def _validate_configuration(self):
        """Validate configuration values across all config objects"""
        if self.output.log_level not in VALID_LEVELS:
            logger.warning("Invalid log level: %s, using INFO", self.output.log_level)
            self.output.log_level = "INFO"

        if self.binding.backend not in VALID_BACKENDS:
            logger.warning("Invalid backend: %s, using stdlib", self.binding.backend)
            self.binding.backend = "stdlib"

        if self.output.stream not in VALID_STREAMS:
            logger.warning("Invalid stream: %s, using stdout", self.output.stream)
            self.output.stream = "stdout"

        if self.events.format not in VALID_EVENT_FORMATS:
            logger.warning("Invalid event format: %s, using structured", self.events.format)
            self.events.format = "structured"

        if not self.events.marker:
            logger.warning("Empty event marker name, using EVENT")
            self.events.marker = "EVENT"

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of configuration"""
        return {
            "config_file": self.config_file,
            "binding": {
                "logger_factory": self.binding.logger_factory,
                "backend": self.binding.backend,
            },
            "output": {
                "log_level": self.output.log_level,
                "stream": self.output.stream,
                "propagate": self.output.propagate,
            },
            "events": {
                "logger_name": self.events.logger_name,
                "marker": self.events.marker,
                "format": self.events.format,
            },
        }

    @property
    def log_level(self) -> str:
        return self.output.log_level

    @property
    def backend(self) -> str:
        return self.binding.backend


def load_dotenv_if_exists() -> bool:
    """Load .env file if it exists"""
    env_files = [
        Path(".env"),  # Current directory
        Path(__file__).parent.parent / ".env",  # Project root
    ]

    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file)
            logger.debug("Environment variables loaded from: %s", env_file)
            return True
    return False


_config: Optional[LogBridgeConfig] = None


def get_config() -> LogBridgeConfig:
    """Get the process-wide configuration instance"""
    global _config
    if _config is None:
        load_dotenv_if_exists()
        _config = LogBridgeConfig()
    return _config


def reset_config() -> None:
    """Discard the cached configuration; the next get_config() reloads it"""
    global _config
    _config = None

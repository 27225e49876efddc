"""Leveled, timestamped single-line logging to console and a run-scoped file."""

from .config import LoggerConfig, load_yaml, validate_config
from .errors import InitializationError, LoggerClosedError, SimpleLogError
from .levels import Level
from .logger import SimpleLogger
from .sinks import NO_FILE

__all__ = [
    "SimpleLogger",
    "Level",
    "NO_FILE",
    "LoggerConfig",
    "load_yaml",
    "validate_config",
    "SimpleLogError",
    "InitializationError",
    "LoggerClosedError",
]

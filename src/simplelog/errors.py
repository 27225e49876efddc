from __future__ import annotations

"""
Errors raised by simplelog.

All of them are unchecked (RuntimeError subclasses); callers are not
expected to recover from a failed logger construction.
"""


class SimpleLogError(RuntimeError):
    """Base class for simplelog errors."""


# Raised when the log directory or the log file cannot be set up.
class InitializationError(SimpleLogError):
    pass


# Raised when a handle is written to after close().
class LoggerClosedError(SimpleLogError):
    pass


__all__ = ["SimpleLogError", "InitializationError", "LoggerClosedError"]

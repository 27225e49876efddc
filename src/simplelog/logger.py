from __future__ import annotations

import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Callable, List, Optional, TextIO, Type

from .config import LoggerConfig
from .errors import InitializationError, LoggerClosedError
from .format import LABEL_ATTR, LEVEL_ATTR, run_file_name
from .levels import Level
from .log import get_logger
from .sinks import NO_FILE, PathArg, console_sink, file_sink, resolve_directory

"""
Logger facade

SimpleLogger wraps a private logging.Logger with a console sink and an
optional run-scoped file sink. Create one per component at startup and pass
it to the code that logs through it:

    log = SimpleLogger.create("Demo", "")     # file under <cwd>/log
    log.info("hello")                          # [ts][INFO - Demo:<line>] hello
    log.warning("disk low", "Worker")          # label override
    log.close()
"""

_LOG = get_logger(__name__)


# This function renders one traceback frame as "<function> (<file>:<line>)".
def _render_frame(frame: traceback.FrameSummary) -> str:
    return f"{frame.name} ({frame.filename}:{frame.lineno})"


class SimpleLogger:
    """Leveled single-line logger writing to the console and optionally a file.

    Args:
        name: label printed on every line unless overridden per call.
        path: NO_FILE for console only, None/blank for ``<cwd>/log``, or a
            directory (created if missing).
        stream: console stream, stderr by default.
        now_fn: clock used to name the run file.

    Raises:
        InitializationError: if the name is empty or the file sink cannot be set up.
    """

    def __init__(
        self,
        name: str,
        path: Optional[PathArg] = None,
        *,
        stream: Optional[TextIO] = None,
        now_fn: Callable[[], datetime] = datetime.now,
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            _LOG.error("invalid logger name: %r", name)
            raise InitializationError(f"logger name must be a non-empty string; got {name!r}")

        self._name = name
        self._now_fn = now_fn
        self._closed = False
        self._directory: Optional[Path] = None
        self._file_path: Optional[Path] = None
        self._file_handler: Optional[logging.Handler] = None

        # Not logging.getLogger(): each handle needs its own Logger, outside the
        # global registry, so handles with the same name never share handlers.
        # No parent and propagate=False, so records only reach our sinks.
        self._logger = logging.Logger(name, level=logging.INFO)
        self._logger.propagate = False
        self._logger.addHandler(console_sink(stream))

        try:
            self.attach_file(path)
        except InitializationError:
            self.close()
            raise

    # Static factory; same rules as the constructor.
    @classmethod
    def create(cls, name: str, path: Optional[PathArg] = None, **kwargs) -> "SimpleLogger":
        return cls(name, path, **kwargs)

    @classmethod
    def from_config(cls, cfg: LoggerConfig, **kwargs) -> "SimpleLogger":
        """Build a handle from a validated LoggerConfig."""
        if "stream" not in kwargs:
            kwargs["stream"] = sys.stdout if cfg.console == "stdout" else sys.stderr
        return cls(cfg.name, cfg.path, **kwargs)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Optional[Path]:
        """Directory holding the log file, or None without a file sink."""
        return self._directory

    @property
    def file_path(self) -> Optional[Path]:
        return self._file_path

    @property
    def closed(self) -> bool:
        return self._closed

    def attach_file(self, path: Optional[PathArg] = None) -> Optional[Path]:
        """
        Attach the file sink if the handle has none yet.

        The first attached file stays for the handle's lifetime; later calls
        return its path unchanged. NO_FILE attaches nothing.

        Returns:
            the log file path, or None if no file sink is attached.
        """
        self._check_open()
        if self._file_handler is not None:
            return self._file_path

        directory = resolve_directory(path)
        if directory is None:
            return None

        file_path = directory / run_file_name(self._now_fn())
        try:
            handler = file_sink(file_path)
        except OSError as e:
            _LOG.error("cannot set up log file %s: %s", file_path, e)
            raise InitializationError(f"cannot set up log file {file_path}: {e}") from e

        self._logger.addHandler(handler)
        self._file_handler = handler
        self._directory = directory
        self._file_path = file_path
        _LOG.debug("file sink attached for %s: %s", self._name, file_path)
        return file_path

    def log(self, level: Level, message: str, name: Optional[str] = None, *, stacklevel: int = 1) -> None:
        """Write one line at `level` to every sink.

        `stacklevel` is counted from the caller of this method: 1 reports the
        line that called log(); wrappers add one per extra frame.
        """
        self._check_open()
        label = self._name if name is None else name
        self._logger.log(
            level.value,
            str(message),
            extra={LEVEL_ATTR: level.tag, LABEL_ATTR: label},
            stacklevel=stacklevel + 1,
        )

    def info(self, message: str, name: Optional[str] = None, *, stacklevel: int = 1) -> None:
        self.log(Level.INFO, message, name, stacklevel=stacklevel + 1)

    def warning(self, message: str, name: Optional[str] = None, *, stacklevel: int = 1) -> None:
        self.log(Level.WARNING, message, name, stacklevel=stacklevel + 1)

    def error(self, message: str, name: Optional[str] = None, *, stacklevel: int = 1) -> None:
        self.log(Level.ERROR, message, name, stacklevel=stacklevel + 1)

    def log_stack_trace(self, error: BaseException, *, stacklevel: int = 1) -> None:
        """
        Log `error` as an ERROR entry, followed by the traceback frames whose
        "<function> (<file>:<line>)" text mentions this handle's name.
        """
        text = str(error) or type(error).__name__
        frames = traceback.extract_tb(error.__traceback__)
        # Innermost frame first, so the raise site follows the header.
        kept: List[str] = [r for r in (_render_frame(f) for f in reversed(frames)) if self._name in r]
        message = "\n".join([f"{text} at:"] + kept)
        self.log(Level.ERROR, message, stacklevel=stacklevel + 1)

    def close(self) -> None:
        """Flush, close and detach every sink. Safe to call more than once."""
        if self._closed:
            return
        for handler in list(self._logger.handlers):
            try:
                handler.flush()
                handler.close()
            finally:
                self._logger.removeHandler(handler)
        self._file_handler = None
        self._closed = True
        _LOG.debug("logger %s closed", self._name)

    def _check_open(self) -> None:
        if self._closed:
            raise LoggerClosedError(f"logger {self._name!r} is closed")

    def __enter__(self) -> "SimpleLogger":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SimpleLogger(name={self._name!r}, file={self._file_path!r})"


__all__ = ["SimpleLogger", "NO_FILE"]

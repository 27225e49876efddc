from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Final, Optional, TextIO, Union

from .format import LineFormatter

"""
Sinks:
  - console_sink(stream)   -> StreamHandler
  - file_sink(path)        -> FileHandler, append mode
  - resolve_directory(path) applies the NO_FILE / default-directory rules
No logging here; the logger facade handles errors and diagnostics.
"""

# Passing this as the path means "do not attach a file sink".
NO_FILE: Final[str] = "NoFileHandler"
_DEFAULT_DIR_NAME: Final[str] = "log"

# Directory argument accepted by the facade: a str or any os.PathLike.
PathArg = Union[str, os.PathLike]


# This function returns the default log directory, "<cwd>/log".
def default_directory() -> Path:
    return Path(os.getcwd()) / _DEFAULT_DIR_NAME


# This function maps the user-supplied path onto a log directory.
def resolve_directory(path: Optional[PathArg]) -> Optional[Path]:
    """
    Returns:
        None if path is NO_FILE, the default directory if path is None/blank,
        otherwise Path(path).
    """
    if path is None:
        return default_directory()
    if isinstance(path, str):
        if path == NO_FILE:
            return None
        if not path.strip():
            return default_directory()
    return Path(path)


# This function builds the console sink.
def console_sink(stream: Optional[TextIO] = None) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setFormatter(LineFormatter())
    return handler


# This function builds the file sink, creating the directory if needed.
def file_sink(path: Path) -> logging.Handler:
    """
    Raises:
        OSError: if the directory cannot be created or the file cannot be opened
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    # Open right away so setup failures surface at construction.
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=False)
    handler.setFormatter(LineFormatter())
    return handler


__all__ = ["NO_FILE", "default_directory", "resolve_directory", "PathArg", "console_sink", "file_sink"]

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

"""
Formatter

- One record -> one line: "[dd-MM-yyyy HH:mm:ss][LEVEL - label:line] message"
- No trailing newline; the sink's terminator adds it
- Run file names: "Run_<dd-MM-yyyy_HHmmss>.log"
"""

_TIMESTAMP_FMT = "%d-%m-%Y %H:%M:%S"
_RUN_FILE_FMT = "Run_%d-%m-%Y_%H%M%S.log"

# Attribute names set on each LogRecord through `extra=`.
LEVEL_ATTR = "simplelog_level"
LABEL_ATTR = "simplelog_label"


# This function renders a timestamp the way every log line shows it.
def format_timestamp(when: datetime) -> str:
    return when.strftime(_TIMESTAMP_FMT)


# This function builds the log file name for a run started at `when`.
def run_file_name(when: datetime) -> str:
    return when.strftime(_RUN_FILE_FMT)


# This function formats the parts of a record into a single line.
def format_line(when: datetime, level: str, label: str, line: Optional[int], message: str) -> str:
    """Return `[ts][LEVEL - label:line] message` without a trailing newline."""
    return f"[{format_timestamp(when)}][{level} - {label}:{line}] {message}"


class LineFormatter(logging.Formatter):
    """logging.Formatter that renders records with format_line.

    The level tag and source label are taken from the record's extra
    attributes; records logged without them fall back to the stdlib
    levelname and logger name.
    """

    def format(self, record: logging.LogRecord) -> str:
        level = getattr(record, LEVEL_ATTR, record.levelname)
        label = getattr(record, LABEL_ATTR, record.name)
        when = datetime.fromtimestamp(record.created)
        return format_line(when, level, label, record.lineno, record.getMessage())


__all__ = ["format_timestamp", "run_file_name", "format_line", "LineFormatter", "LEVEL_ATTR", "LABEL_ATTR"]

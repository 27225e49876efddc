from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering

"""
Levels

INFO < WARNING < ERROR. ERROR sits above logging.CRITICAL so it outranks
the standard "severe" level. The tag printed on each line is the member name.
"""


@total_ordering
class Level(Enum):
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.CRITICAL + 10

    @property
    def tag(self) -> str:
        return self.name

    # Ordered on the numeric value; total_ordering fills in the rest.
    def __lt__(self, other: "Level") -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value < other.value


__all__ = ["Level"]

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from mdiff.diff_result import DiffResult

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Change:
    a: range
    b: range

    @property
    def kind(self) -> str:
        if len(self.a) == 0:
            return "a"
        if len(self.b) == 0:
            return "d"
        return "c"

    @staticmethod
    def filter(result: DiffResult, a_size: int, b_size: int) -> List[Change]:
        """
        Walk the gaps between consecutive matched pairs of a trace, including
        the leading and trailing ones, and turn each into a Change.
        """
        changes: List[Change] = []
        x, y = 0, 0

        for trace_x, trace_y in result:
            if (trace_x, trace_y) == (x, y):
                x += 1
                y += 1
                continue

            log.debug(f"gap at {(x, y)} before match {(trace_x, trace_y)}")
            changes.append(Change(range(x, trace_x), range(y, trace_y)))

            x, y = trace_x + 1, trace_y + 1

        if (x, y) != (a_size, b_size):
            log.debug(f"trailing gap at {(x, y)}")
            changes.append(Change(range(x, a_size), range(y, b_size)))

        return changes

    def header(self) -> str:
        return f"{self._format(self.a)}{self.kind}{self._format(self.b)}"

    def _format(self, lines: range) -> str:
        if lines.start + 1 >= lines.stop:
            return str(lines.stop)
        return f"{lines.start + 1},{lines.stop}"

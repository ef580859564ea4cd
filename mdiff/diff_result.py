from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TypeAlias

Trace: TypeAlias = tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class DiffResult:
    """Matched (x, y) index pairs of an optimal alignment, in increasing order."""

    trace: Trace

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.trace)

    def __len__(self) -> int:
        return len(self.trace)

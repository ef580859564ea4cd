from __future__ import annotations

import logging
from typing import Generic, Sequence, TypeVar

from mdiff.diff_result import DiffResult, Trace

log = logging.getLogger(__name__)

T = TypeVar("T")


class FurthestReach:
    """
    Furthest x reached on each diagonal k, per edit-distance layer d.

    Layer d holds 2d+1 slots and starts at offset d*d of one flat buffer,
    so slot (d, k) lives at d*d + k + d.
    """

    class InvalidDiagonal(IndexError):
        pass

    def __init__(self) -> None:
        self._slots: list[int] = []
        self.layers: int = 0

    def add_layer(self) -> None:
        self._slots.extend([0] * (2 * self.layers + 1))
        self.layers += 1

    def get(self, d: int, k: int) -> int:
        return self._slots[self._index(d, k)]

    def set(self, d: int, k: int, x: int) -> None:
        self._slots[self._index(d, k)] = x

    def _index(self, d: int, k: int) -> int:
        if not 0 <= d < self.layers:
            raise FurthestReach.InvalidDiagonal(f"layer {d} is not allocated")
        if not -d <= k <= d or (k - d) % 2 != 0:
            raise FurthestReach.InvalidDiagonal(f"diagonal {k} is not in layer {d}")
        return d * d + k + d


class Myers(Generic[T]):
    def __init__(self, a: Sequence[T], b: Sequence[T]):
        self.a = a
        self.b = b

    @classmethod
    def diff(cls, a: Sequence[T], b: Sequence[T]) -> DiffResult:
        return cls(a, b)._diff()

    def _diff(self) -> DiffResult:
        table, d = self._shortest_edit()
        trace = self._backtrack(table, d)

        log.debug(f"edit distance {d}, {len(trace)} matched pairs")
        return DiffResult(trace)

    def _bounds(self, d: int) -> tuple[int, int]:
        n, m = len(self.a), len(self.b)
        return -min(m, d), min(n, d)

    def _candidates(self, table: FurthestReach, d: int, k: int) -> tuple[int, int]:
        left_bound, right_bound = self._bounds(d)

        left_x = 0 if k == left_bound else table.get(d - 1, k - 1) + 1
        right_x = 0 if k == right_bound else table.get(d - 1, k + 1)

        return left_x, right_x

    def _shortest_edit(self) -> tuple[FurthestReach, int]:
        n, m = len(self.a), len(self.b)
        table = FurthestReach()

        for d in range(n + m + 1):
            table.add_layer()
            left_bound, right_bound = self._bounds(d)

            for k in range(left_bound, right_bound + 1):
                if (k - d) % 2 != 0:
                    continue

                x = max(self._candidates(table, d, k))
                y = x - k

                while x < n and y < m and self.a[x] == self.b[y]:
                    x += 1
                    y += 1

                table.set(d, k, x)

                if x >= n and y >= m:
                    return table, d

        raise AssertionError("edit graph has no path to its far corner")

    def _backtrack(self, table: FurthestReach, min_d: int) -> Trace:
        x, y = len(self.a), len(self.b)
        trace: list[tuple[int, int]] = []

        for d in range(min_d, -1, -1):
            left_bound, _ = self._bounds(d)
            k = x - y

            left_x, right_x = self._candidates(table, d, k)
            prev_x = max(left_x, right_x)

            while x > prev_x:
                x -= 1
                y -= 1
                trace.append((x, y))

            if d == 0:
                break

            if k != left_bound and prev_x == left_x:
                x -= 1
            else:
                y -= 1

        trace.reverse()
        return tuple(trace)

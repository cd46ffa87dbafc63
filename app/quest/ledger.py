"""Score ledger — running total of points earned this session.

The total is an accumulator, not a sum over goal state: it is only ever
changed by adding recorder deltas, and it starts from zero after every load
because the goals file does not store it.
"""

from __future__ import annotations


class ScoreLedger:
    def __init__(self) -> None:
        self._total = 0

    @property
    def total(self) -> int:
        return self._total

    def add(self, delta: int) -> int:
        self._total += delta
        return self._total

    def reset(self) -> None:
        self._total = 0

"""
Scheduling strategies for the digit counter.

Both strategies implement the same rule: advance the lowest eligible
position; when a position parks (reports not live) every lower position is
re-armed; stop when nothing is eligible. They produce identical position
sequences and differ only in cost per step.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SchedulingStrategy(ABC):
    """Picks the next position to advance."""

    name: str = ""

    def __init__(self, size: int) -> None:
        self.size = size

    @abstractmethod
    def next_position(self) -> int | None:
        """Position to advance next, or None once the counter is exhausted."""

    @abstractmethod
    def record(self, position: int, live: bool) -> None:
        """Update scheduling state after ``position`` was executed."""


class ScanningStrategy(SchedulingStrategy):
    """
    One eligibility flag per position, scanned from the bottom every step.

    Worst case O(size) per step.
    """

    name = "scanning"

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self.eligible = [True] * size

    def next_position(self) -> int | None:
        for i, flag in enumerate(self.eligible):
            if flag:
                return i
        return None

    def record(self, position: int, live: bool) -> None:
        self.eligible[position] = live
        for j in range(position):
            self.eligible[j] = True


class ThreadedStrategy(SchedulingStrategy):
    """
    Loopless scheduling through a chain of successor pointers.

    ``pointers[0]`` always names the next position to run. A zero entry
    elsewhere means "no redirect"; an entry equal to ``size`` is the
    exhaustion sentinel. Every step does a constant amount of work.
    """

    name = "threaded"

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self.pointers = [0] * size

    def next_position(self) -> int | None:
        if not self.pointers:
            return None
        i = self.pointers[0]
        if i >= self.size:
            return None
        return i

    def record(self, position: int, live: bool) -> None:
        p = self.pointers
        i = position
        if live:
            p[i] = 0
        elif i == self.size - 1:
            # last position parked: the chain now ends in the sentinel
            p[i] = self.size
        elif p[i + 1] == 0:
            p[i] = i + 1
        else:
            p[i] = p[i + 1]
            p[i + 1] = 0
        if i > 0:
            p[0] = 0


_STRATEGIES: dict[str, type[SchedulingStrategy]] = {
    ScanningStrategy.name: ScanningStrategy,
    ThreadedStrategy.name: ThreadedStrategy,
}


def strategy_for(name: str, size: int) -> SchedulingStrategy:
    """
    Build a strategy by name.

    Args:
        name: "scanning" or "threaded"
        size: Number of positions to schedule

    Raises:
        ValueError: If the name is unknown
    """
    try:
        cls = _STRATEGIES[name]
    except KeyError:
        raise ValueError(f"unknown scheduling strategy {name!r}") from None
    return cls(size)

"""
Digit counter driving a sub-process through all of its joint states.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from topogen.glp.strategies import SchedulingStrategy, strategy_for
from topogen.glp.process import SubProcess


class DigitCounter:
    """
    Advances a sub-process one position at a time.

    Example:
        counter = DigitCounter(GrayCode(3), "threaded")
        while (step := counter.step()) is not None:
            position, delta = step
    """

    def __init__(self, proc: SubProcess, strategy: str | SchedulingStrategy = "threaded") -> None:
        self.proc = proc
        if isinstance(strategy, str):
            strategy = strategy_for(strategy, proc.size())
        self.strategy = strategy
        self.steps = 0

    @property
    def exhausted(self) -> bool:
        return self.strategy.next_position() is None

    def step(self) -> tuple[int, Any] | None:
        """
        Advance once.

        Returns:
            (position, delta) for the step taken, or None if exhausted
        """
        position = self.strategy.next_position()
        if position is None:
            return None
        live, delta = self.proc.execute(position)
        self.strategy.record(position, live)
        self.steps += 1
        return position, delta

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return self

    def __next__(self) -> tuple[int, Any]:
        result = self.step()
        if result is None:
            raise StopIteration
        return result

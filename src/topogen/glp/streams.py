"""
Stream drivers over a sub-process.

``deltas`` yields the edits only. ``states`` yields a shared handle on the
whole state, once before the first edit and once after each edit.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from topogen.glp.counter import DigitCounter
from topogen.glp.state import SP, SharedState
from topogen.glp.strategies import SchedulingStrategy
from topogen.glp.process import SubProcess


def deltas(proc: SubProcess, strategy: str | SchedulingStrategy = "threaded") -> Iterator[Any]:
    """Yield the delta of every step until the counter is exhausted."""
    for _, delta in DigitCounter(proc, strategy):
        yield delta


def states(proc: SP, strategy: str | SchedulingStrategy = "scanning") -> Iterator[SharedState[SP]]:
    """
    Yield a shared handle on the state before each step and after the last.

    Each yielded handle is released by the driver when the next state is
    requested. To keep one for longer, ``clone()`` it, and release the clone
    before asking for another state: advancing while a clone is alive raises
    OwnershipViolationError.
    """
    owner = SharedState(proc)
    counter = DigitCounter(owner, strategy)
    snapshot = owner.clone()
    try:
        yield snapshot
        while True:
            snapshot.release()
            if counter.step() is None:
                return
            snapshot = owner.clone()
            yield snapshot
    finally:
        snapshot.release()

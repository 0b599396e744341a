"""Loopless generation engine: digit counter, schedulers and shared state."""

from topogen.glp.counter import DigitCounter
from topogen.glp.gray import GrayCode
from topogen.glp.state import SharedState
from topogen.glp.strategies import ScanningStrategy, SchedulingStrategy, ThreadedStrategy, strategy_for
from topogen.glp.streams import deltas, states
from topogen.glp.process import SubProcess

__all__ = [
    "DigitCounter",
    "GrayCode",
    "ScanningStrategy",
    "SchedulingStrategy",
    "SharedState",
    "SubProcess",
    "ThreadedStrategy",
    "deltas",
    "states",
    "strategy_for",
]

"""
Combinatorial sub-process contract.

A sub-process owns some mutable state and a fixed number of positions. The
digit counter decides which position advances next; the sub-process decides
what advancing means.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SubProcess(ABC):
    """
    Base interface for everything the digit counter can drive.

    ``execute(position)`` applies one atomic edit and returns
    ``(live, delta)``:

    - ``live`` True keeps the position eligible, so the counter may call it
      again straight away. False means the position has made its move for
      this pass and stays parked until a higher position advances and
      re-arms everything below it.
    - ``delta`` describes the edit well enough for a consumer to replay it
      without re-reading the whole state.

    Example:
        class Toggle(SubProcess):
            def __init__(self, n):
                self.bits = [False] * n

            def size(self):
                return len(self.bits)

            def execute(self, position):
                self.bits[position] = not self.bits[position]
                return False, position
    """

    @abstractmethod
    def size(self) -> int:
        """Number of positions. Fixed for the lifetime of the sub-process."""

    @abstractmethod
    def execute(self, position: int) -> tuple[bool, Any]:
        """
        Advance one position.

        Args:
            position: Index in ``[0, size())``

        Returns:
            Tuple of (live, delta)

        Raises:
            IndexError: If position is out of range
        """


def check_position(position: int, size: int) -> None:
    """Raise IndexError unless ``0 <= position < size``."""
    if not 0 <= position < size:
        raise IndexError(f"position {position} out of range for {size} positions")

"""
Value types emitted by the NRPR generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NoOp:
    """Nothing moved. Only the top position of a level-less generator emits it."""

    def __str__(self) -> str:
        return "noop"


@dataclass(frozen=True)
class Swap:
    """Slots ``a`` and ``b`` of the order were exchanged."""

    a: int
    b: int

    def __str__(self) -> str:
        return f"swap {self.a} {self.b}"


@dataclass(frozen=True)
class FlipSign:
    """The orientation of the innermost level was toggled."""

    def __str__(self) -> str:
        return "flip"


Move = Union[NoOp, Swap, FlipSign]

NOOP = NoOp()
FLIP_SIGN = FlipSign()


@dataclass(frozen=True)
class OrderSnapshot:
    """
    Immutable copy of the generator state a consumer may look at.

    Attributes:
        order: The current topological order
        sign: Orientation of level 0; the raw stream visits every order once
            with each sign
    """

    order: tuple[int, ...]
    sign: bool

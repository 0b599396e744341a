"""
Move selection for one level of the generator.

Positions handed to ``next_move`` are relative to the level's anchor slot
``base``: slot ``x`` of the level is ``order[base + x]``. ``lo < hi`` are the
level's two window slots.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from topogen.nrpr.types import FLIP_SIGN, Move, Swap


def next_move(
    has_edge: Callable[[int, int], bool],
    parity: bool,
    sign: bool,
    order: Sequence[int],
    base: int,
    lo: int,
    hi: int,
) -> Move | None:
    """
    Pick the move that takes the level to its next state.

    Returns:
        A Swap of two relative slots, FlipSign, or None if the level is
        exhausted (which never happens for a correctly peeled level)
    """
    span = len(order) - base

    def blocked(x: int) -> bool:
        # x and x + 1 are forced into their current relative order
        return bool(has_edge(order[base + x], order[base + x + 1]))

    if hi == 1:
        if sign == (not parity):
            return None
        if hi + 1 >= span or blocked(hi):
            return FLIP_SIGN
        return Swap(hi, hi + 1)

    if lo == 0 and sign == (not parity):
        return Swap(hi, hi - 1)

    turn = (hi % 2 == 1) != parity
    u: int | None = None
    if turn == sign:
        if lo + 1 != hi and not blocked(lo):
            u = lo + 1
    elif lo > 1 or (lo > 0 and sign == parity):
        u = lo - 1

    if u is not None:
        return Swap(lo, u)
    if turn == sign and lo > 0:
        return FLIP_SIGN
    if hi + 1 < span and not blocked(hi):
        return Swap(hi, hi + 1)
    if turn == parity and lo > 0:
        return Swap(lo, lo - 1)
    return FLIP_SIGN

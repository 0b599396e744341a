"""
NRPR: the topological-order generator as a digit-counter sub-process.

Every level of a peeling owns a two-slot window. Advancing a level applies
one adjacent swap in the order, or flips the level's sign; a flip on level
``i > 0`` carries into level ``i - 1`` by swapping that level's window.
Position ``k`` (one past the last level) is the top: it carries into level
``k - 1`` once and then parks for good, which ends the enumeration.

Driven to exhaustion, the generator visits every topological order exactly
twice, once with ``sign[0]`` True and once with it False.
"""

from __future__ import annotations

import numpy as np

from topogen.dag.cycles import validate_dag
from topogen.dag.graph import Graph
from topogen.errors import InternalConsistencyError
from topogen.glp.process import SubProcess, check_position
from topogen.nrpr.moves import next_move
from topogen.nrpr.preprocess import Peeling, peel
from topogen.nrpr.types import NOOP, FlipSign, Move, OrderSnapshot, Swap


class NRPR(SubProcess):
    """
    Topological-order generator state.

    Attributes:
        adjacency: Boolean adjacency matrix of the graph
    """

    def __init__(self, peeling: Peeling) -> None:
        self.adjacency: np.ndarray = peeling.adjacency
        self._order = list(peeling.order)
        self._levels = list(peeling.levels)
        self._windows = [[a, b] for a, b in self._levels]
        k = len(self._levels)
        self._sign = [True] * (k + 1)
        self._parity = [True] * k

    @classmethod
    def from_graph(cls, graph: Graph, check_cycles: bool = True) -> NRPR:
        """
        Preprocess a graph.

        Args:
            graph: The DAG to enumerate
            check_cycles: Raise CircularDependencyError for cyclic input

        Raises:
            CircularDependencyError: If check_cycles is set and the graph
                has a cycle
        """
        if check_cycles:
            validate_dag(graph)
        return cls(peel(graph))

    # ========== Read-only views ==========

    @property
    def level_count(self) -> int:
        return len(self._levels)

    @property
    def order(self) -> tuple[int, ...]:
        return tuple(self._order)

    @property
    def levels(self) -> tuple[tuple[int, int], ...]:
        return tuple(self._levels)

    @property
    def windows(self) -> tuple[tuple[int, int], ...]:
        return tuple((a, b) for a, b in self._windows)

    @property
    def sign(self) -> tuple[bool, ...]:
        return tuple(self._sign)

    @property
    def parity(self) -> tuple[bool, ...]:
        return tuple(self._parity)

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(order=tuple(self._order), sign=self._sign[0])

    # ========== SubProcess ==========

    def size(self) -> int:
        return len(self._levels) + 1

    def has_edge(self, v: int, w: int) -> bool:
        return bool(self.adjacency[v, w])

    def _carry(self, level: int) -> Swap:
        window = self._windows[level]
        a, b = window
        self._order[a], self._order[b] = self._order[b], self._order[a]
        window[0], window[1] = b, a
        return Swap(b, a)

    def execute(self, position: int) -> tuple[bool, Move]:
        k = len(self._levels)
        check_position(position, k + 1)

        if position == k:
            delta: Move = self._carry(k - 1) if k > 0 else NOOP
            self._sign[k] = False
            return False, delta

        base = self._levels[position][0]
        window = self._windows[position]
        lo, hi = sorted(window)
        move = next_move(
            self.has_edge,
            self._parity[position],
            self._sign[position],
            self._order,
            base,
            lo - base,
            hi - base,
        )

        if move is None:
            raise InternalConsistencyError(
                f"level {position} of {k} reported exhaustion with window ({lo}, {hi})",
                level=position,
            )

        if isinstance(move, Swap):
            a = base + move.a
            b = base + move.b
            self._order[a], self._order[b] = self._order[b], self._order[a]
            if window[0] == a:
                window[0] = b
            elif window[1] == a:
                window[1] = b
            delta = Swap(a, b)
        elif isinstance(move, FlipSign):
            self._sign[position] = not self._sign[position]
            delta = self._carry(position - 1) if position > 0 else move
        else:
            raise InternalConsistencyError(f"unexpected move {move!r} on level {position}", level=position)

        lo, hi = sorted(window)
        if lo == base and hi == base + 1 and self._sign[position] != self._parity[position]:
            self._parity[position] = not self._parity[position]
            return False, delta
        return True, delta

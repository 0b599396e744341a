"""
Read-only DAG capability and the in-memory successor-list backend.

Nodes are the integers ``0..size``; an edge ``(v, w)`` means v must precede
w. Any object with ``size``, ``edges`` and ``successors`` can be enumerated,
whatever its storage.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol, runtime_checkable

from topogen.errors import NodeIndexError


@runtime_checkable
class Graph(Protocol):
    """Read-only view of a DAG."""

    def size(self) -> int: ...

    def edges(self) -> Iterator[tuple[int, int]]: ...

    def successors(self, v: int) -> Sequence[int]: ...


class SimpleGraph:
    """
    Successor-list graph.

    Example:
        g = SimpleGraph(3)
        g.add_edge(0, 1)
        g.add_edge(0, 2)
        list(g.edges())    # [(0, 1), (0, 2)]
        g.successors(0)    # (1, 2)
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"graph size must be non-negative, got {size}")
        self._succ: list[list[int]] = [[] for _ in range(size)]
        self._edge_count = 0

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[tuple[int, int]]) -> SimpleGraph:
        graph = cls(size)
        for v, w in edges:
            graph.add_edge(v, w)
        return graph

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._succ):
            raise NodeIndexError(v, len(self._succ))

    def add_edge(self, v: int, w: int) -> None:
        """Add the edge v -> w. Duplicate edges are kept."""
        self._check(v)
        self._check(w)
        self._succ[v].append(w)
        self._edge_count += 1

    def size(self) -> int:
        return len(self._succ)

    def edge_count(self) -> int:
        return self._edge_count

    def edges(self) -> Iterator[tuple[int, int]]:
        for v, ws in enumerate(self._succ):
            for w in ws:
                yield v, w

    def successors(self, v: int) -> Sequence[int]:
        self._check(v)
        return tuple(self._succ[v])

    def __repr__(self) -> str:
        return f"SimpleGraph(size={self.size()}, edges={list(self.edges())})"

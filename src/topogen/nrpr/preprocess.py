"""
Peeling a DAG into paired levels.

Sources are taken off a LIFO pool two at a time. Each pair becomes one level
of the generator, anchored at the two slots it was written to. A node taken
alone gets no level and keeps its slot in the base order.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from topogen.dag.graph import Graph
from topogen.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Peeling:
    """
    Result of peeling a graph.

    Attributes:
        order: A topological order (shorter than the graph if it has a cycle)
        levels: Slot pairs ``(p, p + 1)`` in order, one per level
        adjacency: ``adjacency[v, w]`` is True iff the edge v -> w exists
    """

    order: list[int]
    levels: list[tuple[int, int]]
    adjacency: np.ndarray

    @property
    def level_count(self) -> int:
        return len(self.levels)


def adjacency_matrix(graph: Graph) -> tuple[np.ndarray, list[int]]:
    """Return the boolean adjacency matrix and the in-degree of every node."""
    n = graph.size()
    adjacency = np.zeros((n, n), dtype=bool)
    in_deg = [0] * n
    for v, w in graph.edges():
        adjacency[v, w] = True
        in_deg[w] += 1
    return adjacency, in_deg


def peel(graph: Graph) -> Peeling:
    """
    Peel a graph into a base order and its levels.

    The input must be acyclic. A cycle empties the pool early and the
    returned order silently misses every node on or behind it.
    """
    adjacency, in_deg = adjacency_matrix(graph)

    pool = [v for v, d in enumerate(in_deg) if d == 0]
    order: list[int] = []
    levels: list[tuple[int, int]] = []

    while pool:
        a = pool.pop()
        order.append(a)
        peeled = [a]
        if pool:
            b = pool.pop()
            levels.append((len(order) - 1, len(order)))
            order.append(b)
            peeled.append(b)

        for v in peeled:
            for w in graph.successors(v):
                in_deg[w] -= 1
                if in_deg[w] == 0:
                    pool.append(w)

    logger.debug("graph_peeled", size=graph.size(), placed=len(order), levels=len(levels))
    return Peeling(order=order, levels=levels, adjacency=adjacency)

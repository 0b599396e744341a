"""
Cycle detection for the optional fail-fast check.

Kahn's algorithm: repeatedly remove nodes with no remaining predecessors.
Whatever is left over lies on a cycle or behind one.
"""

from __future__ import annotations

from topogen.dag.graph import Graph
from topogen.errors import CircularDependencyError


def find_cycle_nodes(graph: Graph) -> list[int]:
    """
    Return the nodes that cannot be placed in any topological order.

    Args:
        graph: Graph to inspect

    Returns:
        Sorted list of unresolved nodes (empty for a DAG)
    """
    n = graph.size()
    in_deg = [0] * n
    for _, w in graph.edges():
        in_deg[w] += 1

    ready = [v for v in range(n) if in_deg[v] == 0]
    placed = 0
    while ready:
        v = ready.pop()
        placed += 1
        for w in graph.successors(v):
            in_deg[w] -= 1
            if in_deg[w] == 0:
                ready.append(w)

    if placed == n:
        return []
    return [v for v in range(n) if in_deg[v] > 0]


def has_cycle(graph: Graph) -> bool:
    return bool(find_cycle_nodes(graph))


def validate_dag(graph: Graph) -> bool:
    """
    Validate that the graph is acyclic.

    Returns:
        True if the graph is a DAG

    Raises:
        CircularDependencyError: If the graph has a cycle
    """
    nodes = find_cycle_nodes(graph)
    if nodes:
        raise CircularDependencyError(
            f"graph of size {graph.size()} has a cycle through or before nodes {nodes}",
            nodes=nodes,
        )
    return True

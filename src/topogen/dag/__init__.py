"""DAG capability consumed by the enumerators."""

from topogen.dag.cycles import find_cycle_nodes, has_cycle, validate_dag
from topogen.dag.graph import Graph, SimpleGraph

__all__ = [
    "Graph",
    "SimpleGraph",
    "find_cycle_nodes",
    "has_cycle",
    "validate_dag",
]

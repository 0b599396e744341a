"""
topogen - enumerate every topological order of a DAG.

Orders are generated one at a time, without repetition, in constant time
per order, by driving the NRPR generator with a loopless digit counter:
- Graph capability with an in-memory backend
- Generic digit counter with scanning and threaded (loopless) schedulers
- Copy-on-share state handles
- Delta and snapshot streams
"""

__version__ = "0.3.0"

from topogen.config import EnumerationConfig, get_config, reset_config
from topogen.dag import Graph, SimpleGraph, find_cycle_nodes, has_cycle, validate_dag
from topogen.errors import (
    CircularDependencyError,
    ConfigurationError,
    GraphError,
    InternalConsistencyError,
    NodeIndexError,
    OwnershipViolationError,
    TopogenBaseException,
    TopogenError,
)
from topogen.nrpr import NRPR, FlipSign, Move, NoOp, OrderSnapshot, Swap
from topogen.orders import (
    apply_delta,
    count_toposorts,
    delta_stream,
    initial_snapshot,
    replay,
    state_stream,
    toposorts,
)

__all__ = [
    # Graph
    "Graph",
    "SimpleGraph",
    "find_cycle_nodes",
    "has_cycle",
    "validate_dag",
    # Generator
    "NRPR",
    "FlipSign",
    "Move",
    "NoOp",
    "OrderSnapshot",
    "Swap",
    # Entry points
    "apply_delta",
    "count_toposorts",
    "delta_stream",
    "initial_snapshot",
    "replay",
    "state_stream",
    "toposorts",
    # Configuration
    "EnumerationConfig",
    "get_config",
    "reset_config",
    # Errors
    "CircularDependencyError",
    "ConfigurationError",
    "GraphError",
    "InternalConsistencyError",
    "NodeIndexError",
    "OwnershipViolationError",
    "TopogenBaseException",
    "TopogenError",
]

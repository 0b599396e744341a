"""
Entry points for enumerating the topological orders of a DAG.

- ``delta_stream``: the elementary edits only, driven by the threaded
  (loopless) scheduler. Use it for counting and for consumers that keep
  their own copy of the order.
- ``state_stream``: an immutable snapshot of every raw state, driven by the
  scanning scheduler. Use it for inspection and testing.
- ``toposorts``: every distinct order exactly once.

Usage:
    from topogen import SimpleGraph, toposorts

    g = SimpleGraph.from_edges(3, [(0, 1)])
    for order in toposorts(g):
        print(order)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from topogen.config import EnumerationConfig, get_config
from topogen.dag.graph import Graph
from topogen.glp.streams import deltas, states
from topogen.logging import get_logger
from topogen.nrpr.generator import NRPR
from topogen.nrpr.types import FlipSign, Move, NoOp, OrderSnapshot, Swap

logger = get_logger(__name__)


def _generator(graph: Graph, config: EnumerationConfig | None) -> tuple[NRPR, EnumerationConfig]:
    config = config or get_config()
    return NRPR.from_graph(graph, check_cycles=config.check_cycles), config


def initial_snapshot(graph: Graph, config: EnumerationConfig | None = None) -> OrderSnapshot:
    """The state both streams start from. Preprocessing is deterministic."""
    proc, _ = _generator(graph, config)
    return proc.snapshot()


def delta_stream(graph: Graph, config: EnumerationConfig | None = None) -> Iterator[Move]:
    """
    Yield every raw transition of the enumeration.

    The graph is preprocessed before this returns, so a cyclic graph is
    rejected here rather than on the first ``next()``. The stream holds
    ``2L - 1`` deltas for a graph with ``L`` topological orders.

    Raises:
        CircularDependencyError: If cycle checking is on and the graph is cyclic
    """
    proc, config = _generator(graph, config)

    def stream() -> Iterator[Move]:
        count = 0
        for delta in deltas(proc, config.delta_strategy):
            count += 1
            yield delta
        logger.debug("delta_stream_exhausted", deltas=count, levels=proc.level_count)

    return stream()


def state_stream(graph: Graph, config: EnumerationConfig | None = None) -> Iterator[OrderSnapshot]:
    """
    Yield a snapshot of every raw state, starting with the initial order.

    There are ``2L`` states for ``L`` topological orders: each order shows
    up once with ``sign`` True and once with ``sign`` False.

    Raises:
        CircularDependencyError: If cycle checking is on and the graph is cyclic
    """
    proc, config = _generator(graph, config)

    def stream() -> Iterator[OrderSnapshot]:
        count = 0
        for handle in states(proc, config.state_strategy):
            count += 1
            yield handle.value.snapshot()
        logger.debug("state_stream_exhausted", states=count, levels=proc.level_count)

    return stream()


def toposorts(graph: Graph, config: EnumerationConfig | None = None) -> Iterator[tuple[int, ...]]:
    """Yield every topological order of the graph exactly once."""
    return (state.order for state in state_stream(graph, config) if state.sign)


def count_toposorts(graph: Graph, config: EnumerationConfig | None = None) -> int:
    """Count the topological orders of the graph without materializing them."""
    total = sum(1 for _ in delta_stream(graph, config))
    return (total + 1) // 2


def apply_delta(order: list[int], sign: bool, delta: Move) -> bool:
    """
    Apply one delta to ``order`` in place.

    Returns:
        The new sign
    """
    if isinstance(delta, Swap):
        order[delta.a], order[delta.b] = order[delta.b], order[delta.a]
        return sign
    if isinstance(delta, FlipSign):
        return not sign
    if isinstance(delta, NoOp):
        # only a level-less generator emits it, from the top position, which
        # clears the one sign it has
        return False
    raise TypeError(f"not a delta: {delta!r}")


def replay(initial: OrderSnapshot, moves: Iterable[Move]) -> Iterator[OrderSnapshot]:
    """
    Rebuild the state stream from its initial state and the delta stream.

    Example:
        g = SimpleGraph(3)
        rebuilt = list(replay(initial_snapshot(g), delta_stream(g)))
        assert rebuilt == list(state_stream(g))
    """
    order = list(initial.order)
    sign = initial.sign
    yield initial
    for delta in moves:
        sign = apply_delta(order, sign, delta)
        yield OrderSnapshot(order=tuple(order), sign=sign)

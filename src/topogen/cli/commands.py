"""Command implementations for the topogen CLI."""

from __future__ import annotations

from typing import TextIO

from topogen.config import EnumerationConfig
from topogen.dag.graph import Graph
from topogen.orders import count_toposorts, delta_stream, toposorts


def format_order(order: tuple[int, ...]) -> str:
    return " ".join(str(v) for v in order)


def orders(graph: Graph, config: EnumerationConfig, out: TextIO, limit: int | None = None) -> int:
    """Print every topological order, one per line. Returns the number printed."""
    printed = 0
    for order in toposorts(graph, config):
        if limit is not None and printed >= limit:
            break
        out.write(format_order(order) + "\n")
        printed += 1
    return printed


def count(graph: Graph, config: EnumerationConfig, out: TextIO) -> int:
    """Print the number of topological orders."""
    total = count_toposorts(graph, config)
    out.write(f"{total}\n")
    return total


def deltas(graph: Graph, config: EnumerationConfig, out: TextIO) -> int:
    """Print the raw delta stream, one delta per line."""
    printed = 0
    for delta in delta_stream(graph, config):
        out.write(f"{delta}\n")
        printed += 1
    return printed

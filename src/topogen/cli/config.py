"""Graph loading for the topogen CLI."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from topogen.dag.graph import SimpleGraph
from topogen.errors import ConfigurationError


def _is_int(value: Any) -> bool:
    # YAML reads `true` as a bool, which is also an int
    return isinstance(value, int) and not isinstance(value, bool)


def parse_edge(text: str) -> tuple[int, int]:
    """Parse ``"V,W"`` (or ``"V:W"``) into an edge."""
    parts = text.replace(":", ",").split(",")
    if len(parts) != 2:
        raise ConfigurationError(f"edge must look like V,W: {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ConfigurationError(f"edge endpoints must be integers: {text!r}") from None


def graph_from_document(doc: Any) -> SimpleGraph:
    """
    Build a graph from a parsed YAML/JSON document.

    Expected shape::

        size: 4
        edges:
          - [0, 1]
          - [1, 3]

    ``size`` defaults to one more than the largest node mentioned.
    """
    if not isinstance(doc, dict):
        raise ConfigurationError("graph file must contain a mapping with 'size' and 'edges'")

    raw_edges = doc.get("edges") or []
    edges: list[tuple[int, int]] = []
    for item in raw_edges:
        if isinstance(item, str):
            edges.append(parse_edge(item))
        elif isinstance(item, (list, tuple)) and len(item) == 2 and all(_is_int(x) for x in item):
            edges.append((item[0], item[1]))
        else:
            raise ConfigurationError(f"invalid edge entry: {item!r}")

    size = doc.get("size")
    if size is None:
        size = 1 + max((max(e) for e in edges), default=-1)
    if not _is_int(size) or size < 0:
        raise ConfigurationError(f"size must be a non-negative integer, got {size!r}")
    return SimpleGraph.from_edges(size, edges)


def load_graph(path: str | None = None, size: int | None = None, edges: Sequence[str] = ()) -> SimpleGraph:
    """Load a graph from a YAML/JSON file, or from --size/--edge arguments."""
    if path is not None:
        if edges or size is not None:
            raise ConfigurationError("give either a graph file or --size/--edge, not both")
        file = Path(path)
        if not file.exists():
            raise ConfigurationError(f"graph file not found: {path}")
        with open(file) as f:
            doc = yaml.safe_load(f) or {}
        return graph_from_document(doc)

    return graph_from_document({"size": size, "edges": list(edges)})

"""Seeded random DAGs for cross-checking against the oracle."""

from __future__ import annotations

import random

from topogen.dag.graph import SimpleGraph


def random_dag(seed: int, n: int | None = None, m: int | None = None) -> SimpleGraph:
    """
    Random DAG with edges only from lower to higher node numbers.

    Args:
        seed: RNG seed
        n: Node count (default: random in 2..7)
        m: Distinct edge count (default: random up to half of all pairs)
    """
    rng = random.Random(seed)
    if n is None:
        n = rng.randint(2, 7)
    pairs = [(v, w) for v in range(n) for w in range(v + 1, n)]
    if m is None:
        m = rng.randint(0, len(pairs) // 2)
    edges = rng.sample(pairs, min(m, len(pairs)))
    return SimpleGraph.from_edges(n, sorted(edges))

"""Shared pytest fixtures."""

from collections.abc import Generator

import pytest

from topogen.config import reset_config
from topogen.dag.graph import SimpleGraph


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate every test from TOPOGEN_* variables and the config singleton."""
    for name in (
        "TOPOGEN_CHECK_CYCLES",
        "TOPOGEN_DELTA_STRATEGY",
        "TOPOGEN_STATE_STRATEGY",
        "TOPOGEN_LOG_LEVEL",
        "TOPOGEN_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def diamond() -> SimpleGraph:
    """0 -> [1, 2] -> 3"""
    return SimpleGraph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def cyclic() -> SimpleGraph:
    """0 alone, 1 <-> 2"""
    return SimpleGraph.from_edges(3, [(1, 2), (2, 1)])

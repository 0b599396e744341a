"""NRPR topological-order generator."""

from topogen.nrpr.generator import NRPR
from topogen.nrpr.moves import next_move
from topogen.nrpr.preprocess import Peeling, adjacency_matrix, peel
from topogen.nrpr.types import FLIP_SIGN, NOOP, FlipSign, Move, NoOp, OrderSnapshot, Swap

__all__ = [
    "FLIP_SIGN",
    "NOOP",
    "NRPR",
    "FlipSign",
    "Move",
    "NoOp",
    "OrderSnapshot",
    "Peeling",
    "Swap",
    "adjacency_matrix",
    "next_move",
    "peel",
]

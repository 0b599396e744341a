"""
Structured error codes for topogen.

Provides semantic error classification and exception chain traversal.

Usage:
    from topogen.error_codes import ErrorCode, classify_error, error_chain

    try:
        count_toposorts(graph)
    except Exception as e:
        if classify_error(e) == ErrorCode.GRAPH_CYCLIC:
            ...
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Semantic error codes for categorizing exceptions.

    Each code maps to a category of failure a caller can handle
    programmatically without matching on exception classes.
    """

    # General errors
    UNKNOWN = "UNKNOWN"
    SYSTEM_ERROR = "SYSTEM_ERROR"

    # Input errors
    GRAPH_CYCLIC = "GRAPH_CYCLIC"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

    # Configuration errors
    CONFIGURATION_INVALID = "CONFIGURATION_INVALID"

    # Fatal enumeration errors
    OWNERSHIP_VIOLATION = "OWNERSHIP_VIOLATION"
    INTERNAL_CONSISTENCY = "INTERNAL_CONSISTENCY"


def error_chain(error: BaseException) -> list[BaseException]:
    """Traverse __cause__ chain, return list from root to leaf.

    Args:
        error: The exception to traverse

    Returns:
        List of exceptions from root cause to the provided exception.
        If no cause chain exists, returns a list with just the error.
    """
    chain: list[BaseException] = []
    current: BaseException | None = error

    while current is not None:
        chain.append(current)
        cause = getattr(current, "__cause__", None)
        if cause is current or cause in chain:
            break
        current = cause

    chain.reverse()
    return chain


def classify_error(error: BaseException) -> ErrorCode:
    """Return the semantic code of an error.

    topogen exceptions carry their own code. Plain ``IndexError`` is
    classified as an out-of-range access; everything else is UNKNOWN.
    """
    # Import here to avoid circular imports
    from topogen.errors import TopogenBaseException

    if isinstance(error, TopogenBaseException):
        return error.error_code
    if isinstance(error, IndexError):
        return ErrorCode.INDEX_OUT_OF_RANGE
    return ErrorCode.UNKNOWN

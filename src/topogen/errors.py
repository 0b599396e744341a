"""topogen error hierarchy.

Two-tier exception hierarchy:

1. TopogenBaseException - Base for all errors, not caught by default handlers
2. TopogenError - Standard errors a caller can catch and handle

Error Classification:
- GraphError: The input graph is unusable (cyclic, bad node index)
- ConfigurationError: Invalid configuration
- OwnershipViolationError: A shared state was mutated while shared (fatal)
- InternalConsistencyError: A generator invariant broke (fatal)

None of these errors are transient. Nothing in topogen retries.

Usage:
    from topogen.errors import CircularDependencyError

    try:
        orders = list(toposorts(graph))
    except CircularDependencyError as e:
        print(f"not a DAG: {e.nodes}")
"""

from __future__ import annotations

from collections.abc import Iterable

from topogen.error_codes import ErrorCode


class TopogenBaseException(Exception):  # noqa: N818 - intentional base exception name
    """Base exception for all topogen errors.

    Errors deriving only from this class abort an enumeration. They signal
    misuse of the single-writer rule or a broken invariant, and continuing
    would hand out an invalid order.

    Attributes:
        code: Numeric error code for programmatic handling
        error_code: Semantic ErrorCode for categorization
        cause: Optional original exception that caused this error
    """

    code: int = 0
    _error_code: ErrorCode | None = None
    default_error_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        cause: Exception | None = None,
        error_code: ErrorCode | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            code: Optional numeric error code for programmatic handling
            cause: Optional original exception that caused this error
            error_code: Optional semantic ErrorCode for categorization
        """
        super().__init__(message)
        if code is not None:
            self.code = code
        self.cause = cause
        if error_code is not None:
            self._error_code = error_code

    @property
    def error_code(self) -> ErrorCode:
        """Get the semantic error code for this exception.

        Returns the explicitly set error_code if available, otherwise
        the default for the exception class.
        """
        if self._error_code is not None:
            return self._error_code
        return self.default_error_code

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.code:
            parts.append(f"(code={self.code})")
        if self.cause:
            parts.append(f"caused by: {self.cause}")
        return " ".join(parts)


class TopogenError(TopogenBaseException):
    """Standard topogen error.

    All errors a caller is expected to handle inherit from this.
    """

    code: int = 100
    default_error_code = ErrorCode.SYSTEM_ERROR


class ConfigurationError(TopogenError):
    """Invalid configuration.

    Raised when an environment variable or config field holds a value
    outside its allowed set.
    """

    code: int = 104
    default_error_code = ErrorCode.CONFIGURATION_INVALID


class GraphError(TopogenError):
    """The input graph cannot be enumerated."""

    code: int = 200


class CircularDependencyError(GraphError):
    """
    Raised when a cycle is detected in the input graph.

    Only raised when cycle checking is enabled; otherwise a cyclic graph
    silently yields truncated orders.

    Attributes:
        nodes: Nodes that could not be ordered (on or behind a cycle)
    """

    code: int = 201
    default_error_code = ErrorCode.GRAPH_CYCLIC

    def __init__(self, message: str, nodes: Iterable[int] | None = None) -> None:
        super().__init__(message)
        self.nodes = sorted(nodes or [])


class NodeIndexError(GraphError, IndexError):
    """A node index outside ``0..size`` was used."""

    code: int = 202
    default_error_code = ErrorCode.INDEX_OUT_OF_RANGE

    def __init__(self, node: int, size: int) -> None:
        super().__init__(f"node {node} out of range for graph of size {size}")
        self.node = node
        self.size = size


class OwnershipViolationError(TopogenBaseException):
    """Shared state was mutated while another reference was alive.

    Release every snapshot obtained from a state stream before asking for
    the next one. Retrying cannot help: the stale snapshot is still held.
    """

    code: int = 300
    default_error_code = ErrorCode.OWNERSHIP_VIOLATION

    def __init__(self, message: str, *, holders: int = 0) -> None:
        super().__init__(message)
        self.holders = holders


class InternalConsistencyError(TopogenBaseException):
    """A level of the generator reached its exhaustion branch.

    This can only happen if the peel levels were built incorrectly.
    """

    code: int = 400
    default_error_code = ErrorCode.INTERNAL_CONSISTENCY

    def __init__(self, message: str, *, level: int | None = None) -> None:
        super().__init__(message)
        self.level = level

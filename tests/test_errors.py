"""Tests for the error hierarchy and error codes."""

from topogen.error_codes import ErrorCode, classify_error, error_chain
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


class TestHierarchy:
    """Which errors are recoverable and which abort."""

    def test_recoverable_errors(self) -> None:
        assert issubclass(CircularDependencyError, GraphError)
        assert issubclass(GraphError, TopogenError)
        assert issubclass(ConfigurationError, TopogenError)

    def test_fatal_errors_bypass_topogen_error(self) -> None:
        assert issubclass(OwnershipViolationError, TopogenBaseException)
        assert not issubclass(OwnershipViolationError, TopogenError)
        assert not issubclass(InternalConsistencyError, TopogenError)

    def test_node_index_error_is_index_error(self) -> None:
        error = NodeIndexError(7, 3)
        assert isinstance(error, IndexError)
        assert error.node == 7
        assert error.size == 3
        assert "7" in str(error)

    def test_str_includes_code_and_cause(self) -> None:
        cause = ValueError("bad")
        error = TopogenError("failed", code=42, cause=cause)
        assert str(error) == "failed (code=42) caused by: bad"

    def test_circular_dependency_nodes_sorted(self) -> None:
        error = CircularDependencyError("cycle", nodes=[3, 1, 2])
        assert error.nodes == [1, 2, 3]


class TestErrorCodes:
    """Tests for classify_error() and error_chain()."""

    def test_defaults(self) -> None:
        assert CircularDependencyError("x").error_code == ErrorCode.GRAPH_CYCLIC
        assert ConfigurationError("x").error_code == ErrorCode.CONFIGURATION_INVALID
        assert OwnershipViolationError("x").error_code == ErrorCode.OWNERSHIP_VIOLATION
        assert InternalConsistencyError("x").error_code == ErrorCode.INTERNAL_CONSISTENCY
        assert TopogenError("x").error_code == ErrorCode.SYSTEM_ERROR

    def test_explicit_code_wins(self) -> None:
        error = TopogenError("x", error_code=ErrorCode.GRAPH_CYCLIC)
        assert error.error_code == ErrorCode.GRAPH_CYCLIC

    def test_classify(self) -> None:
        assert classify_error(NodeIndexError(1, 1)) == ErrorCode.INDEX_OUT_OF_RANGE
        assert classify_error(IndexError("plain")) == ErrorCode.INDEX_OUT_OF_RANGE
        assert classify_error(RuntimeError("other")) == ErrorCode.UNKNOWN

    def test_chain_root_to_leaf(self) -> None:
        root = ValueError("root")
        leaf = ConfigurationError("leaf")
        leaf.__cause__ = root
        assert error_chain(leaf) == [root, leaf]

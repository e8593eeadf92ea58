"""Tests for domain errors and tool results."""

import pytest

from fsbox.domain import (
    AlreadyExistsError,
    ContainmentViolationError,
    DomainError,
    ErrorKind,
    InvalidArgumentError,
    IOFailureError,
    NotFoundError,
    ToolResult,
    UnknownOperationError,
)


class TestDomainError:
    """Test suite for DomainError base class."""

    def test_domain_error_with_message_only(self):
        error = DomainError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.kind == ErrorKind.IO_FAILURE

    def test_domain_error_inheritance(self):
        assert isinstance(DomainError("test"), Exception)


@pytest.mark.parametrize(
    "error_class, kind",
    [
        (ContainmentViolationError, ErrorKind.CONTAINMENT),
        (NotFoundError, ErrorKind.NOT_FOUND),
        (AlreadyExistsError, ErrorKind.ALREADY_EXISTS),
        (IOFailureError, ErrorKind.IO_FAILURE),
        (UnknownOperationError, ErrorKind.UNKNOWN_OPERATION),
        (InvalidArgumentError, ErrorKind.INVALID_ARGUMENT),
    ],
)
def test_each_error_carries_its_kind(error_class, kind):
    error = error_class("boom")
    assert isinstance(error, DomainError)
    assert error.kind is kind


class TestToolResult:
    def test_ok(self):
        result = ToolResult.ok("Successfully did it.")
        assert not result.is_error
        assert result.kind is None
        assert result.to_text() == "Successfully did it."

    def test_error(self):
        result = ToolResult.error(ErrorKind.NOT_FOUND, "Error: missing")
        assert result.is_error
        assert result.kind is ErrorKind.NOT_FOUND
        assert result.to_text() == "Error: missing"

    def test_from_exception(self):
        result = ToolResult.from_exception(UnknownOperationError("Unknown tool: x"))
        assert result.kind is ErrorKind.UNKNOWN_OPERATION
        assert result.to_text() == "Unknown tool: x"

    def test_is_immutable(self):
        result = ToolResult.ok("done")
        with pytest.raises(AttributeError):
            result.message = "changed"

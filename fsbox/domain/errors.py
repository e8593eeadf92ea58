"""Domain-level errors and exceptions."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories preserved internally for logging and tests."""

    CONTAINMENT = "containment"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    IO_FAILURE = "io_failure"
    UNKNOWN_OPERATION = "unknown_operation"
    INVALID_ARGUMENT = "invalid_argument"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ContainmentViolationError(DomainError):
    """Raised when a path resolves outside the sandbox root."""
    kind = ErrorKind.CONTAINMENT


class NotFoundError(DomainError):
    """Missing file or directory."""
    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(DomainError):
    """Create requested on a path that already exists."""
    kind = ErrorKind.ALREADY_EXISTS


class IOFailureError(DomainError):
    """Permission, disk or other OS-level failure."""
    kind = ErrorKind.IO_FAILURE


class UnknownOperationError(DomainError):
    """The dispatcher received an unrecognized tool name."""
    kind = ErrorKind.UNKNOWN_OPERATION


class InvalidArgumentError(DomainError):
    """A tool argument is missing, has the wrong type, or is out of range."""
    kind = ErrorKind.INVALID_ARGUMENT

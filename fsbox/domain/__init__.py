"""Domain layer - error taxonomy and tool results."""

from .errors import (
    AlreadyExistsError,
    ContainmentViolationError,
    DomainError,
    ErrorKind,
    InvalidArgumentError,
    IOFailureError,
    NotFoundError,
    UnknownOperationError,
)
from .results import ToolResult

__all__ = [
    # Errors
    "DomainError",
    "ErrorKind",
    "ContainmentViolationError",
    "NotFoundError",
    "AlreadyExistsError",
    "IOFailureError",
    "UnknownOperationError",
    "InvalidArgumentError",
    # Results
    "ToolResult",
]

"""Tagged tool result carried from the dispatcher to the MCP boundary."""

from dataclasses import dataclass
from typing import Optional

from .errors import DomainError, ErrorKind


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call.

    ``kind`` is None for successful calls. Callers outside the process only
    ever see ``to_text()``; the kind exists for logging and tests.
    """

    message: str
    kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, message: str) -> "ToolResult":
        return cls(message=message)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "ToolResult":
        return cls(message=message, kind=kind)

    @classmethod
    def from_exception(cls, exc: DomainError) -> "ToolResult":
        return cls(message=exc.message, kind=exc.kind)

    @property
    def is_error(self) -> bool:
        return self.kind is not None

    def to_text(self) -> str:
        return self.message

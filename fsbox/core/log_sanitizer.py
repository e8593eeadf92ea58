"""
Helpers for writing caller-supplied values to the log safely.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_CONTROL_CHARS_RE = re.compile(r'[\x00-\x1f\x7f-\x9f]')
# Matches Unicode line separators (LINE SEPARATOR and PARAGRAPH SEPARATOR)
_UNICODE_NEWLINES_RE = re.compile(r'[\u2028\u2029]')
# Matches explicit CR, LF, and CRLF for maximal coverage
_STANDARD_NEWLINES_RE = re.compile(r'(\r\n|\r|\n)')

# Arguments whose values are file bodies; only their length is ever logged.
_CONTENT_ARGUMENTS = frozenset({"content"})


def sanitize_for_logging(value: Any) -> str:
    """
    Sanitize a value for safe logging by removing ALL newlines (including Unicode and CRLF)
    and control characters, to defend against log injection through file paths.

    Args:
        value: Any value to sanitize. If not a string, it will be converted
               to string representation first.

    Returns:
        str: Sanitized string with all control and newline characters removed.

    Examples:
        >>> sanitize_for_logging("notes/\\nfake.txt")
        'notes/fake.txt'
        >>> sanitize_for_logging("Test\\x1b[31mRed\\x1b[0m")
        'Test[31mRed[0m'
        >>> sanitize_for_logging("A\\u2028B\\u2029C")
        'ABC'
        >>> sanitize_for_logging(123)
        '123'
    """
    if value is None:
        return ''
    if not isinstance(value, str):
        value = str(value)
    value = _CONTROL_CHARS_RE.sub('', value)
    value = _UNICODE_NEWLINES_RE.sub('', value)
    value = _STANDARD_NEWLINES_RE.sub('', value)
    return value


def summarize_tool_arguments_for_logging(arguments: Any) -> str:
    """Return a loggable summary of a tool call's arguments.

    File content is never logged; only its character count. Every other
    value goes through ``sanitize_for_logging``.
    """
    if not isinstance(arguments, Mapping):
        return f"arguments_type={sanitize_for_logging(type(arguments).__name__)}"

    parts = []
    for key in sorted(arguments, key=str):
        value = arguments[key]
        name = sanitize_for_logging(key)
        if key in _CONTENT_ARGUMENTS:
            length = len(value) if isinstance(value, str) else 0
            parts.append(f"{name}_chars={length}")
        else:
            parts.append(f"{name}={sanitize_for_logging(value)}")
    return " ".join(parts)

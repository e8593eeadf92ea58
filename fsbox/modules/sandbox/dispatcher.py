"""
Tool dispatcher for the sandboxed filesystem tools.

Maps a tool name and its argument object onto one of six operations, runs
the operation against the session root, and returns a ``ToolResult``. No
exception escapes ``dispatch``: every failure becomes an error result whose
text is what the MCP caller sees.
"""

import logging
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from fsbox.core.log_sanitizer import sanitize_for_logging, summarize_tool_arguments_for_logging
from fsbox.core.metrics_logger import log_metric
from fsbox.domain.errors import (
    AlreadyExistsError,
    DomainError,
    ErrorKind,
    InvalidArgumentError,
    IOFailureError,
    NotFoundError,
    UnknownOperationError,
)
from fsbox.domain.results import ToolResult

from .resolver import resolve_sandboxed_path
from .session import SandboxSession
from .walker import format_listing, walk_directory

logger = logging.getLogger(__name__)

CREATE_FILE = "createFile"
EDIT_FILE = "editFile"
DELETE_FILE = "deleteFile"
LIST_FILES = "listFiles"
READ_FILE = "readFile"
SET_BASE_DIRECTORY = "setBaseDirectory"

TOOL_NAMES = (CREATE_FILE, EDIT_FILE, DELETE_FILE, LIST_FILES, READ_FILE, SET_BASE_DIRECTORY)

EDIT_MODE_REPLACE = "replace"
EDIT_MODE_APPEND = "append"
EDIT_MODES = (EDIT_MODE_REPLACE, EDIT_MODE_APPEND)

# Outcomes that are part of normal use rather than faults
_SOFT_KINDS = {ErrorKind.ALREADY_EXISTS, ErrorKind.NOT_FOUND}


def _os_error_kind(error: OSError) -> ErrorKind:
    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    return ErrorKind.IO_FAILURE


def _require_str(arguments: Mapping[str, Any], key: str) -> str:
    value = arguments.get(key)
    if value is None:
        raise InvalidArgumentError(f"Missing required argument '{key}'")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Argument '{key}' must be a string")
    return value


def _optional_str(arguments: Mapping[str, Any], key: str, default: str) -> str:
    value = arguments.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Argument '{key}' must be a string")
    return value


def _optional_bool(arguments: Mapping[str, Any], key: str, default: bool) -> bool:
    value = arguments.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"Argument '{key}' must be a boolean")
    return value


def _encode_content(content: str) -> bytes:
    """Encode file content as UTF-8 before anything touches the disk."""
    try:
        return content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f"Content cannot be encoded as UTF-8: {e.reason} at position {e.start}") from None


def _write_bytes(path: Path, mode: str, data: bytes) -> None:
    try:
        with open(path, mode) as f:
            f.write(data)
    except FileExistsError:
        raise
    except OSError as e:
        raise IOFailureError(str(e)) from e


class ToolDispatcher:
    """Runs filesystem tool calls against a ``SandboxSession``."""

    def __init__(self, session: SandboxSession):
        self.session = session
        self._handlers: Dict[str, Callable[[Mapping[str, Any]], ToolResult]] = {
            CREATE_FILE: self._create_file,
            EDIT_FILE: self._edit_file,
            DELETE_FILE: self._delete_file,
            LIST_FILES: self._list_files,
            READ_FILE: self._read_file,
            SET_BASE_DIRECTORY: self._set_base_directory,
        }

    def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Execute one tool call and return its result. Never raises."""
        start = time.perf_counter()
        if arguments is None:
            arguments = {}
        logger.debug(
            "Tool call %s %s",
            sanitize_for_logging(name),
            summarize_tool_arguments_for_logging(arguments),
        )

        try:
            # The root is (re)created before every call, whatever the tool
            self.session.ensure_root()
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownOperationError(f"Unknown tool: {name}")
            if not isinstance(arguments, Mapping):
                raise InvalidArgumentError("Tool arguments must be an object")
            result = handler(arguments)
        except UnknownOperationError as e:
            result = ToolResult.from_exception(e)
        except DomainError as e:
            result = ToolResult.error(e.kind, f"Error: {e.message}")
        except (UnicodeError, ValueError) as e:
            logger.error(f"Invalid data in {sanitize_for_logging(name)}: {e}", exc_info=True)
            result = ToolResult.error(ErrorKind.INVALID_ARGUMENT, f"Error: {e}")
        except OSError as e:
            logger.error(f"Filesystem failure in {sanitize_for_logging(name)}: {e}", exc_info=True)
            result = ToolResult.error(ErrorKind.IO_FAILURE, f"Error: {e}")

        elapsed_ms = round((time.perf_counter() - start) * 1000, 3)
        self._log_outcome(name, result, elapsed_ms)
        return result

    def _log_outcome(self, name: str, result: ToolResult, elapsed_ms: float) -> None:
        tool = sanitize_for_logging(name)
        if not result.is_error:
            logger.debug(f"Tool {tool} succeeded in {elapsed_ms}ms")
        elif result.kind in _SOFT_KINDS:
            logger.info(f"Tool {tool} finished with {result.kind.value}: {sanitize_for_logging(result.message)}")
        else:
            logger.warning(f"Tool {tool} failed with {result.kind.value}: {sanitize_for_logging(result.message)}")

        log_metric(
            "tool_call",
            tool=tool,
            outcome=result.kind.value if result.kind else "ok",
            elapsed_ms=elapsed_ms,
        )

    def _resolve(self, relative_path: str) -> Path:
        return resolve_sandboxed_path(self.session.root, relative_path)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def _create_file(self, arguments: Mapping[str, Any]) -> ToolResult:
        file_path = _require_str(arguments, "filePath")
        content = _require_str(arguments, "content")
        data = _encode_content(content)
        full_path = self._resolve(file_path)

        full_path.parent.mkdir(parents=True, exist_ok=True)

        already_exists = AlreadyExistsError(
            f"File '{file_path}' already exists. Use editFile to modify existing files."
        )
        if full_path.exists():
            raise already_exists
        try:
            _write_bytes(full_path, "xb", data)
        except FileExistsError:
            raise already_exists from None

        return ToolResult.ok(f"Successfully created file '{file_path}' with {len(content)} characters.")

    def _edit_file(self, arguments: Mapping[str, Any]) -> ToolResult:
        file_path = _require_str(arguments, "filePath")
        content = _require_str(arguments, "content")
        mode = _optional_str(arguments, "mode", EDIT_MODE_REPLACE)
        if mode not in EDIT_MODES:
            raise InvalidArgumentError(
                f"Invalid edit mode '{mode}'. Use '{EDIT_MODE_REPLACE}' or '{EDIT_MODE_APPEND}'."
            )
        data = _encode_content(content)
        full_path = self._resolve(file_path)

        if not full_path.exists():
            raise NotFoundError(
                f"File '{file_path}' does not exist. Use createFile to create new files."
            )

        if mode == EDIT_MODE_APPEND:
            _write_bytes(full_path, "ab", data)
            return ToolResult.ok(f"Successfully appended {len(content)} characters to '{file_path}'.")

        _write_bytes(full_path, "wb", data)
        return ToolResult.ok(f"Successfully replaced content of '{file_path}' with {len(content)} characters.")

    def _delete_file(self, arguments: Mapping[str, Any]) -> ToolResult:
        file_path = _require_str(arguments, "filePath")
        full_path = self._resolve(file_path)

        try:
            full_path.unlink()
        except OSError as e:
            return ToolResult.error(_os_error_kind(e), f"Error deleting file '{file_path}': {e}")
        return ToolResult.ok(f"Successfully deleted file '{file_path}'.")

    def _list_files(self, arguments: Mapping[str, Any]) -> ToolResult:
        directory_path = _optional_str(arguments, "directoryPath", ".")
        recursive = _optional_bool(arguments, "recursive", False)
        full_path = self._resolve(directory_path)

        entries = walk_directory(full_path, recursive)
        text = f"Contents of '{directory_path}':\n" + "\n".join(format_listing(entries))

        # The listed directory itself could not be read
        if len(entries) == 1 and entries[0].is_diagnostic and entries[0].depth == 0:
            return ToolResult.error(ErrorKind.IO_FAILURE, text)
        return ToolResult.ok(text)

    def _read_file(self, arguments: Mapping[str, Any]) -> ToolResult:
        file_path = _require_str(arguments, "filePath")
        full_path = self._resolve(file_path)

        try:
            with open(full_path, "r", encoding="utf-8", errors="replace", newline="") as f:
                content = f.read()
        except OSError as e:
            return ToolResult.error(_os_error_kind(e), f"Error reading file '{file_path}': {e}")
        return ToolResult.ok(f"Content of '{file_path}':\n\n{content}")

    def _set_base_directory(self, arguments: Mapping[str, Any]) -> ToolResult:
        directory = _require_str(arguments, "directory")

        try:
            new_root = self.session.set_root(directory)
        except DomainError as e:
            return ToolResult.error(e.kind, f"Error setting base directory: {e.message}")

        log_metric("root_changed")
        return ToolResult.ok(f"Successfully set base directory to '{new_root}'.")

#!/usr/bin/env python3
"""
Filesystem MCP Server using FastMCP
Provides sandboxed create, edit, delete, list, read and change-root operations
through the MCP protocol.

Tools:
 - createFile, editFile, deleteFile, listFiles, readFile, setBaseDirectory

Every tool returns a single text payload. Callers tell success from failure
by the "Successfully" / "Error" prefixes. Argument names are camelCase because
they are part of the wire contract.
"""

import logging
import sys
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from fsbox.modules.sandbox.dispatcher import (
    CREATE_FILE,
    DELETE_FILE,
    EDIT_FILE,
    LIST_FILES,
    READ_FILE,
    SET_BASE_DIRECTORY,
    ToolDispatcher,
)
from fsbox.modules.sandbox.session import SandboxSession
from fsbox.version import VERSION

logger = logging.getLogger(__name__)

SERVER_NAME = "filesystem-server"
SERVER_VERSION = VERSION
TRANSPORTS = ("stdio", "http", "sse")


def create_server(session: Optional[SandboxSession] = None) -> FastMCP:
    """Build the FastMCP server with the six filesystem tools bound to ``session``."""
    if session is None:
        session = SandboxSession.from_settings()
    dispatcher = ToolDispatcher(session)

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    @mcp.tool(name=CREATE_FILE)
    def create_file(
        filePath: Annotated[str, Field(description="Path to the file to create (relative to base directory)")],  # noqa: N803
        content: Annotated[str, Field(description="Content to write to the file")],
    ) -> str:
        """Create a new file with specified content.

        Parent directories are created as needed. An existing file is never
        overwritten; use editFile for that.
        """
        return dispatcher.dispatch(CREATE_FILE, {"filePath": filePath, "content": content}).to_text()

    @mcp.tool(name=EDIT_FILE)
    def edit_file(
        filePath: Annotated[str, Field(description="Path to the file to edit (relative to base directory)")],  # noqa: N803
        content: Annotated[str, Field(description="New content for the file")],
        mode: Annotated[
            Literal["replace", "append"],
            Field(description="Edit mode: replace entire content or append to existing content"),
        ] = "replace",
    ) -> str:
        """Edit an existing file by replacing its content or appending to it"""
        return dispatcher.dispatch(
            EDIT_FILE, {"filePath": filePath, "content": content, "mode": mode}
        ).to_text()

    @mcp.tool(name=DELETE_FILE)
    def delete_file(
        filePath: Annotated[str, Field(description="Path to the file to delete (relative to base directory)")],  # noqa: N803
    ) -> str:
        """Delete a file"""
        return dispatcher.dispatch(DELETE_FILE, {"filePath": filePath}).to_text()

    @mcp.tool(name=LIST_FILES)
    def list_files(
        directoryPath: Annotated[str, Field(description="Path to the directory to list (relative to base directory)")] = ".",  # noqa: N803
        recursive: Annotated[bool, Field(description="Whether to list files recursively")] = False,
    ) -> str:
        """List files and directories in a specified directory.

        Directories are shown with a trailing slash, files with their size in
        bytes. Recursive listings indent each level by two spaces.
        """
        return dispatcher.dispatch(
            LIST_FILES, {"directoryPath": directoryPath, "recursive": recursive}
        ).to_text()

    @mcp.tool(name=READ_FILE)
    def read_file(
        filePath: Annotated[str, Field(description="Path to the file to read (relative to base directory)")],  # noqa: N803
    ) -> str:
        """Read the contents of a file"""
        return dispatcher.dispatch(READ_FILE, {"filePath": filePath}).to_text()

    @mcp.tool(name=SET_BASE_DIRECTORY)
    def set_base_directory(
        directory: Annotated[str, Field(description="Path to the new base directory")],
    ) -> str:
        """Set the base directory for file operations.

        The directory must already exist. Relative paths are resolved against
        the server's working directory, not the current base directory.
        """
        return dispatcher.dispatch(SET_BASE_DIRECTORY, {"directory": directory}).to_text()

    return mcp


def serve(
    transport: str = "stdio",
    host: Optional[str] = None,
    port: Optional[int] = None,
    session: Optional[SandboxSession] = None,
) -> int:
    """Run the server until the transport closes. Returns a process exit code."""
    if transport not in TRANSPORTS:
        logger.error(f"Unsupported transport: {transport}")
        return 2

    mcp = create_server(session)
    try:
        if transport == "stdio":
            logger.info("Filesystem MCP Server running on stdio")
            mcp.run(show_banner=False)
        else:
            logger.info(f"Filesystem MCP Server running on {transport} at {host}:{port}")
            mcp.run(transport=transport, host=host, port=port, show_banner=False)
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    from fsbox.core.logging_config import setup_logging

    setup_logging()
    sys.exit(serve())

"""Sandboxed filesystem tools: path resolution, directory walking and dispatch."""

from .dispatcher import TOOL_NAMES, ToolDispatcher
from .resolver import resolve_sandboxed_path
from .session import SandboxSession
from .walker import ListingEntry, format_listing, walk_directory

__all__ = [
    "TOOL_NAMES",
    "ToolDispatcher",
    "SandboxSession",
    "resolve_sandboxed_path",
    "ListingEntry",
    "walk_directory",
    "format_listing",
]

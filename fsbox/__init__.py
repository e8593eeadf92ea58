"""
fsbox - Sandboxed filesystem tools served over the Model Context Protocol.

This package exposes six filesystem operations (create, edit, delete, list,
read and change the working root) as MCP tools for automated agents. Every
path is resolved beneath a movable root directory.

Example usage:
    from fsbox import SandboxSession, ToolDispatcher

    dispatcher = ToolDispatcher(SandboxSession("./uploads"))
    result = dispatcher.dispatch("listFiles", {"recursive": True})
    print(result.to_text())

CLI tools (after pip install):
    fsbox-server --base-dir ./uploads
    fsbox-server --transport http --port 8000
"""

from fsbox.version import VERSION

__version__ = VERSION
__all__ = [
    "SandboxSession",
    "ToolDispatcher",
    "VERSION",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import to avoid loading the sandbox modules at package import time."""
    if name == "SandboxSession":
        from fsbox.modules.sandbox.session import SandboxSession
        globals()["SandboxSession"] = SandboxSession  # Cache for subsequent accesses
        return SandboxSession
    if name == "ToolDispatcher":
        from fsbox.modules.sandbox.dispatcher import ToolDispatcher
        globals()["ToolDispatcher"] = ToolDispatcher  # Cache for subsequent accesses
        return ToolDispatcher
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

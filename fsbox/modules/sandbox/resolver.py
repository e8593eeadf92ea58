"""Sandbox path resolution for root-confined file operations."""

from pathlib import Path
from typing import Union

from fsbox.domain.errors import ContainmentViolationError, InvalidArgumentError

PathLike = Union[str, Path]


def resolve_root(root: PathLike) -> Path:
    """Return the absolute, normalized form of ``root``."""
    try:
        return Path(root).resolve()
    except (OSError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid base directory '{root}': {e}") from None


def resolve_sandboxed_path(root: PathLike, relative_path: str) -> Path:
    """Resolve ``relative_path`` against ``root`` and verify it stays inside.

    The path is joined to the root the way ordinary path joining works, so an
    absolute ``relative_path`` replaces the root and ``..`` segments are
    collapsed. The target does not need to exist. Containment is checked
    segment by segment, so a sibling such as ``/data/root2`` is not accepted
    for the root ``/data/root``.

    Args:
        root: Sandbox root directory.
        relative_path: Caller-supplied path; may be empty, absolute, or
            contain traversal segments.

    Returns:
        Resolved absolute Path within the root.

    Raises:
        ContainmentViolationError: If the path resolves outside the root.
        InvalidArgumentError: If the path cannot be represented on this
            platform (for example an embedded NUL byte).
    """
    if "\x00" in relative_path:
        raise InvalidArgumentError(f"Invalid path '{relative_path!r}': embedded null byte")

    resolved_root = resolve_root(root)

    try:
        full_path = (resolved_root / relative_path).resolve()
    except (OSError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid path '{relative_path}': {e}") from None

    # Verify the resolved path stays within the root.
    try:
        full_path.relative_to(resolved_root)
    except ValueError:
        raise ContainmentViolationError("Path traversal attempt detected") from None

    return full_path

"""Directory enumeration for the listFiles tool."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

INDENT = "  "
DIRECTORY_ICON = "📁"
FILE_ICON = "📄"


@dataclass(frozen=True)
class ListingEntry:
    """One line of a directory listing.

    ``path`` is relative to the listed directory. ``error`` is set for
    diagnostic entries (an unreadable directory) and for files whose size
    could not be read.
    """

    path: str
    depth: int
    is_dir: bool = False
    size: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_diagnostic(self) -> bool:
        return self.error is not None and not self.path


def walk_directory(path: Union[str, Path], recursive: bool = False) -> List[ListingEntry]:
    """Enumerate ``path`` into an ordered, flattened list of entries.

    Children are sorted by name. Each child is classified once, when it is
    enumerated; symlinks are not followed when deciding whether an entry is a
    directory, so recursion never leaves the tree through a link. In
    recursive mode a directory's contents follow it immediately, one depth
    level deeper.

    A directory that cannot be read contributes a single diagnostic entry and
    enumeration of its siblings continues.
    """
    entries: List[ListingEntry] = []
    _walk(Path(path), "", 0, recursive, entries)
    return entries


def _walk(dir_path: Path, prefix: str, depth: int, recursive: bool, out: List[ListingEntry]) -> None:
    try:
        with os.scandir(dir_path) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning(f"Error reading directory {dir_path}: {e}")
        out.append(ListingEntry(path="", depth=depth, error=str(e)))
        return

    for child in children:
        item_path = os.path.join(prefix, child.name)
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False

        if is_dir:
            out.append(ListingEntry(path=item_path, depth=depth, is_dir=True))
            if recursive:
                _walk(dir_path / child.name, item_path, depth + 1, recursive, out)
            continue

        try:
            size = os.stat(dir_path / child.name).st_size
        except OSError as e:
            logger.debug(f"Could not stat {dir_path / child.name}: {e}")
            out.append(ListingEntry(path=item_path, depth=depth, error=str(e)))
            continue
        out.append(ListingEntry(path=item_path, depth=depth, size=size))


def format_entry(entry: ListingEntry) -> str:
    indent = INDENT * entry.depth
    if entry.is_diagnostic:
        return f"{indent}Error reading directory: {entry.error}"
    if entry.is_dir:
        return f"{indent}{DIRECTORY_ICON} {entry.path}/"
    if entry.size is None:
        return f"{indent}{FILE_ICON} {entry.path} (size unavailable)"
    return f"{indent}{FILE_ICON} {entry.path} ({entry.size} bytes)"


def format_listing(entries: List[ListingEntry]) -> List[str]:
    """Render entries as indentation-coded lines, one per entry."""
    return [format_entry(entry) for entry in entries]
